"""Domain models for the patch pipeline."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEZONE_VERSION = "2019c"
DEFAULT_ICU_VERSION = "44"

# Resources required for a complete timezone patch, in processing order
RESOURCE_MANIFEST: tuple[str, ...] = (
    "metaZones.res",
    "timezoneTypes.res",
    "windowsZones.res",
    "zoneinfo64.res",
)


class Endianness(str, Enum):
    """Byte order variant of the resource files."""

    LE = "le"  # Little endian
    BE = "be"  # Big endian


class PatchRequest(BaseModel):
    """Parameters of a single patch run."""

    model_config = ConfigDict(frozen=True)

    target_path: Path  # The .dat bundle being patched
    timezone_version: str = DEFAULT_TIMEZONE_VERSION
    icu_version: str = DEFAULT_ICU_VERSION
    endianness: Endianness = Endianness.LE

    @field_validator("timezone_version", "icu_version")
    @classmethod
    def check_path_segment(cls, v: str) -> str:
        """Version tags end up in the URL path, so they must be a single segment."""
        v = v.strip()
        if not v or "/" in v:
            raise ValueError(f"invalid version tag: {v!r}")
        return v


class DownloadOutcome(BaseModel):
    """Result of downloading one resource."""

    url: str
    local_path: Path
    success: bool = True
    error_detail: str | None = None
    bytes_written: int = 0


class MergeOutcome(BaseModel):
    """Captured output of a successful merge tool invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


class ResourceResult(BaseModel):
    """Summary of one resource merged into the target."""

    name: str
    url: str
    bytes_written: int
    cleaned_up: bool = True  # False when the temp file could not be removed


class PatchReport(BaseModel):
    """Summary of a completed patch run."""

    target_path: Path
    base_url: str
    resources: list[ResourceResult] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        """Return the number of bytes downloaded across all resources."""
        return sum(r.bytes_written for r in self.resources)

    def __repr__(self) -> str:
        """Return string representation of the report."""
        return (
            f"PatchReport("
            f"target={self.target_path.name}, "
            f"resources={len(self.resources)}, "
            f"warnings={len(self.warnings)})"
        )
