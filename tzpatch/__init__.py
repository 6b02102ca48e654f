"""tzpatch.

Patch the timezone data of a compiled ICU data bundle (``icudt*.dat``) with
resource files published in the ICU data repository.

Quick Start (High-Level API):
    >>> from tzpatch import patch_icu_data
    >>> patch_icu_data("icudt61l.dat")  # 2019c resources for ICU 44, little endian

Quick Start (SDK API):
    >>> from tzpatch import PatchRequest, ResourcePatch, Settings
    >>> config = Settings(work_dir="build/tzdata")
    >>> request = PatchRequest(target_path="icudt61l.dat", timezone_version="2019c")
    >>> report = ResourcePatch(config).run(request)

Configuration:
    >>> import os
    >>> os.environ["TZPATCH_TOOL"] = "/opt/icu/bin/icupkg"
    >>> config = Settings()  # Loads from environment

Public API:
    High-level functions:
        - patch_icu_data: Run a complete patch with default settings

    Orchestrators:
        - ResourcePatch: Download and merge pipeline

    Configuration:
        - Settings: Configuration model

    Domain Models:
        - PatchRequest: What to patch and with which versions
        - Endianness: Byte order of the resource files
        - PatchReport: Summary of a completed run
        - RESOURCE_MANIFEST: Resources merged by every run

    Errors:
        - TzPatchError and its subclasses

    Reporters (for custom UIs):
        - Reporter: Progress reporter (use silent=True for headless mode)
"""

from pathlib import Path

# Configuration
from tzpatch.config import Settings

# Domain models
from tzpatch.domain import (
    RESOURCE_MANIFEST,
    Endianness,
    ExitCodeError,
    FetchError,
    InvalidTargetError,
    LaunchError,
    PatchError,
    PatchReport,
    PatchRequest,
    RemoteError,
    TransportError,
    TzPatchError,
    WriteError,
)
from tzpatch.domain.models import DEFAULT_ICU_VERSION, DEFAULT_TIMEZONE_VERSION

# Orchestrators
from tzpatch.orchestrators import ResourcePatch

# UI Reporters
from tzpatch.ui import Reporter

__all__ = [
    # High-level functions
    "patch_icu_data",
    # Orchestrators
    "ResourcePatch",
    # Configuration
    "Settings",
    # Domain models
    "RESOURCE_MANIFEST",
    "Endianness",
    "PatchRequest",
    "PatchReport",
    # Errors
    "TzPatchError",
    "InvalidTargetError",
    "FetchError",
    "RemoteError",
    "TransportError",
    "WriteError",
    "PatchError",
    "LaunchError",
    "ExitCodeError",
    # Reporters
    "Reporter",
]

# Version
__version__ = "0.1.0"


def patch_icu_data(
    target: str | Path,
    timezone_version: str = DEFAULT_TIMEZONE_VERSION,
    icu_version: str = DEFAULT_ICU_VERSION,
    endianness: Endianness | str = Endianness.LE,
    config: Settings | None = None,
    reporter: Reporter | None = None,
) -> PatchReport:
    """Patch an ICU data bundle (high-level convenience function).

    Args:
        target: Path to the .dat bundle to patch in place
        timezone_version: tzdata release, e.g. "2019c"
        icu_version: ICU major version the resources are built for
        endianness: "le" or "be"
        config: Pipeline configuration. If None, uses Settings() from environment.
        reporter: Progress reporter. If None, uses Reporter().

    Returns:
        Report of the merged resources

    Example:
        >>> from tzpatch import patch_icu_data, Settings
        >>> patch_icu_data("icudt61l.dat", "2019c", "44", "le", config=Settings(tool="icupkg"))
    """
    request = PatchRequest(
        target_path=Path(target),
        timezone_version=timezone_version,
        icu_version=icu_version,
        endianness=Endianness(endianness),
    )
    return ResourcePatch(config).run(request, reporter)
