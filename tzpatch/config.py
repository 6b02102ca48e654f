"""Pipeline configuration with environment variable support."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/unicode-org/icu-data/master/tzdata/icunew"


class Settings(BaseSettings):
    """Pipeline configuration loaded from environment variables.

    Loads from environment (TZPATCH_*), .env file, or defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TZPATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote settings
    base_url: str = DEFAULT_BASE_URL
    http_timeout: float | None = None  # None waits indefinitely
    chunk_size: int = Field(default=64 * 1024, gt=0)

    # Merge tool
    tool: str = "icupkg"

    # Working directory for downloaded resources (None = per-run temp dir)
    work_dir: Path | None = None

    @field_validator("base_url", mode="after")
    @classmethod
    def require_https(cls, v: str) -> str:
        """Only HTTPS sources are accepted."""
        if not v.lower().startswith("https://"):
            raise ValueError(f"base_url must be an https:// URL, got {v!r}")
        return v.rstrip("/")

    @field_validator("http_timeout", mode="before")
    @classmethod
    def parse_null_timeout(cls, v: str | float | None) -> str | float | None:
        """Convert 'null' string to None."""
        if isinstance(v, str) and v.lower() in ("null", "none", ""):
            return None
        return v

    @field_validator("work_dir", mode="after")
    @classmethod
    def create_work_dir(cls, v: Path | None) -> Path | None:
        """Create the working directory if it doesn't exist."""
        if v is None:
            return None
        try:
            v.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ValueError(f"cannot use {v} as working directory: {e}") from e
        return v.resolve()
