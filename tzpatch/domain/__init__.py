"""Domain models and business logic."""

from tzpatch.domain.errors import (
    ExitCodeError,
    FetchError,
    InvalidTargetError,
    LaunchError,
    PatchError,
    RemoteError,
    TransportError,
    TzPatchError,
    WriteError,
)
from tzpatch.domain.models import (
    RESOURCE_MANIFEST,
    DownloadOutcome,
    Endianness,
    MergeOutcome,
    PatchReport,
    PatchRequest,
    ResourceResult,
)
from tzpatch.domain.types import DownloadProgressHook, Fetcher, Merger

__all__ = [
    "RESOURCE_MANIFEST",
    "Endianness",
    "PatchRequest",
    "DownloadOutcome",
    "MergeOutcome",
    "ResourceResult",
    "PatchReport",
    "DownloadProgressHook",
    "Fetcher",
    "Merger",
    "TzPatchError",
    "InvalidTargetError",
    "FetchError",
    "RemoteError",
    "TransportError",
    "WriteError",
    "PatchError",
    "LaunchError",
    "ExitCodeError",
]
