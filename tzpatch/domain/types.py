"""Shared type definitions."""

from collections.abc import Callable, Sequence
from pathlib import Path

import httpx

from tzpatch.domain.models import DownloadOutcome, MergeOutcome

# Progress hook for download operations (downloaded bytes, total bytes)
DownloadProgressHook = Callable[[int, int | None], None]

# Fetcher (url, destination, client, progress hook) -> outcome
Fetcher = Callable[[str, Path, httpx.Client, DownloadProgressHook | None], DownloadOutcome]

# Merger (executable, arguments, working directory) -> outcome
Merger = Callable[[str, Sequence[str], Path], MergeOutcome]
