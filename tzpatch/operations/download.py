"""Resource download."""

import logging
from pathlib import Path

import httpx

from tzpatch.domain.errors import RemoteError, TransportError, WriteError
from tzpatch.domain.models import DownloadOutcome
from tzpatch.domain.types import DownloadProgressHook

logger = logging.getLogger(__name__)


def fetch_resource(
    url: str,
    dest: Path,
    client: httpx.Client,
    progress_hook: DownloadProgressHook | None = None,
    chunk_size: int = 64 * 1024,
) -> DownloadOutcome:
    """Stream a remote file to ``dest``.

    The body is written chunk by chunk as it arrives. Only a 200 response
    counts as success; any exception removes whatever was written to ``dest``
    before the error is raised.

    Args:
        url: Fully-qualified HTTPS URL
        dest: Destination path (need not exist)
        client: HTTP client used for the request
        progress_hook: Optional callback receiving (downloaded, total) bytes
        chunk_size: Size of chunks written to disk

    Returns:
        Successful download outcome

    Raises:
        RemoteError: Status code other than 200
        TransportError: Network, DNS or TLS failure
        WriteError: Local file could not be written
    """
    dest = Path(dest)
    try:
        written = _stream_to_file(url, dest, client, progress_hook, chunk_size)
    except BaseException:
        _discard_partial(dest)
        raise

    logger.debug(f"Downloaded {url} to {dest} ({written} bytes)")
    return DownloadOutcome(url=url, local_path=dest, bytes_written=written)


def _stream_to_file(
    url: str,
    dest: Path,
    client: httpx.Client,
    progress_hook: DownloadProgressHook | None,
    chunk_size: int,
) -> int:
    """Write the response body to ``dest`` and return the byte count."""
    try:
        with dest.open("wb") as f:
            return _copy_body(url, f, client, progress_hook, chunk_size)
    except OSError as e:
        raise WriteError(url, dest, e) from e


def _copy_body(url, f, client, progress_hook, chunk_size) -> int:
    try:
        with client.stream("GET", url) as resp:
            if resp.status_code != 200:
                raise RemoteError(url, resp.status_code)

            total = resp.headers.get("Content-Length")
            total_bytes: int | None = int(total) if total is not None else None

            downloaded = 0
            if progress_hook:
                progress_hook(downloaded, total_bytes)

            for chunk in resp.iter_bytes(chunk_size=chunk_size):
                f.write(chunk)
                downloaded += len(chunk)
                if progress_hook:
                    progress_hook(downloaded, total_bytes)

            return downloaded
    except httpx.HTTPError as e:
        raise TransportError(url, e) from e


def _discard_partial(dest: Path) -> None:
    """Remove a partially written download, ignoring failures."""
    try:
        dest.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove partial download {dest}: {e}")
