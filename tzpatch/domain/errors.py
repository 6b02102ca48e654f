"""Errors raised by the patch pipeline.

Every stage failure aborts the run. The pipeline re-raises the first error
unchanged, so each error carries enough context to be printed as-is.
"""

from pathlib import Path


class TzPatchError(Exception):
    """Base class for all patch pipeline errors."""


class InvalidTargetError(TzPatchError):
    """The target bundle does not exist or is not a file."""

    def __init__(self, target_path: Path):
        self.target_path = target_path
        super().__init__(f"Not a valid ICU data file, can't patch: {target_path}")


class FetchError(TzPatchError):
    """Downloading a resource failed."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class RemoteError(FetchError):
    """The server answered with a status other than 200."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(
            url, f"Download of {url} failed, request status is {status_code}"
        )


class TransportError(FetchError):
    """The request failed below HTTP (DNS, TLS, connection reset)."""

    def __init__(self, url: str, cause: Exception):
        self.cause = cause
        super().__init__(url, f"Download of {url} failed: {cause!r}")


class WriteError(FetchError):
    """The downloaded body could not be written to disk."""

    def __init__(self, url: str, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(url, f"Could not write {url} to {path}: {cause}")


class PatchError(TzPatchError):
    """Running the merge tool failed."""

    def __init__(self, executable: str, message: str):
        self.executable = executable
        super().__init__(message)


class LaunchError(PatchError):
    """The merge tool could not be started."""

    def __init__(self, executable: str, cause: OSError, captured_stderr: str = ""):
        self.cause = cause
        self.captured_stderr = captured_stderr
        message = f"Failed to start {executable}: {cause}"
        if captured_stderr:
            message += f"\n{captured_stderr}"
        super().__init__(executable, message)


class ExitCodeError(PatchError):
    """The merge tool ran and exited with a non-zero status."""

    def __init__(self, executable: str, code: int, stderr: str, stdout: str = ""):
        self.code = code
        self.stderr = stderr
        self.stdout = stdout
        message = f"{executable} exited with code {code}"
        if stderr.strip():
            message += f"\n{stderr.rstrip()}"
        super().__init__(executable, message)
