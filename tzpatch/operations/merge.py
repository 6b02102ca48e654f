"""Merge tool invocation."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from tzpatch.domain.errors import ExitCodeError, LaunchError
from tzpatch.domain.models import MergeOutcome

logger = logging.getLogger(__name__)


def run_merge_tool(executable: str, arguments: Sequence[str], cwd: Path) -> MergeOutcome:
    """Run the merge tool and wait for it to exit.

    The executable is looked up on PATH. Standard output and error are
    captured in full; the exit status is the only success signal.

    Args:
        executable: Command name, e.g. ``icupkg``
        arguments: Arguments passed to the command
        cwd: Working directory of the process

    Returns:
        Captured output of the successful run

    Raises:
        LaunchError: The process could not be started
        ExitCodeError: The process exited with a non-zero status
    """
    command = [executable, *arguments]
    logger.debug(f"Running {' '.join(command)} in {cwd}")

    try:
        proc = subprocess.Popen(
            command,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as e:
        logger.error(f"Failed to start {executable}: {e}")
        raise LaunchError(executable, e) from e

    stdout, stderr = proc.communicate()

    if proc.returncode != 0:
        logger.error(f"{executable} exited with code {proc.returncode}")
        raise ExitCodeError(executable, proc.returncode, stderr, stdout)

    return MergeOutcome(returncode=proc.returncode, stdout=stdout, stderr=stderr)
