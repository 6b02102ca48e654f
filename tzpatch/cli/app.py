"""Typer-based CLI for patching ICU data bundles."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from tzpatch.config import Settings
from tzpatch.domain.errors import TzPatchError
from tzpatch.domain.models import (
    DEFAULT_ICU_VERSION,
    DEFAULT_TIMEZONE_VERSION,
    Endianness,
    PatchRequest,
)
from tzpatch.orchestrators import ResourcePatch
from tzpatch.ui import Reporter

logger = logging.getLogger(__name__)

EXIT_FAILURE = 2

app = typer.Typer(
    help="Patch the timezone data of an ICU .dat bundle with icupkg",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(reporter: Reporter, message: str) -> typer.Exit:
    """Print an error and return the exit to raise."""
    if reporter.silent:
        typer.echo(f"Error: {message}", err=True)
    else:
        reporter.report_error(message)
    return typer.Exit(EXIT_FAILURE)


@app.command(
    epilog="Example: tzpatch ./icudt61l.dat 2019c 44 le",
    context_settings={"help_option_names": ["-h", "--help"]},
)
def main(
    ctx: typer.Context,
    target: Path = typer.Argument(
        None, help="Path to a valid .dat file", show_default=False
    ),
    timezone_version: str = typer.Argument(
        DEFAULT_TIMEZONE_VERSION, help="Timezone database version"
    ),
    icu_version: str = typer.Argument(DEFAULT_ICU_VERSION, help="ICU version ('44' for nodejs)"),
    endianness: Endianness = typer.Argument(
        Endianness.LE, help="Byte order of the resources ('le' for nodejs)"
    ),
    work_dir: Path = typer.Option(
        None, "--work-dir", help="Directory for downloaded resources (default: temporary)"
    ),
    tool: str = typer.Option(None, "--tool", help="Merge tool executable (default: icupkg)"),
    base_url: str = typer.Option(None, "--base-url", help="Root URL of the tzdata resources"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print errors"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Download updated timezone resources and merge them into TARGET."""
    if target is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    _configure_logging(verbose)
    reporter = Reporter(silent=quiet)

    overrides = {
        key: value
        for key, value in {"work_dir": work_dir, "tool": tool, "base_url": base_url}.items()
        if value is not None
    }
    try:
        config = Settings(**overrides)
        request = PatchRequest(
            target_path=target,
            timezone_version=timezone_version,
            icu_version=icu_version,
            endianness=endianness,
        )
    except (ValidationError, OSError) as e:
        raise _fail(reporter, str(e)) from e

    try:
        report = ResourcePatch(config).run(request, reporter)
    except TzPatchError as e:
        raise _fail(reporter, str(e)) from e
    except Exception as e:
        logger.exception("Unexpected failure while patching")
        raise _fail(reporter, f"{type(e).__name__}: {e}") from e

    reporter.report_summary(report)


if __name__ == "__main__":
    app()
