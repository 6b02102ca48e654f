"""Reporter for pipeline output and progress tracking."""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

from tzpatch.domain.models import DownloadOutcome, PatchReport, PatchRequest
from tzpatch.ui.tables import create_resource_table


class Reporter:
    """Pipeline reporter with rich progress bars and formatted output."""

    def __init__(self, silent: bool = False) -> None:
        """Initialize reporter.

        Args:
            silent: If True, suppress all output (for testing/automation).
        """
        self.silent = silent
        self.console = Console(quiet=silent)
        self._download_progress: Progress | None = None

    def report_target(self, request: PatchRequest) -> None:
        """Report what the run is about to patch."""
        if not self.silent:
            self.console.print(
                f"Our ICU target is [bold]{request.timezone_version}[/bold], "
                f"for icu v{request.icu_version} in '{request.endianness.value}' endianness"
            )

    def report_step(self, message: str) -> None:
        """Report the start of a pipeline step."""
        if not self.silent:
            self.console.print(message, soft_wrap=True)

    def report_done(self) -> None:
        """Report that the current step finished."""
        if not self.silent:
            self.console.print("[green]done[/green]")

    def report_download_result(self, outcome: DownloadOutcome) -> None:
        """Report how a download ended."""
        if outcome.success:
            self.report_done()
        else:
            self.report_error(outcome.error_detail or f"Download of {outcome.url} failed")

    def create_download_progress_hook(self, filename: str):
        """Create a progress hook for downloading a specific file."""
        if self.silent:

            def hook(downloaded: int, total: int | None) -> None:
                pass

            return hook

        if self._download_progress is None:
            raise RuntimeError("Must be called within download_context")

        task_id = self._download_progress.add_task("", total=None, filename=filename)

        def hook(downloaded: int, total: int | None) -> None:
            if self._download_progress is None:
                return

            if total is not None and self._download_progress.tasks[task_id].total != total:
                self._download_progress.update(task_id, total=total)

            self._download_progress.update(task_id, completed=downloaded)

        return hook

    def download_context(self):
        """Context manager for download progress display."""
        if self.silent:

            class NoOpContext:
                def __enter__(self):
                    return self

                def __exit__(self, *args):
                    pass

            return NoOpContext()

        class DownloadContext:
            def __init__(ctx_self, reporter):
                ctx_self.reporter = reporter

            def __enter__(ctx_self):
                ctx_self.reporter._download_progress = Progress(
                    TextColumn("[bold blue]{task.fields[filename]}"),
                    BarColumn(),
                    DownloadColumn(),
                    TransferSpeedColumn(),
                    TimeRemainingColumn(),
                    console=ctx_self.reporter.console,
                    transient=True,
                )
                ctx_self.reporter._download_progress.__enter__()
                return ctx_self.reporter._download_progress

            def __exit__(ctx_self, *args):
                if ctx_self.reporter._download_progress:
                    ctx_self.reporter._download_progress.__exit__(*args)
                    ctx_self.reporter._download_progress = None

        return DownloadContext(self)

    def report_summary(self, report: PatchReport) -> None:
        """Report the resources merged into the target."""
        if self.silent:
            return

        self.console.print(create_resource_table(report))
        self.console.print(
            f"\n[bold]Patched {escape(str(report.target_path))}[/bold] with "
            f"{len(report.resources)} resource(s)"
        )

    def report_warning(self, message: str) -> None:
        """Report a warning message."""
        if not self.silent:
            self.console.print(f"\n[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True)

    def report_error(self, message: str) -> None:
        """Report an error message."""
        if not self.silent:
            self.console.print(f"\n[red]Error:[/red] {escape(message)}", soft_wrap=True)
