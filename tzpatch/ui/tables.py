"""Table rendering utilities for CLI output."""

from rich.table import Table

from tzpatch.domain.models import PatchReport


def create_resource_table(report: PatchReport) -> Table:
    """Create a table listing the resources merged into the target.

    Args:
        report: Report of a completed patch run

    Returns:
        Rich Table object ready for display
    """
    table = Table(title=f"Resources ({len(report.resources)} merged)")
    table.add_column("Resource", style="cyan")
    table.add_column("Size", justify="right", style="dim")
    table.add_column("Temp file", style="yellow")

    for resource in report.resources:
        table.add_row(
            resource.name,
            format_size(resource.bytes_written),
            "[green]removed[/green]" if resource.cleaned_up else "[red]left behind[/red]",
        )

    if len(report.resources) > 1:
        table.add_section()
        table.add_row("[bold]TOTAL[/bold]", f"[bold]{format_size(report.total_bytes)}[/bold]", "")

    return table


def format_size(size: int) -> str:
    """Format a byte count for display, e.g. ``1,234 B`` or ``2.0 MB``."""
    if size >= 1024 * 1024:
        return f"{size / 1024 / 1024:.1f} MB"
    return f"{size:,} B"
