"""Rich table formatter for git-authorship."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..blame.models import AuthorshipReport
from .base import BaseFormatter, format_count, format_percent, skipped_notice


class RichFormatter(BaseFormatter):
    """Render a colored table with a share bar per author."""

    BAR_WIDTH = 20

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: AuthorshipReport) -> None:
        self.console.print()
        self.console.print(
            f"[bold cyan]Total Lines of Code:[/bold cyan] "
            f"[green]{format_count(report.total_lines)}[/green]"
            f" [dim]({len(report.files_processed)} files)[/dim]"
        )
        self.console.print()

        if report.files_skipped:
            self.console.print(f"[yellow]{escape(skipped_notice(report))}[/yellow]")
            self.console.print()

        if report.is_empty:
            self.console.print("[yellow]No lines of code attributed.[/yellow]")
            return

        self.console.print(self._build_table(report))

    def format(self, report: AuthorshipReport) -> str:
        buffer = io.StringIO()
        RichFormatter(Console(file=buffer, width=100)).render(report)
        return buffer.getvalue()

    def _build_table(self, report: AuthorshipReport) -> Table:
        table = Table(show_header=True, show_lines=False, pad_edge=True)
        table.add_column("Author", min_width=20)
        table.add_column("Lines", justify="right")
        table.add_column("Share", justify="right")
        table.add_column("", min_width=self.BAR_WIDTH)

        for entry in report.entries:
            filled = round(entry.percent / 100 * self.BAR_WIDTH)
            bar = "[cyan]" + "█" * filled + "[/cyan]" + "[dim]░[/dim]" * (self.BAR_WIDTH - filled)
            table.add_row(
                escape(entry.author),
                format_count(entry.lines),
                format_percent(entry.percent),
                bar,
            )
        return table
