"""Plain text formatter, one ``author: lines, percent%`` row per author."""

from ..blame.models import AuthorshipReport
from .base import BaseFormatter, format_count, format_percent, skipped_notice

EMPTY_MESSAGE = "No lines of code attributed."


class TextFormatter(BaseFormatter):
    """Render the total followed by the per-author breakdown."""

    def render(self, report: AuthorshipReport) -> None:
        print()
        print(self.format(report))

    def format(self, report: AuthorshipReport) -> str:
        lines = [f"Total Lines of Code: {format_count(report.total_lines)}", ""]
        if report.is_empty:
            lines.append(EMPTY_MESSAGE)
        else:
            lines.append("Lines of code per author:")
            for entry in report.entries:
                lines.append(
                    f"{entry.author}: {format_count(entry.lines)}, {format_percent(entry.percent)}"
                )

        if report.files_skipped:
            lines.extend(["", skipped_notice(report)])
        return "\n".join(lines)
