"""CSV formatter for git-authorship."""

import csv
import io

from ..blame.models import AuthorshipReport
from .base import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Render one row per author."""

    def render(self, report: AuthorshipReport) -> None:
        print(self.format(report), end="")

    def format(self, report: AuthorshipReport) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["author", "lines", "percent"])
        for e in report.entries:
            writer.writerow([e.author, e.lines, f"{e.percent:.4f}"])
        return output.getvalue()
