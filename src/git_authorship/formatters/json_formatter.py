"""JSON formatter for git-authorship."""

import json
from dataclasses import asdict

from ..blame.models import AuthorshipReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render the report as JSON."""

    def render(self, report: AuthorshipReport) -> None:
        print(self.format(report))

    def format(self, report: AuthorshipReport) -> str:
        data = {
            "total_lines": report.total_lines,
            "sort_mode": report.sort_mode,
            "files_processed": report.files_processed,
            "files_skipped": report.files_skipped,
            "authors": [asdict(e) for e in report.entries],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
