"""Data models for blame-based authorship attribution."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReportEntry:
    author: str  # display name exactly as git reports it
    lines: int
    percent: float  # lines / total * 100, 0.0 when total is 0


@dataclass
class AuthorshipReport:
    entries: list[ReportEntry]  # display order
    total_lines: int
    files_processed: list[str] = field(default_factory=list)
    files_skipped: list[str] = field(default_factory=list)  # only with skip_failed_files
    sort_mode: str = "truncated"

    @property
    def is_empty(self) -> bool:
        return self.total_lines == 0

    @property
    def author_count(self) -> int:
        return len(self.entries)

    def counts(self) -> dict[str, int]:
        """Author -> line count, independent of display order."""
        return {e.author: e.lines for e in self.entries}
