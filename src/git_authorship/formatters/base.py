"""Base formatter interface for git-authorship output rendering."""

from abc import ABC, abstractmethod

from ..blame.models import AuthorshipReport


def format_count(value: int) -> str:
    """Integer with thousands separators, e.g. 1234567 -> '1,234,567'."""
    return f"{value:,}"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def skipped_notice(report: AuthorshipReport) -> str:
    """One line naming the files left out of a partial report."""
    count = len(report.files_skipped)
    return f"Skipped {count} file(s) that could not be blamed: {', '.join(report.files_skipped)}"


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: AuthorshipReport) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, report: AuthorshipReport) -> str:
        """Return formatted string representation of the report."""
