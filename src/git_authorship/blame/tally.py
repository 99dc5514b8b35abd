"""Author line tally and report construction."""

from collections import Counter
from typing import Iterable, List, Mapping

from ..logging_config import get_logger
from .models import ReportEntry

logger = get_logger(__name__)

SORT_MODES = ("truncated", "exact")


class AuthorTally:
    """Accumulates attributed line counts per author across files."""

    def __init__(self) -> None:
        self._counts: Counter = Counter()

    def add(self, author: str, lines: int = 1) -> None:
        if lines < 0:
            raise ValueError(f"line count must be non-negative, got {lines}")
        self._counts[author] += lines

    def merge(self, counts: Mapping[str, int]) -> None:
        """Fold one file's per-author counts into the tally."""
        for author, lines in counts.items():
            self.add(author, lines)

    def merge_authors(self, authors: Iterable[str]) -> None:
        """Fold a stream of attribution events (one per line) into the tally."""
        for author in authors:
            self._counts[author] += 1

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, author: object) -> bool:
        return author in self._counts

    def __getitem__(self, author: str) -> int:
        return self._counts[author]

    def build_report(self, sort_mode: str = "truncated") -> List[ReportEntry]:
        return build_entries(self._counts, sort_mode)


def percent_of(lines: int, total: int) -> float:
    """Share of ``total`` in percent; 0.0 when nothing was attributed."""
    if total == 0:
        return 0.0
    return lines / total * 100


def build_entries(counts: Mapping[str, int], sort_mode: str = "truncated") -> List[ReportEntry]:
    """Compute percentages and order entries for display.

    ``truncated`` sorts by the integer part of the percentage, descending, so
    authors within the same whole percent compare equal; they are then kept
    in author-name order. ``exact`` sorts by line count, descending, then
    author name.
    """
    if sort_mode not in SORT_MODES:
        raise ValueError(f"Unknown sort mode: {sort_mode!r}. Choose from: {', '.join(SORT_MODES)}")

    total = sum(counts.values())
    entries = [
        ReportEntry(author=author, lines=lines, percent=percent_of(lines, total))
        for author, lines in counts.items()
    ]

    entries.sort(key=lambda e: e.author)
    if sort_mode == "truncated":
        entries.sort(key=lambda e: int(e.percent), reverse=True)
    else:
        entries.sort(key=lambda e: e.lines, reverse=True)

    logger.debug("Built %d report entries over %d lines", len(entries), total)
    return entries
