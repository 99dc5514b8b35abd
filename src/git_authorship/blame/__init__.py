"""Blame-based authorship attribution: git access, parsing, tallying."""

from .analyzer import AuthorshipAnalyzer
from .filters import extension_of, matches_extension, normalize_extensions
from .git_client import GitCLI, VersionControl
from .models import AuthorshipReport, ReportEntry
from .parser import iter_authors, parse_blame_output
from .tally import AuthorTally, build_entries, percent_of

__all__ = [
    "AuthorshipAnalyzer",
    "AuthorshipReport",
    "AuthorTally",
    "GitCLI",
    "ReportEntry",
    "VersionControl",
    "build_entries",
    "extension_of",
    "iter_authors",
    "matches_extension",
    "normalize_extensions",
    "parse_blame_output",
    "percent_of",
]
