"""
git-authorship - lines of code per author for a git repository.

Blames every tracked file with a selected extension and reports how many
surviving lines each author owns.
"""

__version__ = "0.1.0"

from .api import analyze
from .blame import AuthorshipReport, ReportEntry

__all__ = [
    "analyze",
    "AuthorshipReport",
    "ReportEntry",
]
