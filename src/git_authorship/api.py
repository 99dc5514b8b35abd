"""Public API for git-authorship.

Example:
    >>> from git_authorship import analyze
    >>>
    >>> report = analyze("/path/to/repo", ["py", "rs"])
    >>> report.total_lines
    1234
    >>> report.entries[0].author
    'Alice'
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from .blame import AuthorshipAnalyzer, AuthorshipReport, GitCLI
from .config import load_config
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(
    repo_path: str,
    extensions: Iterable[str],
    on_file: Optional[Callable[[str], None]] = None,
    **overrides,
) -> AuthorshipReport:
    """Attribute tracked lines of code to authors.

    Args:
        repo_path: Root (or any directory) of the git work tree
        extensions: Extensions to include, e.g. ``["py", "rs"]`` or ``["py,rs"]``
        on_file: Called with each file path just before it is blamed
        **overrides: Configuration overrides (e.g., sort_mode="exact")

    Returns:
        AuthorshipReport with entries in display order

    Raises:
        GitError: If git is missing or a git command fails
        InvalidConfigError: If an override is invalid
    """
    config = load_config(**overrides)
    vcs = GitCLI(
        repo_path,
        git_executable=config.git_executable,
        timeout=config.git_timeout,
        encoding=config.encoding,
    )
    logger.debug("Analyzing %s with %s", repo_path, config)
    return AuthorshipAnalyzer(vcs, extensions, config=config, on_file=on_file).run()
