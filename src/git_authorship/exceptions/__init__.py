"""Exception hierarchy for git-authorship."""

from .base import AuthorshipError
from .config import ConfigurationError, InvalidConfigError
from .git import (
    GitCommandError,
    GitError,
    GitExecutionError,
    GitNotFoundError,
    GitTimeoutError,
    NotARepositoryError,
    OutputDecodingError,
)

__all__ = [
    "AuthorshipError",
    "GitError",
    "GitNotFoundError",
    "GitExecutionError",
    "GitCommandError",
    "NotARepositoryError",
    "GitTimeoutError",
    "OutputDecodingError",
    "ConfigurationError",
    "InvalidConfigError",
]
