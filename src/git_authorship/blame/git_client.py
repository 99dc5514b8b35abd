"""Run git via subprocess to list tracked files and blame them."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from ..exceptions import (
    GitCommandError,
    GitExecutionError,
    GitNotFoundError,
    GitTimeoutError,
    NotARepositoryError,
    OutputDecodingError,
)
from ..logging_config import get_logger

logger = get_logger(__name__)


class VersionControl(ABC):
    """The two git operations attribution needs.

    Tests substitute an in-memory implementation so no repository is needed.
    """

    @abstractmethod
    def list_tracked_files(self) -> List[str]:
        """Return tracked paths relative to the repository root, unfiltered."""

    @abstractmethod
    def blame(self, path: str) -> str:
        """Return ``git blame --line-porcelain`` text for one tracked file."""


class GitCLI(VersionControl):
    """VersionControl backed by the git command-line tool."""

    def __init__(
        self,
        repo_path: str,
        git_executable: str = "git",
        timeout: Optional[float] = None,
        encoding: str = "utf-8",
    ):
        self.repo_path = str(Path(repo_path).resolve())
        self.git_executable = git_executable
        self.timeout = timeout
        self.encoding = encoding

    def list_tracked_files(self) -> List[str]:
        # -z: NUL-separated and never quoted, so unusual names survive intact
        raw = self._run("ls-files", "-z")
        return [path for path in raw.split("\0") if path]

    def blame(self, path: str) -> str:
        return self._run("blame", "--line-porcelain", "--", path)

    def _run(self, *args: str) -> str:
        cmd = [self.git_executable, "-C", self.repo_path, *args]
        logger.debug("Running %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise GitNotFoundError(self.git_executable)
        except subprocess.TimeoutExpired:
            raise GitTimeoutError(cmd, self.timeout or 0)
        except OSError as e:
            raise GitExecutionError(self.git_executable, e.strerror or str(e))

        if result.returncode != 0:
            stderr = result.stderr.decode(self.encoding, errors="replace")
            if "not a git repository" in stderr.lower():
                raise NotARepositoryError(self.repo_path, cmd, result.returncode, stderr)
            raise GitCommandError(cmd, result.returncode, stderr)

        try:
            return result.stdout.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise OutputDecodingError(cmd, self.encoding, str(e))
