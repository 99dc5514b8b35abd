"""Git subprocess exceptions: missing binary, failed commands, bad output."""

from typing import Sequence

from .base import AuthorshipError


def _render_command(command: Sequence[str]) -> str:
    return " ".join(command)


class GitError(AuthorshipError):
    """Base class for errors raised while talking to git."""

    pass


class GitNotFoundError(GitError):
    """Raised when the git executable cannot be started."""

    def __init__(self, executable: str):
        super().__init__(
            f"Git executable not found: {executable}",
            details={"executable": executable},
        )
        self.executable = executable


class GitExecutionError(GitError):
    """Raised when the git executable exists but cannot be started."""

    def __init__(self, executable: str, reason: str):
        super().__init__(
            f"Cannot run git executable: {executable}",
            details={"executable": executable, "reason": reason},
        )
        self.executable = executable
        self.reason = reason


class GitCommandError(GitError):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str):
        stderr = stderr.strip()
        details = {"returncode": str(returncode)}
        if stderr:
            details["stderr"] = stderr
        super().__init__(f"Git command failed: {_render_command(command)}", details=details)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class NotARepositoryError(GitCommandError):
    """Raised when the target directory is not inside a git work tree."""

    def __init__(self, path: str, command: Sequence[str], returncode: int, stderr: str):
        super().__init__(command, returncode, stderr)
        self.message = f"Not a git repository: {path}"
        self.path = path


class GitTimeoutError(GitError):
    """Raised when a git command runs longer than the configured timeout."""

    def __init__(self, command: Sequence[str], timeout: float):
        super().__init__(
            f"Git command timed out: {_render_command(command)}",
            details={"timeout": f"{timeout:g}s"},
        )
        self.command = list(command)
        self.timeout = timeout


class OutputDecodingError(GitError):
    """Raised when git output is not valid text in the configured encoding."""

    def __init__(self, command: Sequence[str], encoding: str, reason: str):
        super().__init__(
            f"Cannot decode output of: {_render_command(command)}",
            details={"encoding": encoding, "reason": reason},
        )
        self.command = list(command)
        self.encoding = encoding
        self.reason = reason
