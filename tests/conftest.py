"""Shared test fixtures for git-authorship tests."""

import shutil
import subprocess

import pytest

from git_authorship.blame import VersionControl
from git_authorship.exceptions import GitCommandError


def pytest_configure(config):
    """Configure git marker."""
    config.addinivalue_line("markers", "git: test needs a real git executable")


def pytest_collection_modifyitems(config, items):
    """Skip tests that need git when it is not installed."""
    if shutil.which("git") is not None:
        return
    skip_git = pytest.mark.skip(reason="git executable not found")
    for item in items:
        if "git" in item.keywords:
            item.add_marker(skip_git)


def porcelain_block(author: str, line: str = "x = 1", sha: str = "a" * 40, lineno: int = 1) -> str:
    """One --line-porcelain record attributing a single line to ``author``."""
    return (
        f"{sha} {lineno} {lineno} 1\n"
        f"author {author}\n"
        f"author-mail <{author.lower() or 'nobody'}@example.com>\n"
        f"author-time 1700000000\n"
        f"author-tz +0000\n"
        f"committer {author}\n"
        f"committer-mail <{author.lower() or 'nobody'}@example.com>\n"
        f"committer-time 1700000000\n"
        f"committer-tz +0000\n"
        f"summary initial import\n"
        f"filename src/file.py\n"
        f"\t{line}\n"
    )


def porcelain(*authors: str) -> str:
    """Blame output with one line per entry in ``authors``."""
    return "".join(
        porcelain_block(author, line=f"line {i}", lineno=i)
        for i, author in enumerate(authors, start=1)
    )


class FakeVCS(VersionControl):
    """In-memory VersionControl: path -> porcelain text, or an exception to raise."""

    def __init__(self, files):
        self.files = dict(files)
        self.blamed = []

    def list_tracked_files(self):
        return list(self.files)

    def blame(self, path):
        self.blamed.append(path)
        result = self.files[path]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def make_vcs():
    """Factory building a FakeVCS from a {path: blame_text} mapping."""
    return FakeVCS


@pytest.fixture
def blame_text():
    """Factory building porcelain output from a sequence of author names."""
    return porcelain


@pytest.fixture
def alice_bob_vcs():
    """Two files: Alice owns 3 lines, Bob owns 1."""
    return FakeVCS(
        {
            "src/main.rs": porcelain("Alice", "Alice", "Bob"),
            "src/lib.rs": porcelain("Alice"),
            "README.md": porcelain("Carol", "Carol", "Carol"),
        }
    )


@pytest.fixture
def failing_blame_error():
    return GitCommandError(
        ["git", "-C", "/repo", "blame", "--line-porcelain", "--", "gone.py"],
        128,
        "fatal: no such path 'gone.py' in HEAD",
    )


def _git(repo, *args):
    subprocess.run(["git", "-C", str(repo), *args], check=True, capture_output=True)


@pytest.fixture
def git_repo(tmp_path):
    """A real repository with commits from Alice and Bob.

    main.py: 3 lines by Alice, 1 line by Bob
    util.PY: 2 lines by Bob
    notes.txt: 5 lines by Alice
    Makefile: 1 line by Alice
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "commit.gpgsign", "false")

    def commit_as(name, message):
        _git(repo, "add", "-A")
        _git(
            repo,
            "-c", f"user.name={name}",
            "-c", f"user.email={name.lower()}@example.com",
            "commit", "-q", "-m", message,
        )

    (repo / "main.py").write_text("a = 1\nb = 2\nc = 3\n")
    (repo / "notes.txt").write_text("one\ntwo\nthree\nfour\nfive\n")
    (repo / "Makefile").write_text("all:\n")
    commit_as("Alice", "initial")

    with open(repo / "main.py", "a") as f:
        f.write("d = 4\n")
    (repo / "util.PY").write_text("x = 1\ny = 2\n")
    commit_as("Bob", "extend")

    return repo


@pytest.fixture
def blame_block():
    """Factory building a single porcelain record."""
    return porcelain_block
