"""Extension allow-list handling for tracked file paths."""

from typing import FrozenSet, Iterable, Optional


def normalize_extensions(values: Iterable[str]) -> FrozenSet[str]:
    """Turn raw CLI values into a lowercase allow-list.

    Each value may hold several comma-separated extensions. Whitespace and
    leading dots are stripped; empty entries are dropped.

    >>> sorted(normalize_extensions(["rs, .PY", "js,,"]))
    ['js', 'py', 'rs']
    """
    result = set()
    for value in values:
        for part in value.split(","):
            ext = part.strip().lstrip(".").lower()
            if ext:
                result.add(ext)
    return frozenset(result)


def extension_of(path: str) -> Optional[str]:
    """Return the lowercase extension of the file name in ``path``.

    None when the name has no dot, or only a leading one (``.gitignore``).
    ``foo.`` yields the empty string.
    """
    name = path.rsplit("/", 1)[-1]
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext.lower()


def matches_extension(path: str, extensions: FrozenSet[str]) -> bool:
    ext = extension_of(path)
    return ext is not None and ext in extensions
