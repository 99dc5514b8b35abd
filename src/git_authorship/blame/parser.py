"""Parse ``git blame --line-porcelain`` output into author attributions."""

import re
from collections import Counter
from typing import Iterator

# Porcelain prefixes source lines with a TAB, so content never matches.
# author-mail / author-time lack the space directly after "author".
_AUTHOR_RE = re.compile(r"^author (.*)$")


def iter_authors(raw: str) -> Iterator[str]:
    """Yield one author name per ``author <name>`` line, in output order.

    --line-porcelain repeats the commit header for every source line, so each
    match is one attributed line and nothing is deduplicated.
    """
    # split("\n") rather than splitlines(): form feeds and other separators
    # inside source content must not start a new line.
    for line in raw.split("\n"):
        match = _AUTHOR_RE.match(line)
        if match:
            yield match.group(1)


def parse_blame_output(raw: str) -> Counter:
    """Count attributed lines per author for a single file's blame output."""
    return Counter(iter_authors(raw))
