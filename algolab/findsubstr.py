"""Count occurrences of a pattern in the lines of a text file."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional


def prefix_function(pattern: str) -> List[int]:
    """Length of the longest proper border of every prefix of pattern."""
    if not pattern:
        return []
    borders = [0] * len(pattern)
    matched = 0
    position = 1
    while position < len(pattern):
        if pattern[position] == pattern[matched]:
            matched += 1
            borders[position] = matched
            position += 1
        elif matched > 0:
            matched = borders[matched - 1]
        else:
            borders[position] = 0
            position += 1
    return borders


def count_occurrences(pattern: str, lines: Iterable[str]) -> int:
    """Count matches of pattern inside each line; matches never span lines."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    borders = prefix_function(pattern)
    count = 0
    for line in lines:
        matched = 0
        for char in line:
            if char == pattern[matched]:
                matched += 1
                if matched == len(pattern):
                    count += 1
                    matched = borders[matched - 1]
            elif matched:
                matched = borders[matched - 1]
    return count


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: findsubstr PATTERN FILE", file=sys.stderr)
        return 2
    pattern, path = args[0], args[1]
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
        print(count_occurrences(pattern, (_strip_newline(line) for line in stream)))
    return 0


if __name__ == "__main__":
    sys.exit(main())