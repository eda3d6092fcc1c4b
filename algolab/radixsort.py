"""One-time password generator based on partial LSD radix sorting."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

_HEADER = re.compile(r"\s*(\d+)\s+(\d+)\s+(\d+)")


def lsd_sort(words: Sequence[str], phases: int) -> List[str]:
    """Run the given number of stable LSD phases, from the last position back."""
    if not words:
        return []
    length = len(words[0])
    if any(len(word) != length for word in words):
        raise ValueError("all words must have the same length")
    if not 0 <= phases <= length:
        raise ValueError(f"phases must be between 0 and {length}, got {phases}")
    ordered = list(words)
    for position in range(length - 1, length - phases - 1, -1):
        ordered.sort(key=lambda word: word[position])
    return ordered


def read_columns(text: str) -> Tuple[List[str], int]:
    """Parse "n m k" and m rows of n characters; return the n column words and k."""
    header = _HEADER.match(text)
    if header is None:
        raise ValueError("input must start with n, m and k")
    count, length, phases = (int(group) for group in header.groups())
    chars = [char for char in text[header.end():] if not char.isspace()]
    if len(chars) < count * length:
        raise ValueError(f"expected {count * length} characters, found {len(chars)}")
    rows = [chars[row * count:(row + 1) * count] for row in range(length)]
    words = ["".join(column) for column in zip(*rows)] if length else [""] * count
    return words, phases


def one_time_password(words: Sequence[str], phases: int) -> str:
    """First characters of the words after the given number of sort phases."""
    return "".join(word[0] for word in lsd_sort(words, phases))


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: radixsort INPUT OUTPUT", file=sys.stderr)
        return 2
    words, phases = read_columns(Path(args[0]).read_text())
    Path(args[1]).write_text(one_time_password(words, phases))
    return 0


if __name__ == "__main__":
    sys.exit(main())