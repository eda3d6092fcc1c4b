"""Set of integers stored in a hash table with separate chaining."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional

_MODULUS = 54121
_MULTIPLIER = 7
_INCREMENT = 93

_COMMAND = re.compile(r"\s*(\S)\s*([+-]?\d+)")
_COUNT = re.compile(r"\s*(\d+)")


def _wrap32(number: int) -> int:
    return (number + 0x80000000) % 0x100000000 - 0x80000000


def _bucket_index(value: int) -> int:
    return abs(_wrap32(_MULTIPLIER * _wrap32(value) + _INCREMENT)) % _MODULUS


class HashSet:
    """Hash table of integers; adding a value twice stores it twice."""

    def __init__(self) -> None:
        self._buckets: List[List[int]] = [[] for _ in range(_MODULUS)]

    def add(self, value: int) -> None:
        """Store one occurrence of value."""
        self._buckets[_bucket_index(value)].append(value)

    def remove(self, value: int) -> None:
        """Drop one occurrence of value; a missing value is ignored."""
        bucket = self._buckets[_bucket_index(value)]
        if value in bucket:
            bucket.remove(value)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return value in self._buckets[_bucket_index(value)]


def run_commands(lines: Iterable[str]) -> List[str]:
    """Apply "+ X", "- X" and "? X" commands and return the answers to queries."""
    table = HashSet()
    output: List[str] = []
    for line in lines:
        if not line.strip():
            continue
        match = _COMMAND.match(line)
        if match is None:
            raise ValueError(f"malformed command: {line!r}")
        sign, value = match.group(1), int(match.group(2))
        if sign == "+":
            table.add(value)
        elif sign == "-":
            table.remove(value)
        elif sign == "?":
            output.append("true" if value in table else "false")
    return output


def _read_commands(text: str) -> List[str]:
    header = _COUNT.match(text)
    if header is None:
        raise ValueError("input does not start with a command count")
    count = int(header.group(1))
    commands = []
    for match in _COMMAND.finditer(text, header.end()):
        if len(commands) == count:
            break
        commands.append(f"{match.group(1)} {match.group(2)}")
    return commands


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: hashset INPUT OUTPUT", file=sys.stderr)
        return 2
    output = run_commands(_read_commands(Path(args[0]).read_text()))
    Path(args[1]).write_text("".join(line + "\n" for line in output))
    return 0


if __name__ == "__main__":
    sys.exit(main())