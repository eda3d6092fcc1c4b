"""FIFO queue of integers answering "largest minus smallest" in O(1)."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

_COUNT = re.compile(r"\s*(\d+)")
_SIGN = re.compile(r"\s*(\S)")
_NUMBER = re.compile(r"\s*([+-]?\d+)")


class MinMaxQueue:
    """Queue built from two stacks; the pop side records running minima and maxima."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._incoming: List[int] = []
        self._in_min = 0
        self._in_max = 0
        self._outgoing: List[Tuple[int, int, int]] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Append value to the back of the queue."""
        if not self._incoming:
            self._in_min = self._in_max = value
        else:
            self._in_min = min(self._in_min, value)
            self._in_max = max(self._in_max, value)
        self._incoming.append(value)

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._outgoing:
            if not self._incoming:
                raise IndexError("pop from an empty queue")
            while self._incoming:
                value = self._incoming.pop()
                if self._outgoing:
                    _, low, high = self._outgoing[-1]
                    low, high = min(low, value), max(high, value)
                else:
                    low = high = value
                self._outgoing.append((value, low, high))
        return self._outgoing.pop()[0]

    def difference(self) -> int:
        """Largest minus smallest value currently in the queue."""
        if self._outgoing:
            _, low, high = self._outgoing[-1]
            if self._incoming:
                low = min(low, self._in_min)
                high = max(high, self._in_max)
            return high - low
        if self._incoming:
            return self._in_max - self._in_min
        raise IndexError("difference of an empty queue")

    def __len__(self) -> int:
        return len(self._incoming) + len(self._outgoing)


def run_commands(lines: Iterable[str]) -> List[str]:
    """Apply "+ X", "-" and "?" commands; return the answers to the queries."""
    queue = MinMaxQueue()
    output: List[str] = []
    for line in lines:
        command = line.strip()
        if not command:
            continue
        sign = command[0]
        if sign == "+":
            queue.push(int(command[1:]))
        elif sign == "-":
            queue.pop()
        elif sign == "?":
            output.append(str(queue.difference()))
    return output


def _read_commands(text: str) -> List[str]:
    header = _COUNT.match(text)
    if header is None:
        raise ValueError("input does not start with a command count")
    position = header.end()
    commands: List[str] = []
    for _ in range(int(header.group(1))):
        sign = _SIGN.match(text, position)
        if sign is None:
            break
        position = sign.end()
        if sign.group(1) == "+":
            number = _NUMBER.match(text, position)
            if number is None:
                raise ValueError("'+' must be followed by a number")
            position = number.end()
            commands.append(f"+ {number.group(1)}")
        else:
            commands.append(sign.group(1))
    return commands


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: minmaxqueue INPUT OUTPUT", file=sys.stderr)
        return 2
    output = run_commands(_read_commands(Path(args[0]).read_text()))
    Path(args[1]).write_text("".join(line + "\n" for line in output))
    return 0


if __name__ == "__main__":
    sys.exit(main())