"""Order statistics k1..k2 of a generated integer sequence."""

from __future__ import annotations

import heapq
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence


def _wrap32(number: int) -> int:
    return (number + 0x80000000) % 0x100000000 - 0x80000000


def generate_sequence(
    count: int, a: int, b: int, c: int, x1: int, x2: int
) -> Iterator[int]:
    """Yield x1, x2 and then x[i] = a*x[i-2] + b*x[i-1] + c in 32-bit arithmetic."""
    older, newer = _wrap32(x1), _wrap32(x2)
    for _ in range(count):
        yield older
        older, newer = newer, _wrap32(a * older + b * newer + c)


def _check_range(k1: int, k2: int) -> None:
    if not 1 <= k1 <= k2:
        raise ValueError(f"need 1 <= k1 <= k2, got k1={k1}, k2={k2}")


def _ranked(values: Sequence[int], low: int, high: int) -> List[int]:
    """Values of rank low..high (0-based, inclusive) in ascending order."""
    if low > high or not values:
        return []
    pivot = values[len(values) // 2]
    less = [value for value in values if value < pivot]
    greater = [value for value in values if value > pivot]
    equal_start = len(less)
    equal_end = len(values) - len(greater)

    result: List[int] = []
    if low < equal_start:
        result.extend(_ranked(less, low, min(high, equal_start - 1)))
    result.extend([pivot] * max(0, min(high + 1, equal_end) - max(low, equal_start)))
    if high >= equal_end:
        result.extend(
            _ranked(greater, max(low, equal_end) - equal_end, high - equal_end)
        )
    return result


def select_range(values: Iterable[int], k1: int, k2: int) -> List[int]:
    """The k1-th to k2-th smallest values (1-based), ascending, by partial quicksort."""
    _check_range(k1, k2)
    items = list(values)
    if k2 > len(items):
        raise ValueError(f"k2={k2} exceeds the number of values ({len(items)})")
    return _ranked(items, k1 - 1, k2 - 1)


def streaming_select_range(values: Iterable[int], k1: int, k2: int) -> List[int]:
    """Same as select_range, holding only the k2 smallest values seen so far."""
    _check_range(k1, k2)
    heap: List[int] = []
    for value in values:
        if len(heap) < k2:
            heapq.heappush(heap, -value)
        elif value < -heap[0]:
            heapq.heapreplace(heap, -value)
    if len(heap) < k2:
        raise ValueError(f"k2={k2} exceeds the number of values ({len(heap)})")
    return sorted(-value for value in heap)[k1 - 1:]


def _read_parameters(path: str) -> List[int]:
    fields = Path(path).read_text().split()
    if len(fields) < 8:
        raise ValueError("input needs n, k1, k2, A, B, C, x1 and x2")
    return [int(field) for field in fields[:8]]


def _run(argv: Optional[List[str]], streaming: bool) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: orderstats INPUT OUTPUT", file=sys.stderr)
        return 2
    count, k1, k2, a, b, c, x1, x2 = _read_parameters(args[0])
    sequence = generate_sequence(count, a, b, c, x1, x2)
    select = streaming_select_range if streaming else select_range
    Path(args[1]).write_text(" ".join(map(str, select(sequence, k1, k2))))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Write the requested order statistics, keeping the whole sequence in memory."""
    return _run(argv, streaming=False)


def main_streaming(argv: Optional[List[str]] = None) -> int:
    """Write the requested order statistics without storing the whole sequence."""
    return _run(argv, streaming=True)


if __name__ == "__main__":
    sys.exit(main())