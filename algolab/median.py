"""Pick the weakest, median and strongest student by average grade."""

from __future__ import annotations

import math
import struct
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def _sift_down(heap: List[Tuple[Any, T]], size: int) -> None:
    position = 0
    while 2 * position + 1 < size:
        child = 2 * position + 1
        if child + 1 < size and heap[child][0] < heap[child + 1][0]:
            child += 1
        if heap[position][0] < heap[child][0]:
            heap[position], heap[child] = heap[child], heap[position]
            position = child
        else:
            break


def heap_sort(items: Iterable[T], key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """Return the items in ascending order of key, sorted with a max-heap."""
    if key is None:
        heap = [(item, item) for item in items]
    else:
        heap = [(key(item), item) for item in items]
    for start in range(1, len(heap)):
        position = start
        while position:
            parent = (position - 1) // 2
            if heap[parent][0] < heap[position][0]:
                heap[parent], heap[position] = heap[position], heap[parent]
                position = parent
            else:
                break
    for size in range(len(heap) - 1, 0, -1):
        heap[0], heap[size] = heap[size], heap[0]
        _sift_down(heap, size)
    return [item for _, item in heap]


def representatives(grades: Sequence[float]) -> Tuple[int, int, int]:
    """1-based ids of the lowest, median and highest grade."""
    if not grades:
        raise ValueError("no students given")
    ordered = heap_sort(enumerate(grades, 1), key=lambda pair: pair[1])
    return ordered[0][0], ordered[len(ordered) // 2][0], ordered[-1][0]


def _single_precision(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: median GRADES_FILE", file=sys.stderr)
        return 2
    fields = Path(args[0]).read_text().split()
    if not fields:
        raise ValueError("input does not start with a student count")
    count = int(fields[0])
    grades = [_single_precision(float(field)) for field in fields[1 : count + 1]]
    if len(grades) < count:
        raise ValueError(f"expected {count} grades, found {len(grades)}")
    print(*representatives(grades))
    return 0


if __name__ == "__main__":
    sys.exit(main())