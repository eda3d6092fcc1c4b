# algolab

A collection of classic data structures and algorithms. Each one can be used
as a Python library and as a small command that reads its task from a file.

| Module | What it does |
| --- | --- |
| `algolab.aatree` | `AATree`: integers kept in a self-balancing AA-tree (equal values may be stored more than once) |
| `algolab.hashset` | `HashSet`: integers kept in a chained hash table (adding a value twice stores it twice) |
| `algolab.minmaxqueue` | `MinMaxQueue`: FIFO queue that reports max − min of its contents in O(1) |
| `algolab.priorityqueue` | `BinomialHeap`: binomial min-heap with extract-min and decrease-key |
| `algolab.findsubstr` | `prefix_function`, `count_occurrences`: counting a pattern line by line |
| `algolab.orderstats` | `generate_sequence`, `select_range`, `streaming_select_range`: the k1-th … k2-th smallest values |
| `algolab.median` | `heap_sort`, `representatives`: weakest, median and strongest student by grade |
| `algolab.mst` | `Edge`, `DisjointSet`, `minimum_spanning_weight`: Kruskal's algorithm |
| `algolab.btreecheck` | `parse_dump`, `is_btree`, `check_dump`: validating a dumped B-tree |
| `algolab.battle` | `card_value`, `parse_deck`, `play`: the two-player card game "drunkard" |
| `algolab.radixsort` | `lsd_sort`, `read_columns`, `one_time_password`: password picked by LSD phases |

## Installation

```
pip install .
```

Python 3.10 or newer is required; there are no third-party dependencies.

## Using it as a library

```python
from algolab.aatree import AATree
from algolab.hashset import HashSet
from algolab.minmaxqueue import MinMaxQueue
from algolab.findsubstr import count_occurrences

tree = AATree()
for value in (5, 1, 9):
    tree.insert(value)
print(9 in tree, tree.height())   # True 2

numbers = HashSet()
numbers.add(42)
numbers.remove(42)
print(42 in numbers)              # False

queue = MinMaxQueue()
for value in (3, 10, 7):
    queue.push(value)
print(queue.difference())         # 7
queue.pop()                       # returns 3
print(queue.difference())         # 3

print(count_occurrences("ab", ["abab", "xab"]))   # 3
```

Removing a value that is not stored is silently ignored by `AATree.remove`
and `HashSet.remove`. `MinMaxQueue.pop` and `MinMaxQueue.difference` raise
`IndexError` on an empty queue.

The priority queue labels every entry with a number, by which its key can be
lowered later:

```python
from algolab.priorityqueue import BinomialHeap

heap = BinomialHeap()
heap.push(10, 1)
heap.push(20, 2)
heap.decrease(2, 5)
print(heap.extract_min())     # 5
```

Order statistics are 1-based and returned in ascending order:

```python
from algolab.orderstats import select_range, streaming_select_range

print(select_range([5, 3, 9, 1, 7], 2, 4))            # [3, 5, 7]
print(streaming_select_range([5, 3, 9, 1, 7], 2, 4))  # [3, 5, 7]
```

## Commands

Each command reads its input file and either prints the answer or writes it
to an output file.

| Command | Arguments | Result |
| --- | --- | --- |
| `algolab-aatree` | `INPUT OUTPUT` | tree height after each `+`/`-`, `true`/`false` for each `?` |
| `algolab-hashset` | `INPUT OUTPUT` | `true`/`false` for each `?` |
| `algolab-minmaxqueue` | `INPUT OUTPUT` | max − min of the queue for each `?` |
| `algolab-priorityqueue` | `INPUT OUTPUT` | each extracted minimum, or `*` when the heap is empty |
| `algolab-findsubstr` | `PATTERN FILE` | number of occurrences, printed |
| `algolab-kth` | `INPUT OUTPUT` | the requested order statistics, whole sequence in memory |
| `algolab-kth-stream` | `INPUT OUTPUT` | the same, keeping only `k2` values at a time |
| `algolab-median` | `INPUT` | ids of the weakest, median and strongest student |
| `algolab-mst` | `INPUT` | weight of the minimum spanning forest |
| `algolab-btreecheck` | `INPUT` | `yes` or `no` |
| `algolab-battle` | `INPUT` | `first`, `second`, `draw` or `unknown` |
| `algolab-radixsort` | `INPUT OUTPUT` | the one-time password |

### Input formats

- **aatree, hashset**: the number of commands, then commands `+ X`, `- X`
  and `? X`.
- **minmaxqueue**: the number of commands, then `+ X`, `-` and `?`.
- **priorityqueue**: one command per line: `push X`, `extract-min`,
  `decrease-key N X`. Every command is numbered from 1 in order;
  `decrease-key` refers to the number of the `push` line that added the entry.
- **kth, kth-stream**: `n k1 k2 A B C x1 x2`; the sequence is `x1`, `x2`,
  then `x[i] = A*x[i-2] + B*x[i-1] + C` in 32-bit signed arithmetic.
- **median**: the number of students, then their average grades; students
  are numbered from 1.
- **mst**: node and edge counts, then one `start end weight` triple per edge,
  with nodes numbered from 0.
- **btreecheck**: node count, minimum degree `t` and root id, then nodes as
  `leaf: 0xID (K: key ...)` or
  `branch: 0xID (K: key ...) (C: child ...)`.
- **battle**: 52 cards; the first 26 go to the first player, the rest to the
  second. Ranks are `2`–`9`, `10`, `J`, `Q`, `K`, `A`; anything else between
  them (suits, separators) is skipped. A two beats an ace. The game is
  declared `unknown` once it runs past a million moves.
- **radixsort**: `n m k`, then `m` rows of `n` characters; column `j` is the
  `j`-th word. After `k` stable sorting phases from the last position back,
  the password is the first character of every word.

For example, a command file for the set commands:

```
4
+ 1
+ 2
? 2
- 2
```

```
algolab-hashset commands.txt answers.txt
```

## Running the tests

```
pip install ".[test]"
pytest
```