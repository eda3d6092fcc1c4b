import random
from collections import deque

import pytest

from algolab.minmaxqueue import MinMaxQueue, main, run_commands


def test_pop_returns_values_in_fifo_order():
    queue = MinMaxQueue([4, 8, 15])
    queue.push(16)
    assert [queue.pop() for _ in range(4)] == [4, 8, 15, 16]
    assert len(queue) == 0


@pytest.mark.parametrize("seed", range(6))
def test_difference_tracks_random_operations(seed):
    rng = random.Random(seed)
    queue = MinMaxQueue()
    model = deque()
    for _ in range(300):
        if model and rng.random() < 0.4:
            assert queue.pop() == model.popleft()
        else:
            value = rng.randint(-1000, 1000)
            queue.push(value)
            model.append(value)
        assert len(queue) == len(model)
        if model:
            assert queue.difference() == max(model) - min(model)


def test_mixed_stacks_use_largest_maximum():
    queue = MinMaxQueue([1, 10])
    queue.pop()
    queue.push(20)
    queue.push(5)
    assert queue.difference() == 15


def test_pop_from_empty_queue_raises():
    with pytest.raises(IndexError):
        MinMaxQueue().pop()


def test_difference_of_empty_queue_raises():
    queue = MinMaxQueue([3])
    queue.pop()
    with pytest.raises(IndexError):
        queue.difference()


def test_run_commands_answers_queries():
    assert run_commands(["+ 1", "+ 5", "?", "-", "?"]) == ["4", "0"]


def test_main_reads_count_and_writes_answers(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("5\n+ 1\n+ 5\n?\n-\n?\n")
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "4\n0\n"