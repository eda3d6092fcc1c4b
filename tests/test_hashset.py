import random
from collections import Counter

import pytest

from algolab.hashset import HashSet, main, run_commands


def test_add_and_contains():
    table = HashSet()
    table.add(10)
    assert 10 in table
    assert 11 not in table


def test_remove():
    table = HashSet()
    table.add(3)
    table.remove(3)
    assert 3 not in table


def test_remove_missing_is_ignored():
    table = HashSet()
    table.add(1)
    table.remove(2)
    assert 1 in table
    assert 2 not in table


def test_duplicates_need_two_removals():
    table = HashSet()
    table.add(8)
    table.add(8)
    table.remove(8)
    assert 8 in table
    table.remove(8)
    assert 8 not in table


@pytest.mark.parametrize("value", [-10**9, 10**9, -1, 0, 2**31 - 1, -(2**31)])
def test_extreme_values(value):
    table = HashSet()
    table.add(value)
    assert value in table
    table.remove(value)
    assert value not in table


def test_colliding_values_are_kept_apart():
    table = HashSet()
    values = list(range(0, 54121 * 5, 54121))
    for value in values:
        table.add(value)
    table.remove(values[2])
    assert values[2] not in table
    assert all(value in table for value in values if value != values[2])


def test_non_integer_is_not_contained():
    table = HashSet()
    table.add(1)
    assert "1" not in table


@pytest.mark.parametrize("seed", [4, 5])
def test_matches_multiset_model(seed):
    rng = random.Random(seed)
    table = HashSet()
    model = Counter()
    for _ in range(3000):
        value = rng.randint(-10**9, 10**9) if rng.random() < 0.1 else rng.randint(-30, 30)
        action = rng.random()
        if action < 0.5:
            table.add(value)
            model[value] += 1
        elif action < 0.8:
            table.remove(value)
            if model[value]:
                model[value] -= 1
        else:
            assert (value in table) == (model[value] > 0)


def test_run_commands_answers_queries_only():
    output = run_commands(["+ 1", "+ 2", "- 1", "? 1", "? 2"])
    assert output == ["false", "true"]


def test_run_commands_rejects_garbage():
    with pytest.raises(ValueError):
        run_commands(["? ?"])


def test_main_writes_answers(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("4\n+ -7\n? -7\n- -7\n? -7\n")
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "true\nfalse\n"