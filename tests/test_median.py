import random

import pytest

from algolab.median import heap_sort, main, representatives


@pytest.mark.parametrize("seed", range(5))
def test_heap_sort_orders_values(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
    assert heap_sort(values) == sorted(values)


def test_heap_sort_uses_key_and_keeps_items():
    pairs = [(1, 3.0), (2, 1.0), (3, 2.0)]
    result = heap_sort(pairs, key=lambda pair: pair[1])
    assert [grade for _, grade in result] == [1.0, 2.0, 3.0]
    assert sorted(result) == sorted(pairs)


def test_heap_sort_leaves_input_untouched():
    values = [3, 1, 2]
    heap_sort(values)
    assert values == [3, 1, 2]


def test_representatives_of_distinct_grades():
    assert representatives([3.5, 4.0, 2.0]) == (3, 1, 2)


def test_single_student_is_all_three():
    assert representatives([4.2]) == (1, 1, 1)


def test_extremes_match_min_and_max():
    grades = [4.1, 3.3, 4.9, 2.7, 3.8, 4.4]
    weakest, _, strongest = representatives(grades)
    assert grades[weakest - 1] == min(grades)
    assert grades[strongest - 1] == max(grades)


def test_no_students_raises():
    with pytest.raises(ValueError):
        representatives([])


def test_main_prints_ids(tmp_path, capsys):
    path = tmp_path / "grades.txt"
    path.write_text("3\n3.5 4.0 2.0\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["3", "1", "2"]


def test_main_rejects_short_input(tmp_path):
    path = tmp_path / "grades.txt"
    path.write_text("4\n3.5 4.0\n")
    with pytest.raises(ValueError):
        main([str(path)])