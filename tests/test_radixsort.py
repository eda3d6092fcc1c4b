import random

import pytest

from algolab.radixsort import lsd_sort, main, one_time_password, read_columns


def test_full_phases_sorts_completely():
    rng = random.Random(3)
    words = ["".join(rng.choice("abcd") for _ in range(4)) for _ in range(50)]
    assert lsd_sort(words, 4) == sorted(words)


def test_zero_phases_keeps_order():
    words = ["cb", "ab", "ba"]
    assert lsd_sort(words, 0) == words


def test_one_phase_sorts_by_last_character_stably():
    words = ["zb", "ya", "xb", "wa"]
    assert lsd_sort(words, 1) == ["ya", "wa", "zb", "xb"]


def test_partial_sort_is_permutation():
    words = ["dca", "bad", "cab", "abc"]
    result = lsd_sort(words, 2)
    assert sorted(result) == sorted(words)
    assert [word[1:] for word in result] == sorted(word[1:] for word in words)


def test_too_many_phases_rejected():
    with pytest.raises(ValueError):
        lsd_sort(["ab", "cd"], 3)


def test_unequal_lengths_rejected():
    with pytest.raises(ValueError):
        lsd_sort(["ab", "c"], 1)


def test_read_columns_transposes():
    words, phases = read_columns("3 2 1\nabc\ndef\n")
    assert words == ["ad", "be", "cf"]
    assert phases == 1


def test_read_columns_short_input():
    with pytest.raises(ValueError):
        read_columns("3 2 1\nabc\n")


def test_read_columns_missing_header():
    with pytest.raises(ValueError):
        read_columns("abc")


def test_one_time_password_without_phases():
    assert one_time_password(["ad", "be", "cf"], 0) == "abc"


def test_one_time_password_after_phase():
    assert one_time_password(["ab", "ba"], 1) == "ba"


def test_main_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("3 3 3\nbac\naca\ncba\n")
    assert main([str(source), str(target)]) == 0
    words, _ = read_columns(source.read_text())
    assert target.read_text() == "".join(word[0] for word in sorted(words))