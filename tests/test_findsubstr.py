import pytest

from algolab.findsubstr import count_occurrences, main, prefix_function


def test_prefix_function_example():
    assert prefix_function("abab") == [0, 0, 1, 2]


def test_prefix_function_of_empty_pattern():
    assert prefix_function("") == []


@pytest.mark.parametrize("pattern", ["abcab", "aabaaab", "xyz", "aaaa"])
def test_prefix_function_borders_are_real(pattern):
    borders = prefix_function(pattern)
    assert len(borders) == len(pattern)
    assert borders[0] == 0
    for index, border in enumerate(borders):
        assert border <= index
        prefix = pattern[: index + 1]
        assert prefix[:border] == prefix[len(prefix) - border:]


@pytest.mark.parametrize("copies", [0, 1, 2, 7])
def test_repeated_pattern(copies):
    assert count_occurrences("abc", ["abc" * copies]) == copies


def test_overlapping_matches():
    assert count_occurrences("aa", ["aaaa"]) == 3


def test_counts_every_line():
    lines = ["xxneedle", "needle", "a needle here"]
    assert count_occurrences("needle", lines) == len(lines)


def test_match_does_not_span_lines():
    assert count_occurrences("ab", ["a", "b"]) == count_occurrences("ab", [])


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        count_occurrences("", ["text"])


def test_main_prints_count(tmp_path, capsys):
    path = tmp_path / "text.txt"
    path.write_text("cat dog cat\nbird\ncatcat\n")
    assert main(["cat", str(path)]) == 0
    assert int(capsys.readouterr().out) == 4