import pytest

from algolab.battle import card_value, main, parse_deck, play

RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]


def _ordered_deck():
    return " ".join(rank + suit for suit in "SHDC" for rank in RANKS)


@pytest.mark.parametrize("digit", list("23456789"))
def test_digit_cards(digit):
    assert card_value(digit) == int(digit)


@pytest.mark.parametrize(
    "symbol, value", [("1", 10), ("J", 11), ("Q", 12), ("K", 13), ("A", 14)]
)
def test_face_cards(symbol, value):
    assert card_value(symbol) == value


@pytest.mark.parametrize("symbol", ["S", "H", "0", " ", ""])
def test_non_cards_are_zero(symbol):
    assert card_value(symbol) == 0


def test_parse_ordered_deck():
    first, second = parse_deck(_ordered_deck())
    assert first == list(range(2, 15)) * 2
    assert second == list(range(2, 15)) * 2


def test_parse_short_deck_raises():
    with pytest.raises(ValueError):
        parse_deck("2S 3S 4S")


def test_two_beats_ace():
    assert play([14], [2]) == "second"
    assert play([2], [14]) == "first"


def test_higher_card_wins():
    assert play([3], [2]) == "first"
    assert play([2], [3]) == "second"


def test_tie_with_nothing_left_is_draw():
    assert play([5], [5]) == "draw"


def test_dispute_goes_to_winner():
    assert play([4, 9], [4, 3]) == "first"


def test_cycle_is_unknown():
    assert play([3, 2], [2, 3], max_moves=10) == "unknown"


def test_play_does_not_consume_input():
    first, second = [3, 4], [2, 2]
    play(first, second)
    assert first == [3, 4]
    assert second == [2, 2]


def test_main_prints_winner(tmp_path, capsys):
    deck = tmp_path / "deck.txt"
    deck.write_text(_ordered_deck())
    first, second = parse_deck(_ordered_deck())
    assert main([str(deck)]) == 0
    assert capsys.readouterr().out.strip() == play(first, second)