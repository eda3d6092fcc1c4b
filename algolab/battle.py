"""Simulation of the two-player card game "drunkard"."""

from __future__ import annotations

import sys
from collections import deque
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

DECK_SIZE = 52
MAX_MOVES = 1_000_000

_VALUES = {str(digit): digit for digit in range(2, 10)}
_VALUES.update({"1": 10, "J": 11, "Q": 12, "K": 13, "A": 14})


def card_value(symbol: str) -> int:
    """Rank of a card symbol ("1" stands for ten); 0 for anything else."""
    return _VALUES.get(symbol, 0)


def parse_deck(text: str) -> Tuple[List[int], List[int]]:
    """Split a 52-card deck description into the two players' card ranks."""
    chars = iter(text)
    symbol = next(chars, "")
    first: List[int] = []
    second: List[int] = []
    for index in range(DECK_SIZE):
        if not symbol:
            raise ValueError(f"deck holds only {index} cards")
        (first if index < DECK_SIZE // 2 else second).append(card_value(symbol))
        if symbol == "1":
            next(chars, "")
        symbol = next(chars, "")
        while symbol and card_value(symbol) == 0:
            symbol = next(chars, "")
    return first, second


def _second_beats(first: int, second: int) -> bool:
    return (first < second and not (first == 2 and second == 14)) or (
        first == 14 and second == 2
    )


def _first_beats(first: int, second: int) -> bool:
    return (first > second and not (first == 14 and second == 2)) or (
        first == 2 and second == 14
    )


def play(
    first: Iterable[int], second: Iterable[int], max_moves: int = MAX_MOVES
) -> str:
    """Play the game and return "first", "second", "draw" or "unknown"."""
    hand_one = deque(first)
    hand_two = deque(second)
    moves = 0
    while hand_one and hand_two:
        card_one = hand_one.popleft()
        card_two = hand_two.popleft()
        moves += 1
        if card_one == card_two:
            table_one = [card_one]
            table_two = [card_two]
            while card_one == card_two and hand_one and hand_two:
                card_one = hand_one.popleft()
                card_two = hand_two.popleft()
                table_one.append(card_one)
                table_two.append(card_two)
                moves += 1
            if card_one < card_two or (card_one == 14 and card_two == 2):
                winner = hand_two
            elif card_one > card_two or (card_one == 2 and card_two == 14):
                winner = hand_one
            else:
                winner = None
            if winner is not None:
                for own, other in zip(table_one, table_two):
                    winner.append(own)
                    winner.append(other)
        elif _second_beats(card_one, card_two):
            hand_two.extend((card_one, card_two))
        elif _first_beats(card_one, card_two):
            hand_one.extend((card_one, card_two))
        if moves > max_moves:
            return "unknown"

    if not hand_one and not hand_two:
        return "draw"
    return "first" if hand_one else "second"


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: battle DECK_FILE", file=sys.stderr)
        return 2
    first, second = parse_deck(Path(args[0]).read_text())
    print(play(first, second))
    return 0


if __name__ == "__main__":
    sys.exit(main())