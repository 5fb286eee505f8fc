"""Scoring a rock-paper-scissors strategy guide."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum

from adventsolve.text import read_lines, split


class Hand(IntEnum):
    """Shapes, numbered from zero so that arithmetic modulo 3 works."""

    ROCK = 0
    PAPER = 1
    SCISSORS = 2


class Outcome(IntEnum):
    """Points for the result of a round."""

    LOSE = 0
    DRAW = 3
    WIN = 6


_OPPONENT = {"A": Hand.ROCK, "B": Hand.PAPER, "C": Hand.SCISSORS}
_RESPONSE = {"X": Hand.ROCK, "Y": Hand.PAPER, "Z": Hand.SCISSORS}
_OUTCOME = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


def _rounds(text: str) -> Iterator[tuple[str, str]]:
    for line in read_lines(text):
        parts = split(line, " ", skip_empty=True, limit=2)
        if len(parts) != 2:
            raise ValueError(f"Invalid round {line!r}")
        yield parts[0][0], parts[1][0]


def _lookup(table: dict, key: str):
    try:
        return table[key]
    except KeyError:
        raise ValueError(f"Unknown symbol {key!r}") from None


def score_by_hand(text: str) -> int:
    """Total score when the second column is the shape to play."""
    score = 0
    for first, second in _rounds(text):
        opponent = _lookup(_OPPONENT, first)
        response = _lookup(_RESPONSE, second)
        score += response + 1
        if opponent == response:
            score += Outcome.DRAW
        elif (response - opponent) % 3 == 1:
            score += Outcome.WIN
    return score


def score_by_outcome(text: str) -> int:
    """Total score when the second column is the outcome to reach."""
    score = 0
    for first, second in _rounds(text):
        opponent = _lookup(_OPPONENT, first)
        outcome = _lookup(_OUTCOME, second)
        score += outcome
        if outcome == Outcome.DRAW:
            response = opponent
        elif outcome == Outcome.WIN:
            response = (opponent + 1) % 3
        else:
            response = (opponent + 2) % 3
        score += response + 1
    return score