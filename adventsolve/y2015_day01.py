"""Following parentheses up and down the floors of a building."""

from __future__ import annotations

from adventsolve.text import read_lines


def _instructions(text: str) -> str:
    return next(read_lines(text), "")


def _step(c: str) -> int:
    return int(c == "(") - int(c == ")")


def final_floor(text: str) -> int:
    """The floor reached after following every instruction."""
    return sum(_step(c) for c in _instructions(text))


def basement_position(text: str) -> int:
    """The 1-based position of the first step into the basement.

    If the basement is never entered, the number of instructions is returned.
    """
    floor = 0
    position = 0
    for position, c in enumerate(_instructions(text), start=1):
        floor += _step(c)
        if floor == -1:
            break
    return position