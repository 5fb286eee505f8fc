"""Counting the calories carried by the best-stocked elves."""

from __future__ import annotations

from adventsolve.text import read_lines


def _calories_per_elf(text: str) -> list[int]:
    elves = []
    current = 0
    for line in read_lines(text, keep_empty=True):
        if not line:
            elves.append(current)
            current = 0
            continue
        current += int(line)
    elves.append(current)
    return elves


def top_calories(text: str, num_elves: int = 1) -> int:
    """Total calories carried by the ``num_elves`` elves carrying the most."""
    if num_elves < 0:
        raise ValueError("num_elves must not be negative")
    elves = sorted(_calories_per_elf(text), reverse=True)
    return sum(elves[:num_elves])