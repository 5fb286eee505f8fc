"""Priorities of items shared between rucksack compartments and groups."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from adventsolve.text import read_lines

GROUP_SIZE = 3


def priority(item: str) -> int:
    """``a``-``z`` are worth 1-26, ``A``-``Z`` are worth 27-52."""
    if item < "a":
        return ord(item) - ord("A") + 27
    return ord(item) - ord("a") + 1


def _score(common: Iterable[str]) -> int:
    return sum(priority(item) for item in common if "A" <= item <= "z")


def shared_item_priorities(text: str) -> int:
    """Sum of priorities of items found in both halves of each rucksack."""
    total = 0
    for line in read_lines(text):
        half = len(line) // 2
        total += _score(set(line[:half]) & set(line[half : 2 * half]))
    return total


def badge_priorities(text: str) -> int:
    """Sum of priorities of the items common to each group of three rucksacks."""
    lines = list(read_lines(text))
    total = 0
    for start in range(0, len(lines) - GROUP_SIZE + 1, GROUP_SIZE):
        group = lines[start : start + GROUP_SIZE]
        total += _score(reduce(set.intersection, (set(line) for line in group)))
    return total