"""Wrapping paper and ribbon needed for a list of boxes."""

from __future__ import annotations

from collections.abc import Iterator

from adventsolve.text import read_lines, split


def _boxes(text: str) -> Iterator[list[int]]:
    for line in read_lines(text):
        dims = [int(part) for part in split(line, "x", limit=3)]
        if len(dims) != 3:
            raise ValueError(f"Expected three dimensions in {line!r}")
        yield dims


def wrapping_paper(text: str) -> int:
    """Total paper: each box's surface plus its smallest side."""
    total = 0
    for length, width, height in _boxes(text):
        sides = (length * width, length * height, width * height)
        total += 2 * sum(sides) + min(sides)
    return total


def ribbon(text: str) -> int:
    """Total ribbon: smallest perimeter plus the volume of each box."""
    total = 0
    for box in _boxes(text):
        a, b, c = sorted(box)
        total += 2 * (a + b) + a * b * c
    return total