"""Counting depth increases of a sonar sweep."""

from __future__ import annotations

from itertools import pairwise

from adventsolve.text import read_numbers


def count_increases(text: str, window_width: int = 1) -> int:
    """How often the sum over a sliding window grows from one window to the next."""
    if window_width < 1:
        raise ValueError("window_width must be at least 1")
    measurements = list(read_numbers(text))
    sums = [
        sum(measurements[start : start + window_width])
        for start in range(len(measurements) - window_width + 1)
    ]
    return sum(1 for previous, current in pairwise(sums) if current > previous)