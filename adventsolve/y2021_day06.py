"""Simulating a growing school of lanternfish."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from adventsolve.text import read_lines, split


def simulate_fish(
    stages: Iterable[int],
    num_days: int,
    production_length: int = 7,
    maturing_length: int = 2,
) -> int:
    """Number of fish after ``num_days``, given each fish's timer in ``stages``."""
    if production_length < 1 or maturing_length < 1:
        raise ValueError("Cycle lengths must be positive")
    fish = deque([0] * production_length)
    for stage in stages:
        if not 0 <= stage < production_length:
            raise ValueError(f"Invalid fish stage {stage}")
        fish[stage] += 1
    brood = deque([0] * maturing_length)
    for _ in range(num_days):
        new_brood = fish[0]
        fish.rotate(-1)
        fish[-1] += brood.popleft()
        brood.append(new_brood)
    return sum(fish) + sum(brood)


def count_fish(text: str, num_days: int) -> int:
    """Number of fish after ``num_days`` for comma-separated timers in ``text``."""
    stages = [
        int(part) for line in read_lines(text) for part in split(line, ",")
    ]
    return simulate_fish(stages, num_days)