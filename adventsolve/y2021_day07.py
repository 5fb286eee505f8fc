"""Aligning crab submarines at the cheapest horizontal position."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

from adventsolve.text import read_lines, split


def parse_crabs(text: str) -> dict[int, int]:
    """Number of crabs at each position, in ascending order of position."""
    counts = Counter(
        int(part) for line in read_lines(text) for part in split(line, ",")
    )
    return dict(sorted(counts.items()))


def _move_cost(distance: int, progressive: bool) -> int:
    return distance * (distance + 1) // 2 if progressive else distance


def _total_cost(crabs: Mapping[int, int], position: int, progressive: bool) -> int:
    return sum(
        _move_cost(abs(position - pos), progressive) * count
        for pos, count in crabs.items()
    )


def _bounds(crabs: Mapping[int, int]) -> tuple[int, int]:
    if not crabs:
        raise ValueError("No crab positions given")
    return min(crabs), max(crabs)


def lowest_fuel_linear(crabs: Mapping[int, int]) -> int:
    """Lowest fuel when each step costs one, updated by deltas between positions."""
    first, last = _bounds(crabs)
    best_pos = first
    lowest_cost = _total_cost(crabs, best_pos, progressive=False)
    crabs_left = crabs[best_pos]
    crabs_right = sum(crabs.values()) - crabs_left
    for pos in range(best_pos + 1, last + 1):
        num_crabs = crabs.get(pos, 0)
        new_cost = lowest_cost + (pos - best_pos) * (crabs_left - crabs_right)
        if new_cost < lowest_cost:
            lowest_cost = new_cost
            best_pos = pos
        crabs_left += num_crabs
        crabs_right -= num_crabs
    return lowest_cost


def lowest_fuel_progressive(crabs: Mapping[int, int]) -> int:
    """Lowest fuel when the n-th step of a move costs n."""
    first, last = _bounds(crabs)
    return min(
        _total_cost(crabs, pos, progressive=True) for pos in range(first, last + 1)
    )


def lowest_fuel(text: str, progressive: bool = False) -> int:
    """Lowest fuel to align the crabs listed in ``text``."""
    crabs = parse_crabs(text)
    if progressive:
        return lowest_fuel_progressive(crabs)
    return lowest_fuel_linear(crabs)