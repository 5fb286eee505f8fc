"""Decoding scrambled seven-segment displays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from adventsolve.text import read_lines

DIGIT_WIRES = (
    "abcefg",
    "cf",
    "acdeg",
    "acdfg",
    "bcdf",
    "abdfg",
    "abdefg",
    "acf",
    "abcdefg",
    "abcdfg",
)
# Eight lights every segment.
ORIGINAL_MAP = DIGIT_WIRES[8]
EASY_DIGITS = (1, 4, 7, 8)

NUM_PATTERNS = 10
NUM_OUTPUTS = 4


@dataclass(frozen=True)
class Entry:
    """The ten unique signal patterns and the four output digits of one display."""

    patterns: tuple[str, ...]
    output: tuple[str, ...]


def parse_entries(text: str) -> list[Entry]:
    """One entry per line: ten patterns, a ``|`` and four output digits."""
    entries = []
    for line in read_lines(text):
        halves = line.split("|")
        if len(halves) != 2:
            raise ValueError(f"Expected one '|' in {line!r}")
        patterns = tuple(halves[0].split())
        output = tuple(halves[1].split())
        if len(patterns) != NUM_PATTERNS or len(output) != NUM_OUTPUTS:
            raise ValueError(
                f"Expected {NUM_PATTERNS} patterns and {NUM_OUTPUTS} outputs "
                f"in {line!r}"
            )
        entries.append(Entry(patterns, output))
    return entries


def count_easy(entries: Iterable[Entry]) -> int:
    """How many output digits are a 1, 4, 7 or 8, judged by length alone."""
    easy_lengths = {len(DIGIT_WIRES[digit]) for digit in EASY_DIGITS}
    return sum(
        len(digit) in easy_lengths for entry in entries for digit in entry.output
    )


def get_mapping(patterns: Sequence[str]) -> str:
    """The wire driving each segment ``a`` to ``g``, deduced from the patterns."""
    full = frozenset(ORIGINAL_MAP)
    segments = [set(full) for _ in ORIGINAL_MAP]

    for pattern in patterns:
        candidates = [
            wires for wires in DIGIT_WIRES if len(wires) == len(pattern)
        ]
        valid = frozenset(pattern)
        invalid = full - valid
        for index, segment in enumerate(ORIGINAL_MAP):
            union: set[str] = set()
            for wires in candidates:
                union |= segments[index] & (valid if segment in wires else invalid)
            segments[index] = union

    for index, single in enumerate(segments):
        if len(single) == 1:
            segments[:] = [
                other if other_index == index else other - single
                for other_index, other in enumerate(segments)
            ]

    if not all(segments):
        raise ValueError("The patterns do not describe a valid display")
    return "".join(min(candidates) for candidates in segments)


def output_to_number(output: str, mapping: str) -> int:
    """The digit shown by the lit wires ``output`` under ``mapping``."""
    segments = []
    for wire in output:
        index = mapping.find(wire)
        if index < 0:
            raise ValueError(f"Wire {wire!r} is not in the mapping {mapping!r}")
        segments.append(ORIGINAL_MAP[index])
    lit = "".join(sorted(segments))
    try:
        return DIGIT_WIRES.index(lit)
    except ValueError:
        raise ValueError(f"Invalid wire set given: {lit!r}") from None


def solve_line(entry: Entry) -> int:
    """The four-digit number shown on one display."""
    mapping = get_mapping(entry.patterns)
    number = 0
    for digit in entry.output:
        number = number * 10 + output_to_number(digit, mapping)
    return number


def sum_outputs(entries: Iterable[Entry]) -> int:
    """Sum of the numbers shown on all displays."""
    return sum(solve_line(entry) for entry in entries)