"""Comparing pairs of section assignments."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from adventsolve.text import read_lines, split


@dataclass(frozen=True)
class SectionRange:
    """A closed range of section numbers."""

    start: int
    end: int

    @classmethod
    def parse(cls, text: str) -> SectionRange:
        parts = split(text.strip(), "-")
        if len(parts) != 2:
            raise ValueError(f"Invalid section range {text!r}")
        return cls(int(parts[0]), int(parts[1]))

    def contains(self, other: SectionRange) -> bool:
        """Whether ``other`` lies entirely within this range."""
        return self.start <= other.start and other.end <= self.end

    def overlaps_with(self, other: SectionRange) -> bool:
        """Whether the two ranges share at least one section."""
        return self.start <= other.end and other.start <= self.end


def _pairs(text: str) -> Iterator[tuple[SectionRange, SectionRange]]:
    for line in read_lines(text):
        parts = split(line, ",")
        if len(parts) != 2:
            raise ValueError(f"Invalid assignment pair {line!r}")
        yield SectionRange.parse(parts[0]), SectionRange.parse(parts[1])


def count_contained(text: str) -> int:
    """Pairs in which one range fully contains the other."""
    return sum(
        first.contains(second) or second.contains(first)
        for first, second in _pairs(text)
    )


def count_overlapping(text: str) -> int:
    """Pairs whose ranges overlap at all."""
    return sum(first.overlaps_with(second) for first, second in _pairs(text))