"""Steering a submarine with forward/down/up commands."""

from __future__ import annotations

from collections.abc import Iterator

from adventsolve.text import read_lines, split


def _commands(text: str) -> Iterator[tuple[str, int]]:
    for line in read_lines(text):
        parts = split(line, " ", limit=2)
        if len(parts) != 2:
            raise ValueError(f"Invalid command line {line!r}")
        command, number = parts
        yield command, int(number)


def dive(text: str) -> int:
    """Horizontal position times depth, moving depth directly."""
    horizontal = 0
    depth = 0
    for command, number in _commands(text):
        if command == "forward":
            horizontal += number
        elif command == "down":
            depth += number
        elif command == "up":
            depth -= number
    return horizontal * depth


def dive_with_aim(text: str) -> int:
    """Horizontal position times depth, where up and down change the aim."""
    horizontal = 0
    depth = 0
    aim = 0
    for command, number in _commands(text):
        if command == "forward":
            horizontal += number
            depth += aim * number
        elif command == "down":
            aim += number
        elif command == "up":
            aim -= number
    return horizontal * depth