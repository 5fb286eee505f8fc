"""Comparing and ordering nested distress-signal packets."""

from __future__ import annotations

from functools import cmp_to_key

from adventsolve.text import read_lines

Packet = list

DIVIDERS = ("[[2]]", "[[6]]")


def parse_packet(line: str) -> Packet:
    """A packet such as ``[1,[2,3],[]]`` as nested lists of integers."""
    line = line.strip()
    if not line.startswith("["):
        raise ValueError(f"A packet must start with '[': {line!r}")
    root: list = []
    stack: list[list] = [root]
    digits = ""
    for c in line[1:]:
        if c.isdigit():
            digits += c
            continue
        if not stack:
            raise ValueError(f"Trailing characters in {line!r}")
        if digits:
            stack[-1].append(int(digits))
            digits = ""
        if c == "[":
            child: list = []
            stack[-1].append(child)
            stack.append(child)
        elif c == "]":
            stack.pop()
        elif c != ",":
            raise ValueError(f"Invalid character {c!r} in {line!r}")
    if stack or digits:
        raise ValueError(f"Unbalanced packet {line!r}")
    return root


def compare_packets(left: Packet | int, right: Packet | int) -> int:
    """-1 if ``left`` comes first, 1 if ``right`` does, 0 if undecided."""
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for lhs, rhs in zip(left, right):
        if isinstance(lhs, int) and isinstance(rhs, int):
            if lhs != rhs:
                return -1 if lhs < rhs else 1
            continue
        result = compare_packets(lhs, rhs)
        if result:
            return result
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    return 0


def _pairs(text: str) -> list[tuple[Packet, Packet]]:
    packets = [parse_packet(line) for line in read_lines(text)]
    return list(zip(packets[0::2], packets[1::2]))


def sum_ordered_pairs(text: str) -> int:
    """Sum of the 1-based indices of the pairs that are in the right order."""
    return sum(
        index
        for index, (left, right) in enumerate(_pairs(text), start=1)
        if compare_packets(left, right) < 0
    )


def decoder_key(text: str) -> int:
    """Product of the 1-based positions of the dividers among the sorted packets.

    Packets that compare as equal are kept only once.
    """
    dividers = [parse_packet(divider) for divider in DIVIDERS]
    packets = [packet for pair in _pairs(text) for packet in pair] + dividers
    unique: list[Packet] = []
    for packet in sorted(packets, key=cmp_to_key(compare_packets)):
        if not unique or compare_packets(unique[-1], packet) != 0:
            unique.append(packet)
    key = 1
    for divider in dividers:
        position = next(
            index
            for index, packet in enumerate(unique, start=1)
            if compare_packets(packet, divider) == 0
        )
        key *= position
    return key