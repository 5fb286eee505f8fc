"""Sorting strings into naughty and nice."""

from __future__ import annotations

from itertools import pairwise

from adventsolve.text import read_lines

_VOWELS = "aeiou"
_BAD_PAIRS = frozenset({"ab", "cd", "pq", "xy"})


def _contains_three_vowels(word: str) -> bool:
    return sum(c in _VOWELS for c in word) >= 3


def _double_letters_ok(word: str) -> bool:
    repeated = False
    for a, b in pairwise(word):
        if a + b in _BAD_PAIRS:
            return False
        repeated |= a == b
    return repeated


def is_nice1(word: str) -> bool:
    """Three vowels, a doubled letter and none of the forbidden pairs."""
    return _contains_three_vowels(word) and _double_letters_ok(word)


def is_nice2(word: str) -> bool:
    """A pair appearing twice without overlap and a letter repeating one apart."""
    pair_repeats = False
    letter_repeats = False
    for index, c in enumerate(word[:-1]):
        pair = word[index : index + 2]
        rest = word[index + 2 :]
        pair_repeats |= pair in rest
        letter_repeats |= bool(rest) and c == rest[0]
    return pair_repeats and letter_repeats


def count_nice1(text: str) -> int:
    return sum(is_nice1(line) for line in read_lines(text))


def count_nice2(text: str) -> int:
    return sum(is_nice2(line) for line in read_lines(text))