"""Text helpers: trimming, line reading, splitting and small conversions."""

from __future__ import annotations

from collections.abc import Iterator

WHITESPACE = " \t\n\r\f\v"
WHITESPACE_NO_SPACE = "\t\n\r\f\v"


def trim(text: str, whitespace: str = WHITESPACE) -> str:
    """Remove the given characters from both ends of ``text``."""
    return text.strip(whitespace)


def read_lines(
    text: str, keep_empty: bool = False, keep_spaces: bool = False
) -> Iterator[str]:
    """Yield the trimmed lines of ``text``.

    Lines that are empty before trimming are skipped unless ``keep_empty``
    is set. With ``keep_spaces`` plain spaces are not trimmed.
    """
    whitespace = WHITESPACE_NO_SPACE if keep_spaces else WHITESPACE
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        if not line and not keep_empty:
            continue
        yield trim(line, whitespace)


def read_numbers(text: str) -> Iterator[int]:
    """Yield one integer per non-empty line of ``text``."""
    return (int(line) for line in read_lines(text))


def split(
    text: str,
    delimiter: str,
    skip_empty: bool = False,
    limit: int | None = None,
) -> list[str]:
    """Split ``text`` on ``delimiter``.

    Empty parts are dropped when ``skip_empty`` is set; at most ``limit``
    parts are returned when a limit is given.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if not text:
        return []
    parts = text.split(delimiter)
    if skip_empty:
        parts = [part for part in parts if part]
    if limit is not None:
        parts = parts[:limit]
    return parts


def binary_to_number(bits: str, one: str = "1") -> int:
    """Read ``bits`` as a binary number whose first character is the lowest bit."""
    return sum(1 << position for position, bit in enumerate(bits) if bit == one)


def count_substrings(haystack: str, needle: str) -> int:
    """Count the non-overlapping occurrences of ``needle`` in ``haystack``."""
    if not needle:
        return max(0, len(haystack) - 1)
    return haystack.count(needle)