"""Finding start-of-packet and start-of-message markers in a datastream."""

from __future__ import annotations


def all_different(window: str) -> bool:
    """Whether no character repeats within ``window``."""
    return len(set(window)) == len(window)


def find_marker(line: str, window_size: int) -> int:
    """Characters processed up to and including the first window of distinct ones."""
    if window_size < 1:
        raise ValueError("window_size must be at least 1")
    for end in range(window_size, len(line) + 1):
        if all_different(line[end - window_size : end]):
            return end
    raise ValueError(f"No marker of size {window_size} found")