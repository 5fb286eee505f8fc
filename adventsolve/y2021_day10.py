"""Scoring corrupted and incomplete lines of bracket navigation syntax."""

from __future__ import annotations

from adventsolve.text import read_lines

_OPENING = "([{<"
_CLOSING = ")]}>"
_ILLEGAL_SCORES = (3, 57, 1197, 25137)


def line_score(line: str, autocomplete: bool = False) -> int:
    """Score one line.

    Without ``autocomplete`` a corrupted line scores its first illegal
    character and anything else scores 0. With ``autocomplete`` a corrupted
    line scores 0 and an incomplete one scores its completion.
    """
    if not line:
        raise ValueError("Not handling empty strings")
    if line[0] in _CLOSING:
        raise ValueError("A line must not start with a closing brace")
    expected: list[str] = []
    for c in line:
        pos = _CLOSING.find(c)
        if pos >= 0:
            if expected and expected[-1] == c:
                expected.pop()
            else:
                return 0 if autocomplete else _ILLEGAL_SCORES[pos]
        else:
            pos = _OPENING.find(c)
            if pos < 0:
                raise ValueError(f"Invalid character {c!r}")
            expected.append(_CLOSING[pos])
    if not autocomplete:
        return 0
    score = 0
    for brace in reversed(expected):
        score = score * 5 + _CLOSING.index(brace) + 1
    return score


def syntax_error_score(text: str) -> int:
    """Sum of the illegal-character scores of all corrupted lines."""
    return sum(line_score(line) for line in read_lines(text))


def autocomplete_score(text: str) -> int:
    """Middle completion score among the incomplete lines."""
    scores = sorted(
        score
        for score in (line_score(line, autocomplete=True) for line in read_lines(text))
        if score
    )
    if not scores:
        raise ValueError("No incomplete lines to score")
    return scores[len(scores) // 2]