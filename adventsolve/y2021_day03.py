"""Reading power consumption and life support ratings from a diagnostic report."""

from __future__ import annotations

from adventsolve.text import read_lines


def _parse(text: str) -> list[str]:
    lines = list(read_lines(text))
    if not lines:
        raise ValueError("The diagnostic report is empty")
    width = len(lines[0])
    if width == 0:
        raise ValueError("Report lines must not be blank")
    for line in lines:
        if len(line) != width:
            raise ValueError(f"Line {line!r} does not have {width} bits")
        if set(line) - {"0", "1"}:
            raise ValueError(f"Line {line!r} is not a binary number")
    return lines


def power_consumption(text: str) -> int:
    """Gamma rate times epsilon rate; ties count as a one in the gamma rate."""
    lines = _parse(text)
    gamma = "".join(
        "1" if column.count("1") >= column.count("0") else "0"
        for column in zip(*lines)
    )
    epsilon = gamma.translate(str.maketrans("01", "10"))
    return int(gamma, 2) * int(epsilon, 2)


def _rating(lines: list[str], keep_most_common: bool) -> str:
    candidates = lines
    for position in range(len(lines[0])):
        if len(candidates) == 1:
            break
        zeros = [line for line in candidates if line[position] == "0"]
        ones = [line for line in candidates if line[position] == "1"]
        if keep_most_common:
            chosen = zeros if len(zeros) > len(ones) else ones
        else:
            chosen = zeros if len(zeros) <= len(ones) else ones
        if chosen:
            candidates = chosen
    return candidates[0]


def life_support_rating(text: str) -> int:
    """Oxygen generator rating times CO2 scrubber rating."""
    lines = _parse(text)
    oxygen = _rating(lines, keep_most_common=True)
    co2 = _rating(lines, keep_most_common=False)
    return int(oxygen, 2) * int(co2, 2)