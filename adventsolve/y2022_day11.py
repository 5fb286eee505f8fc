"""Tracking items thrown between monkeys to measure monkey business."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from math import prod

from adventsolve.text import read_lines

_OPERATORS = {"+": operator.add, "-": operator.sub, "*": operator.mul}


@dataclass
class Monkey:
    """A monkey's items, its worry operation and its throwing test.

    An ``operand`` of None stands for the old worry level itself.
    """

    items: list[int] = field(default_factory=list)
    operator: str = "+"
    operand: int | None = 0
    divisible_by: int = 1
    on_true: int = 0
    on_false: int = 0

    def inspect(self, old: int) -> int:
        """The new worry level after the monkey's operation."""
        other = old if self.operand is None else self.operand
        return _OPERATORS[self.operator](old, other)

    def target(self, worry: int) -> int:
        """The monkey an item with ``worry`` is thrown to."""
        return self.on_true if worry % self.divisible_by == 0 else self.on_false


def _parse_line(monkeys: list[Monkey], line: str) -> None:
    items = line.split(",")
    words = items[0].split()
    keyword = words[0]
    if keyword == "Monkey":
        monkeys.append(Monkey())
        return
    if not monkeys:
        raise ValueError(f"{line!r} comes before any monkey")
    current = monkeys[-1]
    if keyword == "Starting":
        current.items.append(int(words[2]))
        current.items.extend(int(item) for item in items[1:])
    elif keyword == "Operation:":
        symbol = words[4]
        if symbol not in _OPERATORS:
            raise ValueError(f"Unknown operator {symbol!r}")
        current.operator = symbol
        current.operand = None if words[5] == "old" else int(words[5])
    elif keyword == "Test:":
        current.divisible_by = int(words[3])
    elif keyword == "If":
        if words[1] == "true:":
            current.on_true = int(words[5])
        elif words[1] == "false:":
            current.on_false = int(words[5])
        else:
            raise ValueError(f"Invalid if: {words[1]}")
    else:
        raise ValueError(f"Invalid instruction: {keyword}")


def parse_monkeys(text: str) -> list[Monkey]:
    """The monkeys described in ``text``, in order."""
    monkeys: list[Monkey] = []
    for line in read_lines(text):
        try:
            _parse_line(monkeys, line)
        except IndexError:
            raise ValueError(f"Incomplete line {line!r}") from None
    return monkeys


def monkey_business(
    text: str, num_rounds: int = 20, num_average: int = 2, relief_factor: int = 3
) -> int:
    """Product of the inspection counts of the ``num_average`` busiest monkeys.

    A ``relief_factor`` of 1 keeps worry levels bounded by the product of all
    divisors instead of dividing them.
    """
    monkeys = parse_monkeys(text)
    if num_average > len(monkeys):
        raise ValueError("Not enough monkeys to average over")
    divisible_max = prod(monkey.divisible_by for monkey in monkeys)
    inspected = [0] * len(monkeys)
    for _ in range(num_rounds):
        for monkey_id, monkey in enumerate(monkeys):
            items, monkey.items = monkey.items, []
            for item in items:
                worry = monkey.inspect(item)
                if relief_factor == 1:
                    worry %= divisible_max
                else:
                    worry //= relief_factor
                monkeys[monkey.target(worry)].items.append(worry)
            inspected[monkey_id] += len(items)
    return prod(sorted(inspected, reverse=True)[:num_average])