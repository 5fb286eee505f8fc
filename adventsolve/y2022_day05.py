"""Rearranging stacks of crates with a crane."""

from __future__ import annotations

from adventsolve.text import read_lines


def _stack(stacks: list[list[str]], number: int) -> list[str]:
    if not 1 <= number <= len(stacks):
        raise ValueError(f"There is no stack {number}")
    return stacks[number - 1]


def _move(
    stacks: list[list[str]], line: str, grab_multiple: bool
) -> None:
    tokens = line.split()
    if len(tokens) != 6 or tokens[0] != "move":
        raise ValueError(f"Invalid move {line!r}")
    count = int(tokens[1])
    source = _stack(stacks, int(tokens[3]))
    target = _stack(stacks, int(tokens[5]))
    if not 0 <= count <= len(source):
        raise ValueError(
            f"Cannot move {count} crates from a stack of {len(source)}"
        )
    if grab_multiple:
        split_at = len(source) - count
        target.extend(source[split_at:])
        del source[split_at:]
    else:
        for _ in range(count):
            target.append(source.pop())


def rearrange(text: str, grab_multiple: bool = False) -> str:
    """The crates on top of each stack after every move has been carried out.

    With ``grab_multiple`` the crane lifts several crates at once and keeps
    their order; otherwise it moves them one at a time.
    """
    stacks: list[list[str]] = []
    num_stacks = 0
    for line in read_lines(text, keep_spaces=True):
        if line.startswith("m"):
            _move(stacks, line, grab_multiple)
            continue
        if len(line) < 2:
            raise ValueError(f"Invalid crate line {line!r}")
        if line[1] == "1":
            num_stacks = int(line.split()[-1])
            while len(stacks) < num_stacks:
                stacks.append([])
            for stack in stacks:
                stack.reverse()
            continue
        # Stack labels sit at every fourth column; the list is reversed later.
        for index, crate in enumerate(line[1::4]):
            if crate == " ":
                continue
            while len(stacks) <= index:
                stacks.append([])
            stacks[index].append(crate)
    tops = "".join(stack[-1] for stack in stacks if stack)
    return tops.ljust(num_stacks)