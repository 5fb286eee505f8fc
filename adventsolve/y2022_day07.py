"""Rebuilding a directory tree from a terminal session and measuring it."""

from __future__ import annotations

from collections.abc import Iterator

from adventsolve.text import read_lines

TOTAL_SPACE = 70_000_000
REQUIRED_SPACE = 30_000_000
SMALL_FOLDER_LIMIT = 100_000


class Node:
    """A file or a folder; a folder's size is the sum of what it holds."""

    def __init__(
        self,
        name: str = "/",
        size: int = 0,
        is_file: bool = False,
        parent: Node | None = None,
    ) -> None:
        self.name = name
        self.size = size
        self.is_file = is_file
        self.parent = parent
        self._children: dict[str, Node] = {}

    def __iter__(self) -> Iterator[Node]:
        return iter(self._children.values())

    def __repr__(self) -> str:
        kind = "file" if self.is_file else "folder"
        return f"Node({self.name!r}, {kind}, size={self.size})"

    @property
    def is_folder(self) -> bool:
        return not self.is_file

    def _add(self, child: Node) -> Node:
        if self.is_file:
            raise ValueError(f"Cannot add {child.name!r} to file {self.name!r}")
        self._children[child.name] = child
        return child

    def add_file(self, name: str, size: int) -> Node:
        """Add a file of the given size and return it."""
        return self._add(Node(name, size, True, self))

    def add_folder(self, name: str) -> Node:
        """Add an empty folder and return it."""
        return self._add(Node(name, 0, False, self))

    def get_child(self, name: str) -> Node | None:
        """The child called ``name``, the parent for ``..``, or None."""
        if name == "..":
            return self.parent
        return self._children.get(name)

    def compute_sizes(self) -> int:
        """Set every folder's size from its contents and return this node's size."""
        if self.is_folder:
            self.size = sum(child.compute_sizes() for child in self)
        return self.size


def parse_filesystem(text: str) -> Node:
    """The root folder described by ``cd``/``ls`` output, with sizes computed."""
    root = Node()
    current = root
    for line in read_lines(text):
        parts = line.split(" ", 2)
        if parts[0] == "$":
            if len(parts) < 2:
                raise ValueError(f"Missing command in {line!r}")
            command = parts[1]
            if command == "cd":
                if len(parts) != 3:
                    raise ValueError(f"Missing directory in {line!r}")
                target = parts[2]
                if target == "/":
                    current = root
                    continue
                child = current.get_child(target)
                if child is None:
                    if target == "..":
                        raise ValueError("Cannot leave the root folder")
                    child = current.add_folder(target)
                current = child
            elif command != "ls":
                raise ValueError(f"Unknown instruction {command}")
            continue
        if len(parts) < 2:
            raise ValueError(f"Invalid listing {line!r}")
        info, name = parts[0], parts[1]
        if current.get_child(name) is not None:
            continue
        if info == "dir":
            current.add_folder(name)
        else:
            current.add_file(name, int(info))
    root.compute_sizes()
    return root


def sum_small_folders(root: Node, max_size: int = SMALL_FOLDER_LIMIT) -> int:
    """Sum of the sizes of all folders, the root included, of at most ``max_size``."""
    own = root.size if root.is_folder and root.size <= max_size else 0
    return own + sum(sum_small_folders(child, max_size) for child in root)


def _folders_below(node: Node) -> Iterator[Node]:
    for child in node:
        if child.is_folder:
            yield child
            yield from _folders_below(child)


def smallest_deletable(
    root: Node,
    total_space: int = TOTAL_SPACE,
    required_space: int = REQUIRED_SPACE,
) -> int:
    """Size of the smallest folder whose removal frees the required space."""
    max_used = total_space - required_space
    sizes = [
        folder.size
        for folder in _folders_below(root)
        if max_used - root.size + folder.size > 0
    ]
    if not sizes:
        raise ValueError("No folder frees enough space")
    return min(sizes)