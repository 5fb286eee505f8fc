import pytest

from adventsolve.y2022_day07 import (
    Node,
    parse_filesystem,
    smallest_deletable,
    sum_small_folders,
)

EXAMPLE = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


def test_sum_small_folders_example():
    assert sum_small_folders(parse_filesystem(EXAMPLE)) == 95437


def test_smallest_deletable_example():
    assert smallest_deletable(parse_filesystem(EXAMPLE)) == 24933642


def test_folder_sizes_add_up():
    root = parse_filesystem(EXAMPLE)
    assert root.size == sum(child.size for child in root)
    e = root.get_child("a").get_child("e")
    assert e.size == 584


def test_parent_navigation():
    root = parse_filesystem(EXAMPLE)
    a = root.get_child("a")
    assert a.get_child("..") is root
    assert root.get_child("missing") is None


def test_compute_sizes_on_built_tree():
    root = Node()
    folder = root.add_folder("x")
    folder.add_file("f", 10)
    root.add_file("g", 5)
    assert root.compute_sizes() == 15
    assert folder.size == 10


def test_cannot_add_to_file():
    root = Node()
    file = root.add_file("f", 1)
    with pytest.raises(ValueError):
        file.add_folder("sub")


def test_unknown_command_raises():
    with pytest.raises(ValueError):
        parse_filesystem("$ rm x\n")


def test_nothing_deletable_raises():
    root = parse_filesystem("$ cd /\n$ ls\n10 f\n")
    with pytest.raises(ValueError):
        smallest_deletable(root, total_space=100, required_space=95)