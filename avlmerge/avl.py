"""Self-balancing AVL binary search tree of integers."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

DEMO_INSERTS = (10, 20, 30, 40, 50, 25)
DEMO_REMOVALS = (50, 40, 10)


@dataclass(eq=False)
class Node:
    """A tree node; ``height`` counts nodes on the longest downward path."""

    value: int
    height: int = 1
    left: Node | None = None
    right: Node | None = None


def _height(node: Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: Node) -> int:
    return _height(node.right) - _height(node.left)


def _rotate_left(node: Node) -> Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_right(node: Node) -> Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: Node) -> Node:
    _update(node)
    factor = _balance(node)
    if factor == 2:
        if _balance(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor == -2:
        if _balance(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: Node | None, value: int) -> Node:
    if node is None:
        return Node(value)
    if node.value > value:
        node.left = _insert(node.left, value)
    else:
        node.right = _insert(node.right, value)
    return _rebalance(node)


def _largest(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _remove(node: Node | None, value: int) -> tuple[Node | None, bool]:
    if node is None:
        return None, False
    if node.value > value:
        node.left, removed = _remove(node.left, value)
    elif node.value < value:
        node.right, removed = _remove(node.right, value)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        predecessor = _largest(node.left)
        node.value = predecessor.value
        node.left, removed = _remove(node.left, predecessor.value)
    return _rebalance(node), removed


def _preorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


class AVLTree:
    """An AVL tree holding integers; equal values are kept as separate nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value``; duplicates go to the right of their equal."""
        self.root = _insert(self.root, value)
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; absent values are ignored."""
        self.root, removed = _remove(self.root, value)
        if removed:
            self._size -= 1

    def preorder(self) -> list[int]:
        """Values in root, left, right order."""
        return list(_preorder(self.root))

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return list(_inorder(self.root))

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self.root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return _inorder(self.root)

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False


def main(argv: list[str] | None = None) -> int:
    """Build the demonstration tree and print its pre-order before and after removals."""
    argparse.ArgumentParser(description=main.__doc__).parse_args(argv)
    tree = AVLTree(DEMO_INSERTS)
    print(" ".join(map(str, tree.preorder())))
    for value in DEMO_REMOVALS:
        tree.remove(value)
    print(" ".join(map(str, tree.preorder())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())