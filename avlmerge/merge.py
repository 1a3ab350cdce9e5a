"""Merging of sorted runs with a winner tree, and optimal multi-pass file merging."""

from __future__ import annotations

import argparse
import os
from collections import deque
from collections.abc import Iterable, Iterator
from contextlib import ExitStack
from os import PathLike
from pathlib import Path
from typing import TextIO

FAN_IN = 3
DEFAULT_DIRECTORY = "particoes"
DEFAULT_DESTINATION = "destino.txt"
PARTITION_TEMPLATE = "particao{}.txt"


class _Node:
    __slots__ = ("value", "source", "left", "right", "winner")

    def __init__(self, source=None, left=None, right=None):
        self.source = source
        self.left = left
        self.right = right
        self.winner = None
        self.value = None
        if source is not None:
            self.value = next(source, None)
        else:
            self.settle()

    def settle(self) -> None:
        """Take the smaller of the two children; ties go to the left."""
        self.winner = self.right if _key(self.left) > _key(self.right) else self.left
        self.value = self.winner.value

    def replay(self) -> None:
        """Advance the source that supplied the current winner."""
        if self.winner is None:
            self.value = next(self.source, None)
        else:
            self.winner.replay()
            self.settle()


def _key(node: _Node) -> tuple[bool, int]:
    return (node.value is None, node.value if node.value is not None else 0)


class WinnerTree:
    """A tournament tree yielding the merged ascending order of sorted sources."""

    def __init__(self, sources: Iterable[Iterable[int]]) -> None:
        queue = deque(_Node(source=iter(source)) for source in sources)
        if not queue:
            raise ValueError("a winner tree needs at least one source")
        while len(queue) > 1:
            left = queue.popleft()
            right = queue.popleft()
            queue.append(_Node(left=left, right=right))
        self._root = queue[0]

    def __iter__(self) -> Iterator[int]:
        root = self._root
        while root.value is not None:
            yield root.value
            root.replay()


def merge_runs(runs: Iterable[Iterable[int]]) -> Iterator[int]:
    """Merge sorted runs into one ascending sequence."""
    yield from WinnerTree(runs)


def _read_values(handle: TextIO) -> Iterator[int]:
    for line in handle:
        for token in line.split():
            yield int(token)


def optimal_merge(
    directory: str | PathLike[str] = DEFAULT_DIRECTORY,
    partition_count: int = 1,
    fan_in: int = FAN_IN,
    destination: str | PathLike[str] = DEFAULT_DESTINATION,
) -> Path:
    """Merge numbered partitions ``fan_in`` at a time until one file remains.

    Each merge writes a new numbered partition that joins the back of the queue;
    the last remaining partition is moved to ``destination``.
    """
    if partition_count < 1:
        raise ValueError(f"partition count must be positive, got {partition_count}")
    if fan_in < 2:
        raise ValueError(f"fan-in must be at least 2, got {fan_in}")
    folder = Path(directory)
    pending = deque(folder / PARTITION_TEMPLATE.format(n) for n in range(partition_count))
    next_number = partition_count
    while len(pending) > 1:
        batch = [pending.popleft() for _ in range(min(fan_in, len(pending)))]
        output = folder / PARTITION_TEMPLATE.format(next_number)
        next_number += 1
        with ExitStack() as stack:
            handles = [stack.enter_context(open(path, encoding="ascii")) for path in batch]
            sink = stack.enter_context(open(output, "w", encoding="ascii"))
            for value in merge_runs(_read_values(handle) for handle in handles):
                sink.write(f"{value}\n")
        pending.append(output)
    target = Path(destination)
    os.replace(pending[0], target)
    return target


def main(argv: list[str] | None = None) -> int:
    """Merge sorted partition files into a single destination file."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("partitions", nargs="?", type=int, default=None)
    parser.add_argument("--directory", default=DEFAULT_DIRECTORY)
    parser.add_argument("--destination", default=DEFAULT_DESTINATION)
    parser.add_argument("--fan-in", type=int, default=FAN_IN)
    args = parser.parse_args(argv)
    count = args.partitions
    try:
        if count is None:
            count = int(input("Number of partitions: "))
        optimal_merge(args.directory, count, args.fan_in, args.destination)
    except (OSError, ValueError) as error:
        parser.exit(1, f"error: {error}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())