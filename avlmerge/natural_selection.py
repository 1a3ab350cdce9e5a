"""Generation of sorted runs by natural selection with a bounded reservoir."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import TextIO

MEMORY_SIZE = 7
DEFAULT_SOURCE = "arquivo_desorganizado.txt"
DEFAULT_DIRECTORY = "particoes"
PARTITION_TEMPLATE = "particao{}.txt"

_END = object()


def natural_selection_runs(
    values: Iterable[int], memory_size: int = MEMORY_SIZE
) -> Iterator[list[int]]:
    """Split ``values`` into ascending runs, holding ``memory_size`` records in memory.

    The smallest record in memory is emitted; a record read in its place that is
    smaller than the last one emitted goes to a reservoir of the same size. The
    run ends once memory drains, and the reservoir seeds the next run.
    """
    if memory_size < 1:
        raise ValueError(f"memory size must be positive, got {memory_size}")
    return _runs(iter(values), memory_size)


def _runs(source: Iterator[int], memory_size: int) -> Iterator[list[int]]:
    slots: list[int | None] = [next(source, None) for _ in range(memory_size)]
    while any(slot is not None for slot in slots):
        run: list[int] = []
        reserve: list[int] = []
        while True:
            candidates = [(value, index) for index, value in enumerate(slots) if value is not None]
            if not candidates:
                break
            last, index = min(candidates)
            run.append(last)
            slots[index] = None
            while len(reserve) < memory_size:
                incoming = next(source, _END)
                if incoming is _END:
                    break
                if incoming >= last:
                    slots[index] = incoming
                    break
                reserve.append(incoming)
        yield run
        slots = reserve + [None] * (memory_size - len(reserve))


def _read_values(handle: TextIO) -> Iterator[int]:
    for line in handle:
        for token in line.split():
            yield int(token)


def write_partitions(
    source: str | PathLike[str] = DEFAULT_SOURCE,
    directory: str | PathLike[str] = DEFAULT_DIRECTORY,
    memory_size: int = MEMORY_SIZE,
) -> list[Path]:
    """Write the runs of ``source`` as numbered partition files; return their paths."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    paths: list[Path] = []
    with open(source, encoding="ascii") as handle:
        for number, run in enumerate(natural_selection_runs(_read_values(handle), memory_size)):
            path = folder / PARTITION_TEMPLATE.format(number)
            path.write_text("\n".join(map(str, run)))
            paths.append(path)
    if not paths:
        path = folder / PARTITION_TEMPLATE.format(0)
        path.write_text("")
        paths.append(path)
    return paths


def main(argv: list[str] | None = None) -> int:
    """Split an unordered record file into sorted partitions."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE)
    parser.add_argument("--directory", default=DEFAULT_DIRECTORY)
    parser.add_argument("--memory", type=int, default=MEMORY_SIZE)
    args = parser.parse_args(argv)
    try:
        write_partitions(args.source, args.directory, args.memory)
    except (OSError, ValueError) as error:
        parser.exit(1, f"error: {error}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())