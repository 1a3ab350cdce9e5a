"""Generation of an unordered file of random integer records."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator
from os import PathLike
from pathlib import Path

RECORD_COUNT = 10000
RAND_MAX = 2147483647
DEFAULT_PATH = "arquivo_desorganizado.txt"


def random_records(count: int = RECORD_COUNT, seed: int | None = None) -> Iterator[int]:
    """Yield ``count`` random integers in ``[0, RAND_MAX]``."""
    if count < 0:
        raise ValueError(f"record count must not be negative, got {count}")
    rng = random.Random(seed)
    return (rng.randint(0, RAND_MAX) for _ in range(count))


def write_records(
    path: str | PathLike[str] = DEFAULT_PATH,
    count: int = RECORD_COUNT,
    seed: int | None = None,
) -> Path:
    """Write random records one per line, without a trailing newline."""
    target = Path(path)
    records = random_records(count, seed)
    target.write_text("\n".join(map(str, records)))
    return target


def main(argv: list[str] | None = None) -> int:
    """Write a file of random unordered records."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    parser.add_argument("--count", type=int, default=RECORD_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        write_records(args.path, args.count, args.seed)
    except (OSError, ValueError) as error:
        parser.exit(1, f"error: {error}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())