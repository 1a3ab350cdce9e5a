import random
from itertools import chain

import pytest

from avlmerge.merge import WinnerTree, main, merge_runs, optimal_merge


def _write_partitions(folder, runs):
    folder.mkdir(parents=True, exist_ok=True)
    for number, run in enumerate(runs):
        (folder / f"particao{number}.txt").write_text("\n".join(map(str, run)))


def _random_runs(seed, count):
    rng = random.Random(seed)
    return [sorted(rng.randint(0, 1000) for _ in range(rng.randint(1, 30))) for _ in range(count)]


def _read(path):
    return [int(token) for token in path.read_text().split()]


def test_merge_interleaved_runs():
    runs = [[1, 4, 7], [2, 5, 8], [3, 6, 9]]
    assert list(merge_runs(runs)) == sorted(chain.from_iterable(runs))


@pytest.mark.parametrize("count", [1, 2, 3, 5, 8])
def test_winner_tree_merges_any_number_of_sources(count):
    runs = _random_runs(count, count)
    assert list(WinnerTree(runs)) == sorted(chain.from_iterable(runs))


def test_winner_tree_with_empty_sources():
    runs = [[], [3, 3, 9], [], [1, 10]]
    assert list(WinnerTree(runs)) == sorted(chain.from_iterable(runs))


def test_winner_tree_needs_a_source():
    with pytest.raises(ValueError):
        WinnerTree([])


@pytest.mark.parametrize("count,fan_in", [(1, 3), (2, 3), (4, 3), (7, 2), (10, 4)])
def test_optimal_merge_sorts_everything(tmp_path, count, fan_in):
    runs = _random_runs(count + fan_in, count)
    folder = tmp_path / "parts"
    _write_partitions(folder, runs)
    target = optimal_merge(folder, count, fan_in, tmp_path / "out.txt")
    assert target == tmp_path / "out.txt"
    assert _read(target) == sorted(chain.from_iterable(runs))


def test_optimal_merge_intermediate_files(tmp_path):
    folder = tmp_path / "parts"
    runs = _random_runs(3, 4)
    _write_partitions(folder, runs)
    optimal_merge(folder, 4, 3, tmp_path / "out.txt")
    assert (folder / "particao4.txt").exists()
    assert not (folder / "particao5.txt").exists()
    assert sorted(_read(folder / "particao4.txt")) == _read(folder / "particao4.txt")


def test_optimal_merge_replaces_existing_destination(tmp_path):
    folder = tmp_path / "parts"
    runs = [[1, 5], [2, 3]]
    _write_partitions(folder, runs)
    target = tmp_path / "out.txt"
    target.write_text("stale")
    optimal_merge(folder, 2, 3, target)
    assert _read(target) == sorted(chain.from_iterable(runs))


@pytest.mark.parametrize("count,fan_in", [(0, 3), (2, 1)])
def test_optimal_merge_rejects_bad_arguments(tmp_path, count, fan_in):
    with pytest.raises(ValueError):
        optimal_merge(tmp_path, count, fan_in, tmp_path / "out.txt")


def test_optimal_merge_missing_partition(tmp_path):
    with pytest.raises(FileNotFoundError):
        optimal_merge(tmp_path, 2, 3, tmp_path / "out.txt")


def test_main_with_argument(tmp_path):
    folder = tmp_path / "parts"
    runs = _random_runs(21, 5)
    _write_partitions(folder, runs)
    target = tmp_path / "out.txt"
    assert main(["5", "--directory", str(folder), "--destination", str(target)]) == 0
    assert _read(target) == sorted(chain.from_iterable(runs))


def test_main_prompts_for_count(tmp_path, monkeypatch):
    folder = tmp_path / "parts"
    runs = _random_runs(22, 3)
    _write_partitions(folder, runs)
    target = tmp_path / "out.txt"
    monkeypatch.setattr("builtins.input", lambda prompt: "3")
    assert main(["--directory", str(folder), "--destination", str(target)]) == 0
    assert _read(target) == sorted(chain.from_iterable(runs))