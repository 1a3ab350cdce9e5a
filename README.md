# avlmerge

Small building blocks for in-memory and external sorting of integers:

- `avlmerge.avl`: a self-balancing AVL tree of integers (`AVLTree`, built
  from `Node` objects).
- `avlmerge.generator`: writes a file of random, unsorted integer records.
- `avlmerge.natural_selection`: splits a sequence or file of records into
  ascending runs by natural selection, with a bounded memory and a reservoir
  of the same size.
- `avlmerge.merge`: merges sorted runs with a winner tree (`WinnerTree`), and
  merges numbered partition files a few at a time until one sorted file
  remains.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from avlmerge.avl import AVLTree

tree = AVLTree([10, 20, 30, 40, 50, 25])
print(tree.preorder())   # root first, then left and right subtrees
print(tree.inorder())    # ascending order
tree.remove(50)
print(30 in tree, len(tree), tree.height())
```

Equal values are kept as separate nodes, and removing a value that is not in
the tree leaves it unchanged. Iterating over a tree yields its values in
ascending order.

Producing sorted runs and merging them:

```python
from avlmerge.natural_selection import natural_selection_runs
from avlmerge.merge import merge_runs

runs = natural_selection_runs([30, 14, 15, 75, 32, 6, 5, 81, 48, 41], memory_size=7)
print(list(merge_runs(runs)))
```

`WinnerTree` can also be used directly on any iterables of sorted integers;
iterating over it yields the smallest remaining value at each step. It raises
`ValueError` when given no sources.

For files, `generator.write_records(path, count, seed)` writes random
records one per line, `natural_selection.write_partitions(source, directory,
memory_size)` writes the runs as `particao0.txt`, `particao1.txt`, ... in a
directory and returns their paths, and `merge.optimal_merge(directory,
partition_count, fan_in, destination)` merges those partitions `fan_in` at a
time. Each merge writes a new numbered partition that joins the back of the
queue; the last one left is moved to `destination`.

## Command-line tools

The tools form an external-sort pipeline that works on files in the current
directory:

```
avlmerge-generate             # write arquivo_desorganizado.txt with random records
avlmerge-partition            # cut it into sorted runs under particoes/
avlmerge-merge 4              # merge particao0.txt..particao3.txt into destino.txt
```

- `avlmerge-generate [path] [--count N] [--seed S]`: 10000 records by default.
- `avlmerge-partition [source] [--directory DIR] [--memory M]`: memory of 7
  records by default.
- `avlmerge-merge [partitions] [--directory DIR] [--destination FILE] [--fan-in K]`:
  merges 3 files at a time by default; when the number of partitions is not
  given, it is asked for on standard input.

`avlmerge-avl` prints an AVL tree's pre-order listing after inserting
10, 20, 30, 40, 50 and 25, and again after removing 50, 40 and 10.

Each tool accepts `--help`.

## Limitations

Records are plain integers, one or more per line, separated by whitespace;
there are no keys with attached data. The AVL tree lives in memory only and
is not stored to disk. `avlmerge-merge` does not count the partitions itself:
it must be told how many numbered partition files to merge.