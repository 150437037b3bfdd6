# introalgos

Small, readable implementations of the classic algorithms of an
introductory algorithms course, with a command that runs them on integers
read from standard input.

- **Searching** (`introalgos.search`): `linear_search`, `binary_search`,
  `recursive_binary_search`. Each returns the index of the key, or `-1`
  when it is absent. The binary variants expect the sequence to be sorted
  in ascending order.
- **Sorting** (`introalgos.sorting`): `insertion_sort`,
  `recursive_insertion_sort`, `merge_sort`. Each takes any iterable and
  returns a new ascending list; the input is left untouched. Merge sort is
  stable. The recursive insertion sort recurses once per element, so very
  long inputs hit Python's recursion limit.
- **Maximum subarray** (`introalgos.subarray`): the divide-and-conquer
  `find_max_subarray`, its helper `find_max_crossing_subarray`, and the
  quadratic `find_max_subarray_bruteforce`. Results are frozen `Subarray`
  values with `low` and `high` (inclusive indices) and `sum`. An empty
  sequence raises `ValueError`.
- **Matrices** (`introalgos.matrix`): `matrix_sum`, `matrix_sub`, the
  triple-loop `matrix_multiplication` (any compatible shapes), the
  divide-and-conquer `recursive_matrix_multiplication`, and
  `strassen_multiplication`. The two recursive methods need square
  matrices of the same size, that size a power of two. Ragged rows,
  mismatched shapes and unsupported sizes raise `ValueError`.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from introalgos.search import binary_search, linear_search
from introalgos.sorting import merge_sort
from introalgos.subarray import find_max_subarray
from introalgos.matrix import strassen_multiplication

values = merge_sort([5, 2, 4, 6, 1, 3])
print(values)                       # [1, 2, 3, 4, 5, 6]
print(binary_search(values, 4))     # 3
print(linear_search(values, 7))     # -1, the key is absent

best = find_max_subarray([13, -3, -25, 20, -3, -16, -23, 18, 20, -7, 12])
print(best.low, best.high, best.sum)   # 7 10 43

print(strassen_multiplication([[1, 3], [7, 5]], [[6, 8], [4, 2]]))
# [[18, 14], [62, 66]]
```

## Command line

Installing the package provides an `introalgos` command. It takes the name
of an algorithm, reads whitespace-separated integers from standard input
and prints the result:

```
introalgos --help
echo "6 5 2 4 6 1 3" | introalgos merge-sort
```

| Command | Input | Output |
| --- | --- | --- |
| `linear-search`, `binary-search`, `recursive-binary-search` | size, the values, the key | the index, or `-1` |
| `insertion-sort`, `recursive-insertion-sort`, `merge-sort` | size, the values | the sorted values, each followed by a space |
| `max-subarray`, `max-subarray-bruteforce` | size, the values | `low high sum` |
| `matrix-multiply` | rows and columns of A, rows and columns of B, then A and B row by row | the product, one row per line |
| `recursive-matrix-multiply`, `strassen` | n, then the two n x n matrices row by row | the product, one row per line |

Input that runs out early, is not an integer, gives a negative size or is
rejected by the algorithm makes the command print a message prefixed with
`introalgos:` on standard error and exit with status 1.

## What it does not do

The command reads only from standard input and writes only to standard
output; it has no options for files or for other number types. The
algorithms work on in-memory Python sequences only.