"""Command line: run one algorithm on whitespace-separated integers from stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from introalgos.matrix import (
    Matrix,
    matrix_multiplication,
    recursive_matrix_multiplication,
    strassen_multiplication,
)
from introalgos.search import binary_search, linear_search, recursive_binary_search
from introalgos.sorting import insertion_sort, merge_sort, recursive_insertion_sort
from introalgos.subarray import find_max_subarray, find_max_subarray_bruteforce


class _Tokens:
    """Reads integers one at a time from whitespace-separated text."""

    def __init__(self, text: str) -> None:
        self._words: Iterator[str] = iter(text.split())

    def next_int(self) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not an integer: {word!r}") from None

    def count(self) -> int:
        value = self.next_int()
        if value < 0:
            raise ValueError(f"size must not be negative, got {value}")
        return value

    def values(self, size: int) -> list[int]:
        return [self.next_int() for _ in range(size)]

    def sized_values(self) -> list[int]:
        return self.values(self.count())

    def matrix(self, rows: int, columns: int) -> Matrix:
        return [self.values(columns) for _ in range(rows)]


def _format_row(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def _format_matrix(matrix: Matrix) -> str:
    return "".join(_format_row(row) + "\n" for row in matrix)


def _search(find: Callable[[list[int], int], int]) -> Callable[[_Tokens], str]:
    def run(tokens: _Tokens) -> str:
        values = tokens.sized_values()
        return f"{find(values, tokens.next_int())}\n"

    return run


def _sort(sort: Callable[[list[int]], list[int]]) -> Callable[[_Tokens], str]:
    return lambda tokens: _format_row(sort(tokens.sized_values()))


def _subarray(find: Callable) -> Callable[[_Tokens], str]:
    def run(tokens: _Tokens) -> str:
        best = find(tokens.sized_values())
        return f"{best.low} {best.high} {best.sum}\n"

    return run


def _square_product(multiply: Callable) -> Callable[[_Tokens], str]:
    def run(tokens: _Tokens) -> str:
        n = tokens.count()
        a = tokens.matrix(n, n)
        b = tokens.matrix(n, n)
        return _format_matrix(multiply(a, b))

    return run


def _rectangular_product(tokens: _Tokens) -> str:
    rows_a, columns_a, rows_b, columns_b = (tokens.count() for _ in range(4))
    a = tokens.matrix(rows_a, columns_a)
    b = tokens.matrix(rows_b, columns_b)
    return _format_matrix(matrix_multiplication(a, b))


COMMANDS: dict[str, Callable[[_Tokens], str]] = {
    "linear-search": _search(linear_search),
    "binary-search": _search(binary_search),
    "recursive-binary-search": _search(recursive_binary_search),
    "insertion-sort": _sort(insertion_sort),
    "recursive-insertion-sort": _sort(recursive_insertion_sort),
    "merge-sort": _sort(merge_sort),
    "max-subarray": _subarray(find_max_subarray),
    "max-subarray-bruteforce": _subarray(find_max_subarray_bruteforce),
    "matrix-multiply": _rectangular_product,
    "recursive-matrix-multiply": _square_product(recursive_matrix_multiplication),
    "strassen": _square_product(strassen_multiplication),
}


def main(argv: list[str] | None = None) -> int:
    """Run the chosen algorithm on standard input and print its result."""
    parser = argparse.ArgumentParser(
        prog="introalgos",
        description="Read integers from standard input and run an algorithm on them.",
    )
    parser.add_argument("command", choices=sorted(COMMANDS))
    args = parser.parse_args(argv)

    try:
        output = COMMANDS[args.command](_Tokens(sys.stdin.read()))
    except ValueError as error:
        print(f"introalgos: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())