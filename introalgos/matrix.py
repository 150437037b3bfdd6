"""Matrix arithmetic: sums, differences and three ways to multiply."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]
MatrixLike = Sequence[Sequence[int]]


def _shape(matrix: MatrixLike) -> tuple[int, int]:
    """Return (rows, columns) of ``matrix``; reject ragged rows."""
    rows = len(matrix)
    columns = len(matrix[0]) if rows else 0
    if any(len(row) != columns for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, columns


def _require_same_shape(a: MatrixLike, b: MatrixLike) -> None:
    shape_a, shape_b = _shape(a), _shape(b)
    if shape_a != shape_b:
        raise ValueError(f"shapes differ: {shape_a} and {shape_b}")


def matrix_sum(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    _require_same_shape(a, b)
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def matrix_sub(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Return the element-wise difference ``a - b`` of two matrices of the same shape."""
    _require_same_shape(a, b)
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def matrix_multiplication(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Return the product ``a · b`` by the triple-loop definition, O(n^3).

    ``a`` is rows_a x columns_a and ``b`` must have columns_a rows.
    """
    _, columns_a = _shape(a)
    rows_b, _ = _shape(b)
    if columns_a != rows_b:
        raise ValueError(
            f"cannot multiply: a has {columns_a} columns but b has {rows_b} rows"
        )
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def _square_power_of_two(a: MatrixLike, b: MatrixLike) -> tuple[Matrix, Matrix]:
    """Validate that both are n x n with n a power of two; return list copies."""
    rows_a, columns_a = _shape(a)
    rows_b, columns_b = _shape(b)
    if rows_a != columns_a or rows_b != columns_b or rows_a != rows_b:
        raise ValueError("both matrices must be square and of the same size")
    n = rows_a
    if n < 1 or n & (n - 1):
        raise ValueError(f"matrix size must be a power of two, got {n}")
    return [list(row) for row in a], [list(row) for row in b]


def _quadrants(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    half = len(m) // 2
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _join(c11: Matrix, c12: Matrix, c21: Matrix, c22: Matrix) -> Matrix:
    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def recursive_matrix_multiplication(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Return ``a · b`` by splitting into quadrants: eight half-size products, O(n^3).

    Both matrices must be n x n with n a power of two.
    """

    def multiply(x: Matrix, y: Matrix) -> Matrix:
        if len(x) == 1:
            return [[x[0][0] * y[0][0]]]
        a11, a12, a21, a22 = _quadrants(x)
        b11, b12, b21, b22 = _quadrants(y)
        return _join(
            matrix_sum(multiply(a11, b11), multiply(a12, b21)),
            matrix_sum(multiply(a11, b12), multiply(a12, b22)),
            matrix_sum(multiply(a21, b11), multiply(a22, b21)),
            matrix_sum(multiply(a21, b12), multiply(a22, b22)),
        )

    return multiply(*_square_power_of_two(a, b))


def strassen_multiplication(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Return ``a · b`` by Strassen's method: seven half-size products, O(n^lg 7).

    Both matrices must be n x n with n a power of two.
    """

    def multiply(x: Matrix, y: Matrix) -> Matrix:
        if len(x) == 1:
            return [[x[0][0] * y[0][0]]]
        a11, a12, a21, a22 = _quadrants(x)
        b11, b12, b21, b22 = _quadrants(y)

        p1 = multiply(a11, matrix_sub(b12, b22))
        p2 = multiply(matrix_sum(a11, a12), b22)
        p3 = multiply(matrix_sum(a21, a22), b11)
        p4 = multiply(a22, matrix_sub(b21, b11))
        p5 = multiply(matrix_sum(a11, a22), matrix_sum(b11, b22))
        p6 = multiply(matrix_sub(a12, a22), matrix_sum(b21, b22))
        p7 = multiply(matrix_sub(a11, a21), matrix_sum(b11, b12))

        c11 = matrix_sum(matrix_sub(matrix_sum(p5, p4), p2), p6)
        c12 = matrix_sum(p1, p2)
        c21 = matrix_sum(p3, p4)
        c22 = matrix_sub(matrix_sub(matrix_sum(p5, p1), p3), p7)
        return _join(c11, c12, c21, c22)

    return multiply(*_square_power_of_two(a, b))