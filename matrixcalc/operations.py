"""Pure matrix operations used by the calculator commands."""

from __future__ import annotations

import random
from collections.abc import Sequence

Matrix = list[list[float]]


class DimensionError(ValueError):
    """Raised when matrices do not have the dimensions an operation needs."""


def _shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    return len(matrix), len(matrix[0]) if matrix else 0


def _require_square(matrix: Sequence[Sequence[float]]) -> int:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise DimensionError(
            f"a square matrix is required, got {rows} x {cols}"
        )
    return rows


def _require_same_shape(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> None:
    shape_a, shape_b = _shape(a), _shape(b)
    if shape_a != shape_b:
        raise DimensionError(
            "matrices must be of the same dimensions: "
            f"{shape_a[0]} x {shape_a[1]} and {shape_b[0]} x {shape_b[1]}"
        )


def find_asymmetry(matrix: Sequence[Sequence[float]]) -> tuple[int, int] | None:
    """Return the first ``(i, j)`` with ``i < j`` where ``m[i][j] != m[j][i]``.

    Scans row by row; returns None for a symmetric matrix.
    Raises ``DimensionError`` when the matrix is not square.
    """
    size = _require_square(matrix)
    return next(
        (
            (i, j)
            for i in range(size)
            for j in range(i + 1, size)
            if matrix[i][j] != matrix[j][i]
        ),
        None,
    )


def is_symmetric(matrix: Sequence[Sequence[float]]) -> bool:
    """Return True when the square ``matrix`` equals its transpose."""
    return find_asymmetry(matrix) is None


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of ``matrix`` as a new list of rows."""
    return [list(map(float, column)) for column in zip(*matrix)]


def max_sum_column(matrix: Sequence[Sequence[float]]) -> tuple[int, list[float], float]:
    """Return ``(index, column, total)`` for the column with the largest sum.

    On ties the leftmost column wins. Raises ``ValueError`` for an empty matrix.
    """
    rows, cols = _shape(matrix)
    if rows == 0 or cols == 0:
        raise ValueError("matrix is empty")
    columns = [list(map(float, column)) for column in zip(*matrix)]
    best = 0
    best_total = sum(columns[0])
    for index, column in enumerate(columns[1:], start=1):
        total = sum(column)
        if total > best_total:
            best, best_total = index, total
    return best, columns[best], best_total


def index_sum_matrix(m: int, n: int) -> Matrix:
    """Return an ``m`` x ``n`` matrix whose entry at (i, j) is i + j + 2."""
    return [[float(i + j + 2) for j in range(n)] for i in range(m)]


def random_matrix(
    m: int, n: int, maximum: int, rng: random.Random | None = None
) -> Matrix:
    """Return an ``m`` x ``n`` matrix of random integers from 0 to ``maximum``.

    Raises ``ValueError`` when ``maximum`` is below 1.
    """
    if maximum < 1:
        raise ValueError("random range maximum must be at least 1")
    generator = rng if rng is not None else random.Random()
    return [[float(generator.randint(0, maximum)) for _ in range(n)] for _ in range(m)]


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product ``a @ b``.

    Raises ``DimensionError`` when the columns of ``a`` do not match the rows of ``b``.
    """
    rows_a, cols_a = _shape(a)
    rows_b, cols_b = _shape(b)
    if cols_a != rows_b:
        raise DimensionError(
            "matrices must be of compatible dimensions: "
            f"{rows_a} x {cols_a} and {rows_b} x {cols_b}"
        )
    columns_b = list(zip(*b)) if b else []
    return [
        [float(sum(x * y for x, y in zip(row, column))) for column in columns_b]
        for row in a
    ]


def scale(k: float, matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return ``matrix`` with every entry multiplied by ``k``."""
    return [[k * value for value in row] for row in matrix]


def add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the entrywise sum of two matrices of equal shape."""
    _require_same_shape(a, b)
    return [[float(x + y) for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def subtract(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the entrywise difference ``a - b`` of two matrices of equal shape."""
    _require_same_shape(a, b)
    return [[float(x - y) for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]