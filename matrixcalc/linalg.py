"""Row reduction and determinants on matrices stored as lists of rows."""

from __future__ import annotations

import math
from collections.abc import Sequence

EPSILON = 1e-7


def is_zero(x: float) -> bool:
    """Return True when ``x`` lies strictly within ``EPSILON`` of zero."""
    return -EPSILON < x < EPSILON


def reduce_line(
    rows: list[list[float]],
    pivot: int,
    pivot_value: float,
    target: int,
    factor: float,
    start: int,
) -> None:
    """Replace row ``target`` with ``target - factor / pivot_value * pivot``.

    Only the entries from column ``start`` onwards are touched.
    """
    ratio = factor / pivot_value
    target_row = rows[target]
    target_row[start:] = [
        value - ratio * pivot_entry
        for value, pivot_entry in zip(target_row[start:], rows[pivot][start:])
    ]


def gauss_reduction(rows: list[list[float]], columns: int) -> list[tuple[int, int]]:
    """Reduce ``rows`` in place by Gauss-Jordan elimination.

    The last of ``columns`` columns is never used as a pivot column, so an
    augmented matrix keeps its right-hand side. Returns the row swaps made,
    as ``(pivot_row, destination_row)`` pairs in the order they happened.
    """
    swaps: list[tuple[int, int]] = []
    lead = 0
    height = len(rows)
    for column in range(columns - 1):
        if lead >= height:
            break
        pivot = next(
            (line for line in range(lead, height) if not is_zero(rows[line][column])),
            None,
        )
        if pivot is None:
            continue
        if pivot != lead:
            rows[pivot], rows[lead] = rows[lead], rows[pivot]
            swaps.append((pivot, lead))

        pivot_value = rows[lead][column]
        for index, row in enumerate(rows):
            if index != lead and not is_zero(row[column]):
                reduce_line(rows, lead, pivot_value, index, row[column], column)
        lead += 1
    return swaps


def determinant(rows: Sequence[Sequence[float]]) -> float:
    """Return the product of the diagonal after reducing a copy of ``rows``.

    Row swaps made during the reduction do not change the sign of the result.
    Raises ``ValueError`` when the matrix is not square.
    """
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("determinant requires a square matrix")
    work = [list(map(float, row)) for row in rows]
    gauss_reduction(work, size)
    return float(math.prod((work[i][i] for i in range(size)), start=1.0))