"""Reading and writing matrices as plain text files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from matrixcalc.store import MAX_DIM


class MatrixFileError(Exception):
    """Raised when a matrix file cannot be opened, read or written."""


def matrix_path(directory: str | Path, name: str) -> Path:
    """Return the path of the file that holds matrix ``name``."""
    return Path(directory) / f"{name}.txt"


def format_matrix_file(matrix: Sequence[Sequence[float]]) -> str:
    """Return the text of a matrix file: a ``rows cols`` header, then the rows."""
    rows = len(matrix)
    cols = len(matrix[0]) if matrix else 0
    lines = [f"{rows} {cols}\n"]
    lines.extend(
        "".join(f"{format(float(value), '.17g')} " for value in row) + "\n"
        for row in matrix
    )
    return "".join(lines)


def read_matrix(path: str | Path) -> list[list[float]]:
    """Read a matrix file and return its rows.

    Raises ``MatrixFileError`` when the file cannot be opened, has no header,
    or holds too few values.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise MatrixFileError(f"error opening file '{path}'") from exc

    tokens = iter(text.split())
    try:
        rows = int(next(tokens))
        cols = int(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise MatrixFileError(f"empty file {path}") from exc
    if not (0 <= rows <= MAX_DIM and 0 <= cols <= MAX_DIM):
        raise MatrixFileError(
            f"invalid dimensions {rows} x {cols} in '{path}'"
        )

    matrix: list[list[float]] = []
    for i in range(rows):
        row: list[float] = []
        for j in range(cols):
            try:
                row.append(float(next(tokens)))
            except (StopIteration, ValueError) as exc:
                raise MatrixFileError(
                    f"error reading element [{i + 1}][{j + 1}] in '{path}'"
                ) from exc
        matrix.append(row)
    return matrix


def write_matrix(path: str | Path, matrix: Sequence[Sequence[float]]) -> None:
    """Write ``matrix`` to ``path``, creating its directory when missing."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_matrix_file(matrix))
    except OSError as exc:
        raise MatrixFileError(f"error opening file '{path}'") from exc