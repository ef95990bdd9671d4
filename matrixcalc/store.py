"""Named storage for the calculator's matrices."""

from __future__ import annotations

from collections.abc import Sequence

NUM_MATRICES = 26
MAX_DIM = 25
FIRST_NAME = "A"
LAST_NAME = chr(ord(FIRST_NAME) + NUM_MATRICES - 1)
NAMES = tuple(chr(ord(FIRST_NAME) + i) for i in range(NUM_MATRICES))


def index_of(name: str) -> int:
    """Return the slot number of a matrix name, with ``A`` at zero."""
    return ord(name) - ord(FIRST_NAME)


def is_valid_name(name: str) -> bool:
    """Return True when ``name`` is a single letter from ``A`` to ``Z``."""
    return len(name) == 1 and FIRST_NAME <= name <= LAST_NAME


def is_valid_dim(dim: int) -> bool:
    """Return True when ``dim`` is an allowed number of rows or columns."""
    return 1 <= dim <= MAX_DIM


class MatrixStore:
    """Matrices ``A`` to ``Z``; each starts out empty with shape 0 x 0."""

    def __init__(self) -> None:
        self._matrices: dict[str, list[list[float]]] = {name: [] for name in NAMES}

    def _check_name(self, name: str) -> None:
        if not is_valid_name(name):
            raise KeyError(f"no matrix named {name!r}")

    def get(self, name: str) -> list[list[float]]:
        """Return a copy of the rows of matrix ``name``."""
        self._check_name(name)
        return [list(row) for row in self._matrices[name]]

    def set(self, name: str, rows: Sequence[Sequence[float]]) -> None:
        """Store a copy of ``rows`` as matrix ``name``."""
        self._check_name(name)
        copied = [[float(value) for value in row] for row in rows]
        width = len(copied[0]) if copied else 0
        if any(len(row) != width for row in copied):
            raise ValueError("all rows must have the same length")
        if len(copied) > MAX_DIM or width > MAX_DIM:
            raise ValueError(f"matrix dimensions may not exceed {MAX_DIM} x {MAX_DIM}")
        self._matrices[name] = copied

    def shape(self, name: str) -> tuple[int, int]:
        """Return ``(rows, columns)`` of matrix ``name``."""
        self._check_name(name)
        rows = self._matrices[name]
        return len(rows), len(rows[0]) if rows else 0

    def copy(self, source: str, target: str) -> None:
        """Copy matrix ``source`` into ``target``."""
        self.set(target, self.get(source))