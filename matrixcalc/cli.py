"""The interactive matrix calculator."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from matrixcalc.console import Console, InputClosed, banner_text, clear_screen, help_text
from matrixcalc.fileio import MatrixFileError, matrix_path, read_matrix, write_matrix
from matrixcalc.linalg import gauss_reduction
from matrixcalc.operations import (
    DimensionError,
    add,
    find_asymmetry,
    index_sum_matrix,
    max_sum_column,
    multiply,
    random_matrix,
    scale,
    subtract,
    transpose,
)
from matrixcalc.store import MatrixStore

Matrix = list[list[float]]


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Return the rows of ``matrix`` with three decimals and tab separators."""
    return "".join(
        "".join(f"{value:.3f}\t" for value in row) + "\n" for row in matrix
    )


def _sentence(exc: Exception) -> str:
    text = str(exc)
    return text[:1].upper() + text[1:] + "!\n"


class Calculator:
    """Reads one-letter commands and applies them to a store of matrices."""

    PROMPT = "('h' for manual) choose an action: "

    def __init__(
        self,
        console: Console,
        store: MatrixStore | None = None,
        directory: str | Path = "matrices",
    ) -> None:
        self.console = console
        self.store = store if store is not None else MatrixStore()
        self.directory = Path(directory)
        self.rng = random.Random()
        self._commands: dict[str, Callable[[], None]] = {
            "h": self._help,
            "c": clear_screen,
            "s": self._save,
            "i": self._initialize,
            "R": self._initialize_random,
            "r": self._read,
            "w": self._write,
            "p": self._print,
            "m": self._check_symmetry,
            "t": self._transpose,
            "^": self._max_column,
            "d": self._duplicate,
            "*": self._scale,
            "+": self._add,
            "-": self._subtract,
            "x": self._multiply,
            "g": self._reduce,
            "D": self._determinant,
        }

    def dispatch(self, choice: str) -> bool:
        """Run the command ``choice``; return False when it asks to quit."""
        if choice == "q":
            self.console.write("Exit ...\n")
            return False
        handler = self._commands.get(choice)
        if handler is None:
            self.console.write("Invalid choice!\n")
        else:
            handler()
        return True

    def run(self) -> int:
        """Greet, then run commands until quit (0) or end of input (2)."""
        clear_screen()
        self.console.write(banner_text())
        try:
            while self.dispatch(self.console.read_value(self.PROMPT, str)):
                pass
        except InputClosed:
            self.console.write("\nEOF detected. Exiting...\n")
            self.console.write("Exit ...\n")
            return 2
        return 0

    def _ask_name(self, label: str) -> str:
        self.console.write(label)
        return self.console.read_name()

    def _fill(self, m: int, n: int) -> Matrix:
        rows: Matrix = []
        for i in range(m):
            self.console.write(f"Row #{i + 1}:\n")
            rows.append(
                [
                    self.console.read_value(f"({i + 1}, {j + 1}): ", float)
                    for j in range(n)
                ]
            )
            self.console.write("\n")
        return rows

    def _dims_message(self, first: str, second: str) -> str:
        m1, n1 = self.store.shape(first)
        m2, n2 = self.store.shape(second)
        return f"dim {first} = {m1} x {n1}, dim {second} = {m2} x {n2}\n"

    def _square_size(self, name: str) -> int | None:
        m, n = self.store.shape(name)
        if m != n:
            self.console.write("You need to choose a square matrix!\n")
            self.console.write(f"dim {name} = {m} x {n}\n")
            return None
        return m

    def _report_swaps(self, swaps: list[tuple[int, int]]) -> None:
        for first, second in swaps:
            self.console.write(f"swapping line {first + 1} with {second + 1}\n")

    def _help(self) -> None:
        clear_screen()
        self.console.write(help_text())

    def _save(self) -> None:
        m, n = self.console.read_dims()
        name = self._ask_name("save in ")
        self.store.set(name, self._fill(m, n))

    def _initialize(self) -> None:
        m, n = self.console.read_dims()
        name = self._ask_name("initialize ")
        self.store.set(name, index_sum_matrix(m, n))

    def _initialize_random(self) -> None:
        m, n = self.console.read_dims()
        name = self._ask_name("random initialize ")
        while (maximum := self.console.read_value("Random range max: ", int)) < 1:
            pass
        self.store.set(name, random_matrix(m, n, maximum, self.rng))

    def _read(self) -> None:
        name = self._ask_name("read ")
        path = matrix_path(self.directory, name)
        try:
            matrix = read_matrix(path)
        except MatrixFileError as exc:
            self.console.write(_sentence(exc))
            return
        self.store.set(name, matrix)
        rows = len(matrix)
        cols = len(matrix[0]) if matrix else 0
        self.console.write(f"File '{path}' correctly read! ({rows} x {cols})\n")

    def _write(self) -> None:
        name = self._ask_name("write ")
        m, n = self.store.shape(name)
        if m == 0 or n == 0:
            self.console.write(f"Matrix {name} does not exist!\n")
            m, n = self.console.read_dims()
            self.store.set(name, self._fill(m, n))
        path = matrix_path(self.directory, name)
        try:
            write_matrix(path, self.store.get(name))
        except MatrixFileError as exc:
            self.console.write(_sentence(exc))
            return
        self.console.write(f"File '{path}' correctly written!\n")

    def _print(self) -> None:
        name = self._ask_name("print ")
        self.console.write(format_matrix(self.store.get(name)))

    def _check_symmetry(self) -> None:
        name = self._ask_name("check ")
        if self._square_size(name) is None:
            return
        mismatch = find_asymmetry(self.store.get(name))
        if mismatch is None:
            self.console.write(f"Matrix {name} is symmetric!\n")
            return
        i, j = mismatch[0] + 1, mismatch[1] + 1
        self.console.write(f"{name}[{i}][{j}] != {name}[{j}][{i}]\n")
        self.console.write(f"Matrix {name} is not symmetric!\n")

    def _transpose(self) -> None:
        source = self._ask_name("transpose ")
        target = self._ask_name("save in ")
        self.store.set(target, transpose(self.store.get(source)))

    def _max_column(self) -> None:
        name = self._ask_name("max sum column ")
        try:
            index, column, total = max_sum_column(self.store.get(name))
        except ValueError:
            self.console.write(f"Matrix {name} does not exist!\n")
            return
        values = ", ".join(f"{value:.6f}" for value in column)
        self.console.write(f"{name}^{index + 1} : ( {values} )\n")
        self.console.write(f"sum: {total:.6f}\n")

    def _duplicate(self) -> None:
        source = self._ask_name("duplicate ")
        target = self._ask_name("save in ")
        if source == target:
            self.console.write("Please choose a different matrix!\n")
            return
        self.store.copy(source, target)

    def _scale(self) -> None:
        self.console.write("Insert k * M:\n")
        k = self.console.read_value("k: ", float)
        source = self._ask_name("M ")
        target = self._ask_name("save in ")
        self.store.set(target, scale(k, self.store.get(source)))

    def _elementwise(
        self,
        symbol: str,
        operation: Callable[[Matrix, Matrix], Matrix],
    ) -> None:
        self.console.write(f"Insert M1 {symbol} M2:\n")
        first = self._ask_name("M1 ")
        second = self._ask_name("M2 ")
        try:
            result = operation(self.store.get(first), self.store.get(second))
        except DimensionError:
            self.console.write("Matrices must be of the same dimensions!\n")
            self.console.write(self._dims_message(first, second))
            return
        target = self._ask_name("save in ")
        self.store.set(target, result)

    def _add(self) -> None:
        self._elementwise("+", add)

    def _subtract(self) -> None:
        self._elementwise("-", subtract)

    def _multiply(self) -> None:
        self.console.write("Insert M1 * M2:\n")
        first = self._ask_name("M1 ")
        second = self._ask_name("M2 ")
        try:
            result = multiply(self.store.get(first), self.store.get(second))
        except DimensionError:
            self.console.write("Matrices must be of compatible dimensions!\n")
            self.console.write(self._dims_message(first, second))
            return
        target = self._ask_name("save in ")
        if target in (first, second):
            self.console.write("Please choose a different matrix!\n")
            return
        self.store.set(target, result)

    def _reduce(self) -> None:
        source = self._ask_name("reduce ")
        target = self._ask_name("save in ")
        rows = self.store.get(source)
        _, columns = self.store.shape(source)
        self._report_swaps(gauss_reduction(rows, columns))
        self.store.set(target, rows)

    def _determinant(self) -> None:
        name = self._ask_name("det ")
        size = self._square_size(name)
        if size is None:
            return
        rows = self.store.get(name)
        self._report_swaps(gauss_reduction(rows, size))
        det = math.prod((rows[i][i] for i in range(size)), start=1.0)
        self.console.write(f"det {name} = {det:.6f}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive calculator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="matrixcalc", description="Interactive matrix calculator."
    )
    parser.add_argument(
        "--directory",
        default="matrices",
        help="directory for matrix files (default: matrices)",
    )
    args = parser.parse_args(argv)
    calculator = Calculator(Console(sys.stdin, sys.stdout), MatrixStore(), args.directory)
    return calculator.run()


if __name__ == "__main__":
    sys.exit(main())