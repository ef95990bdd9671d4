"""Terminal input and output for the calculator."""

from __future__ import annotations

import subprocess
from collections import deque
from collections.abc import Callable
from typing import TextIO, TypeVar

from matrixcalc.store import (
    FIRST_NAME,
    LAST_NAME,
    MAX_DIM,
    NUM_MATRICES,
    is_valid_dim,
    is_valid_name,
)

T = TypeVar("T")

_BORDER = (
    "\033[1;34m+-------------------------+"
    "--------------------------------------------+\033[0m\n"
)
_COMMAND_WIDTH = 24
_DESCRIPTION_WIDTH = 43

_HELP_ROWS = (
    ("h", "31", "help manual"),
    ("c", "31", "clear"),
    ("q", "31", "exit"),
    ("s", "32", "save"),
    ("i", "32", "initialize with index sums"),
    ("R", "32", "initialize random"),
    ("r", "32", "read from file"),
    ("w", "32", "write to file"),
    ("p", "32", "print"),
    ("m", "32", "check symmetry"),
    ("t", "32", "transpose"),
    ("^", "32", "find max sum column"),
    ("d", "32", "duplicate"),
    ("*", "32", "multiply scalar"),
    ("+", "32", "sum"),
    ("-", "32", "subtraction"),
    ("x", "32", "multiply"),
    ("g", "32", "gauss reduction"),
    ("D", "32", "determinant"),
)

CALCULATOR = "\N{ABACUS}"


class InputClosed(EOFError):
    """Raised when the input stream ends while a value is expected."""


class Console:
    """Prompts for values on a text stream and writes replies to another."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self._pending: deque[str] = deque()

    def write(self, text: str) -> None:
        """Write ``text`` to the output stream."""
        self.stdout.write(text)
        self.stdout.flush()

    def _next_token(self) -> str:
        while not self._pending:
            line = self.stdin.readline()
            if line == "":
                raise InputClosed("input closed")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_value(self, prompt: str, convert: Callable[[str], T]) -> T:
        """Prompt until the next token converts; return the converted value.

        An unconvertible token reports ``Invalid input!`` and drops the rest
        of its line. Raises ``InputClosed`` at the end of input.
        """
        while True:
            self.write(prompt)
            token = self._next_token()
            try:
                return convert(token)
            except ValueError:
                self.write("Invalid input!\n")
                self._pending.clear()

    def read_name(self) -> str:
        """Prompt until a valid matrix name is entered and return it."""
        prompt = f"({FIRST_NAME}-{LAST_NAME}): "
        while True:
            name = self.read_value(prompt, str)
            if is_valid_name(name):
                return name

    def read_dims(self) -> tuple[int, int]:
        """Prompt for an allowed number of rows, then of columns."""
        rows = self._read_dim("#rows m: ")
        cols = self._read_dim("#cols n: ")
        return rows, cols

    def _read_dim(self, prompt: str) -> int:
        while True:
            dim = self.read_value(prompt, int)
            if is_valid_dim(dim):
                return dim


def _help_row(command: str, color: str, description: str) -> str:
    return (
        f"| \033[{color}m{command}\033[0m{' ' * (_COMMAND_WIDTH - len(command))}"
        f"| \033[33m{description}\033[0m"
        f"{' ' * (_DESCRIPTION_WIDTH - len(description))}|\n"
    )


def help_text() -> str:
    """Return the table of commands shown by the help command."""
    header = (
        "\033[1;34m|\033[0m \033[32mCommand\033[0m"
        f"{' ' * (_COMMAND_WIDTH - len('Command'))}"
        "\033[1;34m|\033[0m \033[33mDescription\033[0m"
        f"{' ' * (_DESCRIPTION_WIDTH - len('Description'))}"
        "\033[1;34m|\033[0m\n"
    )
    rows = "".join(_help_row(*row) for row in _HELP_ROWS)
    return _BORDER + header + _BORDER + rows + _BORDER


def banner_text() -> str:
    """Return the greeting printed when the calculator starts."""
    return (
        f"\033[1;33m --- {CALCULATOR} MATRIX CALCULATOR {CALCULATOR} ---\033[0m\n\n"
        "\033[1;36m"
        "   .----.\n"
        "   |C>_ |\n"
        " __|____|__\n"
        "|  ______--|\n"
        "`-/.::::.\\-'\033[1;35ma\033[1;36m\n"
        " `--------'\033[0m\n\n"
        f"\nYou can use {NUM_MATRICES} matrices ({FIRST_NAME}-{LAST_NAME}) "
        f"with max dim = {MAX_DIM} x {MAX_DIM}.\n\n"
    )


def clear_screen() -> bool:
    """Clear the terminal with the ``clear`` command; return whether it ran."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        return False
    return True