import io
import random
import sys
from unittest import mock

from matrixcalc.cli import Calculator, format_matrix, main
from matrixcalc.console import Console
from matrixcalc.fileio import matrix_path
from matrixcalc.linalg import determinant, gauss_reduction
from matrixcalc.operations import (
    index_sum_matrix,
    max_sum_column,
    multiply,
    scale,
    transpose,
)
from matrixcalc.store import MatrixStore


def make(text, directory, store=None):
    out = io.StringIO()
    store = store if store is not None else MatrixStore()
    calc = Calculator(Console(io.StringIO(text), out), store, directory)
    return calc, out, store


def test_format_matrix():
    assert format_matrix([[1, 2.5]]) == "1.000\t2.500\t\n"


def test_initialize(tmp_path):
    calc, _, store = make("2\n3\nA\n", tmp_path)
    assert calc.dispatch("i") is True
    assert store.get("A") == index_sum_matrix(2, 3)


def test_save_reads_entries(tmp_path):
    calc, out, store = make("2\n2\nB\n1\n2\n3\n4\n", tmp_path)
    calc.dispatch("s")
    assert store.get("B") == [[1.0, 2.0], [3.0, 4.0]]
    assert "Row #2:" in out.getvalue()


def test_random_initialize_respects_range(tmp_path):
    calc, out, store = make("2\n3\nA\n0\n5\n", tmp_path)
    calc.rng = random.Random(1)
    calc.dispatch("R")
    values = [v for row in store.get("A") for v in row]
    assert store.shape("A") == (2, 3)
    assert all(0 <= v <= 5 and v == int(v) for v in values)
    assert out.getvalue().count("Random range max: ") == 2


def test_quit_stops(tmp_path):
    calc, out, _ = make("", tmp_path)
    assert calc.dispatch("q") is False
    assert out.getvalue().endswith("Exit ...\n")


def test_unknown_command(tmp_path):
    calc, out, _ = make("", tmp_path)
    assert calc.dispatch("?") is True
    assert "Invalid choice!" in out.getvalue()


def test_write_then_read_round_trip(tmp_path):
    calc, out, store = make("A\n", tmp_path)
    store.set("A", [[1.5, -2.0], [0.1, 4.0]])
    calc.dispatch("w")
    assert matrix_path(tmp_path, "A").exists()
    assert "correctly written!" in out.getvalue()
    calc2, out2, store2 = make("A\n", tmp_path)
    calc2.dispatch("r")
    assert store2.get("A") == [[1.5, -2.0], [0.1, 4.0]]
    assert "(2 x 2)" in out2.getvalue()


def test_write_missing_matrix_asks_for_it(tmp_path):
    calc, out, store = make("C\n1\n2\n7\n8\n", tmp_path)
    calc.dispatch("w")
    assert "Matrix C does not exist!" in out.getvalue()
    assert store.get("C") == [[7.0, 8.0]]
    assert matrix_path(tmp_path, "C").exists()


def test_read_missing_file(tmp_path):
    calc, out, store = make("Q\n", tmp_path)
    calc.dispatch("r")
    assert "Error opening file" in out.getvalue()
    assert store.shape("Q") == (0, 0)


def test_print(tmp_path):
    calc, out, store = make("A\n", tmp_path)
    store.set("A", [[1, 2], [3, 4]])
    calc.dispatch("p")
    assert out.getvalue().endswith(format_matrix([[1, 2], [3, 4]]))


def test_check_symmetry(tmp_path):
    calc, out, store = make("A\nB\nC\n", tmp_path)
    store.set("A", [[1, 2], [2, 1]])
    store.set("B", [[1, 2], [3, 1]])
    store.set("C", [[1, 2]])
    calc.dispatch("m")
    calc.dispatch("m")
    calc.dispatch("m")
    text = out.getvalue()
    assert "Matrix A is symmetric!" in text
    assert "B[1][2] != B[2][1]" in text
    assert "Matrix B is not symmetric!" in text
    assert "You need to choose a square matrix!" in text


def test_transpose_into_other_and_in_place(tmp_path):
    rows = [[1, 2, 3], [4, 5, 6]]
    calc, _, store = make("A\nB\nA\nA\n", tmp_path)
    store.set("A", rows)
    calc.dispatch("t")
    assert store.get("B") == transpose(rows)
    calc.dispatch("t")
    assert store.get("A") == transpose(rows)


def test_max_sum_column(tmp_path):
    rows = [[1, 5, 2], [2, 6, 1]]
    calc, out, store = make("A\n", tmp_path)
    store.set("A", rows)
    calc.dispatch("^")
    index, _, total = max_sum_column(rows)
    assert f"A^{index + 1} : ( " in out.getvalue()
    assert f"sum: {total:.6f}" in out.getvalue()


def test_duplicate_and_same_target(tmp_path):
    calc, out, store = make("A\nB\nA\nA\n", tmp_path)
    store.set("A", [[1, 2]])
    calc.dispatch("d")
    assert store.get("B") == store.get("A")
    calc.dispatch("d")
    assert "Please choose a different matrix!" in out.getvalue()


def test_scale(tmp_path):
    calc, _, store = make("2.5\nA\nB\n", tmp_path)
    store.set("A", [[1, 2], [3, 4]])
    calc.dispatch("*")
    assert store.get("B") == scale(2.5, [[1, 2], [3, 4]])


def test_sum_and_subtract_cancel(tmp_path):
    calc, _, store = make("A\nB\nC\nC\nB\nD\n", tmp_path)
    store.set("A", [[1, 2], [3, 4]])
    store.set("B", [[5, 6], [7, 8]])
    calc.dispatch("+")
    calc.dispatch("-")
    assert store.get("D") == store.get("A")


def test_sum_dimension_mismatch(tmp_path):
    calc, out, store = make("A\nB\n", tmp_path)
    store.set("A", [[1, 2]])
    store.set("B", [[1], [2]])
    calc.dispatch("+")
    text = out.getvalue()
    assert "Matrices must be of the same dimensions!" in text
    assert "dim A = 1 x 2, dim B = 2 x 1" in text
    assert "save in" not in text


def test_multiply(tmp_path):
    a = [[1, 2], [3, 4]]
    b = [[0, 1], [1, 0]]
    calc, _, store = make("A\nB\nC\n", tmp_path)
    store.set("A", a)
    store.set("B", b)
    calc.dispatch("x")
    assert store.get("C") == multiply(a, b)


def test_reduce_matches_gauss_reduction(tmp_path):
    rows = [[0.0, 1.0, 2.0], [1.0, 1.0, 3.0]]
    calc, out, store = make("A\nB\n", tmp_path)
    store.set("A", rows)
    calc.dispatch("g")
    expected = [list(r) for r in rows]
    gauss_reduction(expected, 3)
    assert store.get("B") == expected
    assert "swapping line 2 with 1" in out.getvalue()


def test_determinant(tmp_path):
    rows = [[2.0, 1.0], [4.0, 5.0]]
    calc, out, store = make("A\n", tmp_path)
    store.set("A", rows)
    calc.dispatch("D")
    assert f"det A = {determinant(rows):.6f}" in out.getvalue()


def test_clear_command_runs_clear(tmp_path):
    calc, _, _ = make("", tmp_path)
    with mock.patch("matrixcalc.console.subprocess.run") as run:
        assert calc.dispatch("c") is True
    run.assert_called_once_with(["clear"], check=False)


def test_run_quits_with_zero(tmp_path):
    calc, out, _ = make("q\n", tmp_path)
    with mock.patch("matrixcalc.console.subprocess.run"):
        assert calc.run() == 0
    assert out.getvalue().endswith("Exit ...\n")


def test_run_end_of_input_returns_two(tmp_path):
    calc, out, _ = make("p\n", tmp_path)
    with mock.patch("matrixcalc.console.subprocess.run"):
        assert calc.run() == 2
    assert "EOF detected. Exiting..." in out.getvalue()


def test_main(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("h\nq\n"))
    with mock.patch("matrixcalc.console.subprocess.run"):
        assert main(["--directory", str(tmp_path)]) == 0
    assert "gauss reduction" in capsys.readouterr().out