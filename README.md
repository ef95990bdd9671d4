# matrixcalc

An interactive terminal calculator for small dense matrices. It holds 26
named matrices, `A` to `Z`, each at most 25 x 25. You act on them with
one-letter commands. Every matrix starts out empty, with shape 0 x 0.

## Installation

```
pip install .
```

## Starting the calculator

```
matrixcalc
matrixcalc --directory path/to/files
```

`--directory` sets where the `r` and `w` commands look for matrix files.
The default is `matrices` in the current working directory.

At the prompt `('h' for manual) choose an action:` type one of these
commands:

| Command | Action                                                        |
|---------|---------------------------------------------------------------|
| `h`     | show the manual                                               |
| `c`     | clear the screen (runs the `clear` command)                   |
| `q`     | quit                                                          |
| `s`     | ask for dimensions and a name, then enter the matrix element by element |
| `i`     | fill a matrix with index sums: entry (i, j) is i + j + 2, counting from 0 |
| `R`     | fill a matrix with random integers from 0 to a maximum of at least 1 |
| `r`     | read a matrix from `<directory>/<name>.txt`                   |
| `w`     | write a matrix to `<directory>/<name>.txt`                    |
| `p`     | print a matrix with three decimals, values separated by tabs  |
| `m`     | check whether a square matrix is symmetric                    |
| `t`     | transpose into a target matrix                                |
| `^`     | find the column with the largest sum (the leftmost wins a tie) |
| `d`     | copy a matrix under another name                              |
| `*`     | multiply by a scalar                                          |
| `+`     | add two matrices of the same shape                            |
| `-`     | subtract two matrices of the same shape                       |
| `x`     | multiply two matrices; the target must differ from both operands |
| `g`     | Gauss-Jordan reduction into a target matrix                   |
| `D`     | determinant of a square matrix                                |

Matrix names are asked for as `(A-Z)`; anything else is asked for again.
Row and column counts must be between 1 and 25. An entry that cannot be
read as a number prints `Invalid input!` and the rest of that line is
dropped. When input ends, the calculator prints `EOF detected. Exiting...`
and exits with status 2; `q` exits with status 0.

`w` on a matrix that is still empty first asks for its dimensions and
entries. `g` and `D` print a `swapping line ...` message for every row swap.

### Things to know about the results

- `g` never picks a pivot in the last column, so an augmented matrix keeps
  its right-hand side.
- `D` multiplies the diagonal after that reduction and does not change the
  sign for row swaps. For `[[0, 1], [1, 0]]` it reports `1.000000`.

## Matrix files

The first line gives the row and column counts (each from 0 to 25). The
values follow, separated by whitespace. Written files put one row per line,
each value with 17 significant digits and a trailing space:

```
2 3
1 2 3 
4 5 6 
```

A file that cannot be opened, has no header, has dimensions out of range,
or holds too few values is reported and leaves the matrix unchanged.

## Using it as a library

```python
from matrixcalc.operations import add, multiply, transpose, is_symmetric
from matrixcalc.linalg import determinant, gauss_reduction

a = [[1.0, 2.0], [3.0, 4.0]]
b = [[0.0, 1.0], [1.0, 0.0]]

multiply(a, b)        # [[2.0, 1.0], [4.0, 3.0]]
transpose(a)          # [[1.0, 3.0], [2.0, 4.0]]
determinant(a)        # -2.0
is_symmetric(b)       # True
```

- `matrixcalc.operations` has `add`, `subtract`, `multiply`, `scale`,
  `transpose`, `find_asymmetry`, `is_symmetric`, `max_sum_column`,
  `index_sum_matrix` and `random_matrix`. Shapes that do not fit raise
  `DimensionError` (a `ValueError`).
- `matrixcalc.linalg` has `gauss_reduction(rows, columns)`, which reduces
  in place and returns the swaps made, `determinant(rows)` and `is_zero(x)`
  (true within 1e-7 of zero).
- `matrixcalc.fileio` has `read_matrix`, `write_matrix`,
  `format_matrix_file` and `matrix_path`; failures raise `MatrixFileError`.
- `matrixcalc.store.MatrixStore` holds the matrices `A` to `Z` with `get`,
  `set`, `shape` and `copy`.
- `matrixcalc.cli.Calculator` runs the command loop on a
  `matrixcalc.console.Console` built from any pair of text streams.

## What it does not do

Matrices live in memory only while the calculator runs; use `w` to keep
them. There is no matrix inverse or solver command, and no command history.

## Running the tests

```
pip install .[test]
pytest
```