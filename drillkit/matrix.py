"""Building, summing, printing and reshaping small integer matrices."""

from __future__ import annotations

import random
from collections.abc import Sequence

Matrix = list[list[int]]
MatrixLike = Sequence[Sequence[int]]


def _column_count(matrix: MatrixLike) -> int:
    """Return the width of a rectangular matrix, raising if rows differ."""
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows must all have the same length")
    return widths.pop() if widths else 0


def random_number(start: int, end: int, rng: random.Random | None = None) -> int:
    """Return a random integer in the inclusive range [start, end]."""
    if start > end:
        raise ValueError(f"empty range: {start} > {end}")
    return (rng or random).randint(start, end)


def random_matrix(
    rows: int,
    cols: int,
    low: int = 1,
    high: int = 100,
    rng: random.Random | None = None,
) -> Matrix:
    """Build a rows x cols matrix of random integers between low and high."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [[random_number(low, high, rng) for _ in range(cols)] for _ in range(rows)]


def ordered_matrix(rows: int, cols: int) -> Matrix:
    """Build a matrix filled row by row with 1, 2, 3, ..."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [[r * cols + c + 1 for c in range(cols)] for r in range(rows)]


def format_matrix(matrix: MatrixLike, zero_pad: bool = False) -> str:
    """Render a matrix one row per line, each cell followed by two spaces.

    Cells are right-aligned to width 3, or zero-padded to two digits when
    ``zero_pad`` is true.
    """
    cell = "{:02d}  " if zero_pad else "{:>3}  "
    return "".join(
        "".join(cell.format(value) for value in row) + "\n" for row in matrix
    )


def row_sums(matrix: MatrixLike) -> list[int]:
    """Return the sum of each row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: MatrixLike) -> list[int]:
    """Return the sum of each column."""
    _column_count(matrix)
    return [sum(column) for column in zip(*matrix)]


def format_sums(sums: Sequence[int], label: str = "row") -> str:
    """Render numbered sums, one per line, as 'Sum of <label> (n) : value'."""
    return "".join(
        f"Sum of {label} ({number}) : {value}\n"
        for number, value in enumerate(sums, start=1)
    )


def matrix_sum(matrix: MatrixLike) -> int:
    """Return the sum of every element."""
    return sum(sum(row) for row in matrix)


def transpose(matrix: MatrixLike) -> Matrix:
    """Return the transpose of a rectangular matrix."""
    _column_count(matrix)
    return [list(column) for column in zip(*matrix)]


def multiply_elementwise(first: MatrixLike, second: MatrixLike) -> Matrix:
    """Multiply two same-shaped matrices cell by cell."""
    if len(first) != len(second) or _column_count(first) != _column_count(second):
        raise ValueError("matrices must have the same shape")
    return [
        [a * b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)
    ]


def middle_row(matrix: MatrixLike) -> list[int]:
    """Return a copy of the middle row (the lower one for an even count)."""
    if not matrix:
        raise ValueError("matrix has no rows")
    return list(matrix[len(matrix) // 2])


def middle_column(matrix: MatrixLike) -> list[int]:
    """Return the middle column (the right one for an even count)."""
    cols = _column_count(matrix)
    if cols == 0:
        raise ValueError("matrix has no columns")
    return [row[cols // 2] for row in matrix]