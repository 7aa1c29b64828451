"""Predicates, searches and extremes over small integer matrices."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from drillkit.matrix import matrix_sum

MatrixLike = Sequence[Sequence[int]]


def _cells(matrix: MatrixLike) -> Iterator[int]:
    """Yield every element in row order."""
    for row in matrix:
        yield from row


def _off_diagonal_zero_and_diagonal(matrix: MatrixLike, expected: int) -> bool:
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value != (expected if r == c else 0):
                return False
    return True


def sums_equal(first: MatrixLike, second: MatrixLike) -> bool:
    """Return True when both matrices have the same element total."""
    return matrix_sum(first) == matrix_sum(second)


def are_identical(first: MatrixLike, second: MatrixLike) -> bool:
    """Return True when both matrices hold the same values in the same places."""
    return [list(row) for row in first] == [list(row) for row in second]


def is_identity(matrix: MatrixLike) -> bool:
    """Return True when the diagonal is all ones and every other cell is zero."""
    return _off_diagonal_zero_and_diagonal(matrix, 1)


def is_scalar(matrix: MatrixLike) -> bool:
    """Return True when the diagonal repeats the top-left value and the rest is zero."""
    if not matrix or not matrix[0]:
        return True
    return _off_diagonal_zero_and_diagonal(matrix, matrix[0][0])


def count_value(matrix: MatrixLike, value: int) -> int:
    """Return how many cells hold ``value``."""
    return sum(1 for cell in _cells(matrix) if cell == value)


def is_sparse(matrix: MatrixLike) -> bool:
    """Return True when more than half of the cells are zero."""
    size = sum(len(row) for row in matrix)
    return count_value(matrix, 0) >= size // 2 + 1


def contains(matrix: MatrixLike, value: int) -> bool:
    """Return True when ``value`` appears anywhere in the matrix."""
    return any(cell == value for cell in _cells(matrix))


def intersection(first: MatrixLike, second: MatrixLike) -> list[int]:
    """Return the values of ``first``, in row order, that also appear in ``second``.

    Repeated values in ``first`` are kept as often as they occur.
    """
    present = set(_cells(second))
    return [cell for cell in _cells(first) if cell in present]


def matrix_min(matrix: MatrixLike) -> int:
    """Return the smallest element."""
    try:
        return min(_cells(matrix))
    except ValueError:
        raise ValueError("matrix is empty") from None


def matrix_max(matrix: MatrixLike) -> int:
    """Return the largest element."""
    try:
        return max(_cells(matrix))
    except ValueError:
        raise ValueError("matrix is empty") from None


def is_palindrome(matrix: MatrixLike) -> bool:
    """Return True when every row reads the same forwards and backwards."""
    return all(list(row) == list(reversed(row)) for row in matrix)