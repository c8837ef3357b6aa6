"""Row elimination on matrices.

Both routines work on a copy of their input and use the first usable row as
the pivot, comparing against exact zero. There is no partial pivoting: when
a column has no usable row the diagonal row is taken as a zero pivot and the
division still happens, so singular input comes back filled with nan/inf
instead of raising.
"""

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    from lineal.algebra.matrix import Matrix

logger = logging.getLogger(__name__)


def rows_reduction(matrix: "Matrix") -> "Matrix":
    """
    Forward elimination without back-substitution.

    For each pivot column i in 0..rows-2 the first unused row with a
    non-zero entry in column i becomes the pivot, and column i is cleared
    from every other row. Rows are neither reordered nor normalized.

    Args:
        matrix: Matrix to reduce (left untouched)

    Returns:
        The reduced copy
    """
    result = matrix.copy()
    used: list[int] = []
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(min(matrix.rows - 1, matrix.cols)):
            pivot = _find_pivot(result, i, used)
            if pivot is None:
                pivot = _zero_pivot(i)
            else:
                used.append(pivot)
            _eliminate_column(result, i, pivot)
    return result


def gauss(matrix: "Matrix") -> "Matrix":
    """
    Gauss-Jordan elimination.

    For each row i: pick a pivot row for column i, clear column i from all
    other rows, scale the pivot row so the pivot is 1, then swap the pivot
    row into position i.

    Args:
        matrix: Matrix to reduce (left untouched); needs cols >= rows

    Returns:
        The reduced copy
    """
    result = matrix.copy()
    used: list[int] = []
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(matrix.rows):
            pivot = _find_pivot(result, i, used)
            if pivot is None:
                pivot = _zero_pivot(i)
            _eliminate_column(result, i, pivot)
            result[pivot, :] = result[pivot, :] * _divide(1.0, result[pivot, i])
            if pivot != i:
                result = result.swap_rows(i, pivot)
            used.append(i)
    return result


def _find_pivot(matrix: "Matrix", col: int, used: list[int]) -> Optional[int]:
    """First row not in used with a non-zero entry in col."""
    for row in range(matrix.rows):
        if matrix[row, col] != 0 and row not in used:
            return row
    return None


def _zero_pivot(col: int) -> int:
    logger.debug("No usable pivot in column %d; dividing by a zero pivot", col)
    return col


def _eliminate_column(matrix: "Matrix", col: int, pivot: int) -> None:
    """Subtract multiples of the pivot row so col is zero outside it."""
    for k in range(matrix.rows):
        if k == pivot:
            continue
        factor = _divide(matrix[k, col], matrix[pivot, col])
        matrix[k, :] = matrix[k, :] - factor * matrix[pivot, :]
        matrix[k, col] = 0.0


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 gives +-inf and 0/0 gives nan instead of raising."""
    return float(np.divide(numerator, denominator))
