"""Row reduction to reduced row-echelon form.

The reduction runs in two phases over the matrix's own storage.  The forward
phase brings the matrix to echelon form with partial pivoting: within the rows
that are still candidates, the one with the largest magnitude in the current
column becomes the pivot row.  The backward phase walks up from the last row,
clears every entry above each pivot and scales the pivot row so its leading
entry is exactly one.

Values whose magnitude falls below ``atol`` are treated as zero.  The
tolerance is fixed for a call rather than scaled by the matrix norm, which is
adequate for the small, well conditioned matrices the viewer works with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover - import for annotations only
    from .matrix import Matrix


DEFAULT_ATOL = 1e-5


def to_echelon(matrix: "Matrix", atol: float = DEFAULT_ATOL) -> "Matrix":
    """Bring ``matrix`` to row-echelon form in place and return it."""

    values = matrix.values
    m, n = matrix.m, matrix.n
    h = 0
    k = 0
    while h < m and k < n:
        column = values[k]
        i_max = max(range(h, m), key=lambda r: abs(column[r]))
        if abs(column[i_max]) < atol:
            # no usable pivot left in this column
            k += 1
            continue
        matrix.swap_rows(h, i_max)
        pivot = column[h]
        for i in range(h + 1, m):
            factor = column[i] / pivot
            column[i] = 0.0
            for j in range(k + 1, n):
                values[j][i] -= factor * values[j][h]
        h += 1
        k += 1
    return matrix


def _leading_column(matrix: "Matrix", row: int, atol: float) -> Optional[int]:
    for col, entries in enumerate(matrix.values):
        if abs(entries[row]) > atol:
            return col
    return None


def _eliminate_upwards(matrix: "Matrix", atol: float) -> "Matrix":
    values = matrix.values
    n = matrix.n
    for h in range(matrix.m - 1, -1, -1):
        k = _leading_column(matrix, h, atol)
        if k is None:
            continue
        pivot = values[k][h]
        for i in range(h):
            factor = values[k][i] / pivot
            values[k][i] = 0.0
            for j in range(k + 1, n):
                values[j][i] -= factor * values[j][h]
        if abs(pivot - 1.0) > atol:
            for j in range(k + 1, n):
                values[j][h] /= pivot
            values[k][h] = 1.0
    return matrix


def reduce(matrix: "Matrix", atol: float = DEFAULT_ATOL) -> "Matrix":
    """Reduce ``matrix`` to reduced row-echelon form in place and return it.

    The shape is left untouched; only the entries change.  The reduction is
    total: any matrix with at least one row and one column can be reduced.
    """

    to_echelon(matrix, atol)
    return _eliminate_upwards(matrix, atol)


def rref(matrix: "Matrix", atol: float = DEFAULT_ATOL) -> "Matrix":
    """Return the reduced row-echelon form of a copy of ``matrix``."""

    return reduce(matrix.copy(), atol)


def pivot_columns(matrix: "Matrix", atol: float = DEFAULT_ATOL) -> List[int]:
    """Return the leading column of every nonzero row of ``rref(matrix)``."""

    reduced = rref(matrix, atol)
    pivots = []
    for row in range(reduced.m):
        col = _leading_column(reduced, row, atol)
        if col is not None:
            pivots.append(col)
    return pivots


def rank(matrix: "Matrix", atol: float = DEFAULT_ATOL) -> int:
    return len(pivot_columns(matrix, atol))
