"""Dense column-major matrix and the homogeneous 2D transform factories.

Entries live in ``values``, a list of ``n`` columns each holding ``m`` floats,
so a column is reachable in constant time while a row has to be gathered from
every column (``O(n)``).  The shape is fixed for the lifetime of an instance:
operations that change the structure, such as :meth:`Matrix.add_column`,
return a new matrix.

The transform factories build 3x3 matrices acting on homogeneous column
vectors ``(x, y, 1)``.  They are cheap and are created afresh on every call.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import (
    DimensionMismatch,
    IndexOutOfBounds,
    InvalidDimension,
    NonUniformLength,
    SizeMismatch,
)
from .reduction import DEFAULT_ATOL, reduce, rref, to_echelon
from .vector import Vector


ColumnLike = Union[Vector, Sequence[float]]


def _as_floats(values: Iterable[float]) -> List[float]:
    return [float(v) for v in values]


def _uniform_length(groups: Sequence[Sequence[float]], kind: str) -> int:
    if not groups:
        raise InvalidDimension(f"at least one {kind} is required")
    width = len(groups[0])
    for group in groups:
        if len(group) != width:
            raise NonUniformLength(f"all {kind}s must have the same length")
    if width == 0:
        raise InvalidDimension(f"{kind}s must not be empty")
    return width


class Matrix:
    """``m x n`` matrix of floats stored as ``n`` columns."""

    __slots__ = ("m", "n", "values")

    def __init__(self, m: int, n: int) -> None:
        if m <= 0 or n <= 0:
            raise InvalidDimension(f"matrix needs a positive number of rows and columns, got {m}x{n}")
        self.m = int(m)
        self.n = int(n)
        self.values: List[List[float]] = [[0.0] * self.m for _ in range(self.n)]

    # ------------------------------------------------------------------
    # Construction ------------------------------------------------------
    # ------------------------------------------------------------------
    @classmethod
    def from_entries(cls, m: int, n: int, entries: Sequence[float], row_major: bool = True) -> "Matrix":
        """Build an ``m x n`` matrix from a flat list of ``m * n`` values.

        With ``row_major`` the entries are read one row at a time, otherwise one
        column at a time.
        """

        if len(entries) != m * n:
            raise SizeMismatch(f"expected {m * n} entries for a {m}x{n} matrix, got {len(entries)}")
        result = cls(m, n)
        for idx, value in enumerate(entries):
            if row_major:
                row, col = divmod(idx, n)
            else:
                col, row = divmod(idx, m)
            result.values[col][row] = float(value)
        return result

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[float]]) -> "Matrix":
        m = _uniform_length(columns, "column")
        result = cls(m, len(columns))
        result.values = [_as_floats(col) for col in columns]
        return result

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        n = _uniform_length(rows, "row")
        result = cls(len(rows), n)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                result.values[j][i] = float(value)
        return result

    @classmethod
    def from_vectors(cls, vectors: Sequence[Vector]) -> "Matrix":
        return cls.from_columns([v.entries for v in vectors])

    @classmethod
    def from_matrix(cls, other: "Matrix") -> "Matrix":
        return cls.from_columns(other.values)

    @classmethod
    def from_array(cls, array: Iterable[Iterable[float]]) -> "Matrix":
        """Convert a 2D array (rows first, as numpy lays it out) into a matrix."""

        arr = np.asarray(array, dtype=float)
        if arr.ndim != 2:
            raise InvalidDimension(f"expected a 2D array, got {arr.ndim} dimensions")
        return cls.from_columns(arr.T.tolist())

    @classmethod
    def random_matrix(cls, m: int, n: int, rng: Optional[np.random.Generator] = None) -> "Matrix":
        """Return an ``m x n`` matrix with entries drawn uniformly from ``[0, 1)``."""

        if m <= 0 or n <= 0:
            raise InvalidDimension(f"matrix needs a positive number of rows and columns, got {m}x{n}")
        generator = rng if rng is not None else np.random.default_rng()
        return cls.from_array(generator.random((m, n)))

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        result = cls(size, size)
        for i in range(size):
            result.values[i][i] = 1.0
        return result

    def copy(self) -> "Matrix":
        return Matrix.from_matrix(self)

    def to_array(self) -> np.ndarray:
        return np.array(self.values, dtype=float).T

    @property
    def shape(self) -> Tuple[int, int]:
        return self.m, self.n

    # ------------------------------------------------------------------
    # Homogeneous 2D transforms -----------------------------------------
    # ------------------------------------------------------------------
    @classmethod
    def translation(cls, dx: float, dy: float) -> "Matrix":
        return cls.from_columns([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [dx, dy, 1.0]])

    @classmethod
    def scaling(cls, k: float) -> "Matrix":
        return cls.from_columns([[k, 0.0, 0.0], [0.0, k, 0.0], [0.0, 0.0, 1.0]])

    @classmethod
    def rotation(cls, angle: float) -> "Matrix":
        """Counter-clockwise rotation by ``angle`` degrees about the origin."""

        rad = math.radians(angle)
        c = math.cos(rad)
        s = math.sin(rad)
        return cls.from_columns([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])

    # ------------------------------------------------------------------
    # Access ------------------------------------------------------------
    # ------------------------------------------------------------------
    def _check_row(self, index: int) -> None:
        if not 0 <= index < self.m:
            raise IndexOutOfBounds(f"row {index} out of range for {self.m}x{self.n} matrix")

    def _check_column(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise IndexOutOfBounds(f"column {index} out of range for {self.m}x{self.n} matrix")

    def get_entry(self, row: int, col: int) -> float:
        self._check_row(row)
        self._check_column(col)
        return self.values[col][row]

    def set_entry(self, row: int, col: int, value: float) -> None:
        self._check_row(row)
        self._check_column(col)
        self.values[col][row] = float(value)

    def get_column(self, index: int) -> Vector:
        self._check_column(index)
        return Vector(*self.values[index])

    def set_column(self, index: int, column: ColumnLike) -> None:
        """Replace column ``index``.

        A :class:`Vector` is installed by reference, so later in-place changes
        to the vector show up in the matrix.  Any other sequence is copied.
        """

        self._check_column(index)
        if len(column) != self.m:
            raise DimensionMismatch(f"column of length {len(column)} does not fit {self.m} rows")
        if isinstance(column, Vector):
            self.values[index] = column.entries
        else:
            self.values[index] = _as_floats(column)

    def get_row(self, index: int) -> Vector:
        self._check_row(index)
        return Vector(*(col[index] for col in self.values))

    def set_row(self, index: int, row: ColumnLike) -> None:
        self._check_row(index)
        if len(row) != self.n:
            raise DimensionMismatch(f"row of length {len(row)} does not fit {self.n} columns")
        for col, value in zip(self.values, row):
            col[index] = float(value)

    def swap_rows(self, i: int, j: int) -> None:
        self._check_row(i)
        self._check_row(j)
        for col in self.values:
            col[i], col[j] = col[j], col[i]

    def add_column(self, column: ColumnLike) -> "Matrix":
        """Return a copy of this matrix with ``column`` appended as the last column."""

        if len(column) != self.m:
            raise DimensionMismatch(f"column of length {len(column)} does not fit {self.m} rows")
        entries = column.entries if isinstance(column, Vector) else column
        return Matrix.from_columns(self.values + [_as_floats(entries)])

    # ------------------------------------------------------------------
    # Arithmetic --------------------------------------------------------
    # ------------------------------------------------------------------
    def _check_same_shape(self, other: "Matrix", operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionMismatch(
                f"cannot {operation} a {self.m}x{self.n} and a {other.m}x{other.n} matrix"
            )

    def accumulate(self, other: "Matrix") -> "Matrix":
        """Add ``other`` into this matrix in place and return ``self``."""

        self._check_same_shape(other, "add")
        for mine, theirs in zip(self.values, other.values):
            for i, value in enumerate(theirs):
                mine[i] += value
        return self

    def subtract(self, other: "Matrix") -> "Matrix":
        """Subtract ``other`` from this matrix in place and return ``self``."""

        self._check_same_shape(other, "subtract")
        for mine, theirs in zip(self.values, other.values):
            for i, value in enumerate(theirs):
                mine[i] -= value
        return self

    @staticmethod
    def sum(a: "Matrix", b: "Matrix") -> "Matrix":
        return a.copy().accumulate(b)

    @staticmethod
    def difference(a: "Matrix", b: "Matrix") -> "Matrix":
        return a.copy().subtract(b)

    def times(self, x: ColumnLike) -> Vector:
        """Return ``Ax`` as the combination of columns weighted by ``x``."""

        if not isinstance(x, Vector):
            x = Vector.from_iterable(x)
        if x.length != self.n:
            raise DimensionMismatch(
                f"cannot multiply a {self.m}x{self.n} matrix by a vector of length {x.length}"
            )
        result = Vector.zeros(self.m)
        for i, weight in enumerate(x.entries):
            result.add(self.get_column(i).scale(weight))
        return result

    @staticmethod
    def product(*matrices: "Matrix") -> "Matrix":
        """Multiply two or more matrices.

        Each column of the result is ``A b_j``.  With more than two operands
        the last two are multiplied first and the result is folded leftwards,
        ``m1 (m2 (... (m_{k-1} m_k)))``.
        """

        if len(matrices) < 2:
            raise TypeError("product needs at least two matrices")
        result = _product_pair(matrices[-2], matrices[-1])
        for left in reversed(matrices[:-2]):
            result = _product_pair(left, result)
        return result

    def vectorize(self, fn: Callable[[float], float]) -> "Matrix":
        """Apply ``fn`` to every entry in place and return ``self``."""

        for col in self.values:
            for i, value in enumerate(col):
                col[i] = float(fn(value))
        return self

    def to_echelon(self, atol: float = DEFAULT_ATOL) -> "Matrix":
        return to_echelon(self, atol)

    def reduce(self, atol: float = DEFAULT_ATOL) -> "Matrix":
        """Reduce this matrix to reduced row-echelon form in place."""

        return reduce(self, atol)

    def rref(self, atol: float = DEFAULT_ATOL) -> "Matrix":
        return rref(self, atol)

    def allclose(self, other: "Matrix", atol: float = 1e-9) -> bool:
        if self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= atol
            for mine, theirs in zip(self.values, other.values)
            for a, b in zip(mine, theirs)
        )

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return Matrix.product(self, other)
        if isinstance(other, Vector):
            return self.times(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.values == other.values

    def __repr__(self) -> str:
        return f"Matrix(m={self.m}, n={self.n})"

    def __str__(self) -> str:
        lines = []
        for row in range(self.m):
            lines.append(" ".join(str(col[row]) for col in self.values) + " ")
        return "\n".join(lines) + "\n"


def _product_pair(a: Matrix, b: Matrix) -> Matrix:
    if a.n != b.m:
        raise DimensionMismatch(f"cannot multiply a {a.m}x{a.n} matrix by a {b.m}x{b.n} matrix")
    result = Matrix(a.m, b.n)
    for j in range(b.n):
        result.set_column(j, a.times(b.get_column(j)))
    return result
