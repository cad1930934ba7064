"""Fixed-length vector used for matrix columns and homogeneous points."""

from __future__ import annotations

from typing import Iterable, List

from .errors import DimensionMismatch, IndexOutOfBounds, InvalidDimension


class Vector:
    """Ordered list of floats whose length never changes.

    ``add`` is the only operation that mutates the vector; everything else
    returns a new value.
    """

    __slots__ = ("entries", "length")

    def __init__(self, *values: float) -> None:
        self.entries: List[float] = [float(v) for v in values]
        self.length = len(self.entries)

    @classmethod
    def zeros(cls, length: int) -> "Vector":
        if length < 0:
            raise InvalidDimension(f"vector length must be non-negative, got {length}")
        return cls(*([0.0] * length))

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Vector":
        return cls(*values)

    @classmethod
    def from_vector(cls, other: "Vector") -> "Vector":
        return cls(*other.entries)

    def copy(self) -> "Vector":
        return Vector.from_vector(self)

    def _check_length(self, other: "Vector", operation: str) -> None:
        if self.length != other.length:
            raise DimensionMismatch(
                f"cannot {operation} vectors of length {self.length} and {other.length}"
            )

    def add(self, other: "Vector") -> "Vector":
        """Add ``other`` componentwise into this vector and return ``self``."""

        self._check_length(other, "add")
        for i, value in enumerate(other.entries):
            self.entries[i] += value
        return self

    def scale(self, k: float) -> "Vector":
        k = float(k)
        return Vector(*(k * v for v in self.entries))

    def dot(self, other: "Vector") -> float:
        self._check_length(other, "take the dot product of")
        return sum(a * b for a, b in zip(self.entries, other.entries))

    @staticmethod
    def inner(lhs: "Vector", rhs: "Vector") -> float:
        return lhs.dot(rhs)

    def get_entry(self, index: int) -> float:
        if not 0 <= index < self.length:
            raise IndexOutOfBounds(f"index {index} out of range for vector of length {self.length}")
        return self.entries[index]

    def to_list(self) -> List[float]:
        return list(self.entries)

    def __getitem__(self, index: int) -> float:
        return self.get_entry(index)

    def __len__(self) -> int:
        return self.length

    def __iter__(self):
        return iter(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(v) for v in self.entries)})"

    def __str__(self) -> str:
        return "".join(f"{v}\n" for v in self.entries)
