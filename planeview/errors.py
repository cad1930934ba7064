"""Exceptions raised by the numeric core."""

from __future__ import annotations


class PlaneviewError(Exception):
    """Base class for every error raised by :mod:`planeview`."""


class InvalidDimension(PlaneviewError, ValueError):
    """A row/column count or vector length is out of range at construction."""


class SizeMismatch(PlaneviewError, ValueError):
    """A flat entry list does not hold ``m * n`` values."""


class NonUniformLength(PlaneviewError, ValueError):
    """Rows, columns or vectors supplied together have different lengths."""


class DimensionMismatch(PlaneviewError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class IndexOutOfBounds(PlaneviewError, IndexError):
    """A row, column or entry index lies outside the valid range."""
