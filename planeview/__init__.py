"""planeview: matrix/vector core for an interactive 2D point viewer.

The package provides a dense column-major :class:`Matrix`, a fixed-length
:class:`Vector`, row reduction to reduced row-echelon form and the
homogeneous transforms a front-end uses to drag, zoom and rotate a point
cloud.  The matplotlib rendering sink lives in :mod:`planeview.render` and is
imported on demand.
"""

import logging as _logging

from .errors import (
    DimensionMismatch,
    IndexOutOfBounds,
    InvalidDimension,
    NonUniformLength,
    PlaneviewError,
    SizeMismatch,
)
from .vector import Vector
from .matrix import Matrix
from .reduction import DEFAULT_ATOL, pivot_columns, rank, reduce, rref, to_echelon
from .config import ViewerConfig
from .cloud import PointCloud

__all__ = [
    "PlaneviewError",
    "InvalidDimension",
    "SizeMismatch",
    "NonUniformLength",
    "DimensionMismatch",
    "IndexOutOfBounds",
    "Vector",
    "Matrix",
    "DEFAULT_ATOL",
    "to_echelon",
    "reduce",
    "rref",
    "pivot_columns",
    "rank",
    "ViewerConfig",
    "PointCloud",
]

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
