"""Point cloud driven by the interactive front-end.

The cloud is a ``3 x k`` matrix whose columns are homogeneous points
``(x, y, 1)``.  Every request from the front-end (a click, a drag, a wheel
step) becomes a chain of transform matrices multiplied onto that data matrix.
Scaling and rotation are performed about a pivot point, usually the cursor,
by moving the pivot to the origin, transforming, and moving it back:
``T(p) * M * T(-p) * data``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .config import ViewerConfig
from .matrix import Matrix
from .vector import Vector


logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class PointCloud:
    """Mutable set of 2D points plus the cursor state of the viewer."""

    def __init__(self, config: Optional[ViewerConfig] = None, rng: Optional[np.random.Generator] = None) -> None:
        self.config = config if config is not None else ViewerConfig()
        self._rng = rng if rng is not None else np.random.default_rng()
        # no columns yet; a matrix needs at least one
        self._data: Optional[Matrix] = None
        self.point_radius = self.config.point_radius
        self.resize_points_with_zoom = self.config.resize_points_with_zoom
        self._cursor: Point = (0.0, 0.0)

    @property
    def data(self) -> Optional[Matrix]:
        return self._data

    def __len__(self) -> int:
        return 0 if self._data is None else self._data.n

    def points(self) -> List[Point]:
        if self._data is None:
            return []
        return [(col[0], col[1]) for col in self._data.values]

    # ------------------------------------------------------------------
    # Coordinates -------------------------------------------------------
    # ------------------------------------------------------------------
    def from_screen(self, px: float, py: float) -> Point:
        return float(px) - self.config.x_offset, float(py) - self.config.y_offset

    def to_screen(self, x: float, y: float) -> Point:
        return float(x) + self.config.x_offset, float(y) + self.config.y_offset

    # ------------------------------------------------------------------
    # Requests ----------------------------------------------------------
    # ------------------------------------------------------------------
    def add_point(self, x: float, y: float) -> None:
        column = Vector(x, y, 1.0)
        if self._data is None:
            self._data = Matrix.from_vectors([column])
        else:
            self._data = self._data.add_column(column)
        logger.debug("added point (%s, %s), cloud now holds %d points", x, y, len(self))

    def apply(self, *transforms: Matrix) -> None:
        """Left-multiply the data matrix by the product of ``transforms``."""

        if self._data is None:
            return
        self._data = Matrix.product(*transforms, self._data)

    def translate(self, dx: float, dy: float) -> None:
        logger.debug("translate by (%s, %s)", dx, dy)
        self.apply(Matrix.translation(dx, dy))

    def _about(self, transform: Matrix, about: Point) -> None:
        x, y = about
        self.apply(Matrix.translation(x, y), transform, Matrix.translation(-x, -y))

    def scale(self, k: float, about: Point = (0.0, 0.0)) -> None:
        logger.debug("scale by %s about %s", k, about)
        self._about(Matrix.scaling(k), about)

    def rotate(self, angle: float, about: Point = (0.0, 0.0)) -> None:
        logger.debug("rotate by %s degrees about %s", angle, about)
        self._about(Matrix.rotation(angle), about)

    def zoom(self, direction: int, about: Optional[Point] = None) -> float:
        """Handle one wheel step and return the scale factor applied.

        A positive ``direction`` (wheel down) shrinks the cloud.
        """

        step = self.config.scaling_factor
        factor = 1 - step if direction > 0 else 1 + step
        self.scale(factor, self._cursor if about is None else about)
        if self.resize_points_with_zoom:
            self.point_radius *= factor
        else:
            self.point_radius = self.config.point_radius
        return factor

    def turn(self, direction: int, about: Optional[Point] = None) -> float:
        """Handle one shift-wheel step and return the angle applied."""

        angle = self.config.rotation_step if direction > 0 else -self.config.rotation_step
        self.rotate(angle, self._cursor if about is None else about)
        return angle

    def move_to(self, x: float, y: float) -> None:
        self._cursor = (float(x), float(y))

    def drag_to(self, x: float, y: float) -> None:
        """Translate by the cursor offset since the last move or drag."""

        px, py = self._cursor
        self._cursor = (float(x), float(y))
        self.translate(x - px, y - py)

    def set_resize_points_with_zoom(self, flag: bool) -> None:
        self.resize_points_with_zoom = bool(flag)
        self.point_radius = self.config.point_radius

    def clear(self) -> None:
        self._data = None
        logger.info("cleared point cloud")

    def fill_random(self, count: Optional[int] = None) -> None:
        """Replace the cloud with ``count`` points spread over the whole canvas."""

        count = self.config.random_points if count is None else count
        if count < 0:
            raise ValueError("count must be non-negative")
        if count == 0:
            self.clear()
            return
        xs = self._rng.integers(0, self.config.width, size=count) - self.config.x_offset
        ys = self._rng.integers(0, self.config.height, size=count) - self.config.y_offset
        self._data = Matrix.from_columns([[x, y, 1.0] for x, y in zip(xs, ys)])
        logger.info("filled point cloud with %d random points", count)
