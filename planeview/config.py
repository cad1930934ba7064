"""Viewer settings shared by the point cloud, the renderer and the launcher."""

from __future__ import annotations

from argparse import Namespace
from dataclasses import dataclass

from .reduction import DEFAULT_ATOL


@dataclass
class ViewerConfig:
    """Canvas size and interaction constants.

    Cloud coordinates put the origin at the centre of a ``width x height``
    canvas.  One wheel step scales by ``1 +/- scaling_factor`` or rotates by
    ``rotation_step`` degrees.
    """

    width: int = 800
    height: int = 600
    scaling_factor: float = 0.1
    rotation_step: float = 5.0
    point_radius: float = 6.0
    resize_points_with_zoom: bool = False
    random_points: int = 100
    atol: float = DEFAULT_ATOL

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("canvas size must be positive")
        if not (0 < self.scaling_factor < 1):
            raise ValueError("scaling_factor must be in (0,1)")
        if self.point_radius <= 0:
            raise ValueError("point_radius must be positive")
        if self.random_points < 0:
            raise ValueError("random_points must be non-negative")

    @property
    def x_offset(self) -> float:
        return self.width / 2

    @property
    def y_offset(self) -> float:
        return self.height / 2

    @classmethod
    def from_args(cls, args: Namespace) -> "ViewerConfig":
        """Build a config from parsed command-line arguments, keeping defaults for absent ones."""

        kwargs = {}
        for name in cls.__dataclass_fields__:
            value = getattr(args, name, None)
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)
