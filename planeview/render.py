"""Rendering sink: draws cloud coordinates to an image file with matplotlib."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402

from .config import ViewerConfig  # noqa: E402


logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def _canvas(config: ViewerConfig, title: Optional[str]):
    dpi = 100
    fig, ax = plt.subplots(figsize=(config.width / dpi, config.height / dpi), dpi=dpi)
    # screen convention: origin at the centre, y grows downwards
    ax.set_xlim(-config.x_offset, config.x_offset)
    ax.set_ylim(config.y_offset, -config.y_offset)
    ax.set_aspect("equal")
    if title:
        ax.set_title(title)
    return fig, ax


def _draw(ax, points: Sequence[Point], radius: float, color: str, label: Optional[str] = None) -> None:
    for i, (x, y) in enumerate(points):
        ax.add_patch(Circle((x, y), radius, color=color, label=label if i == 0 else None))


def plot_points(
    points: Sequence[Point],
    filename: str,
    config: Optional[ViewerConfig] = None,
    title: Optional[str] = None,
    radius: Optional[float] = None,
) -> str:
    """Draw ``points`` as filled circles and save the figure to ``filename``."""

    config = config if config is not None else ViewerConfig()
    fig, ax = _canvas(config, title)
    _draw(ax, points, config.point_radius if radius is None else radius, "black")
    fig.savefig(filename)
    plt.close(fig)
    logger.info("saved %d points to %s", len(points), filename)
    return filename


def plot_transition(
    before: Sequence[Point],
    after: Sequence[Point],
    filename: str,
    config: Optional[ViewerConfig] = None,
    title: Optional[str] = None,
) -> str:
    """Overlay two snapshots of a cloud, before in grey and after in red."""

    config = config if config is not None else ViewerConfig()
    fig, ax = _canvas(config, title)
    _draw(ax, before, config.point_radius, "0.7", "before")
    _draw(ax, after, config.point_radius, "tab:red", "after")
    if before or after:
        ax.legend(loc="upper right")
    fig.savefig(filename)
    plt.close(fig)
    logger.info("saved transition plot (%d -> %d points) to %s", len(before), len(after), filename)
    return filename
