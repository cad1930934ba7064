from argparse import Namespace

import pytest

from planeview import DEFAULT_ATOL, ViewerConfig


def test_defaults_match_viewer_constants():
    config = ViewerConfig()
    assert config.scaling_factor == 0.1
    assert config.rotation_step == 5.0
    assert config.point_radius == 6.0
    assert config.atol == DEFAULT_ATOL
    assert (config.x_offset, config.y_offset) == (400, 300)


@pytest.mark.parametrize(
    "kwargs",
    [{"width": 0}, {"height": -5}, {"scaling_factor": 1.0}, {"point_radius": 0}, {"random_points": -1}],
)
def test_invalid_settings_are_rejected(kwargs):
    with pytest.raises(ValueError):
        ViewerConfig(**kwargs)


def test_from_args_keeps_defaults_for_missing_values():
    config = ViewerConfig.from_args(Namespace(width=320, height=None, seed=1))
    assert config.width == 320
    assert config.height == 600
