from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from geometrical_shapes import BLACK, RED, WHITE, rgb


@pytest.fixture
def red() -> rgb:
    return rgb(255, 0, 0)


def test_rgb_defaults():
    """Test that rgb defaults to black."""
    c = rgb()
    assert (c.r, c.g, c.b) == (0, 0, 0)


def test_rgb_custom_init():
    c = rgb(10, 20, 30)
    assert (c.r, c.g, c.b) == (10, 20, 30)


def test_rgb_as_tuple(red):
    assert red.as_tuple() == (255, 0, 0)


def test_rgb_iter(red):
    r, g, b = red
    assert (r, g, b) == (255, 0, 0)


def test_rgb_equality():
    assert rgb(1, 2, 3) == rgb(1, 2, 3)
    assert rgb(1, 2, 3) != rgb(3, 2, 1)


@pytest.mark.parametrize("component, value", [("r", -1), ("g", 256), ("b", 1000), ("r", 25.5), ("g", True)])
def test_rgb_out_of_range_raises_value_error(component, value):
    """Test that values outside 0-255 or non-integers raise ValueError."""
    with pytest.raises(ValueError):
        kwargs = {component: value}
        rgb(**kwargs)


def test_rgb_is_frozen(red):
    with pytest.raises(FrozenInstanceError):
        red.r = 100


def test_named_colours():
    assert BLACK == rgb()
    assert WHITE == rgb(255, 255, 255)
    assert RED == rgb(255, 0, 0)


def test_from_tuple_accepts_numpy_row():
    row = np.array([12, 34, 56], dtype=np.uint8)
    c = rgb.from_tuple(row)
    assert c == rgb(12, 34, 56)
    assert type(c.r) is int


def test_from_tuple_validates():
    with pytest.raises(ValueError):
        rgb.from_tuple((0, 300, 0))
    with pytest.raises(ValueError):
        rgb.from_tuple((1, 2))
