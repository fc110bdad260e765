import itertools

import pytest

from geometrical_shapes import Canvas, UniformRandom


class ScriptedSource(UniformRandom):
    """Returns bytes from a fixed list, cycling, and counts how many were used."""

    def __init__(self, values):
        super().__init__(0)
        self._values = itertools.cycle(values)
        self.calls = 0

    def next_uniform_byte(self) -> int:
        self.calls += 1
        return next(self._values)


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def canvas() -> Canvas:
    """A small black 20x20 canvas."""
    return Canvas(20, 20)


def lit_pixels(canvas: Canvas) -> set[tuple[int, int]]:
    """Coordinates of every non black cell."""
    ys, xs = canvas.pixels.any(axis=-1).nonzero()
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


@pytest.fixture
def lit():
    return lit_pixels
