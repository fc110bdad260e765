from typing import Optional

from .Canvas import Canvas
from .Colour import rgb
from .Drawable import Drawable
from .Point import Point
from .Random import UniformRandom, default_source
from .Sampler import circle_blocks, to_points


class Circle(Drawable):
    """
    Circle outline traced by dense angle sampling around a centre.

    Samples are written directly as pixels, they are not joined by lines.
    """

    def __init__(
        self,
        center: Point,
        radius: int,
        *,
        colour: Optional[rgb] = None,
        source: Optional[UniformRandom] = None,
    ):
        if not isinstance(center, Point):
            raise TypeError("center must be a Point")
        self._center = center
        self._radius = int(radius)
        self.fixed_colour = colour
        self.source = source

    @classmethod
    def random(cls, width: int, height: int, source: Optional[UniformRandom] = None, **kwargs) -> "Circle":
        """Random centre in [0, width) x [0, height) and radius in [0, min(width, height))."""
        rng = source if source is not None else default_source()
        center = Point.random(width, height, rng)
        return cls(center, rng.randrange(min(width, height)), source=source, **kwargs)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> int:
        return self._radius

    def _blocks(self):
        # a negative radius traces the same circle
        return circle_blocks(self._center, abs(self._radius))

    def points(self) -> list[Point]:
        points = []
        for block in self._blocks():
            points += to_points(block)
        return points

    def draw(self, canvas: Canvas) -> None:
        colour = self.colour()
        for block in self._blocks():
            for x, y in block.tolist():
                canvas.write_pixel(x, y, colour)

    def __repr__(self):
        return f"Circle({self._center!r}, {self._radius})"
