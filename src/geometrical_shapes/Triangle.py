from typing import Optional

from .Colour import rgb
from .Drawable import Composite
from .Line import Line
from .Point import Point
from .Random import UniformRandom


class Triangle(Composite):
    def __init__(
        self,
        p1: Point,
        p2: Point,
        p3: Point,
        *,
        colour: Optional[rgb] = None,
        source: Optional[UniformRandom] = None,
    ):
        for p in (p1, p2, p3):
            if not isinstance(p, Point):
                raise TypeError("Triangle vertices must be Points")
        self._vertices = (p1, p2, p3)
        self.fixed_colour = colour
        self.source = source

    @classmethod
    def random(cls, width: int, height: int, source: Optional[UniformRandom] = None, **kwargs) -> "Triangle":
        return cls(*(Point.random(width, height, source) for _ in range(3)), source=source, **kwargs)

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return self._vertices

    def edges(self, colour: Optional[rgb] = None) -> list[Line]:
        p1, p2, p3 = self._vertices
        return [
            Line(p1, p2, fixed_colour=colour),
            Line(p2, p3, fixed_colour=colour),
            Line(p3, p1, fixed_colour=colour),
        ]

    def __repr__(self):
        return "Triangle({!r}, {!r}, {!r})".format(*self._vertices)
