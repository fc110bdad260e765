from typing import Optional

from .Colour import rgb
from .Drawable import Composite
from .Line import Line
from .Point import Point
from .Random import UniformRandom


def closed_loop(corners: list[Point], colour: Optional[rgb] = None) -> list[Line]:
    """Join each corner to the next and the last back to the first."""
    return [Line(a, b, fixed_colour=colour) for a, b in zip(corners, corners[1:] + corners[:1])]


class Rectangle(Composite):
    """Axis aligned rectangle outline given two opposite corners."""

    def __init__(
        self,
        p1: Point,
        p2: Point,
        *,
        colour: Optional[rgb] = None,
        source: Optional[UniformRandom] = None,
    ):
        if not isinstance(p1, Point) or not isinstance(p2, Point):
            raise TypeError("Rectangle corners must be Points")
        self._p1 = p1
        self._p2 = p2
        self.fixed_colour = colour
        self.source = source

    @classmethod
    def random(cls, width: int, height: int, source: Optional[UniformRandom] = None, **kwargs) -> "Rectangle":
        return cls(Point.random(width, height, source), Point.random(width, height, source), source=source, **kwargs)

    @property
    def p1(self) -> Point:
        return self._p1

    @property
    def p2(self) -> Point:
        return self._p2

    def corners(self) -> list[Point]:
        """
        The four corners in drawing order.

        Starts at (p1.x, p2.y), then p2, (p2.x, p1.y) and p1.
        """
        return [
            Point(self._p1.x, self._p2.y),
            self._p2,
            Point(self._p2.x, self._p1.y),
            self._p1,
        ]

    def edges(self, colour: Optional[rgb] = None) -> list[Line]:
        return closed_loop(self.corners(), colour)

    def __repr__(self):
        return f"Rectangle({self._p1!r}, {self._p2!r})"
