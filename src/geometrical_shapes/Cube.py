from typing import Optional

from .Colour import rgb
from .Drawable import Composite
from .Line import Line
from .Point import Point
from .Random import UniformRandom, default_source
from .Rectangle import Rectangle, closed_loop


class Cube(Composite):
    """
    Pseudo 3D wireframe cube.

    The front face is the rectangle between two opposite corners. The back
    face is the same rectangle shifted by d = |p2.x - p1.x| // 3 along
    (+x, -y). Drawn as 4 front edges, 4 back edges and 4 connectors.
    """

    def __init__(
        self,
        p1: Point,
        p2: Point,
        *,
        colour: Optional[rgb] = None,
        source: Optional[UniformRandom] = None,
    ):
        self._front = Rectangle(p1, p2)
        self.fixed_colour = colour
        self.source = source

    @classmethod
    def from_size(cls, corner: Point, size: int, **kwargs) -> "Cube":
        """Cube whose front face is a size x size square starting at corner."""
        return cls(corner, corner.offset(size, size), **kwargs)

    @classmethod
    def random(cls, width: int, height: int, source: Optional[UniformRandom] = None, **kwargs) -> "Cube":
        rng = source if source is not None else default_source()
        corner = Point.random(width, height, rng)
        return cls.from_size(corner, rng.randrange(min(width, height)), source=source, **kwargs)

    @property
    def depth(self) -> int:
        return abs(self._front.p2.x - self._front.p1.x) // 3

    def front_corners(self) -> list[Point]:
        return self._front.corners()

    def back_corners(self) -> list[Point]:
        d = self.depth
        return [p.offset(d, -d) for p in self._front.corners()]

    def edges(self, colour: Optional[rgb] = None) -> list[Line]:
        front = self.front_corners()
        back = self.back_corners()
        connectors = [Line(f, b, fixed_colour=colour) for f, b in zip(front, back)]
        return closed_loop(front, colour) + closed_loop(back, colour) + connectors

    def __repr__(self):
        return f"Cube({self._front.p1!r}, {self._front.p2!r})"
