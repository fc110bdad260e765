from typing import Optional

from .Colour import rgb
from .Drawable import Composite
from .Line import Line
from .Point import Point
from .Random import UniformRandom, default_source
from .Rectangle import closed_loop
from .Sampler import polygon_angles, sample, to_points


class RegularPolygon(Composite):
    """
    Closed regular polygon with vertices on a circle around center.

    Vertex k sits at offset + k * 360 / sides degrees. The default offset
    of -90 puts the first vertex straight above the centre (y grows down).
    """

    def __init__(
        self,
        center: Point,
        radius: int,
        sides: int,
        offset: float = -90.0,
        *,
        colour: Optional[rgb] = None,
        source: Optional[UniformRandom] = None,
    ):
        if not isinstance(center, Point):
            raise TypeError("center must be a Point")
        if sides < 1:
            raise ValueError(f"sides must be at least 1, got {sides}")
        self._center = center
        self._radius = int(radius)
        self._sides = sides
        self._offset = offset
        self.fixed_colour = colour
        self.source = source

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def sides(self) -> int:
        return self._sides

    def vertices(self) -> list[Point]:
        return to_points(sample(self._center, self._radius, polygon_angles(self._sides, self._offset)))

    def edges(self, colour: Optional[rgb] = None) -> list[Line]:
        return closed_loop(self.vertices(), colour)

    def __repr__(self):
        return f"{type(self).__name__}({self._center!r}, {self._radius}, sides={self._sides})"


class Pentagon(RegularPolygon):
    SIDES = 5

    def __init__(self, center: Point, radius: int, offset: float = -90.0, **kwargs):
        super().__init__(center, radius, self.SIDES, offset, **kwargs)

    @classmethod
    def random(cls, width: int, height: int, source: Optional[UniformRandom] = None, **kwargs) -> "Pentagon":
        """Random centre in [0, width) x [0, height) and radius in [0, min(width, height))."""
        rng = source if source is not None else default_source()
        center = Point.random(width, height, rng)
        return cls(center, rng.randrange(min(width, height)), source=source, **kwargs)
