from dataclasses import dataclass, field
from typing import Optional

from .Canvas import Canvas
from .Colour import rgb
from .Drawable import Drawable
from .Point import Point
from .Random import UniformRandom


def _walk(x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    # truncate towards zero, not floor
    err = int((dx if dx > dy else -dy) / 2)
    x, y = x0, y0
    pixels = []
    while True:
        pixels.append((x, y))
        if x == x1 and y == y1:
            break
        prev = err
        if prev > -dx:
            err -= dy
            x += sx
        if prev < dy:
            err += dx
            y += sy
    return pixels


def rasterize(start: Point, end: Point) -> list[tuple[int, int]]:
    """
    Return the pixels of the straight segment from start to end, endpoints included.

    Integer Bresenham walk; the result holds max(|dx|, |dy|) + 1 distinct
    pixels. The walk always runs from the lexicographically smaller endpoint
    so that swapping start and end gives the same pixels in reverse order.
    """
    if (end.x, end.y) < (start.x, start.y):
        pixels = _walk(end.x, end.y, start.x, start.y)
        pixels.reverse()
        return pixels
    return _walk(start.x, start.y, end.x, end.y)


@dataclass(frozen=True)
class Line(Drawable):
    """A straight segment between two points."""

    start: Point
    end: Point
    fixed_colour: Optional[rgb] = field(default=None, compare=False, repr=False, kw_only=True)
    source: Optional[UniformRandom] = field(default=None, compare=False, repr=False, kw_only=True)

    def __post_init__(self):
        for name in ("start", "end"):
            if not isinstance(getattr(self, name), Point):
                raise TypeError(f"Line {name} must be a Point")

    @classmethod
    def random(cls, width: int, height: int, source: Optional[UniformRandom] = None, **kwargs) -> "Line":
        return cls(
            Point.random(width, height, source),
            Point.random(width, height, source),
            source=source,
            **kwargs,
        )

    def pixels(self) -> list[tuple[int, int]]:
        return rasterize(self.start, self.end)

    def draw(self, canvas: Canvas) -> None:
        colour = self.colour()
        for x, y in rasterize(self.start, self.end):
            canvas.write_pixel(x, y, colour)
