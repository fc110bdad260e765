from dataclasses import dataclass, field
from typing import Optional

from .Canvas import Canvas
from .Colour import rgb
from .Drawable import Drawable
from .Random import UniformRandom, default_source


@dataclass(frozen=True)
class Point(Drawable):
    """Immutable integer pixel coordinate, drawable as a single pixel."""

    x: int
    y: int
    # colour and source take no part in equality or hashing
    fixed_colour: Optional[rgb] = field(default=None, compare=False, repr=False, kw_only=True)
    source: Optional[UniformRandom] = field(default=None, compare=False, repr=False, kw_only=True)

    @classmethod
    def random(cls, width: int, height: int, source: Optional[UniformRandom] = None, **kwargs) -> "Point":
        """Return a point drawn uniformly from [0, width) x [0, height)."""
        rng = source if source is not None else default_source()
        return cls(rng.randrange(width), rng.randrange(height), source=source, **kwargs)

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def draw(self, canvas: Canvas) -> None:
        canvas.write_pixel(self.x, self.y, self.colour())
