from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .Canvas import Canvas
from .Colour import rgb
from .Random import UniformRandom, default_source

if TYPE_CHECKING:
    from .Line import Line


class Drawable(ABC):
    """Abstract base for anything that can be drawn onto a Canvas."""

    # set per instance; None means pick a random colour on every draw
    fixed_colour: Optional[rgb] = None
    source: Optional[UniformRandom] = None

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Write this shape's pixels to the canvas with bounds checked writes."""
        pass

    def colour(self, source: Optional[UniformRandom] = None) -> rgb:
        """
        Resolve the colour for one draw.

        Returns the colour fixed at construction if there is one, otherwise a
        new random colour from source, the shape's own source or the
        process-wide default, in that order.
        """
        if self.fixed_colour is not None:
            return self.fixed_colour
        if source is None:
            source = self.source if self.source is not None else default_source()
        return source.random_colour()


class Composite(Drawable):
    """A shape drawn as an ordered list of line segments in one colour."""

    @abstractmethod
    def edges(self, colour: Optional[rgb] = None) -> list["Line"]:
        """Return the segments in drawing order, each bound to colour."""
        pass

    def draw(self, canvas: Canvas) -> None:
        colour = self.colour()
        for edge in self.edges(colour):
            edge.draw(canvas)
