from .Colour import BLACK, RED, WHITE, rgb
from .Random import UniformRandom, default_source
from .Canvas import Canvas
from .Drawable import Composite, Drawable
from .Point import Point
from .Line import Line, rasterize
from .Circle import Circle
from .Triangle import Triangle
from .Rectangle import Rectangle
from .Cube import Cube
from .Pentagon import Pentagon, RegularPolygon

__all__ = [
    "BLACK",
    "RED",
    "WHITE",
    "rgb",
    "UniformRandom",
    "default_source",
    "Canvas",
    "Composite",
    "Drawable",
    "Point",
    "Line",
    "rasterize",
    "Circle",
    "Triangle",
    "Rectangle",
    "Cube",
    "Pentagon",
    "RegularPolygon",
]
