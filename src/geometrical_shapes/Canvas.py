from typing import Tuple, Union

import numpy as np
from PIL import Image as PILImage

from .Colour import rgb


class Canvas:
    """A fixed size grid of RGB cells, built on numpy and Pillow."""

    def __init__(self, width: int, height: int, fill_colour: Union[rgb, tuple, None] = None):
        """
        Initialize the Canvas object.

        Args:
            width: The width of the canvas in pixels.
            height: The height of the canvas in pixels.
            fill_colour: The initial colour of the canvas. Can be an rgb object,
                         a 3 element tuple, or None for a default black canvas.

        Raises:
            ValueError: If either dimension is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must not be negative {width=} {height=}")
        self._width = width
        self._height = height

        fill_colour = self._validate_rgb(fill_colour)
        self._rgb_data = np.full((self._height, self._width, 3), fill_colour, dtype=np.uint8)

    def _check_bounds(self, x: int, y: int) -> None:
        """
        Check if the given x,y coordinates are within the bounds of the canvas.

        Raises:
            IndexError: If the coordinates are out of range.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"x,y values out of range {x=} {self.width=} {y=} {self.height=}")

    def _validate_rgb(self, value: Union[rgb, tuple, None]) -> Tuple[int, int, int]:
        """
        Check to see if a value is correct and return a tuple of RGB values.

        Args:
            value: The value to check.

        Returns:
            A tuple of RGB values.
        """
        match value:
            case None:
                return (0, 0, 0)
            case rgb(r, g, b):
                return (r, g, b)
            case (r, g, b):
                return rgb(r, g, b).as_tuple()
            case _:  # catch all
                raise TypeError(f"Invalid type for RGB colour: {type(value).__name__}")

    @property
    def width(self) -> int:
        """Get the width of the canvas in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Get the height of the canvas in pixels."""
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def write_pixel(self, x: int, y: int, colour: Union[rgb, tuple, None]) -> bool:
        """
        Bounds checked write used by every shape.

        Coordinates outside the canvas are silently dropped so shapes may
        have vertices partly or wholly off the canvas.

        Returns:
            True if the pixel was written, False if it was clipped.
        """
        if not self.in_bounds(x, y):
            return False
        self._rgb_data[y, x] = self._validate_rgb(colour)
        return True

    def set_pixel(self, x: int, y: int, colour: Union[rgb, tuple, None]):
        """
        Set the colour of a single pixel.

        Args:
            x: The x-coordinate of the pixel.
            y: The y-coordinate of the pixel.
            colour: The rgb object representing the colour.

        Raises:
            IndexError: If the coordinates are out of range.
        """
        self._check_bounds(x, y)
        self._rgb_data[y, x] = self._validate_rgb(colour)

    def get_pixel(self, x: int, y: int) -> rgb:
        """
        Get the colour of a single pixel.

        Raises:
            IndexError: If the coordinates are out of range.
        """
        self._check_bounds(x, y)
        return rgb.from_tuple(self._rgb_data[y, x])

    def clear(self, colour: Union[rgb, tuple, None]):
        """
        Clear the canvas with a given colour.

        Args:
            colour: The rgb object representing the colour to fill the canvas with.
        """
        self._rgb_data[:] = self._validate_rgb(colour)

    def count(self, colour: Union[rgb, tuple, None]) -> int:
        """Return how many cells currently hold the given colour."""
        colour = self._validate_rgb(colour)
        return int(np.all(self._rgb_data == colour, axis=-1).sum())

    @property
    def pixels(self) -> np.ndarray:
        """Get the raw pixel data as a numpy array."""
        return self._rgb_data

    @property
    def shape(self) -> tuple[int, ...]:
        """Get the shape of the pixel data array."""
        return self._rgb_data.shape

    def save(self, name: str) -> bool:
        """
        Save the canvas to a file.

        Args:
            name: The path to save the file to. The format is determined from the extension.

        Returns:
            True on success, False if Pillow could not write the file.
        """
        try:
            img = PILImage.fromarray(self._rgb_data)
            img.save(name)
        except (OSError, ValueError):
            return False
        return True

    @classmethod
    def load(cls, name: str) -> "Canvas":
        """Load an image file into a new canvas, converting it to RGB."""
        with PILImage.open(name) as img:
            data = np.asarray(img.convert("RGB"), dtype=np.uint8)
        height, width, _ = data.shape
        canvas = cls(width, height)
        canvas._rgb_data[:] = data
        return canvas

    def __getitem__(self, key: tuple[int, int]) -> rgb:
        """
        Get the colour of a pixel using subscript notation (e.g., canvas[x, y]).
        """
        x, y = key
        return self.get_pixel(x, y)

    def __setitem__(self, key: tuple[int, int], colour: Union[rgb, tuple, None]):
        """
        Set the colour of a pixel using subscript notation (e.g., canvas[x, y] = colour).
        """
        x, y = key
        self.set_pixel(x, y, colour)
