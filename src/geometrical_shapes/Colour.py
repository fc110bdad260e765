from dataclasses import dataclass


@dataclass(frozen=True)
class rgb:
    """
    One 8-bit RGB canvas cell value.

    Shapes resolve exactly one rgb per draw and hand it to Canvas.write_pixel,
    which stores it as three uint8 channels.
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        """Validate that RGB values are within the 0-255 range."""
        for component in ("r", "g", "b"):
            value = getattr(self, component)
            if not isinstance(value, int) or isinstance(value, bool) or not (0 <= value <= 255):
                raise ValueError(f"RGB component '{component}' must be an integer between 0 and 255, but got {value}")

    @classmethod
    def from_tuple(cls, value) -> "rgb":
        """Build a colour from any (r, g, b) sequence, such as a row of canvas pixels."""
        r, g, b = (int(c) for c in value)
        return cls(r, g, b)

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the colour as a tuple."""
        return (self.r, self.g, self.b)

    def __iter__(self):
        """Return an iterator over the RGB components."""
        return iter((self.r, self.g, self.b))


BLACK = rgb(0, 0, 0)
WHITE = rgb(255, 255, 255)
RED = rgb(255, 0, 0)
