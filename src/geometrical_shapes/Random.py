import random
from typing import Optional

from .Colour import rgb


class UniformRandom:
    """
    Uniform integer source used for random colours and random shapes.

    Wraps a private random.Random so a seeded instance can be handed to
    shapes in place of the process-wide default.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_uniform_byte(self) -> int:
        """Return a uniform integer in 0..255 inclusive."""
        return self._rng.randint(0, 255)

    def randrange(self, bound: int) -> int:
        """Return a uniform integer in [0, bound)."""
        return self._rng.randrange(bound)

    def random_colour(self) -> rgb:
        # drawn in r, g, b order
        r = self.next_uniform_byte()
        g = self.next_uniform_byte()
        b = self.next_uniform_byte()
        return rgb(r, g, b)


_default_source: Optional[UniformRandom] = None


def default_source() -> UniformRandom:
    """Return the process-wide source, creating it on first use."""
    global _default_source
    if _default_source is None:
        _default_source = UniformRandom()
    return _default_source
