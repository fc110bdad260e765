"""
Parametric angle sampling around a centre point.

Used to trace circles (dense point sampling) and the vertices of regular
polygons. Angles are in degrees throughout.
"""

import math
from typing import Iterator

import numpy as np

from .Point import Point

# samples per block when tracing a circle
BLOCK_SIZE = 1 << 20


def circle_step(radius: int) -> float:
    """
    Angular increment in degrees for a circle of the given radius.

    360 / (radius^2 * pi), so larger circles are sampled more densely.
    Radius 0 has no meaningful step and returns 360.
    """
    if radius == 0:
        return 360.0
    return 360.0 / (radius * radius * math.pi)


def circle_sample_count(radius: int) -> int:
    """Number of angles k * step with k * step <= 360."""
    return int(math.floor(360.0 / circle_step(radius) + 1e-9)) + 1


def circle_angles(radius: int) -> np.ndarray:
    """Angles from 0 up to and including 360 degrees, spaced by circle_step."""
    return np.arange(circle_sample_count(radius), dtype=np.float64) * circle_step(radius)


def circle_blocks(center: Point, radius: int, block_size: int = BLOCK_SIZE) -> Iterator[np.ndarray]:
    """
    Yield the sampled circle pixels in blocks of at most block_size samples.

    Consecutive duplicates are removed, including across block boundaries,
    so joining the blocks gives dedupe_consecutive of the full sampling.
    Memory use is bounded by block_size whatever the radius.
    """
    step = circle_step(radius)
    count = circle_sample_count(radius)
    last = None
    for start in range(0, count, block_size):
        angles = np.arange(start, min(start + block_size, count), dtype=np.float64) * step
        block = dedupe_consecutive(sample(center, radius, angles))
        if last is not None and np.array_equal(block[0], last):
            block = block[1:]
        if len(block):
            last = block[-1]
            yield block


def polygon_angles(sides: int, offset: float = -90.0) -> np.ndarray:
    """One angle per vertex, 360 / sides apart, starting at offset."""
    if sides < 1:
        raise ValueError(f"A polygon needs at least one vertex, got {sides}")
    return offset + np.arange(sides, dtype=np.float64) * (360.0 / sides)


def sample(center: Point, radius: int, angles: np.ndarray) -> np.ndarray:
    """
    Map each angle to (center.x + r cos a, center.y + r sin a) rounded to the nearest pixel.

    Returns:
        An (n, 2) integer array of x, y pairs in the same order as angles.
    """
    theta = np.radians(angles)
    xs = np.rint(center.x + radius * np.cos(theta))
    ys = np.rint(center.y + radius * np.sin(theta))
    return np.stack((xs, ys), axis=-1).astype(np.int64)


def dedupe_consecutive(points: np.ndarray) -> np.ndarray:
    """Drop samples that repeat the pixel immediately before them."""
    if len(points) < 2:
        return points
    keep = np.ones(len(points), dtype=bool)
    keep[1:] = np.any(points[1:] != points[:-1], axis=-1)
    return points[keep]


def to_points(samples: np.ndarray) -> list[Point]:
    return [Point(int(x), int(y)) for x, y in samples]
