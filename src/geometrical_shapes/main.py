import argparse
from typing import Optional

from .Canvas import Canvas
from .Circle import Circle
from .Cube import Cube
from .Drawable import Drawable
from .Line import Line
from .Pentagon import Pentagon
from .Point import Point
from .Random import UniformRandom
from .Rectangle import Rectangle
from .Triangle import Triangle

WIDTH = 1000
HEIGHT = 1000
OUTPUT = "image.png"
NUM_POINTS = 999
NUM_LINES = 4
NUM_CIRCLES = 19
NUM_PENTAGONS = 4


def build_scene(width: int, height: int, source: UniformRandom) -> list[Drawable]:
    """Returns the shapes of the demo scene in drawing order."""
    scene: list[Drawable] = []
    scene += [Point.random(width, height, source) for _ in range(NUM_POINTS)]
    scene += [Line.random(width, height, source) for _ in range(NUM_LINES)]
    scene.append(Triangle(Point(500, 500), Point(250, 700), Point(700, 800), source=source))
    scene.append(Rectangle(Point(150, 300), Point(50, 60), source=source))
    scene += [Circle.random(width, height, source) for _ in range(NUM_CIRCLES)]
    scene.append(Cube.from_size(Point(500, 500), 300, source=source))
    scene += [Pentagon.random(width, height, source) for _ in range(NUM_PENTAGONS)]
    return scene


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rasterize random shapes to an image")
    parser.add_argument("--width", type=int, default=WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Canvas height in pixels")
    parser.add_argument("-o", "--output", default=OUTPUT, help="Image file to write")
    parser.add_argument("-s", "--seed", type=int, default=None, help="Seed for repeatable output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print each shape as it is drawn")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Draws the demo scene and saves it."""
    args = parse_args(argv)
    source = UniformRandom(args.seed)
    canvas = Canvas(args.width, args.height)

    for shape in build_scene(args.width, args.height, source):
        if args.verbose and not isinstance(shape, Point):
            print(f"Drawing {shape!r}")
        shape.draw(canvas)

    if canvas.save(args.output):
        print(f"Saved {args.output}")
        return 0
    print(f"Failed to save {args.output}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
