import pytest

from geometrical_shapes import Canvas, Line, Point, Triangle, UniformRandom, rasterize, rgb


@pytest.fixture
def triangle() -> Triangle:
    return Triangle(Point(0, 0), Point(8, 0), Point(0, 6))


def test_requires_points():
    with pytest.raises(TypeError):
        Triangle(Point(0, 0), (1, 1), Point(2, 2))


def test_edges_in_order(triangle):
    assert triangle.edges() == [
        Line(Point(0, 0), Point(8, 0)),
        Line(Point(8, 0), Point(0, 6)),
        Line(Point(0, 6), Point(0, 0)),
    ]


def test_edges_carry_colour(triangle):
    blue = rgb(0, 0, 255)
    assert all(edge.fixed_colour == blue for edge in triangle.edges(blue))


def test_draw_single_colour(triangle, scripted, lit):
    canvas = Canvas(10, 10)
    source = scripted([30, 60, 90])
    Triangle(*triangle.vertices, source=source).draw(canvas)
    # one colour per draw, shared by every edge
    assert source.calls == 3
    expected = set()
    for edge in triangle.edges():
        expected |= set(rasterize(edge.start, edge.end))
    assert lit(canvas) == expected
    assert canvas.count(rgb(30, 60, 90)) == len(expected)


def test_degenerate_triangle(lit):
    canvas = Canvas(4, 4)
    p = Point(2, 2)
    Triangle(p, p, p, colour=rgb(5, 5, 5)).draw(canvas)
    assert lit(canvas) == {(2, 2)}


def test_random_vertices_in_bounds():
    source = UniformRandom(4)
    for _ in range(100):
        for p in Triangle.random(12, 9, source).vertices:
            assert 0 <= p.x < 12
            assert 0 <= p.y < 9
