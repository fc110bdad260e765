import pytest

from geometrical_shapes import Canvas, Point, Rectangle, UniformRandom, rgb


def test_requires_points():
    with pytest.raises(TypeError):
        Rectangle(Point(0, 0), (2, 2))


def test_corners_in_drawing_order():
    r = Rectangle(Point(150, 300), Point(50, 60))
    assert r.corners() == [Point(150, 60), Point(50, 60), Point(50, 300), Point(150, 300)]


def test_derived_corners_are_edge_endpoints():
    p1, p2 = Point(3, 9), Point(11, 1)
    edges = Rectangle(p1, p2).edges()
    endpoints = {e.start for e in edges} | {e.end for e in edges}
    assert Point(p1.x, p2.y) in endpoints
    assert Point(p2.x, p1.y) in endpoints


def test_edges_form_closed_loop():
    edges = Rectangle(Point(0, 0), Point(4, 3)).edges()
    assert len(edges) == 4
    for a, b in zip(edges, edges[1:] + edges[:1]):
        assert a.end == b.start


def test_small_square_outline(lit):
    canvas = Canvas(5, 5)
    Rectangle(Point(0, 0), Point(2, 2), colour=rgb(7, 7, 7)).draw(canvas)
    expected = {(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 1)}
    assert lit(canvas) == expected
    assert canvas[1, 1] == rgb(0, 0, 0)


def test_draw_resolves_colour_once(scripted):
    canvas = Canvas(6, 6)
    source = scripted([11, 22, 33])
    Rectangle(Point(1, 1), Point(4, 4), source=source).draw(canvas)
    assert source.calls == 3
    assert canvas.count(rgb(11, 22, 33)) == 12


def test_partly_off_canvas(lit):
    canvas = Canvas(5, 5)
    Rectangle(Point(2, 2), Point(8, 8), colour=rgb(1, 1, 1)).draw(canvas)
    assert lit(canvas) == {(2, 2), (3, 2), (4, 2), (2, 3), (2, 4)}


def test_random_corners_in_bounds():
    source = UniformRandom(8)
    for _ in range(100):
        r = Rectangle.random(7, 5, source)
        for p in (r.p1, r.p2):
            assert 0 <= p.x < 7
            assert 0 <= p.y < 5
