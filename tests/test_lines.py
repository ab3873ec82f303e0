import pytest

from pixelcanvas.geometry import BLACK, BLUE, RED, Color, Point
from pixelcanvas.lines import (
    BresenhamLineAlgorithm,
    ColoredParametricLineAlgorithm,
    DDALineAlgorithm,
    ParametricLineAlgorithm,
)

LINES = [
    (Point(0, 0), Point(10, 3)),
    (Point(2, 5), Point(-7, 1)),
    (Point(0, 0), Point(3, 10)),
    (Point(5, 5), Point(5, -4)),
    (Point(-3, 2), Point(4, 2)),
]

FORWARD_LINES = [
    (Point(0, 0), Point(10, 3)),
    (Point(0, 0), Point(3, 10)),
    (Point(-3, 2), Point(4, 2)),
]

ALGORITHMS = [
    BresenhamLineAlgorithm,
    DDALineAlgorithm,
    ParametricLineAlgorithm,
    ColoredParametricLineAlgorithm,
]


def _points(pixels):
    return [p for p, _ in pixels]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_too_few_points_draws_nothing(algorithm):
    assert algorithm().draw([Point(1, 1)]) == []


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_required_points_is_enough_to_draw(algorithm):
    instance = algorithm()
    assert instance.required_points == 2
    candidates = [Point(0, 0), Point(3, 1), Point(7, 7)]
    pixels = instance.draw(candidates[: instance.required_points], [RED])
    assert _points(pixels)[0] == Point(0, 0)
    assert len(pixels) == 4


@pytest.mark.parametrize("start, end", LINES)
def test_bresenham_connects_endpoints(start, end):
    pts = _points(BresenhamLineAlgorithm().draw([start, end]))
    assert pts[0] == start
    assert pts[-1] == end
    assert len(pts) == max(abs(end.x - start.x), abs(end.y - start.y)) + 1
    for a, b in zip(pts, pts[1:]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


def test_bresenham_uses_last_color():
    pixels = BresenhamLineAlgorithm().draw([Point(0, 0), Point(4, 2)], [RED, BLUE])
    assert {c for _, c in pixels} == {BLUE}


def test_bresenham_defaults_to_black():
    pixels = BresenhamLineAlgorithm().draw([Point(0, 0), Point(4, 2)])
    assert {c for _, c in pixels} == {BLACK}


@pytest.mark.parametrize("start, end", FORWARD_LINES)
def test_dda_forward_lines_connect_endpoints(start, end):
    pts = _points(DDALineAlgorithm().draw([start, end]))
    assert pts[0] == start
    assert pts[-1] == end
    assert len(pts) == max(abs(end.x - start.x), abs(end.y - start.y)) + 1


def test_dda_reversed_line_steps_from_the_far_end():
    start, end = Point(10, 3), Point(0, 0)
    pts = _points(DDALineAlgorithm().draw([start, end]))
    assert pts[0] == start
    assert pts[-1] == start
    assert end not in pts
    assert len(pts) == 11


def test_dda_single_point_line():
    pixels = DDALineAlgorithm().draw([Point(4, 4), Point(4, 4)], [RED])
    assert pixels == [(Point(4, 4), RED)]


@pytest.mark.parametrize("start, end", LINES)
def test_parametric_stays_in_bounding_box(start, end):
    pts = _points(ParametricLineAlgorithm().draw([start, end]))
    assert pts[0] == start
    for p in pts:
        assert min(start.x, end.x) <= p.x <= max(start.x, end.x)
        assert min(start.y, end.y) <= p.y <= max(start.y, end.y)


def test_parametric_horizontal_line_reaches_end():
    pts = _points(ParametricLineAlgorithm().draw([Point(0, 0), Point(10, 0)]))
    assert pts[-1] == Point(10, 0)
    assert pts == [Point(x, 0) for x in range(11)]


def test_parametric_degenerate_line_is_one_pixel():
    pixels = ParametricLineAlgorithm().draw([Point(3, 3), Point(3, 3)], [BLUE])
    assert pixels == [(Point(3, 3), BLUE)]


def test_colored_line_blends_from_last_to_first_color():
    first, last = Color(200, 0, 0), Color(0, 0, 100)
    pixels = ColoredParametricLineAlgorithm().draw([Point(0, 0), Point(10, 0)], [first, last])
    assert pixels[0] == (Point(0, 0), last)
    assert pixels[-1] == (Point(10, 0), first)


def test_colored_line_channels_move_monotonically():
    first, last = Color(200, 0, 0), Color(0, 0, 100)
    pixels = ColoredParametricLineAlgorithm().draw([Point(0, 0), Point(10, 0)], [first, last])
    reds = [c.r for _, c in pixels]
    blues = [c.b for _, c in pixels]
    assert reds == sorted(reds)
    assert blues == sorted(blues, reverse=True)


def test_colored_line_records_its_colors():
    algorithm = ColoredParametricLineAlgorithm()
    algorithm.draw([Point(0, 0), Point(5, 5)], [RED, BLUE])
    assert (algorithm.start_color, algorithm.end_color) == (BLUE, RED)


def test_colored_line_single_color_is_flat():
    pixels = ColoredParametricLineAlgorithm().draw([Point(0, 0), Point(6, 2)], [RED])
    assert {c for _, c in pixels} == {RED}