import pytest

from pixelcanvas.geometry import (
    BLACK,
    RED,
    Color,
    DrawingAlgorithm,
    Point,
    circle_points,
    ellipse_points,
    radius_between,
)


def test_points_sort_by_x_then_y():
    points = [Point(3, 1), Point(1, 5), Point(1, 2), Point(2, 0)]
    assert sorted(points) == [Point(1, 2), Point(1, 5), Point(2, 0), Point(3, 1)]


def test_point_unpacks():
    x, y = Point(7, -4)
    assert (x, y) == (7, -4)


def test_point_defaults_to_origin():
    assert Point() == Point(0, 0)


def test_color_alpha_defaults_to_opaque():
    assert Color(1, 2, 3).a == 255


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range_channels(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_circle_points_follow_octant_order():
    center = Point(10, 20)
    result = circle_points(center, Point(1, 2), RED)
    offsets = [(1, 2), (-1, 2), (1, -2), (-1, -2), (2, 1), (-2, 1), (2, -1), (-2, -1)]
    assert result == [(Point(center.x + dx, center.y + dy), RED) for dx, dy in offsets]


def test_ellipse_points_follow_quadrant_order():
    center = Point(-5, 4)
    result = ellipse_points(center, Point(3, 6), BLACK)
    offsets = [(3, 6), (-3, 6), (3, -6), (-3, -6)]
    assert result == [(Point(center.x + dx, center.y + dy), BLACK) for dx, dy in offsets]


def test_radius_between_exact():
    assert radius_between(Point(0, 0), Point(3, 4)) == 5


def test_radius_between_truncates():
    assert radius_between(Point(0, 0), Point(1, 1)) == 1


def test_radius_between_is_symmetric():
    a, b = Point(12, -7), Point(-30, 19)
    assert radius_between(a, b) == radius_between(b, a)


def test_drawing_algorithm_is_abstract():
    with pytest.raises(TypeError):
        DrawingAlgorithm()