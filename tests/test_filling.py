from dataclasses import dataclass, field

import pytest

from pixelcanvas.filling import (
    ConvexFill,
    FillRectangleBezierCurve,
    FillSquareHermiteCurve,
    FloodFillAlgorithm,
    GeneralFill,
)
from pixelcanvas.geometry import BLACK, BLUE, GREEN, RED, WHITE, Color, DrawingError, Point

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def _points_in(pixels, color):
    return {p for p, c in pixels if c == color}


def _interior_rows(x_max, y_max):
    return {Point(x, y) for x in range(x_max + 1) for y in range(y_max)}


@pytest.mark.parametrize("algorithm", [ConvexFill(), GeneralFill()])
def test_square_fill_rows(algorithm):
    pixels = algorithm.draw(SQUARE, [BLACK, RED, BLUE])
    assert _points_in(pixels, RED) == _interior_rows(4, 4)


@pytest.mark.parametrize("algorithm", [ConvexFill(), GeneralFill()])
def test_square_outline_uses_newest_colour(algorithm):
    pixels = algorithm.draw(SQUARE, [BLACK, RED, BLUE])
    outline = _points_in(pixels, BLUE)
    perimeter = {p for p in _interior_rows(4, 5) if p.x in (0, 4) or p.y in (0, 4)}
    assert outline == perimeter


@pytest.mark.parametrize("algorithm", [ConvexFill(), GeneralFill()])
def test_too_few_points_draw_nothing(algorithm):
    assert algorithm.draw(SQUARE[:2], [BLACK]) == []


def test_single_colour_falls_back_to_green():
    pixels = ConvexFill().draw(SQUARE, [BLACK])
    assert {c for _, c in pixels} == {GREEN}


def test_required_points_defaults_and_override():
    assert ConvexFill().required_points == 4
    assert GeneralFill().required_points == 6
    assert ConvexFill(5).required_points == 5
    assert GeneralFill(3).required_points == 3


def test_draw_polygon_one_line_per_edge():
    lines = GeneralFill().draw_polygon(SQUARE, [RED])
    assert len(lines) == len(SQUARE)
    assert [line[0][0] for line in lines] == SQUARE
    assert all(c == RED for line in lines for _, c in line)


def test_convex_and_general_agree_on_convex_polygon():
    triangle = [Point(0, 0), Point(10, 2), Point(3, 9)]
    colors = [BLACK, RED, BLUE]
    convex = _points_in(ConvexFill(3).draw(triangle, colors), RED)
    general = _points_in(GeneralFill(3).draw(triangle, colors), RED)
    assert convex == general
    assert convex


def test_general_fill_concave_stays_in_bounds():
    shape = [Point(0, 0), Point(10, 0), Point(10, 10), Point(5, 4), Point(0, 10)]
    pixels = GeneralFill(5).draw(shape, [BLACK, RED, BLUE])
    filled = _points_in(pixels, RED)
    assert filled
    assert all(0 <= p.x <= 10 and 0 <= p.y <= 10 for p in filled)
    # the notch above the inner vertex is left empty
    assert Point(5, 8) not in filled


def test_general_fill_flat_polygon_only_outline():
    flat = [Point(0, 3), Point(5, 3), Point(9, 3)]
    pixels = GeneralFill(3).draw(flat, [BLACK, RED, BLUE])
    assert {c for _, c in pixels} == {BLUE}


def test_rectangle_bezier_covers_every_row():
    pixels = FillRectangleBezierCurve().draw([Point(0, 0), Point(5, 3)])
    points = {p for p, _ in pixels}
    assert {p.y for p in points} == {0, 1, 2, 3}
    assert all(0 <= p.x <= 5 for p in points)
    for y in range(4):
        assert Point(0, y) in points and Point(5, y) in points
    assert {c for _, c in pixels} == {RED}


def test_rectangle_bezier_corner_order_irrelevant():
    forward = FillRectangleBezierCurve().draw([Point(0, 0), Point(5, 3)], [BLUE])
    backward = FillRectangleBezierCurve().draw([Point(5, 3), Point(0, 0)], [BLUE])
    assert set(forward) == set(backward)


def test_square_hermite_uses_shorter_side():
    corners = [Point(6, 4), Point(0, 0)]
    pixels = FillSquareHermiteCurve().draw(corners)
    points = {p for p, _ in pixels}
    assert {p.x for p in points} == {0, 1, 2, 3}
    assert all(0 <= p.y <= 4 for p in points)
    assert Point(0, 0) in points and Point(3, 4) in points
    assert {c for _, c in pixels} == {RED}
    assert corners == [Point(6, 4), Point(0, 0)]


@pytest.mark.parametrize("algorithm", [FillSquareHermiteCurve(), FillRectangleBezierCurve()])
def test_curve_fills_need_two_points(algorithm):
    with pytest.raises(DrawingError):
        algorithm.draw([Point(1, 1)])


@dataclass
class FakeRaster:
    width: int = 5
    height: int = 5
    border: Color = BLACK
    background: Color = WHITE
    reads: list = field(default_factory=list)

    def color_at(self, x, y):
        self.reads.append((x, y))
        if x in (0, self.width - 1) or y in (0, self.height - 1):
            return self.border
        return self.background


def test_flood_fill_fills_enclosed_area():
    fill = FloodFillAlgorithm(FakeRaster)
    pixels = fill.draw([Point(2, 2)], [BLACK, BLUE])
    assert {p for p, _ in pixels} == {Point(x, y) for x in range(1, 4) for y in range(1, 4)}
    assert {c for _, c in pixels} == {BLUE}
    assert pixels[0][0] == Point(2, 2)


def test_flood_fill_on_border_or_outside_is_empty():
    fill = FloodFillAlgorithm(FakeRaster)
    assert fill.draw([Point(0, 0)], [BLACK, BLUE]) == []
    assert fill.draw([Point(-1, 7)], [BLACK, BLUE]) == []


def test_flood_fill_stops_at_existing_fill_colour():
    fill = FloodFillAlgorithm(lambda: FakeRaster(background=BLUE))
    assert fill.draw([Point(2, 2)], [BLACK, BLUE]) == []


def test_flood_fill_without_points_is_empty():
    assert FloodFillAlgorithm().draw([]) == []


def test_flood_fill_without_snapshot_raises():
    with pytest.raises(DrawingError):
        FloodFillAlgorithm().draw([Point(1, 1)])