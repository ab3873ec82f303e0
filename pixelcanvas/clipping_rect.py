"""Point, line and polygon clipping against an axis-aligned rectangular window."""

from __future__ import annotations

from typing import Optional, Sequence

from pixelcanvas.clipping_square import (
    CohenSutherlandLineClippingAlgorithm,
    _disc,
    _SquareWindow as _Window,
)
from pixelcanvas.geometry import (
    BLACK,
    GRAY,
    GREEN,
    RED,
    Color,
    DrawingAlgorithm,
    DrawingError,
    Pixel,
    Point,
    _round_half_away,
)
from pixelcanvas.lines import BresenhamLineAlgorithm


def _window(corner: Point, opposite: Point) -> _Window:
    """The rectangle spanned by two opposite corners."""
    return _Window(
        min(corner.x, opposite.x),
        min(corner.y, opposite.y),
        max(corner.x, opposite.x),
        max(corner.y, opposite.y),
    )


def _palette(colors: Optional[Sequence[Color]]) -> list[Color]:
    """The colours given, or black alone when none were passed at all."""
    return [BLACK] if colors is None else list(colors)


def vertical_intersect(p1: Point, p2: Point, x_edge: int) -> Point:
    """Where the line through ``p1`` and ``p2`` meets the vertical line x = ``x_edge``."""
    if p2.x == p1.x:
        return Point(x_edge, p1.y)
    y = p1.y + (x_edge - p1.x) * (p2.y - p1.y) / (p2.x - p1.x)
    return Point(x_edge, _round_half_away(y))


def horizontal_intersect(p1: Point, p2: Point, y_edge: int) -> Point:
    """Where the line through ``p1`` and ``p2`` meets the horizontal line y = ``y_edge``."""
    if p2.y == p1.y:
        return Point(p1.x, y_edge)
    x = p1.x + (y_edge - p1.y) * (p2.x - p1.x) / (p2.y - p1.y)
    return Point(_round_half_away(x), y_edge)


def _clip_edge(points, inside, intersect) -> list[Point]:
    """One Sutherland-Hodgman pass of a closed polygon against a single edge."""
    vertices = list(points)
    clipped: list[Point] = []
    for p1, p2 in zip(vertices, vertices[1:] + vertices[:1]):
        first_in, second_in = inside(p1), inside(p2)
        if first_in and second_in:
            clipped.append(p2)
        elif second_in:
            clipped.append(intersect(p1, p2))
            clipped.append(p2)
        elif first_in:
            clipped.append(intersect(p1, p2))
    return clipped


def clip_left(points: Sequence[Point], x_left: int) -> list[Point]:
    """Keep the part of the polygon with x >= ``x_left``."""
    return _clip_edge(
        points, lambda p: p.x >= x_left, lambda a, b: vertical_intersect(a, b, x_left)
    )


def clip_right(points: Sequence[Point], x_right: int) -> list[Point]:
    """Keep the part of the polygon with x <= ``x_right``."""
    return _clip_edge(
        points, lambda p: p.x <= x_right, lambda a, b: vertical_intersect(a, b, x_right)
    )


def clip_top(points: Sequence[Point], y_top: int) -> list[Point]:
    """Keep the part of the polygon with y <= ``y_top``."""
    return _clip_edge(
        points, lambda p: p.y <= y_top, lambda a, b: horizontal_intersect(a, b, y_top)
    )


def clip_bottom(points: Sequence[Point], y_bottom: int) -> list[Point]:
    """Keep the part of the polygon with y >= ``y_bottom``."""
    return _clip_edge(
        points, lambda p: p.y >= y_bottom, lambda a, b: horizontal_intersect(a, b, y_bottom)
    )


def clip_polygon(
    points: Sequence[Point], x_left: int, x_right: int, y_bottom: int, y_top: int
) -> list[Point]:
    """Clip a polygon to x_left <= x <= x_right and y_bottom <= y <= y_top."""
    clipped = clip_left(points, x_left)
    clipped = clip_right(clipped, x_right)
    clipped = clip_top(clipped, y_top)
    return clip_bottom(clipped, y_bottom)


class PointClippingRectangleAlgorithm(DrawingAlgorithm):
    """Draws the window and marks the point only when it falls inside."""

    name = "Point Clipping Rectangle window"
    required_points = 3

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 3:
            return []
        window = _window(points[0], points[1])
        target = points[2]
        pixels = window.border(RED)
        if window.contains(target):
            pixels.extend(_disc(target, GREEN))
        return pixels


class LineClippingRectangleAlgorithm(DrawingAlgorithm):
    """Cohen-Sutherland line clipping; a rejected line is drawn whole in gray."""

    name = "Line Clipping Rectangle window"
    required_points = 4

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 4:
            return []
        window = _window(points[0], points[1])
        start, end = points[2], points[3]
        palette = _palette(colors)
        line_color = palette[0] if palette else GREEN

        pixels = window.border(RED)
        line = BresenhamLineAlgorithm()
        clipped = CohenSutherlandLineClippingAlgorithm._clip(
            start.x, start.y, end.x, end.y, window
        )
        if clipped is not None:
            x1, y1, x2, y2 = clipped
            pixels.extend(line.draw([Point(x1, y1), Point(x2, y2)], [line_color]))
        else:
            pixels.extend(line.draw([start, end], [GRAY]))
        return pixels


class PolygonClippingRectangleAlgorithm(DrawingAlgorithm):
    """Clips the polygon after the two window corners and outlines what remains."""

    name = "Polygon Clipping Rectangle window"
    required_points = 7

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 2:
            raise DrawingError("polygon clipping needs two window corners")
        window = _window(points[0], points[1])
        pixels = window.border(RED)

        polygon = clip_polygon(points[2:], window.xmin, window.xmax, window.ymin, window.ymax)
        if len(polygon) < 2:
            return pixels

        palette = _palette(colors)
        line_color = palette[0] if palette else GREEN
        line = BresenhamLineAlgorithm()
        for p1, p2 in zip(polygon, polygon[1:] + polygon[:1]):
            pixels.extend(line.draw([p1, p2], [line_color]))
        return pixels