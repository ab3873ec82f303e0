"""Circles with one quadrant filled, by radial lines or by small circles."""

from __future__ import annotations

from typing import Optional, Sequence

from pixelcanvas.circles import CircleMidPointDDAModifiedAlgorithm
from pixelcanvas.geometry import (
    Color,
    DrawingAlgorithm,
    DrawingError,
    Pixel,
    Point,
    radius_between,
)
from pixelcanvas.lines import BresenhamLineAlgorithm

_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_INNER_RADIUS = 5


def quadrant_of(center: Point, marker: Point) -> int:
    """Index 0..3 of the quadrant around ``center`` that ``marker`` points into."""
    if marker.x > center.x:
        return 0 if marker.y > center.y else 1
    return 2 if marker.y > center.y else 3


def in_quadrant(center: Point, point: Point, index: int) -> bool:
    """Whether ``point`` lies in quadrant ``index`` of ``center``, axes included."""
    if index == 0:
        return point.x >= center.x and point.y >= center.y
    if index == 1:
        return point.x >= center.x and point.y <= center.y
    if index == 2:
        return point.x <= center.x and point.y >= center.y
    return point.x <= center.x and point.y <= center.y


def _outline_and_quadrant(points: Sequence[Point]) -> tuple[Point, int]:
    if len(points) < 2:
        raise DrawingError("a quarter-filled circle needs a centre and a rim point")
    center = points[0]
    marker = points[2] if len(points) > 2 else Point(center.x + 1, center.y)
    return center, quadrant_of(center, marker)


class CircleQuarterLineFilling(DrawingAlgorithm):
    """Circle whose chosen quadrant is filled with black radial lines."""

    name = "Circle Quarter Line Filling"
    required_points = 3

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        center, index = _outline_and_quadrant(points)
        outline = CircleMidPointDDAModifiedAlgorithm().draw(points, colors)
        line = BresenhamLineAlgorithm()
        pixels = list(outline)
        for rim, _ in outline:
            if in_quadrant(center, rim, index):
                pixels.extend(line.draw([center, rim]))
        return pixels


class CircleQuarterCircleFilling(DrawingAlgorithm):
    """Circle whose chosen quadrant is filled with a grid of small circles."""

    name = "Circle Quarter Line Filling"
    required_points = 3

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        center, index = _outline_and_quadrant(points)
        circle = CircleMidPointDDAModifiedAlgorithm()
        pixels = circle.draw(points, colors)
        radius = radius_between(center, points[1])
        sx, sy = _DIRECTIONS[index]
        limit = radius + _INNER_RADIUS
        spacing = 2 * _INNER_RADIUS
        for i in range(0, limit + 1, spacing):
            for j in range(0, limit + 1, spacing):
                inner = Point(center.x + sx * i, center.y + sy * j)
                if radius_between(center, inner) > limit:
                    break
                rim = Point(inner.x + _INNER_RADIUS, inner.y)
                for point, color in circle.draw([inner, rim], colors):
                    if self._inside(center, point, radius, index):
                        pixels.append((point, color))
        return pixels

    @staticmethod
    def _inside(center: Point, point: Point, radius: int, index: int) -> bool:
        dx, dy = point.x - center.x, point.y - center.y
        return dx * dx + dy * dy <= radius * radius and in_quadrant(center, point, index)