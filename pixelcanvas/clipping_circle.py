"""Point, line and polygon clipping against a circular window."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from pixelcanvas.circles import CircleMidPointDDAModifiedAlgorithm
from pixelcanvas.clipping_square import _disc
from pixelcanvas.geometry import (
    GRAY,
    GREEN,
    RED,
    Color,
    DrawingAlgorithm,
    Pixel,
    Point,
    radius_between,
)
from pixelcanvas.lines import BresenhamLineAlgorithm

_ORIGINAL_EDGE_COLOR = Color(128, 128, 128, 0)
_POLYGON_VERTICES = 5


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class _CircleWindow:
    """A circular window given by its centre and a truncated radius."""

    center: Point
    radius: int

    @classmethod
    def from_points(cls, center: Point, rim: Point) -> "_CircleWindow":
        return cls(center, radius_between(center, rim))

    def contains(self, point: Point) -> bool:
        dx = point.x - self.center.x
        dy = point.y - self.center.y
        return dx * dx + dy * dy <= self.radius * self.radius

    def outline(self) -> list[Pixel]:
        rim = Point(self.center.x + self.radius, self.center.y)
        return CircleMidPointDDAModifiedAlgorithm().draw([self.center, rim], [RED])

    def chord(self, p1: Point, p2: Point) -> Optional[tuple[Point, Point]]:
        """The part of segment p1-p2 between its crossings with the circle.

        The crossing parameters are clamped to the segment, so a segment that
        misses the circle while its line does not collapses onto an endpoint.
        Returns None when the line does not meet the circle at all.
        """
        dx = float(p2.x - p1.x)
        dy = float(p2.y - p1.y)
        if dx == 0 and dy == 0:
            return p1, p1
        fx = float(p1.x - self.center.x)
        fy = float(p1.y - self.center.y)
        a = dx * dx + dy * dy
        b = 2 * (fx * dx + fy * dy)
        c = fx * fx + fy * fy - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None
        root = math.sqrt(discriminant)
        t1 = _clamp_unit((-b - root) / (2 * a))
        t2 = _clamp_unit((-b + root) / (2 * a))
        if t1 > t2:
            t1, t2 = t2, t1
        return (
            Point(int(p1.x + dx * t1), int(p1.y + dy * t1)),
            Point(int(p1.x + dx * t2), int(p1.y + dy * t2)),
        )


class CircularPointClipping(DrawingAlgorithm):
    """Marks a point green inside the circular window and gray outside it."""

    name = "Circular Point Clipping"
    required_points = 3

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 3:
            return []
        window = _CircleWindow.from_points(points[0], points[1])
        target = points[2]
        pixels = window.outline()
        pixels.extend(_disc(target, GREEN if window.contains(target) else GRAY))
        return pixels


class CircularLineClipping(DrawingAlgorithm):
    """Draws the part of a line that lies inside the circular window."""

    name = "Circle Line Clipping"
    required_points = 4

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 4:
            return []
        window = _CircleWindow.from_points(points[0], points[1])
        pixels = window.outline()
        chord = window.chord(points[2], points[3])
        if chord is not None and (window.contains(chord[0]) or window.contains(chord[1])):
            pixels.extend(BresenhamLineAlgorithm().draw(list(chord), [self._pen(colors)]))
        return pixels


class CircularPolygonClipping(DrawingAlgorithm):
    """Draws a pentagon faintly and overlays its parts inside the circular window."""

    name = "Circle Polygon Clipping"
    required_points = 7

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 7:
            return []
        window = _CircleWindow.from_points(points[0], points[1])
        pixels = window.outline()
        pen = self._pen(colors)
        line = BresenhamLineAlgorithm()

        polygon = list(points[2:2 + _POLYGON_VERTICES])
        edges = list(zip(polygon, polygon[1:] + polygon[:1]))
        for p1, p2 in edges:
            pixels.extend(line.draw([p1, p2], [_ORIGINAL_EDGE_COLOR]))

        for p1, p2 in edges:
            if window.contains(p1) and window.contains(p2):
                pixels.extend(line.draw([p1, p2], [pen]))
                continue
            chord = window.chord(p1, p2)
            if chord is not None:
                pixels.extend(line.draw(list(chord), [pen]))
        return pixels