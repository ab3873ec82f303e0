"""Point and line clipping against a square window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional, Sequence

from pixelcanvas.geometry import (
    GRAY,
    GREEN,
    RED,
    Color,
    DrawingAlgorithm,
    Pixel,
    Point,
)
from pixelcanvas.lines import BresenhamLineAlgorithm


class _OutCode(IntFlag):
    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True)
class _SquareWindow:
    xmin: int
    ymin: int
    xmax: int
    ymax: int

    @classmethod
    def from_corners(cls, corner: Point, opposite: Point) -> "_SquareWindow":
        """Square anchored at ``corner`` with the shorter side of the two extents."""
        side = min(abs(opposite.x - corner.x), abs(opposite.y - corner.y))
        return cls(corner.x, corner.y, corner.x + side, corner.y + side)

    def border(self, color: Color) -> list[Pixel]:
        pixels: list[Pixel] = []
        for x in range(self.xmin, self.xmax + 1):
            pixels.append((Point(x, self.ymin), color))
            pixels.append((Point(x, self.ymax), color))
        for y in range(self.ymin, self.ymax + 1):
            pixels.append((Point(self.xmin, y), color))
            pixels.append((Point(self.xmax, y), color))
        return pixels

    def contains(self, point: Point) -> bool:
        return self.xmin <= point.x <= self.xmax and self.ymin <= point.y <= self.ymax

    def outcode(self, x: int, y: int) -> _OutCode:
        code = _OutCode.INSIDE
        if x < self.xmin:
            code |= _OutCode.LEFT
        elif x > self.xmax:
            code |= _OutCode.RIGHT
        if y < self.ymin:
            code |= _OutCode.TOP
        elif y > self.ymax:
            code |= _OutCode.BOTTOM
        return code


def _disc(center: Point, color: Color) -> list[Pixel]:
    """A small filled disc of radius 2 marking a point."""
    return [
        (Point(center.x + dx, center.y + dy), color)
        for dx in range(-2, 3)
        for dy in range(-2, 3)
        if dx * dx + dy * dy <= 4
    ]


class PointClippingAlgorithm(DrawingAlgorithm):
    """Marks a point green inside the square window and gray outside it."""

    name = "Point Clipping"
    required_points = 3

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 3:
            return []
        window = _SquareWindow.from_corners(points[0], points[1])
        target = points[2]
        pixels = window.border(RED)
        pixels.extend(_disc(target, GREEN if window.contains(target) else GRAY))
        return pixels


class CohenSutherlandLineClippingAlgorithm(DrawingAlgorithm):
    """Clips a line to the square window with region outcodes."""

    name = "Cohen-Sutherland Line Clipping"
    required_points = 4

    @staticmethod
    def _clip(
        x1: int, y1: int, x2: int, y2: int, window: _SquareWindow
    ) -> Optional[tuple[int, int, int, int]]:
        code1 = window.outcode(x1, y1)
        code2 = window.outcode(x2, y2)
        while True:
            if not (code1 | code2):
                return x1, y1, x2, y2
            if code1 & code2:
                return None
            out = code1 or code2
            if out & _OutCode.TOP:
                x = x1 + _trunc_div((x2 - x1) * (window.ymin - y1), y2 - y1)
                y = window.ymin
            elif out & _OutCode.BOTTOM:
                x = x1 + _trunc_div((x2 - x1) * (window.ymax - y1), y2 - y1)
                y = window.ymax
            elif out & _OutCode.RIGHT:
                y = y1 + _trunc_div((y2 - y1) * (window.xmax - x1), x2 - x1)
                x = window.xmax
            else:
                y = y1 + _trunc_div((y2 - y1) * (window.xmin - x1), x2 - x1)
                x = window.xmin
            if code1:
                x1, y1 = x, y
                code1 = window.outcode(x1, y1)
            else:
                x2, y2 = x, y
                code2 = window.outcode(x2, y2)

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 4:
            return []
        window = _SquareWindow.from_corners(points[0], points[1])
        pixels = window.border(RED)
        clipped = self._clip(points[2].x, points[2].y, points[3].x, points[3].y, window)
        if clipped is not None:
            x1, y1, x2, y2 = clipped
            pixels.extend(
                BresenhamLineAlgorithm().draw([Point(x1, y1), Point(x2, y2)], [self._pen(colors)])
            )
        return pixels