"""Straight line rasterisers."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from pixelcanvas.geometry import (
    BLACK,
    WHITE,
    Color,
    DrawingAlgorithm,
    Pixel,
    Point,
    _round_half_away,
)


def _parametric_steps(dx: int, dy: int) -> Iterator[float]:
    """Parameter values after t = 0, stepping one pixel along the longer axis."""
    longest = max(abs(dx), abs(dy))
    if longest == 0:
        return
    step = 1.0 / longest
    t = step
    while t <= 1:
        yield t
        t += step


class BresenhamLineAlgorithm(DrawingAlgorithm):
    """Integer-only midpoint line drawing."""

    name = "Bresenham Line Algorithm"
    required_points = 2

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 2:
            return []
        color = self._pen(colors)
        x1, y1 = points[0]
        x2, y2 = points[1]
        x, y = x1, y1
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        xinc = 1 if x1 < x2 else -1
        yinc = 1 if y1 < y2 else -1
        pixels = [(Point(x, y), color)]

        if dy <= dx:
            d = dx - 2 * dy
            d1 = -2 * dy
            d2 = 2 * (dx - dy)
            while x != x2:
                if d > 0:
                    d += d1
                else:
                    d += d2
                    y += yinc
                x += xinc
                pixels.append((Point(x, y), color))
        else:
            d = 2 * dx - dy
            d1 = 2 * dx
            d2 = 2 * (dx - dy)
            while y != y2:
                if d > 0:
                    d += d2
                    x += xinc
                else:
                    d += d1
                y += yinc
                pixels.append((Point(x, y), color))
        return pixels


class DDALineAlgorithm(DrawingAlgorithm):
    """Digital differential analyser line drawing.

    The given start point is always emitted first; when the line runs
    against its major axis the stepping starts from the other end.
    """

    name = "DDA Line Algorithm"
    required_points = 2

    @staticmethod
    def _round(value: float) -> int:
        return int(value + 0.5)

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 2:
            return []
        color = self._pen(colors)
        x1, y1 = points[0]
        x2, y2 = points[1]
        dx, dy = x2 - x1, y2 - y1
        pixels = [(Point(x1, y1), color)]

        if abs(dx) >= abs(dy):
            if x1 > x2:
                x1, x2, y1, y2 = x2, x1, y2, y1
                dx, dy = x2 - x1, y2 - y1
            slope = dy / dx if dx else 0.0
            x, y = x1, float(y1)
            while x < x2:
                x += 1
                y += slope
                pixels.append((Point(x, self._round(y)), color))
        else:
            if y1 > y2:
                x1, x2, y1, y2 = x2, x1, y2, y1
                dx, dy = x2 - x1, y2 - y1
            inverse = dx / dy if dy else 0.0
            y, x = y1, float(x1)
            while y < y2:
                y += 1
                x += inverse
                pixels.append((Point(self._round(x), y), color))
        return pixels


class ParametricLineAlgorithm(DrawingAlgorithm):
    """Line drawing by stepping the parameter of P(t) = P1 + t (P2 - P1)."""

    name = "Parametric Line Algorithm"
    required_points = 2

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 2:
            return []
        color = self._pen(colors)
        x1, y1 = points[0]
        x2, y2 = points[1]
        dx, dy = x2 - x1, y2 - y1
        pixels = [(Point(x1, y1), color)]
        for t in _parametric_steps(dx, dy):
            point = Point(_round_half_away(x1 + t * dx), _round_half_away(y1 + t * dy))
            pixels.append((point, color))
        return pixels


class ColoredParametricLineAlgorithm(DrawingAlgorithm):
    """Parametric line whose colour blends from the newest to the oldest colour."""

    name = "Colored Parametric Line Algorithm"
    required_points = 2

    def __init__(self) -> None:
        self.start_color = BLACK
        self.end_color = WHITE

    def set_colors(self, start: Color, end: Color) -> None:
        """Set the colours at both ends of the gradient."""
        self.start_color = start
        self.end_color = end

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 2:
            return []
        palette = list(colors) if colors else [BLACK]
        self.set_colors(palette[-1], palette[0])
        start, end = self.start_color, self.end_color
        dr, dg, db = end.r - start.r, end.g - start.g, end.b - start.b

        x1, y1 = points[0]
        x2, y2 = points[1]
        dx, dy = x2 - x1, y2 - y1
        pixels = [(Point(x1, y1), Color(start.r, start.g, start.b, 255))]
        for t in _parametric_steps(dx, dy):
            point = Point(_round_half_away(x1 + t * dx), _round_half_away(y1 + t * dy))
            color = Color(
                _round_half_away(start.r + t * dr),
                _round_half_away(start.g + t * dg),
                _round_half_away(start.b + t * db),
                255,
            )
            pixels.append((point, color))
        return pixels