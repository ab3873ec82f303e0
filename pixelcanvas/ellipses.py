"""Ellipse rasterisers that compute one quadrant and mirror it four ways."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Iterator, Optional, Sequence

from pixelcanvas.geometry import (
    Color,
    DrawingAlgorithm,
    Pixel,
    Point,
    _round_half_away,
    ellipse_points,
)


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising on zero."""
    if denominator:
        return numerator / denominator
    if numerator > 0:
        return math.inf
    if numerator < 0:
        return -math.inf
    return math.nan


class _QuadrantEllipse(DrawingAlgorithm):
    """An axis-aligned ellipse given by its centre and two axis points.

    The horizontal semi-axis is taken from the x of the second point and the
    vertical semi-axis from the y of the third.
    """

    required_points = 3

    @abstractmethod
    def _quadrant(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        """Offsets of one quadrant of an ellipse with semi-axes ``a`` and ``b``."""

    def _render(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]]
    ) -> list[Pixel]:
        if len(points) < 3:
            return []
        center = points[0]
        a = abs(points[1].x - center.x)
        b = abs(points[2].y - center.y)
        color = self._pen(colors)
        pixels: list[Pixel] = []
        for x, y in self._quadrant(a, b):
            pixels.extend(ellipse_points(center, Point(x, y), color))
        return pixels


class EllipseCartesianAlgorithm(_QuadrantEllipse):
    """Solves the ellipse equation for y along x, then for x along y."""

    name = "Ellipse Cartesian"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the ellipse given by a centre and two axis points."""
        return self._render(points, colors)

    def _quadrant(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        x, y = 0, b
        yield x, y
        while x < a:
            x += 1
            y = _round_half_away(math.sqrt(1.0 - (x * x) / (a * a)) * b)
            yield x, y
        x, y = a, 0
        while y < b:
            y += 1
            x = _round_half_away(math.sqrt(1.0 - (y * y) / (b * b)) * a)
            yield x, y


class EllipsePolarAlgorithm(_QuadrantEllipse):
    """Samples the angle from 0 to pi/2 in fixed steps of 0.001."""

    name = "Ellipse Polar"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the ellipse given by a centre and two axis points."""
        return self._render(points, colors)

    def _quadrant(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        theta = 0.0
        while theta < math.pi / 2:
            yield (
                _round_half_away(a * math.cos(theta)),
                _round_half_away(b * math.sin(theta)),
            )
            theta += 0.001


class EllipsePolar2Algorithm(_QuadrantEllipse):
    """Rotates a point around the ellipse by a fixed angle until x passes zero."""

    name = "Ellipse Polar Iterative"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the ellipse given by a centre and two axis points."""
        return self._render(points, colors)

    def _quadrant(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        yield a, 0
        if a == 0 or b == 0:
            return
        step = 1.0 / max(a, b)
        sin_step, cos_step = math.sin(step), math.cos(step)
        x, y = float(a), 0.0
        while x > 0:
            x, y = (
                x * cos_step - (y / b) * a * sin_step,
                (x / a) * b * sin_step + y * cos_step,
            )
            yield _round_half_away(x), _round_half_away(y)


def _midpoint_quadrant(a: int, b: int) -> Iterator[tuple[int, int]]:
    """Two-region midpoint ellipse walk; the last step reaches y = -1."""
    a_sq, b_sq = a * a, b * b
    x, y = 0, b
    dx, dy = 0, 2 * a_sq * y
    yield x, y
    while dx < dy:
        d = _ratio((x + 1.0) * (x + 1.0), a_sq) + _ratio((y - 0.5) * (y - 0.5), b_sq) - 1
        if d > 0:
            y -= 1
            dy -= 2 * a_sq
        dx += 2 * b_sq
        x += 1
        yield x, y
    while y >= 0:
        d = _ratio((x + 0.5) * (x + 0.5), a_sq) + _ratio((y - 1.0) * (y - 1.0), b_sq) - 1
        if d < 0:
            x += 1
            dx += 2 * b_sq
        dy -= 2 * a_sq
        y -= 1
        yield x, y


class EllipseMidPointAlgorithm(_QuadrantEllipse):
    """Midpoint ellipse with the decision evaluated at every step."""

    name = "Ellipse Mid Point"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the ellipse given by a centre and two axis points."""
        return self._render(points, colors)

    def _quadrant(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        return _midpoint_quadrant(a, b)


class EllipseMidPointDDAAlgorithm(_QuadrantEllipse):
    """Midpoint ellipse driven by the gradient terms; yields the midpoint pixels."""

    name = "Ellipse Mid Point DDA"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the ellipse given by a centre and two axis points."""
        return self._render(points, colors)

    def _quadrant(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        return _midpoint_quadrant(a, b)