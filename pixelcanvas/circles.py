"""Circle rasterisers that compute one octant and mirror it eight ways."""

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
    circle_points,
    radius_between,
)


class _OctantCircle(DrawingAlgorithm):
    """A circle given by its centre and a point on its rim."""

    required_points = 2

    @abstractmethod
    def _octant(self, radius: int) -> Iterator[tuple[int, int]]:
        """Offsets of one octant of a circle of the given radius."""

    def _render(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]]
    ) -> list[Pixel]:
        if len(points) < 2:
            return []
        center = points[0]
        radius = radius_between(center, points[1])
        color = self._pen(colors)
        pixels: list[Pixel] = []
        for x, y in self._octant(radius):
            pixels.extend(circle_points(center, Point(x, y), color))
        return pixels


class CircleCartesianAlgorithm(_OctantCircle):
    """Solves y = sqrt(r^2 - x^2) for each x."""

    name = "Circle Cartesian"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the circle centred on the first point through the second."""
        return self._render(points, colors)

    def _octant(self, radius: int) -> Iterator[tuple[int, int]]:
        x, y = 0, radius
        yield x, y
        while x < y:
            x += 1
            y = _round_half_away(math.sqrt(radius * radius - x * x))
            yield x, y


class CircleMidPointAlgorithm(_OctantCircle):
    """Midpoint decision evaluated directly at each step."""

    name = "Circle Mid Point"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the circle centred on the first point through the second."""
        return self._render(points, colors)

    def _octant(self, radius: int) -> Iterator[tuple[int, int]]:
        x, y = 0, radius
        yield x, y
        while x < y:
            d = (x + 1) * (x + 1) + (y - 0.5) * (y - 0.5) - radius * radius
            x += 1
            if d > 0:
                y -= 1
            yield x, y


class CircleMidPointDDAAlgorithm(_OctantCircle):
    """Midpoint circle with an incrementally updated integer decision."""

    name = "Circle Mid Point DDA"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the circle centred on the first point through the second."""
        return self._render(points, colors)

    def _octant(self, radius: int) -> Iterator[tuple[int, int]]:
        x, y = 0, radius
        d = 1 - radius
        yield x, y
        while x < y:
            if d < 0:
                d += 2 * x + 3
            else:
                d += 2 * (x - y) + 5
                y -= 1
            x += 1
            yield x, y


class CircleMidPointDDAModifiedAlgorithm(_OctantCircle):
    """Midpoint circle with second-order differences."""

    name = "Circle Mid Point DDA Modified"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the circle centred on the first point through the second."""
        return self._render(points, colors)

    def _octant(self, radius: int) -> Iterator[tuple[int, int]]:
        x, y = 0, radius
        d = 1 - radius
        d1, d2 = 3, 2 * (x - y) + 5
        yield x, y
        while x < y:
            if d < 0:
                d += d1
                d2 += 2
            else:
                y -= 1
                d += d2
                d2 += 4
            x += 1
            d1 += 2
            yield x, y


class CirclePolarAlgorithm(_OctantCircle):
    """Samples the angle from 0 to pi/4 in steps of 1/r."""

    name = "Circle Polar"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the circle centred on the first point through the second."""
        return self._render(points, colors)

    def _octant(self, radius: int) -> Iterator[tuple[int, int]]:
        quarter_pi = 3.14159 / 4
        step = 1.0 / radius if radius else math.inf
        theta = 0.0
        while theta < quarter_pi:
            yield (
                _round_half_away(radius * math.cos(theta)),
                _round_half_away(radius * math.sin(theta)),
            )
            theta += step


class CirclePolarIterativeAlgorithm(_OctantCircle):
    """Rotates a point by a fixed small angle until it passes the diagonal."""

    name = "Circle Polar Iterative"

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Pixels of the circle centred on the first point through the second."""
        return self._render(points, colors)

    def _octant(self, radius: int) -> Iterator[tuple[int, int]]:
        yield radius, 0
        if radius == 0:
            return
        step = 1.0 / radius
        sin_step, cos_step = math.sin(step), math.cos(step)
        x, y = float(radius), 0.0
        while x > y:
            x, y = x * cos_step - y * sin_step, x * sin_step + y * cos_step
            yield _round_half_away(x), _round_half_away(y)