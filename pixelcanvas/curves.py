"""Quadratic and cubic parametric curves, plus small matrix helpers."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from pixelcanvas.geometry import (
    Color,
    DrawingAlgorithm,
    Pixel,
    Point,
    _round_half_away,
)


def _parameter(step: float) -> Iterator[float]:
    """Parameter values from 0 while not above 1, accumulated in ``step``s."""
    t = 0.0
    while t <= 1.0:
        yield t
        t += step


def _to_point(x: float, y: float) -> Point:
    return Point(_round_half_away(x), _round_half_away(y))


def _hermite_samples(
    start: Point, u1: float, v1: float, end: Point, u2: float, v2: float, step: float
) -> Iterator[Point]:
    """Sample the Hermite curve from ``start`` to ``end`` with the given tangents."""
    cx = (
        2 * start.x + u1 - 2 * end.x + u2,
        -3 * start.x - 2 * u1 + 3 * end.x - u2,
        u1,
        start.x,
    )
    cy = (
        2 * start.y + v1 - 2 * end.y + v2,
        -3 * start.y - 2 * v1 + 3 * end.y - v2,
        v1,
        start.y,
    )
    for t in _parameter(step):
        t2 = t * t
        t3 = t2 * t
        x = cx[0] * t3 + cx[1] * t2 + cx[2] * t + cx[3]
        y = cy[0] * t3 + cy[1] * t2 + cy[2] * t + cy[3]
        yield _to_point(x, y)


class QuadraticCurveAlgorithm(DrawingAlgorithm):
    """Quadratic Bezier through three control points."""

    name = "Quadratic Curve"
    required_points = 3

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 3:
            return []
        p0, p1, p2 = points[:3]
        color = self._pen(colors)
        pixels: list[Pixel] = []
        for t in _parameter(0.001):
            s = 1 - t
            x = s ** 2 * p0.x + 2 * s * t * p1.x + t ** 2 * p2.x
            y = s ** 2 * p0.y + 2 * s * t * p1.y + t ** 2 * p2.y
            pixels.append((_to_point(x, y), color))
        return pixels


class BezierCurveAlgorithm(DrawingAlgorithm):
    """Cubic Bezier through four control points."""

    name = "Bezier Curve"
    required_points = 4

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 4:
            return []
        p0, p1, p2, p3 = points[:4]
        color = self._pen(colors)
        pixels: list[Pixel] = []
        for t in _parameter(0.001):
            s = 1 - t
            x = s ** 3 * p0.x + 3 * s ** 2 * t * p1.x + 3 * s * t ** 2 * p2.x + t ** 3 * p3.x
            y = s ** 3 * p0.y + 3 * s ** 2 * t * p1.y + 3 * s * t ** 2 * p2.y + t ** 3 * p3.y
            pixels.append((_to_point(x, y), color))
        return pixels


class HermiteCurveAlgorithm(DrawingAlgorithm):
    """Hermite curve from the first to the fourth point.

    The start tangent is P1 - P0 and the end tangent is P2 - P3.
    """

    name = "Hermite Curve"
    required_points = 4

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 4:
            return []
        p0, p1, p2, p3 = points[:4]
        color = self._pen(colors)
        samples = _hermite_samples(
            p0, p1.x - p0.x, p1.y - p0.y, p3, p2.x - p3.x, p2.y - p3.y, 1.0 / 1500
        )
        return [(point, color) for point in samples]


class CardinalSplineAlgorithm(DrawingAlgorithm):
    """Cardinal spline through the inner points, drawn as Hermite segments."""

    name = "Cardinal Spline"
    required_points = 4

    def __init__(self, tension: float = 0.5) -> None:
        self.tension = tension

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 4:
            return []
        scale = 1 - self.tension
        color = self._pen(colors)
        t0 = (scale * (points[2].x - points[0].x), scale * (points[2].y - points[0].y))
        pixels: list[Pixel] = []
        for before, start, end, after in zip(points, points[1:], points[2:], points[3:]):
            t1 = (scale * (after.x - start.x), scale * (after.y - start.y))
            for point in _hermite_samples(start, *t0, end, *t1, 0.01):
                pixels.append((point, color))
            t0 = t1
        return pixels


def multiply_matrix(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Product of two matrices given as lists of rows."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def multiply_matrix_by_vector(a: Sequence[Sequence[int]], v: Sequence[int]) -> list[int]:
    """Product of a matrix and a column vector."""
    if any(len(row) != len(v) for row in a):
        raise ValueError("matrix and vector dimensions do not match")
    return [sum(x * y for x, y in zip(row, v)) for row in a]