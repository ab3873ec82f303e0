"""Polygon scan-line fills, curve-swept fills and a flood fill."""

from __future__ import annotations

import math
from abc import abstractmethod
from collections import deque
from typing import Callable, Iterator, NamedTuple, Optional, Protocol, Sequence

from pixelcanvas.curves import BezierCurveAlgorithm, HermiteCurveAlgorithm
from pixelcanvas.geometry import (
    BLACK,
    GREEN,
    RED,
    Color,
    DrawingAlgorithm,
    DrawingError,
    Pixel,
    Point,
)
from pixelcanvas.lines import DDALineAlgorithm

Span = tuple[int, int, int]


class _Raster(Protocol):
    """A read-only view of the pixels currently on screen."""

    width: int
    height: int

    def color_at(self, x: int, y: int) -> Color:
        ...


def _edges(points: Sequence[Point]) -> Iterator[tuple[Point, Point]]:
    """Consecutive vertex pairs of a closed polygon."""
    vertices = list(points)
    return zip(vertices, vertices[1:] + vertices[:1])


def _downward(v1: Point, v2: Point) -> tuple[Point, Point, float]:
    """Order an edge top to bottom and return it with its inverse slope."""
    if v1.y > v2.y:
        v1, v2 = v2, v1
    return v1, v2, (v2.x - v1.x) / (v2.y - v1.y)


class _ScanlinePolygon(DrawingAlgorithm):
    """A polygon outlined in the newest colour and filled in the second one."""

    def __init__(self, vertex_count: int) -> None:
        self.required_points = vertex_count

    @abstractmethod
    def _spans(self, points: Sequence[Point]) -> Iterator[Span]:
        """Horizontal spans (x_start, x_end, y) covering the polygon interior."""

    def _render(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]]
    ) -> list[Pixel]:
        if len(points) < 3:
            return []
        palette = list(colors) if colors else [BLACK]
        if len(palette) < 2:
            palette.append(GREEN)

        pixels: list[Pixel] = []
        for line in self._outline(points, [palette[-1]]):
            pixels.extend(line)

        fill = palette[1]
        line_drawer = DDALineAlgorithm()
        for x_start, x_end, y in self._spans(points):
            pixels.extend(line_drawer.draw([Point(x_start, y), Point(x_end, y)], [fill]))
        return pixels

    @staticmethod
    def _outline(
        points: Sequence[Point], colors: Sequence[Color]
    ) -> list[list[Pixel]]:
        line_drawer = DDALineAlgorithm()
        return [line_drawer.draw([v1, v2], colors) for v1, v2 in _edges(points)]


class ConvexFill(_ScanlinePolygon):
    """Fills a convex polygon using one left/right extent per scan line."""

    name = "Convex Fill"

    def __init__(self, vertex_count: int = 4) -> None:
        super().__init__(vertex_count)

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Outline and interior pixels of the polygon."""
        return self._render(points, colors)

    def draw_polygon(
        self, points: Sequence[Point], colors: Sequence[Color]
    ) -> list[list[Pixel]]:
        """The polygon's edges, one pixel list per edge."""
        return self._outline(points, colors)

    def _spans(self, points: Sequence[Point]) -> Iterator[Span]:
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)
        rows = max_y - min_y + 1
        left: list[float] = [math.inf] * rows
        right: list[float] = [-math.inf] * rows

        for v1, v2 in _edges(points):
            if v1.y == v2.y:
                continue
            top, bottom, slope_inv = _downward(v1, v2)
            x = float(top.x)
            for y in range(top.y, bottom.y):
                row = y - min_y
                left[row] = min(left[row], math.ceil(x))
                right[row] = max(right[row], math.floor(x))
                x += slope_inv

        for row, (lo, hi) in enumerate(zip(left, right)):
            if lo <= hi:
                yield int(lo), int(hi), row + min_y


class _Edge(NamedTuple):
    x: float
    slope_inv: float
    y_end: int


class GeneralFill(_ScanlinePolygon):
    """Fills any simple polygon with an active edge list."""

    name = "General Fill"

    def __init__(self, vertex_count: int = 6) -> None:
        super().__init__(vertex_count)

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Outline and interior pixels of the polygon."""
        return self._render(points, colors)

    def draw_polygon(
        self, points: Sequence[Point], colors: Sequence[Color]
    ) -> list[list[Pixel]]:
        """The polygon's edges, one pixel list per edge."""
        return self._outline(points, colors)

    def _spans(self, points: Sequence[Point]) -> Iterator[Span]:
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)
        table: list[list[_Edge]] = [[] for _ in range(max_y - min_y + 1)]

        for v1, v2 in _edges(points):
            if v1.y == v2.y:
                continue
            top, bottom, slope_inv = _downward(v1, v2)
            table[top.y - min_y].append(_Edge(float(top.x), slope_inv, bottom.y - min_y))

        y = next((row for row, entries in enumerate(table) if entries), None)
        if y is None:
            return
        active = list(table[y])
        while active:
            active.sort(key=lambda edge: edge.x)
            for left, right in zip(active[::2], active[1::2]):
                yield math.ceil(left.x), math.floor(right.x), y + min_y
            y += 1
            active = [
                _Edge(edge.x + edge.slope_inv, edge.slope_inv, edge.y_end)
                for edge in active
                if edge.y_end > y
            ]
            if y < len(table):
                active.extend(table[y])


class FillSquareHermiteCurve(DrawingAlgorithm):
    """Fills the largest square anchored at the smaller corner with vertical Hermite strokes."""

    name = "Fill Square Hermit Curve"
    required_points = 2

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 2:
            raise DrawingError("a square fill needs two corner points")
        ordered = sorted(points)
        first, second = ordered[0], ordered[1]
        side = min(abs(second.x - first.x), abs(second.y - first.y))
        palette = list(colors) if colors is not None else [RED]

        curve = HermiteCurveAlgorithm()
        pixels: list[Pixel] = []
        for x in range(first.x, first.x + side):
            top = Point(x, first.y)
            bottom = Point(x, first.y + side)
            pixels.extend(curve.draw([top, top, bottom, bottom], palette))
        return pixels


class FillRectangleBezierCurve(DrawingAlgorithm):
    """Fills the rectangle spanned by two corners with horizontal Bezier strokes."""

    name = "Fill Rectangle Bezier Curve"
    required_points = 2

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if len(points) < 2:
            raise DrawingError("a rectangle fill needs two corner points")
        a, b = points[0], points[1]
        min_y, max_y = min(a.y, b.y), max(a.y, b.y)
        left_x, right_x = min(a.x, b.x), max(a.x, b.x)
        palette = list(colors) if colors is not None else [RED]

        curve = BezierCurveAlgorithm()
        pixels: list[Pixel] = []
        for y in range(min_y, max_y + 1):
            start, end = Point(left_x, y), Point(right_x, y)
            pixels.extend(curve.draw([start, start, end, end], palette))
        return pixels


class FloodFillAlgorithm(DrawingAlgorithm):
    """Four-way flood fill over a snapshot of the screen.

    The oldest colour is the border, the newest the fill; ``snapshot`` is a
    callable returning the current screen contents.
    """

    name = "Flood Fill"
    required_points = 1

    def __init__(self, snapshot: Optional[Callable[[], _Raster]] = None) -> None:
        self.snapshot = snapshot

    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        if not points:
            return []
        if self.snapshot is None:
            raise DrawingError("flood fill needs a screen snapshot")
        palette = list(colors) if colors is not None else [BLACK]
        border = palette[0] if palette else BLACK
        fill = palette[-1] if len(palette) > 1 else BLACK

        raster = self.snapshot()
        width, height = raster.width, raster.height
        visited: set[Point] = set()
        pixels: list[Pixel] = []
        queue = deque([points[0]])
        while queue:
            point = queue.popleft()
            if not (0 <= point.x < width and 0 <= point.y < height):
                continue
            if point in visited:
                continue
            visited.add(point)
            current = raster.color_at(point.x, point.y)
            if current == fill or current == border:
                continue
            pixels.append((point, fill))
            for dx, dy in ((0, 1), (0, -1), (1, 0), (-1, 0)):
                queue.append(Point(point.x + dx, point.y + dy))
        return pixels