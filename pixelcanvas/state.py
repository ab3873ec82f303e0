"""The drawing in progress: chosen algorithm, pending clicks, shapes and colours."""

from __future__ import annotations

from collections import deque
from typing import Optional, Sequence

from pixelcanvas.geometry import BLACK, Color, DrawingAlgorithm, Pixel, Point, Shape


class DrawingState:
    """Collects clicked points and turns them into shapes with the current algorithm."""

    def __init__(self) -> None:
        self.algorithm: Optional[DrawingAlgorithm] = None
        self.input_points: list[Point] = []
        self.shapes: list[Shape] = []
        self.colors: deque[Color] = deque([BLACK])

    def set_algorithm(self, algorithm: Optional[DrawingAlgorithm]) -> None:
        """Switch algorithm and forget any points clicked for the previous one."""
        self.algorithm = algorithm
        self.input_points.clear()

    def add_point(self, point: Point) -> None:
        """Record a click; draw a shape once the algorithm has enough points."""
        self.input_points.append(point)
        if not self.can_complete_draw():
            return
        shape = self.algorithm.draw(list(self.input_points), list(self.colors))
        if shape:
            self.shapes.append(list(shape))
            self.input_points.clear()

    def add_shape(self, shape: Sequence[Pixel]) -> None:
        """Append a finished shape; empty shapes are ignored."""
        if shape:
            self.shapes.append(list(shape))

    def clear(self) -> None:
        """Drop all shapes and pending points."""
        self.input_points.clear()
        self.shapes.clear()

    def set_color(self, color: Color) -> None:
        """Make ``color`` the newest colour, keeping at most one older colour."""
        if len(self.colors) > 1:
            self.colors.popleft()
        self.colors.append(color)

    def add_color(self, color: Color) -> None:
        """Append ``color`` without discarding older colours."""
        self.colors.append(color)

    def can_complete_draw(self) -> bool:
        """Whether an algorithm is set and enough points have been clicked."""
        return (
            self.algorithm is not None
            and len(self.input_points) >= self.algorithm.required_points
        )