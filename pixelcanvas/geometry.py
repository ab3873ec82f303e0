"""Points, colours and the base class shared by every drawing algorithm."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Sequence


@dataclass(frozen=True, order=True)
class Point:
    """An integer pixel position; points order by x, then y."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel!r}")


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RAYWHITE = Color(245, 245, 245)
RED = Color(230, 41, 55)
GREEN = Color(0, 228, 48)
BLUE = Color(0, 121, 241)
YELLOW = Color(253, 249, 0)
MAGENTA = Color(255, 0, 255)
GRAY = Color(130, 130, 130)
LIGHTGRAY = Color(200, 200, 200)
DARKGRAY = Color(80, 80, 80)
SKYBLUE = Color(102, 191, 255)
DARKBLUE = Color(0, 82, 172)

Pixel = tuple[Point, Color]
Shape = list[Pixel]


class DrawingError(RuntimeError):
    """Raised when a shape cannot be drawn."""


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def circle_points(center: Point, offset: Point, color: Color) -> list[Pixel]:
    """Return the eight symmetric circle pixels for an octant offset."""
    px, py = offset
    offsets = (
        (px, py), (-px, py), (px, -py), (-px, -py),
        (py, px), (-py, px), (py, -px), (-py, -px),
    )
    return [(Point(center.x + dx, center.y + dy), color) for dx, dy in offsets]


def ellipse_points(center: Point, offset: Point, color: Color) -> list[Pixel]:
    """Return the four symmetric ellipse pixels for a quadrant offset."""
    px, py = offset
    offsets = ((px, py), (-px, py), (px, -py), (-px, -py))
    return [(Point(center.x + dx, center.y + dy), color) for dx, dy in offsets]


def radius_between(center: Point, point: Point) -> int:
    """Distance between two points, truncated to an integer."""
    return int(math.hypot(point.x - center.x, point.y - center.y))


class DrawingAlgorithm(ABC):
    """Turns a number of clicked points into coloured pixels."""

    name: ClassVar[str] = ""
    required_points: ClassVar[int] = 0

    @abstractmethod
    def draw(
        self, points: Sequence[Point], colors: Optional[Sequence[Color]] = None
    ) -> list[Pixel]:
        """Return the pixels of the shape described by ``points``."""

    @staticmethod
    def _pen(colors: Optional[Sequence[Color]], default: Color = BLACK) -> Color:
        """The most recent colour, or ``default`` when none is given."""
        return colors[-1] if colors else default