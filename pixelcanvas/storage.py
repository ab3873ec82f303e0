"""Binary save and load of drawn shapes.

Layout, little-endian: a u64 shape count; per shape a u64 pixel count
followed by that many pixels, each two i32 coordinates and four u8
colour channels (r, g, b, a).
"""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Sequence, Union

from pixelcanvas.geometry import Color, Pixel, Point, Shape

_COUNT = struct.Struct("<Q")
_PIXEL = struct.Struct("<ii4B")


def encode_drawings(shapes: Sequence[Sequence[Pixel]]) -> bytes:
    """Serialise shapes to bytes."""
    parts = [_COUNT.pack(len(shapes))]
    for shape in shapes:
        parts.append(_COUNT.pack(len(shape)))
        for point, color in shape:
            parts.append(_PIXEL.pack(point.x, point.y, color.r, color.g, color.b, color.a))
    return b"".join(parts)


def decode_drawings(data: bytes) -> list[Shape]:
    """Parse bytes written by :func:`encode_drawings`.

    Raises ValueError when the data is truncated.
    """
    view = memoryview(data)
    offset = 0

    def take(layout: struct.Struct) -> tuple:
        nonlocal offset
        if offset + layout.size > len(view):
            raise ValueError("drawing data is truncated")
        values = layout.unpack_from(view, offset)
        offset += layout.size
        return values

    (shape_count,) = take(_COUNT)
    shapes: list[Shape] = []
    for _ in range(shape_count):
        (pixel_count,) = take(_COUNT)
        if pixel_count * _PIXEL.size > len(view) - offset:
            raise ValueError("drawing data is truncated")
        shape: Shape = []
        for _ in range(pixel_count):
            x, y, r, g, b, a = take(_PIXEL)
            shape.append((Point(x, y), Color(r, g, b, a)))
        shapes.append(shape)
    return shapes


def save_drawings(shapes: Sequence[Sequence[Pixel]], path: Union[str, os.PathLike]) -> None:
    """Write shapes to ``path``, relative paths resolving against the working directory."""
    Path(path).write_bytes(encode_drawings(shapes))


def load_drawings(path: Union[str, os.PathLike]) -> list[Shape]:
    """Read shapes from ``path``; raises OSError if it cannot be opened."""
    return decode_drawings(Path(path).read_bytes())