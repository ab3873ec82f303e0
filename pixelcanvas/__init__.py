"""Raster line, circle, ellipse, curve, filling and clipping algorithms, with drawing state and storage."""

__version__ = "0.1.0"