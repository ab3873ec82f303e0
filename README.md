# pixelcanvas

Classic raster scan-conversion algorithms in plain Python. Each algorithm
takes the points a user would click and returns the pixels of the shape as a
list of `(Point, Color)` pairs. The algorithms cover lines, circles, ellipses,
curves, quarter-filled circles, polygon filling and clipping against square,
rectangular and circular windows. There is also a small drawing state and a
binary file format for saving drawn shapes.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The basics

`pixelcanvas.geometry` holds the shared pieces:

- `Point(x, y)`: an immutable integer position. Points order by x, then y.
- `Color(r, g, b, a=255)`: an immutable RGBA colour. A channel outside
  0..255 raises `ValueError`. Named colours such as `BLACK`, `RED`, `GREEN`,
  `BLUE` and `GRAY` are defined there.
- `DrawingAlgorithm`: the base class. Each subclass has a `name`, a
  `required_points` count and a `draw(points, colors=None)` method.
- `DrawingError`: raised when a shape cannot be drawn at all.
- `circle_points`, `ellipse_points` and `radius_between`: the eight-way and
  four-way symmetry helpers and the truncated distance between two points.

Unless noted otherwise, `draw` returns an empty list when it gets fewer points
than it needs. It draws in the newest colour, which is the last one in
`colors`, or in black when no colours are given.

```python
from pixelcanvas.geometry import Point, Color
from pixelcanvas.lines import BresenhamLineAlgorithm
from pixelcanvas.circles import CircleMidPointDDAModifiedAlgorithm

line = BresenhamLineAlgorithm().draw([Point(0, 0), Point(10, 4)], [Color(0, 0, 0)])
circle = CircleMidPointDDAModifiedAlgorithm().draw(
    [Point(50, 50), Point(60, 50)], [Color(255, 0, 0)]
)
```

## The algorithms

- `pixelcanvas.lines` takes two end points and has `BresenhamLineAlgorithm`,
  `DDALineAlgorithm`, `ParametricLineAlgorithm` and
  `ColoredParametricLineAlgorithm`. The coloured line blends from the newest
  colour to the oldest one.
- `pixelcanvas.circles` takes a centre and a point on the rim. It has
  `CircleCartesianAlgorithm`, `CircleMidPointAlgorithm`,
  `CircleMidPointDDAAlgorithm`, `CircleMidPointDDAModifiedAlgorithm`,
  `CirclePolarAlgorithm` and `CirclePolarIterativeAlgorithm`.
- `pixelcanvas.ellipses` takes a centre, a point whose x sets the horizontal
  semi-axis and a point whose y sets the vertical one. It has
  `EllipseCartesianAlgorithm`, `EllipsePolarAlgorithm`,
  `EllipsePolar2Algorithm`, `EllipseMidPointAlgorithm` and
  `EllipseMidPointDDAAlgorithm`.
- `pixelcanvas.curves` has the following:
  - `QuadraticCurveAlgorithm`, which takes three control points.
  - `BezierCurveAlgorithm`, which takes four control points.
  - `HermiteCurveAlgorithm`, which runs from the first to the fourth point.
    Its start tangent is P1 - P0 and its end tangent is P2 - P3.
  - `CardinalSplineAlgorithm(tension=0.5)`, which goes through the inner
    points.
  - The helpers `multiply_matrix` and `multiply_matrix_by_vector`. Both raise
    `ValueError` when the dimensions do not match.
- `pixelcanvas.quarter_fill` has `CircleQuarterLineFilling` and
  `CircleQuarterCircleFilling`. They take a centre, a rim point and a marker
  point that picks the quadrant to fill. The first fills with radial lines,
  the second with small circles. They raise `DrawingError` when given fewer
  than two points. The helpers are `quadrant_of` and `in_quadrant`.
- `pixelcanvas.filling` has the following:
  - `ConvexFill(vertex_count=4)` and `GeneralFill(vertex_count=6)`. These are
    scan-line polygon fills. The outline is drawn in the newest colour and the
    inside in the second colour, which is green when only one colour is given.
  - `FillSquareHermiteCurve` and `FillRectangleBezierCurve`. These fill the
    area between two corners with curve strokes. They raise `DrawingError`
    when given fewer than two points.
  - `FloodFillAlgorithm(snapshot)`. This is a four-way flood fill. `snapshot`
    is a callable that returns an object with `width`, `height` and
    `color_at(x, y)`. The oldest colour is the border and the newest is the
    fill.
- `pixelcanvas.clipping_square` has `PointClippingAlgorithm` and
  `CohenSutherlandLineClippingAlgorithm`. Both clip against a square that is
  anchored at the first point.
- `pixelcanvas.clipping_rect` has `PointClippingRectangleAlgorithm`,
  `LineClippingRectangleAlgorithm` and `PolygonClippingRectangleAlgorithm`.
  It also has the Sutherland-Hodgman helpers `clip_left`, `clip_right`,
  `clip_top`, `clip_bottom`, `clip_polygon`, `vertical_intersect` and
  `horizontal_intersect`.
- `pixelcanvas.clipping_circle` has `CircularPointClipping`,
  `CircularLineClipping` and `CircularPolygonClipping`. The polygon version
  clips a pentagon.

## Drawing state

`pixelcanvas.state.DrawingState` collects clicked points:

```python
from pixelcanvas.geometry import Point, RED
from pixelcanvas.lines import DDALineAlgorithm
from pixelcanvas.state import DrawingState

state = DrawingState()
state.set_algorithm(DDALineAlgorithm())
state.set_color(RED)
state.add_point(Point(0, 0))
state.add_point(Point(5, 5))   # enough points: a shape is added to state.shapes
```

- Once the algorithm has `required_points` points, `add_point` draws a shape
  and appends it to `state.shapes`.
- The colour list starts as black.
- `set_color` keeps at most one older colour.
- `add_color` appends a colour and discards nothing.
- `clear` drops the shapes and any pending points.

## Saving and loading

`pixelcanvas.storage` writes shapes in a little-endian binary layout:

- a u64 shape count;
- then, for each shape, a u64 pixel count followed by that many pixels;
- each pixel is two i32 coordinates and four u8 colour channels.

```python
from pixelcanvas.storage import save_drawings, load_drawings

save_drawings(state.shapes, "saved_drawings")
shapes = load_drawings("saved_drawings")
```

`encode_drawings` and `decode_drawings` work on bytes. `decode_drawings`
raises `ValueError` on truncated data.

## What this package does not do

There is no window, no menu and no command to run. The package does not put
pixels on a screen and does not read mouse clicks. You show the returned
pixels with whatever display you use, and you feed clicks to `DrawingState`
yourself. There is no lookup of algorithms by menu number either: you create
the algorithm classes directly.