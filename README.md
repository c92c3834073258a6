# netlayout

Building blocks for drawing reaction network diagrams, plus a few numeric
helpers they rely on. Everything is plain Python with no dependencies and no
GUI toolkit.

## Modules

- `netlayout.geometry`: `Point`, `Dimensions`, `BoundingBox`, `LineSegment`
  and `Curve`. A `LineSegment` is straight, or a cubic Bézier when both
  `base1` and `base2` are given (giving only one raises `ValueError`).
  A `Curve` can `add_segment` (ignoring `None`), `clear`, check
  `is_continuous`, list its vertices with `points` (empty when the curve is
  empty or broken), `move_by` an offset and compute its `bounding_box`, which
  includes Bézier base points.
- `netlayout.label`: `Label` remembers the box it was created with, so
  `scale` always works from that original box. `adapt_to_height` changes the
  height while keeping the aspect ratio, `scale_position` multiplies the
  current position, and `display_text` returns the label's own text, or the
  name of the referenced object looked up in a mapping, or `"unset"`.
  `GraphNode` holds a node's size, keys, box and label text.
- `netlayout.viewport`: `compute_scrollbar` turns a graph extent and a view
  extent into a `ScrollbarState`. `Viewport` keeps both scrollbars in step
  with the zoom (`update_scrollbars`, `set_zoom_factor`) and moves the view
  position when a scrollbar value changes (`vertical_value_changed`,
  `horizontal_value_changed`). An optional `on_redraw` callback is called
  whenever a redraw is due.
- `netlayout.filedialog`: `start_with` picks the path a dialog opens at,
  `extend_filter` adds `"Any File (*)"` to a filter list that lacks a
  catch-all, and `check_save_name` enforces the extension rules of the
  catch-all filter (one to four characters, not all digits), raising
  `SaveNameError` otherwise.
- `netlayout.fonts`: `FontSpec`, `Font`, `FontWeight`, `FontStyle`,
  `FontResolver` and `texture_dimensions`. The resolver maps `sans`, `serif`
  and `monospaced` onto common families, matches other names against the
  installed families ignoring case, falls back to the default family, and
  caches its answers. `texture_dimensions` gives the power-of-two texture size
  for measured text.
- `netlayout.units`: `BaseUnitKind` and `Scale`, the SI base units and
  decimal prefixes, with `Scale.prefix`, `Scale.from_prefix` and
  `Scale.prefix_from_scale`.
- `netlayout.errorweights`: `error_weights` builds the error weight vector
  `rtol * |y| + atol` used by ODE solvers, with `itol` choosing which
  tolerances are per component.
- `netlayout.errors`: `CopasiError` and `UnresolvedReferenceError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from netlayout.geometry import Point, LineSegment, Curve

curve = Curve()
curve.add_segment(LineSegment(Point(0, 0), Point(10, 5)))
curve.add_segment(LineSegment(Point(10, 5), Point(20, 0)))

curve.is_continuous()   # True
curve.points()          # [Point(x=0, y=0), Point(x=10, y=5), Point(x=20, y=0)]
box = curve.bounding_box()
```

```python
from netlayout.fonts import FontResolver, FontSpec

resolver = FontResolver(["Helvetica", "Courier New"], default_family="DejaVu Sans")
resolver.resolve(FontSpec("courier", 12)).family   # "Courier New"
```

## What it does not do

This package computes geometry, scrollbar settings, file name checks and font
choices; it does not show windows or dialogs, paint diagrams, render text
into textures, or read and write layout files. Those are left to the
application that uses it.