# coordpicker

A small desktop tool for working out screen coordinates while laying out a
2D application. It shows a canvas at the resolution you target, with a grid,
optional grid snapping, and markers you place by clicking. Each marker's
coordinates can be copied to the clipboard, one at a time or all at once.

The package has no dependencies beyond the standard library. The window is
built on tkinter, so a Python with Tk support is needed to open it; the model
behind it works without a display.

## Installing

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install .[test]
pytest
```

## Starting the picker

```
coordpicker
```

The window opens at 1280x800 on a Full HD (1920x1080) canvas at 50% zoom,
with a 45-unit grid, snapping on, the origin at the top-left and dark mode on.

- Click to place a marker. Clicks outside the canvas border are ignored.
- Right-click to remove a marker within 10 canvas units of the cursor.
- Middle-click drag or Alt+drag to pan; scroll to zoom in or out (the zoom
  stays between 10% and 1000%).
- "Reset View" returns to 50% zoom with no pan; "Clear Markers" removes every
  marker.
- The settings panel chooses the resolution (HD, Full HD, 4K, iPhone, iPad or
  a custom size between 100 and 10000 on each side), the grid size (5 to 100),
  whether the grid is shown and snapped to, whether the origin sits at the
  top-left or the bottom-left, the marker colour and dark mode.
- With "Recalculate markers on origin change" ticked, switching the origin
  converts the coordinates of existing markers to the new system.
- The current position is shown as whole numbers and can be copied; with
  snapping off, the unsnapped position is also shown to one decimal place.
- The saved-markers list lets you copy the selected marker as `x, y` or
  delete it. "Copy All Coordinates" puts a numbered list of every marker on
  the clipboard, one marker per line, such as `1. (90, 45)`.

## Using it from code

The state behind the window is a plain object that can be driven without a
display:

```python
from coordpicker.geometry import Rect, Vec2
from coordpicker.picker import CoordinatePicker

picker = CoordinatePicker()
picker.select_resolution("HD (1280x720)")
picker.apply_grid_settings(show_grid=True, grid_size=40.0, enable_snapping=True)
picker.set_origin_top_left(False)

view = Rect.from_center_size(Vec2(640.0, 400.0), Vec2(1280.0, 800.0))
picker.hover(Vec2(700.0, 420.0), view)
print(picker.current_position_text())

picker.click(Vec2(700.0, 420.0), view)
print(picker.all_coordinates_text())
```

`CoordinatePicker` takes an optional `clipboard` callable that receives the
text to copy; without one, `copy_to_clipboard` returns `False`.
`select_resolution` raises `ValueError` for a name not in
`resolution_names()`.

The other modules:

- `coordpicker.geometry`: `Vec2` and `Rect`.
- `coordpicker.canvas.Canvas`: panning, zooming and the mapping between
  screen and canvas positions.
- `coordpicker.coordinate.CoordinateSystem`: turns canvas positions into
  top-left or bottom-left coordinates and back.
- `coordpicker.grid.Grid`: snaps a position to the nearest grid point, or to
  a canvas edge within half a cell of it.
- `coordpicker.marker`: `Color` and `Marker`.
- `coordpicker.state.UiState`: the settings and readouts of the side panel.
- `coordpicker.scene`: `build_scene` and `grid_primitives` describe
  everything the window draws as `Line`, `Circle` and `Text` values.
- `coordpicker.gui`: `render` draws those values on a tkinter canvas;
  `PickerWindow` is the window, and `main` starts it.