"""Desktop window for picking coordinates, built on tkinter."""

from __future__ import annotations

import argparse
import tkinter as tk
from collections.abc import Iterable
from tkinter import colorchooser, ttk

from .geometry import Rect, Vec2
from .marker import Color
from .picker import CUSTOM, CoordinatePicker
from .scene import (
    BACKGROUND_DARK,
    BACKGROUND_LIGHT,
    Circle,
    Line,
    Primitive,
    Text,
    build_scene,
)

_DRAG_THRESHOLD = 6.0
_ALT_MASKS = 0x0008 | 0x20000

_HELP_LINES = (
    "• Click to place a marker",
    "• Right-click to remove a marker at cursor position",
    "• Use 'Delete' button to remove specific markers from the list",
    "• Use 'Copy All Coordinates' to copy all marker coordinates at once",
    "• Middle-click or Alt+drag to pan",
    "• Scroll to zoom in/out",
    "• Adjust grid settings for precise positioning",
    "• Grid snapping finds the nearest grid intersection to your cursor",
)


def render(scene: Iterable[Primitive], target) -> list:
    """Draw primitives on a tkinter-style canvas; returns the created item ids."""
    items = []
    for item in scene:
        if isinstance(item, Line):
            items.append(
                target.create_line(
                    item.start.x,
                    item.start.y,
                    item.end.x,
                    item.end.y,
                    fill=item.color.hex(),
                    width=item.width,
                )
            )
        elif isinstance(item, Circle):
            r = item.radius
            bbox = (item.center.x - r, item.center.y - r, item.center.x + r, item.center.y + r)
            if item.filled:
                items.append(target.create_oval(*bbox, fill=item.color.hex(), outline=""))
            else:
                items.append(
                    target.create_oval(
                        *bbox, fill="", outline=item.color.hex(), width=item.width
                    )
                )
        elif isinstance(item, Text):
            items.append(
                target.create_text(
                    item.position.x,
                    item.position.y,
                    text=item.text,
                    fill=item.color.hex(),
                    anchor=item.anchor,
                )
            )
        else:
            raise TypeError(f"cannot render {type(item).__name__}")
    return items


class PickerWindow:
    """The main window: a top bar, the canvas view and a settings panel."""

    def __init__(self, picker: CoordinatePicker | None = None, root: tk.Tk | None = None):
        self.root = root if root is not None else tk.Tk()
        self.picker = (
            picker if picker is not None else CoordinatePicker(clipboard=self._set_clipboard)
        )
        self._hover: Vec2 | None = None
        self._press: Vec2 | None = None
        self._last: Vec2 | None = None
        self._dragged = False
        self._alt_drag = False

        self.root.title("Coordinate Picker")
        self.root.geometry("1280x800")
        self.root.minsize(800, 600)

        self._build_top_bar()
        self._build_side_panel()
        self.canvas = tk.Canvas(self.root, highlightthickness=0)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self._bind_canvas()
        self._sync_custom_state()
        self.redraw()

    # Layout

    def _build_top_bar(self) -> None:
        bar = tk.Frame(self.root)
        bar.pack(side=tk.TOP, fill=tk.X, padx=10, pady=5)
        tk.Label(bar, text="Coordinate Picker", font=("TkDefaultFont", 14, "bold")).pack(
            side=tk.LEFT, padx=5
        )
        tk.Button(bar, text="Reset View", command=self._reset_view).pack(side=tk.LEFT, padx=5)
        tk.Button(bar, text="Clear Markers", command=self._clear_markers).pack(
            side=tk.LEFT, padx=5
        )
        tk.Label(bar, text="Zoom:").pack(side=tk.LEFT, padx=5)
        self._zoom_label = tk.Label(bar)
        self._zoom_label.pack(side=tk.LEFT)

    def _build_side_panel(self) -> None:
        state = self.picker.ui_state
        panel = tk.Frame(self.root, width=250)
        panel.pack(side=tk.RIGHT, fill=tk.Y, padx=10, pady=5)
        tk.Label(panel, text="Settings", font=("TkDefaultFont", 12, "bold")).pack(anchor="w")

        size_box = tk.LabelFrame(panel, text="Canvas Size")
        size_box.pack(fill=tk.X, pady=4)
        self._resolution = tk.StringVar(value=state.selected_resolution)
        combo = ttk.Combobox(
            size_box,
            textvariable=self._resolution,
            values=self.picker.resolution_names(),
            state="readonly",
        )
        combo.pack(fill=tk.X)
        combo.bind("<<ComboboxSelected>>", self._on_resolution)
        self._width_var = tk.DoubleVar(value=state.custom_width)
        self._height_var = tk.DoubleVar(value=state.custom_height)
        self._size_spins = []
        for label, var in (("Width:", self._width_var), ("Height:", self._height_var)):
            row = tk.Frame(size_box)
            row.pack(fill=tk.X)
            tk.Label(row, text=label).pack(side=tk.LEFT)
            spin = tk.Spinbox(
                row, from_=100, to=10000, textvariable=var, command=self._on_custom_size
            )
            spin.bind("<Return>", self._on_custom_size)
            spin.pack(side=tk.LEFT)
            self._size_spins.append(spin)

        grid_box = tk.LabelFrame(panel, text="Grid")
        grid_box.pack(fill=tk.X, pady=4)
        self._show_grid = tk.BooleanVar(value=state.show_grid)
        self._snapping = tk.BooleanVar(value=state.enable_snapping)
        self._grid_size = tk.DoubleVar(value=state.grid_size)
        tk.Checkbutton(
            grid_box, text="Show Grid", variable=self._show_grid, command=self._on_grid
        ).pack(anchor="w")
        row = tk.Frame(grid_box)
        row.pack(fill=tk.X)
        tk.Label(row, text="Grid Size:").pack(side=tk.LEFT)
        spin = tk.Spinbox(
            row, from_=5, to=100, textvariable=self._grid_size, command=self._on_grid
        )
        spin.bind("<Return>", self._on_grid)
        spin.pack(side=tk.LEFT)
        tk.Checkbutton(
            grid_box, text="Snap to Grid", variable=self._snapping, command=self._on_grid
        ).pack(anchor="w")

        coord_box = tk.LabelFrame(panel, text="Coordinate System")
        coord_box.pack(fill=tk.X, pady=4)
        self._origin = tk.StringVar(value="top" if state.origin_top_left else "bottom")
        tk.Radiobutton(
            coord_box,
            text="Origin at Top-Left (0,0)",
            variable=self._origin,
            value="top",
            command=self._on_origin,
        ).pack(anchor="w")
        tk.Radiobutton(
            coord_box,
            text="Origin at Bottom-Left (0,0)",
            variable=self._origin,
            value="bottom",
            command=self._on_origin,
        ).pack(anchor="w")
        self._recalculate = tk.BooleanVar(value=state.recalculate_markers)
        tk.Checkbutton(
            coord_box,
            text="Recalculate markers on origin change",
            variable=self._recalculate,
            command=self._on_recalculate,
        ).pack(anchor="w")

        marker_box = tk.LabelFrame(panel, text="Markers")
        marker_box.pack(fill=tk.X, pady=4)
        row = tk.Frame(marker_box)
        row.pack(fill=tk.X)
        tk.Label(row, text="Marker Color:").pack(side=tk.LEFT)
        self._color_button = tk.Button(
            row, width=3, bg=state.marker_color.hex(), command=self._on_color
        )
        self._color_button.pack(side=tk.LEFT)

        tk.Label(panel, text="Current Position", font=("TkDefaultFont", 12, "bold")).pack(
            anchor="w", pady=(8, 0)
        )
        row = tk.Frame(panel)
        row.pack(fill=tk.X)
        self._position_label = tk.Label(row)
        self._position_label.pack(side=tk.LEFT)
        tk.Button(row, text="Copy", command=self._copy_position).pack(side=tk.LEFT, padx=5)
        self._raw_label = tk.Label(panel)
        self._raw_label.pack(anchor="w")

        tk.Label(panel, text="Saved Markers", font=("TkDefaultFont", 12, "bold")).pack(
            anchor="w", pady=(8, 0)
        )
        self._copy_all = tk.Button(
            panel, text="Copy All Coordinates", command=self._copy_all_markers
        )
        self._copy_all.pack(anchor="w")
        self._marker_list = tk.Listbox(panel, height=10)
        self._marker_list.pack(fill=tk.X)
        row = tk.Frame(panel)
        row.pack(fill=tk.X)
        tk.Button(row, text="Copy", command=self._copy_selected).pack(side=tk.LEFT)
        tk.Button(row, text="Delete", command=self._delete_selected).pack(side=tk.LEFT, padx=5)

        look_box = tk.LabelFrame(panel, text="Appearance")
        look_box.pack(fill=tk.X, pady=4)
        self._dark = tk.BooleanVar(value=state.dark_mode)
        tk.Checkbutton(
            look_box, text="Dark Mode", variable=self._dark, command=self._on_dark
        ).pack(anchor="w")

        help_box = tk.LabelFrame(panel, text="Help")
        help_box.pack(fill=tk.X, pady=4)
        for line in _HELP_LINES:
            tk.Label(help_box, text=line, wraplength=240, justify=tk.LEFT).pack(anchor="w")

    def _bind_canvas(self) -> None:
        c = self.canvas
        c.bind("<Configure>", lambda _e: self.redraw())
        c.bind("<Motion>", self._on_motion)
        c.bind("<Leave>", self._on_leave)
        c.bind("<ButtonPress-1>", self._on_primary_press)
        c.bind("<B1-Motion>", self._on_primary_drag)
        c.bind("<ButtonRelease-1>", self._on_primary_release)
        c.bind("<ButtonPress-2>", self._on_middle_press)
        c.bind("<B2-Motion>", self._on_middle_drag)
        c.bind("<ButtonRelease-3>", self._on_secondary)
        c.bind("<MouseWheel>", self._on_wheel)
        c.bind("<Button-4>", lambda e: self._scroll(1.0, e))
        c.bind("<Button-5>", lambda e: self._scroll(-1.0, e))

    # Drawing

    def _view_rect(self) -> Rect:
        return Rect(
            Vec2(0.0, 0.0),
            Vec2(float(self.canvas.winfo_width()), float(self.canvas.winfo_height())),
        )

    def redraw(self) -> None:
        """Repaint the canvas and refresh every readout."""
        dark = self.picker.ui_state.dark_mode
        background = BACKGROUND_DARK if dark else BACKGROUND_LIGHT
        self.canvas.delete("all")
        self.canvas.configure(bg=background.hex())
        render(build_scene(self.picker, self._view_rect(), self._hover), self.canvas)

        self._zoom_label.configure(text=f"{self.picker.zoom_percentage()}%")
        self._position_label.configure(text=self.picker.current_position_text())
        self._raw_label.configure(text=self.picker.raw_position_text())
        self._copy_all.configure(
            state=tk.NORMAL if self.picker.markers else tk.DISABLED
        )
        lines = self.picker.marker_lines()
        if list(self._marker_list.get(0, tk.END)) != lines:
            self._marker_list.delete(0, tk.END)
            for line in lines:
                self._marker_list.insert(tk.END, line)

    def run(self) -> None:
        """Enter the event loop until the window is closed."""
        self.root.mainloop()

    # Clipboard

    def _set_clipboard(self, text: str) -> None:
        self.root.clipboard_clear()
        self.root.clipboard_append(text)

    def _copy_position(self) -> None:
        self.picker.copy_to_clipboard(self.picker.current_position_text())

    def _copy_all_markers(self) -> None:
        if self.picker.markers:
            self.picker.copy_to_clipboard(self.picker.all_coordinates_text())

    def _selected_index(self) -> int | None:
        selection = self._marker_list.curselection()
        return selection[0] if selection else None

    def _copy_selected(self) -> None:
        index = self._selected_index()
        if index is None or index >= len(self.picker.markers):
            return
        pos = self.picker.markers[index].system_position
        self.picker.copy_to_clipboard(f"{int(pos.x)}, {int(pos.y)}")

    def _delete_selected(self) -> None:
        index = self._selected_index()
        if index is not None:
            self.picker.delete_marker(index)
            self.redraw()

    # Settings

    def _reset_view(self) -> None:
        self.picker.reset_view()
        self.redraw()

    def _clear_markers(self) -> None:
        self.picker.clear_markers()
        self.redraw()

    def _sync_custom_state(self) -> None:
        state = tk.NORMAL if self.picker.ui_state.selected_resolution == CUSTOM else tk.DISABLED
        for spin in self._size_spins:
            spin.configure(state=state)
        self._width_var.set(self.picker.ui_state.custom_width)
        self._height_var.set(self.picker.ui_state.custom_height)

    def _on_resolution(self, _event=None) -> None:
        self.picker.select_resolution(self._resolution.get())
        self._sync_custom_state()
        self.redraw()

    def _on_custom_size(self, _event=None) -> None:
        try:
            width, height = self._width_var.get(), self._height_var.get()
        except tk.TclError:
            return
        self.picker.set_custom_size(width, height)
        self._sync_custom_state()
        self.redraw()

    def _on_grid(self, _event=None) -> None:
        try:
            size = self._grid_size.get()
        except tk.TclError:
            size = self.picker.ui_state.grid_size
        self.picker.apply_grid_settings(self._show_grid.get(), size, self._snapping.get())
        self._grid_size.set(self.picker.ui_state.grid_size)
        self.redraw()

    def _on_origin(self) -> None:
        self.picker.set_origin_top_left(self._origin.get() == "top")
        self.redraw()

    def _on_recalculate(self) -> None:
        self.picker.ui_state.recalculate_markers = self._recalculate.get()

    def _on_color(self) -> None:
        rgb, _hex = colorchooser.askcolor(
            color=self.picker.ui_state.marker_color.hex(), parent=self.root
        )
        if rgb is None:
            return
        color = Color(*(int(round(c)) for c in rgb))
        self.picker.ui_state.marker_color = color
        self._color_button.configure(bg=color.hex())

    def _on_dark(self) -> None:
        self.picker.ui_state.dark_mode = self._dark.get()
        self.redraw()

    # Pointer

    def _track(self, event) -> Vec2:
        pos = Vec2(float(event.x), float(event.y))
        self._hover = pos
        self.picker.hover(pos, self._view_rect())
        return pos

    def _on_motion(self, event) -> None:
        self._track(event)
        self.redraw()

    def _on_leave(self, _event) -> None:
        self._hover = None
        self.redraw()

    def _on_primary_press(self, event) -> None:
        pos = Vec2(float(event.x), float(event.y))
        self._press = self._last = pos
        self._dragged = False
        self._alt_drag = bool(event.state & _ALT_MASKS)

    def _on_primary_drag(self, event) -> None:
        pos = self._track(event)
        if self._press is not None and (pos - self._press).length() > _DRAG_THRESHOLD:
            self._dragged = True
        if self._alt_drag and self._last is not None:
            self.picker.pan(pos - self._last)
        self._last = pos
        self.redraw()

    def _on_primary_release(self, event) -> None:
        if not self._dragged:
            self.picker.click(Vec2(float(event.x), float(event.y)), self._view_rect())
        self._press = self._last = None
        self._dragged = False
        self.redraw()

    def _on_middle_press(self, event) -> None:
        self._last = Vec2(float(event.x), float(event.y))

    def _on_middle_drag(self, event) -> None:
        pos = self._track(event)
        if self._last is not None:
            self.picker.pan(pos - self._last)
        self._last = pos
        self.redraw()

    def _on_secondary(self, event) -> None:
        self.picker.secondary_click(Vec2(float(event.x), float(event.y)), self._view_rect())
        self.redraw()

    def _on_wheel(self, event) -> None:
        self._scroll(float(event.delta), event)

    def _scroll(self, delta: float, event) -> None:
        pos = Vec2(float(event.x), float(event.y))
        self.picker.scroll(delta, pos, self._view_rect())
        self._track(event)
        self.redraw()


def main(argv: list[str] | None = None) -> int:
    """Open the coordinate picker window."""
    parser = argparse.ArgumentParser(
        prog="coordpicker",
        description="Pick screen coordinates for 2D application development.",
    )
    parser.parse_args(argv)
    PickerWindow().run()
    return 0