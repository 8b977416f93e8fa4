"""The picker's model: canvas, grid, coordinate system, markers and settings."""

from __future__ import annotations

from collections.abc import Callable

from .canvas import Canvas
from .coordinate import CoordinateSystem
from .geometry import Rect, Vec2
from .grid import Grid
from .marker import Marker
from .state import UiState

CUSTOM = "Custom"

RESOLUTION_PRESETS: dict[str, tuple[float, float]] = {
    "HD (1280x720)": (1280.0, 720.0),
    "Full HD (1920x1080)": (1920.0, 1080.0),
    "4K (3840x2160)": (3840.0, 2160.0),
    "iPhone (390x844)": (390.0, 844.0),
    "iPad (810x1080)": (810.0, 1080.0),
    CUSTOM: (800.0, 600.0),
}

CLICK_THRESHOLD = 10.0
ZOOM_STEP = 1.1
MIN_CUSTOM_SIZE = 100.0
MAX_CUSTOM_SIZE = 10000.0
MIN_GRID_SIZE = 5.0
MAX_GRID_SIZE = 100.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class CoordinatePicker:
    """Holds the picker's state and reacts to user actions.

    ``clipboard`` is a callable that places text on the system clipboard;
    without one, copying reports failure.
    """

    def __init__(
        self,
        ui_state: UiState | None = None,
        clipboard: Callable[[str], None] | None = None,
    ) -> None:
        self.ui_state = ui_state if ui_state is not None else UiState()
        self.clipboard = clipboard
        self.resolution_presets = dict(RESOLUTION_PRESETS)
        self.canvas = Canvas(1920.0, 1080.0)
        self.grid = Grid(45.0, True)
        self.coordinate_system = CoordinateSystem(True)
        self.markers: list[Marker] = []

        self.grid.size = self.ui_state.grid_size
        self.grid.visible = self.ui_state.show_grid
        self.grid.snapping = self.ui_state.enable_snapping
        self.coordinate_system.origin_top_left = self.ui_state.origin_top_left
        self.update_canvas_resolution()

    # Canvas size

    def resolution_names(self) -> list[str]:
        """Names of the available resolution presets."""
        return list(self.resolution_presets)

    def select_resolution(self, name: str) -> None:
        """Choose a resolution preset by name and resize the canvas."""
        if name not in self.resolution_presets:
            raise ValueError(f"unknown resolution preset: {name!r}")
        self.ui_state.selected_resolution = name
        self.update_canvas_resolution()

    def set_custom_size(self, width: float, height: float) -> None:
        """Set the custom canvas size, clamped to 100..10000 on each side."""
        self.ui_state.custom_width = _clamp(width, MIN_CUSTOM_SIZE, MAX_CUSTOM_SIZE)
        self.ui_state.custom_height = _clamp(height, MIN_CUSTOM_SIZE, MAX_CUSTOM_SIZE)
        self.update_canvas_resolution()

    def update_canvas_resolution(self) -> None:
        """Resize the canvas to match the selected resolution."""
        selected = self.ui_state.selected_resolution
        preset = self.resolution_presets.get(selected)
        if preset is None:
            return
        if selected == CUSTOM:
            width, height = self.ui_state.custom_width, self.ui_state.custom_height
        else:
            width, height = preset
            self.ui_state.custom_width = width
            self.ui_state.custom_height = height
        self.canvas.set_size(width, height)
        self.coordinate_system.canvas_height = height

    # Grid and coordinate system

    def apply_grid_settings(
        self, show_grid: bool, grid_size: float, enable_snapping: bool
    ) -> None:
        """Update the grid; its size is clamped to 5..100."""
        self.ui_state.show_grid = show_grid
        self.ui_state.grid_size = _clamp(grid_size, MIN_GRID_SIZE, MAX_GRID_SIZE)
        self.ui_state.enable_snapping = enable_snapping
        self.grid.size = self.ui_state.grid_size
        self.grid.visible = show_grid
        self.grid.snapping = enable_snapping

    def set_origin_top_left(self, origin_top_left: bool) -> None:
        """Move the origin, recalculating markers if that option is on."""
        self.ui_state.origin_top_left = origin_top_left
        old_top_left = self.coordinate_system.origin_top_left
        self.coordinate_system.origin_top_left = origin_top_left
        if not self.ui_state.recalculate_markers or old_top_left == origin_top_left:
            return
        height = self.canvas.height
        for marker in self.markers:
            system = marker.system_position
            canvas_pos = system if old_top_left else Vec2(system.x, height - system.y)
            marker.system_position = self.coordinate_system.to_system(canvas_pos)

    def snap(self, pos: Vec2) -> Vec2:
        """Snap a canvas position to the grid if snapping is on."""
        return self.grid.snap(pos, self.canvas.width, self.canvas.height)

    # Pointer interaction

    def pan(self, delta: Vec2) -> None:
        self.canvas.pan(delta)

    def scroll(self, delta: float, pos: Vec2, view_rect: Rect) -> None:
        """Zoom in or out by one step about ``pos`` depending on the sign of ``delta``."""
        if delta == 0:
            return
        factor = ZOOM_STEP if delta > 0 else 1.0 / ZOOM_STEP
        self.canvas.zoom_at(factor, pos, view_rect)

    def hover(self, screen_pos: Vec2, view_rect: Rect) -> Vec2:
        """Track the pointer; returns the (possibly snapped) system position."""
        canvas_pos = self.canvas.screen_to_canvas(screen_pos, view_rect)
        snapped = self.snap(canvas_pos)
        self.ui_state.current_position = self.coordinate_system.to_system(snapped)
        self.ui_state.current_position_raw = self.coordinate_system.to_system(canvas_pos)
        return self.ui_state.current_position

    def click(self, screen_pos: Vec2, view_rect: Rect) -> Marker | None:
        """Place a marker at the clicked point if it lies on the canvas."""
        if not self.canvas.screen_rect(view_rect).contains(screen_pos):
            return None
        snapped = self.snap(self.canvas.screen_to_canvas(screen_pos, view_rect))
        if not (
            0.0 <= snapped.x <= self.canvas.width
            and 0.0 <= snapped.y <= self.canvas.height
        ):
            return None
        marker = Marker(
            snapped,
            self.coordinate_system.to_system(snapped),
            self.ui_state.marker_color,
        )
        self.markers.append(marker)
        return marker

    def secondary_click(self, screen_pos: Vec2, view_rect: Rect) -> Marker | None:
        """Remove a marker near the clicked point, returning it if found."""
        if not self.canvas.screen_rect(view_rect).contains(screen_pos):
            return None
        return self.remove_nearby_marker(
            self.canvas.screen_to_canvas(screen_pos, view_rect)
        )

    # Markers

    def remove_nearby_marker(self, position: Vec2) -> Marker | None:
        """Remove the first marker closer than the click threshold to ``position``."""
        for index, marker in enumerate(self.markers):
            if (marker.position - position).length() < CLICK_THRESHOLD:
                return self.markers.pop(index)
        return None

    def delete_marker(self, index: int) -> Marker | None:
        """Remove the marker at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.markers):
            return self.markers.pop(index)
        return None

    def clear_markers(self) -> None:
        self.markers.clear()

    def reset_view(self) -> None:
        self.canvas.reset_view()

    # Readouts

    def zoom_percentage(self) -> int:
        return int(self.canvas.zoom * 100.0)

    def current_position_text(self) -> str:
        pos = self.ui_state.current_position
        return f"({int(pos.x)}, {int(pos.y)})"

    def raw_position_text(self) -> str:
        if self.grid.snapping:
            return "Snapping enabled"
        raw = self.ui_state.current_position_raw
        return f"Raw: ({raw.x:.1f}, {raw.y:.1f})"

    def marker_lines(self) -> list[str]:
        """One numbered line per marker, e.g. ``1. (12, 34)``."""
        return [
            f"{number}. {marker.label()}"
            for number, marker in enumerate(self.markers, start=1)
        ]

    def all_coordinates_text(self) -> str:
        return "\n".join(self.marker_lines())

    def copy_to_clipboard(self, text: str) -> bool:
        """Put ``text`` on the clipboard; returns whether that succeeded."""
        if self.clipboard is None:
            return False
        try:
            self.clipboard(text)
        except Exception:
            return False
        return True