"""The drawable canvas: its logical size, pan offset and zoom."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Rect, Vec2

DEFAULT_ZOOM = 0.5
MIN_ZOOM = 0.1
MAX_ZOOM = 10.0


@dataclass
class Canvas:
    """A canvas of fixed logical size shown inside a view with pan and zoom."""

    width: float
    height: float
    offset: Vec2 = field(default_factory=Vec2)
    zoom: float = DEFAULT_ZOOM

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def set_size(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def pan(self, delta: Vec2) -> None:
        """Move the canvas within the view by ``delta`` screen units."""
        self.offset = self.offset + delta

    def zoom_at(self, factor: float, pos: Vec2, view_rect: Rect) -> None:
        """Scale the zoom by ``factor`` about the screen point ``pos``."""
        old_zoom = self.zoom
        self.zoom = min(max(self.zoom * factor, MIN_ZOOM), MAX_ZOOM)
        mouse_offset = pos - view_rect.center()
        self.offset = self.offset - mouse_offset * (self.zoom / old_zoom - 1.0)

    def reset_view(self) -> None:
        self.offset = Vec2()
        self.zoom = DEFAULT_ZOOM

    def screen_rect(self, view_rect: Rect) -> Rect:
        """Where the canvas lies on screen inside ``view_rect``."""
        center = view_rect.center() + self.offset
        size = Vec2(self.width, self.height) * self.zoom
        return Rect.from_center_size(center, size)

    def screen_to_canvas(self, screen_pos: Vec2, view_rect: Rect) -> Vec2:
        rect = self.screen_rect(view_rect)
        return (screen_pos - rect.min) / self.zoom

    def canvas_to_screen(self, canvas_pos: Vec2, view_rect: Rect) -> Vec2:
        rect = self.screen_rect(view_rect)
        return rect.min + canvas_pos * self.zoom