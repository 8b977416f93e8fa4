"""Turns the picker's state into a list of drawing primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import Rect, Vec2
from .marker import Color
from .picker import CoordinatePicker

BACKGROUND_DARK = Color(20, 20, 20)
BACKGROUND_LIGHT = Color(240, 240, 240)

_BORDER_DARK = Color(150, 150, 150)
_BORDER_LIGHT = Color(100, 100, 100)
_GRID_DARK = Color(180, 180, 180, 60)
_GRID_LIGHT = Color(80, 80, 80, 80)
_EDGE_DARK = Color(200, 200, 200, 100)
_EDGE_LIGHT = Color(100, 100, 100, 100)
_WHITE = Color(255, 255, 255)
_BLACK = Color(0, 0, 0)
_RED = Color(255, 0, 0)
_SNAP = Color(0, 200, 0)
_SNAP_LINE = Color(0, 200, 0, 150)

_MIN_SCREEN_GRID = 5.0
_MARKER_RADIUS = 5.0
_LABEL_OFFSET = Vec2(10.0, 0.0)
_CROSSHAIR_SIZE = 10.0
_SNAP_RADIUS = 8.0
_SNAP_LINE_MIN = 2.0


@dataclass(frozen=True)
class Line:
    """A straight line segment."""

    start: Vec2
    end: Vec2
    color: Color
    width: float = 1.0


@dataclass(frozen=True)
class Circle:
    """A circle, either filled or drawn as an outline of ``width``."""

    center: Vec2
    radius: float
    color: Color
    filled: bool = True
    width: float = 1.0


@dataclass(frozen=True)
class Text:
    """A text label; ``anchor`` is a compass point such as ``w`` or ``sw``."""

    position: Vec2
    text: str
    color: Color
    anchor: str = "w"


Primitive = Line | Circle | Text


def _text_color(dark: bool) -> Color:
    return _WHITE if dark else _BLACK


def grid_primitives(
    picker: CoordinatePicker, view_rect: Rect, border_rect: Rect
) -> list[Primitive]:
    """Grid lines, canvas edges and the origin mark, clipped to ``border_rect``.

    Nothing is drawn when grid cells would be smaller than five screen units.
    """
    canvas = picker.canvas
    step = picker.grid.size
    screen_step = step * canvas.zoom
    if screen_step < _MIN_SCREEN_GRID:
        return []

    dark = picker.ui_state.dark_mode
    grid_color = _GRID_DARK if dark else _GRID_LIGHT
    edge_color = _EDGE_DARK if dark else _EDGE_LIGHT

    def to_screen(x: float, y: float) -> Vec2:
        return canvas.canvas_to_screen(Vec2(x, y), view_rect)

    def vertical(x: float, color: Color, width: float) -> Line | None:
        if border_rect.min.x <= x <= border_rect.max.x:
            return Line(
                Vec2(x, border_rect.min.y), Vec2(x, border_rect.max.y), color, width
            )
        return None

    def horizontal(y: float, color: Color, width: float) -> Line | None:
        if border_rect.min.y <= y <= border_rect.max.y:
            return Line(
                Vec2(border_rect.min.x, y), Vec2(border_rect.max.x, y), color, width
            )
        return None

    origin = to_screen(0.0, 0.0)
    left = math.ceil((origin.x - border_rect.min.x) / screen_step) + 2
    right = math.ceil((border_rect.max.x - origin.x) / screen_step) + 2
    up = math.ceil((origin.y - border_rect.min.y) / screen_step) + 2
    down = math.ceil((border_rect.max.y - origin.y) / screen_step) + 2

    lines: list[Line | None] = []
    lines.extend(
        vertical(to_screen(i * step, 0.0).x, grid_color, 1.0)
        for i in range(-left, right + 1)
    )
    lines.extend(
        horizontal(to_screen(0.0, i * step).y, grid_color, 1.0)
        for i in range(-up, down + 1)
    )
    lines.append(vertical(to_screen(0.0, 0.0).x, edge_color, 1.5))
    lines.append(vertical(to_screen(canvas.width, 0.0).x, edge_color, 1.5))
    lines.append(horizontal(to_screen(0.0, 0.0).y, edge_color, 1.5))
    lines.append(horizontal(to_screen(0.0, canvas.height).y, edge_color, 1.5))

    primitives: list[Primitive] = [line for line in lines if line is not None]

    top_left = picker.coordinate_system.origin_top_left
    origin_mark = to_screen(0.0, 0.0) if top_left else to_screen(0.0, canvas.height)
    if view_rect.contains(origin_mark):
        offset = Vec2(10.0, -10.0) if top_left else Vec2(10.0, 10.0)
        primitives.append(Circle(origin_mark, _MARKER_RADIUS, _RED))
        primitives.append(
            Text(origin_mark + offset, "(0, 0)", _text_color(dark), anchor="sw")
        )
    return primitives


def build_scene(
    picker: CoordinatePicker, view_rect: Rect, hover_pos: Vec2 | None = None
) -> list[Primitive]:
    """Everything drawn on the canvas area, in painting order."""
    canvas = picker.canvas
    dark = picker.ui_state.dark_mode
    border = canvas.screen_rect(view_rect)
    scene: list[Primitive] = []

    if picker.grid.visible:
        scene.extend(grid_primitives(picker, view_rect, border))

    border_color = _BORDER_DARK if dark else _BORDER_LIGHT
    top_right = Vec2(border.max.x, border.min.y)
    bottom_left = Vec2(border.min.x, border.max.y)
    scene.extend(
        Line(start, end, border_color, 2.0)
        for start, end in (
            (border.min, top_right),
            (top_right, border.max),
            (border.max, bottom_left),
            (bottom_left, border.min),
        )
    )

    text_color = _text_color(dark)
    for marker in picker.markers:
        center = canvas.canvas_to_screen(marker.position, view_rect)
        scene.append(Circle(center, _MARKER_RADIUS, marker.color))
        scene.append(Text(center + _LABEL_OFFSET, marker.label(), text_color, "w"))

    if hover_pos is not None:
        size = _CROSSHAIR_SIZE
        scene.append(
            Line(
                Vec2(hover_pos.x - size, hover_pos.y),
                Vec2(hover_pos.x + size, hover_pos.y),
                _RED,
            )
        )
        scene.append(
            Line(
                Vec2(hover_pos.x, hover_pos.y - size),
                Vec2(hover_pos.x, hover_pos.y + size),
                _RED,
            )
        )
        if picker.grid.snapping:
            snapped = picker.snap(canvas.screen_to_canvas(hover_pos, view_rect))
            snapped_screen = canvas.canvas_to_screen(snapped, view_rect)
            scene.append(
                Circle(snapped_screen, _SNAP_RADIUS, _SNAP, filled=False, width=1.5)
            )
            if (snapped_screen - hover_pos).length() > _SNAP_LINE_MIN:
                scene.append(Line(hover_pos, snapped_screen, _SNAP_LINE))

    return scene