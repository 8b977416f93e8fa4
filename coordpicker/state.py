"""Settings and readouts shown in the side panel."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vec2
from .marker import Color


@dataclass
class UiState:
    """Everything the user can change in the settings panel."""

    selected_resolution: str = "Full HD (1920x1080)"
    custom_width: float = 1920.0
    custom_height: float = 1080.0

    show_grid: bool = True
    grid_size: float = 45.0
    enable_snapping: bool = True

    origin_top_left: bool = True

    marker_color: Color = field(default_factory=lambda: Color(0, 120, 255))

    current_position: Vec2 = field(default_factory=Vec2)
    current_position_raw: Vec2 = field(default_factory=Vec2)

    dark_mode: bool = True
    recalculate_markers: bool = True