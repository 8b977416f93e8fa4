import pytest

from coordpicker.geometry import Rect, Vec2
from coordpicker.picker import CoordinatePicker

# At the default 50% zoom a 1920x1080 canvas fills this view exactly.
VIEW = Rect(Vec2(0.0, 0.0), Vec2(960.0, 540.0))


@pytest.fixture
def picker():
    return CoordinatePicker()


@pytest.fixture
def free_picker():
    p = CoordinatePicker()
    p.apply_grid_settings(True, 45.0, False)
    return p


def test_presets_and_defaults(picker):
    names = picker.resolution_names()
    assert set(names) == {
        "HD (1280x720)",
        "Full HD (1920x1080)",
        "4K (3840x2160)",
        "iPhone (390x844)",
        "iPad (810x1080)",
        "Custom",
    }
    assert picker.canvas.size == (1920.0, 1080.0)
    assert picker.grid.size == 45.0
    assert picker.grid.snapping is True
    assert picker.zoom_percentage() == 50


def test_select_resolution_updates_canvas(picker):
    picker.select_resolution("HD (1280x720)")
    assert picker.canvas.size == (1280.0, 720.0)
    assert picker.coordinate_system.canvas_height == 720.0
    assert (picker.ui_state.custom_width, picker.ui_state.custom_height) == (1280.0, 720.0)


def test_select_unknown_resolution(picker):
    with pytest.raises(ValueError):
        picker.select_resolution("nope")
    assert picker.canvas.size == (1920.0, 1080.0)


def test_custom_size_applies_only_when_custom(picker):
    picker.set_custom_size(800.0, 600.0)
    assert picker.canvas.size == (1920.0, 1080.0)
    picker.select_resolution("Custom")
    picker.set_custom_size(800.0, 600.0)
    assert picker.canvas.size == (800.0, 600.0)
    assert picker.coordinate_system.canvas_height == 600.0


def test_custom_size_is_clamped(picker):
    picker.select_resolution("Custom")
    picker.set_custom_size(50.0, 20000.0)
    assert picker.canvas.size == (100.0, 10000.0)


def test_grid_size_clamped(picker):
    picker.apply_grid_settings(False, 1.0, True)
    assert picker.grid.size == 5.0
    assert picker.grid.visible is False
    picker.apply_grid_settings(True, 500.0, True)
    assert picker.grid.size == 100.0


def test_snap_disabled_returns_input(free_picker):
    pos = Vec2(123.4, 56.7)
    assert free_picker.snap(pos) == pos


def test_hover_unsnapped_matches_canvas_position(free_picker):
    screen = Vec2(50.0, 25.0)
    result = free_picker.hover(screen, VIEW)
    assert result == free_picker.canvas.screen_to_canvas(screen, VIEW)
    assert free_picker.ui_state.current_position_raw == result
    assert free_picker.current_position_text() == "(100, 50)"
    assert free_picker.raw_position_text() == "Raw: (100.0, 50.0)"


def test_raw_text_when_snapping(picker):
    picker.hover(Vec2(50.0, 25.0), VIEW)
    assert picker.raw_position_text() == "Snapping enabled"


def test_hover_snapped_matches_snap(picker):
    screen = Vec2(301.0, 177.0)
    canvas_pos = picker.canvas.screen_to_canvas(screen, VIEW)
    assert picker.hover(screen, VIEW) == picker.snap(canvas_pos)


def test_click_places_marker(picker):
    screen = Vec2(301.0, 177.0)
    marker = picker.click(screen, VIEW)
    assert picker.markers == [marker]
    assert marker.position == picker.snap(picker.canvas.screen_to_canvas(screen, VIEW))
    assert marker.system_position == picker.coordinate_system.to_system(marker.position)
    assert marker.color == picker.ui_state.marker_color


def test_click_outside_canvas_ignored(picker):
    assert picker.click(Vec2(2000.0, 2000.0), VIEW) is None
    assert picker.markers == []


def test_secondary_click_removes_marker(free_picker):
    marker = free_picker.click(Vec2(200.0, 100.0), VIEW)
    removed = free_picker.secondary_click(Vec2(201.0, 100.0), VIEW)
    assert removed is marker
    assert free_picker.markers == []


def test_remove_nearby_threshold(free_picker):
    marker = free_picker.click(Vec2(200.0, 100.0), VIEW)
    far = marker.position + Vec2(10.0, 0.0)
    assert free_picker.remove_nearby_marker(far) is None
    assert len(free_picker.markers) == 1
    near = marker.position + Vec2(9.9, 0.0)
    assert free_picker.remove_nearby_marker(near) is marker
    assert free_picker.markers == []


def test_delete_marker(free_picker):
    first = free_picker.click(Vec2(100.0, 100.0), VIEW)
    second = free_picker.click(Vec2(300.0, 300.0), VIEW)
    assert free_picker.delete_marker(5) is None
    assert free_picker.delete_marker(-1) is None
    assert free_picker.delete_marker(0) is first
    assert free_picker.markers == [second]
    free_picker.clear_markers()
    assert free_picker.markers == []


def test_origin_change_recalculates(free_picker):
    marker = free_picker.click(Vec2(200.0, 100.0), VIEW)
    original = marker.system_position
    free_picker.set_origin_top_left(False)
    assert marker.system_position == Vec2(
        original.x, free_picker.canvas.height - original.y
    )
    free_picker.set_origin_top_left(True)
    assert marker.system_position == original


def test_origin_change_without_recalculation(free_picker):
    free_picker.ui_state.recalculate_markers = False
    marker = free_picker.click(Vec2(200.0, 100.0), VIEW)
    original = marker.system_position
    free_picker.set_origin_top_left(False)
    assert marker.system_position == original
    assert free_picker.coordinate_system.origin_top_left is False


def test_scroll_zoom(picker):
    center = VIEW.center()
    picker.scroll(0.0, center, VIEW)
    assert picker.canvas.zoom == 0.5
    picker.scroll(1.0, center, VIEW)
    assert picker.canvas.zoom > 0.5
    picker.scroll(-1.0, center, VIEW)
    assert picker.canvas.zoom == pytest.approx(0.5)
    for _ in range(100):
        picker.scroll(1.0, center, VIEW)
    assert picker.zoom_percentage() == 1000


def test_pan_and_reset(picker):
    picker.pan(Vec2(10.0, -5.0))
    picker.scroll(1.0, Vec2(0.0, 0.0), VIEW)
    assert picker.canvas.offset != Vec2()
    picker.reset_view()
    assert picker.canvas.offset == Vec2()
    assert picker.canvas.zoom == 0.5


def test_marker_lines_and_all_text(free_picker):
    a = free_picker.click(Vec2(50.0, 25.0), VIEW)
    b = free_picker.click(Vec2(300.0, 200.0), VIEW)
    lines = free_picker.marker_lines()
    assert lines == [f"1. {a.label()}", f"2. {b.label()}"]
    assert free_picker.all_coordinates_text() == "\n".join(lines)


def test_copy_to_clipboard():
    copied = []
    p = CoordinatePicker(clipboard=copied.append)
    assert p.copy_to_clipboard("(1, 2)") is True
    assert copied == ["(1, 2)"]


def test_copy_without_clipboard(picker):
    assert picker.copy_to_clipboard("x") is False


def test_copy_failure_reported():
    def failing(text):
        raise RuntimeError("no clipboard")

    p = CoordinatePicker(clipboard=failing)
    assert p.copy_to_clipboard("x") is False