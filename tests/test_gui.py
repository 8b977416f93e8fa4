import pytest

from coordpicker.geometry import Rect, Vec2
from coordpicker.gui import main, render
from coordpicker.marker import Color
from coordpicker.picker import CoordinatePicker
from coordpicker.scene import Circle, Line, Text, build_scene


class RecordingTarget:
    def __init__(self):
        self.calls = []

    def _record(self, kind, args, kwargs):
        self.calls.append((kind, args, kwargs))
        return len(self.calls)

    def create_line(self, *args, **kwargs):
        return self._record("line", args, kwargs)

    def create_oval(self, *args, **kwargs):
        return self._record("oval", args, kwargs)

    def create_text(self, *args, **kwargs):
        return self._record("text", args, kwargs)


def test_render_line():
    target = RecordingTarget()
    color = Color(10, 20, 30)
    render([Line(Vec2(1.0, 2.0), Vec2(3.0, 4.0), color, 2.0)], target)
    kind, args, kwargs = target.calls[0]
    assert kind == "line"
    assert args == (1.0, 2.0, 3.0, 4.0)
    assert kwargs["fill"] == color.hex()
    assert kwargs["width"] == 2.0


def test_render_filled_circle_bbox():
    target = RecordingTarget()
    color = Color(1, 2, 3)
    render([Circle(Vec2(50.0, 60.0), 4.0, color)], target)
    kind, args, kwargs = target.calls[0]
    assert kind == "oval"
    assert args == (46.0, 56.0, 54.0, 64.0)
    assert kwargs["fill"] == color.hex()
    assert kwargs["outline"] == ""


def test_render_outline_circle():
    target = RecordingTarget()
    color = Color(0, 200, 0)
    render([Circle(Vec2(0.0, 0.0), 8.0, color, filled=False, width=1.5)], target)
    _, args, kwargs = target.calls[0]
    assert args == (-8.0, -8.0, 8.0, 8.0)
    assert kwargs["fill"] == ""
    assert kwargs["outline"] == color.hex()
    assert kwargs["width"] == 1.5


def test_render_text():
    target = RecordingTarget()
    color = Color(255, 255, 255)
    render([Text(Vec2(7.0, 9.0), "(0, 0)", color, anchor="sw")], target)
    kind, args, kwargs = target.calls[0]
    assert kind == "text"
    assert args == (7.0, 9.0)
    assert kwargs["text"] == "(0, 0)"
    assert kwargs["anchor"] == "sw"
    assert kwargs["fill"] == color.hex()


def test_render_returns_ids_in_order_for_whole_scene():
    picker = CoordinatePicker()
    view = Rect(Vec2(0.0, 0.0), Vec2(1200.0, 800.0))
    picker.click(Vec2(600.0, 400.0), view)
    scene = build_scene(picker, view, Vec2(500.0, 300.0))
    target = RecordingTarget()
    ids = render(scene, target)
    assert ids == list(range(1, len(scene) + 1))
    assert len(target.calls) == len(scene)


def test_render_rejects_unknown_primitive():
    with pytest.raises(TypeError):
        render(["not a primitive"], RecordingTarget())


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0