from __future__ import annotations

from sketchview.core.state import DrawingState, Tool


def test_initial_state() -> None:
    s = DrawingState()
    assert (s.x, s.y, s.tx, s.ty) == (0, 0, 0, 0)
    assert s.tool == Tool.LINE
    assert s.data == 0
    assert s.start == 0
    assert s.end is False


def test_reset_pen_keeps_start_and_data() -> None:
    s = DrawingState(x=3, y=4, tx=5, ty=6, tool=Tool.BLOCK, data=9, start=12)
    s.reset_pen()
    assert (s.x, s.y, s.tx, s.ty) == (0, 0, 0, 0)
    assert s.tool == Tool.LINE
    assert s.data == 9
    assert s.start == 12


def test_reset_restores_constructed_state() -> None:
    s = DrawingState(x=3, tool=Tool.NONE, data=9, start=12, end=True)
    s.reset()
    assert s == DrawingState()
