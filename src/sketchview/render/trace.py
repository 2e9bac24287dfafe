"""Text-recording SketchCanvas.

Records each primitive call as a line of text such as ``line(0,0,10,10)``
so sketches can be checked without a display. Used by ``--trace`` and the
tests.
"""

from __future__ import annotations

from typing import Callable, List, Optional


class TraceCanvas:
    def __init__(self, sink: Optional[Callable[[str], None]] = None) -> None:
        self.calls: List[str] = []
        self._sink = sink

    def _record(self, s: str) -> None:
        self.calls.append(s)
        if self._sink is not None:
            self._sink(s)

    def line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        self._record(f"line({x0},{y0},{x1},{y1})")

    def block(self, x: int, y: int, w: int, h: int) -> None:
        self._record(f"block({x},{y},{w},{h})")

    def set_colour(self, value: int) -> None:
        self._record(f"colour(0x{value & 0xFFFFFFFF:08x})")

    def show(self) -> None:
        self._record("show()")

    def pause(self, ms: int) -> None:
        self._record(f"pause({ms})")

    def clear(self) -> None:
        self.calls.clear()
