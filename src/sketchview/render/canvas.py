"""Framework-agnostic SketchCanvas and DisplayBackend protocols.

Defines the drawing primitives a sketch needs and a display backend
contract so different surfaces (pygame, a text trace, etc.) can be
plugged in.
"""

from __future__ import annotations

from typing import Protocol, Tuple

Color = Tuple[int, int, int, int]

# Opaque white on opaque black
DEFAULT_FOREGROUND = 0xFFFFFFFF
DEFAULT_BACKGROUND = 0x000000FF


def rgba_from_int(value: int) -> Color:
    """Split a ``0xRRGGBBAA`` value into an RGBA tuple.

    Bits above the low 32 are dropped so long accumulator values still map
    to a colour.
    """
    v = int(value) & 0xFFFFFFFF
    return (v >> 24) & 0xFF, (v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF


class SketchCanvas(Protocol):
    def line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        ...

    def block(self, x: int, y: int, w: int, h: int) -> None:
        """Fill a rectangle; *w* and *h* may be negative."""
        ...

    def set_colour(self, value: int) -> None:
        ...

    def show(self) -> None:
        ...

    def pause(self, ms: int) -> None:
        ...


class DisplayBackend(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def clear(self) -> None:
        ...

    def begin_frame(self) -> SketchCanvas:
        ...

    def end_frame(self) -> None:
        ...

    def save_png(self, path: str) -> None:
        ...
