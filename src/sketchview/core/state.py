"""Mutable drawing state shared by the executor and the frame player."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["Tool", "DrawingState"]


class Tool(IntEnum):
    """Drawing tool applied when a DY instruction closes a move.

    Values match the TOOL operands that select them.
    """

    NONE = 0
    LINE = 1
    BLOCK = 2
    COLOUR = 3


@dataclass(slots=True)
class DrawingState:
    """Cursor, pending target, tool, accumulator and frame bookkeeping.

    Attributes
    ----------
    x, y: Current cursor position.
    tx, ty: Pending target, moved by DX/DY and TARGETX/TARGETY.
    tool: Last selected tool.
    data: Operand accumulator fed by DATA instructions.
    start: Byte offset where the next frame's replay begins.
    end: True while the current pass is stopping at a NEXTFRAME marker.
    """

    x: int = 0
    y: int = 0
    tx: int = 0
    ty: int = 0
    tool: Tool = Tool.LINE
    data: int = 0
    start: int = 0
    end: bool = False

    def reset_pen(self) -> None:
        """Clear per-pass fields; ``start`` and ``data`` survive."""
        self.x = self.y = self.tx = self.ty = 0
        self.tool = Tool.LINE

    def reset(self) -> None:
        """Return to the freshly constructed state (new or changed file)."""
        self.reset_pen()
        self.data = 0
        self.start = 0
        self.end = False
