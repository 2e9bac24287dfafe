"""Apply one decoded sketch instruction to a DrawingState.

Drawing happens as side effects on a :class:`SketchCanvas`. The executor
never raises: unknown TOOL operands are ignored and every byte value
decodes to some instruction.
"""

from __future__ import annotations

import logging

from sketchview.core.codec import (
    Opcode,
    ToolCode,
    decode_opcode,
    decode_operand,
    shift_in,
)
from sketchview.core.state import DrawingState, Tool
from sketchview.render.canvas import SketchCanvas

__all__ = ["apply"]

logger = logging.getLogger(__name__)

_TOOL_SELECT = {
    ToolCode.NONE: Tool.NONE,
    ToolCode.LINE: Tool.LINE,
    ToolCode.BLOCK: Tool.BLOCK,
}


def _apply_tool(state: DrawingState, canvas: SketchCanvas, operand: int) -> None:
    if operand in _TOOL_SELECT:
        state.tool = _TOOL_SELECT[ToolCode(operand)]
    elif operand == ToolCode.COLOUR:
        state.tool = Tool.COLOUR
        canvas.set_colour(state.data)
    elif operand == ToolCode.TARGETX:
        state.tx = state.data
    elif operand == ToolCode.TARGETY:
        state.ty = state.data
    elif operand == ToolCode.SHOW:
        canvas.show()
    elif operand == ToolCode.PAUSE:
        canvas.pause(state.data)
    elif operand == ToolCode.NEXTFRAME:
        state.end = True
    else:
        logger.debug("ignoring unknown tool value %d", operand)
    # The operand is consumed whether or not the tool value was recognised
    state.data = 0


def _close_move(state: DrawingState, canvas: SketchCanvas) -> None:
    if state.tool == Tool.LINE:
        canvas.line(state.x, state.y, state.tx, state.ty)
    elif state.tool == Tool.BLOCK:
        canvas.block(state.x, state.y, state.tx - state.x, state.ty - state.y)
    state.x = state.tx
    state.y = state.ty


def apply(state: DrawingState, canvas: SketchCanvas, op: int) -> None:
    """Execute instruction byte *op* against *state*, drawing on *canvas*."""
    opcode = decode_opcode(op)
    operand = decode_operand(op)

    if opcode == Opcode.TOOL:
        _apply_tool(state, canvas, operand)
    elif opcode == Opcode.DX:
        state.tx += operand
    elif opcode == Opcode.DY:
        state.ty += operand
        _close_move(state, canvas)
    else:
        state.data = shift_in(state.data, operand)
