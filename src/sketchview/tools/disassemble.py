"""Human-readable listing of a sketch byte stream.

Each byte becomes one line with its offset, raw value, opcode class and
operand. TOOL operands are shown by name, DATA lines also show the
running accumulator.

Example output:

    0000  c1  DATA   1        acc=1
    0001  02  TOOL   BLOCK
    0002  45  DX     5
"""

from __future__ import annotations

from typing import Iterable, List

from sketchview.core.codec import Opcode, ToolCode, decode, shift_in

__all__ = ["disassemble"]


def _tool_name(operand: int) -> str:
    try:
        return ToolCode(operand).name
    except ValueError:
        return f"?{operand}"


def disassemble(stream: Iterable[int]) -> List[str]:
    out: List[str] = []
    acc = 0
    for i, b in enumerate(stream):
        op, operand = decode(b)
        prefix = f"{i:04x}  {b:02x}  {op.name:<6} "
        if op == Opcode.TOOL:
            out.append(prefix + _tool_name(operand))
            acc = 0
        elif op == Opcode.DATA:
            acc = shift_in(acc, operand)
            out.append(prefix + f"{operand & 0x3F:<8} acc={acc}")
        else:
            out.append(prefix + str(operand))
    return out
