"""Single-byte instruction codec for sketch files.

Every byte of a sketch file is one instruction. The two most significant
bits select the opcode class and the low six bits carry a signed operand:

    bits 7-6   bits 5-0
    00 TOOL    tool / control selector
    01 DX      signed horizontal target delta
    10 DY      signed vertical target delta (closes a move, may draw)
    11 DATA    6-bit chunk shifted into the accumulator

Usage example:

    op = decode_opcode(0x7F)    # Opcode.DX
    n = decode_operand(0x7F)    # -1
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

__all__ = [
    "Opcode",
    "ToolCode",
    "Instruction",
    "decode_opcode",
    "decode_operand",
    "decode",
    "encode",
    "shift_in",
]


class Opcode(IntEnum):
    TOOL = 0
    DX = 1
    DY = 2
    DATA = 3


class ToolCode(IntEnum):
    """Operand values recognised by TOOL instructions."""

    NONE = 0
    LINE = 1
    BLOCK = 2
    COLOUR = 3
    TARGETX = 4
    TARGETY = 5
    SHOW = 6
    PAUSE = 7
    NEXTFRAME = 8


class Instruction(NamedTuple):
    opcode: Opcode
    operand: int


def decode_opcode(b: int) -> Opcode:
    """Return the opcode class held in the top two bits of *b*."""
    return Opcode((b & 0xFF) >> 6)


def decode_operand(b: int) -> int:
    """Return the low six bits of *b* as a signed value in [-32, 31].

    Bit 5 is the sign bit: ``0x20`` decodes to -32 and ``0x3F`` to -1.
    """
    return -(b & 0x20) + (b & 0x1F)


def decode(b: int) -> Instruction:
    return Instruction(decode_opcode(b), decode_operand(b))


def encode(opcode: Opcode, operand: int) -> int:
    """Pack *opcode* and the low six bits of *operand* into one byte."""
    return (int(opcode) << 6) | (operand & 0x3F)


def shift_in(acc: int, operand: int) -> int:
    """Shift a DATA chunk into accumulator *acc*.

    The result wraps to a signed 32-bit value, so six chunks of ``0x3F``
    give -1.
    """
    v = ((acc << 6) | (operand & 0x3F)) & 0xFFFFFFFF
    return v - (1 << 32) if v & 0x80000000 else v

