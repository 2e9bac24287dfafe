from __future__ import annotations

import pytest

from sketchview.core.codec import (
    Opcode,
    ToolCode,
    decode,
    decode_opcode,
    decode_operand,
    encode,
    shift_in,
)


def test_decoder_total_over_all_bytes() -> None:
    for b in range(256):
        assert decode_opcode(b) in set(Opcode)
        assert -32 <= decode_operand(b) <= 31


@pytest.mark.parametrize(
    "b,expected",
    [(0x20, -32), (0x1F, 31), (0x3F, -1), (0x00, 0), (0x7F, -1), (0xC5, 5)],
)
def test_operand_is_signed_six_bit(b: int, expected: int) -> None:
    assert decode_operand(b) == expected


def test_opcode_from_top_bits() -> None:
    assert decode_opcode(0x00) == Opcode.TOOL
    assert decode_opcode(0x40) == Opcode.DX
    assert decode_opcode(0x80) == Opcode.DY
    assert decode_opcode(0xC0) == Opcode.DATA


def test_decode_pairs_opcode_and_operand() -> None:
    ins = decode(0x7E)
    assert ins.opcode == Opcode.DX
    assert ins.operand == -2


def test_encode_masks_operand() -> None:
    assert encode(Opcode.DY, -1) == 0xBF
    assert encode(Opcode.TOOL, ToolCode.NEXTFRAME) == 0x08
    assert decode(encode(Opcode.DX, -32)) == (Opcode.DX, -32)


def test_shift_in_is_signed_32_bit() -> None:
    assert shift_in(1, 2) == 66
    assert shift_in(0, -1) == 0x3F
    assert shift_in(0x7FFFFFF, 0x3F) == -1
    assert shift_in(-1, 0x3F) == -1
