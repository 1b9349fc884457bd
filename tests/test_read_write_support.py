"""
Write data out, then read it back
"""

import io
import math

import pytest

from endianio import BinaryReader, BinaryWriter, ByteOrder, native_order
from endianio.bitconverter import (
    TYPE_BOOL,
    TYPE_CHAR16,
    TYPE_F32,
    TYPE_F64,
    TYPE_I8,
    TYPE_I16,
    TYPE_I32,
    TYPE_I64,
    TYPE_U8,
    TYPE_U16,
    TYPE_U32,
    TYPE_U64,
)
from endianio.byteorder import inverse

VALUES = [
    (TYPE_BOOL, True),
    (TYPE_I8, -128),
    (TYPE_U8, 255),
    (TYPE_I16, -(2**15)),
    (TYPE_U16, 0xFEFF),
    (TYPE_CHAR16, "€"),
    (TYPE_I32, 2**31 - 1),
    (TYPE_U32, 2**32 - 1),
    (TYPE_I64, -(2**63)),
    (TYPE_U64, 2**64 - 1),
    (TYPE_F32, -0.5),
    (TYPE_F64, math.pi),
]


@pytest.mark.parametrize("order", [ByteOrder.BIG_ENDIAN, ByteOrder.LITTLE_ENDIAN])
def test_write_read_all_types(order):
    out = io.BytesIO()
    writer = BinaryWriter(out, order)
    for type_, value in VALUES:
        writer.write(type_, value)
    writer.write_utf("Grüße \U0001f600")
    writer.write_chars("ok")

    data = out.getvalue()
    assert writer.size() == len(data)

    reader = BinaryReader(io.BytesIO(data), order)
    assert [reader.read(type_) for type_, _ in VALUES] == [v for _, v in VALUES]
    assert reader.read_utf() == "Grüße \U0001f600"
    assert reader.read_char16() + reader.read_char16() == "ok"
    assert reader.skip_bytes(1) == 0


def test_bom_then_payload_native():
    payload = b"\x01\x02\x03\x04"
    out = io.BytesIO()
    writer = BinaryWriter(out)
    writer.write_uint16(0xFEFF)
    writer.write_bytes(payload)
    assert writer.size() == 6

    # Start from the wrong order on purpose; the mark fixes it
    reader = BinaryReader(io.BytesIO(out.getvalue()), inverse(native_order()))
    assert reader.read_bom() is native_order()
    assert reader.read_bytes(4) == payload


@pytest.mark.parametrize("order", [ByteOrder.BIG_ENDIAN, ByteOrder.LITTLE_ENDIAN])
def test_reader_follows_writer_bom(order):
    out = io.BytesIO()
    writer = BinaryWriter(out, order)
    writer.write_bom()
    writer.write_int32(-42)
    writer.write_float64(1.25)

    for start in (ByteOrder.BIG_ENDIAN, ByteOrder.LITTLE_ENDIAN):
        reader = BinaryReader(io.BytesIO(out.getvalue()), start)
        assert reader.read_bom() is order
        assert reader.read_int32() == -42
        assert reader.read_float64() == 1.25


def test_swapped_reader_sees_swapped_values():
    out = io.BytesIO()
    BinaryWriter(out, ByteOrder.BIG_ENDIAN).write_uint32(0x01020304)
    reader = BinaryReader(io.BytesIO(out.getvalue()), ByteOrder.LITTLE_ENDIAN)
    assert reader.read_uint32() == 0x04030201
