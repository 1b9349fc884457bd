import io
import sys

import pytest

from endianio import BinaryReader, BinaryWriter
from endianio.byteorder import (
    ByteOrder,
    from_utf16_bom,
    inverse,
    native_order,
    to_utf16_bom,
)
from endianio.exceptions import BadBOM, MalformedInput, OutOfBounds, PreconditionError

BIG = ByteOrder.BIG_ENDIAN
LITTLE = ByteOrder.LITTLE_ENDIAN


def test_native_order():
    assert native_order() is ByteOrder(sys.byteorder)
    assert ByteOrder.coerce("=") is native_order()


def test_struct_prefix():
    assert BIG.struct_prefix == ">"
    assert LITTLE.struct_prefix == "<"


@pytest.mark.parametrize(
    "value,expected",
    [
        (BIG, BIG),
        (LITTLE, LITTLE),
        (">", BIG),
        ("!", BIG),
        ("<", LITTLE),
        ("big", BIG),
        ("little", LITTLE),
    ],
)
def test_coerce(value, expected):
    assert ByteOrder.coerce(value) is expected


@pytest.mark.parametrize("value", [None, "", "middle", 1, ["<"]])
def test_coerce_rejects(value):
    with pytest.raises(PreconditionError):
        ByteOrder.coerce(value)


def test_inverse():
    assert inverse(BIG) is LITTLE
    assert inverse(LITTLE) is BIG
    assert inverse(inverse(BIG)) is BIG
    assert inverse(inverse(LITTLE)) is LITTLE
    with pytest.raises(PreconditionError):
        inverse(None)


def test_to_utf16_bom():
    assert to_utf16_bom(BIG) == b"\xfe\xff"
    assert to_utf16_bom(LITTLE) == b"\xff\xfe"
    # Same as what Python's own UTF-16 codec does
    assert to_utf16_bom(native_order()) == "".encode("utf-16")


def test_from_utf16_bom():
    assert from_utf16_bom(b"\xfe\xff") is BIG
    assert from_utf16_bom(b"\xff\xfe", 0) is LITTLE
    assert from_utf16_bom(b"\x00\xfe\xff", 1) is BIG
    assert from_utf16_bom(bytearray(b"\xff\xfe\x00\x00")) is LITTLE


@pytest.mark.parametrize("order", [BIG, LITTLE])
def test_bom_roundtrip(order):
    assert from_utf16_bom(to_utf16_bom(order)) is order


@pytest.mark.parametrize("data", [b"\x00\x01", b"\xfe\xfe", b"\xff\xff", b"\xef\xbb"])
def test_from_utf16_bom_malformed(data):
    with pytest.raises(BadBOM) as ctx:
        from_utf16_bom(data, 0)
    assert isinstance(ctx.value, MalformedInput)
    assert "Wrong byte order mark" in str(ctx.value)


@pytest.mark.parametrize("data,offset", [(b"\xfe", 0), (b"\xfe\xff", 1), (b"", 0)])
def test_from_utf16_bom_out_of_bounds(data, offset):
    with pytest.raises(OutOfBounds):
        from_utf16_bom(data, offset)


def test_from_utf16_bom_missing_buffer():
    with pytest.raises(PreconditionError):
        from_utf16_bom(None)


@pytest.mark.parametrize("cls", [BinaryReader, BinaryWriter])
def test_default_order_is_native(cls):
    adapter = cls(io.BytesIO())
    assert adapter.order is native_order()
    assert adapter.is_native_order()


@pytest.mark.parametrize("cls", [BinaryReader, BinaryWriter])
def test_swap_order(cls):
    adapter = cls(io.BytesIO(), BIG)
    assert adapter.is_big_endian()
    assert not adapter.is_little_endian()

    adapter.swap_order()
    assert adapter.order is LITTLE
    assert adapter.is_little_endian()
    assert not adapter.is_big_endian()

    adapter.swap_order()
    assert adapter.order is BIG


@pytest.mark.parametrize("cls", [BinaryReader, BinaryWriter])
def test_set_order(cls):
    adapter = cls(io.BytesIO(), "<")
    assert adapter.order is LITTLE
    adapter.order = ">"
    assert adapter.order is BIG
    assert adapter.is_native_order() == (sys.byteorder == "big")

    with pytest.raises(PreconditionError):
        adapter.order = None
    # A failed change leaves the order alone
    assert adapter.order is BIG


@pytest.mark.parametrize("cls", [BinaryReader, BinaryWriter])
def test_bad_construction(cls):
    with pytest.raises(PreconditionError):
        cls(None)
    with pytest.raises(PreconditionError):
        cls(io.BytesIO(), "sideways")
