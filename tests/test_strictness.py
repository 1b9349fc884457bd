import io
import math

import pytest

from endianio import BinaryWriter
from endianio import strictness as strictness
from endianio.bitconverter import (
    TYPE_F32,
    TYPE_I8,
    TYPE_I16,
    TYPE_U16,
    TYPE_U32,
    from_bytes,
    to_bytes,
)
from endianio.byteorder import ByteOrder
from endianio.exceptions import EndianioStrictnessError, EndianioStrictnessWarning
from endianio.strictness import Strictness, set_strictness

BIG = ByteOrder.BIG_ENDIAN


@pytest.fixture(autouse=True)
def restore_strictness():
    original = strictness.get_strictness()
    yield
    set_strictness(original)


def test_default_is_forbid():
    assert strictness.get_strictness() is Strictness.FORBID


@pytest.mark.parametrize(
    "type_,value",
    [
        (TYPE_I8, 128),
        (TYPE_I8, -129),
        (TYPE_I16, 40000),
        (TYPE_U16, -1),
        (TYPE_U32, 2**32),
    ],
)
def test_forbid_out_of_range(type_, value):
    set_strictness(Strictness.FORBID)
    with pytest.raises(EndianioStrictnessError, match="out of range"):
        to_bytes(value, type_, BIG)


def test_none_truncates_silently(recwarn):
    set_strictness(Strictness.NONE)
    assert to_bytes(40000, TYPE_I16, BIG) == b"\x9c\x40"
    assert to_bytes(-1, TYPE_U16, BIG) == b"\xff\xff"
    assert to_bytes(0x1FF, TYPE_I8) == b"\xff"
    assert len(recwarn) == 0


def test_warn_truncates():
    set_strictness(Strictness.WARN)
    with pytest.warns(EndianioStrictnessWarning, match="16-bit signed"):
        data = to_bytes(40000, TYPE_I16, BIG)
    assert data == b"\x9c\x40"
    assert from_bytes(data, TYPE_I16, BIG) == 40000 - 65536


def test_fix_clamps():
    set_strictness(Strictness.FIX)
    with pytest.warns(EndianioStrictnessWarning):
        assert to_bytes(40000, TYPE_I16, BIG) == b"\x7f\xff"
    with pytest.warns(EndianioStrictnessWarning):
        assert to_bytes(-5, TYPE_U32, BIG) == b"\x00\x00\x00\x00"


def test_float_overflow():
    set_strictness(Strictness.FORBID)
    with pytest.raises(EndianioStrictnessError, match="32-bit float"):
        to_bytes(1e300, TYPE_F32, BIG)

    set_strictness(Strictness.NONE)
    assert from_bytes(to_bytes(1e300, TYPE_F32, BIG), TYPE_F32, BIG) == math.inf
    assert from_bytes(to_bytes(-1e300, TYPE_F32, BIG), TYPE_F32, BIG) == -math.inf


def test_non_numeric_is_always_an_error():
    set_strictness(Strictness.NONE)
    with pytest.raises(TypeError):
        to_bytes(1.5, TYPE_I16, BIG)


def test_writer_obeys_strictness():
    out = io.BytesIO()
    writer = BinaryWriter(out, BIG)

    set_strictness(Strictness.FORBID)
    with pytest.raises(EndianioStrictnessError):
        writer.write_uint16(70000)
    assert writer.size() == 0
    assert out.getvalue() == b""

    set_strictness(Strictness.NONE)
    writer.write_uint16(70000)
    assert out.getvalue() == b"\x11\x70"


def test_narrow_write_warning_can_be_silenced(recwarn):
    set_strictness(Strictness.NONE)
    out = io.BytesIO()
    BinaryWriter(out).write_narrow("€")
    assert out.getvalue() == b"\xac"
    assert len(recwarn) == 0


def test_set_strictness_requires_level():
    with pytest.raises(AssertionError):
        set_strictness(3)
