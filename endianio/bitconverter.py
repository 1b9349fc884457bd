"""
Module converting primitive values to and from raw bytes, in either
byte order.

All the functions here are stateless: they only read their arguments
and only write into the buffer they are given.
"""

import math
import struct

from endianio import strictness as strictness
from endianio.byteorder import ByteOrder
from endianio.exceptions import OutOfBounds, PreconditionError

# Type name constants, to keep a list and prevent typos
TYPE_BOOL = "bool"
TYPE_CHAR16 = "char16"  # UTF-16 code unit
TYPE_F32 = "f32"  # IEEE-754 single precision
TYPE_F64 = "f64"

TYPE_U8 = "u8"  # Unsigned integer, 8 bits
TYPE_U16 = "u16"
TYPE_U32 = "u32"
TYPE_U64 = "u64"
TYPE_I8 = "i8"  # Signed integer, 8 bits
TYPE_I16 = "i16"
TYPE_I32 = "i32"
TYPE_I64 = "i64"

INT_TYPES = {
    (8, False): TYPE_U8,
    (8, True): TYPE_I8,
    (16, False): TYPE_U16,
    (16, True): TYPE_I16,
    (32, False): TYPE_U32,
    (32, True): TYPE_I32,
    (64, False): TYPE_U64,
    (64, True): TYPE_I64,
}

# Bit pattern <-> float reinterpretation; the order of the bytes
# in between doesn't matter as long as both sides agree.
_U32 = struct.Struct(">I")
_U64 = struct.Struct(">Q")
_F32 = struct.Struct(">f")
_F64 = struct.Struct(">d")


def check_bounds(data, offset, size):
    if data is None:
        raise PreconditionError("A buffer is required")
    if not isinstance(offset, int):
        raise PreconditionError("Offset must be an integer, got {0!r}".format(offset))
    if offset < 0 or size < 0 or offset + size > len(data):
        raise OutOfBounds(
            "Cannot access {0} bytes at offset {1} of a {2}-byte buffer".format(
                size, offset, len(data)
            )
        )


def _check_range(number, size, signed):
    """
    Make sure ``number`` fits in ``size`` bytes, reporting a problem
    otherwise. The returned number may still be out of range; it is
    truncated to its low bits when split into bytes.
    """
    if not isinstance(number, int):
        raise TypeError("'{}' is not numeric".format(number))
    bits = size * 8
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if low <= number <= high:
        return number
    strictness.problem(
        "Value {0} out of range for {1}-bit {2} integer".format(
            number, bits, "signed" if signed else "unsigned"
        )
    )
    if strictness.should_fix():
        return max(low, min(high, number))
    return number


def _sign_extend(number, size):
    sign_bit = 1 << (size * 8 - 1)
    if number & sign_bit:
        return number - (sign_bit << 1)
    return number


def _combine(data, offset, size, order):
    """
    Read ``size`` bytes as an unsigned number.

    Each byte is masked to 8 bits before being shifted in, so that
    buffers holding signed units (eg. ``array('b')``) decode correctly.
    """
    check_bounds(data, offset, size)
    if ByteOrder.coerce(order) is ByteOrder.BIG_ENDIAN:
        indexes = range(offset, offset + size)
    else:
        indexes = range(offset + size - 1, offset - 1, -1)
    number = 0
    for i in indexes:
        number = (number << 8) | (data[i] & 0xFF)
    return number


def _split(data, offset, size, order, number):
    """Store the low ``size`` bytes of ``number``"""
    check_bounds(data, offset, size)
    big = ByteOrder.coerce(order) is ByteOrder.BIG_ENDIAN
    for i in range(size):
        shift = 8 * (size - 1 - i) if big else 8 * i
        data[offset + i] = (number >> shift) & 0xFF


def get_bool(data, offset):
    # type: (bytes, int) -> bool
    check_bounds(data, offset, 1)
    return data[offset] != 0


def get_int8(data, offset):
    # type: (bytes, int) -> int
    check_bounds(data, offset, 1)
    return _sign_extend(data[offset] & 0xFF, 1)


def get_uint8(data, offset):
    # type: (bytes, int) -> int
    check_bounds(data, offset, 1)
    return data[offset] & 0xFF


def get_int16(data, offset, order):
    return _sign_extend(_combine(data, offset, 2, order), 2)


def get_uint16(data, offset, order):
    return _combine(data, offset, 2, order)


def get_char16(data, offset, order):
    # type: (bytes, int, ByteOrder) -> str
    """
    Read a UTF-16 code unit, as a one-character string. Unpaired
    surrogates are returned as they are.
    """
    return chr(_combine(data, offset, 2, order))


def get_int32(data, offset, order):
    return _sign_extend(_combine(data, offset, 4, order), 4)


def get_uint32(data, offset, order):
    return _combine(data, offset, 4, order)


def get_int64(data, offset, order):
    return _sign_extend(_combine(data, offset, 8, order), 8)


def get_uint64(data, offset, order):
    return _combine(data, offset, 8, order)


def get_float32(data, offset, order):
    # type: (bytes, int, ByteOrder) -> float
    """
    Read an IEEE-754 single precision value.

    The value goes through a Python float (a double), so the payload of
    a signalling NaN comes back quieted: ``7F 80 00 01`` written back
    out gives ``7F C0 00 01``. All other bit patterns survive intact.
    """
    bits = _combine(data, offset, 4, order)
    return _F32.unpack(_U32.pack(bits))[0]


def get_float64(data, offset, order):
    # type: (bytes, int, ByteOrder) -> float
    bits = _combine(data, offset, 8, order)
    return _F64.unpack(_U64.pack(bits))[0]


def put_bool(data, offset, value):
    check_bounds(data, offset, 1)
    data[offset] = 1 if value else 0


def put_int8(data, offset, value):
    check_bounds(data, offset, 1)
    data[offset] = _check_range(value, 1, True) & 0xFF


def put_uint8(data, offset, value):
    check_bounds(data, offset, 1)
    data[offset] = _check_range(value, 1, False) & 0xFF


def put_int16(data, offset, value, order):
    _split(data, offset, 2, order, _check_range(value, 2, True))


def put_uint16(data, offset, value, order):
    _split(data, offset, 2, order, _check_range(value, 2, False))


def put_char16(data, offset, value, order):
    """
    Write a UTF-16 code unit, given either as a one-character string
    or as an integer.
    """
    if isinstance(value, str):
        value = ord(value)
    _split(data, offset, 2, order, _check_range(value, 2, False))


def put_int32(data, offset, value, order):
    _split(data, offset, 4, order, _check_range(value, 4, True))


def put_uint32(data, offset, value, order):
    _split(data, offset, 4, order, _check_range(value, 4, False))


def put_int64(data, offset, value, order):
    _split(data, offset, 8, order, _check_range(value, 8, True))


def put_uint64(data, offset, value, order):
    _split(data, offset, 8, order, _check_range(value, 8, False))


def _float_bits(packer, unpacker, value):
    try:
        packed = packer.pack(value)
    except OverflowError:
        strictness.problem(
            "Value {0} out of range for {1}-bit float".format(value, packer.size * 8)
        )
        packed = packer.pack(math.copysign(math.inf, value))
    return unpacker.unpack(packed)[0]


def put_float32(data, offset, value, order):
    _split(data, offset, 4, order, _float_bits(_F32, _U32, value))


def put_float64(data, offset, value, order):
    _split(data, offset, 8, order, _float_bits(_F64, _U64, value))


# type name: (getter, putter, size in bytes, whether a byte order is needed)
_TYPES = {
    TYPE_BOOL: (get_bool, put_bool, 1, False),
    TYPE_I8: (get_int8, put_int8, 1, False),
    TYPE_U8: (get_uint8, put_uint8, 1, False),
    TYPE_I16: (get_int16, put_int16, 2, True),
    TYPE_U16: (get_uint16, put_uint16, 2, True),
    TYPE_CHAR16: (get_char16, put_char16, 2, True),
    TYPE_I32: (get_int32, put_int32, 4, True),
    TYPE_U32: (get_uint32, put_uint32, 4, True),
    TYPE_I64: (get_int64, put_int64, 8, True),
    TYPE_U64: (get_uint64, put_uint64, 8, True),
    TYPE_F32: (get_float32, put_float32, 4, True),
    TYPE_F64: (get_float64, put_float64, 8, True),
}


def _lookup(type_):
    try:
        return _TYPES[type_]
    except KeyError:
        raise PreconditionError("Unsupported type: {0!r}".format(type_))


def int_type(size, signed=False):
    """
    Get the type name for an integer.

    :param size: the size, in bits, of the number.
        Supported sizes are: 8, 16, 32 and 64 bits.
    :param signed: Whether a signed or unsigned number is required.
        Defaults to ``False`` (unsigned int).
    """
    try:
        return INT_TYPES[size, bool(signed)]
    except KeyError:
        raise PreconditionError("Unsupported integer size: {0!r}".format(size))


def size_of(type_):
    return _lookup(type_)[2]


def is_ordered(type_):
    """Whether values of the given type depend on the byte order"""
    return _lookup(type_)[3]


def get(type_, data, offset, order=None):
    """
    Decode a value of any supported type.

    :param type_: one of the ``TYPE_*`` constants
    :param data: the buffer to read from
    :param offset: position of the value's first byte
    :param order: the byte order; ignored for single-byte types,
        required for all the others.
    """
    getter, _, _, ordered = _lookup(type_)
    if ordered:
        return getter(data, offset, order)
    return getter(data, offset)


def put(type_, data, offset, value, order=None):
    """
    Encode a value of any supported type into a mutable buffer.

    See :py:func:`get` for the parameters.
    """
    _, putter, _, ordered = _lookup(type_)
    if ordered:
        putter(data, offset, value, order)
    else:
        putter(data, offset, value)


def to_bytes(value, type_, order=None):
    # type: (object, str, ByteOrder) -> bytes
    """Encode a value into a new buffer of exactly the type's size"""
    data = bytearray(size_of(type_))
    put(type_, data, 0, value, order)
    return bytes(data)


def from_bytes(data, type_, order=None):
    """Decode a value from the start of ``data``"""
    return get(type_, data, 0, order)
