import logging

from endianio import mutf8
from endianio import strictness as strictness
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
    int_type,
    put,
    size_of,
    to_bytes,
)
from endianio.byteorder import ByteOrder, ByteOrdered, native_order, to_utf16_bom
from endianio.exceptions import PreconditionError

logger = logging.getLogger(__name__)

SCRATCH_SIZE = 8


class BinaryWriter(ByteOrdered):
    """
    Writer for primitive values, in a given byte order.

    Keeps count of the bytes written through it; see :py:meth:`size`.

    :param stream:
        a file-like object to which to write the data.
    :param order:
        the byte order to use; defaults to the native one.
    """

    __slots__ = ["stream", "_order", "_scratch", "_written"]

    #: The written bytes counter stops here instead of growing further
    MAX_SIZE = 2**31 - 1

    def __init__(self, stream, order=None):
        if stream is None:
            raise PreconditionError("A stream is required")
        self.stream = stream
        self._order = native_order() if order is None else ByteOrder.coerce(order)
        self._scratch = bytearray(SCRATCH_SIZE)
        self._written = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _inc_written(self, count):
        self._written = min(self._written + count, self.MAX_SIZE)

    def size(self):
        """Number of bytes written so far, capped at :py:attr:`MAX_SIZE`"""
        return self._written

    def write(self, type_, value):
        """
        Write a value of any type supported by
        :py:mod:`~endianio.bitconverter`, using the current byte order.

        :param type_: one of the ``TYPE_*`` constants
        :param value: the value to write
        """
        size = size_of(type_)
        if size == 1:
            self.stream.write(to_bytes(value, type_))
        else:
            put(type_, self._scratch, 0, value, self._order)
            self.stream.write(self._scratch[:size])
        self._inc_written(size)

    def write_int(self, number, size, signed=False):
        """
        Write an integer number.

        :param number: the integer number to write
        :param size: the size, in bits, of the number to be written.
            Supported sizes are: 8, 16, 32 and 64 bits.
        :param signed: Whether a signed or unsigned number is required.
            Defaults to ``False`` (unsigned int).
        """
        self.write(int_type(size, signed), number)

    def write_bool(self, value):
        self.write(TYPE_BOOL, value)

    def write_int8(self, value):
        self.write(TYPE_I8, value)

    def write_uint8(self, value):
        self.write(TYPE_U8, value)

    def write_int16(self, value):
        self.write(TYPE_I16, value)

    def write_uint16(self, value):
        self.write(TYPE_U16, value)

    def write_char16(self, value):
        self.write(TYPE_CHAR16, value)

    def write_int32(self, value):
        self.write(TYPE_I32, value)

    def write_uint32(self, value):
        self.write(TYPE_U32, value)

    def write_int64(self, value):
        self.write(TYPE_I64, value)

    def write_uint64(self, value):
        self.write(TYPE_U64, value)

    def write_float32(self, value):
        self.write(TYPE_F32, value)

    def write_float64(self, value):
        self.write(TYPE_F64, value)

    def write_bytes(self, data):
        """Write the given raw bytes"""
        self.stream.write(data)
        self._inc_written(len(data))

    def write_narrow(self, text):
        """
        Write the low eight bits of every UTF-16 code unit of ``text``,
        one byte per unit.
        """
        units = mutf8.utf16_units(text)
        if any(unit > 0xFF for unit in units):
            strictness.warn(
                "Dropping the high-order byte of characters in {0!r}".format(text)
            )
        self.write_bytes(bytes(unit & 0xFF for unit in units))

    def write_chars(self, text):
        """Write every UTF-16 code unit of ``text`` as a 16-bit value"""
        for unit in mutf8.utf16_units(text):
            self.write(TYPE_CHAR16, unit)

    def write_utf(self, text):
        """
        Write an unsigned 16-bit length, in the current byte order,
        followed by the modified UTF-8 encoding of ``text``.

        :raises: :py:exc:`~endianio.exceptions.EncodingError` if the
            encoded string is longer than 65535 bytes; nothing is written.
        """
        data = mutf8.encode(text)
        self.write_uint16(len(data))
        self.write_bytes(data)

    def write_bom(self):
        """Write the UTF-16 byte order mark for the current byte order"""
        self.write_bytes(to_utf16_bom(self._order))

    def flush(self):
        self.stream.flush()

    def close(self):
        logger.debug("Closing %r after %d bytes", self.stream, self._written)
        try:
            self.flush()
        finally:
            self.stream.close()
