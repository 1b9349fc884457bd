import logging

from endianio import mutf8
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
    check_bounds,
    get,
    int_type,
    size_of,
)
from endianio.byteorder import ByteOrder, ByteOrdered, from_utf16_bom, native_order
from endianio.exceptions import (
    OutOfBounds,
    PreconditionError,
    StreamEmpty,
    TruncatedStream,
    UnsupportedOperation,
)

logger = logging.getLogger(__name__)

SCRATCH_SIZE = 8
SKIP_CHUNK_SIZE = 8192


def _check_count(count, size):
    """
    :raises: :py:exc:`~endianio.exceptions.StreamEmpty` if zero bytes were read
    :raises: :py:exc:`~endianio.exceptions.TruncatedStream` if 0 < bytes < size
        were read
    """
    if count == 0:
        raise StreamEmpty("Zero bytes read from stream")
    if count < size:
        raise TruncatedStream(
            "Trying to read {0} bytes, only got {1}".format(size, count)
        )


class BinaryReader(ByteOrdered):
    """
    Reader for primitive values stored in a given byte order.

    Example usage:

        .. code-block:: python

            from endianio import BinaryReader, ByteOrder

            with open('/tmp/data.bin', 'rb') as fp:
                reader = BinaryReader(fp, ByteOrder.LITTLE_ENDIAN)
                count = reader.read_uint32()
                values = [reader.read_float64() for _ in range(count)]

    Multi-byte values are staged through a small buffer owned by the
    reader, so a reader must not be shared between threads.

    :param stream:
        a file-like object providing ``read()`` and ``readinto()``.
        If you need to parse data you have entirely in-memory,
        just wrap it in a :py:class:`io.BytesIO` object.
    :param order:
        the byte order of the data; defaults to the native one.
    """

    __slots__ = ["stream", "_order", "_scratch"]

    def __init__(self, stream, order=None):
        if stream is None:
            raise PreconditionError("A stream is required")
        self.stream = stream
        self._order = native_order() if order is None else ByteOrder.coerce(order)
        self._scratch = bytearray(SCRATCH_SIZE)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _fill(self, view):
        """Read into ``view`` until it is full or the stream ends"""
        total = 0
        while total < len(view):
            count = self.stream.readinto(view[total:])
            if not count:
                break
            total += count
        return total

    def _read_byte(self):
        data = self.stream.read(1)
        _check_count(len(data), 1)
        return data

    def _read_scratch(self, size):
        with memoryview(self._scratch) as view:
            _check_count(self._fill(view[:size]), size)
        return self._scratch

    def read(self, type_):
        """
        Read a value of any type supported by
        :py:mod:`~endianio.bitconverter`, using the current byte order.

        :param type_: one of the ``TYPE_*`` constants
        :raises: :py:exc:`~endianio.exceptions.EndOfData` if the stream
            ends before the whole value was read
        """
        size = size_of(type_)
        if size == 1:
            return get(type_, self._read_byte(), 0)
        return get(type_, self._read_scratch(size), 0, self._order)

    def read_int(self, size, signed=False):
        """
        Read an integer number.

        :param size: the size, in bits, of the number to be read.
            Supported sizes are: 8, 16, 32 and 64 bits.
        :param signed: Whether a signed or unsigned number is required.
            Defaults to ``False`` (unsigned int).
        """
        return self.read(int_type(size, signed))

    def read_bool(self):
        return self.read(TYPE_BOOL)

    def read_int8(self):
        return self.read(TYPE_I8)

    def read_uint8(self):
        return self.read(TYPE_U8)

    def read_int16(self):
        return self.read(TYPE_I16)

    def read_uint16(self):
        return self.read(TYPE_U16)

    def read_char16(self):
        return self.read(TYPE_CHAR16)

    def read_int32(self):
        return self.read(TYPE_I32)

    def read_uint32(self):
        return self.read(TYPE_U32)

    def read_int64(self):
        return self.read(TYPE_I64)

    def read_uint64(self):
        return self.read(TYPE_U64)

    def read_float32(self):
        return self.read(TYPE_F32)

    def read_float64(self):
        return self.read(TYPE_F64)

    def read_fully(self, buffer, offset=0, length=None):
        """
        Fill ``length`` bytes of ``buffer``, starting at ``offset``.

        :param buffer: a writable buffer, eg. a :py:class:`bytearray`
        :param offset: where to start writing in ``buffer``
        :param length: how many bytes to read; defaults to everything
            from ``offset`` to the end of ``buffer``
        :raises: :py:exc:`~endianio.exceptions.EndOfData` if the stream
            ends before ``length`` bytes were read
        """
        check_bounds(buffer, offset, 0)
        if length is None:
            length = len(buffer) - offset
        check_bounds(buffer, offset, length)
        if length == 0:
            return
        with memoryview(buffer) as view:
            _check_count(self._fill(view[offset : offset + length]), length)

    def read_bytes(self, size):
        """
        Read the given amount of raw bytes.

        :param size: the size to read, in bytes
        :returns: the read data
        """
        if size < 0:
            raise OutOfBounds(
                "Cannot read a negative amount of bytes: {0}".format(size)
            )
        if size == 0:
            return b""
        data = bytearray(size)
        self.read_fully(data)
        return bytes(data)

    def skip_bytes(self, size):
        """
        Skip over and discard up to ``size`` bytes.

        :returns: the number of bytes actually skipped, which is less than
            ``size`` only if the stream ended. Zero if ``size`` is not
            positive.
        """
        if size < 1:
            return 0
        total = 0
        while total < size:
            data = self.stream.read(min(size - total, SKIP_CHUNK_SIZE))
            if not data:
                break
            total += len(data)
        return total

    def read_utf(self):
        """
        Read a string made of an unsigned 16-bit length, in the current
        byte order, followed by that many bytes of modified UTF-8.
        """
        length = self.read_uint16()
        return mutf8.decode(self.read_bytes(length))

    def read_bom(self):
        """
        Read a UTF-16 byte order mark and switch to the byte order it
        indicates.

        :returns: the new byte order
        :raises: :py:exc:`~endianio.exceptions.BadBOM` if the next two
            bytes are not a byte order mark; the current byte order is
            left unchanged.
        """
        order = from_utf16_bom(self._read_scratch(2), 0)
        self.order = order
        return order

    def read_line(self):
        """
        Not implemented, and never will be: binary data has no lines. Wrap
        the stream in :py:class:`io.TextIOWrapper` to read text lines.
        """
        raise UnsupportedOperation(
            "Not implemented. Use io.TextIOWrapper to read lines of text."
        )

    def close(self):
        logger.debug("Closing %r", self.stream)
        self.stream.close()
