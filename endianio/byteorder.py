"""
Byte order definitions, plus the UTF-16 byte order mark helpers.
"""

import logging
import sys
from enum import Enum

from endianio.exceptions import BadBOM, OutOfBounds, PreconditionError

logger = logging.getLogger(__name__)

BOM_SIZE = 2
BOM_BIG_ENDIAN = b"\xfe\xff"
BOM_LITTLE_ENDIAN = b"\xff\xfe"


class ByteOrder(Enum):
    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"

    @property
    def struct_prefix(self):
        """The byte order character used by the :py:mod:`struct` module"""
        return ">" if self is ByteOrder.BIG_ENDIAN else "<"

    @classmethod
    def coerce(cls, value):
        """
        Get a :py:class:`ByteOrder` out of any of the usual ways of
        spelling one.

        :param value: a :py:class:`ByteOrder`, a :py:mod:`struct` byte
            order character ('<', '>', '!' or '=') or a
            :py:data:`sys.byteorder` style name ('big' or 'little').
        :raises: :py:exc:`~endianio.exceptions.PreconditionError` for
            ``None`` and anything not naming a byte order.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise PreconditionError("A byte order is required")
        try:
            return _ALIASES[value]
        except (KeyError, TypeError):
            raise PreconditionError("Not a byte order: {0!r}".format(value))


_ALIASES = {
    ">": ByteOrder.BIG_ENDIAN,
    "!": ByteOrder.BIG_ENDIAN,
    "<": ByteOrder.LITTLE_ENDIAN,
    "big": ByteOrder.BIG_ENDIAN,
    "little": ByteOrder.LITTLE_ENDIAN,
}
_ALIASES["="] = _ALIASES[sys.byteorder]


def native_order():
    # type: () -> ByteOrder
    return ByteOrder(sys.byteorder)


def inverse(order):
    # type: (ByteOrder) -> ByteOrder
    order = ByteOrder.coerce(order)
    if order is ByteOrder.BIG_ENDIAN:
        return ByteOrder.LITTLE_ENDIAN
    return ByteOrder.BIG_ENDIAN


def to_utf16_bom(order):
    # type: (ByteOrder) -> bytes
    if ByteOrder.coerce(order) is ByteOrder.BIG_ENDIAN:
        return BOM_BIG_ENDIAN
    return BOM_LITTLE_ENDIAN


def from_utf16_bom(data, offset=0):
    # type: (bytes, int) -> ByteOrder
    """
    Detect a byte order from a UTF-16 byte order mark.

    :param data: the buffer holding the mark
    :param offset: position of the mark's first byte
    :raises: :py:exc:`~endianio.exceptions.OutOfBounds` if the buffer
        doesn't hold two bytes at ``offset``
    :raises: :py:exc:`~endianio.exceptions.BadBOM` if the two bytes are
        not a byte order mark
    """
    if data is None:
        raise PreconditionError("A buffer is required")
    if offset < 0 or offset + BOM_SIZE > len(data):
        raise OutOfBounds(
            "Byte order mark at offset {0} does not fit in {1} bytes".format(
                offset, len(data)
            )
        )
    hi = data[offset] & 0xFF
    lo = data[offset + 1] & 0xFF

    if hi == 0xFE and lo == 0xFF:
        return ByteOrder.BIG_ENDIAN
    if hi == 0xFF and lo == 0xFE:
        return ByteOrder.LITTLE_ENDIAN

    raise BadBOM(
        "Wrong byte order mark: got 0x{0:02X}{1:02X}, expected "
        "0xFEFF or 0xFFFE".format(hi, lo)
    )


class ByteOrdered(object):
    """
    Mixin for objects working with a current, changeable byte order.

    Subclasses keep the order in the ``_order`` slot and get the
    ``order`` property, the queries and :py:meth:`swap_order` for free.
    """

    __slots__ = []

    @property
    def order(self):
        return self._order

    @order.setter
    def order(self, value):
        value = ByteOrder.coerce(value)
        logger.debug("%s: byte order set to %s", self.__class__.__name__, value.name)
        self._order = value

    def is_big_endian(self):
        return self._order is ByteOrder.BIG_ENDIAN

    def is_little_endian(self):
        return self._order is ByteOrder.LITTLE_ENDIAN

    def is_native_order(self):
        return self._order is native_order()

    def swap_order(self):
        """Toggle between big and little endian"""
        self.order = inverse(self._order)
