# ----------------------------------------------------------------------
# Library to read/write binary data in either byte order
# ----------------------------------------------------------------------

from .byteorder import ByteOrder, native_order  # noqa
from .reader import BinaryReader  # noqa
from .writer import BinaryWriter  # noqa
