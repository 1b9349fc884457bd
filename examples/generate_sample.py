#!/usr/bin/env python

"""
Write a small sample file: a byte order mark, followed by a count and
that many (index, square root) records.
"""

import math
import sys

from endianio import BinaryWriter, ByteOrder

if __name__ == "__main__":
    order = ByteOrder.coerce(sys.argv[1]) if len(sys.argv) > 1 else None

    writer = BinaryWriter(sys.stdout.buffer, order)
    writer.write_bom()
    writer.write_uint32(10)
    for i in range(10):
        writer.write_uint16(i)
        writer.write_float64(math.sqrt(i))
    writer.write_utf("end of sample")
    writer.flush()

    print("{0} bytes written".format(writer.size()), file=sys.stderr)
