#!/usr/bin/env python

"""
Read back the file written by ``generate_sample.py``.

Example:

./generate_sample.py little | ./dump_sample.py
"""

import sys

from endianio import BinaryReader


def dump_sample(reader):
    order = reader.read_bom()
    print("byte order: {0}".format(order.name))
    count = reader.read_uint32()
    for _ in range(count):
        index = reader.read_uint16()
        print("{0:4d} {1:.6f}".format(index, reader.read_float64()))
    print(reader.read_utf())


if __name__ == "__main__":
    if len(sys.argv) > 1:
        with open(sys.argv[1], "rb") as fp:
            dump_sample(BinaryReader(fp))

    else:
        dump_sample(BinaryReader(sys.stdin.buffer))
