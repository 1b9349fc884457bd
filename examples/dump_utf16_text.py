#!/usr/bin/env python

"""
Print the text of a UTF-16 file, detecting its byte order from the
byte order mark at the start.

Example:

./dump_utf16_text.py notes.txt
"""

import logging
import sys

from endianio import BinaryReader
from endianio.exceptions import StreamEmpty

endianio_logger = logging.getLogger("endianio")
endianio_logger.setLevel(logging.DEBUG)

handler = logging.StreamHandler(sys.stderr)
formatter = logging.Formatter(
    "\033[1;37;40m  %(levelname)s  \033[0m \033[0;32m%(message)s\033[0m"
)
handler.setFormatter(formatter)
endianio_logger.addHandler(handler)


def dump_text(reader):
    reader.read_bom()
    chars = []
    while True:
        try:
            chars.append(reader.read_char16())
        except StreamEmpty:
            break
    # Pairs of surrogates come back as separate code units
    text = "".join(chars).encode("utf-16-be", "surrogatepass")
    print(text.decode("utf-16-be", "replace"))


if __name__ == "__main__":
    if len(sys.argv) > 1:
        with open(sys.argv[1], "rb") as fp:
            dump_text(BinaryReader(fp))

    else:
        dump_text(BinaryReader(sys.stdin.buffer))
