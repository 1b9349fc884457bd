"""
Modified UTF-8, the text encoding used by length-prefixed strings.

It differs from standard UTF-8 in two ways:

- U+0000 is encoded as the two bytes ``C0 80``, so the encoded form
  never contains a zero byte;
- characters outside the Basic Multilingual Plane are encoded as a
  surrogate pair, each half taking three bytes, instead of one
  four-byte sequence.

The length prefix itself is written by the stream adapters, since its
byte order is theirs.
"""

from endianio.exceptions import EncodingError, MalformedInput

MAX_ENCODED_LENGTH = 0xFFFF


def utf16_units(text):
    """Split a string in its UTF-16 code units"""
    raw = text.encode("utf-16-be", "surrogatepass")
    return [(raw[i] << 8) | raw[i + 1] for i in range(0, len(raw), 2)]


def _from_utf16_units(units):
    raw = bytearray()
    for unit in units:
        raw.append(unit >> 8)
        raw.append(unit & 0xFF)
    # Join surrogate pairs back, keeping unpaired halves as they are
    return raw.decode("utf-16-be", "surrogatepass")


def encoded_length(text):
    # type: (str) -> int
    length = 0
    for unit in utf16_units(text):
        if 0x0001 <= unit <= 0x007F:
            length += 1
        elif unit <= 0x07FF:
            length += 2
        else:
            length += 3
    return length


def encode(text):
    # type: (str) -> bytes
    """
    Encode a string to modified UTF-8.

    :raises: :py:exc:`~endianio.exceptions.EncodingError` if the result
        would be longer than what a 16-bit length prefix can describe.
    """
    out = bytearray()
    for unit in utf16_units(text):
        if 0x0001 <= unit <= 0x007F:
            out.append(unit)
        elif unit <= 0x07FF:
            out.append(0xC0 | (unit >> 6))
            out.append(0x80 | (unit & 0x3F))
        else:
            out.append(0xE0 | (unit >> 12))
            out.append(0x80 | ((unit >> 6) & 0x3F))
            out.append(0x80 | (unit & 0x3F))
    if len(out) > MAX_ENCODED_LENGTH:
        raise EncodingError(
            "Encoded string too long: {0} bytes, maximum is {1}".format(
                len(out), MAX_ENCODED_LENGTH
            )
        )
    return bytes(out)


def decode(data):
    # type: (bytes) -> str
    """
    Decode a modified UTF-8 string.

    :raises: :py:exc:`~endianio.exceptions.MalformedInput` on truncated
        sequences, bad continuation bytes and invalid lead bytes.
    """
    units = []
    pos = 0
    end = len(data)
    while pos < end:
        lead = data[pos] & 0xFF
        if lead < 0x80:
            units.append(lead)
            pos += 1
            continue

        if lead >> 5 == 0b110:
            count = 2
        elif lead >> 4 == 0b1110:
            count = 3
        else:
            raise MalformedInput(
                "Invalid lead byte 0x{0:02X} at position {1}".format(lead, pos)
            )
        if pos + count > end:
            raise MalformedInput(
                "Partial character at end of input (position {0})".format(pos)
            )

        unit = lead & (0x1F if count == 2 else 0x0F)
        for i in range(pos + 1, pos + count):
            cont = data[i] & 0xFF
            if cont >> 6 != 0b10:
                raise MalformedInput(
                    "Invalid continuation byte 0x{0:02X} at position {1}".format(
                        cont, i
                    )
                )
            unit = (unit << 6) | (cont & 0x3F)
        units.append(unit)
        pos += count

    return _from_utf16_units(units)
