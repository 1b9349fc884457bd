import io


class EndianioException(Exception):
    """Base for all the endianio exceptions"""

    pass


class EndianioWarning(Warning):
    """Base for all the endianio warnings"""

    pass


class PreconditionError(EndianioException, AssertionError):
    """
    Indicate a programming error: a required argument was missing or
    had the wrong type. These are never raised because of the data being
    processed.
    """

    pass


class OutOfBounds(PreconditionError, IndexError):
    """Indicate an offset/width pair not fitting in the given buffer"""

    pass


class EndianioLoadError(EndianioException):
    """Indicate an error while reading binary data"""

    pass


class EndianioDumpError(EndianioException):
    """Indicate an error while writing binary data"""

    pass


class EndianioStrictnessError(EndianioException):
    """Indicate a value that cannot be represented exactly"""


class EndianioStrictnessWarning(EndianioWarning):
    """Indicate a value that cannot be represented exactly"""


class EndOfData(EndianioLoadError, EOFError):
    """
    Exception indicating that the stream ended before all the bytes
    needed by a fixed-width read were available.
    """

    pass


class StreamEmpty(EndOfData):  # End of stream
    """
    Exception indicating that a fixed-width read found the stream
    already exhausted: not a single byte of the value was available.
    Usually it just means there is nothing more to read.
    """

    pass


class TruncatedStream(EndOfData):
    """
    Exception indicating that a fixed-width read got some, but not all,
    of the bytes it needed before the stream ended; the data was most
    likely cut short.
    """

    pass


class MalformedInput(EndianioLoadError, ValueError):
    """
    Exception used to indicate that the bytes were read successfully
    but do not form a valid encoding.
    """

    pass


class BadBOM(MalformedInput):
    """
    Exception used to indicate that two bytes expected to be a UTF-16
    byte order mark were neither ``FE FF`` nor ``FF FE``.
    """

    pass


class EncodingError(EndianioDumpError, ValueError):
    """Indicate a value that cannot be encoded in the requested format"""

    pass


class UnsupportedOperation(EndianioException, io.UnsupportedOperation):
    """
    Exception raised by operations which are permanently left
    unimplemented (eg. reading lines of text from a binary reader).
    """

    pass
