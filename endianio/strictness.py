"""
Module for alerting the user when attempting to encode values that don't
fit the width they are being written with.
"""

import warnings
from enum import Enum

from endianio.exceptions import EndianioStrictnessError, EndianioStrictnessWarning


class Strictness(Enum):
    NONE = 0  # No warnings, truncate silently
    WARN = 1  # Truncate, but warn of potential issues
    FIX = 2  # Warn of potential issues, fix *if possible*
    FORBID = 3  # raise exception on potential issues


strict_level = Strictness.FORBID


def set_strictness(level):
    assert type(level) is Strictness
    global strict_level
    strict_level = level


def get_strictness():
    return strict_level


def problem(msg):
    "Warn or raise an exception with the given message."
    if strict_level == Strictness.FORBID:
        raise EndianioStrictnessError(msg)
    elif strict_level in (Strictness.WARN, Strictness.FIX):
        warnings.warn(EndianioStrictnessWarning(msg))


def warn(msg):
    "Show a warning with the given message."
    if strict_level.value > Strictness.NONE.value:
        warnings.warn(EndianioStrictnessWarning(msg))


def should_fix():
    "Helper function for showing code used to fix questionable data."
    return strict_level == Strictness.FIX
