"""
Author: Ziv P.H
Date: 2025-7-19
Description:
Strict numeric parsing for record fields.

int() and float() accept signs, surrounding whitespace and underscores.
Record fields must not, so the helpers here apply the stricter contract and
report failures with a kind that callers can inspect.
"""

import enum
import logging
import re

logger = logging.getLogger(__name__)

_UNSIGNED_RE = re.compile(r"\+?([0-9]+)")
_DECIMAL_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_SPECIAL_FLOATS = {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan", "+nan", "-nan"}


class IntErrorKind(enum.Enum):
    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    POS_OVERFLOW = "pos_overflow"


class FloatErrorKind(enum.Enum):
    EMPTY = "empty"
    INVALID = "invalid"


_INT_MESSAGES = {
    IntErrorKind.EMPTY: "cannot parse integer from empty string",
    IntErrorKind.INVALID_DIGIT: "invalid digit found in string",
    IntErrorKind.POS_OVERFLOW: "number too large to fit in target type",
}

_FLOAT_MESSAGES = {
    FloatErrorKind.EMPTY: "cannot parse float from empty string",
    FloatErrorKind.INVALID: "invalid float literal",
}


class IntParseError(ValueError):
    """Text could not be read as an unsigned integer."""

    def __init__(self, kind: IntErrorKind):
        super().__init__(_INT_MESSAGES[kind])
        self.kind = kind

    def __reduce__(self):
        return type(self), (self.kind,)

    def __eq__(self, other):
        if not isinstance(other, IntParseError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash((IntParseError, self.kind))


class FloatParseError(ValueError):
    """Text could not be read as a decimal number."""

    def __init__(self, kind: FloatErrorKind):
        super().__init__(_FLOAT_MESSAGES[kind])
        self.kind = kind

    def __reduce__(self):
        return type(self), (self.kind,)

    def __eq__(self, other):
        if not isinstance(other, FloatParseError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self):
        return hash((FloatParseError, self.kind))


def parse_unsigned(text: str, bits: int = 32) -> int:
    """
    Parse *text* as an unsigned integer that fits in *bits* bits.
    Args:
        text (str): Digits with an optional leading '+'.
        bits (int): Width of the target integer type.
    Returns:
        int: The parsed value.
    Raises:
        IntParseError: If the text is empty, holds anything but ASCII digits
            (a leading '-' included), or the value exceeds 2**bits - 1.
    """
    if not text:
        raise IntParseError(IntErrorKind.EMPTY)

    match = _UNSIGNED_RE.fullmatch(text)
    if match is None:
        raise IntParseError(IntErrorKind.INVALID_DIGIT)

    value = int(match.group(1))
    if value > (1 << bits) - 1:
        logger.debug("Value %s overflows a %d-bit unsigned integer", text, bits)
        raise IntParseError(IntErrorKind.POS_OVERFLOW)
    return value


def parse_decimal(text: str) -> float:
    """
    Parse *text* as a decimal number in plain or exponent notation.
    Raises:
        FloatParseError: If the text is empty or not a decimal literal.
    """
    if not text:
        raise FloatParseError(FloatErrorKind.EMPTY)

    if text.lower() in _SPECIAL_FLOATS or _DECIMAL_RE.fullmatch(text):
        return float(text)
    raise FloatParseError(FloatErrorKind.INVALID)
