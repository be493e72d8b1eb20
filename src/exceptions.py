"""
Author: Ziv P.H
Date: 2025-7-12
Description:
Exception classes for climate record parse errors.

Defines one exception per failure kind: empty input, field count mismatch,
missing city, and the year/temperature conversion errors that wrap the
underlying numeric failure.
"""

import enum
from typing import Optional, Type

from src.numeric import FloatParseError, IntParseError


class ClimateErrorKind(enum.Enum):
    EMPTY = "empty"
    BAD_LEN = "bad_len"
    NO_CITY = "no_city"
    PARSE_INT = "parse_int"
    PARSE_FLOAT = "parse_float"


class ParseClimateError(ValueError):
    """Base class for all parse_climate errors – makes catching easy."""

    kind: ClimateErrorKind
    message: str = ""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def cause(self) -> Optional[Exception]:
        """The wrapped lower-level error, if this kind carries one."""
        return None

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.cause == other.cause

    def __hash__(self):
        return hash((type(self), self.cause))


class EmptyInputError(ParseClimateError):
    """Input line had zero length."""
    kind = ClimateErrorKind.EMPTY
    message = "empty input"


class BadFieldCountError(ParseClimateError):
    """Splitting produced anything other than three fields."""
    kind = ClimateErrorKind.BAD_LEN
    message = "incorrect number of fields"


class MissingCityError(ParseClimateError):
    """Three fields were present but the city field was empty."""
    kind = ClimateErrorKind.NO_CITY
    message = "no city name"


class _WrappedParseError(ParseClimateError):
    prefix = ""
    cause_type: Type[ValueError] = ValueError

    def __init__(self, inner: ValueError):
        if not isinstance(inner, self.cause_type):
            raise TypeError(
                f"{type(self).__name__} wraps {self.cause_type.__name__}, "
                f"got {type(inner).__name__}"
            )
        super().__init__(f"{self.prefix}: {inner}")
        self._inner = inner

    def __reduce__(self):
        return type(self), (self._inner,)

    @property
    def cause(self) -> ValueError:
        return self._inner


class YearParseError(_WrappedParseError):
    """Year field could not be parsed as an unsigned integer."""
    kind = ClimateErrorKind.PARSE_INT
    prefix = "error parsing year"
    cause_type = IntParseError

    def __init__(self, inner: IntParseError):
        super().__init__(inner)


class TemperatureParseError(_WrappedParseError):
    """Temperature field could not be parsed as a decimal number."""
    kind = ClimateErrorKind.PARSE_FLOAT
    prefix = "error parsing temperature"
    cause_type = FloatParseError

    def __init__(self, inner: FloatParseError):
        super().__init__(inner)
