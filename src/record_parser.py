# src/record_parser.py
"""
Author: Ziv P.H
Date: 2025-07-12
Description:

Turn one raw "<city>,<year>,<temperature>" line into a Climate record.

The public surface is parse_climate(text).
Internally we follow single-responsibility:
check ➜ split ➜ validate city ➜ cast ➜ assemble.
The first failing step wins; each raises its own ParseClimateError subclass.
"""

import logging
from typing import List, Optional

from src.config import ParserSettings
from src.exceptions import (
    BadFieldCountError,
    EmptyInputError,
    MissingCityError,
    TemperatureParseError,
    YearParseError,
)
from src.models import Climate
from src.numeric import FloatParseError, IntParseError, parse_decimal, parse_unsigned

logger = logging.getLogger(__name__)

FIELD_COUNT = 3


def _split_line(line: str, delimiter: str) -> List[str]:
    """
    Split *line* and make sure we got exactly three parts.
    Fields are returned untouched: no trimming, no unescaping.
    Raises:
        BadFieldCountError: If the split did not produce exactly three fields.
    """
    parts = line.split(delimiter)
    if len(parts) != FIELD_COUNT:
        logger.debug("Expected %d fields, got %d: %r", FIELD_COUNT, len(parts), line)
        raise BadFieldCountError()
    return parts


def _cast_year(value: str) -> int:
    try:
        return parse_unsigned(value)
    except IntParseError as e:
        raise YearParseError(e) from e


def _cast_temperature(value: str) -> float:
    try:
        return parse_decimal(value)
    except FloatParseError as e:
        raise TemperatureParseError(e) from e


class ClimateRecordParser:
    """
    Parser for climate lines split on the configured delimiter.
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or ParserSettings()

    def parse(self, text: str) -> Climate:
        """
        Parse a raw line into a Climate record.
        Args:
            text (str): The raw input line, e.g. "Hong Kong,1999,25.7".
        Returns:
            Climate: The parsed record.
        Raises:
            EmptyInputError: If *text* has zero length.
            BadFieldCountError: If *text* does not split into exactly three fields.
            MissingCityError: If the city field is empty.
            YearParseError: If the year is not an unsigned integer.
            TemperatureParseError: If the temperature is not a decimal number.
        """
        if not text:
            raise EmptyInputError()

        city, year, temperature = _split_line(text, self.settings.delimiter)
        if not city:
            raise MissingCityError()

        return Climate(
            city=city,
            year=_cast_year(year),
            temperature=_cast_temperature(temperature),
        )


_default_parser = ClimateRecordParser()


def parse_climate(text: str) -> Climate:
    """Parse *text* with the default comma delimiter."""
    return _default_parser.parse(text)
