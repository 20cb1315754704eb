"""
Boundary validation for engine inputs.

The engine itself is total and never raises; callers run user input
through these helpers first.
"""
import math
from datetime import date

from dateutil.parser import ParserError, parse as parse_date

import config


class InvalidBirthDateError(ValueError):
    """Birth date is unparsable or outside the accepted range"""

    pass


def parse_birth_date(value: str, today: date) -> date:
    """
    Parse and sanity-check a birth date string.

    Rejects: unparsable text, future dates, dates before 1900-01-01,
    and ages above 150 years.
    """
    try:
        birth = parse_date(value).date()
    except (ParserError, OverflowError, TypeError) as e:
        raise InvalidBirthDateError("Please enter a valid date") from e

    if birth > today:
        raise InvalidBirthDateError("Birth date cannot be in the future")
    if birth < date(config.MIN_BIRTH_YEAR, 1, 1):
        raise InvalidBirthDateError(f"Birth date must be after {config.MIN_BIRTH_YEAR}")
    if (today - birth).days / 365.25 > config.MAX_AGE_YEARS:
        raise InvalidBirthDateError("Please enter a valid birth date")
    return birth


def normalize_deal_value(value) -> float:
    """Coerce a deal value to a finite, non-negative float; anything else is 0.0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number
