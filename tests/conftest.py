"""Pytest fixtures for testing"""

from datetime import date

import pytest

from mystic.models import UserProfile

# Reference dates in the first lunar cycle after the 2000-01-06 new moon,
# each read as midnight UTC.
NEW_MOON_DAY = date(2000, 1, 7)
WAXING_CRESCENT_DAY = date(2000, 1, 10)
FIRST_QUARTER_DAY = date(2000, 1, 14)
WAXING_GIBBOUS_DAY = date(2000, 1, 18)
FULL_MOON_DAY = date(2000, 1, 21)
WANING_GIBBOUS_DAY = date(2000, 1, 25)
LAST_QUARTER_DAY = date(2000, 1, 28)
WANING_CRESCENT_DAY = date(2000, 2, 1)


@pytest.fixture
def profile() -> UserProfile:
    """Dashboard user born 1980-05-28 (Life Path 33, Gemini)"""
    return UserProfile(user_id="user-42", name="Ada Lovelace", birth_date=date(1980, 5, 28))
