"""Unit tests for numerology calculations"""

from datetime import date, timedelta

import pytest

from mystic.numerology import (
    date_digit_sum,
    digital_root,
    life_path_meaning,
    life_path_number,
    sun_sign,
    universal_day_energy,
    universal_day_number,
    zodiac_emoji,
)


def test_digital_root_reduces_to_single_digit():
    assert digital_root(48) == 3
    assert digital_root(9) == 9
    assert digital_root(99999) == 9


def test_date_digit_sum_uses_month_day_year():
    """5 + 2+8 + 1+9+8+0 = 33"""
    assert date_digit_sum(date(1980, 5, 28)) == 33


def test_life_path_preserves_master_33():
    assert life_path_number(date(1980, 5, 28)) == 33


@pytest.mark.parametrize(
    "birth, expected",
    [
        (date(2000, 1, 8), 11),   # 1+8+2 = 11
        (date(1960, 3, 3), 22),   # 3+3+1+9+6+0 = 22
        (date(2009, 1, 3), 6),    # 15 → 6
        (date(1999, 9, 29), 3),   # 48 → 12 → 3
    ],
)
def test_life_path_number(birth, expected):
    assert life_path_number(birth) == expected


def test_universal_day_never_returns_master_numbers():
    """Digit sums of 11, 22 and 33 are reduced for the Universal Day"""
    assert universal_day_number(date(2000, 1, 8)) == 2
    assert universal_day_number(date(1960, 3, 3)) == 4
    assert universal_day_number(date(1980, 5, 28)) == 6


def test_universal_day_known_value():
    """Feb 23, 2026: 2+2+3+2+0+2+6 = 17 → 8"""
    assert universal_day_number(date(2026, 2, 23)) == 8


def test_universal_day_always_in_range_for_a_full_year():
    day = date(2024, 1, 1)
    while day.year == 2024:
        assert 1 <= universal_day_number(day) <= 9
        day += timedelta(days=1)


def test_life_path_meaning_lookup_and_fallback():
    assert life_path_meaning(33).title == "The Master Teacher"
    assert life_path_meaning(8).strengths[0] == "Ambition"
    assert life_path_meaning(42) == life_path_meaning(1)


@pytest.mark.parametrize(
    "birth, sign",
    [
        (date(1980, 5, 28), "Gemini"),
        (date(1990, 3, 20), "Pisces"),
        (date(1990, 3, 21), "Aries"),
        (date(1990, 1, 19), "Capricorn"),
        (date(1990, 1, 20), "Aquarius"),
        (date(1990, 12, 21), "Sagittarius"),
        (date(1990, 12, 22), "Capricorn"),
        (date(1990, 10, 23), "Scorpio"),
    ],
)
def test_sun_sign_boundaries(birth, sign):
    assert sun_sign(birth) == sign


def test_universal_day_energy():
    assert universal_day_energy(8) == "Power & Material Success"
    assert universal_day_energy(11) == "Unknown"


def test_zodiac_emoji_is_case_insensitive():
    assert zodiac_emoji("Gemini") == "♊"
    assert zodiac_emoji("PISCES") == "♓"
    assert zodiac_emoji("Ophiuchus") == "⭐"
