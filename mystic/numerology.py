"""
Numerology Engine — Pythagorean system calculations.

Provides:
  - Digital root reduction
  - Life Path Number (from a birth date, master numbers preserved)
  - Universal Day Number (from any calendar date, always 1–9)
  - Life Path meanings, Sun Sign, Universal Day energies, zodiac glyphs
"""
from datetime import date

from config import MASTER_NUMBERS
from mystic.models import LifePathMeaning


def digital_root(n: int) -> int:
    """Reduce any integer to a single digit (1–9) via repeated digit summation."""
    n = abs(n)
    while n > 9:
        n = sum(int(d) for d in str(n))
    return n


def date_digit_sum(d: date) -> int:
    """Sum all individual digits of a date written as month, day, year (no padding)."""
    raw = f"{d.month}{d.day}{d.year}"
    return sum(int(ch) for ch in raw)


def life_path_number(birth_date: date) -> int:
    """
    Compute the Life Path Number from a birth date.

    The raw digit sum is kept when it is a Master Number (11, 22, 33),
    otherwise reduced to 1–9.

    Example — May 28, 1980:
      5+2+8+1+9+8+0 = 33 → Life Path 33 (Master Teacher)
    """
    total = date_digit_sum(birth_date)
    if total in MASTER_NUMBERS:
        return total
    return digital_root(total)


def universal_day_number(d: date) -> int:
    """
    Universal Day Number (UDN) for a given date.
    Same digit sum as life_path_number, but always reduced (no master numbers).

    Example — Feb 23, 2026:
      2+2+3+2+0+2+6 = 17 → 1+7 = 8
    """
    return digital_root(date_digit_sum(d))


# ── Life Path meanings ────────────────────────────────────────────────────────

LIFE_PATH_MEANINGS = {
    1: LifePathMeaning(
        "The Leader",
        "Independent, pioneering, and ambitious. Natural-born leaders who forge their own path.",
        ("Leadership", "Independence", "Innovation", "Determination"),
    ),
    2: LifePathMeaning(
        "The Peacemaker",
        "Diplomatic, intuitive, and cooperative. Natural mediators who seek harmony.",
        ("Diplomacy", "Intuition", "Cooperation", "Sensitivity"),
    ),
    3: LifePathMeaning(
        "The Creative",
        "Expressive, optimistic, and imaginative. Natural communicators and artists.",
        ("Creativity", "Communication", "Optimism", "Social Skills"),
    ),
    4: LifePathMeaning(
        "The Builder",
        "Practical, organized, and dependable. Natural organizers who build strong foundations.",
        ("Organization", "Reliability", "Hard Work", "Discipline"),
    ),
    5: LifePathMeaning(
        "The Freedom Seeker",
        "Adventurous, versatile, and dynamic. Natural explorers who embrace change.",
        ("Adaptability", "Freedom", "Adventure", "Versatility"),
    ),
    6: LifePathMeaning(
        "The Nurturer",
        "Responsible, caring, and protective. Natural healers and caregivers.",
        ("Compassion", "Responsibility", "Service", "Harmony"),
    ),
    7: LifePathMeaning(
        "The Seeker",
        "Analytical, spiritual, and introspective. Natural philosophers and truth-seekers.",
        ("Analysis", "Wisdom", "Spirituality", "Intuition"),
    ),
    8: LifePathMeaning(
        "The Powerhouse",
        "Ambitious, efficient, and authoritative. Natural executives and manifestors.",
        ("Ambition", "Authority", "Material Success", "Efficiency"),
    ),
    9: LifePathMeaning(
        "The Humanitarian",
        "Compassionate, idealistic, and generous. Natural humanitarians and visionaries.",
        ("Compassion", "Idealism", "Wisdom", "Generosity"),
    ),
    11: LifePathMeaning(
        "The Master Intuitive",
        "Highly intuitive, inspirational, and spiritual. Channels higher wisdom to inspire others.",
        ("Intuition", "Inspiration", "Spiritual Insight", "Vision"),
    ),
    22: LifePathMeaning(
        "The Master Builder",
        "Visionary architect of grand plans. Turns dreams into reality on a massive scale.",
        ("Mastery", "Manifestation", "Vision", "Global Impact"),
    ),
    33: LifePathMeaning(
        "The Master Teacher",
        "Highest level of spiritual teaching and healing. Selfless service to humanity "
        "through love and compassion.",
        ("Master Teaching", "Unconditional Love", "Healing", "Global Service"),
    ),
}


def life_path_meaning(number: int) -> LifePathMeaning:
    """Title, description and strengths for a Life Path; unknown numbers map to 1."""
    return LIFE_PATH_MEANINGS.get(number, LIFE_PATH_MEANINGS[1])


# ── Universal Day energies ────────────────────────────────────────────────────

UNIVERSAL_DAY_ENERGIES = {
    1: "New Beginnings & Leadership",
    2: "Partnership & Cooperation",
    3: "Creativity & Expression",
    4: "Foundation & Structure",
    5: "Change & Adventure",
    6: "Harmony & Service",
    7: "Analysis & Strategy",
    8: "Power & Material Success",
    9: "Completion & Wisdom",
}


def universal_day_energy(number: int) -> str:
    return UNIVERSAL_DAY_ENERGIES.get(number, "Unknown")


# ── Sun Sign ──────────────────────────────────────────────────────────────────

# (sign, (start_month, start_day)) in calendar order; each sign runs until
# the next one starts. Capricorn wraps the year end.
_SIGN_STARTS = [
    ("Capricorn",   (1, 1)),
    ("Aquarius",    (1, 20)),
    ("Pisces",      (2, 19)),
    ("Aries",       (3, 21)),
    ("Taurus",      (4, 20)),
    ("Gemini",      (5, 21)),
    ("Cancer",      (6, 21)),
    ("Leo",         (7, 23)),
    ("Virgo",       (8, 23)),
    ("Libra",       (9, 23)),
    ("Scorpio",     (10, 23)),
    ("Sagittarius", (11, 22)),
    ("Capricorn",   (12, 22)),
]


def sun_sign(birth_date: date) -> str:
    """Tropical Sun Sign for a birth date (e.g. May 28 → Gemini)."""
    key = (birth_date.month, birth_date.day)
    sign = "Capricorn"
    for name, start in _SIGN_STARTS:
        if key >= start:
            sign = name
    return sign


ZODIAC_EMOJIS = {
    "aries": "♈",
    "taurus": "♉",
    "gemini": "♊",
    "cancer": "♋",
    "leo": "♌",
    "virgo": "♍",
    "libra": "♎",
    "scorpio": "♏",
    "sagittarius": "♐",
    "capricorn": "♑",
    "aquarius": "♒",
    "pisces": "♓",
}


def zodiac_emoji(sign: str) -> str:
    return ZODIAC_EMOJIS.get(sign.lower(), "⭐")
