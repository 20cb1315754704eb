"""
Moon Phase Engine — lunar cycle position from a fixed synodic month.

No ephemeris is consulted: the phase is a single modulo against a known
new moon (2000-01-06 18:14 UTC) followed by an eight-band lookup.
"""
from datetime import datetime, timedelta

from config import NEW_MOON_EPOCH, SYNODIC_MONTH_DAYS
from mystic.clock import Moment, as_utc
from mystic.models import MoonPhase

_SECONDS_PER_DAY = 86400.0


NEW_MOON = MoonPhase(
    phase="New Moon",
    illumination=0,
    emoji="🌑",
    meaning="New beginnings, fresh starts, planting seeds",
    business_guidance="Perfect for starting new projects, launching ventures, "
                      "setting intentions. Initiate deals.",
)

# (upper bound of cycle position, phase); New Moon also owns [0.9375, 1.0)
PHASE_BANDS = (
    (0.0625, NEW_MOON),
    (0.1875, MoonPhase(
        phase="Waxing Crescent",
        illumination=25,
        emoji="🌒",
        meaning="Growth, expansion, building momentum",
        business_guidance="Build on new initiatives. Network actively. Momentum is building.",
    )),
    (0.3125, MoonPhase(
        phase="First Quarter",
        illumination=50,
        emoji="🌓",
        meaning="Action, decision-making, overcoming obstacles",
        business_guidance="Make bold decisions. Push through resistance. "
                          "Take decisive action on deals.",
    )),
    (0.4375, MoonPhase(
        phase="Waxing Gibbous",
        illumination=75,
        emoji="🌔",
        meaning="Refinement, adjustment, preparation",
        business_guidance="Fine-tune strategies. Prepare for launches. "
                          "Refine pitches before major presentations.",
    )),
    (0.5625, MoonPhase(
        phase="Full Moon",
        illumination=100,
        emoji="🌕",
        meaning="Culmination, celebration, peak energy",
        business_guidance="Close major deals. Launch products. Celebrate wins. "
                          "Maximum visibility and energy.",
    )),
    (0.6875, MoonPhase(
        phase="Waning Gibbous",
        illumination=75,
        emoji="🌖",
        meaning="Gratitude, sharing, teaching",
        business_guidance="Share knowledge. Mentor team members. "
                          "Express gratitude to clients and partners.",
    )),
    (0.8125, MoonPhase(
        phase="Last Quarter",
        illumination=50,
        emoji="🌗",
        meaning="Release, forgiveness, letting go",
        business_guidance="Cut underperforming projects. Release what doesn't serve you. "
                          "Make space for new opportunities.",
    )),
    (0.9375, MoonPhase(
        phase="Waning Crescent",
        illumination=25,
        emoji="🌘",
        meaning="Rest, reflection, introspection",
        business_guidance="Review and reflect. Rest before next cycle. "
                          "Strategic planning, not execution.",
    )),
)

PHASE_NAMES = tuple(phase.phase for _, phase in PHASE_BANDS)


def days_since_epoch(moment: Moment) -> float:
    """Fractional days between the reference new moon and ``moment``."""
    return (as_utc(moment) - NEW_MOON_EPOCH).total_seconds() / _SECONDS_PER_DAY


def cycle_position(moment: Moment) -> float:
    """
    Position within the current lunar cycle, in [0, 1).

    0.0 = New Moon, 0.5 = Full Moon. Moments before the epoch wrap forward
    (floor modulo), so the result is never negative.
    """
    return (days_since_epoch(moment) % SYNODIC_MONTH_DAYS) / SYNODIC_MONTH_DAYS


def current_moon_phase(moment: Moment) -> MoonPhase:
    """Phase record for ``moment`` (a date is read as midnight UTC)."""
    position = cycle_position(moment)
    for upper, phase in PHASE_BANDS:
        if position < upper:
            return phase
    return NEW_MOON


def next_full_moon(moment: Moment) -> datetime:
    """
    Next moment the cycle reaches 0.5, strictly after ``moment``.

    Exactly at Full Moon the answer is one synodic month later.
    """
    position = cycle_position(moment)
    if position < 0.5:
        days_until = (0.5 - position) * SYNODIC_MONTH_DAYS
    else:
        days_until = (1 - position + 0.5) * SYNODIC_MONTH_DAYS
    return as_utc(moment) + timedelta(days=days_until)


def next_new_moon(moment: Moment) -> datetime:
    """
    Next moment the cycle wraps to 0.0, strictly after ``moment``.

    Exactly at New Moon the answer is one synodic month later.
    """
    days_until = SYNODIC_MONTH_DAYS - (days_since_epoch(moment) % SYNODIC_MONTH_DAYS)
    return as_utc(moment) + timedelta(days=days_until)
