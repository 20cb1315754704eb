"""
Clock helpers.

The engine never reads the wall clock. Callers resolve "now" in the
reference time zone here and pass dates or datetimes into the engine.
"""
from datetime import date, datetime, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo

import config

Moment = Union[date, datetime]


def as_utc(moment: Moment) -> datetime:
    """
    Normalise a date or datetime to an aware UTC datetime.

    Plain dates are taken as midnight UTC; naive datetimes are assumed UTC.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is None:
            return moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(timezone.utc)
    return datetime(moment.year, moment.month, moment.day, tzinfo=timezone.utc)


def calendar_date(moment: Moment) -> date:
    """The calendar date of a moment, as written in its own zone."""
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def local_now(tz_name: Optional[str] = None) -> datetime:
    return datetime.now(ZoneInfo(tz_name or config.TIMEZONE))


def local_today(tz_name: Optional[str] = None) -> date:
    return local_now(tz_name).date()


# ── Greeting ──────────────────────────────────────────────────────────────────

def greeting(now: datetime, first_name: Optional[str] = None) -> str:
    """Time-of-day greeting, e.g. 'Good morning, Ada'."""
    hour = now.hour
    if 5 <= hour < 12:
        text = "Good morning"
    elif 12 <= hour < 17:
        text = "Good afternoon"
    elif 17 <= hour < 22:
        text = "Good evening"
    else:
        text = "Working late"
    return f"{text}, {first_name}" if first_name else text


def greeting_subtitle(now: datetime) -> str:
    hour = now.hour
    if 5 <= hour < 12:
        return "Ready to crush today?"
    elif 12 <= hour < 17:
        return "Keep the momentum going."
    elif 17 <= hour < 22:
        return "Wrapping up the day strong."
    return "Burning the midnight oil."
