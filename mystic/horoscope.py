"""
Daily horoscope via the Aztro API (free, no key required).

The API is best-effort: any failure logs and returns a canned horoscope.
"""
from datetime import date

import requests
from loguru import logger

import config


def fallback_horoscope(sun_sign: str, today: date) -> dict:
    """Deterministic horoscope used whenever the API is unavailable."""
    day = today.isoformat()
    return {
        "date_range": day,
        "current_date": day,
        "description": f"Today brings opportunities for {sun_sign} natives. "
                       "Trust your intuition and stay open to new experiences.",
        "compatibility": "All signs",
        "mood": "Optimistic",
        "color": "Blue",
        "lucky_number": "7",
        "lucky_time": "Morning",
    }


def daily_horoscope(sun_sign: str, today: date) -> dict:
    """Fetch today's horoscope for a sun sign; never raises."""
    try:
        resp = requests.post(
            config.HOROSCOPE_API_URL,
            params={"sign": sun_sign.lower(), "day": "today"},
            headers={"Content-Type": "application/json"},
            timeout=config.HOROSCOPE_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Horoscope fetch failed for {sun_sign}: {e}")
        return fallback_horoscope(sun_sign, today)

    if not isinstance(data, dict) or "description" not in data:
        logger.warning(f"Horoscope API returned an unexpected payload for {sun_sign}")
        return fallback_horoscope(sun_sign, today)
    return data
