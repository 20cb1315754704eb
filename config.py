"""
Central configuration for the VibeWorks Hub mystical engine.
All tunable parameters live here. Loaded from environment where applicable.
"""
import os
from datetime import datetime, timezone

from dotenv import load_dotenv

load_dotenv()

# ── Reference time zone ───────────────────────────────────────────────────────
# "Today" for the dashboard is always evaluated in this zone. The engine itself
# never reads the clock; callers resolve today here and pass it in.
TIMEZONE = os.getenv("VIBEWORKS_TIMEZONE", "America/New_York")

# ── Numerology ────────────────────────────────────────────────────────────────
MASTER_NUMBERS = (11, 22, 33)

# ── Lunar cycle ───────────────────────────────────────────────────────────────
# Known new moon: 2000-01-06 18:14 UTC
NEW_MOON_EPOCH = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)
SYNODIC_MONTH_DAYS = 29.53058867

# ── Deal scoring ──────────────────────────────────────────────────────────────
DEAL_BASE_SCORE = 50
CLOSING_STAGES = ("Negotiation", "Proposal")
LARGE_DEAL_THRESHOLD = 100_000

# ── Business timing ───────────────────────────────────────────────────────────
TIMING_BASE_SCORE = 5
LAUNCH_LOOKAHEAD_DAYS = 30
MAX_LAUNCH_DAYS = 5

# ── Birth date sanity window ──────────────────────────────────────────────────
MIN_BIRTH_YEAR = 1900
MAX_AGE_YEARS = 150

# ── Dashboard user ────────────────────────────────────────────────────────────
# Profile used by main.py for the daily briefing.
USER_ID = os.getenv("USER_ID", "default")
USER_NAME = os.getenv("USER_NAME", "")
BIRTH_DATE = os.getenv("BIRTH_DATE", "")

# ── Daily refresh ─────────────────────────────────────────────────────────────
REFRESH_HOUR = int(os.getenv("REFRESH_HOUR", "2"))
REFRESH_MINUTE = int(os.getenv("REFRESH_MINUTE", "0"))

# ── Horoscope API ─────────────────────────────────────────────────────────────
# Free API, no key required. Failures fall back to a canned horoscope.
HOROSCOPE_API_URL = os.getenv("HOROSCOPE_API_URL", "https://aztro.sameerkumar.website/")
HOROSCOPE_TIMEOUT_SECONDS = float(os.getenv("HOROSCOPE_TIMEOUT_SECONDS", "5"))

# ── Storage ───────────────────────────────────────────────────────────────────
# Briefings are cached per user per day. Postgres when DATABASE_URL is set,
# otherwise a JSON file.
DATABASE_URL = os.getenv("DATABASE_URL")
BRIEFING_CACHE_PATH = os.getenv("BRIEFING_CACHE_PATH", "logs/briefings.json")
BRIEFING_RETENTION_DAYS = int(os.getenv("BRIEFING_RETENTION_DAYS", "30"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
