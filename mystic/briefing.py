"""
Daily Briefing — the dashboard's per-user snapshot of the day.

Composes greeting, numerology, moon phase, tarot and business timing into
one JSON-ready dict, and caches it per (user, day) so every page load on a
given day shows the same briefing.

Persistence: Postgres when DATABASE_URL is set, otherwise a JSON file in
logs/ (same layout as the Postgres table: user_id → date → payload).
"""
import json
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Callable, Optional, Tuple

from loguru import logger

import config
from mystic.business_timing import today_business_recommendations
from mystic.clock import greeting, greeting_subtitle
from mystic.models import UserProfile
from mystic.moon_phase import current_moon_phase, next_full_moon, next_new_moon
from mystic.numerology import (
    life_path_meaning,
    universal_day_energy,
    universal_day_number,
    zodiac_emoji,
)
from mystic.tarot import daily_tarot


def build_daily_briefing(
    profile: UserProfile,
    now: datetime,
    horoscope: Optional[dict] = None,
) -> dict:
    """
    Assemble the briefing for ``profile`` at ``now``.

    ``now`` should already be in the reference time zone: its calendar date
    drives the Universal Day and tarot draw, its instant drives the moon.
    """
    today = now.date()
    life_path = profile.life_path_number
    udn = universal_day_number(today)
    sign = profile.sun_sign

    briefing = {
        "userId": profile.user_id,
        "date": today.isoformat(),
        "greeting": greeting(now, profile.first_name or None),
        "subtitle": greeting_subtitle(now),
        "lifePathNumber": life_path,
        "lifePathMeaning": life_path_meaning(life_path).to_payload(),
        "sunSign": sign,
        "zodiacEmoji": zodiac_emoji(sign),
        "universalDayNumber": udn,
        "universalDayEnergy": universal_day_energy(udn),
        "moonPhase": current_moon_phase(now).to_payload(),
        "nextFullMoon": next_full_moon(now).date().isoformat(),
        "nextNewMoon": next_new_moon(now).date().isoformat(),
        "tarot": daily_tarot(today, profile.user_id).to_payload(),
        "businessRecommendations": [
            rec.to_payload()
            for rec in today_business_recommendations(life_path, udn, now, profile.user_id)
        ],
        "horoscope": horoscope,
    }
    logger.debug(f"Built briefing for {profile.user_id} on {today}")
    return briefing


class BriefingCache:
    """
    Per-user, per-day store of briefing payloads.

    With ``use_postgres`` the rows live in db.postgres; otherwise in the JSON
    file at ``path``.
    """

    def __init__(self, path: Optional[Path] = None, use_postgres: Optional[bool] = None):
        self._path = Path(path or config.BRIEFING_CACHE_PATH)
        self._use_pg = bool(config.DATABASE_URL) if use_postgres is None else use_postgres
        self._entries: dict = {}
        if self._use_pg:
            from db.postgres import init_schema
            init_schema()
            logger.info("PostgreSQL briefing cache enabled.")
        else:
            self.load()

    # ── Queries ───────────────────────────────────────────────────────────────

    def get(self, user_id: str, day: date) -> Optional[dict]:
        if self._use_pg:
            from db.postgres import pg_load_briefing
            return pg_load_briefing(user_id, day.isoformat())
        return self._entries.get(user_id, {}).get(day.isoformat())

    # ── Mutation ──────────────────────────────────────────────────────────────

    def put(self, user_id: str, day: date, payload: dict):
        if self._use_pg:
            from db.postgres import pg_save_briefing
            pg_save_briefing(user_id, day.isoformat(), payload)
            return
        self._entries.setdefault(user_id, {})[day.isoformat()] = payload
        self.save()

    def get_or_build(
        self,
        profile: UserProfile,
        now: datetime,
        builder: Callable[[UserProfile, datetime], dict],
    ) -> Tuple[dict, bool]:
        """Return (payload, cached). Builds and stores on a miss."""
        today = now.date()
        cached = self.get(profile.user_id, today)
        if cached is not None:
            return cached, True
        payload = builder(profile, now)
        self.put(profile.user_id, today, payload)
        return payload, False

    def prune(self, today: date, keep_days: int = config.BRIEFING_RETENTION_DAYS) -> int:
        """Drop briefings older than ``keep_days``. Returns rows removed (JSON mode only)."""
        if self._use_pg:
            from db.postgres import pg_prune_briefings
            pg_prune_briefings(keep_days)
            return 0
        cutoff = (today - timedelta(days=keep_days)).isoformat()
        removed = 0
        for days in self._entries.values():
            for key in [k for k in days if k < cutoff]:
                del days[key]
                removed += 1
        if removed:
            self.save()
        return removed

    # ── Persistence ───────────────────────────────────────────────────────────

    def save(self):
        """Write the cache to disk so it survives restarts."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(self._entries, f, indent=2, ensure_ascii=False)

    def load(self):
        """Load the cache from disk if the file exists."""
        if not self._path.exists():
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Briefing cache {self._path} unreadable, starting fresh: {e}")
            return
        if isinstance(data, dict):
            self._entries = data
