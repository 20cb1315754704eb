"""Integration tests for the daily briefing and its cache"""

import json
from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from mystic.briefing import BriefingCache, build_daily_briefing
from mystic.tarot import daily_tarot

EASTERN = ZoneInfo("America/New_York")
NOW = datetime(2000, 1, 21, 9, 0, tzinfo=EASTERN)


def test_build_daily_briefing(profile):
    briefing = build_daily_briefing(profile, NOW)

    assert briefing["userId"] == "user-42"
    assert briefing["date"] == "2000-01-21"
    assert briefing["greeting"] == "Good morning, Ada"
    assert briefing["lifePathNumber"] == 33
    assert briefing["lifePathMeaning"]["title"] == "The Master Teacher"
    assert briefing["sunSign"] == "Gemini"
    assert briefing["zodiacEmoji"] == "♊"
    assert briefing["universalDayNumber"] == 6
    assert briefing["universalDayEnergy"] == "Harmony & Service"
    assert briefing["moonPhase"]["phase"] == "Full Moon"
    assert briefing["nextFullMoon"] == "2000-02-20"
    assert briefing["tarot"] == daily_tarot(date(2000, 1, 21), "user-42").to_payload()
    assert [r["category"] for r in briefing["businessRecommendations"]] == [
        "Deal Closing", "New Ventures", "Strategic Planning",
    ]
    assert briefing["horoscope"] is None
    json.dumps(briefing)


def test_build_daily_briefing_includes_horoscope(profile):
    horoscope = {"description": "Stars align.", "mood": "Bold"}
    assert build_daily_briefing(profile, NOW, horoscope)["horoscope"] == horoscope


def test_cache_builds_once_per_day(profile, tmp_path):
    cache = BriefingCache(path=tmp_path / "briefings.json", use_postgres=False)
    calls = []

    def builder(p, now):
        calls.append(now)
        return build_daily_briefing(p, now)

    first, cached_first = cache.get_or_build(profile, NOW, builder)
    second, cached_second = cache.get_or_build(profile, NOW.replace(hour=18), builder)

    assert cached_first is False
    assert cached_second is True
    assert first == second
    assert len(calls) == 1


def test_cache_survives_restart(profile, tmp_path):
    path = tmp_path / "briefings.json"
    BriefingCache(path=path, use_postgres=False).get_or_build(profile, NOW, build_daily_briefing)

    reloaded = BriefingCache(path=path, use_postgres=False)
    payload = reloaded.get("user-42", date(2000, 1, 21))
    assert payload is not None
    assert payload["tarot"]["name"] == daily_tarot(date(2000, 1, 21), "user-42").name


def test_cache_is_scoped_per_user(profile, tmp_path):
    cache = BriefingCache(path=tmp_path / "briefings.json", use_postgres=False)
    cache.put("user-42", date(2000, 1, 21), {"x": 1})
    assert cache.get("someone-else", date(2000, 1, 21)) is None


def test_prune_drops_old_days(tmp_path):
    cache = BriefingCache(path=tmp_path / "briefings.json", use_postgres=False)
    cache.put("user-42", date(2000, 1, 1), {"x": 1})
    cache.put("user-42", date(2000, 1, 20), {"x": 2})

    removed = cache.prune(date(2000, 1, 21), keep_days=7)

    assert removed == 1
    assert cache.get("user-42", date(2000, 1, 1)) is None
    assert cache.get("user-42", date(2000, 1, 20)) == {"x": 2}


def test_corrupted_cache_file_starts_fresh(tmp_path):
    path = tmp_path / "briefings.json"
    path.write_text("{not json", encoding="utf-8")

    cache = BriefingCache(path=path, use_postgres=False)
    assert cache.get("user-42", date(2000, 1, 21)) is None


def test_postgres_mode_delegates_to_db_layer(profile, monkeypatch):
    pg = pytest.importorskip("db.postgres")
    store = {}
    monkeypatch.setattr(pg, "init_schema", lambda: None)
    monkeypatch.setattr(pg, "pg_load_briefing", lambda uid, day: store.get((uid, day)))
    monkeypatch.setattr(
        pg, "pg_save_briefing", lambda uid, day, payload: store.__setitem__((uid, day), payload)
    )

    cache = BriefingCache(use_postgres=True)
    payload, cached = cache.get_or_build(profile, NOW, build_daily_briefing)

    assert cached is False
    assert store[("user-42", "2000-01-21")] == payload
    assert cache.get_or_build(profile, NOW, build_daily_briefing) == (payload, True)
