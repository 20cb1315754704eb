"""
PostgreSQL adapter for the daily briefing cache.

Multi-user support:  every read/write is scoped to a user_id.
Activated automatically when DATABASE_URL is set.
Falls back to a JSON file when DATABASE_URL is absent (local development).

Tables
------
  daily_briefings — one JSON briefing per (user_id, briefing_date)
"""
import json
from typing import Optional

import psycopg2

import config


# ── Connection ─────────────────────────────────────────────────────────────────

def get_conn():
    if not config.DATABASE_URL:
        raise RuntimeError("DATABASE_URL is not set — cannot connect to Postgres")
    return psycopg2.connect(config.DATABASE_URL, sslmode="require")


# ── Schema bootstrap ───────────────────────────────────────────────────────────

def init_schema():
    """Create tables if they do not yet exist. Safe to call on every startup."""
    with get_conn() as conn:
        with conn.cursor() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS daily_briefings (
                    user_id         TEXT NOT NULL,
                    briefing_date   DATE NOT NULL,
                    payload         TEXT NOT NULL,
                    created_at      TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                    PRIMARY KEY (user_id, briefing_date)
                )
            """)
        conn.commit()


# ── Briefings ──────────────────────────────────────────────────────────────────

def pg_load_briefing(user_id: str, briefing_date: str) -> Optional[dict]:
    with get_conn() as conn:
        with conn.cursor() as cur:
            cur.execute("""
                SELECT payload FROM daily_briefings
                WHERE user_id = %s AND briefing_date = %s
            """, (user_id, briefing_date))
            row = cur.fetchone()
            return json.loads(row[0]) if row else None


def pg_save_briefing(user_id: str, briefing_date: str, payload: dict):
    with get_conn() as conn:
        with conn.cursor() as cur:
            cur.execute("""
                INSERT INTO daily_briefings (user_id, briefing_date, payload)
                VALUES (%s, %s, %s)
                ON CONFLICT (user_id, briefing_date)
                DO UPDATE SET payload = EXCLUDED.payload, created_at = NOW()
            """, (user_id, briefing_date, json.dumps(payload)))
        conn.commit()


def pg_prune_briefings(keep_days: int):
    """Delete briefings older than ``keep_days`` days."""
    with get_conn() as conn:
        with conn.cursor() as cur:
            cur.execute("""
                DELETE FROM daily_briefings
                WHERE briefing_date < CURRENT_DATE - %s
            """, (keep_days,))
        conn.commit()
