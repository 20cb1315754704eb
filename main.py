"""
VibeWorks Hub — Daily Mystical Briefing
Entry point. Loads the dashboard profile, prints today's briefing, and
refreshes it every night on a schedule.

Run:
    python main.py
"""
import os
import sys

from apscheduler.schedulers.blocking import BlockingScheduler
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

import config
from mystic.briefing import BriefingCache, build_daily_briefing
from mystic.clock import local_now
from mystic.horoscope import daily_horoscope
from mystic.models import UserProfile
from mystic.validation import InvalidBirthDateError, parse_birth_date

console = Console()


# ── Load profile ──────────────────────────────────────────────────────────────

def load_profile() -> UserProfile:
    today = local_now().date()
    try:
        birth = parse_birth_date(config.BIRTH_DATE, today)
    except InvalidBirthDateError as e:
        logger.error(f"BIRTH_DATE={config.BIRTH_DATE!r} rejected: {e}")
        sys.exit(1)
    return UserProfile(user_id=config.USER_ID, name=config.USER_NAME, birth_date=birth)


def build_with_horoscope(profile: UserProfile, now) -> dict:
    horoscope = daily_horoscope(profile.sun_sign, now.date())
    return build_daily_briefing(profile, now, horoscope=horoscope)


# ── Console display ───────────────────────────────────────────────────────────

def score_color(score: int) -> str:
    if score >= 8:
        return "green"
    elif score >= 6:
        return "cyan"
    return "yellow"


def display_briefing(briefing: dict, cached: bool):
    moon = briefing["moonPhase"]
    tarot = briefing["tarot"]
    meaning = briefing["lifePathMeaning"]

    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Life Path",  f"{briefing['lifePathNumber']} — {meaning['title']}")
    table.add_row("Sun Sign",   f"{briefing['zodiacEmoji']} {briefing['sunSign']}")
    table.add_row("Universal Day",
                  f"{briefing['universalDayNumber']} ({briefing['universalDayEnergy']})")
    table.add_row("Moon",       f"{moon['emoji']} {moon['phase']} ({moon['illumination']}%)")
    table.add_row("Next Full",  briefing["nextFullMoon"])
    table.add_row("Next New",   briefing["nextNewMoon"])
    card = f"{tarot['emoji']} {tarot['name']}"
    if tarot["reversed"]:
        card += " [magenta](reversed)[/magenta]"
    table.add_row("Tarot",      card)
    table.add_row("",           tarot["businessMeaning"])
    table.add_row("", "")

    for rec in briefing["businessRecommendations"]:
        color = score_color(rec["score"])
        table.add_row(rec["category"],
                      f"[{color}]{rec['score']}/10[/{color}]  {rec['recommendation']}")

    horoscope = briefing.get("horoscope")
    if horoscope:
        table.add_row("", "")
        table.add_row("Horoscope", horoscope.get("description", ""))
        table.add_row("Mood",      horoscope.get("mood", ""))

    source = "cached" if cached else "fresh"
    panel = Panel(
        table,
        title=f"[bold]{briefing['greeting']}[/bold] — {briefing['subtitle']}",
        subtitle=f"[dim]{briefing['date']} · {source}[/dim]",
        border_style="cyan",
        expand=False,
    )
    console.print(panel)


# ── Refresh cycle ─────────────────────────────────────────────────────────────

profile: UserProfile = None
cache: BriefingCache = None


def refresh_cycle():
    """Build (or load) today's briefing. Called on start and by the scheduler."""
    now = local_now()
    logger.info(f"=== Briefing refresh — {now.isoformat()} ===")

    briefing, cached = cache.get_or_build(profile, now, build_with_horoscope)
    display_briefing(briefing, cached)

    removed = cache.prune(now.date())
    if removed:
        logger.info(f"Pruned {removed} old briefing(s)")

    logger.info("=== Refresh complete ===\n")


# ── Entry point ───────────────────────────────────────────────────────────────

def main():
    global profile, cache

    console.print(Panel.fit(
        "[bold cyan]VibeWorks Hub — Mystical Briefing[/bold cyan]\n"
        f"User: [yellow]{config.USER_ID}[/yellow]  |  "
        f"Zone: [yellow]{config.TIMEZONE}[/yellow]  |  "
        f"Refresh: [yellow]{config.REFRESH_HOUR:02d}:{config.REFRESH_MINUTE:02d}[/yellow]  |  "
        f"Store: [yellow]{'POSTGRES' if config.DATABASE_URL else 'JSON'}[/yellow]",
        border_style="cyan",
    ))

    profile = load_profile()
    cache = BriefingCache()
    logger.info(f"Loaded profile {profile.user_id} (Life Path {profile.life_path_number})")

    # Run immediately on start
    refresh_cycle()

    scheduler = BlockingScheduler(timezone=config.TIMEZONE)
    scheduler.add_job(
        refresh_cycle,
        trigger="cron",
        hour=config.REFRESH_HOUR,
        minute=config.REFRESH_MINUTE,
        id="daily_briefing_refresh",
        max_instances=1,
        coalesce=True,
    )

    logger.info(
        f"Scheduler started — refresh daily at "
        f"{config.REFRESH_HOUR:02d}:{config.REFRESH_MINUTE:02d} {config.TIMEZONE}."
    )
    logger.info("Press Ctrl+C to stop.")

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Briefing service stopped by user.")


if __name__ == "__main__":
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=config.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    os.makedirs("logs", exist_ok=True)
    logger.add(
        "logs/vibeworks_{time:YYYY-MM-DD}.log",
        rotation="1 day",
        retention="30 days",
        level="DEBUG",
    )

    main()
