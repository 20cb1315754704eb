"""
Show the best launch days and upcoming moons from a start date.

Usage:
    python scripts/launch_calendar.py                     # from today
    python scripts/launch_calendar.py --from 2026-03-01 --days 60
"""
import argparse
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dateutil.parser import parse as parse_date

import config
from mystic.business_timing import best_launch_days
from mystic.clock import local_today
from mystic.moon_phase import current_moon_phase, next_full_moon, next_new_moon
from mystic.numerology import universal_day_number


def main(argv=None):
    parser = argparse.ArgumentParser(description="Launch calendar: Universal Day 1/8 on New or Full Moon")
    parser.add_argument("--from", dest="start", default=None, help="Start date (default: today)")
    parser.add_argument("--days", type=int, default=config.LAUNCH_LOOKAHEAD_DAYS,
                        help="Days to look ahead")
    parser.add_argument("--limit", type=int, default=config.MAX_LAUNCH_DAYS,
                        help="Maximum days to list")
    args = parser.parse_args(argv)

    start = parse_date(args.start).date() if args.start else local_today()

    print(f"\nLaunch calendar from {start.isoformat()} ({args.days} days)")
    print(f"  Next Full Moon: {next_full_moon(start).date().isoformat()}")
    print(f"  Next New Moon:  {next_new_moon(start).date().isoformat()}")

    days = best_launch_days(start, lookahead_days=args.days, limit=args.limit)
    if not days:
        print("\n  No ideal launch days in range.")
        return 0

    print("\n  Best launch days:")
    for day in days:
        moon = current_moon_phase(day)
        print(f"    {day.isoformat()}  UD {universal_day_number(day)}  {moon.emoji} {moon.phase}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
