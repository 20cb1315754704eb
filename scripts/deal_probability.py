"""
Score a deal's closing probability from the command line.

Usage:
    python scripts/deal_probability.py --value 25000 --stage Negotiation --birth 1980-05-28
    python scripts/deal_probability.py --value 250000 --stage Lead --birth 1975-03-04 --date 2026-03-03

Prints the DealProbability payload as JSON.
"""
import argparse
import json
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dateutil.parser import parse as parse_date

from mystic.business_timing import deal_probability
from mystic.clock import local_now
from mystic.numerology import life_path_number, universal_day_number
from mystic.validation import InvalidBirthDateError, normalize_deal_value, parse_birth_date


def main(argv=None):
    parser = argparse.ArgumentParser(description="Mystical deal closing probability")
    parser.add_argument("--value", default="0", help="Deal value (non-numeric or negative → 0)")
    parser.add_argument("--stage", default="Discovery", help="Deal stage, e.g. Negotiation")
    parser.add_argument("--birth", required=True, help="Owner's birth date, e.g. 1980-05-28")
    parser.add_argument("--date", default=None, help="Score as of this date (default: today)")
    args = parser.parse_args(argv)

    now = local_now()
    if args.date:
        now = parse_date(args.date)

    try:
        birth = parse_birth_date(args.birth, now.date())
    except InvalidBirthDateError as e:
        print(f"Invalid --birth: {e}", file=sys.stderr)
        return 2

    result = deal_probability(
        normalize_deal_value(args.value),
        args.stage,
        life_path_number(birth),
        universal_day_number(now.date()),
        now,
    )
    print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
