"""
Business Timing — the scoring layer on top of numerology, moon and tarot.

Combines:
  1. Life Path and Universal Day numbers
  2. Moon phase for the moment being scored
  3. Deal stage and size

Outputs:
  - Deal closing probability (0–100) with confidence, factors, recommendation
  - Three category recommendations (0–10): Deal Closing, New Ventures,
    Strategic Planning
  - Best launch days and team compatibility helpers
"""
from collections import Counter
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from loguru import logger

import config
from mystic.clock import Moment
from mystic.models import BusinessRecommendation, DealProbability, TeamCompatibility
from mystic.moon_phase import current_moon_phase
from mystic.numerology import universal_day_number
from mystic.tarot import user_seed


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


# ── Deal probability ──────────────────────────────────────────────────────────

def _confidence(factor_count: int) -> str:
    if factor_count >= 5:
        return "High"
    elif factor_count >= 3:
        return "Medium"
    return "Low"


def _deal_recommendation(probability: int) -> str:
    if probability >= 75:
        return "🔥 HIGHLY FAVORABLE - Push for close today"
    elif probability >= 60:
        return "✅ FAVORABLE - Good timing to advance"
    elif probability >= 40:
        return "⚠️ MIXED - Proceed with caution"
    return "❌ CHALLENGING - Consider delaying or restructuring"


def deal_probability(
    deal_value: float,
    deal_stage: str,
    life_path: int,
    universal_day: int,
    moment: Moment,
) -> DealProbability:
    """
    Score a deal's closing odds for ``moment``.

    Starts at 50 and applies each rule in order; every rule that fires
    appends one factor string:

      Life Path 8/22        +15   (else Life Path 1/11  +10)
      Universal Day 8       +20   | Day 1  +10 | Day 9  −10
      Full Moon             +15   | New Moon +10 | Waning −5
      Negotiation/Proposal  +5
      Value > 100,000       −5

    The total is clamped to [0, 100]. Inputs are not validated here; see
    mystic.validation.normalize_deal_value for the caller-side guard.
    """
    score = config.DEAL_BASE_SCORE
    factors: List[str] = []

    if life_path in (8, 22):
        score += 15
        factors.append(f"Life Path {life_path} (Power/Manifestation) - Highly favorable")
    elif life_path in (1, 11):
        score += 10
        factors.append(f"Life Path {life_path} (Leadership) - Favorable")

    if universal_day == 8:
        score += 20
        factors.append("Universal Day 8 (Material Success) - Perfect for deals")
    elif universal_day == 1:
        score += 10
        factors.append("Universal Day 1 (New Beginnings) - Good for initiating")
    elif universal_day == 9:
        score -= 10
        factors.append("Universal Day 9 (Completion) - Better to finish existing deals")

    moon = current_moon_phase(moment)
    if moon.phase == "Full Moon":
        score += 15
        factors.append("Full Moon - Peak energy for closing")
    elif moon.phase == "New Moon":
        score += 10
        factors.append("New Moon - Great for starting negotiations")
    elif "Waning" in moon.phase:
        score -= 5
        factors.append("Waning Moon - Less favorable for new deals")

    if deal_stage in config.CLOSING_STAGES:
        score += 5
        factors.append("Deal stage optimal for closing")

    if deal_value > config.LARGE_DEAL_THRESHOLD:
        score -= 5
        factors.append("Large deal - requires more alignment")

    probability = _clamp(score, 0, 100)
    logger.debug(
        f"Deal probability: raw {score} → {probability} "
        f"({len(factors)} factors, moon {moon.phase})"
    )
    return DealProbability(
        probability=probability,
        confidence=_confidence(len(factors)),
        factors=tuple(factors),
        recommendation=_deal_recommendation(probability),
    )


# ── Today's recommendations ───────────────────────────────────────────────────

def _user_offset(user_id: Optional[str], multiplier: int, shift: int) -> int:
    """Per-user nudge: (seed × multiplier) mod 3 + shift; 0 without a user."""
    if not user_id:
        return 0
    return (user_seed(user_id) * multiplier) % 3 + shift


def _deal_closing(life_path: int, universal_day: int, moon_phase, user_id) -> BusinessRecommendation:
    score = config.TIMING_BASE_SCORE + _user_offset(user_id, 1, -1)
    reasoning = ""
    if universal_day == 8:
        score += 3
        reasoning += "Universal Day 8 (Power). "
    if moon_phase.phase == "Full Moon":
        score += 2
        reasoning += "Full Moon energy. "
    if life_path in (8, 22):
        score += 1
        reasoning += f"Your Life Path {life_path}. "

    if score >= 8:
        recommendation = "Highly favorable - Push for closes"
    elif score >= 6:
        recommendation = "Favorable - Good day for negotiations"
    else:
        recommendation = "Mixed - Focus on relationship building"

    return BusinessRecommendation(
        category="Deal Closing",
        score=_clamp(score, 0, 10),
        recommendation=recommendation,
        reasoning=reasoning + moon_phase.business_guidance,
    )


def _new_ventures(universal_day: int, moon_phase, user_id) -> BusinessRecommendation:
    score = config.TIMING_BASE_SCORE + _user_offset(user_id, 2, -1)
    reasoning = ""
    if universal_day == 1:
        score += 3
        reasoning += "Universal Day 1 (New Beginnings). "
    if moon_phase.phase == "New Moon":
        score += 2
        reasoning += "New Moon - perfect for launches. "

    if score >= 8:
        recommendation = "Excellent timing for launches"
    elif score >= 6:
        recommendation = "Good for planning new initiatives"
    else:
        recommendation = "Better to refine existing projects"

    return BusinessRecommendation(
        category="New Ventures",
        score=_clamp(score, 0, 10),
        recommendation=recommendation,
        reasoning=reasoning or "Focus on existing momentum.",
    )


def _strategic_planning(life_path: int, universal_day: int, user_id) -> BusinessRecommendation:
    # (seed × 3) mod 3 is always 0, so this category never varies per user.
    score = config.TIMING_BASE_SCORE + _user_offset(user_id, 3, 0)
    reasoning = ""
    if universal_day == 7:
        score += 3
        reasoning += "Universal Day 7 (Analysis). "
    if life_path in (7, 11):
        score += 1
        reasoning += "Your natural strategic energy. "

    return BusinessRecommendation(
        category="Strategic Planning",
        score=_clamp(score, 0, 10),
        recommendation="Ideal for deep strategic work" if score >= 7 else "Good for tactical execution",
        reasoning=reasoning or "Balance strategy with action.",
    )


def today_business_recommendations(
    life_path: int,
    universal_day: int,
    moment: Moment,
    user_id: Optional[str] = None,
) -> List[BusinessRecommendation]:
    """
    Three recommendations, always in the order
    Deal Closing, New Ventures, Strategic Planning.

    Each category starts at 5, takes a small per-user offset when
    ``user_id`` is given, adds its own bonuses and is clamped to [0, 10].
    """
    moon = current_moon_phase(moment)
    return [
        _deal_closing(life_path, universal_day, moon, user_id),
        _new_ventures(universal_day, moon, user_id),
        _strategic_planning(life_path, universal_day, user_id),
    ]


# ── Launch calendar ───────────────────────────────────────────────────────────

def best_launch_days(
    start: date,
    lookahead_days: int = config.LAUNCH_LOOKAHEAD_DAYS,
    limit: int = config.MAX_LAUNCH_DAYS,
) -> List[date]:
    """
    Days in [start, start + lookahead_days) with Universal Day 1 or 8
    and a New or Full Moon, earliest first, at most ``limit``.
    """
    days = []
    for offset in range(lookahead_days):
        day = start + timedelta(days=offset)
        if universal_day_number(day) not in (1, 8):
            continue
        if current_moon_phase(day).phase in ("New Moon", "Full Moon"):
            days.append(day)
            if len(days) >= limit:
                break
    return days


# ── Team compatibility ────────────────────────────────────────────────────────

def team_compatibility(members: Iterable[Tuple[str, int]]) -> TeamCompatibility:
    """
    Score a team's balance from its members' Life Path numbers.

    ``members`` is an iterable of (name, life_path_number).
    """
    members = list(members)
    if len(members) < 2:
        return TeamCompatibility(
            overall=50,
            insights=("Need at least 2 team members for compatibility analysis",),
        )

    score = 50
    insights: List[str] = []
    numbers = [lp for _, lp in members]

    masters = [name for name, lp in members if lp in config.MASTER_NUMBERS]
    if masters:
        score += 10
        insights.append(
            f"Master number presence ({', '.join(masters)}) - High spiritual alignment"
        )

    has_leader = any(lp in (1, 11) for lp in numbers)
    has_builder = any(lp in (4, 22) for lp in numbers)
    if has_leader and has_builder:
        score += 15
        insights.append("Leadership + Builder balance - Strong execution capability")

    if 3 in numbers and 7 in numbers:
        score += 10
        insights.append("Creative + Strategic balance - Innovation with planning")

    if 8 in numbers:
        score += 10
        insights.append("Executive presence - Strong manifestation energy")

    if any(count > 2 for count in Counter(numbers).values()):
        score -= 10
        insights.append(
            "Multiple members with same Life Path - May create competition or blind spots"
        )

    return TeamCompatibility(overall=_clamp(score, 0, 100), insights=tuple(insights))
