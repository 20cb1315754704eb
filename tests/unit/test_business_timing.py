"""Unit tests for deal probability and business timing"""

from datetime import date

import pytest

from conftest import (
    FIRST_QUARTER_DAY,
    FULL_MOON_DAY,
    NEW_MOON_DAY,
    WANING_CRESCENT_DAY,
    WANING_GIBBOUS_DAY,
)
from mystic.business_timing import (
    best_launch_days,
    deal_probability,
    team_compatibility,
    today_business_recommendations,
)
from mystic.moon_phase import current_moon_phase


# ── Deal probability ──────────────────────────────────────────────────────────

def test_deal_probability_worst_case():
    """Only the Universal Day 9 and large-deal penalties apply: 50 - 10 - 5 = 35"""
    result = deal_probability(500_000, "Lead", 9, 9, FIRST_QUARTER_DAY)

    assert result.probability == 35
    assert result.confidence == "Low"
    assert result.factors == (
        "Universal Day 9 (Completion) - Better to finish existing deals",
        "Large deal - requires more alignment",
    )
    assert "CHALLENGING" in result.recommendation


def test_deal_probability_best_case_is_clamped_with_four_factors():
    """50 + 15 + 20 + 15 + 5 = 105 → 100; four factors is Medium, not High"""
    result = deal_probability(10_000, "Negotiation", 8, 8, FULL_MOON_DAY)

    assert result.probability == 100
    assert len(result.factors) == 4
    assert result.confidence == "Medium"
    assert result.recommendation == "🔥 HIGHLY FAVORABLE - Push for close today"


def test_deal_probability_five_factors_is_high_confidence():
    """50 + 10 + 10 + 10 + 5 - 5 = 80"""
    result = deal_probability(200_000, "Proposal", 1, 1, NEW_MOON_DAY)

    assert result.probability == 80
    assert result.confidence == "High"
    assert result.factors == (
        "Life Path 1 (Leadership) - Favorable",
        "Universal Day 1 (New Beginnings) - Good for initiating",
        "New Moon - Great for starting negotiations",
        "Deal stage optimal for closing",
        "Large deal - requires more alignment",
    )


@pytest.mark.parametrize("day", [WANING_GIBBOUS_DAY, WANING_CRESCENT_DAY])
def test_waning_moon_penalty(day):
    result = deal_probability(0, "Discovery", 5, 5, day)

    assert result.probability == 45
    assert result.factors == ("Waning Moon - Less favorable for new deals",)
    assert result.recommendation == "⚠️ MIXED - Proceed with caution"


def test_favorable_band():
    """50 + 10 (Life Path 11) + 5 (Proposal) = 65"""
    result = deal_probability(0, "Proposal", 11, 5, FIRST_QUARTER_DAY)

    assert result.probability == 65
    assert result.factors[0] == "Life Path 11 (Leadership) - Favorable"
    assert result.recommendation == "✅ FAVORABLE - Good timing to advance"


def test_master_22_counts_as_power_path():
    result = deal_probability(0, "Lead", 22, 5, FIRST_QUARTER_DAY)
    assert result.probability == 65
    assert result.factors == ("Life Path 22 (Power/Manifestation) - Highly favorable",)


def test_large_deal_threshold_is_exclusive():
    at_threshold = deal_probability(100_000, "Lead", 5, 5, FIRST_QUARTER_DAY)
    above = deal_probability(100_001, "Lead", 5, 5, FIRST_QUARTER_DAY)
    assert at_threshold.probability == 50
    assert above.probability == 45


def test_deal_probability_is_idempotent():
    first = deal_probability(42_000, "Negotiation", 8, 1, FULL_MOON_DAY)
    second = deal_probability(42_000, "Negotiation", 8, 1, FULL_MOON_DAY)
    assert first == second
    assert first.to_payload() == second.to_payload()


def test_deal_probability_payload_lists_factors():
    payload = deal_probability(0, "Lead", 5, 5, FIRST_QUARTER_DAY).to_payload()
    assert payload == {
        "probability": 50,
        "confidence": "Low",
        "factors": [],
        "recommendation": "⚠️ MIXED - Proceed with caution",
    }


# ── Today's recommendations ───────────────────────────────────────────────────

def test_recommendations_fixed_order():
    recs = today_business_recommendations(5, 5, FIRST_QUARTER_DAY)
    assert [r.category for r in recs] == ["Deal Closing", "New Ventures", "Strategic Planning"]


def test_deal_closing_peak_is_clamped_to_ten():
    """5 + 3 (day 8) + 2 (Full Moon) + 1 (Life Path 22) = 11 → 10"""
    deal, ventures, strategy = today_business_recommendations(22, 8, FULL_MOON_DAY)
    full_moon = current_moon_phase(FULL_MOON_DAY)

    assert deal.score == 10
    assert deal.recommendation == "Highly favorable - Push for closes"
    assert deal.reasoning == (
        "Universal Day 8 (Power). Full Moon energy. Your Life Path 22. "
        + full_moon.business_guidance
    )
    assert ventures.score == 5
    assert ventures.recommendation == "Better to refine existing projects"
    assert ventures.reasoning == "Focus on existing momentum."
    assert strategy.score == 5
    assert strategy.recommendation == "Good for tactical execution"
    assert strategy.reasoning == "Balance strategy with action."


def test_new_ventures_on_new_moon_day_one():
    deal, ventures, strategy = today_business_recommendations(7, 1, NEW_MOON_DAY)

    assert deal.score == 5
    assert deal.recommendation == "Mixed - Focus on relationship building"
    assert deal.reasoning == current_moon_phase(NEW_MOON_DAY).business_guidance
    assert ventures.score == 10
    assert ventures.recommendation == "Excellent timing for launches"
    assert ventures.reasoning == "Universal Day 1 (New Beginnings). New Moon - perfect for launches. "
    assert strategy.score == 6
    assert strategy.recommendation == "Good for tactical execution"
    assert strategy.reasoning == "Your natural strategic energy. "


def test_strategic_planning_on_day_seven():
    strategy = today_business_recommendations(11, 7, FIRST_QUARTER_DAY)[2]
    assert strategy.score == 9
    assert strategy.recommendation == "Ideal for deep strategic work"
    assert strategy.reasoning == "Universal Day 7 (Analysis). Your natural strategic energy. "


@pytest.mark.parametrize(
    "user_id, scores",
    [
        (None, [5, 5, 5]),
        ("abc", [4, 4, 5]),   # seed 294: 294 % 3 - 1 = -1, 588 % 3 - 1 = -1
        ("a", [5, 6, 5]),     # seed 97:  97 % 3 - 1 = 0,   194 % 3 - 1 = +1
    ],
)
def test_per_user_offsets(user_id, scores):
    recs = today_business_recommendations(5, 5, FIRST_QUARTER_DAY, user_id)
    assert [r.score for r in recs] == scores


def test_recommendation_payload_shape():
    payload = today_business_recommendations(5, 5, FIRST_QUARTER_DAY)[1].to_payload()
    assert set(payload) == {"category", "score", "recommendation", "reasoning"}


# ── Launch calendar ───────────────────────────────────────────────────────────

def test_best_launch_days_january_2000():
    """Universal Day 1 or 8 on a New or Full Moon"""
    assert best_launch_days(date(2000, 1, 1)) == [
        date(2000, 1, 5),    # UD 8, New Moon (wrapped band)
        date(2000, 1, 7),    # UD 1, New Moon
        date(2000, 1, 23),   # UD 8, Full Moon
    ]


def test_best_launch_days_respects_limit_and_window():
    assert best_launch_days(date(2000, 1, 1), limit=2) == [date(2000, 1, 5), date(2000, 1, 7)]
    assert best_launch_days(date(2000, 1, 1), lookahead_days=6) == [date(2000, 1, 5)]


# ── Team compatibility ────────────────────────────────────────────────────────

def test_team_compatibility_needs_two_members():
    result = team_compatibility([("Ada", 1)])
    assert result.overall == 50
    assert result.insights == ("Need at least 2 team members for compatibility analysis",)


def test_team_compatibility_leader_and_builder():
    result = team_compatibility([("Ada", 1), ("Grace", 4)])
    assert result.overall == 65
    assert result.insights == ("Leadership + Builder balance - Strong execution capability",)


def test_team_compatibility_full_balance():
    team = [("Ada", 11), ("Grace", 22), ("Alan", 3), ("Linus", 7), ("Barbara", 8)]
    result = team_compatibility(team)

    assert result.overall == 95
    assert result.insights[0] == "Master number presence (Ada, Grace) - High spiritual alignment"
    assert len(result.insights) == 5


def test_team_compatibility_duplicate_life_paths():
    result = team_compatibility([("A", 5), ("B", 5), ("C", 5)])
    assert result.overall == 40
    assert result.insights == (
        "Multiple members with same Life Path - May create competition or blind spots",
    )
