"""Value types returned by the mystical engine.

Every result is built fresh per call and never mutated. ``to_payload()``
gives the JSON shape the dashboard and API consumers read.
"""
from dataclasses import dataclass
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class MoonPhase:
    """One of the eight fixed lunar phase records"""

    phase: str
    illumination: int
    emoji: str
    meaning: str
    business_guidance: str

    def to_payload(self) -> dict:
        return {
            "phase": self.phase,
            "illumination": self.illumination,
            "emoji": self.emoji,
            "meaning": self.meaning,
            "businessGuidance": self.business_guidance,
        }


@dataclass(frozen=True)
class TarotCard:
    """A Major Arcana card as drawn for one day, with its orientation"""

    name: str
    meaning: str
    business_meaning: str
    reversed: bool
    emoji: str
    arcana: str = "Major"

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "arcana": self.arcana,
            "meaning": self.meaning,
            "businessMeaning": self.business_meaning,
            "reversed": self.reversed,
            "emoji": self.emoji,
        }


@dataclass(frozen=True)
class DealProbability:
    """Output of deal scoring"""

    probability: int
    confidence: str  # "Low" | "Medium" | "High"
    factors: Tuple[str, ...]
    recommendation: str

    def to_payload(self) -> dict:
        return {
            "probability": self.probability,
            "confidence": self.confidence,
            "factors": list(self.factors),
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class BusinessRecommendation:
    """Score (0-10) and advice for one business activity category"""

    category: str
    score: int
    recommendation: str
    reasoning: str

    def to_payload(self) -> dict:
        return {
            "category": self.category,
            "score": self.score,
            "recommendation": self.recommendation,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class LifePathMeaning:
    title: str
    description: str
    strengths: Tuple[str, ...]

    def to_payload(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "strengths": list(self.strengths),
        }


@dataclass(frozen=True)
class TeamCompatibility:
    overall: int
    insights: Tuple[str, ...]

    def to_payload(self) -> dict:
        return {"overall": self.overall, "insights": list(self.insights)}


@dataclass(frozen=True)
class UserProfile:
    """Dashboard user as seen by the engine's callers"""

    user_id: str
    name: str
    birth_date: date

    @property
    def first_name(self) -> str:
        return self.name.split()[0] if self.name.strip() else ""

    @property
    def life_path_number(self) -> int:
        from mystic.numerology import life_path_number
        return life_path_number(self.birth_date)

    @property
    def sun_sign(self) -> str:
        from mystic.numerology import sun_sign
        return sun_sign(self.birth_date)
