"""
Daily Tarot — deterministic Major Arcana draw per date and user.

The same (date, user_id) always yields the same card and orientation.
Only upright text is stored; reversed text is derived from it.
"""
from typing import Optional, Tuple

from loguru import logger

from mystic.clock import Moment, calendar_date
from mystic.models import TarotCard

# (name, emoji, meaning, business meaning)
MAJOR_ARCANA = (
    ("The Fool", "🃏",
     "New beginnings, spontaneity, faith in the universe",
     "Take calculated risks. Innovation over convention. Trust your entrepreneurial instincts."),
    ("The Magician", "🎩",
     "Manifestation, resourcefulness, power",
     "You have all the tools you need. Execute with confidence. Turn ideas into reality."),
    ("The High Priestess", "🔮",
     "Intuition, sacred knowledge, divine feminine",
     "Trust your gut. Hidden information will reveal itself. Listen more than you speak."),
    ("The Empress", "👑",
     "Abundance, nurturing, creativity",
     "Nurture your projects. Abundance is flowing. Creative solutions to business problems."),
    ("The Emperor", "⚔️",
     "Authority, structure, control",
     "Establish structure and systems. Lead with authority. Strategic planning pays off."),
    ("The Hierophant", "📿",
     "Tradition, conformity, education",
     "Follow proven systems. Seek mentorship. Traditional approaches work today."),
    ("The Lovers", "💕",
     "Choices, partnerships, alignment",
     "Important partnerships forming. Choose collaborators wisely. Alignment creates success."),
    ("The Chariot", "🏇",
     "Determination, willpower, victory",
     "Push forward aggressively. Victory through determination. Control competing priorities."),
    ("Strength", "🦁",
     "Courage, patience, compassion",
     "Lead with compassion. Patience yields results. Inner strength over force."),
    ("The Hermit", "🕯️",
     "Introspection, solitude, wisdom",
     "Strategic solitude. Deep thinking required. Withdraw to gain clarity before acting."),
    ("Wheel of Fortune", "☸️",
     "Cycles, destiny, turning points",
     "Major shifts incoming. Adapt to change. Cycles turning in your favor."),
    ("Justice", "⚖️",
     "Fairness, truth, cause and effect",
     "Fair dealings bring success. Contracts and legal matters favored. Truth prevails."),
    ("The Hanged Man", "🙃",
     "Pause, surrender, new perspective",
     "Strategic pause before acting. See problems from new angle. "
     "Surrender control to gain it."),
    ("Death", "💀",
     "Transformation, endings, new beginnings",
     "End what no longer serves you. Transformation brings growth. Kill old business models."),
    ("Temperance", "🧘",
     "Balance, moderation, patience",
     "Balance competing priorities. Moderate approach wins. Patience with processes."),
    ("The Devil", "😈",
     "Bondage, materialism, temptation",
     "Break limiting beliefs. Avoid material obsession. Freedom from business constraints."),
    ("The Tower", "🏰",
     "Upheaval, sudden change, revelation",
     "Disruptive innovation. Sudden market shifts. Rebuild stronger from chaos."),
    ("The Star", "⭐",
     "Hope, inspiration, renewal",
     "Vision and hope guide you. Inspire your team. "
     "Renewed optimism attracts opportunities."),
    ("The Moon", "🌙",
     "Illusion, intuition, uncertainty",
     "Not all is as it seems. Trust intuition over data. Navigate uncertainty with care."),
    ("The Sun", "☀️",
     "Success, vitality, joy",
     "Peak success and visibility. Everything illuminated. Maximum confidence and energy."),
    ("Judgment", "📯",
     "Reflection, reckoning, awakening",
     "Evaluate past decisions. Second chances available. Strategic pivots favored."),
    ("The World", "🌍",
     "Completion, achievement, fulfillment",
     "Major milestone achieved. Celebrate success. One cycle ends, another begins."),
)


def user_seed(user_id: str) -> int:
    """Stable non-cryptographic hash of a user id: the sum of its code points."""
    return sum(ord(ch) for ch in user_id)


def derive_reversed_text(meaning: str, business_meaning: str) -> Tuple[str, str]:
    """Rewrite upright card text with the reversed (blocked/obstacle) framing."""
    return (
        f"(Reversed) {meaning} - blocked or inverted energy",
        f"(Reversed) Obstacles or delays in: {business_meaning.lower()}",
    )


def tarot_seed(moment: Moment, user_id: Optional[str] = None) -> int:
    """
    Seed = year + month + day, multiplied by user_seed(user_id) when given.

    Example — 2024-01-15, no user:  2024 + 1 + 15 = 2040
    """
    d = calendar_date(moment)
    seed = d.year + d.month + d.day
    if user_id:
        seed *= user_seed(user_id)
    return seed


def daily_tarot(moment: Moment, user_id: Optional[str] = None) -> TarotCard:
    """Draw the day's card: index = seed mod 22, reversed when the seed is even."""
    seed = tarot_seed(moment, user_id)
    name, emoji, meaning, business_meaning = MAJOR_ARCANA[seed % len(MAJOR_ARCANA)]
    reversed_ = seed % 2 == 0
    if reversed_:
        meaning, business_meaning = derive_reversed_text(meaning, business_meaning)

    logger.debug(f"Tarot seed {seed} → {name}{' (reversed)' if reversed_ else ''}")
    return TarotCard(
        name=name,
        meaning=meaning,
        business_meaning=business_meaning,
        reversed=reversed_,
        emoji=emoji,
    )
