"""
Rule-based text for a recommendation.

Nothing here calls out to a model or service: every sentence is assembled
from canned fragments keyed on the quiz answers and the chosen profile.
"""
from __future__ import annotations

from .models import (
    AcidityTolerance,
    Body,
    CoffeeContext,
    CoffeeProfile,
    Equipment,
    FlavorPreference,
    FlavorProfile,
    Level,
    MilkPreference,
    QuizAnswers,
    RoastLevel,
    Temperature,
)

STRONG_MATCH_THRESHOLD = 80
GOOD_FIT_THRESHOLD = 60
_MAX_REASONS = 2
_FALLBACK_REASON = "its balanced profile works well with your preferences"

UPGRADE_SUGGESTIONS: dict[Equipment, str] = {
    Equipment.pods: (
        "When you're ready to level up: try a simple pour-over setup (about $30). "
        "Same convenience, more flavor control, and your coffee will taste noticeably fresher."
    ),
    Equipment.none: (
        "Want to start making great coffee at home? A French press ($20-30) is foolproof "
        "and makes excellent coffee with minimal effort."
    ),
    Equipment.drip: (
        "Upgrade tip: buying whole beans and grinding them fresh makes your drip coffee "
        "taste dramatically better. A basic burr grinder costs around $30-50."
    ),
}


def _flavor_reason(profile: CoffeeProfile, answers: QuizAnswers) -> str | None:
    if answers.flavor_preference == FlavorPreference.chocolatey:
        if profile.flavor_profile in (FlavorProfile.chocolatey_nutty, FlavorProfile.sweet_dessert):
            return "its rich chocolate and caramel notes match your taste perfectly"
    elif answers.flavor_preference == FlavorPreference.fruity:
        if profile.flavor_profile == FlavorProfile.fruity_bright:
            return "its bright, fruity character is exactly what you're looking for"
    elif answers.flavor_preference == FlavorPreference.balanced:
        return "its well-rounded flavor profile offers something for everyone"
    return None


def _milk_reason(profile: CoffeeProfile, answers: QuizAnswers) -> str | None:
    if answers.milk_preference == MilkPreference.with_milk and profile.body_level == Body.full:
        return "its full body stands up beautifully to milk"
    if answers.milk_preference == MilkPreference.black and profile.acidity_level != Level.high:
        return "its smooth character shines when enjoyed black"
    return None


def _acidity_reason(profile: CoffeeProfile, answers: QuizAnswers) -> str | None:
    if (
        answers.acidity_tolerance == AcidityTolerance.low_acidity
        and profile.acidity_level == Level.low
    ):
        return "it's gentle on the stomach with low acidity"
    return None


def _equipment_reason(answers: QuizAnswers) -> str | None:
    if answers.equipment == Equipment.pods:
        return "quality pod options make this convenient without sacrificing taste"
    return None


def build_explanation(profile: CoffeeProfile, answers: QuizAnswers) -> str:
    reasons = [
        r for r in (
            _flavor_reason(profile, answers),
            _milk_reason(profile, answers),
            _acidity_reason(profile, answers),
            _equipment_reason(answers),
        )
        if r
    ]
    if not reasons:
        reasons = [_FALLBACK_REASON]
    return f"We recommend this because {', and '.join(reasons[:_MAX_REASONS])}."


def build_confidence_statement(score: int, profile: CoffeeProfile) -> str:
    if score >= STRONG_MATCH_THRESHOLD:
        liked = ", ".join(profile.tags[:2]) or "smooth"
        return f"This is a strong match if you like {liked} coffees."
    if score >= GOOD_FIT_THRESHOLD:
        lead = profile.tags[0] if profile.tags else "smooth"
        return f"This is a good fit for your preferences - {lead} and approachable."
    return "This is worth trying - it might introduce you to new flavors you'll enjoy."


def _drink_type(profile: CoffeeProfile, answers: QuizAnswers) -> str:
    if answers.coffee_context == CoffeeContext.home:
        return "drip coffee"
    if answers.equipment == Equipment.espresso or profile.roast_level == RoastLevel.dark:
        if answers.milk_preference == MilkPreference.with_milk:
            return "latte"
        if answers.milk_preference == MilkPreference.sweetened:
            return "vanilla latte"
        return "americano"
    if answers.temperature == Temperature.iced:
        return "cold brew"
    return "drip coffee"


_MILK_MODIFIERS: dict[MilkPreference, str] = {
    MilkPreference.with_milk: "with a splash of oat milk",
    MilkPreference.sweetened: "with oat milk and a pump of vanilla",
    MilkPreference.black: "black",
}


def build_cafe_order_script(profile: CoffeeProfile, answers: QuizAnswers) -> str:
    """A sentence the user can read out at the counter."""
    parts = ["Can I get", "a medium"]
    if answers.temperature == Temperature.iced:
        parts.append("iced")
    parts.append(_drink_type(profile, answers))
    parts.append(_MILK_MODIFIERS[answers.milk_preference])
    if answers.milk_preference == MilkPreference.black and answers.temperature == Temperature.hot:
        parts.append("- no room needed")
    return " ".join(parts) + "?"


def build_upgrade_suggestion(answers: QuizAnswers) -> str | None:
    if answers.equipment is None:
        return None
    return UPGRADE_SUGGESTIONS.get(answers.equipment)
