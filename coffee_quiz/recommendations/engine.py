from __future__ import annotations

from collections.abc import Sequence

from .brew_tips import get_brew_tips, suggest_brew_method
from .catalog import COFFEE_PROFILES, validate_catalog
from .config import DEFAULT_SCORING_WEIGHTS, ScoringWeights
from .errors import CatalogError
from .models import CoffeeProfile, QuizAnswers, RecommendationOutput, ScoredProfile
from .narrative import (
    build_cafe_order_script,
    build_confidence_statement,
    build_explanation,
    build_upgrade_suggestion,
)
from .scoring import score_profile

# Ranks 2..5 are searched for a diversified alternative.
ALTERNATIVE_WINDOW = 5
_SUMMARY_LENGTH = 100


def rank_profiles(
    answers: QuizAnswers,
    profiles: Sequence[CoffeeProfile] = COFFEE_PROFILES,
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
) -> list[ScoredProfile]:
    """Score every profile and sort best first.

    ``sorted`` is stable, so equal scores keep catalog order.
    """
    scored = [
        ScoredProfile(profile=p, score=score_profile(p, answers, weights))
        for p in profiles
    ]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def pick_alternative(ranked: Sequence[ScoredProfile]) -> ScoredProfile:
    """First of ranks 2..5 that differs in flavor or roast, else rank 2."""
    best = ranked[0].profile
    for candidate in ranked[1:ALTERNATIVE_WINDOW]:
        if (
            candidate.profile.flavor_profile != best.flavor_profile
            or candidate.profile.roast_level != best.roast_level
        ):
            return candidate
    return ranked[1]


def generate_recommendation(
    answers: QuizAnswers,
    profiles: Sequence[CoffeeProfile] = COFFEE_PROFILES,
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
) -> RecommendationOutput:
    if profiles is not COFFEE_PROFILES:
        validate_catalog(profiles)
    if len(profiles) < 2:
        raise CatalogError("At least two coffee profiles are needed to recommend a pair")

    ranked = rank_profiles(answers, profiles, weights)
    best = ranked[0]
    alternative = pick_alternative(ranked)

    method = suggest_brew_method(answers.equipment, answers.temperature)

    return RecommendationOutput(
        best_match=best.profile,
        alternative=alternative.profile,
        explanation=build_explanation(best.profile, answers),
        confidence_statement=build_confidence_statement(best.score, best.profile),
        brew_tips=get_brew_tips(method),
        cafe_order_script=build_cafe_order_script(best.profile, answers),
        upgrade_path_suggestion=build_upgrade_suggestion(answers),
    )


def recommendation_summary(recommendation: RecommendationOutput) -> str:
    """One-line teaser used when a result is shared."""
    best = recommendation.best_match
    return f"{best.name} - {best.description[:_SUMMARY_LENGTH]}..."
