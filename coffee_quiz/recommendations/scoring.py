from __future__ import annotations

import math

from .brew_tips import suggest_brew_method
from .config import DEFAULT_SCORING_WEIGHTS, ScoringWeights
from .models import (
    AcidityTolerance,
    Body,
    BrewMethod,
    CoffeeProfile,
    Equipment,
    Level,
    MilkPreference,
    QuizAnswers,
    RoastLevel,
    Temperature,
)


def _flavor_score(profile: CoffeeProfile, answers: QuizAnswers, w: ScoringWeights) -> float:
    preferred = w.flavor_mapping.get(answers.flavor_preference, ())
    if profile.flavor_profile not in preferred:
        return 0.0
    return w.flavor_match - preferred.index(profile.flavor_profile) * w.flavor_step


def _acidity_score(profile: CoffeeProfile, answers: QuizAnswers, w: ScoringWeights) -> float:
    if answers.acidity_tolerance == AcidityTolerance.low_acidity:
        if profile.acidity_level == Level.low:
            return w.acidity_match
        if profile.acidity_level == Level.medium:
            return w.acidity_match * w.low_acidity_medium_credit
        return 0.0
    # Normal tolerance leans slightly towards medium acidity.
    if profile.acidity_level == Level.medium:
        return w.acidity_match
    return w.acidity_match * w.normal_acidity_other_credit


def _brew_method_score(profile: CoffeeProfile, method: BrewMethod, w: ScoringWeights) -> float:
    if profile.supports(method):
        return w.brew_method_match
    if len(profile.suggested_brew_methods) >= w.versatile_brew_min_methods:
        return w.brew_method_match * w.versatile_brew_credit
    return 0.0


def _milk_score(profile: CoffeeProfile, answers: QuizAnswers, w: ScoringWeights) -> float:
    if answers.milk_preference in (MilkPreference.with_milk, MilkPreference.sweetened):
        if profile.body_level == Body.full or profile.roast_level == RoastLevel.dark:
            return w.milk_compatibility
        if profile.body_level == Body.medium:
            return w.milk_compatibility * w.milk_medium_body_credit
        return w.milk_compatibility * w.milk_light_body_credit
    # Black drinkers care about clarity over body.
    if profile.body_level in (Body.light, Body.medium):
        return w.milk_compatibility
    return w.milk_compatibility * w.black_full_body_credit


def _bonus_score(profile: CoffeeProfile, answers: QuizAnswers, w: ScoringWeights) -> float:
    bonus = 0.0
    if answers.temperature == Temperature.iced and profile.supports(BrewMethod.cold_brew):
        bonus += w.iced_bonus
    if answers.equipment == Equipment.pods and profile.supports(BrewMethod.pods):
        bonus += w.pods_bonus
    return bonus


def raw_score(
    profile: CoffeeProfile,
    answers: QuizAnswers,
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
) -> float:
    """Uncapped, unrounded sum of all scoring components."""
    method = suggest_brew_method(answers.equipment, answers.temperature)
    return (
        _flavor_score(profile, answers, weights)
        + _acidity_score(profile, answers, weights)
        + _brew_method_score(profile, method, weights)
        + _milk_score(profile, answers, weights)
        + _bonus_score(profile, answers, weights)
    )


def score_profile(
    profile: CoffeeProfile,
    answers: QuizAnswers,
    weights: ScoringWeights = DEFAULT_SCORING_WEIGHTS,
) -> int:
    """Return a 0-100 suitability score for *profile* given *answers*."""
    total = min(float(weights.max_score), raw_score(profile, answers, weights))
    # Round half up, so 92.5 scores 93.
    return max(0, int(math.floor(total + 0.5)))
