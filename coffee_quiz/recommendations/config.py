from __future__ import annotations

from dataclasses import dataclass, field

from .models import FlavorPreference, FlavorProfile


def _default_flavor_mapping() -> dict[FlavorPreference, tuple[FlavorProfile, ...]]:
    return {
        FlavorPreference.chocolatey: (
            FlavorProfile.chocolatey_nutty,
            FlavorProfile.sweet_dessert,
            FlavorProfile.bold_smoky,
        ),
        FlavorPreference.fruity: (
            FlavorProfile.fruity_bright,
            FlavorProfile.balanced_mild,
        ),
        FlavorPreference.nutty: (
            FlavorProfile.chocolatey_nutty,
            FlavorProfile.caramel_smooth,
            FlavorProfile.balanced_mild,
        ),
        FlavorPreference.balanced: (
            FlavorProfile.balanced_mild,
            FlavorProfile.caramel_smooth,
            FlavorProfile.chocolatey_nutty,
        ),
    }


@dataclass(frozen=True)
class ScoringWeights:
    """
    Point budget for each scoring component.

    The partial-credit multipliers are hand-tuned and kept as-is.
    """

    flavor_match: float = 40.0
    flavor_step: float = 10.0
    acidity_match: float = 25.0
    brew_method_match: float = 20.0
    milk_compatibility: float = 15.0
    iced_bonus: float = 5.0
    pods_bonus: float = 10.0

    low_acidity_medium_credit: float = 0.5
    normal_acidity_other_credit: float = 0.7
    versatile_brew_credit: float = 0.5
    versatile_brew_min_methods: int = 4
    milk_medium_body_credit: float = 0.7
    milk_light_body_credit: float = 0.4
    black_full_body_credit: float = 0.6

    max_score: int = 100

    flavor_mapping: dict[FlavorPreference, tuple[FlavorProfile, ...]] = field(
        default_factory=_default_flavor_mapping,
    )


DEFAULT_SCORING_WEIGHTS = ScoringWeights()
