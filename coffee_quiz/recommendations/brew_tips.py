from __future__ import annotations

from collections.abc import Mapping

from .errors import CatalogError
from .models import BrewMethod, BrewTips, Equipment, Temperature

# Ratios are coffee:water by weight unless stated otherwise.
BREW_TIPS: Mapping[BrewMethod, BrewTips] = {
    BrewMethod.drip: BrewTips(
        method=BrewMethod.drip,
        ratio="1:15 to 1:17 (about 2 tablespoons per 6oz cup)",
        grind_size="Medium - like coarse sand",
        temperature="195-205°F (90-96°C)",
        brew_time="4-6 minutes",
        tip=(
            "Use filtered water and clean your machine monthly with vinegar. "
            "Fresh beans make the biggest difference."
        ),
    ),
    BrewMethod.french_press: BrewTips(
        method=BrewMethod.french_press,
        ratio="1:12 to 1:15 (about 2 tablespoons per 6oz cup)",
        grind_size="Coarse - like sea salt",
        temperature="200°F (93°C) - just off boiling",
        brew_time="4 minutes steep, then press slowly",
        tip=(
            "Don't press too hard or fast. Let the grounds settle and press gently "
            "to avoid bitter sediment."
        ),
    ),
    BrewMethod.pour_over: BrewTips(
        method=BrewMethod.pour_over,
        ratio="1:15 to 1:17 (about 22g coffee for 350ml water)",
        grind_size="Medium-fine - like table salt",
        temperature="200-205°F (93-96°C)",
        brew_time="2:30-3:30 total",
        tip=(
            "Start with a 30-second bloom (wet the grounds, then wait) before your "
            "main pour. Pour in slow circles."
        ),
    ),
    BrewMethod.aeropress: BrewTips(
        method=BrewMethod.aeropress,
        ratio="1:12 to 1:15 (about 15-18g for one cup)",
        grind_size="Fine to medium-fine",
        temperature="175-185°F (80-85°C) for a smoother cup",
        brew_time="1-2 minutes total",
        tip=(
            "The AeroPress is very forgiving. Experiment with the inverted method and "
            "different steep times to find your taste."
        ),
    ),
    BrewMethod.moka_pot: BrewTips(
        method=BrewMethod.moka_pot,
        ratio="Fill the basket loosely, don't tamp",
        grind_size="Fine - but not espresso fine",
        temperature="Start with pre-heated water for less bitterness",
        brew_time="4-5 minutes on medium-low heat",
        tip=(
            "Remove from heat as soon as you hear gurgling. Cooling the bottom under "
            "cold water stops extraction and prevents bitterness."
        ),
    ),
    BrewMethod.espresso: BrewTips(
        method=BrewMethod.espresso,
        ratio="1:2 (18g in, 36g out is a good start)",
        grind_size="Very fine - like powdered sugar",
        temperature="200-205°F (93-96°C)",
        brew_time="25-30 seconds for the shot",
        tip=(
            "If your shot runs too fast, grind finer. Too slow and bitter? Grind "
            "coarser. Small adjustments make big differences."
        ),
    ),
    BrewMethod.cold_brew: BrewTips(
        method=BrewMethod.cold_brew,
        ratio="1:8 for concentrate (dilute 1:1), 1:15 for ready-to-drink",
        grind_size="Very coarse - like raw sugar",
        temperature="Room temp or refrigerated",
        brew_time="12-24 hours",
        tip=(
            "Longer isn't always better. 12-16 hours gives you smooth sweetness "
            "without over-extraction."
        ),
    ),
    BrewMethod.pods: BrewTips(
        method=BrewMethod.pods,
        ratio="Pre-measured - one pod per cup",
        grind_size="Pre-ground in the pod",
        tip=(
            "Look for pods from specialty roasters (Nespresso compatible or quality "
            "K-cups). Store pods in a cool, dark place and check roast dates."
        ),
    ),
}

_EQUIPMENT_TO_METHOD: dict[Equipment, BrewMethod] = {
    Equipment.drip: BrewMethod.drip,
    Equipment.french_press: BrewMethod.french_press,
    Equipment.pour_over: BrewMethod.pour_over,
    Equipment.aeropress: BrewMethod.aeropress,
    Equipment.moka_pot: BrewMethod.moka_pot,
    Equipment.espresso: BrewMethod.espresso,
    Equipment.pods: BrewMethod.pods,
}


def validate_brew_tips(table: Mapping[BrewMethod, BrewTips]) -> None:
    """Every brew method needs an entry whose ``method`` matches its key."""
    missing = [m.value for m in BrewMethod if m not in table]
    if missing:
        raise CatalogError(f"Brew tips missing for: {', '.join(missing)}")
    for method, tips in table.items():
        if tips.method != method:
            raise CatalogError(f"Brew tips for {method.value} are filed under {tips.method.value}")


def suggest_brew_method(
    equipment: Equipment | None,
    temperature: Temperature,
) -> BrewMethod:
    """Resolve the brew method a user will most likely use.

    Iced drinkers without a brewing device get cold brew. Otherwise the
    equipment maps to its same-named method, and anything else falls back
    to drip.
    """
    if temperature == Temperature.iced and equipment in (None, Equipment.none):
        return BrewMethod.cold_brew
    if equipment is None:
        return BrewMethod.drip
    return _EQUIPMENT_TO_METHOD.get(equipment, BrewMethod.drip)


def get_brew_tips(method: BrewMethod) -> BrewTips:
    try:
        return BREW_TIPS[method]
    except KeyError:
        raise CatalogError(f"No brew tips configured for {method}") from None


def get_quick_tip(method: BrewMethod) -> str:
    return get_brew_tips(method).tip


validate_brew_tips(BREW_TIPS)
