import pytest

from coffee_quiz.recommendations.brew_tips import (
    BREW_TIPS,
    get_brew_tips,
    get_quick_tip,
    suggest_brew_method,
    validate_brew_tips,
)
from coffee_quiz.recommendations.errors import CatalogError
from coffee_quiz.recommendations.models import BrewMethod, Equipment, Temperature


def test_every_brew_method_has_tips():
    for method in BrewMethod:
        tips = get_brew_tips(method)
        assert tips.method == method
        assert tips.ratio
        assert tips.grind_size
        assert tips.tip


def test_drip_grind_is_medium():
    assert "medium" in get_brew_tips(BrewMethod.drip).grind_size.lower()


def test_espresso_grind_is_fine():
    assert "fine" in get_brew_tips(BrewMethod.espresso).grind_size.lower()


def test_french_press_grind_is_coarse():
    assert "coarse" in get_brew_tips(BrewMethod.french_press).grind_size.lower()


def test_cold_brew_time_mentions_twelve_hours():
    assert "12" in get_brew_tips(BrewMethod.cold_brew).brew_time


def test_pods_have_no_temperature_or_time():
    tips = get_brew_tips(BrewMethod.pods)
    assert tips.temperature is None
    assert tips.brew_time is None


def test_quick_tip():
    assert get_quick_tip(BrewMethod.pour_over).startswith("Start with a 30-second bloom")


def test_validate_brew_tips_rejects_missing_entry():
    partial = {m: t for m, t in BREW_TIPS.items() if m != BrewMethod.pods}
    with pytest.raises(CatalogError):
        validate_brew_tips(partial)


def test_validate_brew_tips_rejects_misfiled_entry():
    table = dict(BREW_TIPS)
    table[BrewMethod.pods] = BREW_TIPS[BrewMethod.drip]
    with pytest.raises(CatalogError):
        validate_brew_tips(table)


# ── suggest_brew_method ──────────────────────────────────────────────────


def test_iced_without_equipment_suggests_cold_brew():
    assert suggest_brew_method(None, Temperature.iced) == BrewMethod.cold_brew


def test_iced_with_no_equipment_suggests_cold_brew():
    assert suggest_brew_method(Equipment.none, Temperature.iced) == BrewMethod.cold_brew


def test_iced_with_equipment_uses_equipment():
    assert suggest_brew_method(Equipment.aeropress, Temperature.iced) == BrewMethod.aeropress


def test_french_press_hot():
    assert suggest_brew_method(Equipment.french_press, Temperature.hot) == BrewMethod.french_press


def test_no_equipment_hot_defaults_to_drip():
    assert suggest_brew_method(None, Temperature.hot) == BrewMethod.drip


def test_none_equipment_hot_defaults_to_drip():
    assert suggest_brew_method(Equipment.none, Temperature.both) == BrewMethod.drip


@pytest.mark.parametrize("equipment", [e for e in Equipment if e != Equipment.none])
def test_equipment_maps_to_same_named_method(equipment):
    assert suggest_brew_method(equipment, Temperature.hot).value == equipment.value
