import pytest

from coffee_quiz.recommendations.catalog import (
    COFFEE_PROFILES,
    filter_by_acidity,
    filter_by_flavor,
    filter_by_roast,
    get_profile,
    list_profiles,
    low_acidity_profiles,
    validate_catalog,
)
from coffee_quiz.recommendations.errors import CatalogError
from coffee_quiz.recommendations.models import FlavorProfile, Level, RoastLevel


def test_catalog_has_at_least_ten_profiles():
    assert len(list_profiles()) >= 10


def test_catalog_ids_are_unique():
    ids = [p.id for p in list_profiles()]
    assert len(ids) == len(set(ids))


def test_catalog_covers_every_flavor_profile():
    flavors = {p.flavor_profile for p in list_profiles()}
    assert flavors == set(FlavorProfile)


def test_catalog_covers_every_roast_level():
    roasts = {p.roast_level for p in list_profiles()}
    assert roasts == set(RoastLevel)


def test_every_profile_has_a_brew_method():
    for profile in list_profiles():
        assert len(profile.suggested_brew_methods) > 0


def test_list_profiles_keeps_catalog_order():
    assert [p.id for p in list_profiles()] == [p.id for p in COFFEE_PROFILES]
    assert list_profiles()[0].id == "brazilian-medium"


def test_get_profile_found():
    profile = get_profile("sumatra-dark")
    assert profile is not None
    assert profile.name == "Sumatran Dark Roast"
    assert profile.roast_level == RoastLevel.dark


def test_get_profile_not_found():
    assert get_profile("instant-coffee") is None


def test_filter_by_flavor():
    fruity = filter_by_flavor(FlavorProfile.fruity_bright)
    assert {p.id for p in fruity} == {"ethiopian-light", "kenyan-medium"}


def test_filter_by_acidity():
    high = filter_by_acidity(Level.high)
    assert all(p.acidity_level == Level.high for p in high)
    assert len(high) == 2


def test_filter_by_roast():
    dark = filter_by_roast(RoastLevel.dark)
    assert {p.id for p in dark} == {"sumatra-dark", "italian-espresso-blend", "french-roast"}


def test_low_acidity_profiles():
    low = low_acidity_profiles()
    assert len(low) > 0
    assert all(p.acidity_level == Level.low for p in low)


def test_validate_catalog_rejects_empty():
    with pytest.raises(CatalogError):
        validate_catalog([])


def test_validate_catalog_rejects_duplicate_ids():
    first = COFFEE_PROFILES[0]
    with pytest.raises(CatalogError):
        validate_catalog([first, first.model_copy()])
