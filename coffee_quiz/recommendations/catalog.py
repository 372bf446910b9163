from __future__ import annotations

from collections.abc import Iterable, Sequence

from .errors import CatalogError
from .models import (
    Body,
    BrewMethod,
    CoffeeProfile,
    FlavorProfile,
    Level,
    OriginStyle,
    RoastLevel,
)

# Catalog order matters: it breaks score ties during ranking.
COFFEE_PROFILES: tuple[CoffeeProfile, ...] = (
    # Chocolatey / nutty
    CoffeeProfile(
        id="brazilian-medium",
        name="Brazilian Medium Roast",
        description=(
            "A smooth, approachable coffee with notes of chocolate, hazelnut, and a hint "
            "of caramel. Perfect for those who enjoy a comforting, classic coffee experience."
        ),
        flavor_profile=FlavorProfile.chocolatey_nutty,
        roast_level=RoastLevel.medium,
        origin_style=OriginStyle.latin_america,
        suggested_brew_methods=(
            BrewMethod.drip,
            BrewMethod.french_press,
            BrewMethod.pour_over,
            BrewMethod.cold_brew,
        ),
        tags=("smooth", "nutty", "beginner-friendly", "versatile"),
        acidity_level=Level.low,
        body_level=Body.medium,
        popular_brands=("Lavazza", "Illy", "Peet's"),
    ),
    CoffeeProfile(
        id="colombian-classic",
        name="Colombian Classic",
        description=(
            "Well-balanced with sweet caramel notes and a clean finish. Colombia's high "
            "altitude produces consistently excellent coffee that works beautifully with "
            "or without milk."
        ),
        flavor_profile=FlavorProfile.caramel_smooth,
        roast_level=RoastLevel.medium,
        origin_style=OriginStyle.latin_america,
        suggested_brew_methods=(
            BrewMethod.drip,
            BrewMethod.pour_over,
            BrewMethod.aeropress,
            BrewMethod.espresso,
        ),
        tags=("balanced", "sweet", "versatile", "crowd-pleaser"),
        acidity_level=Level.medium,
        body_level=Body.medium,
        popular_brands=("Juan Valdez", "Starbucks Colombia", "Counter Culture"),
    ),
    CoffeeProfile(
        id="sumatra-dark",
        name="Sumatran Dark Roast",
        description=(
            "Earthy, full-bodied, and bold with low acidity. Notes of dark chocolate, "
            "cedar, and a syrupy mouthfeel. Ideal for those who want their coffee strong "
            "and robust."
        ),
        flavor_profile=FlavorProfile.bold_smoky,
        roast_level=RoastLevel.dark,
        origin_style=OriginStyle.indonesia,
        suggested_brew_methods=(
            BrewMethod.french_press,
            BrewMethod.moka_pot,
            BrewMethod.espresso,
            BrewMethod.cold_brew,
        ),
        tags=("bold", "earthy", "low-acid", "intense"),
        acidity_level=Level.low,
        body_level=Body.full,
        popular_brands=("Starbucks Sumatra", "Peet's Sumatra", "Blue Bottle"),
    ),
    # Fruity / bright
    CoffeeProfile(
        id="ethiopian-light",
        name="Ethiopian Light Roast",
        description=(
            "Vibrant and complex with berry notes, floral aromatics, and a tea-like body. "
            "Ethiopia is the birthplace of coffee, and its natural processing creates "
            "uniquely fruity flavors."
        ),
        flavor_profile=FlavorProfile.fruity_bright,
        roast_level=RoastLevel.light,
        origin_style=OriginStyle.east_africa,
        suggested_brew_methods=(BrewMethod.pour_over, BrewMethod.aeropress, BrewMethod.drip),
        tags=("fruity", "floral", "complex", "specialty"),
        acidity_level=Level.high,
        body_level=Body.light,
        popular_brands=("Intelligentsia", "Stumptown", "Counter Culture"),
    ),
    CoffeeProfile(
        id="kenyan-medium",
        name="Kenyan Medium Roast",
        description=(
            "Bright and juicy with notes of blackcurrant, citrus, and a wine-like acidity. "
            "Kenyan coffees are prized for their bold, complex fruit character."
        ),
        flavor_profile=FlavorProfile.fruity_bright,
        roast_level=RoastLevel.medium,
        origin_style=OriginStyle.east_africa,
        suggested_brew_methods=(BrewMethod.pour_over, BrewMethod.aeropress, BrewMethod.drip),
        tags=("bright", "complex", "citrus", "specialty"),
        acidity_level=Level.high,
        body_level=Body.medium,
        popular_brands=("Blue Bottle", "Verve", "Onyx Coffee Lab"),
    ),
    # Sweet / dessert
    CoffeeProfile(
        id="guatemalan-medium-dark",
        name="Guatemalan Medium-Dark",
        description=(
            "Sweet and rich with notes of brown sugar, cocoa, and a hint of spice. The "
            "volcanic soil of Guatemala creates coffees with exceptional sweetness."
        ),
        flavor_profile=FlavorProfile.sweet_dessert,
        roast_level=RoastLevel.medium_dark,
        origin_style=OriginStyle.latin_america,
        suggested_brew_methods=(
            BrewMethod.drip,
            BrewMethod.french_press,
            BrewMethod.espresso,
            BrewMethod.moka_pot,
        ),
        tags=("sweet", "rich", "dessert-like", "comforting"),
        acidity_level=Level.low,
        body_level=Body.full,
        popular_brands=("Starbucks Guatemala", "La Colombe", "Intelligentsia"),
    ),
    CoffeeProfile(
        id="costa-rican-honey",
        name="Costa Rican Honey Process",
        description=(
            "Naturally sweet with honey-like sweetness, stone fruit notes, and a silky "
            "body. Honey processing leaves some fruit on the bean during drying, creating "
            "extra sweetness."
        ),
        flavor_profile=FlavorProfile.sweet_dessert,
        roast_level=RoastLevel.medium,
        origin_style=OriginStyle.latin_america,
        suggested_brew_methods=(BrewMethod.pour_over, BrewMethod.aeropress, BrewMethod.drip),
        tags=("sweet", "honey", "fruity", "smooth"),
        acidity_level=Level.medium,
        body_level=Body.medium,
        popular_brands=("Onyx", "Heart Coffee", "Camber"),
    ),
    # Bold / smoky
    CoffeeProfile(
        id="italian-espresso-blend",
        name="Italian Espresso Blend",
        description=(
            "Dark and bold with notes of dark chocolate, roasted nuts, and a pleasant "
            "bitterness. Designed specifically for espresso but works great in milk drinks."
        ),
        flavor_profile=FlavorProfile.bold_smoky,
        roast_level=RoastLevel.dark,
        origin_style=OriginStyle.blend,
        suggested_brew_methods=(BrewMethod.espresso, BrewMethod.moka_pot, BrewMethod.french_press),
        tags=("bold", "espresso", "milk-friendly", "classic"),
        acidity_level=Level.low,
        body_level=Body.full,
        popular_brands=("Lavazza", "Illy", "Segafredo"),
    ),
    CoffeeProfile(
        id="french-roast",
        name="French Roast",
        description=(
            "Deeply roasted with smoky, bittersweet chocolate notes and minimal acidity. "
            "A classic choice for those who prefer their coffee dark and intense."
        ),
        flavor_profile=FlavorProfile.bold_smoky,
        roast_level=RoastLevel.dark,
        origin_style=OriginStyle.blend,
        suggested_brew_methods=(BrewMethod.french_press, BrewMethod.drip, BrewMethod.cold_brew),
        tags=("smoky", "bold", "dark", "intense"),
        acidity_level=Level.low,
        body_level=Body.full,
        popular_brands=("Peet's", "Starbucks French Roast", "Community Coffee"),
    ),
    # Balanced / mild
    CoffeeProfile(
        id="house-blend-medium",
        name="Classic House Blend",
        description=(
            "A well-rounded everyday coffee that hits all the right notes. Balanced "
            "sweetness, mild acidity, and approachable flavor make this perfect for any "
            "time of day."
        ),
        flavor_profile=FlavorProfile.balanced_mild,
        roast_level=RoastLevel.medium,
        origin_style=OriginStyle.blend,
        suggested_brew_methods=(
            BrewMethod.drip,
            BrewMethod.pour_over,
            BrewMethod.french_press,
            BrewMethod.cold_brew,
            BrewMethod.pods,
        ),
        tags=("balanced", "everyday", "approachable", "versatile"),
        acidity_level=Level.medium,
        body_level=Body.medium,
        popular_brands=("Starbucks Pike Place", "Dunkin' Original", "Folgers"),
    ),
    CoffeeProfile(
        id="breakfast-blend",
        name="Light Breakfast Blend",
        description=(
            "Bright and lively with a lighter body, perfect for mornings. Clean citrus "
            "notes with a mild sweetness that wakes you up without overwhelming your palate."
        ),
        flavor_profile=FlavorProfile.balanced_mild,
        roast_level=RoastLevel.light,
        origin_style=OriginStyle.blend,
        suggested_brew_methods=(BrewMethod.drip, BrewMethod.pour_over, BrewMethod.aeropress),
        tags=("light", "morning", "bright", "clean"),
        acidity_level=Level.medium,
        body_level=Body.light,
        popular_brands=("Green Mountain", "Starbucks Blonde", "Peet's"),
    ),
    # Cold brew
    CoffeeProfile(
        id="cold-brew-concentrate",
        name="Cold Brew Blend",
        description=(
            "Specially selected for cold brewing: smooth, sweet, and never bitter. Low "
            "acidity and chocolatey notes shine when brewed cold for 12-24 hours."
        ),
        flavor_profile=FlavorProfile.chocolatey_nutty,
        roast_level=RoastLevel.medium_dark,
        origin_style=OriginStyle.blend,
        suggested_brew_methods=(BrewMethod.cold_brew,),
        tags=("cold-brew", "smooth", "low-acid", "sweet"),
        acidity_level=Level.low,
        body_level=Body.medium,
        popular_brands=("Stumptown Cold Brew", "Chameleon", "La Colombe"),
    ),
    # Pods
    CoffeeProfile(
        id="premium-pod-blend",
        name="Premium Pod Selection",
        description=(
            "Quality coffee in convenient pod form. Look for pods from specialty roasters "
            "that use freshly roasted beans. Nespresso Original and Keurig K-cups both "
            "have excellent options."
        ),
        flavor_profile=FlavorProfile.balanced_mild,
        roast_level=RoastLevel.medium,
        origin_style=OriginStyle.blend,
        suggested_brew_methods=(BrewMethod.pods,),
        tags=("convenient", "pods", "quick", "consistent"),
        acidity_level=Level.medium,
        body_level=Body.medium,
        popular_brands=("Nespresso", "Peet's K-Cups", "Lavazza Pods"),
    ),
)


def validate_catalog(profiles: Sequence[CoffeeProfile]) -> None:
    """Raise ``CatalogError`` if *profiles* cannot back the recommender."""
    if not profiles:
        raise CatalogError("Coffee catalog is empty")
    seen: set[str] = set()
    for profile in profiles:
        if profile.id in seen:
            raise CatalogError(f"Duplicate coffee profile id: {profile.id}")
        seen.add(profile.id)
        if not profile.suggested_brew_methods:
            raise CatalogError(f"Profile {profile.id} has no suggested brew methods")


def list_profiles() -> list[CoffeeProfile]:
    return list(COFFEE_PROFILES)


def get_profile(profile_id: str) -> CoffeeProfile | None:
    for profile in COFFEE_PROFILES:
        if profile.id == profile_id:
            return profile
    return None


def _filter(profiles: Iterable[CoffeeProfile], **attrs: object) -> list[CoffeeProfile]:
    return [
        p for p in profiles
        if all(getattr(p, name) == value for name, value in attrs.items())
    ]


def filter_by_flavor(flavor_profile: FlavorProfile) -> list[CoffeeProfile]:
    return _filter(COFFEE_PROFILES, flavor_profile=flavor_profile)


def filter_by_acidity(level: Level) -> list[CoffeeProfile]:
    return _filter(COFFEE_PROFILES, acidity_level=level)


def filter_by_roast(roast_level: RoastLevel) -> list[CoffeeProfile]:
    return _filter(COFFEE_PROFILES, roast_level=roast_level)


def low_acidity_profiles() -> list[CoffeeProfile]:
    return filter_by_acidity(Level.low)


validate_catalog(COFFEE_PROFILES)
