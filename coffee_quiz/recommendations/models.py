from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MilkPreference(str, Enum):
    black = "black"
    with_milk = "with-milk"
    sweetened = "sweetened"


class Temperature(str, Enum):
    hot = "hot"
    iced = "iced"
    both = "both"


class FlavorPreference(str, Enum):
    chocolatey = "chocolatey"
    fruity = "fruity"
    nutty = "nutty"
    balanced = "balanced"


class CoffeeContext(str, Enum):
    home = "home"
    cafe = "cafe"
    both = "both"


class Equipment(str, Enum):
    none = "none"
    drip = "drip"
    french_press = "french-press"
    pour_over = "pour-over"
    aeropress = "aeropress"
    moka_pot = "moka-pot"
    espresso = "espresso"
    pods = "pods"


class AcidityTolerance(str, Enum):
    normal = "normal"
    low_acidity = "low-acidity"


class FlavorProfile(str, Enum):
    chocolatey_nutty = "chocolatey-nutty"
    caramel_smooth = "caramel-smooth"
    fruity_bright = "fruity-bright"
    bold_smoky = "bold-smoky"
    sweet_dessert = "sweet-dessert"
    balanced_mild = "balanced-mild"


class RoastLevel(str, Enum):
    light = "light"
    medium = "medium"
    medium_dark = "medium-dark"
    dark = "dark"


class OriginStyle(str, Enum):
    latin_america = "latin-america"
    east_africa = "east-africa"
    indonesia = "indonesia"
    blend = "blend"
    single_origin = "single-origin"


class BrewMethod(str, Enum):
    drip = "drip"
    french_press = "french-press"
    pour_over = "pour-over"
    aeropress = "aeropress"
    moka_pot = "moka-pot"
    espresso = "espresso"
    cold_brew = "cold-brew"
    pods = "pods"


class Level(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Body(str, Enum):
    light = "light"
    medium = "medium"
    full = "full"


class QuizLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str | None = Field(default=None, min_length=1, max_length=100)
    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lng: float | None = Field(default=None, ge=-180.0, le=180.0)


class QuizAnswers(BaseModel):
    """Validated quiz answers. Accepts both snake_case and camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    milk_preference: MilkPreference = Field(..., alias="milkPreference")
    temperature: Temperature
    flavor_preference: FlavorPreference = Field(..., alias="flavorPreference")
    coffee_context: CoffeeContext = Field(..., alias="coffeeContext")
    equipment: Equipment | None = None
    acidity_tolerance: AcidityTolerance | None = Field(default=None, alias="acidityTolerance")
    location: QuizLocation | None = None
    wants_cafe_suggestions: bool | None = Field(default=None, alias="wantsCafeSuggestions")
    current_order: str | None = Field(default=None, max_length=200, alias="currentOrder")


class CoffeeProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    flavor_profile: FlavorProfile
    roast_level: RoastLevel
    origin_style: OriginStyle
    suggested_brew_methods: tuple[BrewMethod, ...] = Field(..., min_length=1)
    tags: tuple[str, ...] = ()
    acidity_level: Level
    body_level: Body
    popular_brands: tuple[str, ...] | None = None

    def supports(self, method: BrewMethod) -> bool:
        return method in self.suggested_brew_methods


class ScoredProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: CoffeeProfile
    score: int = Field(..., ge=0, le=100)


class BrewTips(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: BrewMethod
    ratio: str
    grind_size: str
    temperature: str | None = None
    brew_time: str | None = None
    tip: str


class RecommendationOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    best_match: CoffeeProfile
    alternative: CoffeeProfile
    explanation: str
    confidence_statement: str
    brew_tips: BrewTips
    cafe_order_script: str
    upgrade_path_suggestion: str | None = None

    @model_validator(mode="after")
    def _distinct_pair(self) -> RecommendationOutput:
        if self.best_match.id == self.alternative.id:
            raise ValueError("best_match and alternative must be different profiles")
        return self


class QuizSubmitResponse(BaseModel):
    success: bool = True
    share_slug: str
    recommendation: RecommendationOutput
