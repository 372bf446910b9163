from __future__ import annotations

import time

from fastapi import Depends, FastAPI, HTTPException, Query, Request

from .analytics.aggregator import compute_analytics
from .analytics.models import TrackEventRequest, TrackEventResponse
from .analytics.store import EventType, get_events, record_event
from .auth.dependencies import require_admin
from .cafes.cache import get_cache_stats
from .cafes.models import CafeSearchParams, CafeSearchResult
from .cafes.rate_limit import check_rate_limit
from .cafes.search import geocode_city, search_cafes
from .recommendations.brew_tips import get_brew_tips
from .recommendations.catalog import (
    COFFEE_PROFILES,
    filter_by_acidity,
    filter_by_flavor,
    filter_by_roast,
    get_profile,
    list_profiles,
)
from .recommendations.engine import generate_recommendation, recommendation_summary
from .recommendations.models import (
    AcidityTolerance,
    BrewMethod,
    BrewTips,
    CoffeeContext,
    CoffeeProfile,
    Equipment,
    FlavorPreference,
    FlavorProfile,
    Level,
    MilkPreference,
    QuizAnswers,
    QuizSubmitResponse,
    RoastLevel,
    Temperature,
)
from .results.store import SlugCollisionError, count_results, get_result, save_result

app = FastAPI(title="Coffee Quiz API", version="1.0.0")

_SECONDS_PER_DAY = 86400


def _client_id(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "milk_preferences": [m.value for m in MilkPreference],
        "temperatures": [t.value for t in Temperature],
        "flavor_preferences": [f.value for f in FlavorPreference],
        "coffee_contexts": [c.value for c in CoffeeContext],
        "equipment": [e.value for e in Equipment],
        "acidity_tolerances": [a.value for a in AcidityTolerance],
        "brew_methods": [b.value for b in BrewMethod],
        "profile_count": len(COFFEE_PROFILES),
    }


@app.get("/profiles", response_model=list[CoffeeProfile])
def profiles(
    flavor: FlavorProfile | None = None,
    acidity: Level | None = None,
    roast: RoastLevel | None = None,
) -> list[CoffeeProfile]:
    result = list_profiles()
    if flavor is not None:
        result = [p for p in result if p in filter_by_flavor(flavor)]
    if acidity is not None:
        result = [p for p in result if p in filter_by_acidity(acidity)]
    if roast is not None:
        result = [p for p in result if p in filter_by_roast(roast)]
    return result


@app.get("/profiles/{profile_id}", response_model=CoffeeProfile)
def profile_detail(profile_id: str) -> CoffeeProfile:
    profile = get_profile(profile_id)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Unknown coffee profile: {profile_id}")
    return profile


@app.get("/brew-tips/{method}", response_model=BrewTips)
def brew_tips(method: BrewMethod) -> BrewTips:
    return get_brew_tips(method)


# ── Quiz & results ───────────────────────────────────────────────────────


@app.post("/quiz/submit", response_model=QuizSubmitResponse)
def submit_quiz(answers: QuizAnswers) -> QuizSubmitResponse:
    recommendation = generate_recommendation(answers)
    try:
        stored = save_result(answers, recommendation)
    except SlugCollisionError as exc:
        raise HTTPException(status_code=500, detail="Failed to save quiz result") from exc

    record_event(EventType.quiz_complete, {
        "milk_preference": answers.milk_preference.value,
        "temperature": answers.temperature.value,
        "flavor_preference": answers.flavor_preference.value,
        "coffee_context": answers.coffee_context.value,
        "equipment": answers.equipment.value if answers.equipment else None,
        "recommendation_id": recommendation.best_match.id,
        "alternative_id": recommendation.alternative.id,
    })

    return QuizSubmitResponse(share_slug=stored.share_slug, recommendation=recommendation)


@app.get("/results/{slug}")
def shared_result(slug: str) -> dict:
    stored = get_result(slug)
    if stored is None:
        raise HTTPException(status_code=404, detail="Result not found")

    record_event(EventType.share_link_viewed, {"share_slug": slug})

    return {
        "share_slug": stored.share_slug,
        "answers": stored.answers.model_dump(mode="json"),
        "recommendation": stored.recommendation.model_dump(mode="json"),
        "summary": recommendation_summary(stored.recommendation),
        "created_at": stored.created_at,
    }


# ── Cafes ────────────────────────────────────────────────────────────────


@app.get("/cafes", response_model=CafeSearchResult)
def cafes(
    request: Request,
    lat: float | None = Query(default=None, ge=-90.0, le=90.0),
    lng: float | None = Query(default=None, ge=-180.0, le=180.0),
    city: str | None = Query(default=None, min_length=1, max_length=100),
    radius: int = Query(default=2000, ge=100, le=50000),
    limit: int = Query(default=10, ge=1, le=20),
) -> CafeSearchResult:
    if not check_rate_limit(_client_id(request)):
        raise HTTPException(status_code=429, detail="Too many requests. Please try again later.")

    has_coordinates = lat is not None and lng is not None
    if not has_coordinates and not city:
        raise HTTPException(
            status_code=400,
            detail="Please provide either lat/lng coordinates or a city name",
        )

    if not has_coordinates:
        geo = geocode_city(city)
        if geo is None:
            raise HTTPException(status_code=404, detail=f"Could not find location: {city}")
        lat, lng = geo.lat, geo.lng

    result = search_cafes(CafeSearchParams(
        lat=lat, lng=lng, radius=radius, limit=limit, query=city or "",
    ))

    record_event(EventType.cafe_search, {
        "has_location": has_coordinates,
        "city": city,
        "result_count": len(result.cafes),
    })

    return result


# ── Analytics ────────────────────────────────────────────────────────────


@app.post("/analytics/track", response_model=TrackEventResponse)
def track_event(body: TrackEventRequest) -> TrackEventResponse:
    record_event(body.type, body.payload)
    return TrackEventResponse()


@app.get("/analytics", dependencies=[Depends(require_admin)])
def analytics(days: int = Query(default=30, ge=1, le=365)) -> dict:
    since = time.time() - days * _SECONDS_PER_DAY
    return compute_analytics(get_events(since=since), total_results=count_results())


@app.get("/cache/stats", dependencies=[Depends(require_admin)])
def cache_stats() -> dict:
    return get_cache_stats()
