from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Any

from .store import EventType

TOP_RECOMMENDATIONS = 5


def _ranked(counter: Counter[str], limit: int | None = None) -> list[dict[str, Any]]:
    return [{"name": n, "count": c} for n, c in counter.most_common(limit)]


def _event_date(event: dict[str, Any]) -> str:
    return datetime.fromtimestamp(event["timestamp"], tz=timezone.utc).date().isoformat()


def compute_analytics(events: list[dict[str, Any]], total_results: int = 0) -> dict[str, Any]:
    starts = [e for e in events if e["type"] == EventType.quiz_start.value]
    completions = [e for e in events if e["type"] == EventType.quiz_complete.value]
    cafe_searches = [e for e in events if e["type"] == EventType.cafe_search.value]

    # Answer distributions come from completion payloads
    flavor_counter: Counter[str] = Counter()
    equipment_counter: Counter[str] = Counter()
    recommendation_counter: Counter[str] = Counter()
    for e in completions:
        if e.get("flavor_preference"):
            flavor_counter[e["flavor_preference"]] += 1
        equipment_counter[e.get("equipment") or "not-specified"] += 1
        if e.get("recommendation_id"):
            recommendation_counter[e["recommendation_id"]] += 1

    # Daily activity
    daily: dict[str, dict[str, int]] = {}
    for e in events:
        day = daily.setdefault(_event_date(e), {"starts": 0, "completions": 0})
        if e["type"] == EventType.quiz_start.value:
            day["starts"] += 1
        elif e["type"] == EventType.quiz_complete.value:
            day["completions"] += 1
    daily_activity = [{"date": d, **counts} for d, counts in sorted(daily.items())]

    return {
        "summary": {
            "quiz_starts": len(starts),
            "quiz_completions": len(completions),
            "conversion_rate": (
                round(len(completions) / len(starts) * 100, 1) if starts else 0.0
            ),
            "cafe_searches": len(cafe_searches),
            "total_results": total_results,
        },
        "flavor_preferences": _ranked(flavor_counter),
        "equipment": _ranked(equipment_counter),
        "top_recommendations": _ranked(recommendation_counter, TOP_RECOMMENDATIONS),
        "daily_activity": daily_activity,
    }
