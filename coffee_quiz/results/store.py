from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass, field

from ..recommendations.models import QuizAnswers, RecommendationOutput

SLUG_LENGTH = 10
MAX_SLUG_ATTEMPTS = 5
_SLUG_ALPHABET = string.ascii_lowercase + string.digits


class SlugCollisionError(RuntimeError):
    """No unused share slug was found within ``MAX_SLUG_ATTEMPTS`` tries."""


@dataclass(frozen=True)
class StoredResult:
    share_slug: str
    answers: QuizAnswers
    recommendation: RecommendationOutput
    created_at: float = field(default_factory=time.time)


_results: dict[str, StoredResult] = {}


def generate_share_slug() -> str:
    return "".join(secrets.choice(_SLUG_ALPHABET) for _ in range(SLUG_LENGTH))


def save_result(answers: QuizAnswers, recommendation: RecommendationOutput) -> StoredResult:
    """Store a recommendation under a fresh share slug.

    A colliding slug is regenerated, up to ``MAX_SLUG_ATTEMPTS`` slugs in
    total. Existing results are never overwritten.
    """
    for _ in range(MAX_SLUG_ATTEMPTS):
        slug = generate_share_slug()
        if slug not in _results:
            break
    else:
        raise SlugCollisionError(f"No free share slug after {MAX_SLUG_ATTEMPTS} attempts")

    result = StoredResult(share_slug=slug, answers=answers, recommendation=recommendation)
    _results[slug] = result
    return result


def get_result(slug: str) -> StoredResult | None:
    return _results.get(slug)


def count_results() -> int:
    return len(_results)


def clear_results() -> None:
    _results.clear()
