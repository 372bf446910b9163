from __future__ import annotations

from unittest.mock import patch

import pytest

from coffee_quiz.recommendations.engine import generate_recommendation
from coffee_quiz.recommendations.models import QuizAnswers
from coffee_quiz.results.store import (
    MAX_SLUG_ATTEMPTS,
    SLUG_LENGTH,
    SlugCollisionError,
    clear_results,
    count_results,
    generate_share_slug,
    get_result,
    save_result,
)

ANSWERS = QuizAnswers(
    milk_preference="black",
    temperature="hot",
    flavor_preference="nutty",
    coffee_context="both",
)


def test_share_slug_shape():
    slug = generate_share_slug()
    assert len(slug) == SLUG_LENGTH
    assert slug.isalnum()
    assert slug == slug.lower()


def test_save_and_get_result():
    clear_results()
    recommendation = generate_recommendation(ANSWERS)
    stored = save_result(ANSWERS, recommendation)
    assert get_result(stored.share_slug) == stored
    assert stored.recommendation.best_match.id == recommendation.best_match.id
    assert count_results() == 1


def test_get_unknown_result():
    clear_results()
    assert get_result("missing") is None


@patch("coffee_quiz.results.store.generate_share_slug")
def test_colliding_slug_is_regenerated(mock_slug):
    clear_results()
    recommendation = generate_recommendation(ANSWERS)
    mock_slug.side_effect = ["taken", "taken", "fresh"]

    first = save_result(ANSWERS, recommendation)
    second = save_result(ANSWERS, recommendation)

    assert first.share_slug == "taken"
    assert second.share_slug == "fresh"
    assert count_results() == 2


@patch("coffee_quiz.results.store.generate_share_slug")
def test_exhausted_slug_attempts_raise_without_overwriting(mock_slug):
    clear_results()
    recommendation = generate_recommendation(ANSWERS)
    mock_slug.return_value = "taken"
    first = save_result(ANSWERS, recommendation)

    with pytest.raises(SlugCollisionError):
        save_result(ANSWERS, recommendation)

    assert mock_slug.call_count == 1 + MAX_SLUG_ATTEMPTS
    assert get_result("taken") is first
    assert count_results() == 1
