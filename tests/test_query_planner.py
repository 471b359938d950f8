"""Tests for search query planning"""

from datetime import date

import pytest

from nomad_sensei.models.travel_models import JudgmentTier, VisionJudgment
from nomad_sensei.services.query_planner import QueryPlanner, resolve_tier

TODAY = date(2026, 10, 18)


def judgment(confidence, is_landmark=True, landmark="Eiffel Tower", location="Paris, France"):
    return VisionJudgment(
        landmark=landmark,
        location=location,
        confidence=confidence,
        description="iron lattice tower",
        is_landmark=is_landmark,
    )


@pytest.mark.parametrize("query", [
    "Best ramen in Osaka",
    "Build me an ITINERARY for Rome",
    "What's open today in Lisbon?",
    "",
])
def test_raw_query_comes_first(query):
    """Without a judgment the raw text is always the first query"""
    queries = QueryPlanner().plan(query, today=TODAY)

    assert queries[0] == query


def test_itinerary_request():
    """Itinerary requests get a cultural activities query"""
    query = "Build me a 3-day cultural itinerary for Tokyo"

    queries = QueryPlanner().plan(query, today=TODAY)

    assert queries == [
        "Build me a 3-day cultural itinerary for Tokyo",
        "Build me a 3-day cultural itinerary for Tokyo cultural activities recommendations",
    ]


def test_current_event_query_includes_date():
    query = "What's happening in Paris this week?"

    queries = QueryPlanner().plan(query, today=TODAY)

    assert queries == [query, f"{query} events 10/18/2026"]


def test_keywords_are_case_insensitive():
    query = "ITINERARY for TODAY in Kyoto"

    queries = QueryPlanner().plan(query, today=TODAY)

    assert queries == [
        query,
        f"{query} cultural activities recommendations",
        f"{query} events 10/18/2026",
    ]


def test_no_keywords_means_single_query():
    """Extra queries are never appended without their keywords"""
    assert QueryPlanner().plan("Museums in Madrid", today=TODAY) == ["Museums in Madrid"]


def test_landmark_queries():
    """A confident landmark judgment yields three landmark queries"""
    queries = QueryPlanner().plan("what is this?", judgment(0.85), today=TODAY)

    assert queries == [
        "Eiffel Tower history visitor information tickets",
        "Paris, France attractions near Eiffel Tower",
        "Eiffel Tower travel guide tips",
    ]


def test_low_confidence_queries():
    queries = QueryPlanner().plan("what is this?", judgment(0.45), today=TODAY)

    assert queries == [
        "Paris, France tourist attractions travel guide",
        "iron lattice tower travel destination information",
    ]


def test_confident_non_landmark_uses_scene_queries():
    queries = QueryPlanner().plan("where am I?", judgment(0.9, is_landmark=False), today=TODAY)

    assert len(queries) == 2
    assert queries[0] == "Paris, France tourist attractions travel guide"


def test_unusable_judgment_falls_back_to_text():
    """Judgments below the low threshold are ignored"""
    failed = VisionJudgment.failed()

    queries = QueryPlanner().plan("Build my itinerary", failed, today=TODAY)

    assert queries == ["Build my itinerary", "Build my itinerary cultural activities recommendations"]


@pytest.mark.parametrize("confidence,is_landmark,expected", [
    (0.6, True, JudgmentTier.HIGH_CONFIDENCE_LANDMARK),
    (0.59, True, JudgmentTier.LOW_CONFIDENCE),
    (0.3, False, JudgmentTier.LOW_CONFIDENCE),
    (0.29, True, JudgmentTier.NO_JUDGMENT),
])
def test_tier_thresholds(confidence, is_landmark, expected):
    assert resolve_tier(judgment(confidence, is_landmark)) == expected


def test_recency_only_for_this_week():
    planner = QueryPlanner(recency_days=7)

    assert planner.recency_days_for("Events in Berlin THIS WEEK") == 7
    assert planner.recency_days_for("Events in Berlin today") is None


def test_current_event_keywords_match_inside_words():
    """Keywords match inside words, so snow counts as now"""
    query = "Ski resorts with fresh snow"

    assert QueryPlanner().plan(query, today=TODAY) == [query, f"{query} events 10/18/2026"]
