"""Search query planning"""

from datetime import date
from typing import Callable, Dict, List, Optional

from ..models.travel_models import JudgmentTier, VisionJudgment

HIGH_CONFIDENCE_THRESHOLD = 0.6
LOW_CONFIDENCE_THRESHOLD = 0.3

# Matched as substrings on purpose: "snow" and "know" count as "now".
CURRENT_EVENT_KEYWORDS = ("now", "today", "this week")


def mentions_itinerary(text: str) -> bool:
    return "itinerary" in text.lower()


def mentions_current_events(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in CURRENT_EVENT_KEYWORDS)


def mentions_this_week(text: str) -> bool:
    return "this week" in text.lower()


def format_event_date(day: date) -> str:
    """Render a date as M/D/YYYY"""
    return f"{day.month}/{day.day}/{day.year}"


def resolve_tier(judgment: Optional[VisionJudgment]) -> JudgmentTier:
    if judgment is None:
        return JudgmentTier.NO_JUDGMENT
    if judgment.confidence >= HIGH_CONFIDENCE_THRESHOLD and judgment.is_landmark:
        return JudgmentTier.HIGH_CONFIDENCE_LANDMARK
    if judgment.confidence >= LOW_CONFIDENCE_THRESHOLD:
        return JudgmentTier.LOW_CONFIDENCE
    return JudgmentTier.NO_JUDGMENT


class QueryPlanner:
    """Turns a question and an optional photo judgment into search queries"""

    def __init__(self, recency_days: int = 7):
        self.recency_days = recency_days
        self._builders: Dict[JudgmentTier, Callable[..., List[str]]] = {
            JudgmentTier.HIGH_CONFIDENCE_LANDMARK: self._landmark_queries,
            JudgmentTier.LOW_CONFIDENCE: self._scene_queries,
            JudgmentTier.NO_JUDGMENT: self._text_queries,
        }

    def plan(
        self,
        query: str,
        judgment: Optional[VisionJudgment] = None,
        today: Optional[date] = None,
    ) -> List[str]:
        """Build the ordered list of search queries

        Args:
            query: The user's question
            judgment: Vision judgment for an attached photo, if any
            today: Date used for current-event queries, defaults to today

        Returns:
            Non-empty list of query strings in fan-out order
        """
        tier = resolve_tier(judgment)
        return self._builders[tier](query, judgment, today or date.today())

    def recency_days_for(self, query: str) -> Optional[int]:
        """Recency window for the search calls, None for no limit"""
        return self.recency_days if mentions_this_week(query) else None

    @staticmethod
    def _landmark_queries(query: str, judgment: VisionJudgment, today: date) -> List[str]:
        return [
            f"{judgment.landmark} history visitor information tickets",
            f"{judgment.location} attractions near {judgment.landmark}",
            f"{judgment.landmark} travel guide tips",
        ]

    @staticmethod
    def _scene_queries(query: str, judgment: VisionJudgment, today: date) -> List[str]:
        return [
            f"{judgment.location} tourist attractions travel guide",
            f"{judgment.description} travel destination information",
        ]

    @staticmethod
    def _text_queries(query: str, judgment: Optional[VisionJudgment], today: date) -> List[str]:
        queries = [query]
        if mentions_itinerary(query):
            queries.append(f"{query} cultural activities recommendations")
        if mentions_current_events(query):
            queries.append(f"{query} events {format_event_date(today)}")
        return queries
