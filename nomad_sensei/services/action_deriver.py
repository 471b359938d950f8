"""Suggested follow-up actions"""

from typing import Dict, List, Optional
from urllib.parse import quote

from ..models.travel_models import Action, UNKNOWN_LOCATION, VisionJudgment
from .query_planner import mentions_itinerary

SAVE_ITINERARY_TARGET = "#save"
BOOKING_KEYWORDS = ("ticket", "book")


class ActionDeriver:
    """Proposes map, itinerary and booking actions for a response"""

    def __init__(
        self,
        maps_url_template: str = "https://www.google.com/maps/search/{query}",
        max_actions: int = 3,
    ):
        self.maps_url_template = maps_url_template
        self.max_actions = max_actions

    def derive(
        self,
        query: str,
        judgment: Optional[VisionJudgment],
        results: List[Dict],
    ) -> List[Action]:
        """Rules apply in priority order: maps, itinerary, tickets"""
        actions = []

        if judgment is not None and judgment.landmark and judgment.landmark != UNKNOWN_LOCATION:
            search_term = judgment.landmark if judgment.is_landmark else judgment.location
            actions.append(Action(
                label="Open in Maps",
                url=self.maps_url_template.format(query=quote(search_term, safe="!~*'()")),
            ))

        if mentions_itinerary(query):
            actions.append(Action(label="Save Itinerary", url=SAVE_ITINERARY_TARGET))

        ticket_result = next(
            (
                r for r in results
                if any(keyword in str(r.get("title") or "").lower() for keyword in BOOKING_KEYWORDS)
            ),
            None,
        )
        if ticket_result is not None:
            actions.append(Action(label="Book Tickets", url=ticket_result.get("url") or ""))

        return actions[:self.max_actions]
