"""Tavily search client"""

import logging
from typing import Dict, List, Optional

import requests

from ..exceptions import NetworkTimeout, NomadSenseiError, ParseError, ProviderError
from ..interfaces.search_interface import SearchInterface

logger = logging.getLogger(__name__)


class TavilyClient(SearchInterface):
    """Client for Tavily search API"""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.tavily.com",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def search(self, query: str, max_results: int = 10, days: Optional[int] = None) -> List[Dict]:
        """Search Tavily, returning an empty list when anything goes wrong

        A single failed sub-query must not abort the overall answer, so
        errors are logged here instead of raised.
        """
        try:
            results = self.search_or_raise(query, max_results=max_results, days=days)
        except NomadSenseiError as e:
            logger.error(f"Tavily search failed for '{query}': {e}")
            return []
        logger.info(f"Found {len(results)} results for '{query}'")
        return results

    def search_or_raise(self, query: str, max_results: int = 10, days: Optional[int] = None) -> List[Dict]:
        """Search Tavily

        Raises:
            NetworkTimeout: No answer within the timeout
            ProviderError: Transport failure or non-success status
            ParseError: The body is not a JSON object or its results are not a list

        Result entries that are not objects are dropped.
        """
        data = {
            "api_key": self.api_key,
            "query": query,
            "max_results": max_results,
            "include_domains": [],
            "exclude_domains": [],
        }
        if days:
            data["days"] = days

        try:
            response = self.session.post(
                f"{self.base_url}/search",
                headers={"Content-Type": "application/json"},
                json=data,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise NetworkTimeout(f"Tavily search timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise ProviderError(f"Tavily search failed with status: {status}", status) from e
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Tavily API request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError("Tavily returned a non-JSON body") from e
        if not isinstance(payload, dict):
            raise ParseError("Tavily returned an unexpected payload")

        results = payload.get("results") or []
        if not isinstance(results, list):
            raise ParseError(f"Tavily results must be a list, got {type(results).__name__}")

        well_formed = [r for r in results if isinstance(r, dict)]
        if len(well_formed) < len(results):
            logger.warning(f"Dropped {len(results) - len(well_formed)} malformed Tavily results for '{query}'")
        return well_formed
