"""Parallel search fan-out and result deduplication"""

import asyncio
import logging
from functools import partial
from typing import Dict, Iterable, List, Optional

from ..interfaces.search_interface import SearchInterface

logger = logging.getLogger(__name__)


def deduplicate_results(results: Iterable[Dict]) -> List[Dict]:
    """Drop results whose url was already seen, keeping the first occurrence"""
    seen = set()
    unique = []
    for result in results:
        url = result.get("url")
        if url in seen:
            continue
        seen.add(url)
        unique.append(result)
    return unique


class ResultAggregator:
    """Runs every planned query against the search client and merges the results"""

    def __init__(self, search_client: SearchInterface, max_results: int = 10):
        self.search = search_client
        self.max_results = max_results

    async def gather_results(self, queries: List[str], days: Optional[int] = None) -> List[Dict]:
        """Search all queries concurrently and wait for every one of them

        Args:
            queries: Search queries in fan-out order
            days: Recency window applied to every query

        Returns:
            Flattened results in query order, unique by url
        """
        loop = asyncio.get_running_loop()
        batches = await asyncio.gather(
            *[
                loop.run_in_executor(None, partial(self.search.search, query, self.max_results, days))
                for query in queries
            ],
            return_exceptions=True,
        )

        flattened = []
        for query, batch in zip(queries, batches):
            if isinstance(batch, BaseException):
                logger.error(f"Search for '{query}' raised {type(batch).__name__}: {batch}")
                continue
            flattened.extend(batch)

        unique = deduplicate_results(flattened)
        logger.info(f"Collected {len(unique)} unique results from {len(queries)} queries")
        return unique
