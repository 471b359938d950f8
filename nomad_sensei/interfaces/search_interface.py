"""Interface for search clients"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class SearchInterface(ABC):
    """Abstract base class for search clients"""

    @abstractmethod
    def search(self, query: str, max_results: int = 10, days: Optional[int] = None) -> List[Dict]:
        """Execute search query

        Args:
            query: Search query string
            max_results: Maximum number of results to return
            days: Only return results published within this many days

        Returns:
            List of result records; empty when the search failed
        """
        pass
