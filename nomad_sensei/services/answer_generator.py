"""Cited answer generation"""

import json
import logging
from typing import Dict, List, Optional

from ..exceptions import NetworkTimeout, NomadSenseiError
from ..interfaces.llm_interface import LLMInterface
from ..utils.response_parser import ResponseParser

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are NomadSensei, a multilingual mobile concierge. Generate travel advice based on the search results provided.
Format your response in plain text with citations (¹,²,³) that correspond to the source URLs.
Keep answers under 300 words for regular queries and 700 for itineraries.
Be friendly, informative, and safety-conscious."""

TIMEOUT_APOLOGY = "I apologize, but the request timed out. Please try again with a shorter query."
ERROR_APOLOGY = "I apologize, but I encountered an error generating a response. Please try again."


class AnswerGenerator:
    """Service for writing the final answer from search results"""

    def __init__(
        self,
        llm_client: LLMInterface,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        model_name: Optional[str] = None,
    ):
        self.llm = llm_client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.model_name = model_name
        self.parser = ResponseParser()

    def _create_messages(self, query: str, results: List[Dict]) -> List[Dict[str, str]]:
        user_prompt = (
            f"User query: {query}\n\n"
            f"Search results:\n{json.dumps(results, indent=2, ensure_ascii=False)}\n\n"
            "Generate a comprehensive answer with citations."
        )
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt},
        ]

    def generate(self, query: str, results: List[Dict]) -> str:
        """Generate the answer text; provider failures become apologies"""
        try:
            response = self.llm.chat(
                self._create_messages(query, results),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                model=self.model_name,
            )
            return self.parser.extract_content(response)
        except NetworkTimeout as e:
            logger.error(f"Answer generation timed out: {e}")
            return TIMEOUT_APOLOGY
        except NomadSenseiError as e:
            logger.error(f"Answer generation error: {e}")
            return ERROR_APOLOGY
