"""Helpers for reading chat completion responses"""

import json
import logging
from typing import Any, Dict

from ..exceptions import ParseError

logger = logging.getLogger(__name__)


class ResponseParser:
    """Utility class for parsing LLM responses."""

    def extract_content(self, response: Any) -> str:
        """
        Extract and return the content string from an LLM response.

        Expected structure:
        {
            "choices": [
                {
                    "message": {
                        "content": "Generated text..."
                    }
                }
            ]
        }
        """
        try:
            # Support both dict-style and attribute-style access
            if isinstance(response, dict):
                content = response["choices"][0]["message"]["content"]
            else:
                content = response.choices[0].message.content
        except (KeyError, IndexError, AttributeError, TypeError) as e:
            raise ParseError("Cannot extract content from LLM response") from e
        if content is None:
            raise ParseError("LLM response has no message content")
        return content

    def extract_json(self, content: str) -> Dict[str, Any]:
        """
        Parse the JSON object embedded in a model reply.

        Assumes the JSON is enclosed between the first '{' and the last '}',
        so surrounding prose or code fences are ignored.
        """
        start = content.find('{')
        end = content.rfind('}')
        if start == -1 or end == -1 or end < start:
            raise ParseError("No JSON object found in response")
        json_str = content[start:end + 1]
        try:
            parsed = json.loads(json_str)
        except json.JSONDecodeError as e:
            logger.debug(f"Invalid JSON in response: {json_str[:200]}")
            raise ParseError("Invalid JSON extracted from response") from e
        if not isinstance(parsed, dict):
            raise ParseError("Extracted JSON is not an object")
        return parsed
