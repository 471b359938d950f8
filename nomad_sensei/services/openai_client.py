"""OpenAI-compatible chat completion client"""

import logging
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from ..exceptions import NetworkTimeout, ProviderError
from ..interfaces.llm_interface import LLMInterface

logger = logging.getLogger(__name__)


class OpenAIClient(LLMInterface):
    """Client for the OpenAI chat completions API"""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model_name: str = "gpt-4o-mini",
        timeout: float = 60.0,
        client: Optional[OpenAI] = None,
    ):
        """Initialize the client; failed calls are never retried"""
        self.model_name = model_name
        self.timeout = timeout
        self.client = client or OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    def chat(
        self,
        messages: List[Dict[str, Any]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> Any:
        """Execute chat completion"""
        params: Dict[str, Any] = {
            "model": model or self.model_name,
            "messages": messages,
            "timeout": self.timeout,
        }
        if temperature is not None:
            params["temperature"] = temperature
        if max_tokens is not None:
            params["max_tokens"] = max_tokens

        logger.debug(f"Sending {len(messages)} messages to {params['model']}")
        try:
            response = self.client.chat.completions.create(**params)
        except openai.APITimeoutError as e:
            raise NetworkTimeout(f"Chat completion timed out after {self.timeout}s") from e
        except openai.APIStatusError as e:
            raise ProviderError(
                f"Chat completion failed with status: {e.status_code}", e.status_code
            ) from e
        except openai.APIError as e:
            raise ProviderError(f"Chat completion request failed: {e}") from e

        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.debug(
                f"Tokens used - Prompt: {usage.prompt_tokens}, Completion: {usage.completion_tokens}"
            )
        return response
