"""Interface for LLM clients"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class LLMInterface(ABC):
    """Abstract base class for LLM clients"""

    @abstractmethod
    def chat(
        self,
        messages: List[Dict[str, Any]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> Any:
        """Execute chat completion

        Args:
            messages: List of message dictionaries with 'role' and 'content'.
                Content may be a string or a list of content parts (text, image_url).
            temperature: Sampling temperature
            max_tokens: Completion token cap
            model: Model override for this call

        Returns:
            The provider's chat completion response

        Raises:
            NetworkTimeout: The call exceeded its time bound
            ProviderError: The provider failed or rejected the request
        """
        pass
