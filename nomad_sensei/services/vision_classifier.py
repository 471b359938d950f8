"""Landmark recognition for submitted photos"""

import logging
import math
from typing import Any, Dict, Optional

from ..exceptions import ImageReadError, NetworkTimeout, NomadSenseiError, ParseError
from ..interfaces.llm_interface import LLMInterface
from ..models.travel_models import ImageReference, UNKNOWN_LOCATION, VisionJudgment
from ..utils.image_utils import encode_image_data_url, load_image_bytes
from ..utils.response_parser import ResponseParser

logger = logging.getLogger(__name__)

VISION_PROMPT = """Analyze this image and identify any landmarks, tourist attractions, or notable locations. Please provide:
1. The name of the landmark/location (if identifiable)
2. The city and country
3. Confidence level (0.0-1.0)
4. Brief description of what you see

Respond in JSON format like this:
{
  "landmark": "landmark name or 'Unknown'",
  "location": "City, Country or 'Unknown'",
  "confidence": 0.85,
  "description": "brief description of what you see",
  "isLandmark": true/false
}"""


class VisionClassifier:
    """Service for identifying landmarks in photos"""

    def __init__(
        self,
        llm_client: LLMInterface,
        model_name: Optional[str] = None,
        temperature: float = 0.3,
        max_tokens: int = 500,
    ):
        """Initialize vision classifier

        Args:
            llm_client: Multimodal LLM client
            model_name: Vision model override, None to use the client default
            temperature: Sampling temperature
            max_tokens: Completion token cap
        """
        self.llm = llm_client
        self.model_name = model_name
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.parser = ResponseParser()

    def _create_messages(self, data_url: str) -> list:
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": VISION_PROMPT},
                    {"type": "image_url", "image_url": {"url": data_url, "detail": "high"}},
                ],
            }
        ]

    def classify(self, image: ImageReference) -> VisionJudgment:
        """Judge what the photo shows; failures come back as degraded judgments"""
        try:
            data_url = encode_image_data_url(load_image_bytes(image))
            response = self.llm.chat(
                self._create_messages(data_url),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                model=self.model_name,
            )
            content = self.parser.extract_content(response)
        except NetworkTimeout as e:
            logger.error(f"Image analysis timed out: {e}")
            return VisionJudgment.timeout()
        except ImageReadError as e:
            logger.error(f"Image could not be read: {e}")
            return VisionJudgment.failed()
        except NomadSenseiError as e:
            logger.error(f"Image analysis error: {e}")
            return VisionJudgment.failed()

        try:
            judgment = self.parse_judgment(self.parser.extract_json(content))
        except ParseError as e:
            logger.warning(f"Unparseable vision output ({e}): {content[:100]}")
            return VisionJudgment.unparsed(content)

        logger.info(
            f"Vision analysis result: {judgment.landmark} ({judgment.location}), "
            f"confidence {judgment.confidence:.2f}"
        )
        return judgment

    @staticmethod
    def parse_judgment(parsed: Dict[str, Any]) -> VisionJudgment:
        """Build a judgment from the model's JSON, filling in missing fields"""
        confidence = parsed.get("confidence")
        if confidence is None:
            confidence = 0.5
        try:
            confidence = float(confidence)
        except (TypeError, ValueError) as e:
            raise ParseError(f"Invalid confidence value: {confidence!r}") from e
        if math.isnan(confidence):
            raise ParseError("Confidence is not a number")
        confidence = min(max(confidence, 0.0), 1.0)

        is_landmark = parsed.get("isLandmark", False)
        if isinstance(is_landmark, str):
            is_landmark = is_landmark.strip().lower() == "true"

        return VisionJudgment(
            landmark=str(parsed.get("landmark") or UNKNOWN_LOCATION),
            location=str(parsed.get("location") or "Unknown"),
            confidence=confidence,
            description=str(parsed.get("description") or "Unable to identify specific details"),
            is_landmark=bool(is_landmark),
        )
