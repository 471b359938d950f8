"""Data models for the travel concierge pipeline"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

ImageReference = Union[bytes, str, Path]

UNKNOWN_LOCATION = "Unknown Location"


@dataclass
class SenseiConfig:
    """Configuration for the concierge pipeline"""
    openai_api_key: str = ""
    tavily_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    tavily_base_url: str = "https://api.tavily.com"
    model_name: str = "gpt-4o-mini"
    vision_model_name: str = "gpt-4o-mini"
    temperature: float = 0.7
    vision_temperature: float = 0.3
    max_tokens: int = 1000
    vision_max_tokens: int = 500
    search_timeout: float = 30.0
    llm_timeout: float = 60.0
    max_results: int = 10
    max_sources: int = 5
    max_actions: int = 3
    recency_days: int = 7
    maps_url_template: str = "https://www.google.com/maps/search/{query}"
    log_level: str = "INFO"


@dataclass(frozen=True)
class UserQuery:
    """A submitted question with an optional photo"""
    text: str
    image: Optional[ImageReference] = None


@dataclass(frozen=True)
class VisionJudgment:
    """Structured guess about the subject of a photo"""
    landmark: str
    location: str
    confidence: float
    description: str
    is_landmark: bool = False

    @classmethod
    def timeout(cls) -> "VisionJudgment":
        return cls(
            landmark="Analysis Timeout",
            location="Unknown",
            confidence=0.0,
            description="Image analysis timed out. Please try again.",
        )

    @classmethod
    def failed(cls) -> "VisionJudgment":
        return cls(
            landmark="Analysis Failed",
            location="Unknown",
            confidence=0.0,
            description="Unable to analyze the image. Please try again.",
        )

    @classmethod
    def unparsed(cls, raw_output: str, excerpt_length: int = 100) -> "VisionJudgment":
        """Degraded judgment for a reply that was not the expected JSON"""
        description = raw_output[:excerpt_length]
        if len(raw_output) > excerpt_length:
            description += "..."
        return cls(
            landmark="Unidentified Location",
            location="Unknown",
            confidence=0.3,
            description=description,
        )


class JudgmentTier(Enum):
    """How much the planner may rely on a vision judgment"""
    NO_JUDGMENT = "no_judgment"
    LOW_CONFIDENCE = "low_confidence"
    HIGH_CONFIDENCE_LANDMARK = "high_confidence_landmark"


class PipelineStage(Enum):
    """Stages of one query/response cycle"""
    IDLE = "idle"
    ANALYZING_IMAGE = "analyzing_image"
    PLANNING = "planning"
    SEARCHING = "searching"
    GENERATING = "generating"
    DERIVING_ACTIONS = "deriving_actions"
    DONE = "done"


@dataclass(frozen=True)
class Source:
    """Numbered citation source"""
    number: int
    title: str
    url: str


@dataclass(frozen=True)
class Action:
    """Suggested follow-up action"""
    label: str
    url: str


@dataclass
class TravelResponse:
    """Structured answer handed back to the caller"""
    title: str
    answer: str
    sources: List[Source] = field(default_factory=list)
    actions: List[Action] = field(default_factory=list)

    @classmethod
    def error(cls) -> "TravelResponse":
        return cls(
            title="Error",
            answer="I apologize, but I encountered an error processing your request. Please try again.",
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ChatExchange:
    """One question/answer pair kept in a session history"""
    query: UserQuery
    response: TravelResponse
    timestamp: datetime = field(default_factory=datetime.now)
