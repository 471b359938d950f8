from .travel_models import (
    Action,
    ChatExchange,
    ImageReference,
    JudgmentTier,
    PipelineStage,
    SenseiConfig,
    Source,
    TravelResponse,
    UNKNOWN_LOCATION,
    UserQuery,
    VisionJudgment,
)

__all__ = [
    "Action",
    "ChatExchange",
    "ImageReference",
    "JudgmentTier",
    "PipelineStage",
    "SenseiConfig",
    "Source",
    "TravelResponse",
    "UNKNOWN_LOCATION",
    "UserQuery",
    "VisionJudgment",
]
