"""Travel concierge pipeline"""

import asyncio
import logging
from functools import partial
from typing import Callable, Dict, List, Optional

from ..interfaces.llm_interface import LLMInterface
from ..interfaces.search_interface import SearchInterface
from ..models.travel_models import (
    ImageReference,
    PipelineStage,
    SenseiConfig,
    Source,
    TravelResponse,
    VisionJudgment,
)
from .action_deriver import ActionDeriver
from .answer_generator import AnswerGenerator
from .openai_client import OpenAIClient
from .query_planner import HIGH_CONFIDENCE_THRESHOLD, QueryPlanner
from .result_aggregator import ResultAggregator
from .tavily_client import TavilyClient
from .vision_classifier import VisionClassifier

logger = logging.getLogger(__name__)

StageCallback = Callable[[PipelineStage], None]


def build_title(judgment: Optional[VisionJudgment]) -> str:
    if judgment is None:
        return "Travel Information"
    if judgment.is_landmark and judgment.confidence > HIGH_CONFIDENCE_THRESHOLD:
        return f"About {judgment.landmark}"
    return f"Image Analysis: {judgment.location}"


def build_sources(results: List[Dict], limit: int = 5) -> List[Source]:
    return [
        Source(number=i, title=r.get("title") or "", url=r.get("url") or "")
        for i, r in enumerate(results[:limit], start=1)
    ]


class TravelAgent:
    """Answers a travel question, optionally about a photo, with cited sources

    The pipeline runs: analyze image, plan queries, search, generate,
    derive actions. Each stage falls back to a default value on failure,
    so ``process_query`` always returns a response.
    """

    def __init__(
        self,
        vision_classifier: VisionClassifier,
        planner: QueryPlanner,
        aggregator: ResultAggregator,
        generator: AnswerGenerator,
        action_deriver: ActionDeriver,
        max_sources: int = 5,
    ):
        self.vision = vision_classifier
        self.planner = planner
        self.aggregator = aggregator
        self.generator = generator
        self.actions = action_deriver
        self.max_sources = max_sources

    @classmethod
    def from_clients(
        cls,
        llm_client: LLMInterface,
        search_client: SearchInterface,
        config: SenseiConfig,
    ) -> "TravelAgent":
        """Wire the pipeline services around existing clients"""
        return cls(
            vision_classifier=VisionClassifier(
                llm_client,
                model_name=config.vision_model_name,
                temperature=config.vision_temperature,
                max_tokens=config.vision_max_tokens,
            ),
            planner=QueryPlanner(recency_days=config.recency_days),
            aggregator=ResultAggregator(search_client, max_results=config.max_results),
            generator=AnswerGenerator(
                llm_client,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
                model_name=config.model_name,
            ),
            action_deriver=ActionDeriver(
                maps_url_template=config.maps_url_template,
                max_actions=config.max_actions,
            ),
            max_sources=config.max_sources,
        )

    async def process_query(
        self,
        query: str,
        image: Optional[ImageReference] = None,
        on_stage: Optional[StageCallback] = None,
    ) -> TravelResponse:
        """Run the whole pipeline for one submission

        Args:
            query: The user's question, may be empty when a photo is attached
            image: Photo bytes or path
            on_stage: Called with each stage as the pipeline enters it

        Returns:
            The structured response; an "Error" response if something
            unexpected escaped the stages
        """
        try:
            return await self._run(query, image, on_stage)
        except Exception:
            logger.exception("Processing error")
            return TravelResponse.error()

    async def _run(
        self,
        query: str,
        image: Optional[ImageReference],
        on_stage: Optional[StageCallback],
    ) -> TravelResponse:
        def enter(stage: PipelineStage) -> None:
            logger.debug(f"Pipeline stage: {stage.value}")
            if on_stage is not None:
                on_stage(stage)

        loop = asyncio.get_running_loop()
        enter(PipelineStage.IDLE)

        judgment = None
        if image is not None:
            enter(PipelineStage.ANALYZING_IMAGE)
            judgment = await loop.run_in_executor(None, self.vision.classify, image)

        enter(PipelineStage.PLANNING)
        queries = self.planner.plan(query, judgment)
        logger.info(f"Planned {len(queries)} search queries")

        enter(PipelineStage.SEARCHING)
        results = await self.aggregator.gather_results(
            queries, days=self.planner.recency_days_for(query)
        )

        enter(PipelineStage.GENERATING)
        answer = await loop.run_in_executor(
            None, partial(self.generator.generate, query, results)
        )

        enter(PipelineStage.DERIVING_ACTIONS)
        actions = self.actions.derive(query, judgment, results)

        response = TravelResponse(
            title=build_title(judgment),
            answer=answer,
            sources=build_sources(results, self.max_sources),
            actions=actions,
        )
        enter(PipelineStage.DONE)
        return response


def create_travel_agent(config: SenseiConfig) -> TravelAgent:
    """Create and configure the travel agent"""
    llm_client = OpenAIClient(
        api_key=config.openai_api_key,
        base_url=config.openai_base_url,
        model_name=config.model_name,
        timeout=config.llm_timeout,
    )
    search_client = TavilyClient(
        api_key=config.tavily_api_key,
        base_url=config.tavily_base_url,
        timeout=config.search_timeout,
    )
    return TravelAgent.from_clients(llm_client, search_client, config)
