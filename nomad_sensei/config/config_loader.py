"""Configuration loader"""

import logging
import os

from dotenv import load_dotenv
from rich.logging import RichHandler

from ..models.travel_models import SenseiConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loader for application configuration"""

    @staticmethod
    def load_config() -> SenseiConfig:
        """Load configuration from environment

        Missing API keys are reported but not rejected; the providers will
        answer with authentication errors, which the pipeline absorbs.

        Returns:
            SenseiConfig object
        """
        # Load environment variables
        load_dotenv()

        openai_api_key = os.getenv("OPENAI_API_KEY", "")
        tavily_api_key = os.getenv("TAVILY_API_KEY", "")

        if not openai_api_key:
            logger.warning("OPENAI_API_KEY environment variable not set.")
        if not tavily_api_key:
            logger.warning("TAVILY_API_KEY environment variable not set.")

        model_name = os.getenv("MODEL_NAME", "gpt-4o-mini")

        return SenseiConfig(
            openai_api_key=openai_api_key,
            tavily_api_key=tavily_api_key,
            openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
            tavily_base_url=os.getenv("TAVILY_BASE_URL", "https://api.tavily.com"),
            model_name=model_name,
            vision_model_name=os.getenv("VISION_MODEL_NAME", model_name),
            temperature=float(os.getenv("TEMPERATURE", "0.7")),
            vision_temperature=float(os.getenv("VISION_TEMPERATURE", "0.3")),
            max_tokens=int(os.getenv("MAX_TOKENS", "1000")),
            vision_max_tokens=int(os.getenv("VISION_MAX_TOKENS", "500")),
            search_timeout=float(os.getenv("SEARCH_TIMEOUT", "30")),
            llm_timeout=float(os.getenv("LLM_TIMEOUT", "60")),
            max_results=int(os.getenv("MAX_RESULTS", "10")),
            max_sources=int(os.getenv("MAX_SOURCES", "5")),
            max_actions=int(os.getenv("MAX_ACTIONS", "3")),
            recency_days=int(os.getenv("RECENCY_DAYS", "7")),
            maps_url_template=os.getenv(
                "MAPS_URL_TEMPLATE", "https://www.google.com/maps/search/{query}"
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def setup_logging(level: str = "INFO") -> None:
    """Route log records through rich"""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
