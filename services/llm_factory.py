#File: services/llm_factory.py
import logging
from typing import Optional

from openai import AsyncOpenAI

from api.config import Settings

logger = logging.getLogger(__name__)


class LLMFactory:
    """
    Builds the single research client shared by every request.
    """

    @staticmethod
    def create_research_client(settings: Settings) -> Optional[AsyncOpenAI]:
        """
        Returns None when no credential is configured, so the server can
        still start and answer the search routes with a failure envelope.
        """
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY not set; search requests will fail until it is configured")
            return None

        logger.info(
            f"Initializing research client (timeout={settings.openai_timeout}s, "
            f"max_retries={settings.openai_max_retries})"
        )
        try:
            return AsyncOpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                timeout=settings.openai_timeout,
                max_retries=settings.openai_max_retries,
            )
        except Exception as e:
            logger.error(f"Failed to initialize research client: {e}")
            raise
