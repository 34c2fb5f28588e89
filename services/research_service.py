# File: services/research_service.py

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


DEFAULT_QUERY = "What was a positive news story from today?"
TEST_QUERY = "search for the latest news about the charlie kirk incident"

MISSING_CREDENTIAL_ERROR = "OPENAI_API_KEY environment variable is not set"


class ResearchServiceError(Exception):
    """Raised when the research service returns an unusable response."""
    pass


class ResearchInvocationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str = "o3-deep-research"
    reasoning_effort: str = "high"
    tools: Tuple[str, ...] = ("web_search",)
    include: Tuple[str, ...] = ("web_search_call.action.sources",)

    def to_request(self, query: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "reasoning": {"effort": self.reasoning_effort},
            "tools": [{"type": tool} for tool in self.tools],
            "input": query,
            "include": list(self.include),
        }


RESEARCH_CONFIG = ResearchInvocationConfig()


class Source(BaseModel):
    url: str
    title: Optional[str] = None


class ResearchSuccess(BaseModel):
    query: str
    text: str
    sources: List[Source] = []


class ResearchFailure(BaseModel):
    query: str
    error: str


ResearchOutcome = Union[ResearchSuccess, ResearchFailure]


def resolve_query(query: Optional[str]) -> str:
    if isinstance(query, str) and query:
        return query
    return DEFAULT_QUERY


# ------------------------------------------------------------
# RESPONSE PARSING
# ------------------------------------------------------------
def _field(obj: Any, name: str) -> Any:
    # SDK objects expose attributes; raw payloads are dicts.
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_sources(response: Any) -> List[Source]:
    """
    Collects citations from web search actions and url_citation
    annotations, keeping first-seen order and dropping repeated URLs.
    """
    found: Dict[str, Source] = {}

    def add(url: Any, title: Any = None) -> None:
        if not isinstance(url, str) or not url:
            return
        if url in found:
            if found[url].title is None and isinstance(title, str) and title:
                found[url] = Source(url=url, title=title)
            return
        found[url] = Source(url=url, title=title if isinstance(title, str) and title else None)

    for item in _field(response, "output") or []:
        item_type = _field(item, "type")

        if item_type == "web_search_call":
            action = _field(item, "action")
            for source in _field(action, "sources") or []:
                add(_field(source, "url"), _field(source, "title"))

        elif item_type == "message":
            for part in _field(item, "content") or []:
                for annotation in _field(part, "annotations") or []:
                    if _field(annotation, "type") == "url_citation":
                        add(_field(annotation, "url"), _field(annotation, "title"))

    return list(found.values())


def _error_message(e: BaseException) -> str:
    message = str(e).strip()
    return message or e.__class__.__name__


# ------------------------------------------------------------
# MAIN CALL
# ------------------------------------------------------------
async def run_research(
    client: Any,
    query: str,
    config: ResearchInvocationConfig = RESEARCH_CONFIG,
) -> ResearchOutcome:
    """
    Forwards one query to the research model and maps the outcome.
    Never raises: every failure comes back as a ResearchFailure.
    """
    if client is None:
        logger.error(f"Research request rejected for '{query}': {MISSING_CREDENTIAL_ERROR}")
        return ResearchFailure(query=query, error=MISSING_CREDENTIAL_ERROR)

    try:
        logger.info(f"Research request: model={config.model} query='{query}'")
        response = await client.responses.create(**config.to_request(query))

        text = _field(response, "output_text")
        if not isinstance(text, str):
            raise ResearchServiceError("Research service returned no output text")

        sources = extract_sources(response)
        logger.info(f"Research completed for '{query}' ({len(text)} chars, {len(sources)} sources)")
        return ResearchSuccess(query=query, text=text, sources=sources)

    except Exception as e:
        logger.error(f"Research request failed for '{query}': {e}", exc_info=True)
        return ResearchFailure(query=query, error=_error_message(e))
