# api/routers/news.py
from typing import Any, Optional
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies.research import get_research_client
from api.models.news_models import NewsEnvelope, NewsSearchData, NewsSearchRequest
from services.research_service import (
    TEST_QUERY,
    ResearchSuccess,
    resolve_query,
    run_research,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def envelope_response(envelope: NewsEnvelope, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.model_dump(exclude_none=True))


def failure_response(error: str, status_code: int = 500) -> JSONResponse:
    return envelope_response(NewsEnvelope(success=False, error=error), status_code=status_code)


async def _search(client: Any, query: str, echo_query: bool) -> JSONResponse:
    try:
        outcome = await run_research(client, query)

        if not isinstance(outcome, ResearchSuccess):
            return failure_response(outcome.error)

        return envelope_response(NewsEnvelope(
            success=True,
            data=NewsSearchData(
                query=outcome.query if echo_query else None,
                response=outcome.text,
                sources=outcome.sources,
            ),
        ))

    except Exception as e:
        logger.error("Error in news search endpoint", exc_info=True)
        return failure_response(str(e) or e.__class__.__name__)


@router.post("/news", response_model=NewsEnvelope)
async def search_news(
    payload: Optional[NewsSearchRequest] = None,
    client: Any = Depends(get_research_client),
) -> JSONResponse:
    query = resolve_query(payload.query if payload else None)
    return await _search(client, query, echo_query=True)


@router.get("/news", response_model=NewsEnvelope)
async def quick_test_news(client: Any = Depends(get_research_client)) -> JSONResponse:
    return await _search(client, TEST_QUERY, echo_query=False)
