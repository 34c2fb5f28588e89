# api/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Any, Optional
import logging

from api.config import Settings
from api.routers import health, news
from services.llm_factory import LLMFactory
from services.research_service import TEST_QUERY

logger = logging.getLogger(__name__)

API_ENDPOINTS = {
    "GET /api/news": "Search for latest news (default: charlie kirk incident)",
    "POST /api/news": "Search for news with custom query",
    "GET /health": "Health check",
}


def _log_banner(settings: Settings) -> None:
    base_url = f"http://localhost:{settings.port}"
    logger.info(f"🚀 Server running on {base_url}")
    logger.info("📡 API endpoints:")
    logger.info(f"   GET  {base_url}/api/news")
    logger.info(f"   POST {base_url}/api/news")
    logger.info(f"   GET  {base_url}/health")


def _validation_message(exc: RequestValidationError) -> str:
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        msg = err.get("msg", "invalid value")
        details.append(f"{loc}: {msg}" if loc else msg)
    if not details:
        return "Invalid request payload"
    return "Invalid request payload: " + "; ".join(details)


def create_app(research_client: Any = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the gateway. A research_client passed in is used as-is and
    left open on shutdown; otherwise one is created from settings.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = app.state.research_client is None
        if owns_client:
            app.state.research_client = LLMFactory.create_research_client(settings)
        _log_banner(settings)
        yield
        if owns_client and app.state.research_client is not None:
            await app.state.research_client.close()
            app.state.research_client = None
        logger.info("🛑 Shutting down News Research Gateway")

    app = FastAPI(
        title="OpenAI News Search API",
        version="1.0.0",
        description="Gateway that forwards news queries to an OpenAI deep research model.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.research_client = research_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"success": False, "error": _validation_message(exc)},
        )

    app.include_router(health.router)
    app.include_router(news.router, prefix="/api", tags=["News Search"])

    @app.get("/")
    async def root():
        return {
            "message": "OpenAI News Search API",
            "endpoints": dict(API_ENDPOINTS),
            "example": {
                "POST /api/news": {
                    "body": {"query": TEST_QUERY}
                }
            },
        }

    return app


settings = Settings.from_env()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
app = create_app(settings=settings)


def main() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
