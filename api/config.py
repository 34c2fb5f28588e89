# File: api/config.py
import os
import logging
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)


def load_environment() -> str:
    env = os.getenv("APP_ENV", "local")
    if env == "local":
        load_dotenv(".env.local")
    else:
        load_dotenv(".env")
    return env


class Settings(BaseModel):
    app_env: str = "local"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_timeout: float = 600.0
    # The gateway never retries; this only controls the SDK transport.
    openai_max_retries: int = 0

    allowed_origins: List[str] = []

    @classmethod
    def from_env(cls) -> "Settings":
        env = load_environment()

        if env == "local":
            origins = ["http://localhost:3000", "http://localhost:5173"]
        else:
            origins_str = os.getenv("ALLOWED_ORIGINS", "")
            origins = [origin.strip() for origin in origins_str.split(",") if origin.strip()]

        return cls(
            app_env=env,
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
            openai_timeout=float(os.getenv("OPENAI_TIMEOUT", "600")),
            openai_max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "0")),
            allowed_origins=origins,
        )
