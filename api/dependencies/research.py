from typing import Any

from fastapi import Request


def get_research_client(request: Request) -> Any:
    # None when no credential was configured at startup.
    return getattr(request.app.state, "research_client", None)
