# File: api/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter


router = APIRouter()


@router.get("/health")
async def health_check():
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
