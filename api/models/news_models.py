# File: api/models/news_models.py
from pydantic import BaseModel, StrictStr
from typing import List, Optional

from services.research_service import Source


class NewsSearchRequest(BaseModel):
    # Missing, null or empty falls back to DEFAULT_QUERY.
    query: Optional[StrictStr] = None


class NewsSearchData(BaseModel):
    query: Optional[str] = None
    response: str
    sources: List[Source] = []


class NewsEnvelope(BaseModel):
    success: bool
    data: Optional[NewsSearchData] = None
    error: Optional[str] = None
