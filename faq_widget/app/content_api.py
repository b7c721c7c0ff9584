"""
Development Content API.

Serves the bundled sample FAQ over the same two endpoints the real content
service exposes, so a local host can point HttpContentSource at itself
(FAQ_API_BASE_URL=http://localhost:8000).
"""

from fastapi import APIRouter, HTTPException

from ..content.schemas import QueryPayload, QueryRequest, WelcomePayload
from ..data.sample_faq import SAMPLE_QUERIES, SAMPLE_WELCOME

router = APIRouter(prefix="/api", tags=["content"])


@router.get("/welcome", response_model=WelcomePayload)
def welcome():
    return SAMPLE_WELCOME


@router.post("/query", response_model=QueryPayload, response_model_exclude_none=True)
def query(request: QueryRequest):
    payload = SAMPLE_QUERIES.get(request.key)
    if payload is None:
        raise HTTPException(status_code=404, detail=f"Unknown topic '{request.key}'")
    return payload
