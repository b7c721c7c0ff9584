"""
Content Source - Wire Payload Schemas

Pydantic models for the two calls made against the remote FAQ service.
Responses are validated against these before being turned into domain
objects, so a malformed payload surfaces as a DecodeError instead of a
half-built Topic.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class WelcomePayload(BaseModel):
    """Response of GET /api/welcome."""
    message: str
    queries: List[str] = Field(
        default_factory=list,
        description="Ordered topic keys. Each is fetched with a QueryRequest."
    )


class QueryRequest(BaseModel):
    """Body of POST /api/query."""
    key: str


class QueryPayload(BaseModel):
    """Response of POST /api/query."""
    message: str
    sub: Optional[Dict[str, str]] = Field(
        None,
        description="Sub-topic key -> sub-topic message, when the topic has children."
    )
