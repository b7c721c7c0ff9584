"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from typing import Any, Optional

from pydantic import BaseModel

from ..presentation.render_tree import RenderTree


class CreateWidgetResponse(BaseModel):
    widget_id: str


class WidgetRead(BaseModel):
    widget_id: str
    is_open: bool
    is_loading: bool
    is_loaded: bool
    tree: RenderTree
    debug: Optional[dict[str, Any]] = None
