"""
Content Layer - FAQ Content Sources

Defines the ContentSource contract, its HTTP and static implementations,
and the sequential all-or-nothing load cycle that builds FAQContent.
"""

from faq_widget.content.exceptions import ContentSourceError, DecodeError, NetworkError
from faq_widget.content.schemas import QueryPayload, QueryRequest, WelcomePayload
from faq_widget.content.interface import ContentEndpoint, ContentSource
from faq_widget.content.adapters import HttpContentSource, StaticContentSource
from faq_widget.content.loader import load_faq_content

__all__ = [
    "ContentEndpoint",
    "ContentSource",
    "ContentSourceError",
    "DecodeError",
    "HttpContentSource",
    "NetworkError",
    "QueryPayload",
    "QueryRequest",
    "StaticContentSource",
    "WelcomePayload",
    "load_faq_content",
]
