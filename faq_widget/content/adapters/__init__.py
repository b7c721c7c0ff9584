from faq_widget.content.adapters.http_adapter import HttpContentSource
from faq_widget.content.adapters.static_adapter import StaticContentSource

__all__ = [
    "HttpContentSource",
    "StaticContentSource",
]
