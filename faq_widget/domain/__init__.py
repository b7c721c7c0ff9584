"""
Domain Layer - Static FAQ Content

Defines the immutable content model: Topics, Sub-topics and the
FAQContent snapshot published after each successful load.
"""

from faq_widget.domain.models import FAQContent, Topic

__all__ = [
    "FAQContent",
    "Topic",
]
