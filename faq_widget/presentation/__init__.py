"""
Presentation Layer - Render Tree and HTML

Defines the pure PresentationAdapter (state -> RenderTree) and the Jinja2
renderer that turns a RenderTree into an embeddable HTML fragment.
"""

from faq_widget.presentation.adapter import render_widget
from faq_widget.presentation.loader import render_html
from faq_widget.presentation.render_tree import (
    Block,
    Button,
    LoadingPlaceholder,
    MessagePane,
    Panel,
    RenderTree,
    SelectorGroup,
    TranscriptEntry,
    TypingIndicator,
)

__all__ = [
    "Block",
    "Button",
    "LoadingPlaceholder",
    "MessagePane",
    "Panel",
    "RenderTree",
    "SelectorGroup",
    "TranscriptEntry",
    "TypingIndicator",
    "render_html",
    "render_widget",
]
