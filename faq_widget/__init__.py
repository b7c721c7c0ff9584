"""
FAQ Widget

An embeddable conversational FAQ widget: a toggle control opening a panel
that walks users through hierarchical question/answer topics loaded from a
remote content service, driven by a small view-state machine.
"""

from faq_widget.domain import (
    FAQContent,
    Topic,
)
from faq_widget.state import (
    Message,
    SubtopicView,
    TopicView,
    WelcomeView,
    WidgetState,
)
from faq_widget.content import (
    ContentEndpoint,
    ContentSource,
    ContentSourceError,
    DecodeError,
    HttpContentSource,
    NetworkError,
    StaticContentSource,
    load_faq_content,
)
from faq_widget.navigation import InvalidSelection, NavigationModel, NavigationTransition
from faq_widget.presentation import RenderTree, render_html, render_widget
from faq_widget.services.widget import ShellOptions, WidgetShell

__all__ = [
    # Domain Layer
    "FAQContent",
    "Topic",
    # State Layer
    "Message",
    "SubtopicView",
    "TopicView",
    "WelcomeView",
    "WidgetState",
    # Content Layer
    "ContentEndpoint",
    "ContentSource",
    "ContentSourceError",
    "DecodeError",
    "HttpContentSource",
    "NetworkError",
    "StaticContentSource",
    "load_faq_content",
    # Navigation Layer
    "InvalidSelection",
    "NavigationModel",
    "NavigationTransition",
    # Presentation Layer
    "RenderTree",
    "render_html",
    "render_widget",
    # Shell
    "ShellOptions",
    "WidgetShell",
]
