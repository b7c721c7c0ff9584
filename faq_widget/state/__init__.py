"""
State Layer - Runtime Navigation Models

Defines the per-widget runtime state: the active view, the history stack
and the transcript.
"""

from faq_widget.state.models import (
    Message,
    NavigationView,
    SubtopicView,
    TopicView,
    WelcomeView,
    WidgetState,
)

__all__ = [
    "Message",
    "NavigationView",
    "SubtopicView",
    "TopicView",
    "WelcomeView",
    "WidgetState",
]
