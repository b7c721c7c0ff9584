"""
Schemas - Widget Input Events

Pydantic models for the events a user can send to a widget.
"""

from faq_widget.schemas.events import (
    BackEvent,
    CloseEvent,
    HomeEvent,
    OpenEvent,
    SelectSubtopicEvent,
    SelectTopicEvent,
    ToggleEvent,
    WidgetEvent,
    WidgetEventType,
)

__all__ = [
    "BackEvent",
    "CloseEvent",
    "HomeEvent",
    "OpenEvent",
    "SelectSubtopicEvent",
    "SelectTopicEvent",
    "ToggleEvent",
    "WidgetEvent",
    "WidgetEventType",
]
