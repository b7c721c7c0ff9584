"""
Schemas - Widget Input Events

Every user interaction with the widget is expressed as one of these events.
Buttons in the render tree carry the event they dispatch, and the host API
accepts them as request bodies, so the discriminator `kind` doubles as the
wire format.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class ToggleEvent(BaseModel):
    """The floating toggle control: opens when closed, closes when open."""
    kind: Literal["toggle"] = "toggle"


class OpenEvent(BaseModel):
    kind: Literal["open"] = "open"


class CloseEvent(BaseModel):
    kind: Literal["close"] = "close"


class BackEvent(BaseModel):
    kind: Literal["back"] = "back"


class HomeEvent(BaseModel):
    kind: Literal["home"] = "home"


class SelectTopicEvent(BaseModel):
    kind: Literal["select_topic"] = "select_topic"
    key: str


class SelectSubtopicEvent(BaseModel):
    kind: Literal["select_subtopic"] = "select_subtopic"
    key: str
    sub: str


WidgetEventType = Union[
    ToggleEvent,
    OpenEvent,
    CloseEvent,
    BackEvent,
    HomeEvent,
    SelectTopicEvent,
    SelectSubtopicEvent,
]

WidgetEvent = Annotated[WidgetEventType, Field(discriminator="kind")]
