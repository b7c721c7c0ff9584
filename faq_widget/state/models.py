"""
State Layer - Runtime Navigation Models

This module defines the runtime state of a single widget: which view is
active, the stack of views the user has left behind (for the back control),
and the chat-style transcript. The view is a closed tagged union so every
consumer can match on it exhaustively.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class WelcomeView(BaseModel):
    """Initial view: welcome text and the list of topic keys."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["welcome"] = "welcome"


class TopicView(BaseModel):
    """A topic's message and, if present, its sub-topic keys."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["topic"] = "topic"
    key: str


class SubtopicView(BaseModel):
    """One sub-topic's message. Leaf view, no further drill-down."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["subtopic"] = "subtopic"
    key: str
    sub: str


NavigationView = Annotated[
    Union[WelcomeView, TopicView, SubtopicView],
    Field(discriminator="kind"),
]


class Message(BaseModel):
    sender: Literal["bot", "user"]
    text: str


class WidgetState(BaseModel):
    """
    The mutable state for a single widget instance.
    Views are values: transitions replace `view`, they never edit it.
    """
    is_open: bool = False
    view: NavigationView = Field(default_factory=WelcomeView)

    # Previously active views, most recent last.
    history: List[NavigationView] = Field(default_factory=list)
    transcript: List[Message] = Field(default_factory=list)

    @property
    def can_go_back(self) -> bool:
        return bool(self.history)
