"""
Render Tree - Output of the PresentationAdapter

A framework-neutral description of what the widget shows. It is plain data:
the JSON host returns it as-is and the HTML renderer walks it with Jinja2.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..schemas.events import WidgetEvent


class Button(BaseModel):
    label: str
    event: WidgetEvent
    enabled: bool = True


class LoadingPlaceholder(BaseModel):
    kind: Literal["loading"] = "loading"
    text: str = "Loading..."


class MessagePane(BaseModel):
    """A single message, optionally headed by the topic/sub-topic it answers."""
    kind: Literal["message"] = "message"
    title: Optional[str] = None
    text: str


class TranscriptEntry(BaseModel):
    kind: Literal["transcript_entry"] = "transcript_entry"
    sender: Literal["bot", "user"]
    text: str


class TypingIndicator(BaseModel):
    kind: Literal["typing"] = "typing"


class SelectorGroup(BaseModel):
    """Topic or sub-topic buttons for the active view."""
    kind: Literal["selectors"] = "selectors"
    role: Literal["topic", "subtopic"]
    buttons: List[Button] = Field(default_factory=list)


Block = Annotated[
    Union[LoadingPlaceholder, MessagePane, TranscriptEntry, TypingIndicator, SelectorGroup],
    Field(discriminator="kind"),
]


class Header(BaseModel):
    title: str
    back: Button
    close: Button


class Footer(BaseModel):
    home: Button


class Panel(BaseModel):
    header: Header
    body: List[Block] = Field(default_factory=list)
    footer: Footer


class RenderTree(BaseModel):
    toggle: Button
    # Absent while the widget is closed
    panel: Optional[Panel] = None
