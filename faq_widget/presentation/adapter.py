"""
Presentation Adapter - State to Render Tree

A pure mapping from (WidgetState, FAQContent, loading/typing flags) to a
RenderTree. It holds no state and performs no I/O; calling it twice with the
same inputs yields equal trees.

Two body layouts exist:
- Single pane: only the active view's message and its selectors.
- Transcript: the whole conversation so far, a typing indicator while a reply
  or a load is pending, then the selectors for the active view.
"""

from typing import List, Optional, assert_never

from ..domain.models import FAQContent
from ..schemas.events import (
    BackEvent,
    CloseEvent,
    HomeEvent,
    SelectSubtopicEvent,
    SelectTopicEvent,
    ToggleEvent,
)
from ..state.models import NavigationView, SubtopicView, TopicView, WelcomeView, WidgetState
from .render_tree import (
    Block,
    Button,
    Footer,
    Header,
    LoadingPlaceholder,
    MessagePane,
    Panel,
    RenderTree,
    SelectorGroup,
    TranscriptEntry,
    TypingIndicator,
)

TOGGLE_LABEL = "💬"


def render_widget(
    state: WidgetState,
    content: Optional[FAQContent],
    loading: bool = False,
    typing: bool = False,
    transcript_enabled: bool = True,
    title: str = "FAQ",
) -> RenderTree:
    toggle = Button(label=TOGGLE_LABEL, event=ToggleEvent())
    if not state.is_open:
        return RenderTree(toggle=toggle)

    if transcript_enabled:
        body = _render_transcript_body(state, content, loading, typing)
    else:
        body = _render_single_pane_body(state.view, content)

    panel = Panel(
        header=Header(
            title=title,
            back=Button(label="⬅️", event=BackEvent(), enabled=state.can_go_back),
            close=Button(label="❌", event=CloseEvent()),
        ),
        body=body,
        footer=Footer(home=Button(label="🏠 Home", event=HomeEvent())),
    )
    return RenderTree(toggle=toggle, panel=panel)


def _render_single_pane_body(view: NavigationView, content: Optional[FAQContent]) -> List[Block]:
    if content is None:
        return [LoadingPlaceholder()]

    match view:
        case WelcomeView():
            return [MessagePane(text=content.welcome), *_selectors(view, content)]
        case TopicView(key=key):
            topic = content.topics[key]
            return [MessagePane(title=key, text=topic.message), *_selectors(view, content)]
        case SubtopicView(key=key, sub=sub):
            return [MessagePane(title=sub, text=content.topics[key].subtopics[sub])]
        case _:
            assert_never(view)


def _render_transcript_body(
    state: WidgetState,
    content: Optional[FAQContent],
    loading: bool,
    typing: bool,
) -> List[Block]:
    blocks: List[Block] = [
        TranscriptEntry(sender=msg.sender, text=msg.text) for msg in state.transcript
    ]

    if content is None:
        # A failed load leaves nothing in flight: fall back to the placeholder
        blocks.append(TypingIndicator() if loading else LoadingPlaceholder())
        return blocks

    if loading or typing:
        blocks.append(TypingIndicator())
    blocks.extend(_selectors(state.view, content))
    return blocks


def _selectors(view: NavigationView, content: FAQContent) -> List[Block]:
    match view:
        case WelcomeView():
            buttons = [
                Button(label=key, event=SelectTopicEvent(key=key))
                for key in content.topic_keys
            ]
            return [SelectorGroup(role="topic", buttons=buttons)]
        case TopicView(key=key):
            topic = content.topics[key]
            if not topic.subtopics:
                return []
            buttons = [
                Button(label=sub, event=SelectSubtopicEvent(key=key, sub=sub))
                for sub in topic.subtopic_keys
            ]
            return [SelectorGroup(role="subtopic", buttons=buttons)]
        case SubtopicView():
            return []
        case _:
            assert_never(view)
