"""
Navigation Model - View State Machine

The NavigationModel is the deterministic state machine behind the widget.
It owns the active view, the history stack used by the back control and the
chat transcript, and it holds the FAQContent snapshot those views point into.
-----------------------------------------------

Invariants kept by every transition:
1. `view` (and every entry of `history`) resolves against `content`.
   Selections that do not resolve are rejected before any state changes.
2. `history` never contains the active view and holds no duplicates.
   Drill-in pushes the view being left; selecting a view already on the
   stack unwinds to it; back pops into the view on top. Popping until empty
   lands on Welcome.
3. Each accepted selection appends exactly two transcript entries: the
   selection echoed by the user, then the bot's answer.

The model performs no I/O. Loading content and the typing delay are the
WidgetShell's job; the shell hands finished content over through publish().
"""

import logging
from typing import List, Optional

from ..domain.models import FAQContent, Topic
from ..state.models import (
    Message,
    NavigationView,
    SubtopicView,
    TopicView,
    WelcomeView,
    WidgetState,
)
from .exceptions import InvalidSelection
from .transitions import NavigationTransition

logger = logging.getLogger(__name__)


class NavigationModel:
    def __init__(self, transcript_enabled: bool = True, strict_selection: bool = False):
        self.transcript_enabled = transcript_enabled
        self.strict_selection = strict_selection
        self.content: Optional[FAQContent] = None
        self.state = WidgetState()

    @property
    def is_loaded(self) -> bool:
        return self.content is not None

    # ==========================================================================
    # Visibility
    # ==========================================================================

    def open(self) -> NavigationTransition:
        """Shows the panel on a fresh Welcome view."""
        self.state = WidgetState(is_open=True, transcript=self._seed_transcript())
        return NavigationTransition.RESET

    def close(self) -> NavigationTransition:
        """Hides the panel. Nothing survives to the next open."""
        self.state = WidgetState(is_open=False)
        return NavigationTransition.RESET

    # ==========================================================================
    # Drill-in / Drill-back
    # ==========================================================================

    def select_topic(self, key: str) -> NavigationTransition:
        try:
            topic = self._require_topic(key)
        except InvalidSelection as e:
            return self._reject(e)

        transition = self._push(TopicView(key=key))
        self._record_exchange(key, topic.message)
        return transition

    def select_subtopic(self, key: str, sub: str) -> NavigationTransition:
        try:
            topic = self._require_topic(key, sub)
        except InvalidSelection as e:
            return self._reject(e)

        transition = self._push(SubtopicView(key=key, sub=sub))
        self._record_exchange(sub, topic.subtopics[sub])
        return transition

    def go_back(self) -> NavigationTransition:
        # Back with nothing behind us is a silent no-op
        if not self.state.history:
            return NavigationTransition.HOLD

        self.state.view = self.state.history.pop()
        logger.debug(f"Back to {self.state.view.kind}")
        return NavigationTransition.POP

    def go_home(self) -> NavigationTransition:
        self.state.view = WelcomeView()
        self.state.history = []
        self.state.transcript = self._seed_transcript()
        return NavigationTransition.RESET

    # ==========================================================================
    # Content Publication
    # ==========================================================================

    def publish(self, content: FAQContent) -> NavigationTransition:
        """
        Swaps in a freshly loaded snapshot (replace-wholesale).

        If the active view or any history entry no longer resolves against
        the new content, navigation falls back to Welcome. A transcript that
        holds nothing but the previous snapshot's welcome is re-seeded.
        """
        only_seed = self.state.transcript == self._seed_transcript()
        self.content = content

        views = [self.state.view, *self.state.history]
        if not all(self._resolves(view) for view in views):
            logger.info("Reloaded content no longer matches current view, resetting")
            self.state.view = WelcomeView()
            self.state.history = []
            self.state.transcript = self._seed_transcript()
            return NavigationTransition.RESET

        if not self.state.transcript or only_seed:
            self.state.transcript = self._seed_transcript()
        return NavigationTransition.HOLD

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _require_topic(self, key: str, sub: Optional[str] = None) -> Topic:
        topic = self.content.get_topic(key) if self.content else None
        if topic is None:
            raise InvalidSelection(key, sub)
        if sub is not None and not topic.has_subtopic(sub):
            raise InvalidSelection(key, sub)
        return topic

    def _reject(self, error: InvalidSelection) -> NavigationTransition:
        if self.strict_selection:
            raise error
        logger.warning(f"Ignoring selection: {error}")
        return NavigationTransition.HOLD

    def _push(self, target: NavigationView) -> NavigationTransition:
        # Re-selecting the active view must not put it on its own history
        if target == self.state.view:
            return NavigationTransition.HOLD

        # Reaching a view already on the stack unwinds back to it
        if target in self.state.history:
            index = self.state.history.index(target)
            self.state.history = self.state.history[:index]
            self.state.view = target
            logger.debug(f"Unwound to {target.kind} (depth {index})")
            return NavigationTransition.POP

        self.state.history.append(self.state.view)
        self.state.view = target
        logger.debug(f"Drilled into {target.kind} (depth {len(self.state.history)})")
        return NavigationTransition.PUSH

    def _resolves(self, view: NavigationView) -> bool:
        match view:
            case WelcomeView():
                return True
            case TopicView(key=key):
                return self.content is not None and self.content.get_topic(key) is not None
            case SubtopicView(key=key, sub=sub):
                return self.content is not None and self.content.has_subtopic(key, sub)
        return False

    def _record_exchange(self, selection: str, reply: str):
        if not self.transcript_enabled:
            return
        self.state.transcript.append(Message(sender="user", text=selection))
        self.state.transcript.append(Message(sender="bot", text=reply))

    def _seed_transcript(self) -> List[Message]:
        if not self.transcript_enabled or self.content is None:
            return []
        return [Message(sender="bot", text=self.content.welcome)]
