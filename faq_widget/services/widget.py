"""
Widget Shell - Application Orchestration Layer

The shell is what a hosting page talks to. It owns visibility, the content
load task and the simulated typing delay, and routes every user event to a
NavigationModel transition. All content decisions are delegated to the
NavigationModel (state) and the PresentationAdapter (rendering).

Everything runs on one asyncio event loop. The content load is an
asyncio.Task: while it is outstanding the widget keeps reacting to events
and renders a loading placeholder / typing indicator. There is no
cancellation; a load that finishes after the panel was closed still
publishes its content. A reply still inside its typing delay is dropped if
the widget is opened, closed, sent home or back before the delay ends.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..config import Settings
from ..content.exceptions import ContentSourceError
from ..content.interface import ContentSource
from ..content.loader import load_faq_content
from ..navigation.model import NavigationModel
from ..navigation.transitions import NavigationTransition
from ..presentation.adapter import render_widget
from ..presentation.loader import render_html
from ..presentation.render_tree import RenderTree
from ..schemas.events import (
    BackEvent,
    CloseEvent,
    HomeEvent,
    OpenEvent,
    SelectSubtopicEvent,
    SelectTopicEvent,
    ToggleEvent,
    WidgetEvent,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShellOptions:
    """
    Behaviour switches for a WidgetShell.

    Attributes:
        reload_on_open: Re-run the load cycle on every open instead of
            loading once per shell.
        preload_on_mount: Start loading as soon as the shell is mounted,
            before the first open.
        transcript_enabled: Chat-style transcript rendering.
        typing_delay: Seconds the typing indicator shows before a reply.
        strict_selection: Raise InvalidSelection instead of ignoring it.
        title: Header title.
    """
    reload_on_open: bool = False
    preload_on_mount: bool = True
    transcript_enabled: bool = True
    typing_delay: float = 0.6
    strict_selection: bool = False
    title: str = "FAQ"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ShellOptions":
        return cls(
            reload_on_open=settings.RELOAD_ON_OPEN,
            preload_on_mount=settings.PRELOAD_ON_MOUNT,
            transcript_enabled=settings.TRANSCRIPT_ENABLED,
            typing_delay=settings.TYPING_DELAY_SECONDS,
            strict_selection=settings.STRICT_SELECTION,
            title=settings.WIDGET_TITLE,
        )


class WidgetShell:
    def __init__(self, source: ContentSource, options: Optional[ShellOptions] = None):
        self.source = source
        self.options = options or ShellOptions()
        self.navigation = NavigationModel(
            transcript_enabled=self.options.transcript_enabled,
            strict_selection=self.options.strict_selection,
        )
        self._load_task: Optional[asyncio.Task] = None
        # Pending replies still inside their typing delay
        self._typing = 0
        # Bumped by every reset (open, close, home, back)
        self._generation = 0

    @property
    def is_open(self) -> bool:
        return self.navigation.state.is_open

    @property
    def is_loading(self) -> bool:
        return self._load_task is not None and not self._load_task.done()

    @property
    def is_typing(self) -> bool:
        return self._typing > 0

    # ==========================================================================
    # Lifecycle
    # ==========================================================================

    async def mount(self):
        """Called once when the widget is attached to a page."""
        if self.options.preload_on_mount:
            self._start_load()

    async def open(self) -> NavigationTransition:
        self._generation += 1
        transition = self.navigation.open()
        if self.options.reload_on_open or not self.navigation.is_loaded:
            self._start_load()
        return transition

    async def close(self) -> NavigationTransition:
        self._generation += 1
        return self.navigation.close()

    async def toggle(self) -> NavigationTransition:
        if self.is_open:
            return await self.close()
        return await self.open()

    async def wait_for_content(self):
        """Waits for the in-flight load, if any. Never raises on load failure."""
        if self._load_task is not None:
            await self._load_task

    # ==========================================================================
    # Navigation
    # ==========================================================================

    async def select_topic(self, key: str) -> NavigationTransition:
        if not await self._simulate_typing():
            return NavigationTransition.HOLD
        return self.navigation.select_topic(key)

    async def select_subtopic(self, key: str, sub: str) -> NavigationTransition:
        if not await self._simulate_typing():
            return NavigationTransition.HOLD
        return self.navigation.select_subtopic(key, sub)

    async def go_back(self) -> NavigationTransition:
        self._generation += 1
        return self.navigation.go_back()

    async def go_home(self) -> NavigationTransition:
        self._generation += 1
        return self.navigation.go_home()

    async def dispatch(self, event: WidgetEvent) -> NavigationTransition:
        """Routes one user event to the matching transition."""
        logger.debug(f"Dispatching {event.kind}")
        match event:
            case ToggleEvent():
                return await self.toggle()
            case OpenEvent():
                return await self.open()
            case CloseEvent():
                return await self.close()
            case BackEvent():
                return await self.go_back()
            case HomeEvent():
                return await self.go_home()
            case SelectTopicEvent(key=key):
                return await self.select_topic(key)
            case SelectSubtopicEvent(key=key, sub=sub):
                return await self.select_subtopic(key, sub)
        raise ValueError(f"Unsupported event: {event!r}")

    # ==========================================================================
    # Rendering
    # ==========================================================================

    def render(self) -> RenderTree:
        return render_widget(
            self.navigation.state,
            self.navigation.content,
            loading=self.is_loading,
            typing=self.is_typing,
            transcript_enabled=self.options.transcript_enabled,
            title=self.options.title,
        )

    def render_html(self) -> str:
        return render_html(self.render())

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _start_load(self):
        # One load cycle at a time: bounds outbound requests to one
        if self.is_loading:
            return
        self._load_task = asyncio.get_running_loop().create_task(self._load())

    async def _load(self):
        try:
            content = await load_faq_content(self.source)
        except ContentSourceError as e:
            # Content stays unloaded; the widget keeps showing the placeholder
            logger.error(f"Failed to load FAQ data: {e}")
            return

        self.navigation.publish(content)
        logger.info(f"FAQ content published with {len(content.topics)} topics")

    async def _simulate_typing(self) -> bool:
        """
        Shows the typing indicator for the configured delay.
        Returns False when the widget was reset meanwhile and the reply
        must be dropped.
        """
        if self.options.typing_delay <= 0:
            return True
        generation = self._generation
        self._typing += 1
        try:
            await asyncio.sleep(self.options.typing_delay)
        finally:
            self._typing -= 1

        if generation != self._generation:
            logger.debug("Widget reset during typing delay, dropping reply")
            return False
        return True
