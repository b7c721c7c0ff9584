"""
Widget Session Service - Host Orchestration Layer

Entry point for the HTTP host. It creates and mounts widget shells, looks
them up by ID and feeds them user events. One shell per browser widget;
every shell shares the same ContentSource but runs its own load cycles.
"""

import logging

from ..content.interface import ContentSource
from ..repositories.widget import WidgetRepository
from ..schemas.events import WidgetEvent
from .exceptions import WidgetNotFoundError
from .widget import ShellOptions, WidgetShell

logger = logging.getLogger(__name__)


class WidgetSessionService:
    def __init__(
        self,
        repository: WidgetRepository,
        source: ContentSource,
        options: ShellOptions,
    ):
        self.repository = repository
        self.source = source
        self.options = options

    async def create_widget(self) -> str:
        """Creates and mounts a new closed widget. Returns its ID."""
        shell = WidgetShell(self.source, self.options)
        widget_id = self.repository.add(shell)
        await shell.mount()
        logger.info(f"Widget {widget_id} mounted")
        return widget_id

    def get_widget(self, widget_id: str) -> WidgetShell:
        shell = self.repository.get(widget_id)
        if shell is None:
            raise WidgetNotFoundError(f"Widget {widget_id} not found")
        return shell

    def delete_widget(self, widget_id: str) -> bool:
        return self.repository.delete(widget_id)

    async def handle_event(
        self,
        widget_id: str,
        event: WidgetEvent,
        wait_for_content: bool = False,
    ) -> WidgetShell:
        """
        Applies one event to a widget.

        `wait_for_content` lets hosts that cannot poll block until an
        in-flight load has finished before reading the render tree.
        """
        shell = self.get_widget(widget_id)
        await shell.dispatch(event)
        if wait_for_content:
            await shell.wait_for_content()
        return shell
