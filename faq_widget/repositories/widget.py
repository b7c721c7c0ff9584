import uuid
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..services.widget import WidgetShell


class WidgetRepository(ABC):
    """
    Defines how the host keeps track of live widget instances.
    Conversations are not persisted across processes, so the only
    implementation keeps shells in memory.
    """

    @abstractmethod
    def add(self, shell: WidgetShell) -> str:
        """Stores a shell under a new unique ID and returns the ID."""
        pass

    @abstractmethod
    def get(self, widget_id: str) -> Optional[WidgetShell]:
        """Retrieves a shell by ID."""
        pass

    @abstractmethod
    def delete(self, widget_id: str) -> bool:
        """Deletes a shell. Returns True if found and deleted."""
        pass


class InMemoryWidgetRepository(WidgetRepository):
    """
    Uses an in-memory dictionary. Must be a process-wide singleton so
    widgets survive between requests.
    """

    def __init__(self):
        self._store: Dict[str, WidgetShell] = {}

    def add(self, shell: WidgetShell) -> str:
        new_id = str(uuid.uuid4())
        self._store[new_id] = shell
        return new_id

    def get(self, widget_id: str) -> Optional[WidgetShell]:
        return self._store.get(widget_id)

    def delete(self, widget_id: str) -> bool:
        if widget_id in self._store:
            del self._store[widget_id]
            return True
        return False
