"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the host's services.
It is responsible for:
1. Instantiating the Singleton services (Content Source, Repository).
2. Wiring them together into the WidgetSessionService.
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

Tests swap any of these through app.dependency_overrides.
"""


from functools import lru_cache
from fastapi import Depends

from ..config import settings
from ..content.interface import ContentEndpoint, ContentSource
from ..content.adapters.http_adapter import HttpContentSource
from ..content.adapters.static_adapter import StaticContentSource
from ..repositories.widget import WidgetRepository, InMemoryWidgetRepository
from ..services.widget import ShellOptions
from ..services.sessions import WidgetSessionService

# Content Source (Singleton)
@lru_cache()
def get_content_source() -> ContentSource:
    if settings.CONTENT_SOURCE == "static":
        return StaticContentSource()
    return HttpContentSource(endpoint=ContentEndpoint.from_settings(settings))

# Widget Repository (Singleton)
# Note: In-memory storage must be a singleton so widgets persist across requests!
@lru_cache()
def get_widget_repository() -> WidgetRepository:
    return InMemoryWidgetRepository()

@lru_cache()
def get_shell_options() -> ShellOptions:
    return ShellOptions.from_settings(settings)

# The Widget Session Service (Singleton Service)
@lru_cache()
def get_widget_service(
    repository: WidgetRepository = Depends(get_widget_repository),
    source: ContentSource = Depends(get_content_source),
    options: ShellOptions = Depends(get_shell_options)
) -> WidgetSessionService:
    """
    Injects all necessary components into the WidgetSessionService.
    """
    return WidgetSessionService(
        repository=repository,
        source=source,
        options=options
    )
