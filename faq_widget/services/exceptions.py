"""
Service Layer Exceptions

Custom exceptions for the WidgetSessionService.
"""


class WidgetNotFoundError(Exception):
    """Raised when a widget ID does not match any live widget."""
    pass
