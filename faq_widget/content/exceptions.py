"""
Content Source Exceptions

Failures raised by ContentSource implementations. The widget shell catches
ContentSourceError at the load boundary; nothing above it sees these.
"""


class ContentSourceError(Exception):
    """Base class for every content load failure."""
    pass


class NetworkError(ContentSourceError):
    """Raised on transport failures, timeouts and non-2xx responses."""
    pass


class DecodeError(ContentSourceError):
    """Raised when a response is not valid JSON or has the wrong shape."""
    pass
