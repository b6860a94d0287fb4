"""Exceptions raised by the Canvas client.

HTTP 4xx/5xx responses are deliberately absent here: they are returned to the
caller as decoded data, and callers tell failures apart by the body shape.
"""


class CanvasError(Exception):
    """Base class for every error raised by canvas_api_client."""


class TransportError(CanvasError):
    """The request never produced an HTTP response (connect, read, timeout)."""


class PaginationLimitExceeded(CanvasError):
    def __init__(self, limit, next_url):
        self.limit = limit
        self.next_url = next_url
        super().__init__(f"Pagination did not finish after {limit} pages; next link was {next_url}")


class ConfigurationError(CanvasError, RuntimeError):
    """Required client configuration (such as CANVAS_API_URL) is missing."""
