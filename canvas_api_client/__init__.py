"""Client for the Canvas LMS REST API.

Builds Canvas' bracket-style query strings, follows Link-header pagination on
GET requests, and returns decoded JSON for every HTTP response, errors
included.
"""

from .cli import main
from .client import CanvasClient, get_client
from .errors import CanvasError, ConfigurationError, PaginationLimitExceeded, TransportError
from .models import ApiResponse, RequestDescriptor, Verb
from .query import encode_query

__all__ = [
    "main",
    "CanvasClient",
    "get_client",
    "CanvasError",
    "ConfigurationError",
    "PaginationLimitExceeded",
    "TransportError",
    "ApiResponse",
    "RequestDescriptor",
    "Verb",
    "encode_query",
]

if __name__ == "__main__":
    main()
