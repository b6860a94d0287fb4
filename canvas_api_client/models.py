"""Data models and constants for the Canvas client."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

API_PREFIX = "api/v1/"
PER_PAGE = 100  # Canvas caps per_page at 100
MAX_PAGES = 20  # Follow-up page fetches allowed before giving up on a Link chain


class Verb(str, Enum):
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    """One logical Canvas API call.

    ``params`` is copied into a read-only mapping, so later changes to the
    caller's dict do not leak into the request.
    """

    verb: Verb
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "verb", Verb(self.verb))
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass
class ApiResponse:
    """Decoded response from the Canvas API."""

    status: int
    body: Any
    link: str | None = None
