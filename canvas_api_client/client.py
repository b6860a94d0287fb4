"""Canvas REST API client using httpx.

Every call goes through ``CanvasClient.execute``: the parameters are encoded
with Canvas' bracket convention and sent in the query string for all verbs,
GET requests are paginated through the Link header, and any HTTP response
(including 4xx/5xx) comes back as decoded data. Only network failures raise.
"""

import logging

import httpx

from .errors import ConfigurationError, TransportError
from .models import API_PREFIX, MAX_PAGES, PER_PAGE, ApiResponse, RequestDescriptor, Verb
from .pagination import collect_pages
from .query import encode_query
from .settings import get_settings

logger = logging.getLogger(__name__)


class CanvasClient:
    """Thin client for arbitrary Canvas REST API endpoints."""

    def __init__(self, base_url=None, token=None, timeout=None, max_pages=MAX_PAGES, transport=None):
        settings = get_settings()
        base_url = base_url or settings.canvas_api_url
        if not base_url:
            raise ConfigurationError("CANVAS_API_URL is not set")
        token = token or settings.canvas_api_token

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.base_url = base_url.rstrip("/")
        self.max_pages = max_pages
        self._client = httpx.Client(
            headers=headers,
            timeout=timeout if timeout is not None else settings.canvas_api_timeout,
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _url(self, path, query):
        url = f"{self.base_url}/{API_PREFIX}{path.lstrip('/')}"
        return f"{url}?{query}" if query else url

    def _send(self, method, url):
        try:
            resp = self._client.request(method, url)
        except httpx.TransportError as e:
            raise TransportError(f"Canvas API request failed: {method} {url}: {e}") from e

        if resp.status_code >= 400:
            logger.info("Canvas API returned %s for %s %s", resp.status_code, method, url)

        return ApiResponse(
            status=resp.status_code,
            body=_decode(resp),
            link=resp.headers.get("link"),
        )

    def execute(self, request: RequestDescriptor) -> ApiResponse:
        """Run one logical Canvas API call.

        GET requests always ask for ``per_page=100`` (overriding any caller
        value) and have every page collected into a single list. PUT, POST
        and DELETE return the single decoded body, whatever the Link header
        says.

        Returns:
            ApiResponse with the HTTP status and decoded body. Error statuses
            are not raised; inspect the body.

        Raises:
            TransportError: the request could not be sent or answered.
            PaginationLimitExceeded: the Link chain ran past ``max_pages``.
        """
        params = dict(request.params)
        if request.verb is Verb.GET:
            params["per_page"] = PER_PAGE

        url = self._url(request.path, encode_query(params))
        logger.debug("%s %s", request.verb.value, url)
        response = self._send(request.verb.value, url)

        if request.verb is not Verb.GET or response.status >= 400:
            return response
        return collect_pages(
            response,
            lambda next_url: self._send(Verb.GET.value, next_url),
            max_pages=self.max_pages,
        )

    def request(self, verb, path, params=None) -> ApiResponse:
        return self.execute(RequestDescriptor(verb=verb, path=path, params=params or {}))

    def get(self, path, params=None):
        return self.request(Verb.GET, path, params).body

    def put(self, path, params=None):
        return self.request(Verb.PUT, path, params).body

    def post(self, path, params=None):
        return self.request(Verb.POST, path, params).body

    def delete(self, path, params=None):
        return self.request(Verb.DELETE, path, params).body

    def close(self):
        self._client.close()


def _decode(resp: httpx.Response):
    if not resp.content:
        return {}
    try:
        return resp.json()
    except ValueError:
        logger.warning("Canvas API returned a non-JSON body (status %s)", resp.status_code)
        return None


# Client instances keyed by config
_clients: dict[tuple, CanvasClient] = {}


def get_client(base_url=None, token=None) -> CanvasClient:
    """Get or create a CanvasClient with the given configuration."""
    key = (base_url, token)
    if key not in _clients:
        _clients[key] = CanvasClient(base_url, token)
    return _clients[key]
