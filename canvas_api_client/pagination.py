"""Follow Canvas ``Link: <...>; rel="next"`` pagination.

Canvas returns at most ``per_page`` items per GET and advertises the rest
through the Link header. Each next URL is only known once the previous
response has arrived, so pages are fetched strictly one after another.
"""

import logging
import re
from typing import Callable

from .errors import PaginationLimitExceeded
from .models import MAX_PAGES, ApiResponse

logger = logging.getLogger(__name__)

# One link entry: <url> followed by its ;-separated parameters.
_LINK_ENTRY = re.compile(r"<([^>]*)>\s*((?:;[^,;]*)*)")
_REL_NEXT = re.compile(r'^rel\s*=\s*"next"$')


def parse_next_link(header: str | None) -> str | None:
    """Return the URL tagged ``rel="next"`` in a Link header, or None.

    Anything that does not parse counts as "no next page".
    """
    if not header:
        return None
    for match in _LINK_ENTRY.finditer(header):
        url, link_params = match.groups()
        for param in link_params.split(";"):
            if _REL_NEXT.match(param.strip()):
                return url.strip() or None
    return None


def collect_pages(
    first: ApiResponse,
    fetch_next: Callable[[str], ApiResponse],
    max_pages: int = MAX_PAGES,
) -> ApiResponse:
    """Collect every page of a list response.

    Args:
        first: The already-decoded response to the initial GET.
        fetch_next: Issues a GET for an absolute next-page URL.
        max_pages: Follow-up fetches allowed before giving up.

    Returns:
        An ApiResponse whose body concatenates all list pages in arrival
        order. A single-resource (non-list) first body is returned as is, and
        an error response on a follow-up page is returned in place of the
        partial result.

    Raises:
        PaginationLimitExceeded: another page is advertised after
            ``max_pages`` follow-up fetches.
    """
    if not isinstance(first.body, list):
        return first

    data = list(first.body)
    next_url = parse_next_link(first.link)
    fetched = 0
    while next_url:
        if fetched >= max_pages:
            raise PaginationLimitExceeded(max_pages, next_url)
        logger.debug("Following next page %d: %s", fetched + 1, next_url)
        page = fetch_next(next_url)
        fetched += 1

        if page.status >= 400:
            return page
        if not isinstance(page.body, list):
            logger.warning("Page %d from %s is not a list, stopping pagination", fetched, next_url)
            break

        data.extend(page.body)
        next_url = parse_next_link(page.link)

    return ApiResponse(status=first.status, body=data)
