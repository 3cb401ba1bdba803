"""robots.txt retrieval.

Fetching is kept apart from parsing: these helpers return the document
text (or raise), and only then hand it to ``parse_robots_txt``. Nothing
fetched is written to disk.
"""

import logging
from urllib.parse import urlsplit

import httpx

from robotrules.config import RobotRulesSettings, get_settings
from robotrules.exceptions import InvalidInputError, RetrievalError
from robotrules.models import ParseResult
from robotrules.parser import parse_robots_txt

LOGGER = logging.getLogger(__name__)


def robots_url_for(url: str) -> str:
    """
    Resolve the robots.txt location for a URL.

    Args:
        url: Either a robots.txt URL or any URL on the site
            (e.g., "https://example.com/docs/page").

    Returns:
        The URL itself if its path ends in ``/robots.txt``, otherwise
        ``<scheme>://<netloc>/robots.txt``.

    Raises:
        InvalidInputError: If the URL has no scheme or host.
    """
    parsed = urlsplit(url)
    if not parsed.scheme or not parsed.netloc:
        raise InvalidInputError(f"Not an absolute URL: {url!r}", field="url", value=url)

    if parsed.path.endswith("/robots.txt"):
        return url
    return f"{parsed.scheme}://{parsed.netloc}/robots.txt"


async def fetch_robots_text(
    url: str,
    settings: RobotRulesSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """
    Download a robots.txt document.

    Args:
        url: robots.txt URL or any URL on the site.
        settings: Retrieval settings. Defaults to ``get_settings()``.
        client: Optional HTTP client to reuse. A temporary one is created
            (and closed) when omitted.

    Returns:
        The response body as text.

    Raises:
        InvalidInputError: If the URL is not absolute.
        RetrievalError: On transport failure or a non-2xx response.
    """
    settings = settings or get_settings()
    robots_url = robots_url_for(url)

    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await _get_text(own_client, robots_url, settings)
    return await _get_text(client, robots_url, settings)


async def _get_text(client: httpx.AsyncClient, robots_url: str, settings: RobotRulesSettings) -> str:
    """Issue the GET request and map failures to RetrievalError."""
    try:
        response = await client.get(
            robots_url,
            headers={"User-Agent": settings.user_agent},
            timeout=settings.timeout,
            follow_redirects=settings.follow_redirects,
        )
    except httpx.HTTPError as e:
        LOGGER.warning("Failed to fetch robots.txt from %s: %s", robots_url, e)
        raise RetrievalError(f"Failed to fetch {robots_url}: {e}", url=robots_url) from e

    if not response.is_success:
        LOGGER.warning("robots.txt returned status %d at %s", response.status_code, robots_url)
        raise RetrievalError(
            f"robots.txt returned status {response.status_code}",
            url=robots_url,
            status_code=response.status_code,
        )

    LOGGER.debug("Fetched %d bytes from %s", len(response.content), robots_url)
    return response.text


async def fetch_robots(
    url: str,
    settings: RobotRulesSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ParseResult:
    """
    Fetch and parse robots.txt for a site.

    Args:
        url: robots.txt URL or any URL on the site.
        settings: Retrieval settings. Defaults to ``get_settings()``.
        client: Optional HTTP client to reuse.

    Returns:
        ParseResult for the retrieved document.

    Raises:
        RetrievalError: If the document could not be retrieved. No parse is
            attempted in that case.
    """
    text = await fetch_robots_text(url, settings=settings, client=client)
    return parse_robots_txt(text)


class RobotsFetcher:
    """Parse robots.txt text or fetch and parse it from a site.

    Holds settings and an optional shared client only; every call returns
    a new result.

    Usage:
        fetcher = RobotsFetcher()
        result = await fetcher.fetch("https://example.com")
        raw = await fetcher.fetch_raw("https://example.com/robots.txt")
    """

    def __init__(
        self,
        settings: RobotRulesSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialise fetcher.

        Args:
            settings: Retrieval settings. Defaults to ``get_settings()``.
            client: Optional HTTP client shared across fetches.
        """
        self.settings = settings or get_settings()
        self.client = client

    def parse(self, text: str) -> ParseResult:
        """Parse already retrieved robots.txt text."""
        return parse_robots_txt(text)

    async def fetch_raw(self, url: str) -> str:
        """Retrieve robots.txt text without parsing it."""
        return await fetch_robots_text(url, settings=self.settings, client=self.client)

    async def fetch(self, url: str) -> ParseResult:
        """Retrieve and parse robots.txt."""
        return parse_robots_txt(await self.fetch_raw(url))
