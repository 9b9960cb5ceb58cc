"""Comment source for arbitrary web pages.

Useful for setlists posted outside YouTube (forum threads, pastes, blogs).
HTML responses are reduced to their visible text with BeautifulSoup, one
block element per line, so each timestamp stays at the start of its own
line.  Any other content type is returned unchanged.
"""

import logging

import httpx
from bs4 import BeautifulSoup

from ..exceptions import RetrievalError
from .base import CommentSource

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15

_FETCH_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9,ja;q=0.8",
}


def html_to_text(html: str) -> str:
    """Return the visible text of *html*, one text node per line."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return soup.get_text("\n")


class WebPageSource(CommentSource):
    """Fetch setlist text from an ``http(s)://`` URL."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    @classmethod
    def from_options(cls, timeout: float = DEFAULT_TIMEOUT, **options) -> "WebPageSource":
        return cls(timeout=timeout)

    @classmethod
    def can_handle(cls, identifier: str) -> bool:
        return identifier.lower().startswith(("http://", "https://"))

    def fetch(self, identifier: str) -> str:
        logger.debug("GET %s (timeout=%s)", identifier, self.timeout)
        try:
            resp = httpx.get(
                identifier,
                headers=_FETCH_HEADERS,
                follow_redirects=True,
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            raise RetrievalError(identifier, str(exc) or type(exc).__name__) from exc
        if resp.status_code != 200:
            raise RetrievalError(identifier, f"HTTP {resp.status_code}")

        content_type = resp.headers.get("content-type", "")
        if "html" in content_type:
            return html_to_text(resp.text)
        return resp.text
