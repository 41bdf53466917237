"""
Page Fetcher — Retrieves a page's markup so its links can be parsed.

The link parser itself never touches the network; this is the thin
collaborator that supplies (markup, page_url) to it.
"""

import logging

import requests

from LinkParser_Engine.config import settings
from LinkParser_Engine.processors.link_parser import parse_links

logger = logging.getLogger(__name__)


class PageFetchError(Exception):
    """Raised when a page cannot be retrieved"""
    pass


class NoLinksFoundError(Exception):
    """Raised when a fetched page has no embedded links"""
    pass


def fetch_page(page_url: str) -> str:
    """
    GET a page and return its decoded markup.

    Raises:
        PageFetchError: on transport errors, a non-200 status, or an empty body.
    """
    try:
        resp = requests.get(page_url, timeout=settings.FETCH_TIMEOUT, headers={
            "User-Agent": settings.USER_AGENT
        })
    except requests.RequestException as e:
        logger.error(f"Failed to fetch {page_url}: {e}")
        raise PageFetchError(f"err retrieving data: {e}") from e

    if resp.status_code != 200:
        logger.error(f"Failed to fetch {page_url}: HTTP {resp.status_code}")
        raise PageFetchError(f"err retrieving data: HTTP {resp.status_code}")

    if not resp.text:
        logger.error(f"Empty body from {page_url}")
        raise PageFetchError(f"err retrieving data: empty body from {page_url}")

    return resp.text


def fetch_links(page_url: str) -> dict:
    """
    Fetch ``page_url`` and return its sorted link map.

    Raises:
        PageFetchError: see fetch_page().
        NoLinksFoundError: the page was fetched but holds no links.
    """
    markup = fetch_page(page_url)
    links = parse_links(markup, page_url)
    if not links:
        raise NoLinksFoundError(f"No external links from: {page_url}")
    logger.info(f"Found {len(links)} link types on {page_url}")
    return links
