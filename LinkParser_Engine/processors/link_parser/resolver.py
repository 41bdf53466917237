"""
Resolver — Turns a scanned link literal into an absolute, normalised address.

Relative links are anchored on the page address:
    //host/x   -> https://host/x
    /x         -> scheme://host/x          (root address)
    #x         -> page address + #x
    x          -> last directory + /x

Anything that still does not look like an address afterwards is dropped.
Nothing in here raises on bad input.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote

from .scanner import LinkOccurrence, MarkerKind

logger = logging.getLogger(__name__)


DEFAULT_SCHEME = "https"
NOOP_FRAGMENTS = ("javascript:void(0);",)

_SCHEME_SEP = "://"
_SCHEME_HEAD_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):/")
_SLASH_RUN_RE = re.compile(r"/{2,}")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def site_addresses(page_url: str) -> tuple[str, str]:
    """
    Return (root_url, last_dir_url) for a page address.

    root_url:     scheme + host, e.g. https://ex.com
    last_dir_url: address up to and including its final '/', or the whole
                  address when nothing follows the host.
    """
    sep = page_url.find(_SCHEME_SEP)
    host_start = sep + len(_SCHEME_SEP) if sep != -1 else 0

    first_slash = page_url.find("/", host_start)
    root_url = page_url[:first_slash] if first_slash != -1 else page_url

    last_slash = page_url.rfind("/")
    last_dir_url = page_url[:last_slash + 1] if last_slash >= host_start else page_url
    return root_url, last_dir_url


def decode_link(occurrence: LinkOccurrence) -> str:
    """Unescape '\\/' and percent-decode, keeping the literal if decoding fails."""
    link = occurrence.raw_span.replace("\\/", "/")
    if occurrence.marker_kind is MarkerKind.BARE_PROTOCOL and link[4:5] not in ("s", ":", "%"):
        return link
    if _BAD_ESCAPE_RE.search(link):
        logger.debug("Keeping link literal with malformed escape: %r", link)
        return link
    try:
        return unquote(link, errors="strict").replace("\\/", "/")
    except UnicodeDecodeError:
        logger.debug("Keeping undecodable link literal: %r", link)
        return link


def format_link(link: str) -> str:
    """Collapse '//' runs (keeping the scheme's), unescape '&amp;', drop JS no-ops."""
    link = _SLASH_RUN_RE.sub("/", link)
    link = _SCHEME_HEAD_RE.sub(r"\1://", link, count=1)
    link = link.replace("&amp;", "&")
    for fragment in NOOP_FRAGMENTS:
        link = link.replace(fragment, "")
    return link


def is_resolved_link(link: str) -> bool:
    """Absolute-looking, dotted, not dangling, and no parent-directory hops."""
    return (
        "//" in link
        and "." in link
        and not link.endswith((".", "="))
        and "/../" not in link
    )


def absolute_link(link: str, page_url: str) -> str:
    """Anchor a decoded link on the page address (no normalisation)."""
    if link.startswith("//"):
        link = f"{DEFAULT_SCHEME}:{link}"
    if link.startswith("http"):
        return link

    root_url, last_dir_url = site_addresses(page_url)
    if link.startswith("/"):
        header = root_url
    elif link.startswith("#"):
        header = page_url
    else:
        header = last_dir_url

    if not header.endswith("/") and not link.startswith("#"):
        return f"{header}/{link}"
    return header + link


def resolve_link(occurrence: LinkOccurrence, page_url: str) -> str | None:
    """Resolve one occurrence against ``page_url``; None when it is noise."""
    link = decode_link(occurrence)
    if not link:
        return None
    link = format_link(absolute_link(link, page_url))
    if not is_resolved_link(link):
        logger.debug("Discarding unresolvable link: %r", link)
        return None
    return link
