"""
Classifier — Assigns every resolved link exactly one link type.

Checked in order; first match wins:
    1. enclosing tag     (<script ...>, <img ...>)        -> tag name
    2. rel attribute     (stylesheet / icon)              -> style / img
    3. type attribute    (text/css / image/x-icon)        -> style / img
    4. file extension    (taxonomy lookup)                -> subcategory
       unknown extension                                  -> extendsUrl / other
"""

from __future__ import annotations

import re

from LinkParser_Engine.config import settings

from .scanner import LinkOccurrence, MarkerKind
from .taxonomy import DEFAULT_TAXONOMY, ExtensionTaxonomy


EXTENDS_URL = "extendsUrl"
OTHER = "other"

CONTEXT_TAGS = frozenset({"script", "img"})
STYLE_RELS = frozenset({"stylesheet"})
ICON_RELS = frozenset({"icon"})
STYLE_TYPES = frozenset({"text/css"})
ICON_TYPES = frozenset({"image/x-icon", "image/vnd.microsoft.icon"})

_TAG_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9:_-]*")


def _attribute_re(attribute: str) -> re.Pattern:
    return re.compile(
        rf"(?<![\w-]){re.escape(attribute)}\s*=\s*([\"'])(.*?)\1",
        re.IGNORECASE | re.DOTALL,
    )


_ATTRIBUTE_RES = {name: _attribute_re(name) for name in ("rel", "type")}


def _open_tag_start(markup: str, start: int, lookback: int) -> int | None:
    """Index of the '<' whose tag still encloses ``start``, looking back at most ``lookback`` chars."""
    tag_open = markup.rfind("<", max(0, start - lookback), start)
    if tag_open == -1 or markup.rfind(">", tag_open, start) != -1:
        return None
    return tag_open


def find_enclosing_tag(markup: str, start: int, lookback: int | None = None) -> str | None:
    """Lower-cased name of the unclosed tag around ``start``, if any."""
    if lookback is None:
        lookback = settings.TAG_LOOKBACK
    tag_open = _open_tag_start(markup, start, lookback)
    if tag_open is None:
        return None
    match = _TAG_NAME_RE.match(markup, tag_open + 1)
    return match.group(0).lower() if match else None


def find_tag_attribute(markup: str, start: int, attribute: str,
                       lookback: int | None = None) -> str | None:
    """Quoted value of ``attribute`` on the tag enclosing ``start``, if present."""
    if lookback is None:
        lookback = settings.TAG_LOOKBACK
    tag_open = _open_tag_start(markup, start, lookback)
    if tag_open is None:
        return None
    tag_close = markup.find(">", start)
    if tag_close == -1:
        tag_close = len(markup)
    pattern = _ATTRIBUTE_RES.get(attribute) or _attribute_re(attribute)
    match = pattern.search(markup, tag_open, tag_close)
    return match.group(2) if match else None


def html_type(markup: str, start: int, lookback: int | None = None) -> str | None:
    """Link type implied by the surrounding markup, or None when it says nothing."""
    tag = find_enclosing_tag(markup, start, lookback)
    if tag in CONTEXT_TAGS:
        return tag

    rel = find_tag_attribute(markup, start, "rel", lookback)
    if rel:
        tokens = set(rel.lower().split())
        if tokens & STYLE_RELS:
            return "style"
        if tokens & ICON_RELS:
            return "img"

    mime = find_tag_attribute(markup, start, "type", lookback)
    if mime:
        mime = mime.strip().lower()
        if mime in STYLE_TYPES:
            return "style"
        if mime in ICON_TYPES:
            return "img"
    return None


def link_extension(link: str, taxonomy: ExtensionTaxonomy = DEFAULT_TAXONOMY) -> str:
    """
    Extension of a link: whatever follows the last '.', unless a single '?'
    is preceded closely enough by a '.' or '/' to hold an embedded extension,
    e.g. https://ex.com/app.js?v=1.2 -> 'js'.
    """
    extension = link[link.rfind(".") + 1:]
    q_mark = link.rfind("?")
    if q_mark != -1 and q_mark == link.find("?"):
        idx = max(link.rfind(".", 0, q_mark), link.rfind("/", 0, q_mark)) + 1
        if idx != 0 and idx >= q_mark - taxonomy.longest_extension:
            extension = link[idx:q_mark]
    return extension.lower()


def extension_type(link: str, page_url: str,
                   taxonomy: ExtensionTaxonomy = DEFAULT_TAXONOMY) -> str:
    """Taxonomy subcategory for the link's extension; extendsUrl/other on a miss."""
    subcategory = taxonomy.subcategory_of(link_extension(link, taxonomy))
    if subcategory:
        return subcategory
    return EXTENDS_URL if link.startswith(page_url) else OTHER


def classify(occurrence: LinkOccurrence, link: str, markup: str, page_url: str,
             taxonomy: ExtensionTaxonomy = DEFAULT_TAXONOMY,
             lookback: int | None = None) -> str:
    # Bare protocol hits sit inside script strings; their tag context is meaningless.
    if occurrence.marker_kind is MarkerKind.ATTRIBUTE:
        link_type = html_type(markup, occurrence.context_start, lookback)
        if link_type:
            return link_type
    return extension_type(link, page_url, taxonomy)
