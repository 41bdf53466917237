"""
Scanner — Locates candidate links in raw markup without parsing it.

Each marker gets its own left-to-right pass over the buffer:
    - attribute markers (src=, href=) matched case-insensitively
    - a bare protocol marker (http) that catches addresses living inside
      script-built markup, e.g. '<a href=\\"' + 'https://...' + '\\">'

Passes are independent and do not dedupe against each other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


ATTRIBUTE_MARKERS = ("src=", "href=")
BARE_PROTOCOL_MARKER = "http"

_QUOTES = ('"', "'")

# Whichever of these comes first closes the link.
_LINK_ENDING_RE = re.compile(r"[\"' <\\]|&quot;")

# A bare-protocol hit directly behind one of these was already counted.
_COUNTED_PREFIXES = tuple(
    f"{marker}{quote}" for marker in ATTRIBUTE_MARKERS for quote in _QUOTES
)
_COUNTED_WINDOW = max(len(prefix) for prefix in _COUNTED_PREFIXES)


class MarkerKind(Enum):
    ATTRIBUTE = "attribute"
    BARE_PROTOCOL = "bare_protocol"


@dataclass(frozen=True)
class LinkOccurrence:
    """A candidate link as found in the markup, before resolution."""
    raw_span: str
    context_start: int
    marker_kind: MarkerKind


def end_of_link(markup: str, start: int) -> int:
    """Index of the nearest link delimiter at or after ``start`` (len(markup) if none)."""
    match = _LINK_ENDING_RE.search(markup, start)
    return match.start() if match else len(markup)


def _is_continuation(markup: str, start: int) -> bool:
    return markup.startswith("+", start) or markup.startswith(" +", start)


def _continuation_span(markup: str, start: int) -> str | None:
    """
    Return the literal that a concatenated attribute value continues into.

    EXAMPLE:  href="+\\n"'https://github.com/jrandleman'
    The opening quote (") is found again on the next line; the character
    after it (') is the inner quote that closes the link.
    """
    next_line_quote = markup.find(markup[start - 1], start)
    if next_line_quote == -1 or next_line_quote + 1 >= len(markup):
        return None
    inner_quote = markup[next_line_quote + 1]
    if inner_quote not in _QUOTES:
        return None
    link_end = markup.find(inner_quote, next_line_quote + 2)
    if link_end == -1:
        return None
    return markup[next_line_quote + 2:link_end]


def _opens_value(markup: str, quote_idx: int) -> bool:
    """True when an attribute's '=' is followed by a quote and a non-trivial value."""
    if quote_idx >= len(markup) or markup[quote_idx] not in _QUOTES:
        return False
    return not any(char in _QUOTES for char in markup[quote_idx + 1:quote_idx + 3])


def scan_attribute_marker(markup: str, marker: str) -> list[LinkOccurrence]:
    """All valid occurrences of one attribute marker, in source order."""
    occurrences = []
    for match in re.finditer(re.escape(marker), markup, re.IGNORECASE):
        quote_idx = match.end()
        if not _opens_value(markup, quote_idx):
            continue
        start = quote_idx + 1
        if _is_continuation(markup, start):
            span = _continuation_span(markup, start)
            if span is None:
                continue
        else:
            span = markup[start:end_of_link(markup, start)]
        occurrences.append(LinkOccurrence(span, start, MarkerKind.ATTRIBUTE))
    return occurrences


def scan_bare_protocol(markup: str, marker: str = BARE_PROTOCOL_MARKER) -> list[LinkOccurrence]:
    """All protocol literals not already sitting inside a quoted src/href value."""
    occurrences = []
    for match in re.finditer(re.escape(marker), markup):
        start = match.start()
        preceding = markup[max(0, start - _COUNTED_WINDOW):start].lower()
        if any(prefix in preceding for prefix in _COUNTED_PREFIXES):
            continue
        span = markup[start:end_of_link(markup, start)]
        occurrences.append(LinkOccurrence(span, start, MarkerKind.BARE_PROTOCOL))
    return occurrences


def scan_markers(markup: str) -> list[LinkOccurrence]:
    """Run every marker pass over ``markup`` and concatenate the results."""
    occurrences = []
    for marker in ATTRIBUTE_MARKERS:
        occurrences.extend(scan_attribute_marker(markup, marker))
    occurrences.extend(scan_bare_protocol(markup))
    return occurrences
