"""
Link Parser — Given a page's markup and its address, returns the page's
embedded links, resolved, typed, deduplicated and sorted.

Fetching the markup is left to the caller (see connectors.page_fetcher).
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .classifier import classify
from .resolver import resolve_link
from .scanner import scan_markers
from .sorter import LinkMap, LinkMapBuilder
from .taxonomy import DEFAULT_TAXONOMY, ExtensionTaxonomy

logger = logging.getLogger(__name__)


class ClassifiedLink(NamedTuple):
    url: str
    category: str


class LinkParser:
    """Runs scan -> resolve -> classify -> sort over one document at a time."""

    def __init__(self, taxonomy: ExtensionTaxonomy = DEFAULT_TAXONOMY,
                 lookback: int | None = None):
        self.taxonomy = taxonomy
        self.lookback = lookback

    def classified_links(self, markup: str, page_url: str) -> list[ClassifiedLink]:
        """Every surviving link with its type, in scan order (not deduplicated)."""
        links = []
        for occurrence in scan_markers(markup):
            url = resolve_link(occurrence, page_url)
            if url is None:
                continue
            category = classify(occurrence, url, markup, page_url,
                                self.taxonomy, self.lookback)
            links.append(ClassifiedLink(url, category))
        return links

    def parse(self, markup: str, page_url: str) -> LinkMap | None:
        """
        Return the sorted link map for ``markup`` served from ``page_url``.

        Returns:
            {link_type: [urls] | {extension: [urls]}}, or None when the page
            has no links at all.
        """
        builder = LinkMapBuilder(self.taxonomy)
        for link in self.classified_links(markup, page_url):
            builder.add(link.category, link.url)

        result = builder.build()
        if result is None:
            logger.info("No links found in %s", page_url)
        else:
            logger.debug("Parsed %d links in %d types from %s",
                         len(builder), len(result), page_url)
        return result


def parse_links(markup: str, page_url: str,
                taxonomy: ExtensionTaxonomy = DEFAULT_TAXONOMY) -> LinkMap | None:
    """Convenience wrapper: ``LinkParser(taxonomy).parse(markup, page_url)``."""
    return LinkParser(taxonomy).parse(markup, page_url)
