"""
Sorter — Folds classified links into the final, deterministic link map.

Shape of the result:
    {link_type: [urls]}                    when every url shares one extension
    {link_type: {extension: [urls]}}       otherwise

Keys are alphabetical at every level with 'extendsUrl' then 'other' pinned
last; url lists are sorted. An empty map is reported as None.
"""

from __future__ import annotations

from typing import Container, Iterable, Mapping, TypeVar, Union

from .classifier import EXTENDS_URL, OTHER, link_extension
from .taxonomy import DEFAULT_TAXONOMY, ExtensionTaxonomy


LinkMap = dict[str, Union[list[str], dict[str, list[str]]]]

_PINNED_LAST = (EXTENDS_URL, OTHER)

V = TypeVar("V")


def is_duplicate(link: str, seen: Container[str]) -> bool:
    """True if ``link`` equals a seen link, give or take one trailing '/'."""
    return (
        link in seen
        or link + "/" in seen
        or (link.endswith("/") and link[:-1] in seen)
    )


def dedupe_links(links: Iterable[str]) -> list[str]:
    """First-seen-wins deduplication under trailing-slash equivalence."""
    kept: list[str] = []
    seen: set[str] = set()
    for link in links:
        if not is_duplicate(link, seen):
            kept.append(link)
            seen.add(link)
    return kept


def sort_mapping_keys(mapping: Mapping[str, V]) -> dict[str, V]:
    """Alphabetical keys, with 'extendsUrl' then 'other' moved to the end."""
    ordered = {key: mapping[key] for key in sorted(mapping) if key not in _PINNED_LAST}
    for key in _PINNED_LAST:
        if key in mapping:
            ordered[key] = mapping[key]
    return ordered


class LinkMapBuilder:
    """Accumulates (link_type, url) pairs; shapes and sorts only in build()."""

    def __init__(self, taxonomy: ExtensionTaxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy
        self._links: dict[str, list[str]] = {}
        self._seen: dict[str, set[str]] = {}

    def add(self, link_type: str, link: str) -> bool:
        """Record a link under ``link_type``; returns False if it was a duplicate."""
        seen = self._seen.setdefault(link_type, set())
        if is_duplicate(link, seen):
            return False
        seen.add(link)
        self._links.setdefault(link_type, []).append(link)
        return True

    def __len__(self) -> int:
        return sum(len(links) for links in self._links.values())

    def _by_extension(self, links: list[str]) -> dict[str, list[str]]:
        buckets: dict[str, list[str]] = {}
        for link in links:
            extension = link_extension(link, self.taxonomy)
            if extension not in self.taxonomy:
                extension = OTHER
            buckets.setdefault(extension, []).append(link)
        return buckets

    def build(self) -> LinkMap | None:
        if not self._links:
            return None

        result: LinkMap = {}
        for link_type, links in self._links.items():
            buckets = self._by_extension(links)
            if len(buckets) == 1:
                result[link_type] = sorted(next(iter(buckets.values())))
            else:
                result[link_type] = sort_mapping_keys(
                    {extension: sorted(urls) for extension, urls in buckets.items()}
                )
        return sort_mapping_keys(result)
