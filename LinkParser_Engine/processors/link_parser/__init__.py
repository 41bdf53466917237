"""
Link Parser — Extracts a page's embedded links from its raw markup.

Resolves each link against the page address and groups it by link type
(tag / rel / type context first, file extension second). Output is a
sorted dict ready for display or for inventory.links_to_frame().
"""

from .parser import ClassifiedLink, LinkParser, parse_links
from .taxonomy import DEFAULT_TAXONOMY, ExtensionTaxonomy

__all__ = ["ClassifiedLink", "LinkParser", "parse_links", "DEFAULT_TAXONOMY", "ExtensionTaxonomy"]
