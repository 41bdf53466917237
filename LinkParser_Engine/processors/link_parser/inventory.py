"""
Inventory — Flattens a link map into a typed DataFrame for downstream use.
"""

from __future__ import annotations

import os

import pandas as pd

from LinkParser_Engine.config import INVENTORY_FILE

from .classifier import OTHER, link_extension
from .sorter import LinkMap
from .taxonomy import DEFAULT_TAXONOMY, ExtensionTaxonomy


COLUMNS = ["category", "extension", "url"]


def links_to_frame(link_map: LinkMap | None,
                   taxonomy: ExtensionTaxonomy = DEFAULT_TAXONOMY) -> pd.DataFrame:
    """
    One row per url, in link-map order.

    Flattened categories lost their extension layer; their extension is
    recomputed from the url (unknown extensions become 'other').

    Returns:
        DataFrame with columns: [category, extension, url]
    """
    rows = []
    for category, links in (link_map or {}).items():
        if isinstance(links, dict):
            for extension, urls in links.items():
                rows.extend({"category": category, "extension": extension, "url": url} for url in urls)
            continue
        for url in links:
            extension = link_extension(url, taxonomy)
            rows.append({
                "category": category,
                "extension": extension if extension in taxonomy else OTHER,
                "url": url,
            })

    return pd.DataFrame(rows, columns=COLUMNS)


def category_counts(df: pd.DataFrame) -> pd.Series:
    """Number of links per category, largest first."""
    return df["category"].value_counts()


def save_inventory(df: pd.DataFrame, path: str = INVENTORY_FILE) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    df.to_csv(path, index=False, encoding="utf-8")
    return path
