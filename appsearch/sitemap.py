from __future__ import annotations

"""
Site map used to resolve breadcrumbs.

The site map is a set of parent/child links between screens, each screen
identified by its class name and shown under a human-readable title. A
breadcrumb for a screen is the chain of titles from the top-most ancestor
down to the screen itself.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

import pandas as pd
from loguru import logger

from .config import SITEMAP_SNAPSHOT_PATH
from .exceptions import SiteMapError


class SiteMap(Protocol):
    def build_breadcrumb(self, anchor: str, root_label: str) -> List[str]:
        ...


@dataclass(frozen=True)
class SiteMapPair:
    parent_class: str
    parent_title: str
    child_class: str
    child_title: str


class InMemorySiteMap:
    """Site map backed by a list of ``SiteMapPair`` links."""

    def __init__(self, pairs: Iterable[SiteMapPair] = ()) -> None:
        self._parent_of: Dict[str, SiteMapPair] = {}
        for pair in pairs:
            if not pair.parent_class or not pair.child_class:
                raise SiteMapError(f"Site map link is missing a class name: {pair}")
            if pair.parent_class == pair.child_class:
                raise SiteMapError(f"Screen cannot be its own parent: {pair.child_class}")
            existing = self._parent_of.get(pair.child_class)
            if existing is not None and existing.parent_class != pair.parent_class:
                logger.warning(
                    "Screen {} has more than one parent ({}, {}); keeping the first",
                    pair.child_class,
                    existing.parent_class,
                    pair.parent_class,
                )
                continue
            self._parent_of[pair.child_class] = pair

    def __len__(self) -> int:
        return len(self._parent_of)

    def build_breadcrumb(self, anchor: str, root_label: str) -> List[str]:
        """
        Titles from the top-most ancestor of ``anchor`` down to ``root_label``.
        """
        crumbs: List[str] = [root_label]
        visited = {anchor}
        current = anchor
        while True:
            pair = self._parent_of.get(current)
            if pair is None:
                break
            if pair.parent_class in visited:
                logger.warning("Cycle in site map at {}; truncating breadcrumb", pair.parent_class)
                break
            crumbs.insert(0, pair.parent_title)
            visited.add(pair.parent_class)
            current = pair.parent_class
        return crumbs


# ---------------------------
# Snapshot loading
# ---------------------------

SITEMAP_COLUMNS = ["parent_class", "parent_title", "child_class", "child_title"]


def _required_str(val) -> Optional[str]:
    if val is None:
        return None
    try:
        if pd.isna(val):
            return None
    except (TypeError, ValueError):
        pass
    s = str(val).strip()
    return s or None


def site_map_from_df(df: pd.DataFrame) -> InMemorySiteMap:
    missing = [c for c in SITEMAP_COLUMNS if c not in df.columns]
    if missing:
        raise SiteMapError(f"Site map snapshot is missing columns: {missing}")

    pairs: List[SiteMapPair] = []
    for row in df[SITEMAP_COLUMNS].to_dict(orient="records"):
        values = {c: _required_str(row.get(c)) for c in SITEMAP_COLUMNS}
        blank = [c for c, v in values.items() if v is None]
        if blank:
            raise SiteMapError(f"Site map link has empty {blank}: {row}")
        pairs.append(SiteMapPair(**values))
    return InMemorySiteMap(pairs)


def load_site_map(path: Path = SITEMAP_SNAPSHOT_PATH) -> InMemorySiteMap:
    """
    Load a JSON records file of parent/child links.
    """
    logger.info("Loading site map from {}", path)
    try:
        df = pd.read_json(path, orient="records")
    except (OSError, ValueError) as e:
        raise SiteMapError(f"Failed to read site map snapshot {path}: {e}") from e
    site_map = site_map_from_df(df)
    logger.info("Loaded site map with {} links", len(site_map))
    return site_map
