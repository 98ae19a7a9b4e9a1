from __future__ import annotations

from typing import Optional, Tuple

from loguru import logger

from .config import APPS_ANCHOR_CLASS, APPS_ROOT_LABEL
from .sitemap import SiteMap


class BreadcrumbCache:
    """
    Lazily resolved breadcrumb for one query execution.

    The site map is asked at most once; later calls return the same tuple,
    empty or not.
    """

    def __init__(
        self,
        site_map: SiteMap,
        anchor: str = APPS_ANCHOR_CLASS,
        root_label: str = APPS_ROOT_LABEL,
    ) -> None:
        self._site_map = site_map
        self._anchor = anchor
        self._root_label = root_label
        self._breadcrumb: Optional[Tuple[str, ...]] = None

    def get(self) -> Tuple[str, ...]:
        if self._breadcrumb is None:
            crumbs = tuple(self._site_map.build_breadcrumb(self._anchor, self._root_label))
            logger.debug("Resolved breadcrumb for {}: {}", self._anchor, " > ".join(crumbs))
            self._breadcrumb = crumbs
        return self._breadcrumb
