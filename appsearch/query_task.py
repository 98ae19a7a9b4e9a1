from __future__ import annotations

"""
Query workers for on-device search.

A worker turns one query into an ordered list of ``SearchResultRecord``.
``InstalledAppResultTask`` is the installed-apps worker:

  1) enumerate every installed app, disabled ones included
  2) drop apps disabled by the system and apps in hidden modules
  3) keep labels whose word difference against the query is a match
  4) rank by word difference, attach breadcrumb + navigation payload
  5) sort by (rank, title, data_key)

Each task owns its breadcrumb cache, so one task serves exactly one query.
"""

import time
from typing import List, Optional

from loguru import logger

from . import config
from .breadcrumb import BreadcrumbCache
from .candidate_filter import filter_candidates
from .config import DEFAULT_RANK_POLICY, RankPolicy
from .inventory import ALL_APPS_FLAGS, Inventory
from .payload import build_payload
from .pipeline_types import CandidateItem, SearchResultRecord
from .ranking import get_rank, sort_results
from .sitemap import SiteMap
from .word_difference import get_word_difference, is_match


class QueryWorker:
    """
    Base class for one search source. Subclasses implement ``query()``.
    """

    worker_id: int = 0

    def __init__(self, site_map: SiteMap, query: str) -> None:
        self.site_map = site_map
        self.query_text = (query or "").strip()

    def query(self) -> List[SearchResultRecord]:
        raise NotImplementedError

    def call(self) -> List[SearchResultRecord]:
        start = time.perf_counter()
        try:
            results = self.query()
        except Exception:
            logger.exception("Query worker {} failed for query {!r}", self.worker_id, self.query_text)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info(
            "Query worker {} returned {} results for {!r} in {:.1f} ms",
            self.worker_id,
            len(results),
            self.query_text,
            elapsed_ms,
        )
        return results


class InstalledAppResultTask(QueryWorker):
    """Search worker for installed apps."""

    worker_id = config.SEARCH_QUERY_INSTALLED_APPS

    def __init__(
        self,
        inventory: Inventory,
        site_map: SiteMap,
        query: str,
        rank_policy: RankPolicy = DEFAULT_RANK_POLICY,
        highlightable_menu: Optional[bool] = None,
    ) -> None:
        super().__init__(site_map, query)
        self.inventory = inventory
        self.rank_policy = rank_policy
        self.highlightable_menu = highlightable_menu
        self._breadcrumb = BreadcrumbCache(site_map)

    def _build_record(self, item: CandidateItem, word_diff: int) -> SearchResultRecord:
        return SearchResultRecord(
            data_key=item.package_name,
            title=item.label,
            rank=get_rank(word_diff, self.rank_policy),
            breadcrumbs=self._breadcrumb.get(),
            payload=build_payload(item.package_name, self.highlightable_menu),
            word_difference=word_diff,
        )

    def query(self) -> List[SearchResultRecord]:
        if not self.query_text:
            return []

        apps = self.inventory.list_candidates(ALL_APPS_FLAGS)
        results: List[SearchResultRecord] = []
        for item in filter_candidates(self.inventory, apps):
            word_diff = get_word_difference(item.label, self.query_text)
            if not is_match(word_diff):
                continue
            results.append(self._build_record(item, word_diff))

        return sort_results(results)


def new_task(
    inventory: Inventory,
    site_map: SiteMap,
    query: str,
    rank_policy: RankPolicy = DEFAULT_RANK_POLICY,
    highlightable_menu: Optional[bool] = None,
) -> InstalledAppResultTask:
    return InstalledAppResultTask(
        inventory,
        site_map,
        query,
        rank_policy=rank_policy,
        highlightable_menu=highlightable_menu,
    )


def execute(
    query: str,
    inventory: Inventory,
    site_map: SiteMap,
    rank_policy: RankPolicy = DEFAULT_RANK_POLICY,
    highlightable_menu: Optional[bool] = None,
) -> List[SearchResultRecord]:
    """
    Run one installed-app search end to end.

    Inventory and site-map failures propagate; there is no partial result.
    """
    task = new_task(
        inventory,
        site_map,
        query,
        rank_policy=rank_policy,
        highlightable_menu=highlightable_menu,
    )
    return task.call()
