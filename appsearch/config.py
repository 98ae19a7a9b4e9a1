from __future__ import annotations

import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator


# ---------------------------
# Paths
# ---------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
INVENTORY_SNAPSHOT_PATH = Path(
    os.getenv("APPSEARCH_INVENTORY_PATH", str(DATA_DIR / "inventory.json"))
)
SITEMAP_SNAPSHOT_PATH = Path(
    os.getenv("APPSEARCH_SITEMAP_PATH", str(DATA_DIR / "sitemap.json"))
)


# ---------------------------
# Query worker identifiers (logging / telemetry)
# ---------------------------

SEARCH_QUERY_INSTALLED_APPS = 2


# ---------------------------
# Ranking policy
# ---------------------------

# Provisional: word difference below the threshold counts as a close match.
DEFAULT_RANK_THRESHOLD = 6
RANK_THRESHOLD = int(os.getenv("APPSEARCH_RANK_THRESHOLD", str(DEFAULT_RANK_THRESHOLD)))
RANK_CLOSE_TIER = 2
RANK_FAR_TIER = 3


# ---------------------------
# Breadcrumb anchor
# ---------------------------

APPS_ANCHOR_CLASS = "com.android.settings.applications.ManageApplications"
APPS_ROOT_LABEL = "App info"


# ---------------------------
# Navigation payload
# ---------------------------

INTENT_SCHEME = "package"
ACTION_APPLICATION_DETAILS_SETTINGS = "android.settings.APPLICATION_DETAILS_SETTINGS"
SEARCH_RESULT_TRAMPOLINE_ACTION = "com.android.settings.SEARCH_RESULT_TRAMPOLINE"
SETTINGS_PACKAGE_NAME = "com.android.settings"

EXTRA_SOURCE_METRICS_CATEGORY = ":settings:source_metrics"
DASHBOARD_SEARCH_RESULTS = 34

EXTRA_DEEP_LINK_INTENT_URI = "android.provider.extra.SETTINGS_EMBEDDED_DEEP_LINK_INTENT_URI"
EXTRA_DEEP_LINK_HIGHLIGHT_MENU_KEY = (
    "android.provider.extra.SETTINGS_EMBEDDED_DEEP_LINK_HIGHLIGHT_MENU_KEY"
)
MENU_KEY_APPS = "top_level_apps"

HIGHLIGHTABLE_MENU_ENABLED = os.getenv("APPSEARCH_HIGHLIGHTABLE_MENU", "0") == "1"


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class RankPolicy(BaseModel):
    """
    Maps a word difference onto a coarse rank tier.
    Lower tiers sort first.
    """

    model_config = {"frozen": True}

    threshold: int = Field(default=RANK_THRESHOLD, ge=0)
    close_tier: int = RANK_CLOSE_TIER
    far_tier: int = RANK_FAR_TIER

    @model_validator(mode="after")
    def _tiers_ordered(self) -> "RankPolicy":
        if self.close_tier > self.far_tier:
            raise ValueError("close_tier must not sort after far_tier")
        return self


DEFAULT_RANK_POLICY = RankPolicy()


class SearchRequest(BaseModel):
    """
    Request body for POST /search.
    """

    query: str = Field(..., min_length=1)

    @field_validator("query")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Query must be non-empty")
        return value


class SearchResultItem(BaseModel):
    """
    Public shape of a single installed-app search hit.
    """

    data_key: str
    title: str
    rank: int
    breadcrumbs: List[str]
    payload: dict


class SearchResponse(BaseModel):
    """
    Response body for POST /search.
    """

    results: List[SearchResultItem]


class HealthResponse(BaseModel):
    """
    Response body for GET /health.
    """

    status: str
