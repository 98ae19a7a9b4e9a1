from __future__ import annotations

"""
FastAPI application exposing the installed-app search worker.

- GET /health   -> {"status": "healthy"}
- POST /search  -> {"results": [...]} ordered by (rank, title, data_key)
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config import (
    INVENTORY_SNAPSHOT_PATH,
    SITEMAP_SNAPSHOT_PATH,
    HealthResponse,
    SearchRequest,
    SearchResponse,
    SearchResultItem,
)
from .exceptions import AppSearchError
from .inventory import Inventory, load_inventory_snapshot
from .pipeline_types import SearchResultRecord
from .query_task import execute
from .sitemap import InMemorySiteMap, SiteMap, load_site_map


def to_api_item(record: SearchResultRecord) -> SearchResultItem:
    return SearchResultItem(
        data_key=record.data_key,
        title=record.title,
        rank=record.rank,
        breadcrumbs=list(record.breadcrumbs),
        payload=record.payload.intent.model_dump(),
    )


def run_search(query: str, inventory: Inventory, site_map: SiteMap) -> SearchResponse:
    records = execute(query, inventory, site_map)
    items: List[SearchResultItem] = [to_api_item(r) for r in records]
    return SearchResponse(results=items)


# -----------------------
# FastAPI app + startup
# -----------------------

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_inventory: Optional[Inventory] = None
_site_map: Optional[SiteMap] = None


@app.on_event("startup")
def startup_event() -> None:
    global _inventory, _site_map
    logger.info("Starting app warmup...")
    try:
        _inventory = load_inventory_snapshot(INVENTORY_SNAPSHOT_PATH)
    except AppSearchError as e:
        _inventory = None
        logger.warning("Inventory not loaded: {}", e)
    _site_map = InMemorySiteMap()
    if SITEMAP_SNAPSHOT_PATH.exists():
        try:
            _site_map = load_site_map(SITEMAP_SNAPSHOT_PATH)
        except AppSearchError as e:
            logger.warning("Site map not loaded: {}; breadcrumbs will hold the root label only", e)
    else:
        logger.warning("No site map at {}; breadcrumbs will hold the root label only", SITEMAP_SNAPSHOT_PATH)
    logger.info("Warmup complete.")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@app.post("/search", response_model=SearchResponse)
def search(req: SearchRequest) -> SearchResponse:
    query = req.query.strip()
    if _inventory is None:
        raise HTTPException(status_code=500, detail="Inventory not loaded")
    try:
        return run_search(query, _inventory, _site_map or InMemorySiteMap())
    except AppSearchError as e:
        logger.exception("Search failed for {!r}: {}", query, e)
        raise HTTPException(status_code=503, detail=str(e)) from e
