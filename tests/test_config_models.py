import pytest
from pydantic import ValidationError

from appsearch.config import (
    DEFAULT_RANK_POLICY,
    HealthResponse,
    RankPolicy,
    SearchRequest,
    SearchResponse,
    SearchResultItem,
)
from appsearch.payload import build_payload
from appsearch.pipeline_types import SearchResultRecord


def test_default_rank_policy():
    assert DEFAULT_RANK_POLICY.close_tier == 2
    assert DEFAULT_RANK_POLICY.far_tier == 3
    assert RankPolicy().threshold == DEFAULT_RANK_POLICY.threshold


def test_rank_policy_rejects_negative_threshold():
    with pytest.raises(ValidationError):
        RankPolicy(threshold=-1)


def test_search_request_rejects_blank_query():
    with pytest.raises(ValidationError):
        SearchRequest(query="   ")
    assert SearchRequest(query=" cam ").query == " cam "


def test_search_response_structure():
    item = SearchResultItem(
        data_key="com.x",
        title="X",
        rank=2,
        breadcrumbs=["Apps"],
        payload={"action": "a"},
    )
    resp = SearchResponse(results=[item])
    assert len(resp.results) == 1


def test_health_response():
    assert HealthResponse(status="healthy").status == "healthy"


def test_result_record_is_immutable_and_validated():
    record = SearchResultRecord(
        data_key="com.x",
        title="X",
        rank=2,
        breadcrumbs=("Apps",),
        payload=build_payload("com.x", highlightable_menu=False),
        word_difference=0,
    )
    with pytest.raises(ValidationError):
        record.rank = 3

    with pytest.raises(ValidationError):
        SearchResultRecord(
            data_key="com.x",
            title="X",
            rank=2,
            breadcrumbs=["Apps"],
            payload=record.payload,
            word_difference=0,
        )
    with pytest.raises(ValidationError):
        SearchResultRecord(
            data_key="com.x",
            title="   ",
            rank=2,
            breadcrumbs=("Apps",),
            payload=record.payload,
            word_difference=0,
        )
    with pytest.raises(ValidationError):
        SearchResultRecord(
            data_key="com.x",
            title="X",
            rank=2,
            breadcrumbs=("Apps",),
            payload=record.payload,
            word_difference=-1,
        )


def test_result_record_keeps_breadcrumb_object():
    crumbs = ("Settings", "Apps")
    record = SearchResultRecord(
        data_key="com.x",
        title="X",
        rank=2,
        breadcrumbs=crumbs,
        payload=build_payload("com.x", highlightable_menu=False),
        word_difference=0,
    )
    assert record.breadcrumbs is crumbs

    with pytest.raises(ValidationError):
        SearchResultRecord(
            data_key="com.x",
            title="X",
            rank=2,
            breadcrumbs=("Apps", 3),
            payload=record.payload,
            word_difference=0,
        )
