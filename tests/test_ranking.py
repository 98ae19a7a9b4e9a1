import pytest
from pydantic import ValidationError

from appsearch.config import RankPolicy
from appsearch.payload import build_payload
from appsearch.pipeline_types import SearchResultRecord
from appsearch.ranking import get_rank, sort_results
from appsearch.word_difference import NAME_NO_MATCH


def _record(data_key: str, title: str, rank: int, diff: int = 0) -> SearchResultRecord:
    return SearchResultRecord(
        data_key=data_key,
        title=title,
        rank=rank,
        breadcrumbs=("Apps",),
        payload=build_payload(data_key, highlightable_menu=False),
        word_difference=diff,
    )


def test_default_threshold_splits_tiers():
    assert get_rank(0) == 2
    assert get_rank(5) == 2
    assert get_rank(6) == 3
    assert get_rank(40) == 3


def test_rank_monotonic_across_threshold():
    for close in range(0, 6):
        for far in range(6, 12):
            assert get_rank(close) < get_rank(far)


def test_custom_policy():
    policy = RankPolicy(threshold=2, close_tier=0, far_tier=9)
    assert get_rank(1, policy) == 0
    assert get_rank(2, policy) == 9


def test_policy_rejects_inverted_tiers():
    with pytest.raises(ValidationError):
        RankPolicy(threshold=6, close_tier=4, far_tier=1)


def test_no_match_cannot_be_ranked():
    with pytest.raises(ValueError):
        get_rank(NAME_NO_MATCH)


def test_sort_by_rank_then_title_then_key():
    records = [
        _record("z.pkg", "beta", 3, 7),
        _record("a.pkg", "Alpha", 3, 7),
        _record("m.pkg", "Zeta", 2, 1),
        _record("b.pkg", "alpha", 3, 9),
    ]
    ordered = sort_results(records)
    assert [r.data_key for r in ordered] == ["m.pkg", "a.pkg", "b.pkg", "z.pkg"]


def test_sort_is_reproducible_regardless_of_input_order():
    records = [_record(f"p{i}", f"App {i % 3}", 2 + i % 2, i) for i in range(9)]
    first = [r.data_key for r in sort_results(records)]
    second = [r.data_key for r in sort_results(list(reversed(records)))]
    assert first == second
