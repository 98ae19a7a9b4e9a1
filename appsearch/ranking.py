from __future__ import annotations

from typing import Iterable, List

from .config import DEFAULT_RANK_POLICY, RankPolicy
from .pipeline_types import SearchResultRecord
from .word_difference import NAME_NO_MATCH


def get_rank(word_diff: int, policy: RankPolicy = DEFAULT_RANK_POLICY) -> int:
    """
    A temporary ranking scheme for installed apps.

    ``word_diff`` is the length gap between the label and the query; close
    matches land in ``policy.close_tier``, everything else in ``policy.far_tier``.
    """
    if word_diff == NAME_NO_MATCH:
        raise ValueError("Cannot rank a non-matching candidate")
    if word_diff < policy.threshold:
        return policy.close_tier
    return policy.far_tier


# ---------------------------------------------------------------------------
# Deterministic final ordering
# ---------------------------------------------------------------------------

def sort_results(results: Iterable[SearchResultRecord]) -> List[SearchResultRecord]:
    """
    Order by rank tier, then case-folded title, then data key.

    The data key is unique per execution, so the order is total and
    reruns on identical input are identical.
    """
    return sorted(results, key=lambda r: r.sort_key)
