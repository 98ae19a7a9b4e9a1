"""Typed containers shared across pipeline modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .payload import ResultPayload


class EnabledSetting(enum.IntEnum):
    """Why an application is (or is not) enabled."""

    DEFAULT = 0
    ENABLED = 1
    DISABLED = 2
    DISABLED_USER = 3
    DISABLED_UNTIL_USED = 4


class MatchFlags(enum.IntFlag):
    """Which applications ``Inventory.list_candidates`` should include."""

    NONE = 0
    MATCH_DISABLED_COMPONENTS = 0x00000200
    MATCH_DISABLED_UNTIL_USED_COMPONENTS = 0x00008000
    MATCH_INSTANT = 0x00800000


@dataclass(frozen=True)
class ModuleInfo:
    name: str
    hidden: bool = False


@dataclass(frozen=True)
class CandidateItem:
    """One installed application as reported by the inventory."""

    package_name: str
    label: str
    enabled: bool = True
    enabled_setting: EnabledSetting = EnabledSetting.DEFAULT
    hidden: bool = False
    module: Optional[str] = None
    instant: bool = False


class SearchResultRecord(BaseModel):
    """
    Immutable search hit handed back to the aggregation layer.
    """

    model_config = {"frozen": True}

    data_key: str = Field(..., min_length=1)
    title: str
    rank: int = Field(ge=0)
    breadcrumbs: Tuple[str, ...]
    payload: ResultPayload
    word_difference: int = Field(ge=0)

    @field_validator("title")
    @classmethod
    def _title_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must be non-empty")
        return value

    @field_validator("breadcrumbs", mode="plain")
    @classmethod
    def _breadcrumbs_are_labels(cls, value: Any) -> Tuple[str, ...]:
        # Plain validator: the tuple is kept as the same object, not rebuilt,
        # so one execution shares a single path.
        if not isinstance(value, tuple) or not all(isinstance(s, str) for s in value):
            raise ValueError("breadcrumbs must be a tuple of strings")
        return value

    @property
    def sort_key(self) -> Tuple[int, str, str]:
        return (self.rank, self.title.casefold(), self.data_key)
