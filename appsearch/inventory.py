from __future__ import annotations

"""
Installed-application inventory.

``Inventory`` is the narrow interface the search worker needs:

* list_candidates(flags) -> List[CandidateItem]
* get_enabled_setting(package_name) -> EnabledSetting
* get_module_info(package_name) -> ModuleInfo   (raises NameNotFoundError)

``InMemoryInventory`` serves a fixed snapshot, either built in code or
loaded from a JSON records file with ``load_inventory_snapshot``.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

import pandas as pd
from loguru import logger

from .config import INVENTORY_SNAPSHOT_PATH
from .exceptions import InventoryError, NameNotFoundError
from .pipeline_types import CandidateItem, EnabledSetting, MatchFlags, ModuleInfo

ALL_APPS_FLAGS = (
    MatchFlags.MATCH_DISABLED_COMPONENTS
    | MatchFlags.MATCH_DISABLED_UNTIL_USED_COMPONENTS
    | MatchFlags.MATCH_INSTANT
)


class Inventory(Protocol):
    def list_candidates(self, flags: MatchFlags) -> List[CandidateItem]:
        ...

    def get_enabled_setting(self, package_name: str) -> EnabledSetting:
        ...

    def get_module_info(self, package_name: str) -> ModuleInfo:
        ...


class InMemoryInventory:
    """
    Inventory over a fixed list of items.

    Every item is reported as its own module unless ``item.module`` names a
    shared one. Module lookups for packages in ``unknown_modules`` raise
    NameNotFoundError.
    """

    def __init__(
        self,
        items: Iterable[CandidateItem],
        unknown_modules: Iterable[str] = (),
    ) -> None:
        self._items: Dict[str, CandidateItem] = {}
        for item in items:
            if item.package_name in self._items:
                raise InventoryError(f"Duplicate package in inventory: {item.package_name}")
            self._items[item.package_name] = item
        self._unknown_modules = set(unknown_modules)

    def __len__(self) -> int:
        return len(self._items)

    def _lookup(self, package_name: str) -> CandidateItem:
        item = self._items.get(package_name)
        if item is None:
            raise NameNotFoundError(package_name)
        return item

    def list_candidates(self, flags: MatchFlags = ALL_APPS_FLAGS) -> List[CandidateItem]:
        out: List[CandidateItem] = []
        for item in self._items.values():
            if not item.enabled:
                if item.enabled_setting == EnabledSetting.DISABLED_UNTIL_USED:
                    if not flags & MatchFlags.MATCH_DISABLED_UNTIL_USED_COMPONENTS:
                        continue
                elif not flags & MatchFlags.MATCH_DISABLED_COMPONENTS:
                    continue
            if item.instant and not flags & MatchFlags.MATCH_INSTANT:
                continue
            out.append(item)
        return out

    def get_enabled_setting(self, package_name: str) -> EnabledSetting:
        return self._lookup(package_name).enabled_setting

    def get_module_info(self, package_name: str) -> ModuleInfo:
        if package_name in self._unknown_modules:
            raise NameNotFoundError(package_name)
        item = self._lookup(package_name)
        return ModuleInfo(name=item.module or package_name, hidden=item.hidden)


# ---------------------------
# Snapshot loading
# ---------------------------

REQUIRED_COLUMNS = ["package_name", "label"]


def _coerce_bool(val, default: bool) -> bool:
    if val is None:
        return default
    if isinstance(val, bool):
        return val
    try:
        if pd.isna(val):
            return default
    except (TypeError, ValueError):
        pass
    s = str(val).strip().lower()
    if s in {"1", "true", "yes", "y"}:
        return True
    if s in {"0", "false", "no", "n"}:
        return False
    return default


def _coerce_enabled_setting(val) -> EnabledSetting:
    if val is None:
        return EnabledSetting.DEFAULT
    if isinstance(val, str):
        key = val.strip().upper()
        if key in EnabledSetting.__members__:
            return EnabledSetting[key]
    try:
        # Numeric columns with gaps come back as floats ("3.0").
        return EnabledSetting(int(float(val)))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Unknown enabled setting {!r}; treating as DEFAULT", val)
        return EnabledSetting.DEFAULT


def _optional_str(val) -> Optional[str]:
    if val is None:
        return None
    try:
        if pd.isna(val):
            return None
    except (TypeError, ValueError):
        pass
    s = str(val).strip()
    return s or None


def inventory_from_df(df: pd.DataFrame) -> InMemoryInventory:
    """
    Build an inventory from a DataFrame with at least package_name / label.

    Optional columns: enabled, enabled_setting, hidden, module, instant,
    module_missing.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InventoryError(f"Inventory snapshot is missing columns: {missing}")

    items: List[CandidateItem] = []
    unknown: List[str] = []
    for row in df.to_dict(orient="records"):
        package_name = _optional_str(row.get("package_name"))
        if package_name is None:
            logger.warning("Skipping inventory row without package_name: {}", row)
            continue
        items.append(
            CandidateItem(
                package_name=package_name,
                label=str(row.get("label") or "").strip(),
                enabled=_coerce_bool(row.get("enabled"), default=True),
                enabled_setting=_coerce_enabled_setting(_optional_str(row.get("enabled_setting"))),
                hidden=_coerce_bool(row.get("hidden"), default=False),
                module=_optional_str(row.get("module")),
                instant=_coerce_bool(row.get("instant"), default=False),
            )
        )
        if _coerce_bool(row.get("module_missing"), default=False):
            unknown.append(package_name)

    return InMemoryInventory(items, unknown_modules=unknown)


def load_inventory_snapshot(path: Path = INVENTORY_SNAPSHOT_PATH) -> InMemoryInventory:
    """
    Load the installed-app inventory from a JSON records file.
    """
    logger.info("Loading inventory snapshot from {}", path)
    try:
        df = pd.read_json(path, orient="records", dtype=False)
    except (OSError, ValueError) as e:
        raise InventoryError(f"Failed to read inventory snapshot {path}: {e}") from e
    inventory = inventory_from_df(df)
    logger.info("Loaded inventory snapshot with {} apps", len(inventory))
    return inventory
