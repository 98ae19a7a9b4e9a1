from __future__ import annotations

from typing import Iterable, List

from loguru import logger

from .exceptions import NameNotFoundError
from .inventory import Inventory
from .pipeline_types import CandidateItem, EnabledSetting


def is_searchable(inventory: Inventory, item: CandidateItem) -> bool:
    """
    False for apps disabled by anything other than the user, for apps in a
    hidden module, and for apps whose module lookup fails.
    """
    if not item.enabled:
        try:
            setting = inventory.get_enabled_setting(item.package_name)
        except NameNotFoundError:
            logger.debug("Skipping {}: enabled setting not found", item.package_name)
            return False
        if setting != EnabledSetting.DISABLED_USER:
            logger.debug("Skipping {}: disabled by {}", item.package_name, setting.name)
            return False

    try:
        module_info = inventory.get_module_info(item.package_name)
    except NameNotFoundError:
        logger.debug("Skipping {}: module info not found", item.package_name)
        return False

    if module_info.hidden:
        logger.debug("Skipping {}: module {} is hidden", item.package_name, module_info.name)
        return False
    return True


def filter_candidates(inventory: Inventory, items: Iterable[CandidateItem]) -> List[CandidateItem]:
    return [item for item in items if is_searchable(inventory, item)]
