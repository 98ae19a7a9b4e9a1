from __future__ import annotations

"""
Navigation payloads attached to installed-app search results.

A payload wraps an intent that, once fired by the caller, opens the app
details screen for the matched package. When the highlightable menu is
enabled the details intent is wrapped in a search trampoline so the
top-level "Apps" entry is highlighted on the way in.

Both shapes carry the package name, recoverable via
``ResultPayload.package_name``.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote, unquote

from pydantic import BaseModel, Field

from . import config


class Intent(BaseModel):
    """Minimal intent: an action, an optional data URI and flat extras."""

    model_config = {"frozen": True}

    action: str
    data: Optional[str] = None
    package: Optional[str] = None
    extras: Dict[str, Any] = Field(default_factory=dict)

    def to_uri(self) -> str:
        """
        Serialize as ``<data>#Intent;action=...;S.key=value;end``.

        Only string and int extras are encoded; that is all payloads here use.
        """
        parts = [f"action={quote(self.action, safe='.')}"]
        if self.package:
            parts.append(f"package={quote(self.package, safe='.')}")
        for key in sorted(self.extras):
            value = self.extras[key]
            prefix = "i" if isinstance(value, int) and not isinstance(value, bool) else "S"
            parts.append(f"{prefix}.{quote(key, safe='.:')}={quote(str(value), safe='.:')}")
        return f"{self.data or ''}#Intent;{';'.join(parts)};end"


def data_uri(package_name: str) -> str:
    return f"{config.INTENT_SCHEME}:{package_name}"


def package_from_uri(uri: Optional[str]) -> Optional[str]:
    """Pull ``<pkg>`` out of ``package:<pkg>`` or ``package:<pkg>#Intent;...``."""
    if not uri:
        return None
    head = uri.split("#", 1)[0]
    scheme, sep, rest = head.partition(":")
    if not sep or scheme != config.INTENT_SCHEME or not rest:
        return None
    return unquote(rest)


class ResultPayload(BaseModel):
    """Opaque navigation payload for one search result."""

    model_config = {"frozen": True}

    intent: Intent

    @property
    def package_name(self) -> Optional[str]:
        direct = package_from_uri(self.intent.data)
        if direct is not None:
            return direct
        return package_from_uri(self.intent.extras.get(config.EXTRA_DEEP_LINK_INTENT_URI))


def build_target_intent(package_name: str) -> Intent:
    return Intent(
        action=config.ACTION_APPLICATION_DETAILS_SETTINGS,
        data=data_uri(package_name),
        extras={config.EXTRA_SOURCE_METRICS_CATEGORY: config.DASHBOARD_SEARCH_RESULTS},
    )


def build_search_trampoline_intent(target: Intent, highlight_menu_key: str) -> Intent:
    return Intent(
        action=config.SEARCH_RESULT_TRAMPOLINE_ACTION,
        package=config.SETTINGS_PACKAGE_NAME,
        extras={
            config.EXTRA_DEEP_LINK_INTENT_URI: target.to_uri(),
            config.EXTRA_DEEP_LINK_HIGHLIGHT_MENU_KEY: highlight_menu_key,
        },
    )


def build_payload(
    package_name: str,
    highlightable_menu: Optional[bool] = None,
) -> ResultPayload:
    """
    Build the navigation payload for ``package_name``.

    ``highlightable_menu`` defaults to the HIGHLIGHTABLE_MENU_ENABLED config flag.
    """
    if highlightable_menu is None:
        highlightable_menu = config.HIGHLIGHTABLE_MENU_ENABLED

    target = build_target_intent(package_name)
    intent = (
        build_search_trampoline_intent(target, config.MENU_KEY_APPS)
        if highlightable_menu
        else target
    )
    return ResultPayload(intent=intent)
