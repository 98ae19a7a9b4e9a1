from appsearch import config
from appsearch.payload import Intent, build_payload, package_from_uri


def test_direct_payload_targets_app_details():
    payload = build_payload("com.example.notes", highlightable_menu=False)
    intent = payload.intent

    assert intent.action == config.ACTION_APPLICATION_DETAILS_SETTINGS
    assert intent.data == "package:com.example.notes"
    assert intent.extras[config.EXTRA_SOURCE_METRICS_CATEGORY] == config.DASHBOARD_SEARCH_RESULTS
    assert payload.package_name == "com.example.notes"


def test_trampoline_payload_round_trips_package():
    payload = build_payload("com.example.notes", highlightable_menu=True)
    intent = payload.intent

    assert intent.action == config.SEARCH_RESULT_TRAMPOLINE_ACTION
    assert intent.package == config.SETTINGS_PACKAGE_NAME
    assert intent.data is None
    assert intent.extras[config.EXTRA_DEEP_LINK_HIGHLIGHT_MENU_KEY] == config.MENU_KEY_APPS
    deep_link = intent.extras[config.EXTRA_DEEP_LINK_INTENT_URI]
    assert deep_link.startswith("package:com.example.notes#Intent;")
    assert f"action={config.ACTION_APPLICATION_DETAILS_SETTINGS}" in deep_link
    assert payload.package_name == "com.example.notes"


def test_default_follows_config_flag(monkeypatch):
    monkeypatch.setattr(config, "HIGHLIGHTABLE_MENU_ENABLED", True)
    assert build_payload("pkg").intent.action == config.SEARCH_RESULT_TRAMPOLINE_ACTION
    monkeypatch.setattr(config, "HIGHLIGHTABLE_MENU_ENABLED", False)
    assert build_payload("pkg").intent.action == config.ACTION_APPLICATION_DETAILS_SETTINGS


def test_intent_uri_encodes_int_and_string_extras():
    intent = Intent(action="a.b", data="package:x", extras={"n": 3, "s": "v"})
    assert intent.to_uri() == "package:x#Intent;action=a.b;i.n=3;S.s=v;end"


def test_package_from_uri_rejects_other_schemes():
    assert package_from_uri("https://example.com") is None
    assert package_from_uri("package:") is None
    assert package_from_uri(None) is None
