import json

import pandas as pd
import pytest

from appsearch.exceptions import SiteMapError
from appsearch.sitemap import load_site_map, site_map_from_df


def test_site_map_from_df():
    df = pd.DataFrame(
        {
            "parent_class": ["Home", "Apps"],
            "parent_title": ["Settings", "Apps"],
            "child_class": ["Apps", "Manage"],
            "child_title": ["Apps", "App info"],
        }
    )
    site_map = site_map_from_df(df)
    assert len(site_map) == 2
    assert site_map.build_breadcrumb("Manage", "App info") == ["Settings", "Apps", "App info"]


def test_site_map_from_df_requires_columns():
    with pytest.raises(SiteMapError):
        site_map_from_df(pd.DataFrame({"parent_class": ["Home"]}))


def test_load_site_map(tmp_path):
    path = tmp_path / "sitemap.json"
    path.write_text(
        json.dumps(
            [
                {
                    "parent_class": "Home",
                    "parent_title": "Settings",
                    "child_class": "Manage",
                    "child_title": "App info",
                }
            ]
        ),
        encoding="utf-8",
    )
    site_map = load_site_map(path)
    assert site_map.build_breadcrumb("Manage", "App info") == ["Settings", "App info"]


def test_load_site_map_missing_file(tmp_path):
    with pytest.raises(SiteMapError):
        load_site_map(tmp_path / "missing.json")


def test_site_map_from_df_rejects_null_titles():
    df = pd.DataFrame(
        {
            "parent_class": ["Home"],
            "parent_title": [None],
            "child_class": ["Manage"],
            "child_title": ["App info"],
        }
    )
    with pytest.raises(SiteMapError):
        site_map_from_df(df)


def test_load_site_map_rejects_missing_title(tmp_path):
    path = tmp_path / "sitemap.json"
    path.write_text(
        json.dumps(
            [
                {"parent_class": "Home", "parent_title": "Settings",
                 "child_class": "Apps", "child_title": "Apps"},
                {"parent_class": "Apps", "child_class": "Manage", "child_title": "App info"},
            ]
        ),
        encoding="utf-8",
    )
    with pytest.raises(SiteMapError):
        load_site_map(path)
