# appsearch/cli.py
import argparse
from pathlib import Path

from . import config
from .inventory import load_inventory_snapshot
from .query_task import execute
from .sitemap import InMemorySiteMap, load_site_map


def main(args) -> int:
    inventory = load_inventory_snapshot(Path(args.inventory))
    sitemap_path = Path(args.sitemap)
    site_map = load_site_map(sitemap_path) if sitemap_path.exists() else InMemorySiteMap()

    results = execute(
        args.query,
        inventory,
        site_map,
        highlightable_menu=args.highlight_menu,
    )
    if not results:
        print(f"No installed apps match {args.query!r}")
        return 0

    for r in results:
        crumbs = " > ".join(r.breadcrumbs)
        print(f"[{r.rank}] {r.title} ({r.data_key})  diff={r.word_difference}  {crumbs}")
    return 0


if __name__ == "__main__":
    # python -m appsearch.cli --query calc
    ap = argparse.ArgumentParser(description="Search installed apps by name")
    ap.add_argument("--query", required=True)
    ap.add_argument("--inventory", default=str(config.INVENTORY_SNAPSHOT_PATH))
    ap.add_argument("--sitemap", default=str(config.SITEMAP_SNAPSHOT_PATH))
    ap.add_argument("--highlight_menu", action="store_true", default=None)
    raise SystemExit(main(ap.parse_args()))
