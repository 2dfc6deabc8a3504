"""Command-line interface for serving or pre-generating the site."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from footballstats.api.pages import render_home_page, render_not_found_page, render_player_page
from footballstats.catalog import CatalogIntegrityError, PlayerCatalog, resolve_catalog
from footballstats.config import SiteSettings, load_settings
from footballstats.seo import render_robots, render_sitemap
from footballstats.stats import listing_summary


logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="footballstats", description="Football player profile site")
    parser.add_argument("--data", type=Path, default=None, help="Path to a players JSON file (overrides FOOTBALLSTATS_DATA_PATH)")
    parser.add_argument("--base-url", default=None, help="Canonical site URL used in metadata and the sitemap")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the site with uvicorn")
    serve.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve.add_argument("--port", type=int, default=8000, help="Port to bind")

    build = subparsers.add_parser("build", help="Pre-generate every page into a directory")
    build.add_argument("output", type=Path, help="Output directory")

    subparsers.add_parser("check", help="Validate the dataset and print totals")
    return parser.parse_args(argv)


def build_site(catalog: PlayerCatalog, settings: SiteSettings, output: Path) -> list[Path]:
    """Write one HTML file per slug plus the hub, not-found and crawler files."""

    output.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    def _write(relative: str, content: str) -> None:
        path = output / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        written.append(path)

    _write("index.html", render_home_page(catalog, settings))
    for slug in catalog.list_slugs():
        player = catalog.find_by_slug(slug)
        if player is None:
            continue
        _write(f"{settings.collection}/{slug}/index.html", render_player_page(player, catalog, settings))
    _write("404.html", render_not_found_page(catalog, settings))
    _write("sitemap.xml", render_sitemap(catalog, settings))
    _write("robots.txt", render_robots(settings))
    logger.info("Wrote %d files for %d players to %s", len(written), len(catalog), output)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = load_settings()
    if args.data is not None:
        settings = replace(settings, data_path=args.data)
    if args.base_url:
        settings = replace(settings, base_url=args.base_url)

    try:
        catalog = resolve_catalog(settings.data_path)
    except CatalogIntegrityError as exc:
        print(f"Invalid player dataset: {exc}", file=sys.stderr)
        return 1

    if args.command == "check":
        summary = listing_summary(catalog)
        print(json.dumps(summary.model_dump(), indent=2))
        return 0

    if args.command == "build":
        written = build_site(catalog, settings, args.output)
        print(f"Wrote {len(written)} files to {args.output}")
        return 0

    import uvicorn

    from footballstats.api import create_app

    uvicorn.run(create_app(catalog, settings), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
