"""Crawl a running site from its sitemap and verify every page is publishable."""

from __future__ import annotations

import argparse
import json
import re
from urllib.parse import urlsplit

import httpx


_LOC_RE = re.compile(r"<loc>([^<]+)</loc>")
_JSON_LD_RE = re.compile(r'<script type="application/ld\+json">(.*?)</script>', re.S)


def _path_of(url: str) -> str:
    parts = urlsplit(url)
    return parts.path or "/"


def _collection_prefix(paths: list[str], default: str) -> str:
    """Directory of the first profile page in the sitemap, e.g. ``/players``."""

    for path in paths:
        head, _, slug = path.rstrip("/").rpartition("/")
        if head and slug:
            return head
    return "/" + default.strip("/")


def main() -> None:
    parser = argparse.ArgumentParser(description="Check every sitemap entry of a footballstats site")
    parser.add_argument("base_url", help="Base URL of the site, e.g. http://localhost:8000")
    parser.add_argument("--missing-slug", default="__nonexistent__", help="Slug expected to answer 404")
    parser.add_argument("--collection", default="players", help="Profile path prefix used when the sitemap lists no players")
    args = parser.parse_args()

    failures: list[str] = []
    with httpx.Client(base_url=args.base_url) as client:
        resp = client.get("/sitemap.xml")
        resp.raise_for_status()
        paths = [_path_of(url) for url in _LOC_RE.findall(resp.text)]
        print(f"Sitemap lists {len(paths)} pages")

        for path in paths:
            page = client.get(path)
            if page.status_code != 200:
                failures.append(f"{path}: HTTP {page.status_code}")
                continue
            if path == "/":
                continue
            blocks = _JSON_LD_RE.findall(page.text)
            if not blocks:
                failures.append(f"{path}: no JSON-LD block")
                continue
            try:
                json.loads(blocks[0])
            except json.JSONDecodeError as exc:
                failures.append(f"{path}: invalid JSON-LD ({exc})")

        missing_path = f"{_collection_prefix(paths, args.collection)}/{args.missing_slug}"
        missing = client.get(missing_path)
        if missing.status_code != 404:
            failures.append(f"{missing_path}: expected 404, got {missing.status_code}")

    if failures:
        raise SystemExit("Site check failed:\n" + "\n".join(failures))
    print("All pages OK")


if __name__ == "__main__":
    main()
