import json
from pathlib import Path

import pytest

from footballstats.catalog import default_catalog
from footballstats.catalog.data import DEFAULT_PLAYERS
from footballstats.cli import build_site, main
from footballstats.config import SiteSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "FOOTBALLSTATS_SITE_NAME",
        "FOOTBALLSTATS_BASE_URL",
        "FOOTBALLSTATS_RELATED_LIMIT",
        "FOOTBALLSTATS_DATA_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


def test_build_site_writes_one_page_per_slug(tmp_path: Path):
    catalog = default_catalog()
    written = build_site(catalog, SiteSettings(), tmp_path)

    for slug in catalog.list_slugs():
        page = tmp_path / "players" / slug / "index.html"
        assert page.exists()
        assert "application/ld+json" in page.read_text(encoding="utf-8")
    assert (tmp_path / "index.html").exists()
    assert (tmp_path / "404.html").exists()
    assert (tmp_path / "sitemap.xml").exists()
    assert (tmp_path / "robots.txt").exists()
    assert len(written) == len(catalog) + 4


def test_main_build_uses_base_url(tmp_path: Path):
    assert main(["--base-url", "https://example.org", "build", str(tmp_path)]) == 0
    sitemap = (tmp_path / "sitemap.xml").read_text(encoding="utf-8")
    assert "<loc>https://example.org/players/lionel-messi</loc>" in sitemap


def test_main_check_prints_summary(capsys):
    assert main(["check"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["count"] == 6
    assert summary["total_goals"] == sum(row["goals"] for row in DEFAULT_PLAYERS)


def test_main_check_rejects_duplicate_slugs(tmp_path: Path, capsys):
    path = tmp_path / "players.json"
    path.write_text(json.dumps([DEFAULT_PLAYERS[0], DEFAULT_PLAYERS[0]]), encoding="utf-8")

    assert main(["--data", str(path), "check"]) == 1
    assert "Duplicate player slugs" in capsys.readouterr().err
