"""Crawler discovery files: sitemap.xml and robots.txt."""

from __future__ import annotations

from xml.sax.saxutils import escape

from footballstats.catalog import PlayerCatalog
from footballstats.config import SiteSettings


def sitemap_urls(catalog: PlayerCatalog, settings: SiteSettings) -> list[str]:
    return [settings.hub_url(), *(settings.player_url(slug) for slug in catalog.list_slugs())]


def render_sitemap(catalog: PlayerCatalog, settings: SiteSettings) -> str:
    entries = "\n".join(
        f"  <url><loc>{escape(url)}</loc></url>" for url in sitemap_urls(catalog, settings)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{entries}\n"
        "</urlset>\n"
    )


def render_robots(settings: SiteSettings) -> str:
    return f"User-agent: *\nAllow: /\n\nSitemap: {settings.base_url}/sitemap.xml\n"
