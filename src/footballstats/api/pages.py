"""Server-rendered HTML for the hub, profile and not-found pages."""

from __future__ import annotations

from html import escape
from typing import Iterable, Sequence

from footballstats.catalog import PlayerCatalog
from footballstats.config import SiteSettings
from footballstats.models import PlayerRecord
from footballstats.seo import (
    SeoMetadata,
    breadcrumb_structured_data,
    home_seo_metadata,
    not_found_seo_metadata,
    player_seo_metadata,
    player_structured_data,
    related_players,
    serialize_json_ld,
)
from footballstats.stats import listing_summary, player_ratios


THEME_COLOR = "#0a0a0a"


def _attr(value: object) -> str:
    return escape(str(value), quote=True)


def _head_tags(meta: SeoMetadata) -> str:
    tags = [
        f"<title>{escape(meta.title)}</title>",
        f'<meta name="description" content="{_attr(meta.description)}">',
        f'<meta name="robots" content="{"index, follow" if meta.indexable else "noindex, follow"}">',
    ]
    if meta.keywords:
        tags.append(f'<meta name="keywords" content="{_attr(", ".join(meta.keywords))}">')
    if meta.canonical_url:
        tags.append(f'<link rel="canonical" href="{_attr(meta.canonical_url)}">')
    preview = meta.social_preview
    if preview is not None:
        tags.extend(
            [
                f'<meta property="og:title" content="{_attr(preview.title)}">',
                f'<meta property="og:description" content="{_attr(preview.description)}">',
                f'<meta property="og:type" content="{_attr(preview.page_type)}">',
                f'<meta property="og:url" content="{_attr(preview.canonical_url)}">',
            ]
        )
        if preview.site_name:
            tags.append(f'<meta property="og:site_name" content="{_attr(preview.site_name)}">')
        for image in preview.images:
            tags.extend(
                [
                    f'<meta property="og:image" content="{_attr(image.url)}">',
                    f'<meta property="og:image:width" content="{image.width}">',
                    f'<meta property="og:image:height" content="{image.height}">',
                    f'<meta property="og:image:alt" content="{_attr(image.alt)}">',
                ]
            )
    return "\n    ".join(tags)


def _json_ld_block(payload: dict) -> str:
    return f'<script type="application/ld+json">{serialize_json_ld(payload)}</script>'


def _header(settings: SiteSettings) -> str:
    return f"""<header class=\"site-header\">
        <a class=\"brand\" href=\"/\">{escape(settings.site_name)}</a>
        <nav aria-label=\"Main navigation\">
            <a href=\"/\">Home</a>
            <a href=\"/#{_attr(settings.collection)}\">Players</a>
        </nav>
    </header>"""


def _footer(players: Iterable[PlayerRecord], settings: SiteSettings) -> str:
    links = "".join(
        f'<li><a href="{_attr(settings.player_path(p.slug))}">{escape(p.name)}</a></li>' for p in players
    )
    return f"""<footer class=\"site-footer\">
        <div>
            <strong>{escape(settings.site_name)}</strong>
            <p>Comprehensive football player statistics, profiles, and performance analysis. Your go-to source for soccer player data.</p>
        </div>
        <div>
            <h3>Player Profiles</h3>
            <ul>{links}</ul>
        </div>
        <div>
            <h3>Quick Links</h3>
            <ul><li><a href=\"/\">Home</a></li><li><a href=\"/#{_attr(settings.collection)}\">All Players</a></li></ul>
        </div>
        <p class=\"fineprint\">{escape(settings.site_name)}. Football player stats and soccer player profiles.</p>
    </footer>"""


def _render_page(
    body: str,
    meta: SeoMetadata,
    catalog: PlayerCatalog,
    settings: SiteSettings,
    *,
    head_extra: str = "",
) -> str:
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">
    <meta name=\"theme-color\" content=\"{THEME_COLOR}\">
    {_head_tags(meta)}
    {head_extra}
    <style>
        body {{ font-family: Inter, Arial, sans-serif; margin: 0; background: #f5f7fa; color: #0f172a; }}
        .site-header, .site-footer, main {{ max-width: 72rem; margin: 0 auto; padding: 1rem; }}
        .site-header {{ display: flex; justify-content: space-between; align-items: center; }}
        .site-header nav a {{ margin-left: 1rem; color: #2563eb; text-decoration: none; }}
        .brand {{ font-weight: 700; color: #0f172a; text-decoration: none; }}
        .breadcrumb ol {{ list-style: none; display: flex; gap: 0.5rem; padding: 0; color: #64748b; }}
        .breadcrumb li + li::before {{ content: \"/\"; margin-right: 0.5rem; }}
        .grid {{ display: grid; gap: 1rem; grid-template-columns: repeat(auto-fill, minmax(16rem, 1fr)); }}
        .card {{ background: #fff; border: 1px solid #e2e8f0; border-radius: 12px; padding: 1rem; color: inherit; text-decoration: none; }}
        .card img {{ width: 100%; aspect-ratio: 4 / 5; object-fit: cover; border-radius: 8px; background: #e2e8f0; }}
        .badge {{ display: inline-block; background: #0f172a; color: #fff; border-radius: 6px; padding: 0.15rem 0.6rem; font-size: 0.75rem; }}
        .stats {{ display: grid; gap: 1rem; grid-template-columns: repeat(auto-fit, minmax(8rem, 1fr)); }}
        .stat {{ background: #fff; border: 1px solid #e2e8f0; border-radius: 8px; padding: 1rem; }}
        .stat strong {{ display: block; font-size: 1.75rem; }}
        .profile {{ display: grid; gap: 2rem; grid-template-columns: minmax(0, 24rem) 1fr; }}
        .profile img {{ width: 100%; border-radius: 12px; background: #e2e8f0; }}
        .related a {{ display: flex; gap: 1rem; align-items: center; }}
        .related img {{ width: 4rem; height: 4rem; border-radius: 50%; object-fit: cover; }}
        .site-footer {{ display: grid; gap: 2rem; grid-template-columns: repeat(auto-fit, minmax(12rem, 1fr)); color: #475569; }}
        .site-footer a {{ color: #2563eb; text-decoration: none; }}
        .fineprint {{ grid-column: 1 / -1; font-size: 0.8rem; }}
        .not-found {{ text-align: center; padding: 4rem 1rem; }}
    </style>
</head>
<body>
    {_header(settings)}
    <main>{body}</main>
    {_footer(catalog, settings)}
</body>
</html>"""


def _player_card(player: PlayerRecord, settings: SiteSettings) -> str:
    return f"""<a class=\"card\" href=\"{_attr(settings.player_path(player.slug))}\">
            <img src=\"{_attr(player.image)}\" alt=\"{_attr(f'{player.name} - {player.team} {player.position}')}\" loading=\"lazy\">
            <span class=\"badge\">{escape(player.position)}</span>
            <h3>{escape(player.name)}</h3>
            <p>{escape(player.team)}</p>
            <p>{player.goals} goals &middot; {player.assists} assists &middot; {player.appearances} apps</p>
            <p>{escape(player.nationality)}</p>
        </a>"""


def render_home_page(catalog: PlayerCatalog, settings: SiteSettings) -> str:
    """Hub page linking to every player profile."""

    summary = listing_summary(catalog)
    cards = "\n        ".join(_player_card(player, settings) for player in catalog)
    if not cards:
        cards = "<p>No player profiles are published yet.</p>"
    body = f"""<section class=\"hero\">
        <h1>Football Player Stats &amp; Performance Analysis</h1>
        <p>Comprehensive statistics, profiles, and performance data for the world's top football players.</p>
        <a href=\"#{_attr(settings.collection)}\">Explore Players</a>
    </section>
    <section class=\"stats\" aria-label=\"Site statistics\">
        <div class=\"stat\"><strong>{summary.count}</strong>Player Profiles</div>
        <div class=\"stat\"><strong>{summary.total_goals:,}</strong>Total Goals</div>
        <div class=\"stat\"><strong>{summary.total_assists:,}</strong>Total Assists</div>
        <div class=\"stat\"><strong>{summary.total_appearances:,}</strong>Total Appearances</div>
    </section>
    <section id=\"{_attr(settings.collection)}\">
        <h2>Featured Players</h2>
        <p>Explore detailed statistics and profiles for top football players from around the world.</p>
        <div class=\"grid\">
        {cards}
        </div>
    </section>
    <section>
        <h2>Your Source for Football Player Statistics</h2>
        <p>{escape(settings.site_name)} provides comprehensive football player statistics and performance analysis. Whether you're looking for soccer player profiles, career stats, or performance data, our platform covers the top players in world football.</p>
    </section>"""
    return _render_page(body, home_seo_metadata(settings), catalog, settings)


def _related_section(related: Sequence[PlayerRecord], settings: SiteSettings) -> str:
    items = "".join(
        f"""<a class=\"card\" href=\"{_attr(settings.player_path(p.slug))}\">
                <img src=\"{_attr(p.image)}\" alt=\"{_attr(f'{p.name} - {p.team}')}\" loading=\"lazy\">
                <span><strong>{escape(p.name)}</strong><br>{escape(p.team)} &middot; {p.goals} goals</span>
            </a>"""
        for p in related
    )
    listing = f'<div class="grid">{items}</div>' if items else ""
    return f"""<section class=\"related\">
        <h2>More Player Profiles</h2>
        {listing}
        <p><a href=\"/#{_attr(settings.collection)}\">View All Players</a></p>
    </section>"""


def render_player_page(player: PlayerRecord, catalog: PlayerCatalog, settings: SiteSettings) -> str:
    """Profile page with stats, ratios, JSON-LD and cross-links."""

    ratios = player_ratios(player)
    related = related_players(catalog, player.slug, settings.related_limit)
    head_extra = "\n    ".join(
        [
            _json_ld_block(player_structured_data(player, settings)),
            _json_ld_block(breadcrumb_structured_data(player, settings)),
        ]
    )
    body = f"""<nav class=\"breadcrumb\" aria-label=\"Breadcrumb\">
        <ol>
            <li><a href=\"/\">Home</a></li>
            <li><a href=\"/#{_attr(settings.collection)}\">Players</a></li>
            <li aria-current=\"page\">{escape(player.name)}</li>
        </ol>
    </nav>
    <section class=\"profile\">
        <img src=\"{_attr(player.image)}\" alt=\"{_attr(f'{player.name} - {player.team} {player.position}')}\">
        <div>
            <span class=\"badge\">{escape(player.position)}</span>
            <h1>{escape(player.name)}</h1>
            <p>{escape(player.team)} &middot; {escape(player.nationality)}</p>
            <div class=\"stats\">
                <div class=\"stat\"><strong>{player.goals}</strong>Goals</div>
                <div class=\"stat\"><strong>{player.assists}</strong>Assists</div>
                <div class=\"stat\"><strong>{player.appearances}</strong>Appearances</div>
                <div class=\"stat\"><strong>{player.age}</strong>Age</div>
            </div>
            <h2>Performance Ratios</h2>
            <div class=\"stats\">
                <div class=\"stat\"><strong>{ratios.goals_per_appearance:.2f}</strong>Goals per App</div>
                <div class=\"stat\"><strong>{ratios.assists_per_appearance:.2f}</strong>Assists per App</div>
                <div class=\"stat\"><strong>{ratios.contributions_per_appearance:.2f}</strong>G+A per App</div>
            </div>
            <h2>About {escape(player.name)}</h2>
            <p>{escape(player.description)}</p>
        </div>
    </section>
    {_related_section(related, settings)}"""
    return _render_page(body, player_seo_metadata(player, settings), catalog, settings, head_extra=head_extra)


def render_not_found_page(catalog: PlayerCatalog, settings: SiteSettings) -> str:
    body = """<section class=\"not-found\">
        <h1>Player Not Found</h1>
        <p>The player profile you're looking for doesn't exist or has been removed.</p>
        <a href=\"/\">Back to Home</a>
    </section>"""
    return _render_page(body, not_found_seo_metadata(settings), catalog, settings)
