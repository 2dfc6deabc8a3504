"""Search-engine facing derivations: metadata, JSON-LD, cross-links, sitemap."""

from .linking import related_players
from .metadata import (
    PreviewImage,
    SeoMetadata,
    SocialPreview,
    home_seo_metadata,
    not_found_seo_metadata,
    player_seo_metadata,
)
from .sitemap import render_robots, render_sitemap, sitemap_urls
from .structured_data import breadcrumb_structured_data, player_structured_data, serialize_json_ld

__all__ = [
    "PreviewImage",
    "SeoMetadata",
    "SocialPreview",
    "breadcrumb_structured_data",
    "home_seo_metadata",
    "not_found_seo_metadata",
    "player_seo_metadata",
    "player_structured_data",
    "related_players",
    "render_robots",
    "render_sitemap",
    "serialize_json_ld",
    "sitemap_urls",
]
