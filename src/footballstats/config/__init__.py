"""Configuration helpers for the site."""

from .site import SiteSettings, load_settings

__all__ = [
    "SiteSettings",
    "load_settings",
]
