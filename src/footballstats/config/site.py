"""Site-wide settings resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

_SITE_NAME_ENV = "FOOTBALLSTATS_SITE_NAME"
_BASE_URL_ENV = "FOOTBALLSTATS_BASE_URL"
_RELATED_LIMIT_ENV = "FOOTBALLSTATS_RELATED_LIMIT"
_DATA_PATH_ENV = "FOOTBALLSTATS_DATA_PATH"

_SITE_NAME_DEFAULT = "FootballStats"
_BASE_URL_DEFAULT = "https://footballstats.vercel.app"
_RELATED_LIMIT_DEFAULT = 3


@dataclass(frozen=True)
class SiteSettings:
    site_name: str = _SITE_NAME_DEFAULT
    base_url: str = _BASE_URL_DEFAULT
    collection: str = "players"
    related_limit: int = _RELATED_LIMIT_DEFAULT
    data_path: Optional[Path] = None

    def __post_init__(self) -> None:
        # Frozen, so normalise through object.__setattr__.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "related_limit", max(0, int(self.related_limit)))

    def player_path(self, slug: str) -> str:
        return f"/{self.collection}/{slug}"

    def player_url(self, slug: str) -> str:
        return f"{self.base_url}{self.player_path(slug)}"

    def hub_url(self) -> str:
        return self.base_url or "/"

    def absolute_url(self, path: str) -> str:
        """Resolve a site-relative path against ``base_url``; absolute URLs pass through."""

        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    """Integer from the environment; unset or blank means ``default``, junk is logged."""

    raw = _env_str(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); keeping %d", name, raw, default)
        return default
    return value if min_value is None else max(min_value, value)


def load_settings() -> SiteSettings:
    """Build settings from ``FOOTBALLSTATS_*`` environment variables."""

    data_raw = os.getenv(_DATA_PATH_ENV)
    return SiteSettings(
        site_name=_env_str(_SITE_NAME_ENV, _SITE_NAME_DEFAULT),
        base_url=_env_str(_BASE_URL_ENV, _BASE_URL_DEFAULT),
        related_limit=_env_int(_RELATED_LIMIT_ENV, _RELATED_LIMIT_DEFAULT, min_value=0),
        data_path=Path(data_raw) if data_raw else None,
    )
