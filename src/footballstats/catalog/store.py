"""Immutable player catalog and its loaders."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from pydantic import ValidationError

from footballstats.models import PlayerRecord

from .data import DEFAULT_PLAYERS


logger = logging.getLogger(__name__)


class CatalogIntegrityError(ValueError):
    """Raised when a dataset cannot back the site (duplicate slugs, invalid rows)."""


class PlayerCatalog:
    """Fixed-order, read-only collection of players keyed by slug.

    The catalog is validated once on construction; lookups never raise.
    """

    __slots__ = ("_players", "_by_slug")

    def __init__(self, players: Iterable[PlayerRecord]) -> None:
        ordered = tuple(players)
        by_slug: dict[str, PlayerRecord] = {}
        duplicates: list[str] = []
        for player in ordered:
            if player.slug in by_slug:
                duplicates.append(player.slug)
                continue
            by_slug[player.slug] = player
        if duplicates:
            raise CatalogIntegrityError(f"Duplicate player slugs: {', '.join(sorted(set(duplicates)))}")
        self._players = ordered
        self._by_slug = by_slug

    def find_by_slug(self, slug: str) -> Optional[PlayerRecord]:
        """Return the player published at ``slug`` or ``None`` when unknown."""

        if not isinstance(slug, str):
            return None
        return self._by_slug.get(slug)

    def list_slugs(self) -> List[str]:
        """Every slug in catalog order; one page is published per entry."""

        return [player.slug for player in self._players]

    def __iter__(self) -> Iterator[PlayerRecord]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, slug: object) -> bool:
        return isinstance(slug, str) and slug in self._by_slug

    def __repr__(self) -> str:
        return f"PlayerCatalog({len(self._players)} players)"


def catalog_from_rows(rows: Iterable[Mapping[str, Any]]) -> PlayerCatalog:
    """Validate raw mappings into a catalog, folding pydantic errors into integrity errors."""

    players: list[PlayerRecord] = []
    for index, row in enumerate(rows):
        try:
            players.append(PlayerRecord.model_validate(row))
        except ValidationError as exc:
            label = row.get("slug") if isinstance(row, Mapping) else None
            raise CatalogIntegrityError(
                f"Invalid player at index {index} ({label or 'no slug'}): {exc}"
            ) from exc
    return PlayerCatalog(players)


def default_catalog() -> PlayerCatalog:
    """The built-in dataset."""

    return catalog_from_rows(DEFAULT_PLAYERS)


def load_catalog(path: Path) -> PlayerCatalog:
    """Load a JSON array of player objects from ``path``."""

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogIntegrityError(f"Dataset not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogIntegrityError(f"Dataset {path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise CatalogIntegrityError(f"Dataset {path} must contain a JSON array of players")
    for index, row in enumerate(raw):
        if not isinstance(row, dict):
            raise CatalogIntegrityError(f"Dataset {path} entry {index} is not an object")
    catalog = catalog_from_rows(raw)
    logger.info("Loaded %d players from %s", len(catalog), path)
    return catalog


def resolve_catalog(data_path: Optional[Path] = None) -> PlayerCatalog:
    """Load ``data_path`` when given, otherwise fall back to the built-in dataset."""

    if data_path is not None:
        return load_catalog(data_path)
    catalog = default_catalog()
    logger.info("Loaded %d built-in players", len(catalog))
    return catalog
