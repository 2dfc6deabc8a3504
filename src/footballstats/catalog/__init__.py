"""Fixed player catalog and slug lookups."""

from .store import (
    CatalogIntegrityError,
    PlayerCatalog,
    catalog_from_rows,
    default_catalog,
    load_catalog,
    resolve_catalog,
)

__all__ = [
    "CatalogIntegrityError",
    "PlayerCatalog",
    "catalog_from_rows",
    "default_catalog",
    "load_catalog",
    "resolve_catalog",
]
