import json
from pathlib import Path

import pytest

from footballstats.catalog import (
    CatalogIntegrityError,
    PlayerCatalog,
    catalog_from_rows,
    default_catalog,
    load_catalog,
    resolve_catalog,
)
from footballstats.catalog.data import DEFAULT_PLAYERS

from .helpers import make_player


def test_default_catalog_order_matches_dataset():
    catalog = default_catalog()
    assert catalog.list_slugs() == [row["slug"] for row in DEFAULT_PLAYERS]
    assert catalog.list_slugs()[0] == "lionel-messi"
    assert len(catalog) == 6


def test_every_listed_slug_resolves():
    catalog = default_catalog()
    for slug in catalog.list_slugs():
        player = catalog.find_by_slug(slug)
        assert player is not None
        assert player.slug == slug


def test_find_returns_the_catalog_record():
    catalog = default_catalog()
    for player in catalog:
        assert catalog.find_by_slug(player.slug) is player


def test_unknown_slug_is_none():
    catalog = default_catalog()
    assert catalog.find_by_slug("__nonexistent__") is None
    assert catalog.find_by_slug("") is None
    assert "__nonexistent__" not in catalog


def test_lookup_is_case_sensitive():
    catalog = default_catalog()
    assert catalog.find_by_slug("Lionel-Messi") is None


def test_single_player_catalog():
    messi = make_player()
    catalog = PlayerCatalog([messi])
    assert catalog.find_by_slug("lionel-messi") == messi
    assert catalog.list_slugs() == ["lionel-messi"]


def test_empty_catalog():
    catalog = PlayerCatalog([])
    assert catalog.list_slugs() == []
    assert catalog.find_by_slug("lionel-messi") is None


def test_duplicate_slugs_are_rejected():
    with pytest.raises(CatalogIntegrityError, match="lionel-messi"):
        PlayerCatalog([make_player(), make_player(name="Another Messi")])


def test_invalid_rows_are_integrity_errors():
    row = dict(DEFAULT_PLAYERS[0], goals=-3)
    with pytest.raises(CatalogIntegrityError, match="index 0"):
        catalog_from_rows([row])


def test_load_catalog_from_json(tmp_path: Path):
    path = tmp_path / "players.json"
    path.write_text(json.dumps(list(DEFAULT_PLAYERS[:2])), encoding="utf-8")

    catalog = load_catalog(path)
    assert catalog.list_slugs() == ["lionel-messi", "cristiano-ronaldo"]


@pytest.mark.parametrize(
    "content",
    ["{not json", json.dumps({"slug": "lionel-messi"}), json.dumps(["lionel-messi"])],
)
def test_load_catalog_rejects_malformed_files(tmp_path: Path, content: str):
    path = tmp_path / "players.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(CatalogIntegrityError):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path: Path):
    with pytest.raises(CatalogIntegrityError, match="not found"):
        load_catalog(tmp_path / "missing.json")


def test_resolve_catalog_defaults_to_builtin():
    assert resolve_catalog(None).list_slugs() == default_catalog().list_slugs()


@pytest.mark.parametrize("field", ["goals", "assists", "appearances", "age"])
@pytest.mark.parametrize("value", [True, "12", 12.0])
def test_non_integer_counters_are_integrity_errors(field: str, value: object):
    row = dict(DEFAULT_PLAYERS[0], **{field: value})
    with pytest.raises(CatalogIntegrityError, match="lionel-messi"):
        catalog_from_rows([row])


def test_empty_image_is_an_integrity_error():
    row = dict(DEFAULT_PLAYERS[1], image="")
    with pytest.raises(CatalogIntegrityError, match="cristiano-ronaldo"):
        catalog_from_rows([row])
