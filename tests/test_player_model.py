import pytest
from pydantic import ValidationError

from footballstats.models import PlayerRecord

from .helpers import make_player


def test_player_record_is_frozen():
    record = make_player()

    assert record.slug == "lionel-messi"
    assert record.team == "Inter Miami CF"

    with pytest.raises((TypeError, ValidationError)):
        record.slug = "someone-else"  # type: ignore[misc]


@pytest.mark.parametrize("slug", ["Lionel-Messi", "lionel messi", "players/lionel", "-messi", "messi-", ""])
def test_player_record_rejects_non_url_safe_slugs(slug: str):
    with pytest.raises(ValidationError):
        make_player(slug=slug)


@pytest.mark.parametrize("field", ["goals", "assists", "appearances", "age"])
def test_player_record_rejects_negative_counters(field: str):
    with pytest.raises(ValidationError):
        make_player(**{field: -1})


def test_player_record_allows_zero_appearances():
    record = make_player(goals=0, assists=0, appearances=0)
    assert record.appearances == 0


def test_player_record_requires_name():
    with pytest.raises(ValidationError):
        PlayerRecord.model_validate({"slug": "x"})


@pytest.mark.parametrize("image", ["", "images/x.jpg", "ftp://cdn.example.org/x.jpg", "https://", "/"])
def test_player_record_rejects_image_that_is_not_url_or_site_path(image: str):
    with pytest.raises(ValidationError):
        make_player(image=image)


@pytest.mark.parametrize("image", ["/images/players/kylian-mbappe.jpg", "http://example.org/a.jpg"])
def test_player_record_accepts_absolute_or_site_relative_image(image: str):
    assert make_player(image=image).image == image


@pytest.mark.parametrize("field", ["goals", "assists", "appearances", "age"])
@pytest.mark.parametrize("value", [True, "838", 838.0])
def test_player_record_counters_must_be_real_integers(field: str, value: object):
    with pytest.raises(ValidationError):
        make_player(**{field: value})
