"""Canonical player model shared by the catalog, SEO and web layers."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
# Absolute http(s) URL or a site-relative path.
IMAGE_PATTERN = r"^(https?://|/)\S+$"


class PlayerRecord(BaseModel):
    """One player profile as published on the site."""

    slug: str = Field(..., min_length=1, pattern=SLUG_PATTERN)
    name: str = Field(..., min_length=1)
    team: str
    position: str
    nationality: str
    age: int = Field(..., ge=0, strict=True)
    goals: int = Field(..., ge=0, strict=True)
    assists: int = Field(..., ge=0, strict=True)
    appearances: int = Field(..., ge=0, strict=True)
    image: str = Field(..., pattern=IMAGE_PATTERN)
    description: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)
