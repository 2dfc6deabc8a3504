"""Per-page search metadata: title, description, keywords and social preview."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from footballstats.config import SiteSettings
from footballstats.models import PlayerRecord


SITE_KEYWORDS = (
    "football player stats",
    "soccer player profile",
)

HOME_KEYWORDS = (
    "football player stats",
    "soccer player profile",
    "player performance analysis",
    "football statistics",
    "soccer player stats",
)

PREVIEW_IMAGE_WIDTH = 600
PREVIEW_IMAGE_HEIGHT = 750


class PreviewImage(BaseModel):
    url: str
    width: int
    height: int
    alt: str

    model_config = ConfigDict(frozen=True)


class SocialPreview(BaseModel):
    title: str
    description: str
    page_type: str
    canonical_url: str
    site_name: Optional[str] = None
    images: List[PreviewImage] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class SeoMetadata(BaseModel):
    title: str
    description: str
    keywords: List[str] = Field(default_factory=list)
    social_preview: Optional[SocialPreview] = None
    canonical_url: Optional[str] = None
    indexable: bool = True

    model_config = ConfigDict(frozen=True)


def not_found_seo_metadata(settings: SiteSettings) -> SeoMetadata:
    return SeoMetadata(
        title=f"Player Not Found - {settings.site_name}",
        description="The requested player profile could not be found.",
        indexable=False,
    )


def player_seo_metadata(player: Optional[PlayerRecord], settings: SiteSettings) -> SeoMetadata:
    """Build the metadata bundle for a profile page, or the not-found fallback."""

    if player is None:
        return not_found_seo_metadata(settings)

    canonical = settings.player_url(player.slug)
    career = f"{player.goals} goals, {player.assists} assists in {player.appearances} appearances"
    return SeoMetadata(
        title=f"{player.name} - {player.team} | Stats & Profile | {settings.site_name}",
        description=(
            f"{player.name} plays {player.position} for {player.team}. Career stats: {career}. "
            "Detailed football player profile and performance analysis."
        ),
        keywords=[
            f"{player.name} stats",
            f"{player.name} {player.team}",
            f"{player.name} goals assists",
            *SITE_KEYWORDS,
        ],
        social_preview=SocialPreview(
            title=f"{player.name} - {player.team} Stats & Profile",
            description=f"{player.name} plays {player.position} for {player.team}. {career}.",
            page_type="profile",
            canonical_url=canonical,
            images=[
                PreviewImage(
                    url=settings.absolute_url(player.image),
                    width=PREVIEW_IMAGE_WIDTH,
                    height=PREVIEW_IMAGE_HEIGHT,
                    alt=f"{player.name} - {player.team}",
                )
            ],
        ),
        canonical_url=canonical,
    )


def home_seo_metadata(settings: SiteSettings) -> SeoMetadata:
    name = settings.site_name
    return SeoMetadata(
        title=f"{name} - Football Player Stats, Profiles & Performance Analysis",
        description=(
            "Explore comprehensive football player statistics, profiles, and performance analysis. "
            "Get detailed stats on goals, assists, and more for top soccer players worldwide."
        ),
        keywords=list(HOME_KEYWORDS),
        social_preview=SocialPreview(
            title=f"{name} - Football Player Stats & Profiles",
            description=(
                "Explore comprehensive football player statistics, profiles, and performance "
                "analysis for top players worldwide."
            ),
            page_type="website",
            canonical_url=settings.hub_url(),
            site_name=name,
        ),
        canonical_url=settings.hub_url(),
    )
