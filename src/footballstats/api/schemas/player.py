from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from footballstats.models import PlayerRecord
from footballstats.seo import SeoMetadata
from footballstats.stats import ListingSummary, PlayerRatios


class PlayerListResponse(BaseModel):
    summary: ListingSummary
    players: list[PlayerRecord]


class PlayerDetailResponse(BaseModel):
    player: PlayerRecord
    url: str
    ratios: PlayerRatios
    seo: SeoMetadata
    structured_data: dict[str, Any]
    related: list[str] = Field(default_factory=list)
