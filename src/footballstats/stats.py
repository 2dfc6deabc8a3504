"""Aggregate and per-player statistics shown on the hub and profile pages."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel
from pydantic.config import ConfigDict

from footballstats.models import PlayerRecord


class ListingSummary(BaseModel):
    count: int = 0
    total_goals: int = 0
    total_assists: int = 0
    total_appearances: int = 0

    model_config = ConfigDict(frozen=True)


class PlayerRatios(BaseModel):
    goals_per_appearance: float = 0.0
    assists_per_appearance: float = 0.0
    contributions_per_appearance: float = 0.0

    model_config = ConfigDict(frozen=True)


def listing_summary(players: Iterable[PlayerRecord]) -> ListingSummary:
    """Sum the counters across every player; an empty catalog yields zeros."""

    count = goals = assists = appearances = 0
    for player in players:
        count += 1
        goals += player.goals
        assists += player.assists
        appearances += player.appearances
    return ListingSummary(
        count=count,
        total_goals=goals,
        total_assists=assists,
        total_appearances=appearances,
    )


def _per_appearance(value: int, appearances: int) -> float:
    if appearances <= 0:
        return 0.0
    return value / appearances


def player_ratios(player: PlayerRecord) -> PlayerRatios:
    """Goals, assists and goal contributions per appearance.

    A player without appearances gets ``0.0`` for every ratio.
    """

    return PlayerRatios(
        goals_per_appearance=_per_appearance(player.goals, player.appearances),
        assists_per_appearance=_per_appearance(player.assists, player.appearances),
        contributions_per_appearance=_per_appearance(player.goals + player.assists, player.appearances),
    )
