"""Internal cross-linking between profile pages."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, List

from footballstats.models import PlayerRecord


def related_players(players: Iterable[PlayerRecord], current_slug: str, limit: int) -> List[PlayerRecord]:
    """Up to ``limit`` other players in catalog order, never the current one."""

    if limit <= 0:
        return []
    others = (player for player in players if player.slug != current_slug)
    return list(islice(others, limit))
