from __future__ import annotations

from typing import Any

from footballstats.models import PlayerRecord


def make_player(**overrides: Any) -> PlayerRecord:
    data: dict[str, Any] = {
        "name": "Lionel Messi",
        "slug": "lionel-messi",
        "team": "Inter Miami CF",
        "position": "Forward",
        "nationality": "Argentina",
        "age": 38,
        "goals": 838,
        "assists": 377,
        "appearances": 1068,
        "image": "https://upload.wikimedia.org/wikipedia/commons/8/89/Lionel_Messi_2022.jpg",
        "description": "Eight-time Ballon d'Or winner.",
    }
    data.update(overrides)
    return PlayerRecord(**data)
