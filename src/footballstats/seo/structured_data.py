"""schema.org JSON-LD payloads embedded in profile pages."""

from __future__ import annotations

import json
from typing import Any, Dict

from footballstats.config import SiteSettings
from footballstats.models import PlayerRecord


SCHEMA_CONTEXT = "https://schema.org"
JOB_TITLE_PREFIX = "Professional Football Player"

# Characters that could close the surrounding <script> element or break
# inline parsing; JSON allows them as \uXXXX escapes.
_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def player_structured_data(player: PlayerRecord, settings: SiteSettings) -> Dict[str, Any]:
    """Describe the player as a schema.org ``Person`` on a ``SportsTeam``."""

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Person",
        "name": player.name,
        "jobTitle": f"{JOB_TITLE_PREFIX} - {player.position}",
        "memberOf": {
            "@type": "SportsTeam",
            "name": player.team,
        },
        "nationality": {
            "@type": "Country",
            "name": player.nationality,
        },
        "url": settings.player_url(player.slug),
        "image": player.image,
        "description": player.description,
    }


def breadcrumb_structured_data(player: PlayerRecord, settings: SiteSettings) -> Dict[str, Any]:
    """BreadcrumbList matching the visible Home / Players / name trail."""

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": 1, "name": "Home", "item": settings.hub_url()},
            {
                "@type": "ListItem",
                "position": 2,
                "name": "Players",
                "item": f"{settings.base_url}/#{settings.collection}",
            },
            {"@type": "ListItem", "position": 3, "name": player.name, "item": settings.player_url(player.slug)},
        ],
    }


def serialize_json_ld(data: Dict[str, Any]) -> str:
    """Compact JSON safe to place verbatim inside ``<script type="application/ld+json">``."""

    text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _SCRIPT_UNSAFE.items():
        text = text.replace(char, escaped)
    return text
