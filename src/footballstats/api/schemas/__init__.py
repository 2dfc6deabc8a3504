"""Pydantic models for API I/O."""

from .player import PlayerDetailResponse, PlayerListResponse

__all__ = [
    "PlayerDetailResponse",
    "PlayerListResponse",
]
