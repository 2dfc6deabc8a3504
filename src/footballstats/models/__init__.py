"""Domain models."""

from .player import IMAGE_PATTERN, SLUG_PATTERN, PlayerRecord

__all__ = ["IMAGE_PATTERN", "PlayerRecord", "SLUG_PATTERN"]
