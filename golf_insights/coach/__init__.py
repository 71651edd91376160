"""Coaching priorities derived from window aggregates."""

from .catalog import COACHING_CATALOG, CoachingItem, CoachingKey
from .priorities import generate, weakest_categories

__all__ = [
    "COACHING_CATALOG",
    "CoachingItem",
    "CoachingKey",
    "generate",
    "weakest_categories",
]
