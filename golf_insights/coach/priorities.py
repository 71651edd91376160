from __future__ import annotations

import logging
from typing import List, Mapping

from golf_insights.sg.schemas import SgCategory, SgMeans

from .catalog import CATEGORY_ITEMS, COACHING_CATALOG, CoachingItem

logger = logging.getLogger(__name__)

MAX_ITEMS = 3
WEAKEST_CATEGORIES = 2
MENTAL_ROUTINE_TARGET = 70.0
CRITICAL_ERRORS_PER_ROUND_LIMIT = 2.0

# Tie-break order when two categories share the same mean.
_RANKING_ORDER = (
    SgCategory.APPROACH,
    SgCategory.PUTTING,
    SgCategory.OFF_TEE,
    SgCategory.SHORT_GAME,
)


def _as_means(sg: SgMeans | Mapping[str, float | None]) -> SgMeans:
    if isinstance(sg, SgMeans):
        return sg
    return SgMeans.model_validate(dict(sg))


def weakest_categories(
    sg: SgMeans | Mapping[str, float | None], limit: int = WEAKEST_CATEGORIES
) -> List[SgCategory]:
    """Categories with the lowest mean strokes gained; unknown ones are skipped."""

    means = _as_means(sg)
    ranked = [
        (means.category(category), position, category)
        for position, category in enumerate(_RANKING_ORDER)
        if means.category(category) is not None
    ]
    ranked.sort(key=lambda item: (item[0], item[1]))
    return [category for _, _, category in ranked[:limit]]


def generate(
    sg: SgMeans | Mapping[str, float | None],
    mental_routine_rate: float | None,
    critical_errors_per_round: float | None,
) -> List[CoachingItem]:
    """Pick up to three coaching focuses.

    The two weakest strokes-gained categories come first, followed by the
    mental-routine item when fewer than 70% of holes had a perfect routine and
    the critical-error item when more than two errors per round were logged.
    """

    items = [
        COACHING_CATALOG[CATEGORY_ITEMS[category]]
        for category in weakest_categories(sg)
    ]

    if mental_routine_rate is not None and mental_routine_rate < MENTAL_ROUTINE_TARGET:
        items.append(COACHING_CATALOG["mental_routine"])

    if (
        critical_errors_per_round is not None
        and critical_errors_per_round > CRITICAL_ERRORS_PER_ROUND_LIMIT
    ):
        items.append(COACHING_CATALOG["critical_errors"])

    selected = items[:MAX_ITEMS]
    logger.debug("coaching plan: %s", [item.key for item in selected])
    return selected


__all__ = ["generate", "weakest_categories"]
