"""Dashboard assembly: windows, aggregates, deltas and the coaching plan."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from golf_insights.coach import CoachingItem, generate
from golf_insights.config import get_settings
from golf_insights.rounds.models import HoleRecord, RoundHoles
from golf_insights.rounds.windows import (
    WindowComparison,
    compare_windows,
    split_round_windows,
)

logger = logging.getLogger(__name__)


class Dashboard(BaseModel):
    window: int
    current_round_ids: List[str] = Field(serialization_alias="currentRoundIds")
    previous_round_ids: List[str] = Field(serialization_alias="previousRoundIds")
    comparison: WindowComparison
    coaching: List[CoachingItem] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


def _holes_for(rounds: Iterable[RoundHoles], round_ids: List[str]) -> List[HoleRecord]:
    wanted = set(round_ids)
    return [hole for rnd in rounds if rnd.round_id in wanted for hole in rnd.holes]


def build_dashboard(
    rounds: List[RoundHoles], window: Optional[int] = None
) -> Dashboard:
    """Build the dashboard for rounds ordered most recent first."""

    size = window if window is not None else get_settings().default_window
    windows = split_round_windows([rnd.round_id for rnd in rounds], size)

    comparison = compare_windows(
        _holes_for(rounds, windows.current),
        _holes_for(rounds, windows.previous),
        current_rounds=len(windows.current),
        previous_rounds=len(windows.previous),
    )
    coaching = generate(
        comparison.current.sg_means,
        comparison.current.mental_routine_rate,
        comparison.critical_errors_per_round,
    )

    logger.debug(
        "dashboard window=%d current=%d previous=%d coaching=%d",
        windows.window,
        len(windows.current),
        len(windows.previous),
        len(coaching),
    )

    return Dashboard(
        window=windows.window,
        current_round_ids=windows.current,
        previous_round_ids=windows.previous,
        comparison=comparison,
        coaching=coaching,
    )


__all__ = ["Dashboard", "build_dashboard"]
