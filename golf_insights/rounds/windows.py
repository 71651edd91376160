"""Rolling comparison windows over a player's most recent rounds."""

from __future__ import annotations

from typing import Dict, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from golf_insights.config import WINDOW_SIZES
from golf_insights.rounds.models import HoleRecord
from golf_insights.rounds.stats import WindowAggregate, aggregate
from golf_insights.sg.engine import round_half_up

WindowSize = Literal[5, 10, 20]

# Metrics compared between the current and previous window, with the number
# of decimals each delta is rounded to.
_DELTA_METRICS: Dict[str, int] = {
    "mental_routine_rate": 1,
    "center_target_rate": 1,
    "bad_side_rate": 1,
    "gir_rate": 1,
    "three_putt_rate": 1,
    "fairway_rate": 1,
    "scrambling_rate": 1,
    "penalties_per_hole": 2,
    "penalty_hole_rate": 1,
    "completeness_rate": 1,
    "sg_high_confidence_rate": 1,
}
_SG_DELTA_METRICS = ("total", "off_tee", "approach", "short_game", "putting")


class InvalidWindowSize(ValueError):
    def __init__(self, window: object) -> None:
        super().__init__(
            f"window must be one of {', '.join(str(size) for size in WINDOW_SIZES)}; got {window!r}"
        )
        self.window = window


class RoundWindows(BaseModel):
    window: int
    current: list[str] = Field(default_factory=list)
    previous: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class WindowComparison(BaseModel):
    current: WindowAggregate
    previous: WindowAggregate
    current_rounds: int = Field(serialization_alias="currentRounds")
    previous_rounds: int = Field(serialization_alias="previousRounds")
    critical_errors_per_round: Optional[float] = Field(
        default=None, serialization_alias="criticalErrorsPerRound"
    )
    previous_critical_errors_per_round: Optional[float] = Field(
        default=None, serialization_alias="previousCriticalErrorsPerRound"
    )
    deltas: Dict[str, Optional[float]] = Field(
        default_factory=dict,
        description=(
            "Current minus previous value, keyed by the snake_case metric name"
            " (e.g. gir_rate, sg_off_tee); keys are not camelCased"
        ),
    )

    model_config = ConfigDict(populate_by_name=True)


def validate_window(window: int) -> int:
    if isinstance(window, bool) or window not in WINDOW_SIZES:
        raise InvalidWindowSize(window)
    return window


def split_round_windows(round_ids: Sequence[str], window: int) -> RoundWindows:
    """Split round ids (most recent first) into current and previous windows."""

    size = validate_window(window)
    ids = list(round_ids)
    return RoundWindows(
        window=size,
        current=ids[:size],
        previous=ids[size : size * 2],
    )


def errors_per_round(aggregate_: WindowAggregate, rounds: int) -> float | None:
    if rounds <= 0:
        return None
    return round_half_up(aggregate_.critical_errors_total / rounds, 2)


def _delta(current: float | None, previous: float | None, decimals: int) -> float | None:
    if current is None or previous is None:
        return None
    return round_half_up(current - previous, decimals)


def compare_windows(
    current_records: Sequence[HoleRecord],
    previous_records: Sequence[HoleRecord],
    *,
    current_rounds: int,
    previous_rounds: int,
) -> WindowComparison:
    """Aggregate both windows independently and diff them."""

    current = aggregate(current_records)
    previous = aggregate(previous_records)
    current_per_round = errors_per_round(current, current_rounds)
    previous_per_round = errors_per_round(previous, previous_rounds)

    deltas: Dict[str, Optional[float]] = {
        "critical_errors_per_round": _delta(current_per_round, previous_per_round, 2)
    }
    for name, decimals in _DELTA_METRICS.items():
        deltas[name] = _delta(getattr(current, name), getattr(previous, name), decimals)
    for name in _SG_DELTA_METRICS:
        deltas[f"sg_{name}"] = _delta(
            getattr(current.sg_means, name), getattr(previous.sg_means, name), 3
        )

    return WindowComparison(
        current=current,
        previous=previous,
        current_rounds=current_rounds,
        previous_rounds=previous_rounds,
        critical_errors_per_round=current_per_round,
        previous_critical_errors_per_round=previous_per_round,
        deltas=deltas,
    )


__all__ = [
    "InvalidWindowSize",
    "RoundWindows",
    "WindowComparison",
    "WindowSize",
    "compare_windows",
    "errors_per_round",
    "split_round_windows",
    "validate_window",
]
