from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from golf_insights.rounds.capture import is_complete
from golf_insights.rounds.critical_errors import (
    CRITICAL_ERROR_KEYS,
    CriticalErrorKey,
    classify,
    is_classifiable,
)
from golf_insights.rounds.models import (
    ApproachTarget,
    Confidence,
    ErrorSide,
    HoleRecord,
    MentalCommitment,
    TeeResult,
)
from golf_insights.sg.engine import effective_breakdown, round3, round_half_up
from golf_insights.sg.schemas import SgMeans

logger = logging.getLogger(__name__)


class WindowAggregate(BaseModel):
    """Summary statistics over the holes of one window.

    Rates are percentages rounded to one decimal. A rate or mean is ``None``
    whenever no hole in the window recorded the underlying field.
    """

    total_holes: int = Field(default=0, serialization_alias="totalHoles")
    scored_holes: int = Field(default=0, serialization_alias="scoredHoles")

    critical_errors_total: int = Field(
        default=0, serialization_alias="criticalErrorsTotal"
    )
    critical_errors_by_type: Dict[CriticalErrorKey, int] = Field(
        default_factory=lambda: {key: 0 for key in CRITICAL_ERROR_KEYS},
        serialization_alias="criticalErrorsByType",
        description="Holes raising each flag, keyed by the snake_case flag name",
    )

    mental_counts: Dict[MentalCommitment, int] = Field(
        default_factory=lambda: {rating: 0 for rating in MentalCommitment},
        serialization_alias="mentalCounts",
    )
    mental_routine_rate: Optional[float] = Field(
        default=None, serialization_alias="mentalRoutineRate"
    )

    approach_target_count: int = Field(
        default=0, serialization_alias="approachTargetCount"
    )
    flag_target_count: int = Field(default=0, serialization_alias="flagTargetCount")
    center_target_rate: Optional[float] = Field(
        default=None, serialization_alias="centerTargetRate"
    )
    approach_error_count: int = Field(
        default=0, serialization_alias="approachErrorCount"
    )
    bad_side_count: int = Field(default=0, serialization_alias="badSideCount")
    bad_side_rate: Optional[float] = Field(
        default=None, serialization_alias="badSideRate"
    )

    gir_count: int = Field(default=0, serialization_alias="girCount")
    gir_total: int = Field(default=0, serialization_alias="girTotal")
    gir_rate: Optional[float] = Field(default=None, serialization_alias="girRate")

    three_putt_count: int = Field(default=0, serialization_alias="threePuttCount")
    putt_total: int = Field(default=0, serialization_alias="puttTotal")
    three_putt_rate: Optional[float] = Field(
        default=None, serialization_alias="threePuttRate"
    )

    fairway_count: int = Field(default=0, serialization_alias="fairwayCount")
    fairway_total: int = Field(default=0, serialization_alias="fairwayTotal")
    fairway_rate: Optional[float] = Field(
        default=None, serialization_alias="fairwayRate"
    )

    scrambling_made: int = Field(default=0, serialization_alias="scramblingMade")
    scrambling_total: int = Field(default=0, serialization_alias="scramblingTotal")
    scrambling_rate: Optional[float] = Field(
        default=None, serialization_alias="scramblingRate"
    )

    penalties_total: int = Field(default=0, serialization_alias="penaltiesTotal")
    penalty_holes: int = Field(default=0, serialization_alias="penaltyHoles")
    penalties_per_hole: Optional[float] = Field(
        default=None, serialization_alias="penaltiesPerHole"
    )
    penalty_hole_rate: Optional[float] = Field(
        default=None, serialization_alias="penaltyHoleRate"
    )

    complete_holes: int = Field(default=0, serialization_alias="completeHoles")
    completeness_rate: Optional[float] = Field(
        default=None, serialization_alias="completenessRate"
    )

    sg_means: SgMeans = Field(default_factory=SgMeans, serialization_alias="sgMeans")
    sg_high_confidence_rate: Optional[float] = Field(
        default=None, serialization_alias="sgHighConfidenceRate"
    )

    model_config = ConfigDict(populate_by_name=True)


def _pct(count: int, total: int) -> float | None:
    if total <= 0:
        return None
    return round_half_up(count * 100.0 / total, 1)


def _mean(values: list[float]) -> float | None:
    if not values:
        return None
    return round3(math.fsum(values) / len(values))


def aggregate(records: Iterable[HoleRecord]) -> WindowAggregate:
    """Summarise a window of hole records.

    The result depends only on the multiset of records; round boundaries are
    the caller's concern, so per-round rates are derived outside.
    """

    holes = list(records)
    total_holes = len(holes)

    scored = [hole for hole in holes if is_classifiable(hole)]
    by_type: Dict[CriticalErrorKey, int] = {key: 0 for key in CRITICAL_ERROR_KEYS}
    errors_total = 0
    for hole in scored:
        flags = classify(hole)
        errors_total += flags.count
        for key in flags.flagged():
            by_type[key] += 1

    mental_counts: Dict[MentalCommitment, int] = {rating: 0 for rating in MentalCommitment}
    for hole in holes:
        if hole.mental_commitment is not None:
            mental_counts[hole.mental_commitment] += 1
    mental_total = sum(mental_counts.values())

    approach_holes = [hole for hole in holes if hole.hole_par >= 4]
    with_target = [hole for hole in approach_holes if hole.approach_target is not None]
    flag_count = sum(
        1 for hole in with_target if hole.approach_target is ApproachTarget.FLAG
    )
    with_error = [hole for hole in approach_holes if hole.approach_error_side is not None]
    bad_side = sum(
        1 for hole in with_error if hole.approach_error_side is ErrorSide.BAD_SIDE
    )

    gir_holes = [hole for hole in holes if hole.gir is not None]
    gir_count = sum(1 for hole in gir_holes if hole.gir)

    putt_holes = [hole for hole in holes if hole.putts is not None]
    three_putts = sum(1 for hole in putt_holes if hole.putts >= 3)

    fairway_holes = [
        hole for hole in holes if hole.hole_par >= 4 and hole.tee_result is not None
    ]
    fairways = sum(
        1 for hole in fairway_holes if hole.tee_result is TeeResult.FAIRWAY
    )

    scramble_holes = [
        hole
        for hole in holes
        if hole.gir is False and hole.scrambling_succeeded is not None
    ]
    scrambles_made = sum(1 for hole in scramble_holes if hole.scrambling_succeeded)

    penalties_total = sum(hole.penalties for hole in holes)
    penalty_holes = sum(
        1
        for hole in holes
        if hole.penalties > 0 or hole.tee_result is TeeResult.PENALTY
    )

    complete_holes = sum(1 for hole in holes if is_complete(hole))

    breakdowns = [effective_breakdown(hole) for hole in holes]
    sg_means = SgMeans(
        total=_mean([b.total for b in breakdowns if b.total is not None]),
        off_tee=_mean([b.off_tee for b in breakdowns if b.off_tee is not None]),
        approach=_mean([b.approach for b in breakdowns if b.approach is not None]),
        short_game=_mean(
            [b.short_game for b in breakdowns if b.short_game is not None]
        ),
        putting=_mean([b.putting for b in breakdowns if b.putting is not None]),
    )
    high_confidence = sum(1 for b in breakdowns if b.confidence is Confidence.HIGH)

    logger.debug(
        "aggregated %d holes (%d scored, %d critical errors)",
        total_holes,
        len(scored),
        errors_total,
    )

    return WindowAggregate(
        total_holes=total_holes,
        scored_holes=len(scored),
        critical_errors_total=errors_total,
        critical_errors_by_type=by_type,
        mental_counts=mental_counts,
        mental_routine_rate=_pct(
            mental_counts[MentalCommitment.ROUTINE_PERFECT], mental_total
        ),
        approach_target_count=len(with_target),
        flag_target_count=flag_count,
        center_target_rate=_pct(len(with_target) - flag_count, len(with_target)),
        approach_error_count=len(with_error),
        bad_side_count=bad_side,
        bad_side_rate=_pct(bad_side, len(with_error)),
        gir_count=gir_count,
        gir_total=len(gir_holes),
        gir_rate=_pct(gir_count, len(gir_holes)),
        three_putt_count=three_putts,
        putt_total=len(putt_holes),
        three_putt_rate=_pct(three_putts, len(putt_holes)),
        fairway_count=fairways,
        fairway_total=len(fairway_holes),
        fairway_rate=_pct(fairways, len(fairway_holes)),
        scrambling_made=scrambles_made,
        scrambling_total=len(scramble_holes),
        scrambling_rate=_pct(scrambles_made, len(scramble_holes)),
        penalties_total=penalties_total,
        penalty_holes=penalty_holes,
        penalties_per_hole=(
            round_half_up(penalties_total / total_holes, 2) if total_holes else None
        ),
        penalty_hole_rate=_pct(penalty_holes, total_holes),
        complete_holes=complete_holes,
        completeness_rate=_pct(complete_holes, total_holes),
        sg_means=sg_means,
        sg_high_confidence_rate=_pct(high_confidence, total_holes),
    )


__all__ = ["WindowAggregate", "aggregate"]
