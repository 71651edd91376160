from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golf_insights.coach import CoachingItem, generate
from golf_insights.rounds.critical_errors import CriticalErrorFlags, classify
from golf_insights.rounds.models import HoleRecord, RoundHoles
from golf_insights.rounds.stats import WindowAggregate, aggregate
from golf_insights.rounds.windows import InvalidWindowSize
from golf_insights.services.dashboard import Dashboard, build_dashboard
from golf_insights.sg.engine import compute_breakdown, compute_breakdowns
from golf_insights.sg.schemas import SgMeans, StrokesGainedBreakdown

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


class CoachingRequest(BaseModel):
    sg: SgMeans
    mental_routine_rate: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("mental_routine_rate", "mentalRoutineRate"),
    )
    critical_errors_per_round: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "critical_errors_per_round", "criticalErrorsPerRound"
        ),
    )

    model_config = ConfigDict(populate_by_name=True)


@router.post("/holes/breakdown", response_model=StrokesGainedBreakdown)
def post_hole_breakdown(record: HoleRecord) -> StrokesGainedBreakdown:
    return compute_breakdown(record)


@router.post("/holes/breakdowns", response_model=List[StrokesGainedBreakdown])
def post_hole_breakdowns(records: List[HoleRecord]) -> List[StrokesGainedBreakdown]:
    return compute_breakdowns(records)


@router.post("/holes/critical-errors", response_model=CriticalErrorFlags)
def post_hole_critical_errors(record: HoleRecord) -> CriticalErrorFlags:
    return classify(record)


@router.post("/windows/aggregate", response_model=WindowAggregate)
def post_window_aggregate(records: List[HoleRecord]) -> WindowAggregate:
    return aggregate(records)


@router.post("/coaching", response_model=List[CoachingItem])
def post_coaching(payload: CoachingRequest) -> List[CoachingItem]:
    return generate(
        payload.sg, payload.mental_routine_rate, payload.critical_errors_per_round
    )


@router.post("/dashboard", response_model=Dashboard)
def post_dashboard(
    rounds: List[RoundHoles],
    window: Optional[int] = Query(default=None),
) -> Dashboard:
    try:
        return build_dashboard(rounds, window)
    except InvalidWindowSize as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


__all__ = [
    "router",
    "post_coaching",
    "post_dashboard",
    "post_hole_breakdown",
    "post_hole_breakdowns",
    "post_hole_critical_errors",
    "post_window_aggregate",
]
