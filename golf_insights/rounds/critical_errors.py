"""Per-hole "Tiger 5" critical-error classification."""

from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

from golf_insights.rounds.models import SHORT_APPROACH_ZONES, HoleRecord, TeeResult

CriticalErrorKey = Literal[
    "bogey_on_par5",
    "double_or_worse",
    "three_putt",
    "bogey_after_short_approach",
    "penalty_incurred",
]

CRITICAL_ERROR_KEYS: tuple[CriticalErrorKey, ...] = (
    "bogey_on_par5",
    "double_or_worse",
    "three_putt",
    "bogey_after_short_approach",
    "penalty_incurred",
)

CRITICAL_ERROR_LABELS: Dict[CriticalErrorKey, str] = {
    "bogey_on_par5": "Bogey on a par 5",
    "double_or_worse": "Double bogey or worse",
    "three_putt": "Three putts",
    "bogey_after_short_approach": "Bogey after an approach inside 135 m",
    "penalty_incurred": "Penalty stroke",
}


class CriticalErrorFlags(BaseModel):
    bogey_on_par5: bool = Field(default=False, serialization_alias="bogeyOnPar5")
    double_or_worse: bool = Field(default=False, serialization_alias="doubleOrWorse")
    three_putt: bool = Field(default=False, serialization_alias="threePutt")
    bogey_after_short_approach: bool = Field(
        default=False, serialization_alias="bogeyAfterShortApproach"
    )
    penalty_incurred: bool = Field(default=False, serialization_alias="penaltyIncurred")
    count: int = 0

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def flagged(self) -> list[CriticalErrorKey]:
        return [key for key in CRITICAL_ERROR_KEYS if getattr(self, key)]


def is_classifiable(record: HoleRecord) -> bool:
    """Only scored holes count towards critical-error totals."""

    return record.score is not None


def classify(record: HoleRecord) -> CriticalErrorFlags:
    """Flag the critical errors committed on a hole.

    Score-based flags stay false while the score is unknown and the three-putt
    flag stays false while putts are unknown.
    """

    to_par = record.to_par
    over_par = to_par is not None and to_par >= 1

    flags = {
        "bogey_on_par5": record.hole_par == 5 and over_par,
        "double_or_worse": to_par is not None and to_par >= 2,
        "three_putt": record.putts is not None and record.putts >= 3,
        "bogey_after_short_approach": (
            over_par and record.approach_zone in SHORT_APPROACH_ZONES
        ),
        "penalty_incurred": (
            record.penalties >= 1 or record.tee_result is TeeResult.PENALTY
        ),
    }
    return CriticalErrorFlags(**flags, count=sum(1 for value in flags.values() if value))


__all__ = [
    "CRITICAL_ERROR_KEYS",
    "CRITICAL_ERROR_LABELS",
    "CriticalErrorFlags",
    "CriticalErrorKey",
    "classify",
    "is_classifiable",
]
