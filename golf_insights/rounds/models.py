from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TeeResult(str, Enum):
    FAIRWAY = "fairway"
    LEFT = "left"
    RIGHT = "right"
    PENALTY = "penalty"


class ApproachZone(str, Enum):
    UNDER_60 = "<60"
    FROM_60_TO_90 = "60-90"
    FROM_90_TO_135 = "90-135"
    FROM_135_TO_180 = "135-180"
    OVER_180 = ">180"


class ApproachLie(str, Enum):
    FAIRWAY = "fairway"
    ROUGH = "rough"
    BUNKER = "bunker"
    RECOVERY = "recovery"


class ApproachTarget(str, Enum):
    CENTER_GREEN = "centerGreen"
    FLAG = "flag"


class ErrorSide(str, Enum):
    GOOD_SIDE = "goodSide"
    BAD_SIDE = "badSide"


class PuttBucket(str, Enum):
    UNDER_3M = "<3m"
    FROM_3_TO_5M = "3-5m"
    FROM_5_TO_10M = "5-10m"
    OVER_10M = ">10m"


class MentalCommitment(str, Enum):
    ROUTINE_PERFECT = "routinePerfect"
    HESITATED = "hesitated"
    LOST_FOCUS = "lostFocus"


class Confidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


PAR_VALUES: tuple[int, ...] = (3, 4, 5)

# Approach zones under 135 m; a bogey from here counts as a critical error.
SHORT_APPROACH_ZONES = frozenset(
    {ApproachZone.UNDER_60, ApproachZone.FROM_60_TO_90, ApproachZone.FROM_90_TO_135}
)


def _coerce_choice(enum_cls: type[Enum], value: Any) -> Enum | None:
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip())
        except ValueError:
            return None
    return None


def _coerce_count(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value >= 0:
        return value
    return None


def _coerce_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


_CHOICE_FIELDS: dict[str, type[Enum]] = {
    "tee_result": TeeResult,
    "approach_zone": ApproachZone,
    "approach_lie": ApproachLie,
    "approach_target": ApproachTarget,
    "approach_error_side": ErrorSide,
    "gir_proximity_bucket": PuttBucket,
    "first_putt_bucket": PuttBucket,
    "mental_commitment": MentalCommitment,
    "sg_confidence": Confidence,
}


class HoleRecord(BaseModel):
    """One golfer's observations for one hole of one round.

    Capture is often partial, so everything except the par is optional. Values
    the engine does not recognise are read as "not recorded" rather than
    rejected, keeping every downstream computation total.
    """

    hole_par: int = Field(
        validation_alias=AliasChoices("hole_par", "holePar", "par"),
        serialization_alias="holePar",
    )
    hole_number: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    round_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("round_id", "roundId"),
        serialization_alias="roundId",
    )

    score: Optional[int] = None
    putts: Optional[int] = None
    penalties: int = 0

    tee_result: Optional[TeeResult] = Field(
        default=None,
        validation_alias=AliasChoices("tee_result", "teeResult"),
        serialization_alias="teeResult",
    )
    approach_zone: Optional[ApproachZone] = Field(
        default=None,
        validation_alias=AliasChoices("approach_zone", "approachZone"),
        serialization_alias="approachZone",
    )
    approach_lie: Optional[ApproachLie] = Field(
        default=None,
        validation_alias=AliasChoices("approach_lie", "approachLie"),
        serialization_alias="approachLie",
    )
    approach_target: Optional[ApproachTarget] = Field(
        default=None,
        validation_alias=AliasChoices("approach_target", "approachTarget"),
        serialization_alias="approachTarget",
    )
    approach_error_side: Optional[ErrorSide] = Field(
        default=None,
        validation_alias=AliasChoices("approach_error_side", "approachErrorSide"),
        serialization_alias="approachErrorSide",
    )

    gir: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("gir", "greenInRegulation"),
    )
    gir_proximity_bucket: Optional[PuttBucket] = Field(
        default=None,
        validation_alias=AliasChoices("gir_proximity_bucket", "girProximityBucket"),
        serialization_alias="girProximityBucket",
    )
    first_putt_bucket: Optional[PuttBucket] = Field(
        default=None,
        validation_alias=AliasChoices("first_putt_bucket", "firstPuttBucket"),
        serialization_alias="firstPuttBucket",
    )
    first_putt_overridden: bool = Field(
        default=False,
        validation_alias=AliasChoices("first_putt_overridden", "firstPuttOverridden"),
        serialization_alias="firstPuttOverridden",
    )

    scrambling_attempted: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("scrambling_attempted", "scramblingAttempted"),
        serialization_alias="scramblingAttempted",
    )
    scrambling_succeeded: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("scrambling_succeeded", "scramblingSucceeded"),
        serialization_alias="scramblingSucceeded",
    )

    mental_commitment: Optional[MentalCommitment] = Field(
        default=None,
        validation_alias=AliasChoices("mental_commitment", "mentalCommitment"),
        serialization_alias="mentalCommitment",
    )

    # Breakdown cached by the store; the live computation always wins.
    sg_off_tee: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("sg_off_tee", "sgOffTee"),
        serialization_alias="sgOffTee",
    )
    sg_approach: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("sg_approach", "sgApproach"),
        serialization_alias="sgApproach",
    )
    sg_short_game: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("sg_short_game", "sgShortGame"),
        serialization_alias="sgShortGame",
    )
    sg_putting: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("sg_putting", "sgPutting"),
        serialization_alias="sgPutting",
    )
    sg_total: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("sg_total", "sgTotal"),
        serialization_alias="sgTotal",
    )
    sg_confidence: Optional[Confidence] = Field(
        default=None,
        validation_alias=AliasChoices("sg_confidence", "sgConfidence"),
        serialization_alias="sgConfidence",
    )
    sg_model_version: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("sg_model_version", "sgModelVersion"),
        serialization_alias="sgModelVersion",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("hole_par", mode="after")
    @classmethod
    def _known_par(cls, value: int) -> int:
        if value not in PAR_VALUES:
            raise ValueError(f"hole_par must be one of {PAR_VALUES}; got {value}")
        return value

    @field_validator(*_CHOICE_FIELDS, mode="before")
    @classmethod
    def _known_choice(cls, value: Any, info) -> Any:
        return _coerce_choice(_CHOICE_FIELDS[info.field_name], value)

    @field_validator("score", "putts", mode="before")
    @classmethod
    def _count_or_none(cls, value: Any) -> int | None:
        return _coerce_count(value)

    @field_validator("penalties", mode="before")
    @classmethod
    def _penalty_count(cls, value: Any) -> int:
        return _coerce_count(value) or 0

    @field_validator(
        "gir",
        "scrambling_attempted",
        "scrambling_succeeded",
        mode="before",
    )
    @classmethod
    def _bool_or_none(cls, value: Any) -> bool | None:
        return value if isinstance(value, bool) else None

    @field_validator("first_putt_overridden", mode="before")
    @classmethod
    def _override_flag(cls, value: Any) -> bool:
        return value is True

    @field_validator(
        "sg_off_tee",
        "sg_approach",
        "sg_short_game",
        "sg_putting",
        "sg_total",
        mode="before",
    )
    @classmethod
    def _stored_value(cls, value: Any) -> float | None:
        return _coerce_float(value)

    @property
    def to_par(self) -> int | None:
        if self.score is None:
            return None
        return self.score - self.hole_par

    @property
    def putting_bucket(self) -> PuttBucket | None:
        """Bucket used to price the first putt.

        An explicit first-putt bucket wins; otherwise a GIR hole falls back to
        its proximity bucket.
        """

        if self.first_putt_bucket is not None:
            return self.first_putt_bucket
        if self.gir is True:
            return self.gir_proximity_bucket
        return None


class RoundHoles(BaseModel):
    """Holes of one round, as fetched by the store."""

    round_id: str = Field(
        validation_alias=AliasChoices("round_id", "roundId"),
        serialization_alias="roundId",
    )
    holes: list[HoleRecord] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


__all__ = [
    "ApproachLie",
    "ApproachTarget",
    "ApproachZone",
    "Confidence",
    "ErrorSide",
    "HoleRecord",
    "MentalCommitment",
    "PAR_VALUES",
    "PuttBucket",
    "RoundHoles",
    "SHORT_APPROACH_ZONES",
    "TeeResult",
]
