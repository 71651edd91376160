"""Pydantic models for the strokes-gained proxy output."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from golf_insights.rounds.models import Confidence


class SgCategory(str, Enum):
    OFF_TEE = "offTee"
    APPROACH = "approach"
    SHORT_GAME = "shortGame"
    PUTTING = "putting"


class SgMeans(BaseModel):
    """Strokes gained per category; also the mean over a set of holes."""

    total: Optional[float] = None
    off_tee: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("off_tee", "offTee"),
        serialization_alias="offTee",
    )
    approach: Optional[float] = None
    short_game: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("short_game", "shortGame"),
        serialization_alias="shortGame",
    )
    putting: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def category(self, category: SgCategory) -> float | None:
        return {
            SgCategory.OFF_TEE: self.off_tee,
            SgCategory.APPROACH: self.approach,
            SgCategory.SHORT_GAME: self.short_game,
            SgCategory.PUTTING: self.putting,
        }[category]


class StrokesGainedBreakdown(SgMeans):
    """Per-hole strokes-gained decomposition.

    Each phase is ``None`` when the hole lacks the observations needed to price
    it. ``total`` adds the known phases and the penalty adjustment.
    """

    confidence: Confidence = Confidence.LOW
    model_version: str = Field(
        validation_alias=AliasChoices("model_version", "modelVersion"),
        serialization_alias="modelVersion",
    )


__all__ = ["SgCategory", "SgMeans", "StrokesGainedBreakdown"]
