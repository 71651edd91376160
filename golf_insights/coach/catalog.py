from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict

from golf_insights.sg.schemas import SgCategory

CoachingKey = Literal[
    "approach",
    "putting",
    "off_tee",
    "short_game",
    "mental_routine",
    "critical_errors",
]


class CoachingItem(BaseModel):
    key: CoachingKey
    title: str
    detail: str

    model_config = ConfigDict(frozen=True)


COACHING_CATALOG: Dict[CoachingKey, CoachingItem] = {
    "approach": CoachingItem(
        key="approach",
        title="Approach play under pressure",
        detail=(
            "Aim for the centre of the green whenever a miss is expensive. Goal: lift"
            " SG Approach through conservative target choices."
        ),
    ),
    "putting": CoachingItem(
        key="putting",
        title="Distance control on the green",
        detail=(
            "Block one weekly session for ladder drills and 1-2 m putts to cut down"
            " on three-putts."
        ),
    ),
    "off_tee": CoachingItem(
        key="off_tee",
        title="Keep the tee shot in play",
        detail=(
            "Adjust your tee target to find more usable fairways and remove penalty"
            " strokes off the tee."
        ),
    ),
    "short_game": CoachingItem(
        key="short_game",
        title="Competitive scrambling",
        detail=(
            "Practise chips and pitches from varied lies with a two-putt plan to"
            " convert more pars after missed greens."
        ),
    ),
    "mental_routine": CoachingItem(
        key="mental_routine",
        title="Stable mental routine",
        detail=(
            "Add a checkpoint every three holes: breathe, pick a clear target and"
            " commit before every shot."
        ),
    ),
    "critical_errors": CoachingItem(
        key="critical_errors",
        title="Cut the critical errors",
        detail=(
            "Set a personal risk rule: no attacking the flag unless both the lie and"
            " the angle are clear."
        ),
    ),
}

CATEGORY_ITEMS: Dict[SgCategory, CoachingKey] = {
    SgCategory.APPROACH: "approach",
    SgCategory.PUTTING: "putting",
    SgCategory.OFF_TEE: "off_tee",
    SgCategory.SHORT_GAME: "short_game",
}


__all__ = ["CATEGORY_ITEMS", "COACHING_CATALOG", "CoachingItem", "CoachingKey"]
