"""Helpers shared with the capture surface: record updates and completeness."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel

from golf_insights.rounds.models import HoleRecord
from golf_insights.sg.engine import compute_breakdown


class ChecklistItem(BaseModel):
    label: str
    done: bool


def _canonical_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase capture keys onto field names."""

    aliases: dict[str, str] = {}
    for name, field in HoleRecord.model_fields.items():
        aliases[name] = name
        choices = getattr(field.validation_alias, "choices", None) or []
        for choice in choices:
            if isinstance(choice, str):
                aliases[choice] = name
    return {aliases.get(key, key): value for key, value in changes.items()}


def stamp_breakdown(record: HoleRecord) -> HoleRecord:
    """Return ``record`` with its stored breakdown cache refreshed."""

    breakdown = compute_breakdown(record)
    return record.model_copy(
        update={
            "sg_off_tee": breakdown.off_tee,
            "sg_approach": breakdown.approach,
            "sg_short_game": breakdown.short_game,
            "sg_putting": breakdown.putting,
            "sg_total": breakdown.total,
            "sg_confidence": breakdown.confidence,
            "sg_model_version": breakdown.model_version,
        }
    )


def apply_hole_update(record: HoleRecord, changes: Mapping[str, Any]) -> HoleRecord:
    """Apply a capture edit and keep derived fields consistent.

    The first-putt bucket mirrors the GIR proximity bucket until the golfer
    edits it directly; an explicit edit marks it as overridden. Recording GIR
    together with a proximity bucket starts a fresh capture and clears the
    override. The stored breakdown cache is recomputed on every update.
    """

    fields = _canonical_changes(changes)
    extra: dict[str, Any] = {}

    if "first_putt_bucket" in fields:
        extra["first_putt_overridden"] = True
    elif fields.get("gir") is True and "gir_proximity_bucket" in fields:
        extra["first_putt_overridden"] = False

    merged = record.model_dump()
    merged.update(fields)
    merged.update(extra)
    updated = HoleRecord.model_validate(merged)

    if updated.gir is True and not updated.first_putt_overridden:
        updated = updated.model_copy(
            update={"first_putt_bucket": updated.gir_proximity_bucket}
        )

    return stamp_breakdown(updated)


def hole_checklist(record: HoleRecord) -> list[ChecklistItem]:
    items = [
        ChecklistItem(label="Score", done=record.score is not None),
        ChecklistItem(label="Mental", done=record.mental_commitment is not None),
        ChecklistItem(label="Tee shot", done=record.tee_result is not None),
        ChecklistItem(label="GIR", done=record.gir is not None),
        ChecklistItem(label="Putts", done=record.putts is not None),
        ChecklistItem(label="First putt distance", done=record.first_putt_bucket is not None),
    ]
    if record.hole_par >= 4:
        approach_done = (
            record.approach_zone is not None
            and record.approach_lie is not None
            and record.approach_target is not None
            and record.approach_error_side is not None
        )
        items.insert(3, ChecklistItem(label="Approach", done=approach_done))
    return items


def is_complete(record: HoleRecord) -> bool:
    return all(item.done for item in hole_checklist(record))


__all__ = [
    "ChecklistItem",
    "apply_hole_update",
    "hole_checklist",
    "is_complete",
    "stamp_breakdown",
]
