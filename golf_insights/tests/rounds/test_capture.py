from __future__ import annotations

import pytest

from golf_insights.rounds.capture import (
    apply_hole_update,
    hole_checklist,
    is_complete,
    stamp_breakdown,
)
from golf_insights.rounds.models import HoleRecord, PuttBucket
from golf_insights.sg import MODEL_VERSION, compute_breakdown


def test_gir_with_proximity_seeds_first_putt() -> None:
    record = HoleRecord(hole_par=4)

    updated = apply_hole_update(record, {"gir": True, "gir_proximity_bucket": "5-10m"})

    assert updated.first_putt_bucket is PuttBucket.FROM_5_TO_10M
    assert updated.first_putt_overridden is False


def test_proximity_edit_follows_until_overridden() -> None:
    record = apply_hole_update(
        HoleRecord(hole_par=4), {"gir": True, "gir_proximity_bucket": "<3m"}
    )

    record = apply_hole_update(record, {"girProximityBucket": ">10m"})
    assert record.first_putt_bucket is PuttBucket.OVER_10M

    record = apply_hole_update(record, {"firstPuttBucket": "3-5m"})
    assert record.first_putt_overridden is True
    assert record.first_putt_bucket is PuttBucket.FROM_3_TO_5M

    record = apply_hole_update(record, {"gir_proximity_bucket": "<3m"})
    assert record.first_putt_bucket is PuttBucket.FROM_3_TO_5M
    assert record.gir_proximity_bucket is PuttBucket.UNDER_3M


def test_missed_green_keeps_first_putt_independent() -> None:
    record = apply_hole_update(
        HoleRecord(hole_par=4), {"gir": False, "gir_proximity_bucket": "<3m"}
    )

    assert record.first_putt_bucket is None


def test_update_stamps_breakdown_cache() -> None:
    record = apply_hole_update(
        HoleRecord(hole_par=4), {"tee_result": "fairway", "penalties": 1}
    )
    live = compute_breakdown(record)

    assert record.sg_off_tee == live.off_tee
    assert record.sg_total == pytest.approx(0.03 - 0.25)
    assert record.sg_confidence is live.confidence
    assert record.sg_model_version == MODEL_VERSION


def test_update_returns_new_record() -> None:
    record = HoleRecord(hole_par=4)
    apply_hole_update(record, {"score": 5})

    assert record.score is None


def test_stamp_breakdown_overwrites_stale_cache(make_hole) -> None:
    stale = make_hole(sg_putting=3.0, sg_model_version="v0")

    stamped = stamp_breakdown(stale)

    assert stamped.sg_putting == pytest.approx(-0.44)
    assert stamped.sg_model_version == MODEL_VERSION


def test_checklist_par3_skips_approach() -> None:
    labels = [item.label for item in hole_checklist(HoleRecord(hole_par=3))]

    assert "Approach" not in labels
    assert len(labels) == 6


def test_checklist_par4_requires_full_approach(make_hole) -> None:
    assert is_complete(make_hole()) is True
    assert is_complete(make_hole(approach_target=None)) is False
    items = {item.label: item.done for item in hole_checklist(make_hole(approach_target=None))}
    assert items["Approach"] is False
    assert items["Score"] is True
