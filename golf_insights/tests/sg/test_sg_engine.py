from __future__ import annotations

import pytest

from golf_insights.config import reset_settings_cache
from golf_insights.rounds.models import Confidence, HoleRecord
from golf_insights.sg import MODEL_VERSION
from golf_insights.sg.engine import (
    compute_breakdown,
    compute_breakdowns,
    effective_breakdown,
    round3,
    round_half_up,
)


def test_par4_fairway_gir_two_putt_example() -> None:
    record = HoleRecord(
        hole_par=4,
        tee_result="fairway",
        approach_zone="90-135",
        approach_lie="fairway",
        gir=True,
        gir_proximity_bucket="3-5m",
        putts=2,
        first_putt_bucket="3-5m",
        penalties=0,
        score=4,
    )

    result = compute_breakdown(record)

    assert result.off_tee == pytest.approx(0.03)
    assert result.approach == pytest.approx(0.40)
    assert result.short_game is None
    assert result.putting == pytest.approx(-0.44)
    assert result.total == pytest.approx(-0.01)
    assert result.confidence is Confidence.HIGH
    assert result.model_version == MODEL_VERSION


def test_par3_has_no_off_tee_phase(make_hole) -> None:
    result = compute_breakdown(make_hole(hole_par=3, score=3))

    assert result.off_tee is None
    assert result.approach is not None


@pytest.mark.parametrize(
    ("par", "tee_result", "expected"),
    [
        (4, "fairway", 0.03),
        (4, "left", -0.19),
        (4, "right", -0.19),
        (4, "penalty", -1.10),
        (5, "fairway", 0.07),
        (5, "left", -0.13),
        (5, "penalty", -1.10),
    ],
)
def test_off_tee_table(par: int, tee_result: str, expected: float) -> None:
    result = compute_breakdown(HoleRecord(hole_par=par, tee_result=tee_result))

    assert result.off_tee == pytest.approx(expected)


def test_off_tee_requires_tee_result() -> None:
    assert compute_breakdown(HoleRecord(hole_par=5)).off_tee is None


def test_approach_lie_adds_difficulty(make_hole) -> None:
    fairway = compute_breakdown(make_hole(approach_lie="fairway")).approach
    rough = compute_breakdown(make_hole(approach_lie="rough")).approach
    bunker = compute_breakdown(make_hole(approach_lie="bunker")).approach
    recovery = compute_breakdown(make_hole(approach_lie="recovery")).approach

    assert rough == pytest.approx(fairway + 0.12)
    assert bunker == pytest.approx(fairway + 0.25)
    assert recovery == pytest.approx(fairway + 0.45)


def test_approach_missing_lie_prices_as_fairway(make_hole) -> None:
    with_lie = compute_breakdown(make_hole()).approach
    without_lie = compute_breakdown(make_hole(approach_lie=None)).approach

    assert with_lie == without_lie


def test_approach_gir_without_bucket_uses_mid_value() -> None:
    result = compute_breakdown(
        HoleRecord(hole_par=4, approach_zone="<60", gir=True)
    )

    assert result.approach == pytest.approx(2.55 - (1 + 1.95))


def test_approach_missed_green_by_side() -> None:
    good = compute_breakdown(
        HoleRecord(hole_par=4, approach_zone="135-180", gir=False, approach_error_side="goodSide")
    )
    bad = compute_breakdown(
        HoleRecord(hole_par=4, approach_zone="135-180", gir=False, approach_error_side="badSide")
    )
    unknown = compute_breakdown(
        HoleRecord(hole_par=4, approach_zone="135-180", gir=False)
    )

    assert good.approach == pytest.approx(3.15 - 3.25)
    assert bad.approach == pytest.approx(3.15 - 3.55)
    assert unknown.approach == pytest.approx(3.15 - 3.40)


def test_approach_null_without_zone_or_gir() -> None:
    assert compute_breakdown(HoleRecord(hole_par=4, gir=True)).approach is None
    assert compute_breakdown(HoleRecord(hole_par=4, approach_zone=">180")).approach is None


def test_short_game_only_when_green_missed(make_hole) -> None:
    assert compute_breakdown(make_hole(gir=True)).short_game is None
    assert compute_breakdown(make_hole(gir=None)).short_game is None


def test_short_game_scrambling_outcome_wins_over_putts(make_hole) -> None:
    saved = compute_breakdown(
        make_hole(gir=False, approach_error_side="goodSide", scrambling_succeeded=True, putts=3)
    )
    failed = compute_breakdown(
        make_hole(gir=False, approach_error_side="badSide", scrambling_succeeded=False, putts=1)
    )

    assert saved.short_game == pytest.approx(0.35)
    assert failed.short_game == pytest.approx(-0.25)


@pytest.mark.parametrize(
    ("putts", "expected"),
    [(0, 0.25), (1, 0.25), (2, -0.15), (3, -0.55), (4, -0.55)],
)
def test_short_game_falls_back_to_putts(putts: int, expected: float) -> None:
    record = HoleRecord(hole_par=4, gir=False, putts=putts)

    assert compute_breakdown(record).short_game == pytest.approx(expected)


def test_short_game_null_without_signals() -> None:
    assert compute_breakdown(HoleRecord(hole_par=4, gir=False)).short_game is None


def test_putting_falls_back_to_gir_proximity() -> None:
    record = HoleRecord(hole_par=4, gir=True, gir_proximity_bucket="<3m", putts=1)

    assert compute_breakdown(record).putting == pytest.approx(0.22)


def test_putting_ignores_proximity_when_green_missed() -> None:
    record = HoleRecord(hole_par=4, gir=False, gir_proximity_bucket="<3m", putts=1)

    assert compute_breakdown(record).putting is None


def test_putting_requires_putts() -> None:
    record = HoleRecord(hole_par=4, first_putt_bucket=">10m")

    assert compute_breakdown(record).putting is None


@pytest.mark.parametrize("bucket", ["<3m", "3-5m", "5-10m", ">10m"])
def test_fewer_putts_never_lowers_putting(bucket: str) -> None:
    values = [
        compute_breakdown(
            HoleRecord(hole_par=4, first_putt_bucket=bucket, putts=putts)
        ).putting
        for putts in range(5, -1, -1)
    ]

    assert values == sorted(values)


def test_penalties_adjust_total(make_hole) -> None:
    clean = compute_breakdown(make_hole())
    penalised = compute_breakdown(make_hole(penalties=2))

    assert penalised.total == pytest.approx(clean.total - 0.5)


def test_total_null_only_without_phases_and_penalties() -> None:
    assert compute_breakdown(HoleRecord(hole_par=3)).total is None
    assert compute_breakdown(HoleRecord(hole_par=3, penalties=1)).total == pytest.approx(-0.25)


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({}, Confidence.HIGH),
        ({"approach_lie": None}, Confidence.HIGH),
        ({"approach_lie": None, "score": None}, Confidence.MEDIUM),
        (
            {"approach_lie": None, "score": None, "putts": None, "tee_result": None},
            Confidence.LOW,
        ),
    ],
)
def test_confidence_levels(make_hole, overrides, expected) -> None:
    assert compute_breakdown(make_hole(**overrides)).confidence is expected


def test_par3_counts_tee_signal_without_result() -> None:
    record = HoleRecord(hole_par=3, score=3, approach_zone="135-180", gir=True, putts=2)

    # score, tee (par 3), zone, gir, putts; no bucket or lie
    assert compute_breakdown(record).confidence is Confidence.MEDIUM


def test_breakdown_is_idempotent(make_hole) -> None:
    record = make_hole(gir=False, scrambling_succeeded=True, penalties=1)

    assert compute_breakdown(record) == compute_breakdown(record)


def test_unknown_categories_read_as_absent() -> None:
    record = HoleRecord(
        hole_par=4,
        tee_result="calle",
        approach_zone="200+",
        gir="yes",
        putts=-1,
    )

    assert record.tee_result is None
    assert record.approach_zone is None
    assert record.gir is None
    assert record.putts is None
    result = compute_breakdown(record)
    assert result.off_tee is None
    assert result.total is None
    assert result.confidence is Confidence.LOW


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0305, 0.031), (-0.0305, -0.031), (1.2344, 1.234), (0.03 - 1e-17, 0.03)],
)
def test_round3_half_away_from_zero(value: float, expected: float) -> None:
    assert round3(value) == expected


def test_batch_preserves_order(make_hole) -> None:
    records = [make_hole(putts=putts) for putts in (1, 2, 3, 4)]

    serial = compute_breakdowns(records)
    parallel = compute_breakdowns(records, max_workers=3)

    assert serial == parallel
    assert serial == [compute_breakdown(record) for record in records]


def test_effective_breakdown_uses_stored_values_only_as_fallback() -> None:
    record = HoleRecord(
        hole_par=4,
        tee_result="fairway",
        sg_off_tee=9.9,
        sg_putting=-0.7,
    )

    result = effective_breakdown(record)

    assert result.off_tee == pytest.approx(0.03)
    assert result.putting == pytest.approx(-0.7)
    assert result.approach is None


def test_batch_workers_setting_applies(make_hole, monkeypatch) -> None:
    monkeypatch.setenv("INSIGHTS_BATCH_WORKERS", "2")
    reset_settings_cache()
    records = [make_hole(putts=putts) for putts in (3, 1, 2)]

    assert compute_breakdowns(records) == [compute_breakdown(record) for record in records]


def test_effective_total_adds_up_with_stored_phase() -> None:
    record = HoleRecord(
        hole_par=4, tee_result="fairway", sg_putting=-0.7, sg_total=-0.67
    )

    result = effective_breakdown(record)

    assert result.off_tee == pytest.approx(0.03)
    assert result.putting == pytest.approx(-0.7)
    assert result.total == pytest.approx(-0.67)


def test_effective_total_includes_penalties_when_mixed() -> None:
    record = HoleRecord(
        hole_par=4, tee_result="fairway", penalties=2, sg_approach=0.4, sg_total=9.9
    )

    result = effective_breakdown(record)

    assert result.total == pytest.approx(0.03 + 0.4 - 0.5)


def test_effective_total_uses_stored_total_without_phases() -> None:
    record = HoleRecord(hole_par=3, penalties=1, sg_total=-1.2)

    assert effective_breakdown(record).total == pytest.approx(-1.2)


def test_effective_total_is_live_when_nothing_cached(make_hole) -> None:
    record = make_hole(sg_total=5.0)

    assert effective_breakdown(record).total == compute_breakdown(record).total


@pytest.mark.parametrize(
    ("value", "digits", "expected"),
    [(6.25, 1, 6.3), (-6.25, 1, -6.3), (0.125, 2, 0.13), (2.5, 0, 3.0), (1.005, 2, 1.01)],
)
def test_round_half_up(value, digits, expected) -> None:
    assert round_half_up(value, digits) == expected
