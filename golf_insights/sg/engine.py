"""Pure strokes-gained proxy computation over hole records."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from golf_insights.config import get_settings
from golf_insights.rounds.models import Confidence, HoleRecord

from . import tables
from .schemas import StrokesGainedBreakdown

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int) -> float:
    """Round to ``digits`` decimals, halves away from zero."""

    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round3(value: float) -> float:
    return round_half_up(value, 3)


def _phase(expected_before: float, expected_after: float) -> float:
    return round3(expected_before - (1.0 + expected_after))


def _off_tee(record: HoleRecord) -> float | None:
    baseline = tables.TEE_BASELINE.get(record.hole_par)
    if baseline is None or record.tee_result is None:
        return None
    after = tables.EXPECTED_AFTER_TEE.get((record.hole_par, record.tee_result))
    if after is None:
        return None
    return _phase(baseline, after)


def _expected_after_approach(record: HoleRecord) -> float | None:
    if record.gir is True:
        if record.gir_proximity_bucket is None:
            return tables.GIR_PROXIMITY_DEFAULT
        return tables.GIR_PROXIMITY_EXPECTED[record.gir_proximity_bucket]
    if record.gir is False:
        if record.approach_error_side is None:
            return tables.MISSED_GREEN_DEFAULT
        return tables.MISSED_GREEN_EXPECTED[record.approach_error_side]
    return None


def _approach(record: HoleRecord) -> float | None:
    if record.approach_zone is None:
        return None
    after = _expected_after_approach(record)
    if after is None:
        return None
    start = tables.APPROACH_ZONE_EXPECTED[record.approach_zone]
    if record.approach_lie is not None:
        start += tables.APPROACH_LIE_ADJUSTMENT[record.approach_lie]
    return _phase(start, after)


def _short_game_cost(record: HoleRecord) -> float | None:
    if record.scrambling_succeeded is True:
        return tables.SCRAMBLE_SAVED_COST
    if record.scrambling_succeeded is False:
        return tables.SCRAMBLE_FAILED_COST
    if record.putts is None:
        return None
    for max_putts, cost in tables.SHORT_GAME_PUTT_COST:
        if record.putts <= max_putts:
            return cost
    return tables.SHORT_GAME_PUTT_COST_TAIL


def _short_game(record: HoleRecord) -> float | None:
    if record.gir is not False:
        return None
    cost = _short_game_cost(record)
    if cost is None:
        return None
    start = tables.SHORT_GAME_START.get(
        record.approach_error_side, tables.SHORT_GAME_START_DEFAULT
    )
    return round3(start - cost)


def _putting(record: HoleRecord) -> float | None:
    bucket = record.putting_bucket
    if bucket is None or record.putts is None:
        return None
    return round3(tables.EXPECTED_PUTTS[bucket] - record.putts)


def _confidence(record: HoleRecord) -> Confidence:
    signals = [
        record.score is not None,
        record.tee_result is not None or record.hole_par == 3,
        record.approach_zone is not None,
        record.gir is not None,
        record.putts is not None,
        record.putting_bucket is not None,
        record.approach_lie is not None,
    ]
    present = sum(1 for signal in signals if signal)
    if present >= tables.CONFIDENCE_HIGH_SIGNALS:
        return Confidence.HIGH
    if present >= tables.CONFIDENCE_MEDIUM_SIGNALS:
        return Confidence.MEDIUM
    return Confidence.LOW


def compute_breakdown(record: HoleRecord) -> StrokesGainedBreakdown:
    """Compute the four-phase strokes-gained proxy for a single hole."""

    off_tee = _off_tee(record)
    approach = _approach(record)
    short_game = _short_game(record)
    putting = _putting(record)

    phases = [value for value in (off_tee, approach, short_game, putting) if value is not None]
    penalty_adjustment = -tables.PENALTY_STROKE_COST * record.penalties
    total = None
    if phases or penalty_adjustment != 0:
        total = round3(sum(phases) + penalty_adjustment)

    return StrokesGainedBreakdown(
        off_tee=off_tee,
        approach=approach,
        short_game=short_game,
        putting=putting,
        total=total,
        confidence=_confidence(record),
        model_version=tables.MODEL_VERSION,
    )


def compute_breakdowns(
    records: Iterable[HoleRecord], *, max_workers: int | None = None
) -> List[StrokesGainedBreakdown]:
    """Compute breakdowns for a batch, preserving input order.

    More than one worker fans the work out over a thread pool. Without an
    explicit ``max_workers`` the ``INSIGHTS_BATCH_WORKERS`` setting applies.
    """

    if max_workers is None:
        max_workers = get_settings().batch_workers
    source = list(records)
    if not max_workers or max_workers <= 1 or len(source) < 2:
        return [compute_breakdown(record) for record in source]

    logger.debug("computing %d breakdowns on %d workers", len(source), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(compute_breakdown, source))


def effective_breakdown(record: HoleRecord) -> StrokesGainedBreakdown:
    """Live breakdown, filling null phases from the record's stored cache.

    When a stored phase fills a gap the total is re-derived from the merged
    phases and the penalty adjustment. The stored total is used only when no
    phase is known at all.
    """

    live = compute_breakdown(record)
    pairs = [
        (live.off_tee, record.sg_off_tee),
        (live.approach, record.sg_approach),
        (live.short_game, record.sg_short_game),
        (live.putting, record.sg_putting),
    ]
    off_tee, approach, short_game, putting = [
        current if current is not None else stored for current, stored in pairs
    ]
    from_cache = any(current is None and stored is not None for current, stored in pairs)
    phases = [
        value for value in (off_tee, approach, short_game, putting) if value is not None
    ]

    if from_cache:
        total = round3(sum(phases) - tables.PENALTY_STROKE_COST * record.penalties)
    elif phases:
        total = live.total
    elif record.sg_total is not None:
        total = record.sg_total
    else:
        total = live.total

    return StrokesGainedBreakdown(
        off_tee=off_tee,
        approach=approach,
        short_game=short_game,
        putting=putting,
        total=total,
        confidence=live.confidence,
        model_version=live.model_version,
    )


__all__ = [
    "compute_breakdown",
    "compute_breakdowns",
    "effective_breakdown",
    "round3",
    "round_half_up",
]
