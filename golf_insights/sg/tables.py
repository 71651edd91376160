"""Expected-strokes lookup tables for the bucket proxy model.

Every constant the strokes-gained proxy uses lives here as data. Values are
expected strokes to finish the hole from the described situation; they are a
coarse, versioned approximation and are not calibrated against tour data.
Changing any value requires bumping ``MODEL_VERSION``.
"""

from __future__ import annotations

from typing import Dict, Tuple

from golf_insights.rounds.models import (
    ApproachLie,
    ApproachZone,
    ErrorSide,
    PuttBucket,
    TeeResult,
)

MODEL_VERSION = "v1_bucket_proxy"

# Expected strokes before the tee shot, keyed by par. Par 3 has no tee phase.
TEE_BASELINE: Dict[int, float] = {
    4: 4.05,
    5: 4.85,
}

EXPECTED_AFTER_TEE: Dict[Tuple[int, TeeResult], float] = {
    (4, TeeResult.FAIRWAY): 3.02,
    (4, TeeResult.LEFT): 3.24,
    (4, TeeResult.RIGHT): 3.24,
    (4, TeeResult.PENALTY): 4.15,
    (5, TeeResult.FAIRWAY): 3.78,
    (5, TeeResult.LEFT): 3.98,
    (5, TeeResult.RIGHT): 3.98,
    (5, TeeResult.PENALTY): 4.95,
}

APPROACH_ZONE_EXPECTED: Dict[ApproachZone, float] = {
    ApproachZone.UNDER_60: 2.55,
    ApproachZone.FROM_60_TO_90: 2.75,
    ApproachZone.FROM_90_TO_135: 2.95,
    ApproachZone.FROM_135_TO_180: 3.15,
    ApproachZone.OVER_180: 3.45,
}

APPROACH_LIE_ADJUSTMENT: Dict[ApproachLie, float] = {
    ApproachLie.FAIRWAY: 0.0,
    ApproachLie.ROUGH: 0.12,
    ApproachLie.BUNKER: 0.25,
    ApproachLie.RECOVERY: 0.45,
}

GIR_PROXIMITY_EXPECTED: Dict[PuttBucket, float] = {
    PuttBucket.UNDER_3M: 1.25,
    PuttBucket.FROM_3_TO_5M: 1.55,
    PuttBucket.FROM_5_TO_10M: 1.85,
    PuttBucket.OVER_10M: 2.15,
}
GIR_PROXIMITY_DEFAULT = 1.95

MISSED_GREEN_EXPECTED: Dict[ErrorSide, float] = {
    ErrorSide.GOOD_SIDE: 2.25,
    ErrorSide.BAD_SIDE: 2.55,
}
MISSED_GREEN_DEFAULT = 2.4

SHORT_GAME_START: Dict[ErrorSide, float] = {
    ErrorSide.GOOD_SIDE: 2.35,
    ErrorSide.BAD_SIDE: 2.55,
}
SHORT_GAME_START_DEFAULT = 2.35

SCRAMBLE_SAVED_COST = 2.0
SCRAMBLE_FAILED_COST = 2.8

# Short-game cost by putts taken when the scrambling outcome is unknown:
# (max putts, cost); anything above the last threshold costs the tail value.
SHORT_GAME_PUTT_COST: Tuple[Tuple[int, float], ...] = (
    (1, 2.1),
    (2, 2.5),
)
SHORT_GAME_PUTT_COST_TAIL = 2.9

EXPECTED_PUTTS: Dict[PuttBucket, float] = {
    PuttBucket.UNDER_3M: 1.22,
    PuttBucket.FROM_3_TO_5M: 1.56,
    PuttBucket.FROM_5_TO_10M: 1.84,
    PuttBucket.OVER_10M: 2.13,
}

PENALTY_STROKE_COST = 0.25

CONFIDENCE_HIGH_SIGNALS = 6
CONFIDENCE_MEDIUM_SIGNALS = 4


__all__ = [
    "APPROACH_LIE_ADJUSTMENT",
    "APPROACH_ZONE_EXPECTED",
    "CONFIDENCE_HIGH_SIGNALS",
    "CONFIDENCE_MEDIUM_SIGNALS",
    "EXPECTED_AFTER_TEE",
    "EXPECTED_PUTTS",
    "GIR_PROXIMITY_DEFAULT",
    "GIR_PROXIMITY_EXPECTED",
    "MISSED_GREEN_DEFAULT",
    "MISSED_GREEN_EXPECTED",
    "MODEL_VERSION",
    "PENALTY_STROKE_COST",
    "SCRAMBLE_FAILED_COST",
    "SCRAMBLE_SAVED_COST",
    "SHORT_GAME_PUTT_COST",
    "SHORT_GAME_PUTT_COST_TAIL",
    "SHORT_GAME_START",
    "SHORT_GAME_START_DEFAULT",
    "TEE_BASELINE",
]
