"""Shared pytest fixtures for analytics tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from golf_insights.config import reset_settings_cache
from golf_insights.rounds.models import HoleRecord


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("INSIGHTS_DEFAULT_WINDOW", raising=False)
    monkeypatch.delenv("INSIGHTS_BATCH_WORKERS", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def make_hole() -> Callable[..., HoleRecord]:
    """Build a fully captured par-4 hole, overriding any field."""

    def _make(**overrides: Any) -> HoleRecord:
        base: dict[str, Any] = {
            "hole_par": 4,
            "score": 4,
            "putts": 2,
            "penalties": 0,
            "tee_result": "fairway",
            "approach_zone": "90-135",
            "approach_lie": "fairway",
            "approach_target": "centerGreen",
            "approach_error_side": "goodSide",
            "gir": True,
            "gir_proximity_bucket": "3-5m",
            "first_putt_bucket": "3-5m",
            "mental_commitment": "routinePerfect",
        }
        base.update(overrides)
        return HoleRecord.model_validate(base)

    return _make
