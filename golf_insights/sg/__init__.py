"""Strokes gained proxy package."""

from .engine import compute_breakdown, compute_breakdowns, effective_breakdown  # noqa: F401
from .schemas import SgCategory, SgMeans, StrokesGainedBreakdown  # noqa: F401
from .tables import MODEL_VERSION  # noqa: F401
