from .critical_errors import CriticalErrorFlags, classify
from .models import HoleRecord, RoundHoles

__all__ = [
    "CriticalErrorFlags",
    "HoleRecord",
    "RoundHoles",
    "classify",
]
