from __future__ import annotations

import platform
import time
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict

from fastapi import FastAPI

from golf_insights.api.routers.analytics import router as analytics_router
from golf_insights.config import get_settings
from golf_insights.sg.tables import MODEL_VERSION


def _package_version() -> str:
    try:
        return version("golf-insights")
    except PackageNotFoundError:
        return "0.0.0"


app = FastAPI(title="golf-insights")
app.include_router(analytics_router)


@app.get("/health")
async def health() -> Dict[str, Any]:
    settings = get_settings()
    return {
        "status": "ok",
        "version": _package_version(),
        "modelVersion": MODEL_VERSION,
        "ts": time.time(),
        "defaultWindow": settings.default_window,
        "runtime": {
            "python": platform.python_version(),
        },
    }


__all__ = ["app", "health"]
