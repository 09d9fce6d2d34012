"""Task → model selection. Image analysis runs on the cheap tier, pattern write-ups on mid."""

from __future__ import annotations

from app.config import settings

_TASK_TIER = {
    "analyze": "model_cheap",
    "generate": "model_mid",
}


def get_model_for_task(task: str) -> str:
    # Unknown tasks get the cheap tier
    return getattr(settings, _TASK_TIER.get(task, "model_cheap"))
