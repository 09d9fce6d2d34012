"""FastAPI dependency injection."""

from __future__ import annotations

from app.config import Settings, settings
from app.storage.param_store import ParamStore, get_param_store


def get_settings() -> Settings:
    return settings


def get_store() -> ParamStore:
    """Saved-parameter store; tests override this with a temp-file store."""
    return get_param_store()
