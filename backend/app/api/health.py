"""Health check + meta endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from app.engine.generator import load_strategies
from app.engine.registry import get_registry
from app.llm.client import is_configured
from app.models.responses import HealthResponse

router = APIRouter()

_ENDPOINTS = {
    "health": "/api/health",
    "patterns": "/api/patterns",
    "export": "/api/patterns/export",
    "variants": "/api/patterns/variants",
    "templates": "/api/patterns/templates",
    "saved": "/api/saved",
    "generate": "/api/generate",
    "analyze": "/api/analyze",
}


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    load_strategies()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        api_key_configured=is_configured(),
        strategies=get_registry().names(),
        endpoints=_ENDPOINTS,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/prompts")
async def prompts() -> dict[str, str]:
    from app.llm.prompts import get_all_templates

    return get_all_templates()
