"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from app.api import analyze, generate, health, patterns, saved

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(patterns.router)
api_router.include_router(saved.router)
api_router.include_router(generate.router)
api_router.include_router(analyze.router)
