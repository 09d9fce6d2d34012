"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Kolam API is running"
    version: str = "0.1.0"
    api_key_configured: bool = False
    strategies: list[str] = Field(default_factory=list)
    endpoints: dict[str, str] = Field(default_factory=dict)
    timestamp: str = ""


class StrategyInfo(BaseModel):
    name: str
    description: str = ""


class StrategiesResponse(BaseModel):
    strategies: list[StrategyInfo] = Field(default_factory=list)
    default: str = "radial"


class ParamsOut(BaseModel):
    grid_size: int
    pattern_type: str
    selected_shapes: list[str]
    complexity: int
    symmetry: str
    loops: int
    spacing: float


class TemplateOut(BaseModel):
    name: str
    level: str
    preview: str
    params: ParamsOut


class TemplatesResponse(BaseModel):
    templates: list[TemplateOut] = Field(default_factory=list)


class PatternResponse(BaseModel):
    pattern: dict[str, Any]
    summary: dict[str, Any]
    caption: str = ""


class VariantOut(BaseModel):
    params: ParamsOut
    summary: dict[str, Any]


class VariantsResponse(BaseModel):
    variants: list[VariantOut] = Field(default_factory=list)


class SavedParamsResponse(BaseModel):
    saved: list[ParamsOut] = Field(default_factory=list)
    count: int = 0


class GenerateResponse(BaseModel):
    success: bool = True
    response: str
    prompt: str
    timestamp: str


class AnalyzeResponse(BaseModel):
    success: bool = True
    analysis: str
    filename: str
    file_size: int
    timestamp: str
