"""POST /api/patterns: procedural pattern generation, export, templates and variants."""

from __future__ import annotations

import asyncio
import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from app.config import Settings
from app.dependencies import get_settings
from app.engine.generator import create_generator
from app.engine.presets import TEMPLATES, Template, get_template, make_variants
from app.engine.summary import summarize_pattern
from app.models.requests import PatternRequest
from app.models.responses import (
    ParamsOut,
    PatternResponse,
    StrategiesResponse,
    StrategyInfo,
    TemplateOut,
    TemplatesResponse,
    VariantOut,
    VariantsResponse,
)
from app.svg.raster import RASTER_FORMATS, render_svg
from app.svg.renderer import export_filename, pattern_caption, pattern_to_svg

router = APIRouter()
logger = logging.getLogger(__name__)

_SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("/patterns/strategies", response_model=StrategiesResponse)
async def strategies() -> StrategiesResponse:
    registry = create_generator().registry
    return StrategiesResponse(
        strategies=[StrategyInfo(name=s.name, description=s.description) for s in registry.all()],
        default=registry.default,
    )


def _template_out(t: Template) -> TemplateOut:
    return TemplateOut(
        name=t.name,
        level=t.level,
        preview=t.preview,
        params=ParamsOut(**t.to_params().to_dict()),
    )


@router.get("/patterns/templates", response_model=TemplatesResponse)
async def templates() -> TemplatesResponse:
    return TemplatesResponse(templates=[_template_out(t) for t in TEMPLATES])


@router.get("/patterns/templates/{name}", response_model=TemplateOut)
async def template(name: str) -> TemplateOut:
    found = get_template(name)
    if found is None:
        raise HTTPException(status_code=404, detail=f"Unknown template: {name}")
    return _template_out(found)


@router.post("/patterns", response_model=PatternResponse)
async def generate(req: PatternRequest) -> PatternResponse:
    pattern = create_generator().generate(req.to_params())
    return PatternResponse(
        pattern=pattern.to_dict(),
        summary=summarize_pattern(pattern).to_dict(),
        caption=pattern_caption(pattern),
    )


@router.post("/patterns/export")
async def export(
    req: PatternRequest,
    fmt: str = Query("svg", alias="format", description="svg | png | jpeg"),
    settings: Settings = Depends(get_settings),
) -> Response:
    fmt = fmt.lower()
    if fmt != "svg" and fmt not in RASTER_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unsupported export format: {fmt}")

    pattern = create_generator().generate(req.to_params())
    svg = pattern_to_svg(pattern)
    filename = export_filename(pattern, fmt, int(time.time() * 1000))
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}

    if fmt == "svg":
        return Response(content=svg, media_type=_SVG_MEDIA_TYPE, headers=headers)

    # Rasterizing is CPU-bound; keep the event loop free
    loop = asyncio.get_running_loop()
    content = await loop.run_in_executor(None, render_svg, svg, fmt, settings.raster_scale)
    logger.info("Exported %s (%d bytes)", filename, len(content))
    return Response(content=content, media_type=RASTER_FORMATS[fmt], headers=headers)


@router.post("/patterns/variants", response_model=VariantsResponse)
async def variants(req: PatternRequest) -> VariantsResponse:
    generator = create_generator()
    out: list[VariantOut] = []
    for params in make_variants(req.to_params()):
        pattern = generator.generate(params)
        out.append(
            VariantOut(
                params=ParamsOut(**params.to_dict()),
                summary=summarize_pattern(pattern).to_dict(),
            )
        )
    return VariantsResponse(variants=out)
