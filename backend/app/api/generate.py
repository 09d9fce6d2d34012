"""POST /api/generate: relay a text prompt to the model, return its raw reply."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from app.llm.client import LLMNotConfiguredError, LLMRequestError, get_text_response
from app.llm.prompts import build_generate_prompt
from app.models.requests import GenerateRequest
from app.models.responses import GenerateResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest) -> GenerateResponse:
    if not req.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt is required")

    try:
        text = await get_text_response(build_generate_prompt(req.prompt), task="generate")
    except LLMNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except LLMRequestError as e:
        logger.exception("Error generating kolam pattern")
        raise HTTPException(
            status_code=502, detail=f"Failed to generate kolam pattern: {e}",
        ) from e

    return GenerateResponse(
        response=text,
        prompt=req.prompt,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
