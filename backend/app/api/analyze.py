"""POST /api/analyze: relay an uploaded kolam image + fixed rubric to the model."""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from app.config import Settings
from app.dependencies import get_settings
from app.llm.client import LLMNotConfiguredError, LLMRequestError, get_text_response
from app.llm.prompts import build_analyze_prompt
from app.models.responses import AnalyzeResponse

router = APIRouter()
logger = logging.getLogger(__name__)

# Pillow format name → media type the model accepts
_MEDIA_TYPES = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "GIF": "image/gif",
    "WEBP": "image/webp",
}


def _sniff_media_type(data: bytes) -> str | None:
    """Identify the image with Pillow; None when it is not a supported image."""
    from PIL import Image, UnidentifiedImageError

    try:
        with Image.open(io.BytesIO(data)) as img:
            return _MEDIA_TYPES.get(img.format or "")
    except (UnidentifiedImageError, OSError):
        return None


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    image: UploadFile | None = File(default=None),
    notes: str = Form(default=""),
    settings: Settings = Depends(get_settings),
) -> AnalyzeResponse:
    if image is None:
        raise HTTPException(status_code=400, detail="Image file is required")

    if image.content_type and not image.content_type.startswith("image/"):
        raise HTTPException(status_code=415, detail="Uploaded file must be an image")

    data = await image.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Image exceeds {settings.max_upload_bytes // (1024 * 1024)}MB limit",
        )

    media_type = _sniff_media_type(data)
    if media_type is None:
        raise HTTPException(status_code=415, detail="Unsupported or unreadable image")

    try:
        text = await get_text_response(
            build_analyze_prompt(notes),
            image=data,
            media_type=media_type,
            task="analyze",
        )
    except LLMNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except LLMRequestError as e:
        logger.exception("Error analyzing kolam image")
        raise HTTPException(status_code=502, detail=f"Failed to analyze kolam image: {e}") from e

    return AnalyzeResponse(
        analysis=text,
        filename=image.filename or "uploaded-image",
        file_size=len(data),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
