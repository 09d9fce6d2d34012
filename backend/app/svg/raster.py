"""Raster snapshots of rendered SVG via cairosvg (+ Pillow for JPEG)."""

from __future__ import annotations

import io
import logging

logger = logging.getLogger(__name__)

# Cream paper behind the drawing
DEFAULT_BACKGROUND = "#FFFEF7"

RASTER_FORMATS = {"png": "image/png", "jpeg": "image/jpeg"}


def render_svg_to_png(svg: str, scale: float = 2.0, background: str = DEFAULT_BACKGROUND) -> bytes:
    """Render SVG string to PNG bytes at ``scale`` × the SVG's own size."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            scale=scale,
            background_color=background,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def render_svg_to_jpeg(
    svg: str,
    scale: float = 2.0,
    background: str = DEFAULT_BACKGROUND,
    quality: int = 92,
) -> bytes:
    """PNG render flattened onto the background colour, re-encoded as JPEG."""
    from PIL import Image

    png_bytes = render_svg_to_png(svg, scale=scale, background=background)
    rgba = Image.open(io.BytesIO(png_bytes)).convert("RGBA")
    flat = Image.new("RGB", rgba.size, background)
    flat.paste(rgba, mask=rgba.getchannel("A"))

    out = io.BytesIO()
    flat.save(out, format="JPEG", quality=quality)
    return out.getvalue()


def render_svg(svg: str, fmt: str, scale: float = 2.0) -> bytes:
    if fmt == "png":
        return render_svg_to_png(svg, scale=scale)
    if fmt == "jpeg":
        return render_svg_to_jpeg(svg, scale=scale)
    raise ValueError(f"Unsupported raster format: {fmt}")
