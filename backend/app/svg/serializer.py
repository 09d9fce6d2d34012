"""Write SVG markup from flat element definitions."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

# Keys of an element dict that are not attributes
_RESERVED = ("tag", "text")


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
    description: str = "",
    styles: dict[str, str] | None = None,
) -> str:
    """Generate SVG markup from element definitions.

    Each element is ``{"tag": ..., <attr>: <value>, ...}``; an optional
    ``"text"`` key becomes the element's text content.
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{canvas_w}" height="{canvas_h}" viewBox="0 0 {canvas_w} {canvas_h}"'
        ' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k not in _RESERVED}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        if "text" in elem:
            lines.append(f"  <{tag} {attr_str}>{escape(str(elem['text']))}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
