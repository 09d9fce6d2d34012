"""Colour tokens used by the strategies. Presentation only; geometry never reads them."""

from __future__ import annotations

GOLD = "#D4AF37"
SAFFRON = "#FF6B35"
MARIGOLD = "#FFD700"
LEAF_GREEN = "#228B22"


def hsl(hue: float, saturation: float, lightness: float) -> str:
    return f"hsl({hue}, {saturation}%, {lightness}%)"


def ring_color(loop: int) -> str:
    """Warm gold → brown progression for radial rings."""
    return hsl(45 + loop * 30, 70, 50)


def petal_color(layer: int) -> str:
    """Mandala petals: violet hues that darken outward."""
    return hsl(280 + layer * 20, 60, 60 - layer * 5)


def shape_band_color(index: int) -> str:
    """One hue per selected shape, by list position."""
    return hsl(index * 60, 70, 50)


def floral_petal_color(index: int) -> str:
    return hsl(120 + index * 15, 60, 50)


BASE_RING = hsl(45, 70, 50)
