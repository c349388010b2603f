"""RGB565 colour helpers."""

from __future__ import annotations


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 11) & 0x1F, (color >> 5) & 0x3F, color & 0x1F


def color565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue values into a 16-bit RGB565 colour."""
    r, g, b = r & 0xFF, g & 0xFF, b & 0xFF
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)


def adjust_bright(color: int, bright: int) -> int:
    """Add a brightness offset to each channel of an RGB565 colour."""
    bright &= 0xFF
    r, g, b = _channels(color)
    return color565((r + bright) & 0xFF, (g + bright) & 0xFF, (b + bright) & 0xFF)


def brighter(color: int, factor: int) -> int:
    """Scale each channel by factor // 10, capped at 255."""
    scale = (factor & 0xFF) // 10
    r, g, b = _channels(color)
    return color565(min(r * scale, 255), min(g * scale, 255), min(b * scale, 255))