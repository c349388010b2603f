"""Clockfaces, sprites and a small graphics engine drawing into 64x64 RGB565 frame buffers."""

__version__ = "0.1.0"