"""Decoding of small base64-encoded PNG images into RGB565 pixels."""

from __future__ import annotations

import base64
import binascii
import io
from dataclasses import dataclass
from typing import Any

from PIL import Image

from .colors import color565

IMAGE_BUFFER_SIZE = 1024
"""Largest decoded PNG, in bytes, that can be rendered."""
MAX_WIDTH = 64
"""Widest image line that can be drawn."""


class ImageError(ValueError):
    """Raised when an image cannot be decoded."""


@dataclass(frozen=True)
class DecodedImage:
    width: int
    height: int
    pixels: tuple[int, ...]


def decode_image(base64_image: str | bytes) -> DecodedImage:
    """Decode a base64 PNG into RGB565 pixels in row-major order."""
    try:
        data = base64.b64decode(base64_image, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageError(f"invalid base64 image: {exc}") from exc
    if len(data) > IMAGE_BUFFER_SIZE:
        raise ImageError(f"image is {len(data)} bytes, more than {IMAGE_BUFFER_SIZE}")
    try:
        with Image.open(io.BytesIO(data)) as image:
            if image.format != "PNG":
                raise ImageError(f"not a PNG image: {image.format}")
            rgb = image.convert("RGB")
    except ImageError:
        raise
    except (OSError, SyntaxError, ValueError) as exc:
        raise ImageError(f"cannot decode image: {exc}") from exc
    width, height = rgb.size
    if width > MAX_WIDTH:
        raise ImageError(f"image is {width} pixels wide, more than {MAX_WIDTH}")
    channels = iter(rgb.tobytes())
    pixels = tuple(color565(r, g, b) for r, g, b in zip(channels, channels, channels))
    return DecodedImage(width, height, pixels)


def render_image(display: Any, base64_image: str | bytes, x: int, y: int) -> None:
    """Draw a base64 PNG on display with its top-left corner at (x, y)."""
    image = decode_image(base64_image)
    display.draw_rgb_bitmap(x & 0xFF, y & 0xFF, image.pixels, image.width, image.height)


def image_dimensions(base64_image: str | bytes) -> tuple[int, int]:
    """Width and height of a base64 PNG."""
    image = decode_image(base64_image)
    return image.width, image.height