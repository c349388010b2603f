"""An in-memory 16-bit frame buffer and the locator that hands it out."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from .fonts import PICOPIXEL, GfxFont, union_boxes


def _u16(color: int) -> int:
    return int(color) & 0xFFFF


class FrameBuffer:
    """A grid of RGB565 pixels with drawing and text primitives."""

    def __init__(self, width: int = 64, height: int = 64) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer size must be positive")
        self.width = width
        self.height = height
        self._pixels = [[0] * width for _ in range(height)]
        self.cursor_x = 0
        self.cursor_y = 0
        self.text_color = 0xFFFF
        self.font: GfxFont = PICOPIXEL
        self.wrap = True

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y); raise IndexError outside the buffer."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the display")
        return self._pixels[y][x]

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        x, y = int(x), int(y)
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y][x] = _u16(color)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        x, y, width, height = int(x), int(y), int(width), int(height)
        left, right = max(x, 0), min(x + width, self.width)
        top, bottom = max(y, 0), min(y + height, self.height)
        if right <= left or bottom <= top:
            return
        fill = [_u16(color)] * (right - left)
        for row in self._pixels[top:bottom]:
            row[left:right] = fill

    def draw_fast_hline(self, x: int, y: int, width: int, color: int) -> None:
        if width < 0:
            x, width = x + width + 1, -width
        self.fill_rect(x, y, width, 1, color)

    def draw_fast_vline(self, x: int, y: int, height: int, color: int) -> None:
        if height < 0:
            y, height = y + height + 1, -height
        self.fill_rect(x, y, 1, height, color)

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        self.draw_fast_hline(x, y, width, color)
        self.draw_fast_hline(x, y + height - 1, width, color)
        self.draw_fast_vline(x, y, height, color)
        self.draw_fast_vline(x + width - 1, y, height, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0, x1, y1 = y0, x0, y1, x1
        if x0 > x1:
            x0, x1, y0, y1 = x1, x0, y1, y0
        dx, dy = x1 - x0, abs(y1 - y0)
        err = dx // 2
        step = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self.draw_pixel(y, x, color)
            else:
                self.draw_pixel(x, y, color)
            err -= dy
            if err < 0:
                y += step
                err += dx

    def draw_rgb_bitmap(
        self, x: int, y: int, bitmap: Sequence[int], width: int, height: int
    ) -> None:
        """Draw a row-major array of RGB565 colours."""
        if len(bitmap) < width * height:
            raise ValueError("bitmap is smaller than width * height")
        for row in range(height):
            line = bitmap[row * width:(row + 1) * width]
            for column, color in enumerate(line):
                self.draw_pixel(x + column, y + row, color)

    def draw_bitmap(
        self, x: int, y: int, bitmap: bytes, width: int, height: int, color: int
    ) -> None:
        """Draw the set bits of a one-bit bitmap whose rows are padded to bytes."""
        byte_width = (width + 7) // 8
        if len(bitmap) < byte_width * height:
            raise ValueError("bitmap is smaller than its declared size")
        for row in range(height):
            for column in range(width):
                if bitmap[row * byte_width + column // 8] & (0x80 >> (column % 8)):
                    self.draw_pixel(x + column, y + row, color)

    def set_font(self, font: GfxFont | None = None) -> None:
        """Select a font; with no font the default small font is used."""
        self.font = font if font is not None else PICOPIXEL

    def set_text_color(self, color: int) -> None:
        self.text_color = _u16(color)

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor_x, self.cursor_y = int(x), int(y)

    def set_text_wrap(self, wrap: bool) -> None:
        self.wrap = bool(wrap)

    def get_text_bounds(self, text: Any, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (x1, y1, width, height) of text printed from (x, y)."""
        if not self.wrap:
            return self.font.text_bounds(str(text), x, y)
        font = self.font
        boxes = []
        cursor_x, cursor_y = x, y
        for char in str(text):
            if char == "\n":
                cursor_x = 0
                cursor_y += font.y_advance
                continue
            if char not in font:
                continue
            glyph = font.glyph(char)
            if cursor_x + glyph.x_offset + glyph.width > self.width:
                cursor_x = 0
                cursor_y += font.y_advance
            left = cursor_x + glyph.x_offset
            top = cursor_y + glyph.y_offset
            boxes.append((left, top, left + glyph.width - 1, top + glyph.height - 1))
            cursor_x += glyph.x_advance
        return union_boxes(boxes, x, y)

    def print(self, text: Any) -> None:
        """Draw text at the cursor in the text colour and advance the cursor."""
        font = self.font
        for char in str(text):
            if char == "\n":
                self.cursor_x = 0
                self.cursor_y += font.y_advance
                continue
            if char not in font:
                continue
            glyph = font.glyph(char)
            if glyph.width and glyph.height:
                if self.wrap and self.cursor_x + glyph.x_offset + glyph.width > self.width:
                    self.cursor_x = 0
                    self.cursor_y += font.y_advance
                for dx, dy in font.glyph_pixels(char):
                    self.draw_pixel(self.cursor_x + dx, self.cursor_y + dy, self.text_color)
            self.cursor_x += glyph.x_advance

    def println(self, text: Any = "") -> None:
        self.print(f"{text}\n")


class Locator:
    """Process-wide access point for the display and the event bus."""

    _display: ClassVar[Any] = None
    _event_bus: ClassVar[Any] = None

    @classmethod
    def provide_display(cls, display: Any) -> None:
        cls._display = display

    @classmethod
    def provide_event_bus(cls, bus: Any) -> None:
        cls._event_bus = bus

    @classmethod
    def display(cls) -> Any:
        if cls._display is None:
            raise LookupError("no display has been provided")
        return cls._display

    @classmethod
    def event_bus(cls) -> Any:
        if cls._event_bus is None:
            raise LookupError("no event bus has been provided")
        return cls._event_bus