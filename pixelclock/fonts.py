"""Bitmap fonts in the packed one-bit glyph format used by the display."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Glyph:
    """Placement and size of one character inside a font bitmap."""

    bitmap_offset: int
    width: int
    height: int
    x_advance: int
    x_offset: int
    y_offset: int


@dataclass(frozen=True)
class GfxFont:
    """A proportional bitmap font covering the character codes first..last."""

    bitmap: bytes
    glyphs: tuple[Glyph, ...]
    first: int
    last: int
    y_advance: int

    def __post_init__(self) -> None:
        if len(self.glyphs) != self.last - self.first + 1:
            raise ValueError("glyph table does not match the character range")

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and self.first <= ord(char) <= self.last

    def glyph(self, char: str) -> Glyph:
        """Return the glyph for a single character, or raise KeyError."""
        if char not in self:
            raise KeyError(char)
        return self.glyphs[ord(char) - self.first]

    def glyph_pixels(self, char: str) -> Iterator[tuple[int, int]]:
        """Yield the (dx, dy) offsets, relative to the cursor, of the set pixels."""
        glyph = self.glyph(char)
        total = glyph.width * glyph.height
        for index in range(total):
            byte = self.bitmap[glyph.bitmap_offset + index // 8]
            if byte & (0x80 >> (index % 8)):
                row, column = divmod(index, glyph.width)
                yield glyph.x_offset + column, glyph.y_offset + row

    def text_bounds(self, text: str, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (x1, y1, width, height) of text drawn with its cursor at (x, y)."""
        boxes = []
        cursor_x, cursor_y = x, y
        for char in str(text):
            if char == "\n":
                cursor_x = 0
                cursor_y += self.y_advance
                continue
            if char not in self:
                continue
            glyph = self.glyph(char)
            left = cursor_x + glyph.x_offset
            top = cursor_y + glyph.y_offset
            boxes.append((left, top, left + glyph.width - 1, top + glyph.height - 1))
            cursor_x += glyph.x_advance
        return union_boxes(boxes, x, y)


def union_boxes(
    boxes: list[tuple[int, int, int, int]], x: int, y: int
) -> tuple[int, int, int, int]:
    """Combine inclusive (x1, y1, x2, y2) boxes into one (x, y, width, height)."""
    x1, y1, width, height = x, y, 0, 0
    if boxes:
        min_x = min(box[0] for box in boxes)
        min_y = min(box[1] for box in boxes)
        max_x = max(box[2] for box in boxes)
        max_y = max(box[3] for box in boxes)
        if max_x >= min_x:
            x1, width = min_x, max_x - min_x + 1
        if max_y >= min_y:
            y1, height = min_y, max_y - min_y + 1
    return x1, y1, width, height


_PICOPIXEL_BITMAP = bytes([
    0xE8, 0xB4, 0x57, 0xD5, 0xF5, 0x00, 0x4E, 0x3E, 0x80, 0xA5, 0x4A, 0x4A,
    0x5A, 0x50, 0xC0, 0x6A, 0x40, 0x95, 0x80, 0xAA, 0x80, 0x5D, 0x00, 0x60,
    0xE0, 0x80, 0x25, 0x48, 0x56, 0xD4, 0x75, 0x40, 0xC5, 0x4E, 0xC5, 0x1C,
    0x97, 0x92, 0xF3, 0x1C, 0x53, 0x54, 0xE5, 0x48, 0x55, 0x54, 0x55, 0x94,
    0xA0, 0x46, 0x64, 0xE3, 0x80, 0x98, 0xC5, 0x04, 0x56, 0xC6, 0x57, 0xDA,
    0xD7, 0x5C, 0x72, 0x46, 0xD6, 0xDC, 0xF3, 0xCE, 0xF3, 0x48, 0x72, 0xD4,
    0xB7, 0xDA, 0xF8, 0x24, 0xD4, 0xBB, 0x5A, 0x92, 0x4E, 0x8E, 0xEB, 0x58,
    0x80, 0x9D, 0xB9, 0x90, 0x56, 0xD4, 0xD7, 0x48, 0x56, 0xD4, 0x40, 0xD7,
    0x5A, 0x71, 0x1C, 0xE9, 0x24, 0xB6, 0xD4, 0xB6, 0xA4, 0x8C, 0x6B, 0x55,
    0x00, 0xB5, 0x5A, 0xB5, 0x24, 0xE5, 0x4E, 0xEA, 0xC0, 0x91, 0x12, 0xD5,
    0xC0, 0x54, 0xF0, 0x90, 0xC7, 0xF0, 0x93, 0x5E, 0x71, 0x80, 0x25, 0xDE,
    0x5E, 0x30, 0x6E, 0x80, 0x77, 0x9C, 0x93, 0x5A, 0xB8, 0x45, 0x60, 0x92,
    0xEA, 0xAA, 0x40, 0xD5, 0x6A, 0xD6, 0x80, 0x55, 0x00, 0xD7, 0x40, 0x75,
    0x90, 0xE8, 0x71, 0xE0, 0xBA, 0x40, 0xB5, 0x80, 0xB5, 0x00, 0x8D, 0x54,
    0xAA, 0x80, 0xAC, 0xE0, 0xE5, 0x70, 0x6A, 0x26, 0xFC, 0xC8, 0xAC, 0x5A,
])

_PICOPIXEL_GLYPHS = (
    (0, 0, 0, 2, 0, 1), (0, 1, 5, 2, 0, -4), (1, 3, 2, 4, 0, -4),
    (2, 5, 5, 6, 0, -4), (6, 3, 6, 4, 0, -4), (9, 3, 5, 4, 0, -4),
    (11, 4, 5, 5, 0, -4), (14, 1, 2, 2, 0, -4), (15, 2, 5, 3, 0, -4),
    (17, 2, 5, 3, 0, -4), (19, 3, 3, 4, 0, -3), (21, 3, 3, 4, 0, -3),
    (23, 2, 2, 3, 0, 0), (24, 3, 1, 4, 0, -2), (25, 1, 1, 2, 0, 0),
    (26, 3, 5, 4, 0, -4), (28, 3, 5, 4, 0, -4), (30, 2, 5, 3, 0, -4),
    (32, 3, 5, 4, 0, -4), (34, 3, 5, 4, 0, -4), (36, 3, 5, 4, 0, -4),
    (38, 3, 5, 4, 0, -4), (40, 3, 5, 4, 0, -4), (42, 3, 5, 4, 0, -4),
    (44, 3, 5, 4, 0, -4), (46, 3, 5, 4, 0, -4), (48, 1, 3, 2, 0, -3),
    (49, 2, 4, 3, 0, -3), (50, 2, 3, 3, 0, -3), (51, 3, 3, 4, 0, -3),
    (53, 2, 3, 3, 0, -3), (54, 3, 5, 4, 0, -4), (56, 3, 5, 4, 0, -4),
    (58, 3, 5, 4, 0, -4), (60, 3, 5, 4, 0, -4), (62, 3, 5, 4, 0, -4),
    (64, 3, 5, 4, 0, -4), (66, 3, 5, 4, 0, -4), (68, 3, 5, 4, 0, -4),
    (70, 3, 5, 4, 0, -4), (72, 3, 5, 4, 0, -4), (74, 1, 5, 2, 0, -4),
    (75, 3, 5, 4, 0, -4), (77, 3, 5, 4, 0, -4), (79, 3, 5, 4, 0, -4),
    (81, 5, 5, 6, 0, -4), (85, 4, 5, 5, 0, -4), (88, 3, 5, 4, 0, -4),
    (90, 3, 5, 4, 0, -4), (92, 3, 6, 4, 0, -4), (95, 3, 5, 4, 0, -4),
    (97, 3, 5, 4, 0, -4), (99, 3, 5, 4, 0, -4), (101, 3, 5, 4, 0, -4),
    (103, 3, 5, 4, 0, -4), (105, 5, 5, 6, 0, -4), (109, 3, 5, 4, 0, -4),
    (111, 3, 5, 4, 0, -4), (113, 3, 5, 4, 0, -4), (115, 2, 5, 3, 0, -4),
    (117, 3, 5, 4, 0, -4), (119, 2, 5, 3, 0, -4), (121, 3, 2, 4, 0, -4),
    (122, 4, 1, 4, 0, 1), (123, 2, 2, 3, 0, -4), (124, 3, 4, 4, 0, -3),
    (126, 3, 5, 4, 0, -4), (128, 3, 3, 4, 0, -2), (130, 3, 5, 4, 0, -4),
    (132, 3, 4, 4, 0, -3), (134, 2, 5, 3, 0, -4), (136, 3, 5, 4, 0, -3),
    (138, 3, 5, 4, 0, -4), (140, 1, 5, 2, 0, -4), (141, 2, 6, 3, 0, -4),
    (143, 3, 5, 4, 0, -4), (145, 2, 5, 3, 0, -4), (147, 5, 3, 6, 0, -2),
    (149, 3, 3, 4, 0, -2), (151, 3, 3, 4, 0, -2), (153, 3, 4, 4, 0, -2),
    (155, 3, 4, 4, 0, -2), (157, 2, 3, 3, 0, -2), (158, 3, 4, 4, 0, -3),
    (160, 2, 5, 3, 0, -4), (162, 3, 3, 4, 0, -2), (164, 3, 3, 4, 0, -2),
    (166, 5, 3, 6, 0, -2), (168, 3, 3, 4, 0, -2), (170, 3, 4, 4, 0, -2),
    (172, 3, 4, 4, 0, -3), (174, 3, 5, 4, 0, -4), (176, 1, 6, 2, 0, -4),
    (177, 3, 5, 4, 0, -4), (179, 4, 2, 5, 0, -3),
)

PICOPIXEL = GfxFont(
    bitmap=_PICOPIXEL_BITMAP,
    glyphs=tuple(Glyph(*entry) for entry in _PICOPIXEL_GLYPHS),
    first=0x20,
    last=0x7E,
    y_advance=7,
)
"""A tiny font with every character within a six pixel height."""