"""The blocky eight-pixel font used on the Mario clockface."""

from __future__ import annotations

from .fonts import GfxFont, Glyph

_BITMAP = bytes.fromhex(
    "00ffec30def66cdbfb6fed9b0010fb83e0ff8400c79c71c7"
    "1cf18061a35bed999d80fc36ccc630c63336c06c73f9c6c0"
    "30cfcc306f00fff0f0061c71c71c30007d9f3e7cf9df0077"
    "9ce73be07d9c39e71c3f807e18e060f9df001c79b66fe183"
    "00fd83f070f9df007d83f67cf9df00ff9c30c3060c007d9f"
    "3becf9df007d9f3bf0e1df00f3c06c37801999861860f801"
    "f0c30c3333007d8f18e3000c007d06ed5bf01f0038fb9f3f"
    "fcf980fdcf9fee7cff003ccf870e0ccf00f9db9f3e7dbe00"
    "ffc387ee1c3f80ffc387ee1c38003cc3877e6ccf80e7cf9f"
    "fe7cf980fb9ce73be01e0c183e7cdf00e7dbe78f9db980e3"
    "8e38e38fc0c7dffffd78f180c7cfdffefcf9807dcf9f3e7c"
    "df00fdcf9f3fdc38007dcf9f3ffd9e80fdcf9f6f9db98079"
    "db83e07cdf00fe70e1c3870e00e7cf9f3e7cdf00e7cf9f36"
    "c70400c78f5ebffdf180c7ddf1c7ddf180e7cf9be3870e00"
    "fe1c71c71c3f80fcccccf0c1c1c1c1c1c180f33333f076c0"
    "fe9038fb9f3ffcf980fdcf9fee7cff003ccf870e0ccf00f9"
    "db9f3e7dbe00ffc387ee1c3f80ffc387ee1c38003cc3877e"
    "6ccf80e7cf9ffe7cf980fb9ce73be01e0c183e7cdf00e7db"
    "e78f9db980e38e38e38fc0c7dffffd78f180c7cfdffefcf9"
    "807dcf9f3e7cdf00fdcf9f3fdc38007dcf9f3ffd9e80fdcf"
    "9f6f9db98079db83e07cdf00fe70e1c3870e00e7cf9f3e7c"
    "df00e7cf9f36c70400c78f5ebffdf180c7ddf1c7ddf180e7"
    "cf9be3870e00fe1c71c71c3f80366c6630fffcc66366c071"
    "7470"
)

_ADVANCE = 8
_FIRST = 0x20
_LAST = 0x7E

# Most characters fill a 7x7 cell sitting on the baseline.
_DEFAULT_SHAPE = (7, 7, 0, -6)

# width, height, x offset, y offset for the characters that differ
_SHAPES = {
    " ": (1, 1, 0, 0),
    "!": (3, 7, 2, -6),
    '"': (5, 3, 1, -6),
    "'": (2, 3, 2, -6),
    "(": (4, 7, 2, -6),
    ")": (4, 7, 1, -6),
    "*": (7, 5, 0, -5),
    "+": (6, 5, 1, -5),
    ",": (3, 3, 1, -1),
    "-": (6, 2, 1, -3),
    ".": (2, 2, 2, -1),
    "1": (5, 7, 1, -6),
    ":": (2, 5, 2, -5),
    ";": (3, 6, 1, -5),
    "<": (5, 7, 1, -6),
    "=": (5, 4, 1, -4),
    ">": (5, 7, 1, -6),
    "I": (5, 7, 1, -6),
    "L": (6, 7, 1, -6),
    "[": (4, 7, 2, -6),
    "]": (4, 7, 1, -6),
    "^": (5, 2, 1, -6),
    "_": (7, 1, 0, 1),
    "`": (2, 2, 2, -6),
    "i": (5, 7, 1, -6),
    "l": (6, 7, 1, -6),
    "{": (4, 7, 2, -6),
    "|": (2, 7, 3, -6),
    "}": (4, 7, 1, -6),
    "~": (7, 3, 0, -4),
}


def _build_glyphs() -> tuple[Glyph, ...]:
    glyphs = []
    offset = 0
    for code in range(_FIRST, _LAST + 1):
        width, height, x_offset, y_offset = _SHAPES.get(chr(code), _DEFAULT_SHAPE)
        glyphs.append(Glyph(offset, width, height, _ADVANCE, x_offset, y_offset))
        offset += (width * height + 7) // 8
    return tuple(glyphs)


SUPER_MARIO_FONT = GfxFont(
    bitmap=_BITMAP,
    glyphs=_build_glyphs(),
    first=_FIRST,
    last=_LAST,
    y_advance=9,
)
"""Fixed-advance font drawn on the question blocks."""