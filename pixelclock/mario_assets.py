"""RGB565 artwork for the Mario clockface: scenery, the question block and Mario."""

from __future__ import annotations

from collections.abc import Mapping

SKY_COLOR = 0x000E
MASK = SKY_COLOR

M_RED = 0xF801
M_SKIN = 0xFD28
M_SHOES = 0xC300
M_SHIRT = 0x7BCF
M_HAIR = 0x0000

BLOCK_SIZE = (19, 19)
BUSH_SIZE = (21, 9)
CLOUD_SIZE = (13, 12)
GROUND_SIZE = (8, 8)
HILL_SIZE = (20, 22)
MARIO_IDLE_SIZE = (13, 16)
MARIO_JUMP_SIZE = (17, 16)


def _image(palette: Mapping[str, int], width: int, rows: tuple[str, ...]) -> tuple[int, ...]:
    """Expand rows of palette letters into a flat row-major pixel tuple."""
    pixels: list[int] = []
    for row in rows:
        if len(row) != width:
            raise ValueError(f"row {row!r} is not {width} pixels wide")
        pixels.extend(palette[letter] for letter in row)
    return tuple(pixels)


_BLOCK_PALETTE = {"S": SKY_COLOR, "b": 0x9A40, "o": 0xE4E4, "k": 0x0000}
_PLAIN_ROW = "b" + "o" * 17 + "k"
_RIVET_ROW = "bokk" + "o" * 11 + "kkok"

BLOCK = _image(
    _BLOCK_PALETTE,
    19,
    (
        "S" + "b" * 17 + "S",
        _PLAIN_ROW,
        _RIVET_ROW,
        _RIVET_ROW,
        *(_PLAIN_ROW,) * 11,
        _RIVET_ROW,
        _RIVET_ROW,
        _PLAIN_ROW,
        "S" + "k" * 18,
    ),
)

_GREEN_PALETTE = {"S": SKY_COLOR, "k": 0x0000, "L": 0xBFE3, "G": 0x0560}

BUSH = _image(
    _GREEN_PALETTE,
    21,
    (
        "SSSSSSSSkkSSSSSSSkkSS",
        "SSSSSSSkLLkSkSSSkLLkS",
        "SSSSSSkLLLLkLkSkLLLLk",
        "SSSSSSkLLLGLLkSkLLLGL",
        "SSSSSkLGGLLGLLkLGGLLG",
        "SSSkkLGLLLLLLLLGLLLLL",
        "SSk" + "L" * 18,
        "SSk" + "L" * 18,
        "Sk" + "L" * 19,
    ),
)

_CLOUD_PALETTE = {"S": SKY_COLOR, "k": 0x0000, "W": 0xFFFF, "B": 0x3DFF}

CLOUD1 = _image(
    _CLOUD_PALETTE,
    13,
    (
        "SkkkSSSSSSSSS",
        "kWWWkkSSSSSSS",
        "kWWWWWkSkSSSS",
        "WBWWBWWkWkSSS",
        "BWWWWWWWWWkSS",
        "WWWWWWWWWWWkS",
        "WWWWWWWWWWWkS",
        "WWWWWWWWWWkSS",
        "WWWBBWBWWWWkS",
        "BBBWWBWWWWkSS",
        "WWkWWWkkkSSSS",
        "kkSkkkSSSSSSS",
    ),
)

CLOUD2 = _image(
    _CLOUD_PALETTE,
    13,
    (
        "SSSSSSSkkkSSS",
        "SSSSSSkWWWkkS",
        "SSSSSSkWWWWWk",
        "SSSSSkWBWWBWW",
        "SSSkkWBWWWWWW",
        "SSkWWWWWWWWWW",
        "SkWWWWWWWWWWW",
        "SWWWBWWWWWWWW",
        "SSkWWBWWWBBWB",
        "SSSkWWBBBWWBW",
        "SSSSkkWWkWWWk",
        "SSSSSSkkSkkkS",
    ),
)

GROUND = _image(
    {"r": 0xE2C2, "p": 0xF6B6, "k": 0x0000},
    8,
    (
        "rppprkpr",
        "prrrkprk",
        "prrrkrkr",
        "krrrkppk",
        "pkkrkprk",
        "pppkprrk",
        "prrprrrk",
        "rkkpkkkr",
    ),
)

HILL = _image(
    _GREEN_PALETTE,
    20,
    (
        "S" * 20,
        "S" * 20,
        "S" * 20,
        "S" * 20,
        "kk" + "S" * 18,
        "GGkk" + "S" * 16,
        "GGGGk" + "S" * 15,
        "GGkGGk" + "S" * 14,
        "GGkGGGk" + "S" * 13,
        "kGkGGGGk" + "S" * 12,
        "k" + "G" * 7 + "k" + "S" * 11,
        "G" * 9 + "k" + "S" * 10,
        "G" * 10 + "k" + "S" * 9,
        "G" * 11 + "k" + "S" * 8,
        "G" * 12 + "k" + "S" * 7,
        "G" * 6 + "k" + "G" * 6 + "k" + "S" * 6,
        "G" * 6 + "k" + "G" * 7 + "k" + "S" * 5,
        "G" * 4 + "kGk" + "G" * 8 + "k" + "S" * 4,
        "G" * 4 + "k" + "G" * 11 + "k" + "S" * 3,
        "G" * 17 + "k" + "S" * 2,
        "G" * 18 + "kS",
        "G" * 19 + "k",
    ),
)

_MARIO_PALETTE = {
    "S": MASK,
    "R": M_RED,
    "K": M_SKIN,
    "O": M_SHOES,
    "T": M_SHIRT,
    "H": M_HAIR,
}

MARIO_IDLE = _image(
    _MARIO_PALETTE,
    13,
    (
        "SSSRRRRRRSSSS",
        "SSRRRRRRRRRRS",
        "SSHHHKKHKKSSS",
        "SHKHKKKHKKKKS",
        "SHKHHKKKHKKKK",
        "SHHKKKKHHHHHS",
        "SSSKKKKKKKKSS",
        "SSTTRTTTTSSSS",
        "STTTRTTRTTTTS",
        "TTTTRRRRTTTTT",
        "KKTRKRRKRTKKK",
        "KKKRRRRRRKKKK",
        "KKRRRRRRRRKKK",
        "SSRRRRSRRRRSS",
        "SOOOOSSSOOOOS",
        "OOOOOSSSOOOOO",
    ),
)

MARIO_JUMP = _image(
    _MARIO_PALETTE,
    17,
    (
        "SSSSSSSSSSSSSKKKK",
        "SSSSSSRRRRRRSKKKK",
        "SSSSSRRRRRRRRRKKK",
        "SSSSSHHHKKHKKTTTT",
        "SSSSHKHKKKHKKTTTT",
        "SSSSHKHHKKKHKKKTT",
        "SSSSHHKKKKHHHHTTS",
        "SSSSSSKKKKKKKTTSS",
        "SSTTTTTRTTTRTTSSS",
        "STTTTTTTRTTTRRSOO",
        "KKTTTTTTRRRRRRSOO",
        "KKKKRRTRRKRRKROOO",
        "SKKORRRRRRRRRROOO",
        "SSOOORRRRRRRRROOO",
        "SOOORRRRRRRRSSSSS",
        "SOOSRRRRRSSSSSSSS",
    ),
)