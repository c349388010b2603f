"""Start-up status screens: logo, WiFi and time-server progress."""

from __future__ import annotations

from typing import Any

from .display import Locator
from .fonts import PICOPIXEL

CW_STATUS_NTP = bytes.fromhex(
    "00000000 00000000 3ffff000 40000801"
    "4b8ee803 58aaa807 4b8aa867 4a2aa8f7"
    "4b8ee9ff 40000bff 3ffff3ff 000003ff"
    "000fc1ff 003ff000 007ff800 00fff870"
    "01fffdfc 19fffffe 3dfffffe 7fffffff"
    "ffffffff ffffffff ffffffff 7ffffffe"
    "00000000 00000000 00000000 00000000"
    "00000000 00000000 00000000 00000000"
)

CW_STATUS_WIFI = bytes.fromhex(
    "00000000 00000000 00000000 00000000"
    "00000000 000ff000 00ffff00 03ffffc0"
    "0ffffff0 1ffffff8 7ff81ffe ffc003ff"
    "7f0000fe 3c07e03c 183ffc18 00ffff00"
    "01ffff80 03ffffc0 01ffff80 00f00f00"
    "00600600 00000000 0007e000 000ff000"
    "0007e000 0003c000 00018000 00000000"
    "00000000 00000000 00000000 00000000"
)

CW_STATUS_DINO = bytes.fromhex(
    "00ffff00 03f81fc0 07c003e0 0f0000f0"
    "1e000078 3c00003c 781fff9e 703fffee"
    "e033ffe7 e073ffe7 c07fffe3 c07fffe3"
    "c07fffe3 807fffe1 807fffe1 807fffe1"
    "807f8001 807f8001 803ffe01 c03ffe03"
    "c03e0003 c0fe0003 e0fe0007 e7fe0007"
    "7ffff00e 7ffff01e 3ffe303c 1ffe0078"
    "0ffe00f0 07fc03e0 03fc1fc0 00ffff00"
)

LOGO_WIDTH = 63
LOGO_HEIGHT = 21

_LOGO_PIXELS: dict[int, tuple[int, ...]] = {
    0xFFFF: (
        133, 134, 136, 137, 193, 201, 202, 203, 255, 267, 317, 331, 379, 395,
        449, 458, 475, 504, 523, 538, 554, 567, 575, 586, 591, 592, 597, 598,
        599, 601, 630, 638, 656, 659, 669, 673, 677, 680, 684, 685, 689, 690,
        693, 701, 702, 703, 704, 705, 719, 722, 775, 777, 782, 785, 836, 840,
        848, 856, 899, 904, 905, 907, 912, 913, 914, 916, 920, 923, 924, 926,
        927, 935, 936, 1023, 1076, 1077, 1084, 1085, 1143, 1144, 1145,
    ),
    0xE71C: (135, 756, 853, 901, 1141),
    0xEF5D: (194, 195, 512, 649, 651, 712, 714, 790, 906, 1075, 1142),
    0xF79E: (442, 460, 589, 590, 664, 727, 838, 942),
    0xDEDB: (667, 730),
    0xF800: (732, 736, 740, 743, 746, 751, 754),
    0x0020: (748, 811),
    0x07E0: (796, 799, 802, 806, 810, 814, 815, 816, 817),
    0xDEFB: (791, 792, 820, 883, 947, 961, 1011, 1083),
    0xD6BA: (845,),
    0x001F: (859, 862, 866, 870, 875, 878),
    0xFFFD: (932,),
    0xFFDF: (941,),
}


def _build_logo() -> tuple[int, ...]:
    pixels = [0] * (LOGO_WIDTH * LOGO_HEIGHT)
    for color, positions in _LOGO_PIXELS.items():
        for position in positions:
            pixels[position] = color
    return tuple(pixels)


CLOCKWISE_LOGO = _build_logo()


class StatusScreen:
    """Draws progress messages on a display, or on the located one."""

    def __init__(self, display: Any = None) -> None:
        self._display = display

    @property
    def display(self) -> Any:
        return self._display if self._display is not None else Locator.display()

    def clockwise_logo(self) -> None:
        self.display.draw_rgb_bitmap(1, 1, CLOCKWISE_LOGO, LOGO_WIDTH, LOGO_HEIGHT)

    def _icon_with_message(self, icon: bytes, color: int, msg: str) -> None:
        display = self.display
        display.fill_rect(0, 24, 64, 52, 0)
        display.draw_bitmap(16, 24, icon, 32, 32, color)
        self.print_center(msg, 61)

    def wifi_connecting(self) -> None:
        self._icon_with_message(CW_STATUS_WIFI, 0x2459, "Connect to WiFi")

    def wifi_connection_failed(self, msg: str) -> None:
        self._icon_with_message(CW_STATUS_WIFI, 0xFA28, msg)

    def ntp_connecting(self) -> None:
        self._icon_with_message(CW_STATUS_NTP, 0xBCBF, "NTP Server")

    def print_center(self, text: str, y: int) -> None:
        """Print text in white, centred horizontally with its baseline at y."""
        display = self.display
        display.set_font(PICOPIXEL)
        _, _, width, _ = display.get_text_bounds(text, 0, y)
        display.set_cursor(32 - width // 2, y)
        display.set_text_color(0xFFFF)
        display.print(text)