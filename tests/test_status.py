import pytest

from pixelclock.display import FrameBuffer
from pixelclock.status import (
    CLOCKWISE_LOGO,
    CW_STATUS_DINO,
    CW_STATUS_NTP,
    CW_STATUS_WIFI,
    LOGO_HEIGHT,
    LOGO_WIDTH,
    StatusScreen,
)


@pytest.fixture
def screen():
    buffer = FrameBuffer()
    return buffer, StatusScreen(buffer)


def lit_columns(buffer, rows, color):
    return [
        x
        for y in rows
        for x in range(buffer.width)
        if buffer.get_pixel(x, y) == color
    ]


def test_icons_draw_as_32_pixel_squares(screen):
    buffer, _ = screen
    assert len(CW_STATUS_NTP) == 128
    assert len(CW_STATUS_WIFI) == 128
    assert len(CW_STATUS_DINO) == 128
    assert len(CLOCKWISE_LOGO) == LOGO_WIDTH * LOGO_HEIGHT
    buffer.draw_bitmap(0, 0, CW_STATUS_DINO, 32, 32, 0xFFFF)
    # first row of the dino icon is 0x00, 0xFF, 0xFF, 0x00
    assert buffer.get_pixel(7, 0) == 0
    assert buffer.get_pixel(8, 0) == 0xFFFF
    assert buffer.get_pixel(23, 0) == 0xFFFF
    assert buffer.get_pixel(24, 0) == 0


def test_logo_pixels(screen):
    buffer, status = screen
    status.clockwise_logo()
    assert buffer.get_pixel(8, 3) == 0xFFFF
    assert buffer.get_pixel(10, 3) == 0xE71C
    assert buffer.get_pixel(40, 12) == 0xF800
    assert buffer.get_pixel(1, 1) == 0


def test_wifi_connecting_draws_icon(screen):
    buffer, status = screen
    buffer.fill_rect(0, 0, 64, 64, 0x1234)
    status.wifi_connecting()
    assert buffer.get_pixel(28, 29) == 0x2459
    assert buffer.get_pixel(16, 24) == 0
    assert buffer.get_pixel(0, 10) == 0x1234


def test_wifi_failed_uses_error_colour(screen):
    buffer, status = screen
    status.wifi_connection_failed("WiFi Failed")
    assert buffer.get_pixel(28, 29) == 0xFA28
    assert lit_columns(buffer, range(56, 64), 0xFFFF)


def test_ntp_connecting_draws_icon(screen):
    buffer, status = screen
    status.ntp_connecting()
    # first set bit of the time-server icon is on row 2, column 2
    assert buffer.get_pixel(18, 26) == 0xBCBF


def test_print_center_starts_at_half_width(screen):
    buffer, status = screen
    status.print_center("AB", 20)
    _, _, width, _ = buffer.get_text_bounds("AB", 0, 20)
    columns = lit_columns(buffer, range(10, 25), 0xFFFF)
    assert min(columns) == 32 - width // 2
    assert max(columns) == 32 - width // 2 + width - 1
    assert buffer.text_color == 0xFFFF


def test_print_center_is_roughly_symmetric(screen):
    buffer, status = screen
    status.print_center("Canvas", 30)
    columns = lit_columns(buffer, range(20, 35), 0xFFFF)
    assert abs((32 - min(columns)) - (max(columns) + 1 - 32)) <= 1