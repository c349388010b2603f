import random
from datetime import datetime, timezone

import pytest

from pixelclock.clock import ClockTime
from pixelclock.display import FrameBuffer, Locator
from pixelclock.engine import Direction
from pixelclock.pacman_face import (
    DATE_COLOR,
    MAP_CONST,
    TIME_COLOR,
    MapBlock,
    PacmanClockface,
)


@pytest.fixture
def rig():
    moment = [datetime(2024, 3, 5, 10, 5, 30, tzinfo=timezone.utc)]
    now = [0]
    display = FrameBuffer()
    face = PacmanClockface(display, clock=lambda: now[0], rng=random.Random(7))
    face.setup(ClockTime(now=lambda: moment[0]))
    return face, display, moment, now


def test_construction_provides_display():
    display = FrameBuffer()
    PacmanClockface(display)
    assert Locator.display() is display


def test_setup_places_pacman_at_start(rig):
    face, _, _, _ = rig
    assert (face.pacman.x, face.pacman.y) == (32, 2)
    assert face.pacman.direction == Direction.RIGHT


def test_setup_counts_match_map(rig):
    face, _, _, _ = rig
    assert face.count_blocks(MapBlock.SUPER_FOOD) == 4
    assert face.count_blocks(MapBlock.PACMAN) == 1
    total = sum(face.count_blocks(block) for block in MapBlock)
    assert total == len(MAP_CONST) * len(MAP_CONST[0])


def test_next_block_around_start(rig):
    face, _, _, _ = rig
    assert face.next_block(Direction.RIGHT) == MapBlock.FOOD
    assert face.next_block(Direction.LEFT) == MapBlock.FOOD
    assert face.next_block(Direction.DOWN) == MapBlock.WALL
    assert face.next_block(Direction.UP) == MapBlock.OUT_OF_MAP
    assert face.next_block() == face.next_block(Direction.RIGHT)


def test_names(rig):
    face, _, _, _ = rig
    assert face.weekday_name(0) == "SUN"
    assert face.weekday_name(6) == "SAT"
    assert face.month_name(1) == "JAN"
    assert face.month_name(12) == "DEC"


@pytest.mark.parametrize("weekday", [-1, 7])
def test_weekday_out_of_range(rig, weekday):
    face, _, _, _ = rig
    with pytest.raises(ValueError):
        face.weekday_name(weekday)


@pytest.mark.parametrize("month", [0, 13])
def test_month_out_of_range(rig, month):
    face, _, _, _ = rig
    with pytest.raises(ValueError):
        face.month_name(month)


def test_clock_text_is_drawn(rig):
    _, display, _, _ = rig
    date_pixels = [
        display.get_pixel(x, y) for x in range(15, 50) for y in range(36, 43)
    ]
    time_pixels = [
        display.get_pixel(x, y) for x in range(15, 31) for y in range(22, 29)
    ]
    assert DATE_COLOR in date_pixels
    assert TIME_COLOR in time_pixels


def test_first_step_eats_start_cell(rig):
    face, _, _, now = rig
    now[0] = 75
    face.update()
    assert face.pacman.x == 33
    assert face.count_blocks(MapBlock.PACMAN) == 0
    assert face.count_blocks(MapBlock.EMPTY) == 1


def test_seconds_blink(rig):
    face, display, _, now = rig
    now[0] = 1000
    face.update()
    assert display.get_pixel(31, 24) == TIME_COLOR
    assert display.get_pixel(32, 30) == TIME_COLOR
    now[0] = 2000
    face.update()
    assert display.get_pixel(31, 24) == 0
    assert display.get_pixel(32, 30) == 0


def test_reset_map_restores_start(rig):
    face, _, _, now = rig
    now[0] = 75
    face.update()
    face.reset_map()
    assert face.count_blocks(MapBlock.PACMAN) == 1
    assert face.count_blocks(MapBlock.EMPTY) == 0
    assert (face.pacman.x, face.pacman.y) == (32, 2)


def test_pacman_stays_in_open_cells(rig):
    face, _, _, now = rig
    for step in range(1, 400):
        now[0] = step * 75
        face.update()
        pacman = face.pacman
        assert 2 <= pacman.x <= 57
        assert 2 <= pacman.y <= 57


def test_update_before_setup_raises():
    face = PacmanClockface(FrameBuffer(), clock=lambda: 0)
    with pytest.raises(RuntimeError):
        face.update()