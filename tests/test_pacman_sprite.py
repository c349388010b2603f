import random

import pytest

from pixelclock.display import FrameBuffer, Locator
from pixelclock.engine import Direction, EventType, Sprite
from pixelclock.pacman_sprite import (
    FRAMES_RIGHT,
    PACMAN_COLOR,
    Pacman,
    PacmanState,
)


@pytest.fixture
def display():
    buffer = FrameBuffer()
    Locator.provide_display(buffer)
    return buffer


def test_init_draws_open_mouth_frame(display):
    pacman = Pacman(10, 10)
    pacman.init()
    assert pacman.current_frame == FRAMES_RIGHT[1]
    assert display.get_pixel(10, 10) == 0
    assert display.get_pixel(14, 10) == PACMAN_COLOR


def test_update_moves_right_and_toggles_frame(display):
    pacman = Pacman(10, 10)
    pacman.init()
    pacman.update()
    assert (pacman.x, pacman.y) == (11, 10)
    assert pacman.current_frame == FRAMES_RIGHT[0]
    assert display.get_pixel(10, 10) == 0
    assert display.get_pixel(12, 10) == PACMAN_COLOR


def test_move_each_direction():
    pacman = Pacman(20, 20)
    pacman.move(Direction.LEFT)
    pacman.move(Direction.UP)
    assert (pacman.x, pacman.y) == (19, 19)
    pacman.move(Direction.RIGHT)
    pacman.move(Direction.DOWN)
    assert (pacman.x, pacman.y) == (20, 20)


def test_stopped_does_not_move(display):
    pacman = Pacman(5, 5)
    pacman.set_state(PacmanState.STOPPED)
    pacman.update()
    assert (pacman.x, pacman.y) == (5, 5)


def test_turn_left_mirrors_rows():
    pacman = Pacman(0, 0)
    pacman.turn(Direction.LEFT)
    assert pacman.direction == Direction.LEFT
    for frame, right in zip(pacman.frames, FRAMES_RIGHT):
        for row in range(5):
            assert list(frame[row * 5:(row + 1) * 5]) == list(reversed(right[row * 5:(row + 1) * 5]))


@pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN, Direction.LEFT])
def test_turn_keeps_pixel_count(direction):
    pacman = Pacman(0, 0)
    pacman.turn(direction)
    for frame, right in zip(pacman.frames, FRAMES_RIGHT):
        assert sum(1 for p in frame if p) == sum(1 for p in right if p)
    assert pacman.frames != FRAMES_RIGHT


def test_turning_back_right_restores_frames():
    pacman = Pacman(0, 0)
    pacman.turn(Direction.UP)
    assert pacman.frames != Pacman(0, 0).frames
    pacman.turn(Direction.RIGHT)
    assert pacman.frames == FRAMES_RIGHT


def test_up_and_down_differ():
    up, down = Pacman(0, 0), Pacman(0, 0)
    up.turn(Direction.UP)
    down.turn(Direction.DOWN)
    assert up.frames != down.frames


def test_invincible_flashes_then_expires(display):
    now = [0]
    pacman = Pacman(10, 10, clock=lambda: now[0], rng=random.Random(1))
    pacman.set_state(PacmanState.INVINCIBLE)
    pacman.update()
    assert pacman.state == PacmanState.INVINCIBLE
    assert all(p == pacman.color for p in pacman.current_frame if p)
    now[0] = 7000
    pacman.update()
    assert pacman.state == PacmanState.MOVING
    assert pacman.color == PACMAN_COLOR


def test_collision_turns_down():
    pacman = Pacman(0, 0)
    pacman.execute(EventType.MOVE, Sprite())
    assert pacman.direction == Direction.RIGHT
    pacman.execute(EventType.COLLISION, Sprite())
    assert pacman.direction == Direction.DOWN


def test_name():
    assert Pacman(0, 0).name() == "PACMAN"