"""A clockface where Pac-Man eats his way around a maze framing the time."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from enum import IntEnum
from typing import Any

from .clock import ClockTime, Clockface, millis
from .display import Locator
from .engine import Direction
from .fonts import PICOPIXEL, GfxFont
from .pacman_sprite import Pacman, PacmanState


class MapBlock(IntEnum):
    EMPTY = 0
    FOOD = 1
    WALL = 2
    GATE = 3
    SUPER_FOOD = 4
    CLOCK = 5
    GHOST = 6
    PACMAN = 7
    OUT_OF_MAP = 99


MAP_SIZE = 12
MAP_BORDER_SIZE = 2
MAP_MIN_POS = MAP_BORDER_SIZE
MAP_MAX_POS = 64 - MAP_BORDER_SIZE
BLOCK_PIXELS = 5

MAP_CONST: tuple[tuple[int, ...], ...] = (
    (4, 1, 1, 1, 1, 1, 7, 1, 1, 1, 1, 4),
    (1, 2, 2, 1, 2, 2, 2, 2, 1, 2, 2, 1),
    (1, 1, 1, 1, 1, 2, 2, 1, 1, 1, 1, 1),
    (2, 1, 5, 5, 5, 5, 5, 5, 5, 5, 1, 2),
    (2, 1, 5, 5, 5, 5, 5, 5, 5, 5, 1, 2),
    (3, 1, 5, 5, 5, 5, 5, 5, 5, 5, 1, 3),
    (3, 1, 5, 5, 5, 5, 5, 5, 5, 5, 1, 3),
    (2, 1, 5, 5, 5, 5, 5, 5, 5, 5, 1, 2),
    (2, 1, 5, 5, 5, 5, 5, 5, 5, 5, 1, 2),
    (1, 1, 1, 1, 1, 2, 2, 1, 1, 1, 1, 1),
    (1, 2, 2, 1, 2, 2, 2, 2, 1, 2, 2, 1),
    (4, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 4),
)

MOVING_BLOCKS = frozenset({MapBlock.EMPTY, MapBlock.FOOD, MapBlock.GATE})
BLOCKING_BLOCKS = frozenset({MapBlock.OUT_OF_MAP, MapBlock.WALL, MapBlock.CLOCK})

FOOD_COLOR = 0xB58C
WALL_COLOR = 0x0016
SUPER_FOOD_COLOR = 0xFBE0
TIME_COLOR = 0xFE40
DATE_COLOR = 0xAD55

WEEKDAY_NAMES = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
MONTH_NAMES = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)

SECONDS_BLINK_MS = 1000
CLOCK_REFRESH_MS = 60000
PACMAN_STEP_MS = 75


def _cell(position: int) -> int:
    """Map index of a pixel position inside the border."""
    return math.trunc((position - MAP_MIN_POS) / BLOCK_PIXELS)


class PacmanClockface(Clockface):
    """The time and date in the middle of a maze that Pac-Man keeps clearing."""

    def __init__(
        self,
        display: Any,
        *,
        hour_font: GfxFont | None = None,
        clock: Callable[[], int] = millis,
        rng: random.Random | None = None,
    ) -> None:
        self.display = display
        Locator.provide_display(display)
        self.hour_font = hour_font if hour_font is not None else PICOPIXEL
        self._millis = clock
        self._rng = rng or random.Random()
        self._map = [list(row) for row in MAP_CONST]
        self.pacman: Pacman | None = None
        self.show_seconds = True
        self._clock_time: ClockTime | None = None
        self._last_millis = 0
        self._last_millis_time = 0
        self._last_millis_sec = 0

    def _require_setup(self) -> tuple[ClockTime, Pacman]:
        if self._clock_time is None or self.pacman is None:
            raise RuntimeError("setup() must be called before update()")
        return self._clock_time, self.pacman

    def setup(self, clock: ClockTime) -> None:
        self._clock_time = clock
        self.display.set_font(self.hour_font)
        self._draw_map()
        self._update_clock()

    def update(self) -> None:
        _, pacman = self._require_setup()
        display = self.display
        now = self._millis()

        if now - self._last_millis_sec >= SECONDS_BLINK_MS:
            color = TIME_COLOR if self.show_seconds else 0
            display.fill_rect(31, 24, 2, 2, color)
            display.fill_rect(31, 29, 2, 2, color)
            self.show_seconds = not self.show_seconds
            self._last_millis_sec = now

        if now - self._last_millis_time >= CLOCK_REFRESH_MS:
            self._update_clock()
            self._last_millis_time = now

        if now - self._last_millis >= PACMAN_STEP_MS:
            horizontal = pacman.direction in (Direction.LEFT, Direction.RIGHT)
            full_block = (
                horizontal and (pacman.x - MAP_MIN_POS) % BLOCK_PIXELS == 0
            ) or (
                not horizontal and (pacman.y - MAP_MIN_POS) % BLOCK_PIXELS == 0
            )

            if full_block:
                next_blk = self.next_block()
                self._map[_cell(pacman.y)][_cell(pacman.x)] = MapBlock.EMPTY
                self._direction_decision(next_blk, horizontal)

                if next_blk == MapBlock.SUPER_FOOD:
                    pacman.set_state(PacmanState.INVINCIBLE)

                if self.count_blocks(MapBlock.FOOD) == 0:
                    self.reset_map()

            self._require_setup()[1].update()
            self._last_millis = now

    def weekday_name(self, weekday: int) -> str:
        """Three-letter weekday, counted from Sunday = 0."""
        if not 0 <= weekday < len(WEEKDAY_NAMES):
            raise ValueError(f"weekday out of range: {weekday}")
        return WEEKDAY_NAMES[weekday]

    def month_name(self, month: int) -> str:
        """Three-letter month name, counted from January = 1."""
        if not 1 <= month <= len(MONTH_NAMES):
            raise ValueError(f"month out of range: {month}")
        return MONTH_NAMES[month - 1]

    def _update_clock(self) -> None:
        clock = self._clock_time
        if clock is None:
            raise RuntimeError("setup() must be called first")
        display = self.display
        display.fill_rect(14, 19, 36, 26, 0x0000)

        display.set_font(PICOPIXEL)
        display.set_text_color(DATE_COLOR)
        display.set_cursor(15, 41)
        display.print(self.month_name(clock.month()))
        display.print(" ")
        display.print(clock.day())
        display.print(" ")
        display.print(self.weekday_name(clock.weekday()))

        display.set_font(self.hour_font)
        display.set_text_color(TIME_COLOR)
        display.set_cursor(15, 28)
        display.print(clock.hour_text())
        display.print(" ")
        display.print(clock.minute_text())

    def _direction_decision(self, next_blk: MapBlock, moving_axis_x: bool) -> None:
        _, pacman = self._require_setup()
        rng = self._rng
        if next_blk in BLOCKING_BLOCKS:
            self._turn_random()
        elif (
            moving_axis_x
            and self.next_block(Direction.DOWN) in MOVING_BLOCKS
            and rng.randrange(100) % 2 == 0
        ):
            pacman.turn(Direction.DOWN)
        elif (
            moving_axis_x
            and self.next_block(Direction.UP) in MOVING_BLOCKS
            and rng.randrange(100) % 2 == 0
        ):
            pacman.turn(Direction.UP)
        elif (
            not moving_axis_x
            and self.next_block(Direction.LEFT) in MOVING_BLOCKS
            and rng.randrange(100) % 2 == 0
        ):
            pacman.turn(Direction.LEFT)
        elif (
            not moving_axis_x
            and self.next_block(Direction.RIGHT) in MOVING_BLOCKS
            and rng.randrange(100) % 2 == 0
        ):
            pacman.turn(Direction.RIGHT)

    def _turn_random(self) -> None:
        _, pacman = self._require_setup()
        if not any(self.next_block(d) in MOVING_BLOCKS for d in Direction):
            raise RuntimeError("Pac-Man has no open direction")
        direction = Direction(self._rng.randrange(4))
        while True:
            pacman.turn(direction)
            direction = Direction(self._rng.randrange(4))
            if self.next_block() in MOVING_BLOCKS:
                break

    def reset_map(self) -> None:
        """Refill the maze with food and place Pac-Man back at the start."""
        self._map = [list(row) for row in MAP_CONST]
        self._draw_map()
        self._update_clock()

    def count_blocks(self, block: MapBlock) -> int:
        return sum(row.count(block) for row in self._map)

    def next_block(self, direction: Direction | None = None) -> MapBlock:
        """The map block next to Pac-Man in a direction, his own by default."""
        if self.pacman is None:
            raise RuntimeError("setup() must be called first")
        pacman = self.pacman
        if direction is None:
            direction = pacman.direction
        row, col = _cell(pacman.y), _cell(pacman.x)
        if direction == Direction.RIGHT:
            if pacman.x + pacman.width < MAP_MAX_POS:
                return MapBlock(self._map[row][col + 1])
        elif direction == Direction.DOWN:
            if pacman.y + pacman.height < MAP_MAX_POS:
                return MapBlock(self._map[row + 1][col])
        elif direction == Direction.LEFT:
            if pacman.x - MAP_MIN_POS > 0:
                return MapBlock(self._map[row][col - 1])
        elif direction == Direction.UP:
            if pacman.y - MAP_MIN_POS > 0:
                return MapBlock(self._map[row - 1][col])
        return MapBlock.OUT_OF_MAP

    def _draw_map(self) -> None:
        display = self.display
        display.fill_rect(0, 0, 64, 64, 0x0000)
        display.draw_rect(0, 0, 64, 64, WALL_COLOR)
        display.draw_rect(1, 1, 62, 62, WALL_COLOR)

        for j, row in enumerate(self._map):
            for i, block in enumerate(row):
                left, top = i * BLOCK_PIXELS, j * BLOCK_PIXELS
                if block in (MapBlock.FOOD, MapBlock.GATE):
                    display.fill_rect(left + 3, top + 4, 3, 1, FOOD_COLOR)
                elif block in (MapBlock.WALL, MapBlock.CLOCK):
                    display.fill_rect(left + 2, top + 2, 5, 5, WALL_COLOR)
                elif block == MapBlock.SUPER_FOOD:
                    display.fill_rect(left + 3, top + 3, 3, 3, SUPER_FOOD_COLOR)
                elif block == MapBlock.PACMAN:
                    self.pacman = Pacman(
                        left + 2, top + 2, clock=self._millis, rng=self._rng
                    )