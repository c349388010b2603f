"""A clockface where Mario bumps the hour and minute blocks every minute."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .clock import ClockTime, Clockface, millis
from .display import Locator
from .engine import DISPLAY_HEIGHT, EventBus, Picture, Tile
from .mario import Block, Mario
from .mario_assets import (
    BUSH,
    BUSH_SIZE,
    CLOUD1,
    CLOUD2,
    CLOUD_SIZE,
    GROUND,
    GROUND_SIZE,
    HILL,
    HILL_SIZE,
    SKY_COLOR,
)
from .mario_font import SUPER_MARIO_FONT

JUMP_EVENT = 0
MINUTE_CHECK_MS = 1000


class MarioClockface(Clockface):
    """Scenery with two numbered blocks that Mario hits to refresh the time."""

    def __init__(self, display: Any, *, clock: Callable[[], int] = millis) -> None:
        self.display = display
        self.event_bus = EventBus()
        Locator.provide_display(display)
        Locator.provide_event_bus(self.event_bus)
        self._millis = clock
        self.ground = Tile(GROUND, *GROUND_SIZE)
        self.bush = Picture(BUSH, *BUSH_SIZE)
        self.cloud1 = Picture(CLOUD1, *CLOUD_SIZE)
        self.cloud2 = Picture(CLOUD2, *CLOUD_SIZE)
        self.hill = Picture(HILL, *HILL_SIZE)
        self.mario = Mario(23, 40, clock=clock)
        self.hour_block = Block(13, 8, clock=clock)
        self.minute_block = Block(32, 8, clock=clock)
        self._clock_time: ClockTime | None = None
        self._last_millis = 0

    def _require_clock(self) -> ClockTime:
        if self._clock_time is None:
            raise RuntimeError("setup() must be called before update()")
        return self._clock_time

    def setup(self, clock: ClockTime) -> None:
        self._clock_time = clock
        display = self.display
        display.set_font(SUPER_MARIO_FONT)
        display.fill_rect(0, 0, 64, 64, SKY_COLOR)

        self.ground.fill_row(DISPLAY_HEIGHT - self.ground.height)
        self.bush.draw(43, 47)
        self.hill.draw(0, 34)
        self.cloud1.draw(0, 21)
        self.cloud2.draw(51, 7)

        self._update_time()

        self.hour_block.init()
        self.minute_block.init()
        self.mario.init()

    def update(self) -> None:
        clock = self._require_clock()
        self.hour_block.update()
        self.minute_block.update()
        self.mario.update()

        now = self._millis()
        if clock.second() == 0 and now - self._last_millis > MINUTE_CHECK_MS:
            self.mario.jump()
            self._update_time()
            self._last_millis = now

    def _update_time(self) -> None:
        clock = self._require_clock()
        self.hour_block.set_text(str(clock.hour()))
        self.minute_block.set_text(clock.minute_text())

    def external_event(self, event_type: int) -> None:
        """Make Mario jump and refresh the time when asked from outside."""
        if event_type == JUMP_EVENT:
            self.mario.jump()
            self._update_time()