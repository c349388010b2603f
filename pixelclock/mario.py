"""Mario, who jumps every minute, and the blocks he bumps to change the time."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum

from .clock import millis
from .display import Locator
from .engine import Direction, EventTask, EventType, Sprite
from .mario_assets import (
    BLOCK,
    BLOCK_SIZE,
    MARIO_IDLE,
    MARIO_IDLE_SIZE,
    MARIO_JUMP,
    MARIO_JUMP_SIZE,
    SKY_COLOR,
)

MARIO_PACE = 3
MARIO_JUMP_HEIGHT = 14
GROUND_LEVEL = 56
JUMP_COOLDOWN_MS = 500
JUMP_FRAME_MS = 50

MOVE_PACE = 2
MAX_MOVE_HEIGHT = 4
BLOCK_FRAME_MS = 60


class Mario(Sprite, EventTask):
    """The player sprite: stands still, and jumps up and back down on request."""

    class State(IntEnum):
        IDLE = 0
        WALKING = 1
        JUMPING = 2

    def __init__(self, x: int, y: int, *, clock: Callable[[], int] = millis) -> None:
        super().__init__(x, y)
        self.direction = Direction.DOWN
        self.state = Mario.State.IDLE
        self.last_state = Mario.State.IDLE
        self.sprite: Sequence[int] = MARIO_IDLE
        self.last_x = x
        self.last_y = y
        self._last_millis = 0
        self._clock = clock

    def move(self, direction: Direction) -> None:
        if direction == Direction.RIGHT:
            self.x += MARIO_PACE
        elif direction == Direction.LEFT:
            self.x -= MARIO_PACE

    def jump(self) -> None:
        """Start a jump unless one is running or the last step was too recent."""
        if self.state == Mario.State.JUMPING:
            return
        if self._clock() - self._last_millis <= JUMP_COOLDOWN_MS:
            return
        self.last_state = self.state
        self.state = Mario.State.JUMPING
        Locator.display().fill_rect(self.x, self.y, self.width, self.height, SKY_COLOR)
        self.width, self.height = MARIO_JUMP_SIZE
        self.sprite = MARIO_JUMP
        self.direction = Direction.UP
        self.last_y = self.y
        self.last_x = self.x

    def _idle(self) -> None:
        if self.state == Mario.State.IDLE:
            return
        self.last_state = self.state
        self.state = Mario.State.IDLE
        Locator.display().fill_rect(self.x, self.y, self.width, self.height, SKY_COLOR)
        self.width, self.height = MARIO_IDLE_SIZE
        self.sprite = MARIO_IDLE

    def init(self) -> None:
        Locator.event_bus().subscribe(self)
        Locator.display().draw_rgb_bitmap(self.x, self.y, MARIO_IDLE, *MARIO_IDLE_SIZE)

    def update(self) -> None:
        """Redraw after landing, or advance the jump by one step."""
        display = Locator.display()
        if self.state == Mario.State.IDLE and self.state != self.last_state:
            display.draw_rgb_bitmap(self.x, self.y, MARIO_IDLE, *MARIO_IDLE_SIZE)
        elif self.state == Mario.State.JUMPING:
            now = self._clock()
            if now - self._last_millis < JUMP_FRAME_MS:
                return
            display.fill_rect(self.x, self.y, self.width, self.height, SKY_COLOR)
            self.y += MARIO_PACE * (-1 if self.direction == Direction.UP else 1)
            display.draw_rgb_bitmap(self.x, self.y, self.sprite, self.width, self.height)
            Locator.event_bus().broadcast(EventType.MOVE, self)
            if self.last_y - self.y >= MARIO_JUMP_HEIGHT:
                self.direction = Direction.DOWN
            if self.y + self.height >= GROUND_LEVEL:
                self._idle()
            self._last_millis = now

    def execute(self, event: EventType, caller: Sprite) -> None:
        if event == EventType.COLLISION:
            self.direction = Direction.DOWN

    def name(self) -> str:
        return "MARIO"


class Block(Sprite, EventTask):
    """A brick showing a number that bounces when Mario hits it from below."""

    class State(IntEnum):
        IDLE = 0
        HIT = 1

    def __init__(self, x: int, y: int, *, clock: Callable[[], int] = millis) -> None:
        super().__init__(x, y, *BLOCK_SIZE)
        self.first_y = y
        self.last_y = y
        self.text = ""
        self.direction = Direction.UP
        self.state = Block.State.IDLE
        self.last_state = Block.State.IDLE
        self._last_millis = 0
        self._clock = clock

    def _go_idle(self) -> None:
        if self.state != Block.State.IDLE:
            self.last_state = self.state
            self.state = Block.State.IDLE
            self.y = self.first_y

    def _hit(self) -> None:
        if self.state != Block.State.HIT:
            self.last_state = self.state
            self.state = Block.State.HIT
            self.last_y = self.y
            self.direction = Direction.UP

    def _draw_text(self) -> None:
        display = Locator.display()
        display.set_text_color(0x0000)
        offset = 6 if len(self.text) == 1 else 2
        display.set_cursor(self.x + offset, self.y + 12)
        display.print(self.text)

    def _draw(self) -> None:
        Locator.display().draw_rgb_bitmap(self.x, self.y, BLOCK, self.width, self.height)
        self._draw_text()

    def set_text(self, text: str) -> None:
        self.text = str(text)

    def init(self) -> None:
        Locator.event_bus().subscribe(self)
        self._draw()

    def update(self) -> None:
        """Redraw after settling, or advance the bounce by one step."""
        if self.state == Block.State.IDLE and self.last_state != self.state:
            self._draw()
            self.last_state = self.state
        elif self.state == Block.State.HIT:
            now = self._clock()
            if now - self._last_millis < BLOCK_FRAME_MS:
                return
            Locator.display().fill_rect(self.x, self.y, self.width, self.height, SKY_COLOR)
            self.y += MOVE_PACE * (-1 if self.direction == Direction.UP else 1)
            self._draw()
            if self.first_y - self.y >= MAX_MOVE_HEIGHT:
                self.direction = Direction.DOWN
            if self.y >= self.first_y and self.direction == Direction.DOWN:
                self._go_idle()
            self._last_millis = now

    def execute(self, event: EventType, caller: Sprite) -> None:
        if event == EventType.MOVE and self.collided_with(caller):
            self._hit()
            Locator.event_bus().broadcast(EventType.COLLISION, self)

    def name(self) -> str:
        return "BLOCK"