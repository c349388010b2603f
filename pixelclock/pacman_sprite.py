"""The animated Pac-Man sprite that wanders around the clock."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from enum import IntEnum

from .clock import millis
from .display import Locator
from .engine import Direction, EventTask, EventType, Sprite, flip_horizontally

SPRITE_SIZE = 5
PACMAN_COLOR = 0xFE40
INVINCIBLE_MS = 7000

_Y = PACMAN_COLOR
FRAMES_RIGHT: tuple[tuple[int, ...], tuple[int, ...]] = (
    (
        0, _Y, _Y, _Y, 0,
        _Y, _Y, 0, _Y, _Y,
        _Y, _Y, _Y, _Y, _Y,
        _Y, _Y, _Y, _Y, _Y,
        0, _Y, _Y, _Y, 0,
    ),
    (
        0, _Y, _Y, _Y, _Y,
        _Y, _Y, 0, _Y, 0,
        _Y, _Y, _Y, 0, 0,
        _Y, _Y, _Y, _Y, 0,
        0, _Y, _Y, _Y, _Y,
    ),
)
"""The two animation frames facing right."""


class PacmanState(IntEnum):
    MOVING = 0
    STOPPED = 1
    TURNING = 2
    INVINCIBLE = 3


def _flip(frame: Sequence[int]) -> list[int]:
    return flip_horizontally(frame, SPRITE_SIZE, SPRITE_SIZE)


def _rotate(frame: Sequence[int]) -> list[int]:
    n = SPRITE_SIZE
    return [frame[(n - 1 - i) + j * n] for i in range(n) for j in range(n)]


_TRANSFORMS = {
    Direction.RIGHT: (),
    Direction.LEFT: (_flip,),
    Direction.DOWN: (_flip, _rotate, _flip),
    Direction.UP: (_rotate,),
}


class Pacman(Sprite, EventTask):
    """A five-pixel Pac-Man that moves one pixel per update."""

    def __init__(
        self,
        x: int,
        y: int,
        *,
        clock: Callable[[], int] = millis,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(x, y, SPRITE_SIZE, SPRITE_SIZE)
        self.direction = Direction.RIGHT
        self.state = PacmanState.MOVING
        self.color = PACMAN_COLOR
        self._frames = [list(frame) for frame in FRAMES_RIGHT]
        self._iteration = 0
        self._mouth_open = True
        self._invincible_since = 0
        self._clock = clock
        self._rng = rng or random.Random()

    @property
    def frames(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(frame) for frame in self._frames)

    @property
    def current_frame(self) -> tuple[int, ...]:
        return tuple(self._frames[int(self._mouth_open)])

    def _recolor(self, color: int) -> None:
        color &= 0xFFFF
        self._frames = [[color if pixel else 0 for pixel in frame] for frame in self._frames]

    def turn(self, direction: Direction) -> None:
        """Face a new direction, keeping the current colour."""
        direction = Direction(direction)
        frames = [list(frame) for frame in FRAMES_RIGHT]
        for transform in _TRANSFORMS[direction]:
            frames = [transform(frame) for frame in frames]
        self._frames = frames
        self._recolor(self.color)
        self.direction = direction

    def move(self, direction: Direction) -> None:
        if direction == Direction.RIGHT:
            self.x += 1
        elif direction == Direction.LEFT:
            self.x -= 1
        elif direction == Direction.DOWN:
            self.y += 1
        elif direction == Direction.UP:
            self.y -= 1

    def _draw(self) -> None:
        Locator.display().draw_rgb_bitmap(
            self.x, self.y, self.current_frame, SPRITE_SIZE, SPRITE_SIZE
        )

    def init(self) -> None:
        self._draw()

    def update(self) -> None:
        """Move, animate the mouth, flash while invincible and redraw."""
        if self.state in (PacmanState.MOVING, PacmanState.INVINCIBLE):
            Locator.display().fill_rect(self.x, self.y, SPRITE_SIZE, SPRITE_SIZE, 0)
            self.move(self.direction)

        if self._iteration % 3 == 0:
            self._mouth_open = not self._mouth_open

        if self.state == PacmanState.INVINCIBLE:
            if self._iteration % 2 == 0:
                self.color = self._rng.randrange(0x7FFFFFFF) & 0xFFFF
            else:
                self.color = PACMAN_COLOR
            if self._clock() - self._invincible_since >= INVINCIBLE_MS:
                self.state = PacmanState.MOVING
                self.color = PACMAN_COLOR
            self._recolor(self.color)

        self._draw()
        self._iteration = (self._iteration + 1) & 0xFF

    def set_state(self, state: PacmanState) -> None:
        if state == PacmanState.INVINCIBLE:
            self._invincible_since = self._clock()
        self.state = PacmanState(state)

    def execute(self, event: EventType, caller: Sprite) -> None:
        if event == EventType.COLLISION:
            self.direction = Direction.DOWN

    def name(self) -> str:
        return "PACMAN"