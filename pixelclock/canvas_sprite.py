"""A sprite described by a canvas definition: animated frames plus timed movement."""

from __future__ import annotations

import math

from .engine import Sprite


def _int8(value: int) -> int:
    """Wrap an integer into the signed 8-bit range."""
    return ((value + 128) & 0xFF) - 128


class CanvasSprite(Sprite):
    """Frame and movement state for one sprite on a canvas clockface."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y)
        self.total_frames = 0
        self.current_frame = 0
        self.sprite_reference = 0
        self.current_frame_count = 0
        self.last_millis_sprite_frames = 0
        self.last_reset_time = 0
        self.last_reset_move_time = 0
        self.moving = False
        self.move_start_time = 1
        self.move_duration = 0
        self.move_initial_x = 0
        self.move_initial_y = 0
        self.move_target_x = -1
        self.move_target_y = -1
        self.should_return_to_origin = False
        self.is_reversing = False

    def inc_frame(self) -> None:
        """Advance to the next frame, wrapping back to the first."""
        self.current_frame += 1
        if self.current_frame >= self.total_frames:
            self.current_frame = 0

    def set_dimensions(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def start_moving(
        self,
        target_x: int,
        target_y: int,
        duration: int,
        should_return_to_origin: bool,
        now: int,
    ) -> None:
        """Begin moving from the current position towards the target."""
        self.move_start_time = now
        self.move_duration = duration
        self.move_initial_x = self.x
        self.move_initial_y = self.y
        self.move_target_x = target_x
        self.move_target_y = target_y
        self.should_return_to_origin = should_return_to_origin
        self.moving = True
        self.is_reversing = False

    def reverse_moving(self, target_x: int, target_y: int, now: int) -> None:
        """Head back towards the target with the same duration as before."""
        self.move_start_time = now
        self.move_initial_x = self.x
        self.move_initial_y = self.y
        self.move_target_x = target_x
        self.move_target_y = target_y
        self.should_return_to_origin = False
        self.moving = True
        self.is_reversing = True

    def stop_moving(self) -> None:
        self.moving = False

    def lerp(self, start: int, end: int, t: float) -> int:
        """Linear interpolation, truncated towards zero as a signed byte."""
        return _int8(start + _int8(math.trunc(t * (end - start))))

    def name(self) -> str:
        return "CUSTOM"