"""Sprites, events and static pictures for the small game engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .display import Locator

DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 64


class Direction(IntEnum):
    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


class EventType(IntEnum):
    MOVE = 0
    COLLISION = 1


class EventTask(ABC):
    """Something that reacts to events broadcast on an EventBus."""

    @abstractmethod
    def execute(self, event: EventType, caller: "Sprite") -> None:
        """Handle an event sent by caller."""


class EventBus:
    """Delivers events to a fixed number of subscribers."""

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = capacity
        self._subscriptions: list[EventTask] = []

    def subscribe(self, task: EventTask) -> None:
        if len(self._subscriptions) >= self.capacity:
            raise OverflowError("event bus is out of space")
        self._subscriptions.append(task)

    def broadcast(self, event: EventType, sender: "Sprite") -> None:
        for task in tuple(self._subscriptions):
            task.execute(event, sender)


class Sprite:
    """A positioned rectangle that can test for overlap with another."""

    def __init__(self, x: int = 0, y: int = 0, width: int = 0, height: int = 0) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def collided_with(self, other: "Sprite") -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def name(self) -> str:
        return "SPRITE"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x}, y={self.y}, "
            f"w={self.width}, h={self.height})"
        )


@dataclass(frozen=True)
class Picture:
    """A static RGB565 image drawn on the located display."""

    image: Sequence[int]
    width: int
    height: int

    def draw(self, x: int, y: int) -> None:
        Locator.display().draw_rgb_bitmap(x, y, self.image, self.width, self.height)


@dataclass(frozen=True)
class Tile:
    """A small image that can be repeated across a row of the display."""

    image: Sequence[int]
    width: int
    height: int

    def draw(self, x: int, y: int) -> None:
        Locator.display().draw_rgb_bitmap(x, y, self.image, self.width, self.height)

    def fill_row(self, y: int) -> None:
        for x in range(0, DISPLAY_WIDTH, self.width):
            self.draw(x, y)


def flip_horizontally(image: Sequence[int], width: int, height: int) -> list[int]:
    """Return a copy of a row-major image mirrored left to right."""
    if len(image) < width * height:
        raise ValueError("image is smaller than width * height")
    flipped: list[int] = []
    for row in range(height):
        flipped.extend(reversed(image[row * width:(row + 1) * width]))
    return flipped