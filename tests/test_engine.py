import pytest

from pixelclock.display import FrameBuffer, Locator
from pixelclock.engine import (
    DISPLAY_WIDTH,
    EventBus,
    EventTask,
    EventType,
    Picture,
    Sprite,
    Tile,
    flip_horizontally,
)


class Recorder(EventTask):
    def __init__(self, log, label):
        self.log = log
        self.label = label

    def execute(self, event, caller):
        self.log.append((self.label, event, caller))


@pytest.fixture
def fb():
    display = FrameBuffer()
    Locator.provide_display(display)
    return display


def test_broadcast_reaches_subscribers_in_order():
    log = []
    bus = EventBus()
    bus.subscribe(Recorder(log, "a"))
    bus.subscribe(Recorder(log, "b"))
    sender = Sprite()
    bus.broadcast(EventType.MOVE, sender)
    assert log == [("a", EventType.MOVE, sender), ("b", EventType.MOVE, sender)]


def test_bus_refuses_sixth_subscriber():
    bus = EventBus()
    for index in range(5):
        bus.subscribe(Recorder([], index))
    with pytest.raises(OverflowError):
        bus.subscribe(Recorder([], "extra"))


def test_event_task_is_abstract():
    with pytest.raises(TypeError):
        EventTask()


def test_overlapping_sprites_collide():
    a = Sprite(0, 0, 10, 10)
    b = Sprite(5, 5, 10, 10)
    assert a.collided_with(b)
    assert b.collided_with(a)


def test_touching_sprites_do_not_collide():
    a = Sprite(0, 0, 10, 10)
    b = Sprite(10, 0, 10, 10)
    assert not a.collided_with(b)


def test_distant_sprites_do_not_collide():
    assert not Sprite(0, 0, 3, 3).collided_with(Sprite(0, 20, 3, 3))


def test_picture_draws_on_located_display(fb):
    Picture([7, 8, 9, 10], 2, 2).draw(4, 5)
    assert [fb.get_pixel(4, 5), fb.get_pixel(5, 5), fb.get_pixel(4, 6), fb.get_pixel(5, 6)] == [7, 8, 9, 10]


def test_tile_fill_row_spans_width(fb):
    tile = Tile([3] * 64, 8, 8)
    tile.fill_row(56)
    assert all(fb.get_pixel(x, 56) == 3 for x in range(DISPLAY_WIDTH))
    assert all(fb.get_pixel(x, 55) == 0 for x in range(DISPLAY_WIDTH))


def test_flip_reverses_each_row():
    image = [1, 2, 3, 4, 5, 6]
    assert flip_horizontally(image, 3, 2) == [3, 2, 1, 6, 5, 4]


def test_flip_twice_is_identity():
    image = list(range(13 * 16))
    assert flip_horizontally(flip_horizontally(image, 13, 16), 13, 16) == image


def test_flip_rejects_short_image():
    with pytest.raises(ValueError):
        flip_horizontally([1, 2, 3], 2, 2)