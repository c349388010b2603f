import pytest

from pixelclock import mario_assets
from pixelclock.display import FrameBuffer, Locator
from pixelclock.engine import Direction, EventBus, EventTask, EventType, Sprite
from pixelclock.mario import Block, Mario


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


class Recorder(EventTask):
    def __init__(self):
        self.events = []

    def execute(self, event, caller):
        self.events.append((event, caller))


@pytest.fixture
def screen():
    display = FrameBuffer()
    bus = EventBus()
    Locator.provide_display(display)
    Locator.provide_event_bus(bus)
    return display, bus


@pytest.mark.parametrize(
    "name, width, height",
    [
        ("BLOCK", 19, 19),
        ("BUSH", 21, 9),
        ("CLOUD1", 13, 12),
        ("CLOUD2", 13, 12),
        ("GROUND", 8, 8),
        ("HILL", 20, 22),
        ("MARIO_IDLE", 13, 16),
        ("MARIO_JUMP", 17, 16),
    ],
)
def test_asset_sizes_match_declared_dimensions(screen, name, width, height):
    display, _ = screen
    asset = getattr(mario_assets, name)
    assert len(asset) == width * height
    display.draw_rgb_bitmap(0, 0, asset, width, height)
    assert display.get_pixel(width - 1, height - 1) == asset[-1]
    assert display.get_pixel(0, 0) == asset[0]


def test_asset_pixels_from_source(screen):
    display, _ = screen
    display.draw_rgb_bitmap(0, 0, mario_assets.BLOCK, 19, 19)
    assert display.get_pixel(0, 0) == mario_assets.SKY_COLOR
    assert display.get_pixel(1, 0) == 0x9A40
    assert display.get_pixel(18, 18) == 0x0000
    display.draw_rgb_bitmap(30, 0, mario_assets.GROUND, 8, 8)
    assert display.get_pixel(30, 0) == 0xE2C2
    assert mario_assets.HILL[439] == 0x0000
    assert mario_assets.MARIO_IDLE[3] == mario_assets.M_RED
    assert mario_assets.MARIO_JUMP[13] == mario_assets.M_SKIN


def test_mario_init_draws_idle_sprite(screen):
    display, bus = screen
    hero = Mario(23, 40, clock=FakeClock())
    hero.init()
    assert display.get_pixel(23 + 3, 40) == mario_assets.M_RED
    assert display.get_pixel(23, 40) == mario_assets.MASK


def test_mario_jump_waits_for_cooldown(screen):
    clock = FakeClock(0)
    hero = Mario(23, 40, clock=clock)
    hero.jump()
    assert hero.state == Mario.State.IDLE
    clock.now = 600
    hero.jump()
    assert hero.state == Mario.State.JUMPING
    assert (hero.width, hero.height) == mario_assets.MARIO_JUMP_SIZE
    assert hero.direction == Direction.UP


def test_mario_jump_goes_up_and_lands_where_it_started(screen):
    clock = FakeClock(600)
    hero = Mario(23, 40, clock=clock)
    hero.init()
    hero.jump()
    heights = []
    for _ in range(50):
        hero.update()
        heights.append(hero.y)
        clock.now += 50
        if hero.state == Mario.State.IDLE:
            break
    assert hero.state == Mario.State.IDLE
    assert hero.y == 40
    assert 40 - min(heights) >= 14
    assert (hero.width, hero.height) == mario_assets.MARIO_IDLE_SIZE


def test_mario_update_broadcasts_move(screen):
    _, bus = screen
    recorder = Recorder()
    bus.subscribe(recorder)
    clock = FakeClock(600)
    hero = Mario(23, 40, clock=clock)
    hero.jump()
    hero.update()
    assert recorder.events == [(EventType.MOVE, hero)]


def test_mario_update_respects_frame_interval(screen):
    clock = FakeClock(600)
    hero = Mario(23, 40, clock=clock)
    hero.jump()
    hero.update()
    y_after_first = hero.y
    clock.now += 10
    hero.update()
    assert hero.y == y_after_first


def test_mario_collision_turns_him_down(screen):
    hero = Mario(23, 40, clock=FakeClock(600))
    hero.jump()
    hero.execute(EventType.COLLISION, Sprite())
    assert hero.direction == Direction.DOWN


def test_mario_move_horizontal_only():
    hero = Mario(10, 10)
    hero.move(Direction.RIGHT)
    assert hero.x == 13
    hero.move(Direction.LEFT)
    hero.move(Direction.UP)
    assert (hero.x, hero.y) == (10, 10)


def test_names():
    assert Mario(0, 0).name() == "MARIO"
    assert Block(0, 0).name() == "BLOCK"


def test_block_init_draws_block_and_subscribes(screen):
    display, bus = screen
    block = Block(13, 8, clock=FakeClock())
    block.set_text("12")
    block.init()
    assert display.get_pixel(14, 8) == mario_assets.BLOCK[1]
    assert display.get_pixel(13, 8) == mario_assets.SKY_COLOR
    recorder = Recorder()
    bus.subscribe(recorder)
    bus.broadcast(EventType.MOVE, Sprite(100, 100, 1, 1))
    assert block.state == Block.State.IDLE
    assert len(recorder.events) == 1


def test_block_hit_by_overlapping_move(screen):
    _, bus = screen
    block = Block(13, 8, clock=FakeClock())
    recorder = Recorder()
    bus.subscribe(recorder)
    mover = Sprite(20, 20, 5, 5)
    block.execute(EventType.MOVE, mover)
    assert block.state == Block.State.HIT
    assert recorder.events == [(EventType.COLLISION, block)]


def test_block_ignores_distant_move_and_collision_events(screen):
    block = Block(13, 8, clock=FakeClock())
    block.execute(EventType.MOVE, Sprite(50, 50, 2, 2))
    block.execute(EventType.COLLISION, Sprite(20, 20, 5, 5))
    assert block.state == Block.State.IDLE


def test_block_bounce_returns_to_start(screen):
    clock = FakeClock(100)
    block = Block(13, 8, clock=clock)
    block.set_text("7")
    block.init()
    block.execute(EventType.MOVE, Sprite(20, 20, 5, 5))
    positions = []
    for _ in range(20):
        block.update()
        positions.append(block.y)
        clock.now += 60
        if block.state == Block.State.IDLE:
            break
    assert block.state == Block.State.IDLE
    assert block.y == block.first_y
    assert block.first_y - min(positions) >= 4
    block.update()
    assert block.last_state == Block.State.IDLE


def test_mario_jump_hits_block(screen):
    clock = FakeClock(600)
    hero = Mario(23, 40, clock=clock)
    block = Block(13, 8, clock=clock)
    block.set_text("9")
    block.init()
    hero.init()
    hero.jump()
    hit = False
    for _ in range(40):
        hero.update()
        block.update()
        hit = hit or block.state == Block.State.HIT
        clock.now += 50
    assert hit
    assert hero.state == Mario.State.IDLE
    assert hero.y == 40