"""A clockface built at run time from a downloaded JSON definition."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from .canvas_sprite import CanvasSprite
from .clock import ClockTime, Clockface, millis
from .display import Locator
from .fonts import PICOPIXEL, GfxFont
from .httpclient import HttpError, http_get
from .pngimage import ImageError, image_dimensions, render_image
from .settings import Settings
from .status import StatusScreen

log = logging.getLogger(__name__)

CLOCKFACE_NAME = "cw-cf-0x07"

RAW_PORT = 443
DEFAULT_PORT = 4443
RAW_SHARED_PREFIX = "/clock-club/main/shared"
"""Path under which shared definitions live on a raw file host."""

SPLASH_COLOR = 0xFFE0
ERROR_COLOR = 0xC904
DATETIME_REFRESH_MS = 1000

CW_ICON_CANVAS = bytes.fromhex(
    "000e0000 001f0000 001f0000 001f0000"
    "003f8000 00404000 1fc07f00 203f8080"
    "20000080 20000080 20000080 20000080"
    "20000080 20000080 20000080 20000080"
    "20000080 20000080 20000080 20000080"
    "20000080 7fffffc0 80000020 7fffffc0"
    "0e1f0e00 0e1f0e00 1fffff00 1e1f0f00"
    "3fffff80 3c1f0780 3c1f0780 180e0300"
)

DEFAULT_FONTS: dict[str, GfxFont] = {"picopixel": PICOPIXEL}


def _unsigned(value: Any, bits: int) -> int:
    """A JSON value as an unsigned integer of the given width, 0 if not numeric."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value & ((1 << bits) - 1)
    if isinstance(value, float) and math.isfinite(value):
        return int(value) & ((1 << bits) - 1)
    return 0


def _int8(value: Any) -> int:
    raw = _unsigned(value, 8)
    return raw - 256 if raw >= 128 else raw


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _flag(value: Any) -> bool:
    return bool(value) if isinstance(value, (bool, int, float)) else False


def _array(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _get(element: Any, key: str) -> Any:
    return element.get(key) if isinstance(element, Mapping) else None


class CanvasClockface(Clockface):
    """Draws static elements, date/time text and animated PNG sprites from a definition."""

    def __init__(
        self,
        display: Any,
        *,
        server: str | None = None,
        file: str | None = None,
        definition: Mapping[str, Any] | str | bytes | None = None,
        fonts: Mapping[str, GfxFont] | None = None,
        fetch: Callable[[str, str, int], bytes] = http_get,
        clock: Callable[[], int] = millis,
        raw_prefix: str = RAW_SHARED_PREFIX,
    ) -> None:
        defaults = Settings()
        self.display = display
        Locator.provide_display(display)
        self.server = defaults.canvas_server if server is None else server
        self.file = defaults.canvas_file if file is None else file
        self.fonts = {**DEFAULT_FONTS, **(fonts or {})}
        self.raw_prefix = raw_prefix
        self._fetch = fetch
        self._millis = clock
        self._status = StatusScreen(display)
        self._definition: dict[str, Any] | None = None
        self._clock_time: ClockTime | None = None
        self._last_millis = 0
        self.delay = 0
        self.sprites: list[CanvasSprite] = []
        if definition is not None:
            self.load_definition(definition)

    @property
    def definition(self) -> dict[str, Any] | None:
        return self._definition

    @property
    def _doc(self) -> dict[str, Any]:
        return self._definition if self._definition is not None else {}

    def _require_clock(self) -> ClockTime:
        if self._clock_time is None:
            raise RuntimeError("setup() must be called before update()")
        return self._clock_time

    def setup(self, clock: ClockTime) -> None:
        self._clock_time = clock
        self._draw_splash(SPLASH_COLOR, "Downloading")
        if self._obtain_definition():
            self._clockface_setup()

    def update(self) -> None:
        clock = self._require_clock()
        for sprite in self.sprites:
            self._animate(sprite, clock)
        if self._millis() - self._last_millis >= DATETIME_REFRESH_MS:
            self._refresh_datetime()
            self._last_millis = self._millis()

    def load_definition(self, definition: Mapping[str, Any] | str | bytes) -> dict[str, Any]:
        """Accept a definition as a mapping or JSON text; it must be an object."""
        if isinstance(definition, (str, bytes, bytearray)):
            try:
                data = json.loads(definition)
            except ValueError as exc:
                raise ValueError(f"invalid clockface definition: {exc}") from exc
        else:
            data = definition
        if not isinstance(data, Mapping):
            raise ValueError("clockface definition must be a JSON object")
        self._definition = dict(data)
        log.info(
            "[Canvas] Building clockface '%s' by %s, version %d",
            _text(data.get("name")),
            _text(data.get("author")),
            _unsigned(data.get("version"), 16),
        )
        return self._definition

    def definition_url(self, server: str, file: str) -> tuple[str, str, int]:
        """Host, path and port from which a definition is downloaded."""
        path = f"/{file}.json"
        if server.startswith("raw."):
            return server, f"{self.raw_prefix}{path}", RAW_PORT
        return server, path, DEFAULT_PORT

    def fetch_definition(self, server: str, file: str) -> dict[str, Any]:
        """Download and load the named definition."""
        host, path, port = self.definition_url(server, file)
        return self.load_definition(self._fetch(host, path, port))

    def _obtain_definition(self) -> bool:
        if self._definition is not None:
            return True
        if not self.server or not self.file:
            self._draw_splash(ERROR_COLOR, "Params werent set")
            return False
        try:
            self.fetch_definition(self.server, self.file)
        except (HttpError, ValueError) as exc:
            self._draw_splash(ERROR_COLOR, "Error! Check logs")
            log.error("loading the clockface definition failed: %s", exc)
            return False
        return True

    def _draw_splash(self, color: int, msg: str) -> None:
        self.display.fill_rect(0, 0, 64, 64, 0)
        self.display.draw_bitmap(19, 18, CW_ICON_CANVAS, 27, 32, color)
        self._status.print_center("- Canvas -", 7)
        self._status.print_center(msg, 61)

    def _set_font(self, name: str) -> None:
        self.display.set_font(self.fonts.get(name))

    def _render_text(self, text: str, element: Any) -> None:
        display = self.display
        self._set_font(_text(_get(element, "font")))
        x1, y1, width, height = display.get_text_bounds(text, 0, 0)
        x = _unsigned(_get(element, "x"), 16)
        y = _unsigned(_get(element, "y"), 16)
        display.fill_rect(x + x1, y + y1, width, height, _unsigned(_get(element, "bgColor"), 16))
        display.set_text_color(_unsigned(_get(element, "fgColor"), 16))
        display.set_cursor(x, y)
        display.print(text)

    def _render_image(self, image: str, x: int, y: int) -> None:
        try:
            render_image(self.display, image, x, y)
        except ImageError as exc:
            log.warning("skipping image: %s", exc)

    def _refresh_datetime(self) -> None:
        clock = self._require_clock()
        for element in _array(self._doc.get("setup")):
            if _text(_get(element, "type")) == "datetime":
                content = _text(_get(element, "content"))
                self._render_text(clock.formatted_time(content), element)

    def _clockface_setup(self) -> None:
        doc = self._doc
        self.display.fill_rect(0, 0, 64, 64, _unsigned(doc.get("bgColor"), 16))
        self.delay = _unsigned(doc.get("delay"), 16)
        self._render_elements(_array(doc.get("setup")))
        self._refresh_datetime()
        self._create_sprites()

    def _render_elements(self, elements: list[Any]) -> None:
        display = self.display
        for element in elements:
            kind = _text(_get(element, "type"))

            def num(key: str) -> int:
                return _unsigned(_get(element, key), 16)

            if kind == "text":
                self._render_text(_text(_get(element, "content")), element)
            elif kind == "fillrect":
                display.fill_rect(num("x"), num("y"), num("width"), num("height"), num("color"))
            elif kind == "rect":
                display.draw_rect(num("x"), num("y"), num("width"), num("height"), num("color"))
            elif kind == "line":
                display.draw_line(num("x"), num("y"), num("x1"), num("y1"), num("color"))
            elif kind == "image":
                self._render_image(
                    _text(_get(element, "image")),
                    _unsigned(_get(element, "x"), 8),
                    _unsigned(_get(element, "y"), 8),
                )

    def _sprite_frames(self, reference: int) -> list[Any]:
        sprites = _array(self._doc.get("sprites"))
        return _array(sprites[reference]) if reference < len(sprites) else []

    def _loop_entry(self, reference: int) -> Any:
        loop = _array(self._doc.get("loop"))
        return loop[reference] if reference < len(loop) else {}

    def _create_sprites(self) -> None:
        self.sprites = []
        width = height = 0
        for element in _array(self._doc.get("loop")):
            if _text(_get(element, "type")) != "sprite":
                continue
            reference = _unsigned(_get(element, "sprite"), 8)
            sprite = CanvasSprite(_int8(_get(element, "x")), _int8(_get(element, "y")))
            frames = self._sprite_frames(reference)
            first = _text(_get(frames[0], "image")) if frames else ""
            try:
                width, height = image_dimensions(first)
            except ImageError as exc:
                log.warning("cannot read sprite %d dimensions: %s", reference, exc)
            sprite.sprite_reference = reference
            sprite.total_frames = len(frames) & 0xFF
            sprite.set_dimensions(width & 0xFF, height & 0xFF)
            self.sprites.append(sprite)

    def _animate(self, sprite: CanvasSprite, clock: ClockTime) -> None:
        entry = self._loop_entry(sprite.sprite_reference)
        loop_delay = _unsigned(_get(entry, "loopDelay"), 32) or self.delay
        frame_delay = _unsigned(_get(entry, "frameDelay"), 16) or self.delay

        if (
            self._millis() - sprite.last_millis_sprite_frames >= frame_delay
            and sprite.current_frame_count < sprite.total_frames
        ):
            sprite.inc_frame()
            self._move(sprite, clock)
            frames = self._sprite_frames(sprite.sprite_reference)
            frame = frames[sprite.current_frame] if sprite.current_frame < len(frames) else None
            self._render_image(_text(_get(frame, "image")), sprite.x & 0xFF, sprite.y & 0xFF)
            sprite.current_frame_count = (sprite.current_frame_count + 1) & 0xFF
            sprite.last_millis_sprite_frames = self._millis()

        if loop_delay > 0 and self._millis() - sprite.last_reset_time >= loop_delay:
            now = self._millis()
            if (clock.second() * 1000) % loop_delay == 0:
                sprite.current_frame_count = 0
                sprite.last_reset_time = now

    def _move(self, sprite: CanvasSprite, clock: ClockTime) -> None:
        entry = self._loop_entry(sprite.sprite_reference)
        move_start_time = _unsigned(_get(entry, "moveStartTime"), 32) or 1
        move_duration = _unsigned(_get(entry, "moveDuration"), 32)
        initial_x = _int8(_get(entry, "x"))
        initial_y = _int8(_get(entry, "y"))
        target_x = _int8(_get(entry, "moveTargetX")) or -1
        target_y = _int8(_get(entry, "moveTargetY")) or -1
        should_return = _flag(_get(entry, "shouldReturnToOrigin"))

        if sprite.moving:
            now = self._millis()
            elapsed = now - sprite.move_start_time
            progress = elapsed / sprite.move_duration if sprite.move_duration else math.inf
            old_x, old_y = sprite.x, sprite.y
            if math.isfinite(progress):
                new_x = sprite.lerp(sprite.move_initial_x, sprite.move_target_x, progress)
                new_y = sprite.lerp(sprite.move_initial_y, sprite.move_target_y, progress)
            else:
                new_x, new_y = sprite.move_target_x, sprite.move_target_y
            origin_x, origin_y = min(old_x, new_x), min(old_y, new_y)
            self.display.fill_rect(
                origin_x,
                origin_y,
                sprite.width + max(old_x, new_x) - origin_x,
                sprite.height + max(old_y, new_y) - origin_y,
                _unsigned(self._doc.get("bgColor"), 16),
            )
            if progress <= 1:
                sprite.x, sprite.y = new_x, new_y
            elif sprite.should_return_to_origin:
                sprite.x, sprite.y = sprite.move_target_x, sprite.move_target_y
                if not sprite.is_reversing:
                    sprite.reverse_moving(initial_x, initial_y, now)
            else:
                sprite.stop_moving()

        if (
            move_duration > 0
            and (target_x > -1 or target_y > -1)
            and self._millis() - sprite.last_reset_move_time >= move_start_time
        ):
            now = self._millis()
            if (clock.second() * 1000) % move_start_time == 0:
                sprite.last_reset_move_time = now
                sprite.start_moving(target_x, target_y, move_duration, should_return, now)