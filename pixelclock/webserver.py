"""A small HTTP settings server that reads and writes the device settings."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Callable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .settings import PREFERENCE_KEYS, Settings

NO_CONTENT = "HTTP/1.0 204 No Content\r\n"
OK_HTML = "HTTP/1.0 200 OK\r\nContent-Type: text/html\r\n\r\n"

_ATTRIBUTES = {key: name for name, key in PREFERENCE_KEYS.items()}

_TEXT_KEYS = frozenset(
    {"wifiSsid", "wifiPwd", "timeZone", "ntpServer", "canvasFile", "canvasServer", "manualPosix"}
)
_BOOL_KEYS = frozenset({"swapBlueGreen", "use24hFormat"})
_BYTE_KEYS = frozenset({"displayBright", "ldrPin"})

_REPORTED_KEYS = (
    "displayBright",
    "autoBrightMin",
    "autoBrightMax",
    "swapBlueGreen",
    "use24hFormat",
    "ldrPin",
    "timeZone",
    "wifiSsid",
    "ntpServer",
    "canvasFile",
    "canvasServer",
    "manualPosix",
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the leading integer of text, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class Request:
    """The parts of a request line the settings server acts on."""

    method: str
    path: str
    key: str = ""
    value: str = ""


def parse_request_line(line: str | bytes) -> Request:
    """Split a request line into method, path and a single key=value query."""
    if isinstance(line, bytes):
        line = line.decode("latin-1")
    line = line.rstrip("\r\n")
    method_end = line.find(" ")
    if method_end < 0:
        raise ValueError(f"malformed request line: {line!r}")
    path_end = line.find(" ", method_end + 1)
    method = line[:method_end]
    path = line[method_end + 1:] if path_end < 0 else line[method_end + 1:path_end]
    key = value = ""
    query = path.find("?")
    if query > 0:
        key, _, value = path[query + 1:].partition("=")
        path = path[:query]
    return Request(method, path, key, value)


class SettingsServer:
    """Serves the settings page and applies changes to the stored settings."""

    def __init__(
        self,
        settings_path: str | PathLike[str],
        *,
        settings_page: str = "",
        pin_reader: Callable[[int], int] | None = None,
        firmware_version: str = "UNKNOWN",
        firmware_name: str = "UNKNOWN",
        clockface_name: str = "UNKNOWN",
    ) -> None:
        self.settings_path = Path(settings_path)
        self.settings_page = settings_page
        self.pin_reader = pin_reader
        self.firmware_version = firmware_version
        self.firmware_name = firmware_name
        self.clockface_name = clockface_name
        self.restart_requested = False

    def process_request(self, method: str, path: str, key: str = "", value: str = "") -> str:
        """Return the raw response for a request; empty when nothing is sent."""
        if method == "GET" and path == "/":
            return f"{OK_HTML}{self.settings_page}\r\n"
        if method == "GET" and path == "/get":
            lines = "".join(f"X-{name}: {val}\r\n" for name, val in self.settings_headers())
            return f"{NO_CONTENT}{lines}\r\n"
        if method == "GET" and path == "/read":
            if key == "pin" and self.pin_reader is not None:
                reading = self.pin_reader(_to_int(value) & 0xFFFF)
                return f"{NO_CONTENT}X-{key}: {int(reading)}\r\n\r\n"
            return ""
        if method == "POST" and path == "/restart":
            self.restart_requested = True
            return NO_CONTENT
        if method == "POST" and path == "/set":
            self._apply(key, value)
            return NO_CONTENT
        return ""

    def _apply(self, key: str, value: str) -> None:
        settings = Settings.load(self.settings_path)
        if key == "autoBright":
            settings.auto_bright_min = _to_int(value[0:4]) & 0xFFFF
            settings.auto_bright_max = _to_int(value[5:9]) & 0xFFFF
        elif key == "selectedTheme":
            settings.selected_theme = _to_int(value) & 0xFF
            self.restart_requested = True
        elif key in _BOOL_KEYS:
            setattr(settings, _ATTRIBUTES[key], value == "1")
        elif key in _BYTE_KEYS:
            setattr(settings, _ATTRIBUTES[key], _to_int(value) & 0xFF)
        elif key in _TEXT_KEYS:
            setattr(settings, _ATTRIBUTES[key], value)
        settings.save(self.settings_path)

    def settings_headers(self) -> list[tuple[str, str]]:
        """The current settings and firmware details as header name/value pairs."""
        settings = Settings.load(self.settings_path)
        headers = []
        for key in _REPORTED_KEYS:
            val = getattr(settings, _ATTRIBUTES[key])
            headers.append((key, str(int(val)) if isinstance(val, bool) else str(val)))
        headers.append(("CW_FW_VERSION", self.firmware_version))
        headers.append(("CW_FW_NAME", self.firmware_name))
        headers.append(("CLOCKFACE_NAME", self.clockface_name))
        return headers

    async def handle_connection(self, reader: asyncio.StreamReader, writer) -> None:
        """Answer one request read from reader and close the connection."""
        try:
            line = await reader.readline()
            if line.endswith(b"\n"):
                try:
                    request = parse_request_line(line)
                except ValueError:
                    request = None
                if request is not None:
                    response = self.process_request(
                        request.method, request.path, request.key, request.value
                    )
                    if response:
                        writer.write(response.encode("utf-8"))
                        await writer.drain()
        finally:
            writer.close()
            await writer.wait_closed()

    async def serve_forever(self, host: str = "0.0.0.0", port: int = 80) -> None:
        """Accept connections on host:port until cancelled."""
        server = await asyncio.start_server(self.handle_connection, host, port)
        async with server:
            await server.serve_forever()