"""Persistent device settings stored as a JSON document."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from os import PathLike
from pathlib import Path


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass
class Settings:
    """Display, network and clockface preferences."""

    swap_blue_green: bool = False
    use_24h_format: bool = True
    display_bright: int = 32
    auto_bright_min: int = 0
    auto_bright_max: int = 0
    ldr_pin: int = 35
    time_zone: str = "America/Los_Angeles"
    wifi_ssid: str = ""
    wifi_pwd: str = ""
    ntp_server: str = "time.google.com"
    canvas_file: str = "hello-world"
    canvas_server: str = "raw.githubusercontent.com"
    manual_posix: str = ""
    selected_theme: int = 0

    @classmethod
    def load(cls, path: str | PathLike[str]) -> "Settings":
        """Read settings from path; a missing file or key gives the default."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("settings file must hold a JSON object")
        defaults = cls()
        values = {}
        for field in fields(cls):
            default = getattr(defaults, field.name)
            raw = data.get(PREFERENCE_KEYS[field.name], default)
            values[field.name] = type(default)(raw)
        return cls(**values)

    def save(self, path: str | PathLike[str]) -> None:
        """Write every setting to path under its preference key."""
        document = {PREFERENCE_KEYS[name]: value for name, value in asdict(self).items()}
        Path(path).write_text(json.dumps(document, indent=2), encoding="utf-8")


PREFERENCE_KEYS: dict[str, str] = {field.name: _camel_case(field.name) for field in fields(Settings)}
"""Attribute name to the key it is stored under."""