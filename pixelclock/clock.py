"""Wall-clock time for clockfaces and the interface every clockface follows."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

DEFAULT_TIME_FORMAT = "l, d-M-Y H:i:s T"

_START = time.monotonic()

_DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


def millis() -> int:
    """Milliseconds elapsed since the package was loaded."""
    return int((time.monotonic() - _START) * 1000)


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    "d": lambda m: f"{m.day:02d}",
    "j": lambda m: str(m.day),
    "D": lambda m: _DAY_NAMES[m.weekday()][:3],
    "l": lambda m: _DAY_NAMES[m.weekday()],
    "N": lambda m: str(m.isoweekday()),
    # Day of the week counted from Sunday = 1.
    "w": lambda m: str(m.isoweekday() % 7 + 1),
    "m": lambda m: f"{m.month:02d}",
    "n": lambda m: str(m.month),
    "M": lambda m: _MONTH_NAMES[m.month - 1][:3],
    "F": lambda m: _MONTH_NAMES[m.month - 1],
    "Y": lambda m: f"{m.year:04d}",
    "y": lambda m: f"{m.year % 100:02d}",
    "H": lambda m: f"{m.hour:02d}",
    "G": lambda m: str(m.hour),
    "h": lambda m: f"{_hour12(m):02d}",
    "g": lambda m: str(_hour12(m)),
    "i": lambda m: f"{m.minute:02d}",
    "s": lambda m: f"{m.second:02d}",
    "v": lambda m: f"{m.microsecond // 1000:03d}",
    "A": lambda m: "AM" if m.hour < 12 else "PM",
    "a": lambda m: "am" if m.hour < 12 else "pm",
    "T": lambda m: m.tzname() or "",
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ClockTime:
    """The current time in a configured time zone, read field by field."""

    def __init__(
        self,
        timezone_name: str | tzinfo | None = None,
        use_24h_format: bool = True,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        if timezone_name is None:
            self.tz: tzinfo = timezone.utc
        elif isinstance(timezone_name, str):
            self.tz = ZoneInfo(timezone_name)
        else:
            self.tz = timezone_name
        self.use_24h_format = use_24h_format
        self._now = now or _utc_now

    def _moment(self) -> datetime:
        moment = self._now()
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(self.tz)

    def formatted_time(self, fmt: str | None = None) -> str:
        """Format the current time; letters follow the PHP date() conventions."""
        moment = self._moment()
        out: list[str] = []
        chars = iter(fmt if fmt is not None else DEFAULT_TIME_FORMAT)
        for char in chars:
            if char == "\\":
                out.append(next(chars, ""))
                continue
            render = _FORMATTERS.get(char)
            out.append(render(moment) if render else char)
        return "".join(out)

    def _hour_format(self) -> str:
        return "H" if self.use_24h_format else "h"

    def hour(self) -> int:
        return int(self.formatted_time(self._hour_format()))

    def minute(self) -> int:
        return int(self.formatted_time("i"))

    def second(self) -> int:
        return int(self.formatted_time("s"))

    def day(self) -> int:
        return int(self.formatted_time("d"))

    def month(self) -> int:
        return int(self.formatted_time("m"))

    def weekday(self) -> int:
        """Day of the week, 0 for Sunday to 6 for Saturday."""
        return int(self.formatted_time("w")) - 1

    def milliseconds(self) -> int:
        return self._moment().microsecond // 1000

    def hour_text(self) -> str:
        """The hour as two digits, in the configured 12 or 24 hour style."""
        return self.formatted_time(self._hour_format())[:2]

    def minute_text(self) -> str:
        return self.formatted_time("i")[:2]

    def is_am(self) -> bool:
        return self._moment().hour < 12

    def is_24h_format(self) -> bool:
        return self.use_24h_format


class Clockface(ABC):
    """A screen that draws the time and is refreshed from the main loop."""

    @abstractmethod
    def setup(self, clock: ClockTime) -> None:
        """Draw the initial screen using the given clock."""

    @abstractmethod
    def update(self) -> None:
        """Advance animations and redraw what has changed."""