"""Dates and times written out in words, in English and Portuguese."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _check_time(hour: int, minute: int) -> None:
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute out of range: {minute}")


def _hour12(hour: int) -> int:
    return 12 if hour == 12 else hour % 12


class DateI18n(ABC):
    """Language-specific date formatting and time-in-words."""

    weekday_names: tuple[str, ...] = ()
    hours: tuple[str, ...] = ()
    tens: tuple[str, ...] = ()
    units: tuple[str, ...] = ()

    @abstractmethod
    def format_date(self, day: int, month: int) -> str:
        """Short numeric date."""

    def weekday_name(self, weekday: int) -> str:
        """Three-letter name of a weekday counted from Sunday = 0."""
        if not 0 <= weekday < len(self.weekday_names):
            raise ValueError(f"weekday out of range: {weekday}")
        return self.weekday_names[weekday]

    @abstractmethod
    def time_in_words(self, hour: int, minute: int) -> tuple[str, str]:
        """Return (hour words, minute words); lines are split by newlines."""


class EnglishDate(DateI18n):
    weekday_names = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
    hours = (
        "zero", "one", "two", "three", "four", "five", "six",
        "seven", "eight", "nine", "ten", "eleven", "twelve",
    )
    tens = ("zero", "ten", "twenty", "thirty", "forty", "fifty")
    units = (
        "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
        "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
        "sixteen", "seventeen", "eighteen", "nineteen",
    )

    def format_date(self, day: int, month: int) -> str:
        return f"{month}/{day}"

    def time_in_words(self, hour: int, minute: int) -> tuple[str, str]:
        _check_time(hour, minute)
        if hour == 0 and minute == 0:
            return "mid\nnight", ""
        if hour == 12 and minute == 0:
            return "noon", ""
        hour_words = self.hours[_hour12(hour)]
        if minute == 0:
            return hour_words, "o'clock"
        if minute == 30:
            return hour_words, "thirty" if hour in (0, 12) else "a half"
        if minute < 10:
            return hour_words, f"oh\n{self.units[minute]}"
        if minute < 20:
            return hour_words, self.units[minute]
        minute_words = self.tens[minute // 10]
        if minute % 10:
            minute_words += f"\n{self.units[minute % 10]}"
        return hour_words, minute_words


class PortugueseDate(DateI18n):
    weekday_names = ("DOM", "SEG", "TER", "QUA", "QUI", "SEX", "SAB")
    hours = (
        "zero", "uma", "duas", "tres", "quatro", "cinco", "seis",
        "sete", "oito", "nove", "dez", "onze", "doze",
    )
    tens = ("zero", "dez", "vinte", "trinta", "quarenta", "cinquenta")
    units = (
        "zero", "um", "dois", "tres", "quatro", "cinco", "seis", "sete", "oito",
        "nove", "dez", "onze", "doze", "treze", "quatorze", "quinze",
        "dezesseis", "dezessete", "dezoito", "dezenove",
    )

    def format_date(self, day: int, month: int) -> str:
        return f"{day}/{month}"

    def time_in_words(self, hour: int, minute: int) -> tuple[str, str]:
        _check_time(hour, minute)
        if hour == 0 and minute == 0:
            return "meia\nnoite", ""
        if hour == 12 and minute == 0:
            return "meio\ndia", ""
        hour12 = _hour12(hour)
        hour_words = self.hours[hour12]
        if minute == 0:
            return f"{hour_words}\nhora{'s' if hour12 > 1 else ''}", ""
        if minute == 30:
            return hour_words, "trinta" if hour in (0, 12) else "e meia"
        if minute < 20:
            return hour_words, self.units[minute]
        minute_words = self.tens[minute // 10]
        if minute % 10:
            minute_words += f"\ne {self.units[minute % 10]}"
        return hour_words, minute_words