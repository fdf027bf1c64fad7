from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta

_EPOCH_1900 = date(1899, 12, 31)
_EPOCH_1900_AFTER_LEAP_BUG = date(1899, 12, 30)
_EPOCH_1904 = date(1903, 12, 31)
_FICTITIOUS_LEAP_SERIAL = 60
_DAY_MICROSECONDS = 86_400_000_000


@dataclass(frozen=True, slots=True, order=True)
class SerialTimestamp:
    """Calendar timestamp decoded from a spreadsheet serial number.

    Unlike ``datetime`` this can hold 1900-02-29, the leap day the 1900 date
    system counts although it never existed.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    # Whole days of the source serial, for elapsed-time fields.
    serial_days: int = field(default=0, compare=False)

    @property
    def is_fictitious(self) -> bool:
        return (self.year, self.month, self.day) == (1900, 2, 29)

    def weekday(self) -> int:
        if self.is_fictitious:
            return 2
        return date(self.year, self.month, self.day).weekday()

    def isoformat(self) -> str:
        # RFC 3339 in UTC, whole seconds.
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}Z"
        )


def from_excel_serial(serial: float, date1904: bool = False) -> SerialTimestamp:
    """Convert a day count (fraction = time of day) to a calendar timestamp.

    1900 system: serial 1 is 1900-01-01 and serial 60 is the fictitious
    1900-02-29, so later serials are counted from 1899-12-30.
    1904 system: serial 1 is 1904-01-01.
    """
    if not math.isfinite(serial) or serial < 0:
        raise ValueError(f"Serial date must be finite and non-negative: {serial!r}")

    days = math.floor(serial)
    micros = round((serial - days) * _DAY_MICROSECONDS)
    if micros >= _DAY_MICROSECONDS:
        days += 1
        micros -= _DAY_MICROSECONDS

    seconds, microsecond = divmod(micros, 1_000_000)
    hour, rest = divmod(seconds, 3600)
    minute, second = divmod(rest, 60)

    if date1904:
        base = _EPOCH_1904
    elif days == _FICTITIOUS_LEAP_SERIAL:
        return SerialTimestamp(1900, 2, 29, hour, minute, second, microsecond, days)
    elif days < _FICTITIOUS_LEAP_SERIAL:
        base = _EPOCH_1900
    else:
        base = _EPOCH_1900_AFTER_LEAP_BUG

    try:
        day = base + timedelta(days=days)
    except OverflowError as exc:
        raise ValueError(f"Serial date out of calendar range: {serial!r}") from exc
    return SerialTimestamp(
        day.year, day.month, day.day, hour, minute, second, microsecond, serial_days=days
    )
