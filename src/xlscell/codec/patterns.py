from __future__ import annotations

import re
from dataclasses import dataclass

from .dates import SerialTimestamp

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_TOKEN_RE = re.compile(
    r'"[^"]*"?'
    r"|\\."
    r"|\[[^\]]*\]"
    r"|[_*]."
    r"|am/pm|a/p"
    r"|y+|m+|d+|h+|s+"
    r"|\.0+"
    r"|.",
    re.IGNORECASE | re.DOTALL,
)
_ELAPSED_RE = re.compile(r"^\[(h+|m+|s+)\]$", re.IGNORECASE)
_ELAPSED_KINDS = {"h": "elapsed_hour", "m": "elapsed_minute", "s": "elapsed_second"}


@dataclass(slots=True)
class _Token:
    kind: str
    text: str


def tokenize(pattern: str) -> list[_Token]:
    """Split the first section of a number format pattern into date tokens."""
    tokens: list[_Token] = []
    for match in _TOKEN_RE.finditer(pattern):
        raw = match.group(0)
        lower = raw.lower()
        if raw == ";":
            break
        if raw.startswith('"'):
            body = raw[1:]
            if body.endswith('"'):
                body = body[:-1]
            tokens.append(_Token("literal", body))
        elif raw.startswith("\\"):
            tokens.append(_Token("literal", raw[1:]))
        elif raw.startswith("["):
            elapsed = _ELAPSED_RE.match(raw)
            if elapsed:
                unit = elapsed.group(1).lower()
                tokens.append(_Token(_ELAPSED_KINDS[unit[0]], unit))
        elif raw.startswith("_") and len(raw) == 2:
            tokens.append(_Token("literal", " "))
        elif raw.startswith("*") and len(raw) == 2:
            continue
        elif lower in {"am/pm", "a/p"}:
            tokens.append(_Token("ampm", raw))
        elif lower[0] in "ymdhs":
            tokens.append(_Token(_kind_for(lower), lower))
        elif lower.startswith(".0"):
            tokens.append(_Token("fraction", raw))
        else:
            tokens.append(_Token("literal", raw))
    _resolve_minutes(tokens)
    return tokens


def _kind_for(lower: str) -> str:
    return {"y": "year", "m": "month", "d": "day", "h": "hour", "s": "second"}[lower[0]]


def _resolve_minutes(tokens: list[_Token]) -> None:
    # "m" means minutes right after an hour token or right before a seconds token.
    fields = [idx for idx, token in enumerate(tokens) if token.kind not in {"literal", "fraction"}]
    for pos, idx in enumerate(fields):
        if tokens[idx].kind != "month" or len(tokens[idx].text) > 2:
            continue
        prev_kind = tokens[fields[pos - 1]].kind if pos > 0 else None
        next_kind = tokens[fields[pos + 1]].kind if pos + 1 < len(fields) else None
        if prev_kind in {"hour", "elapsed_hour"} or next_kind in {"second", "elapsed_second"}:
            tokens[idx].kind = "minute"


def format_timestamp(ts: SerialTimestamp, pattern: str) -> str:
    tokens = tokenize(pattern)
    twelve_hour = any(token.kind == "ampm" for token in tokens)
    out: list[str] = []
    last_field: str | None = None

    for token in tokens:
        kind = token.kind
        width = len(token.text)
        if kind == "literal":
            out.append(token.text)
            continue
        if kind == "fraction":
            if last_field in {"second", "elapsed_second"}:
                digits = min(width - 1, 6)
                out.append("." + f"{ts.microsecond:06d}"[:digits])
            else:
                out.append(token.text)
            continue

        if kind == "year":
            out.append(f"{ts.year:04d}" if width > 2 else f"{ts.year % 100:02d}")
        elif kind == "month":
            if width == 1:
                out.append(str(ts.month))
            elif width == 2:
                out.append(f"{ts.month:02d}")
            elif width == 3:
                out.append(MONTH_NAMES[ts.month - 1][:3])
            elif width == 5:
                out.append(MONTH_NAMES[ts.month - 1][0])
            else:
                out.append(MONTH_NAMES[ts.month - 1])
        elif kind == "day":
            if width == 1:
                out.append(str(ts.day))
            elif width == 2:
                out.append(f"{ts.day:02d}")
            elif width == 3:
                out.append(DAY_NAMES[ts.weekday()][:3])
            else:
                out.append(DAY_NAMES[ts.weekday()])
        elif kind == "hour":
            hour = ts.hour
            if twelve_hour:
                hour = hour % 12 or 12
            out.append(str(hour) if width == 1 else f"{hour:02d}")
        elif kind == "minute":
            out.append(str(ts.minute) if width == 1 else f"{ts.minute:02d}")
        elif kind == "second":
            out.append(str(ts.second) if width == 1 else f"{ts.second:02d}")
        elif kind.startswith("elapsed_"):
            out.append(f"{_elapsed(ts, kind):0{width}d}")
        elif kind == "ampm":
            out.append(_ampm(ts.hour, token.text))
        last_field = kind

    return "".join(out)


def _elapsed(ts: SerialTimestamp, kind: str) -> int:
    # Total time since serial zero, not wrapped at the next larger unit.
    hours = ts.serial_days * 24 + ts.hour
    if kind == "elapsed_hour":
        return hours
    minutes = hours * 60 + ts.minute
    if kind == "elapsed_minute":
        return minutes
    return minutes * 60 + ts.second


def _ampm(hour: int, marker: str) -> str:
    afternoon = hour >= 12
    if marker.lower() == "a/p":
        text = "P" if afternoon else "A"
        return text.lower() if marker[0].islower() else text
    text = "PM" if afternoon else "AM"
    return text.lower() if marker[0].islower() else text
