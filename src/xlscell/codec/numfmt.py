from __future__ import annotations

import logging
import math

from ..errors import StyleLookupError
from ..model import BookContext
from .dates import from_excel_serial
from .patterns import format_timestamp
from .rk import RK, shortest_float_text

logger = logging.getLogger(__name__)

FIRST_CUSTOM_FORMAT = 164

# Built-in codes that display dates, including the Japanese/Chinese locale ones.
BUILTIN_DATE_FORMATS = frozenset([*range(14, 18), 22, *range(27, 37), *range(50, 59)])

_NUMERIC_MARKERS = ("#", ".00")
_DATE_MARKERS = ("m/y", "d/y", "m.y", "d.y", "h:", "д.г")

# Fixed decimal places for the built-in codes 1-4; separators are not rendered.
_FIXED_DECIMALS = {1: 0, 2: 2, 3: 0, 4: 2}


def is_builtin_date_format(format_no: int) -> bool:
    return format_no in BUILTIN_DATE_FORMATS


def is_numeric_pattern(pattern: str) -> bool:
    return any(marker in pattern for marker in _NUMERIC_MARKERS)


def is_plain_pattern(pattern: str) -> bool:
    """True when a custom pattern should show the packed value as a number.

    The numeric markers are checked first, so a pattern carrying both a
    numeric and a date marker stays numeric.
    """
    lower = pattern.lower()
    if lower == "general" or is_numeric_pattern(pattern):
        return True
    return any(marker in lower for marker in _DATE_MARKERS)


def format_float(value: float, precision: int | None = None) -> str:
    if precision is None or not math.isfinite(value):
        return shortest_float_text(value)
    return f"{value:.{precision}f}"


def render_serial(book: BookContext, serial: float, pattern: str | None = None) -> str | None:
    """Date text for a serial number, or None when it has no calendar date."""
    try:
        ts = from_excel_serial(serial, book.date1904)
    except ValueError:
        logger.debug("Serial %r has no calendar date, rendering as number", serial)
        return None
    if pattern is None:
        return ts.isoformat()
    return format_timestamp(ts, pattern)


def render_rk(book: BookContext, xf: int, rk: RK) -> str:
    if not book.has_style(xf):
        if book.options.strict_styles:
            raise StyleLookupError(xf, len(book.styles))
        logger.debug("Style index %d missing, rendering %r as plain number", xf, rk)
        return rk.text()

    format_no = book.format_no(xf)
    if format_no >= FIRST_CUSTOM_FORMAT:
        pattern = book.format_pattern(format_no)
        if pattern is None:
            logger.debug("Custom format %d has no pattern", format_no)
        elif is_plain_pattern(pattern):
            return rk.text()
        else:
            text = render_serial(book, rk.as_serial(), pattern)
            return rk.text() if text is None else text
    elif is_builtin_date_format(format_no):
        text = render_serial(book, rk.as_serial())
        return rk.text() if text is None else text
    return rk.text()


def render_number(book: BookContext, xf: int, value: float) -> str:
    format_no = book.format_no(xf)
    pattern = book.format_pattern(format_no)
    if pattern is not None and is_numeric_pattern(pattern.lower()):
        return format_float(value)

    if is_builtin_date_format(format_no):
        text = render_serial(book, value)
        return format_float(value) if text is None else text
    if format_no in _FIXED_DECIMALS:
        return format_float(value, _FIXED_DECIMALS[format_no])
    if format_no != 0 and pattern is not None:
        text = render_serial(book, value, pattern)
        return format_float(value) if text is None else text
    return format_float(value)
