from __future__ import annotations

import pytest

from xlscell.model import BookContext, EpochMode, XFRecord

# style index -> format code
STYLE_FORMATS = {
    0: 2,
    1: 0,
    2: 14,
    3: 22,
    4: 36,
    5: 21,
    6: 164,
    7: 165,
    8: 166,
    9: 167,
    10: 168,
    11: 1,
    12: 3,
    13: 4,
    14: 169,
    15: 170,
    16: 171,
    17: 172,
}

CUSTOM_FORMATS = {
    164: "yyyy-mm-dd",
    165: "#,##0.00 m/y",
    166: "General",
    167: "dd.mm.yyyy",
    169: "0.00%",
    170: "h:mm",
    171: "mmm d",
    172: "ДД.ГГГГ",
}

SHARED_STRINGS = ["alpha", "beta", "gamma", "delta", "epsilon", "hello"]


def make_book(epoch: EpochMode = EpochMode.EPOCH_1900, **kwargs) -> BookContext:
    styles = tuple(XFRecord(STYLE_FORMATS[idx]) for idx in sorted(STYLE_FORMATS))
    return BookContext(
        styles=styles,
        custom_formats=dict(CUSTOM_FORMATS),
        shared_strings=tuple(SHARED_STRINGS),
        epoch=epoch,
        **kwargs,
    )


@pytest.fixture()
def book() -> BookContext:
    return make_book()


@pytest.fixture()
def book1904() -> BookContext:
    return make_book(EpochMode.EPOCH_1904)


@pytest.fixture()
def book_factory():
    return make_book
