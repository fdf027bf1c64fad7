from __future__ import annotations


class XlsCellError(Exception):
    """Base class for errors raised while decoding or rendering cells."""


class RKIsIntegerError(XlsCellError, ValueError):
    """The packed value decoded as an integer, not a float."""

    def __init__(self, word: int) -> None:
        super().__init__(f"RK word 0x{word:08X} is an integer")
        self.word = word


class StyleLookupError(XlsCellError, LookupError):
    def __init__(self, xf: int, style_count: int) -> None:
        super().__init__(f"Style index {xf} out of range (styles: {style_count})")
        self.xf = xf
        self.style_count = style_count
