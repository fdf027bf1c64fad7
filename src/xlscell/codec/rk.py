from __future__ import annotations

import math
import struct
from decimal import Decimal

from ..errors import RKIsIntegerError

_WORD_MASK = 0xFFFFFFFF
_PAYLOAD_MIN = -(1 << 29)
_PAYLOAD_MAX = (1 << 29) - 1


def shortest_float_text(value: float) -> str:
    """Shortest round-tripping digits, positional notation, no trailing zeros."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


class RK:
    """Packed 32-bit numeric word.

    bit 0: value was multiplied by 100
    bit 1: payload is an integer
    bits 2-31: signed 30-bit payload, or the top 30 bits of a double
    """

    __slots__ = ("word",)

    def __init__(self, word: int) -> None:
        self.word = word & _WORD_MASK

    def __repr__(self) -> str:
        return f"RK(0x{self.word:08X})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RK):
            return NotImplemented
        return self.word == other.word

    def __hash__(self) -> int:
        return hash(self.word)

    def __str__(self) -> str:
        return self.text()

    @property
    def multiplied(self) -> bool:
        return bool(self.word & 1)

    @property
    def is_integer(self) -> bool:
        return bool(self.word & 2)

    @property
    def payload(self) -> int:
        signed = self.word - (1 << 32) if self.word & 0x80000000 else self.word
        return signed >> 2

    def number(self) -> int | float:
        if not self.is_integer:
            bits = (self.word & 0xFFFFFFFC) << 32
            value = struct.unpack("<d", struct.pack("<Q", bits))[0]
            if self.multiplied:
                value = value / 100
            return value
        if self.multiplied:
            return self.payload / 100
        return self.payload

    def text(self) -> str:
        value = self.number()
        if isinstance(value, float):
            return shortest_float_text(value)
        return str(value)

    def as_float(self) -> float:
        value = self.number()
        if not isinstance(value, float):
            raise RKIsIntegerError(self.word)
        return value

    def as_serial(self) -> float:
        return float(self.number())

    @classmethod
    def from_int(cls, value: int, *, multiplied: bool = False) -> RK:
        if not _PAYLOAD_MIN <= value <= _PAYLOAD_MAX:
            raise ValueError(f"Integer out of 30-bit RK range: {value}")
        return cls(((value << 2) & _WORD_MASK) | 2 | int(multiplied))

    @classmethod
    def from_float(cls, value: float, *, multiplied: bool = False) -> RK:
        """Keep the top 30 bits of the double; the low 34 bits are dropped."""
        bits = struct.unpack("<Q", struct.pack("<d", value))[0]
        return cls(((bits >> 32) & 0xFFFFFFFC) | int(multiplied))
