from __future__ import annotations

import struct


def pack_int(value: int, *, multiplied: bool = False) -> int:
    """Build an RK word by hand, independent of xlscell.codec.rk."""
    word = struct.unpack("<I", struct.pack("<i", value * 4))[0]
    return word | 0x2 | (0x1 if multiplied else 0x0)


def pack_float(value: float, *, multiplied: bool = False) -> int:
    high = struct.unpack("<II", struct.pack("<d", value))[1]
    return (high & ~0x3 & 0xFFFFFFFF) | (0x1 if multiplied else 0x0)


def truncated(value: float) -> float:
    """The double an RK float word actually stores (low 34 bits cleared)."""
    bits = struct.unpack("<Q", struct.pack("<d", value))[0]
    bits &= ~((1 << 34) - 1) & 0xFFFFFFFFFFFFFFFF
    return struct.unpack("<d", struct.pack("<Q", bits))[0]
