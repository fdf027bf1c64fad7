from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence


class EpochMode(Enum):
    EPOCH_1900 = 0
    EPOCH_1904 = 1


@dataclass(slots=True)
class RenderOptions:
    formula_placeholder: str = "FormulaCol"
    default_placeholder: str = "default"
    strict_styles: bool = False


@dataclass(frozen=True, slots=True)
class XFRecord:
    """Extended format record; only the number format code matters here."""

    format_no: int


@dataclass(frozen=True, slots=True)
class BookContext:
    """Workbook-wide lookup tables shared by every cell of a workbook.

    Populated once by the loader, then only read while cells render.
    """

    styles: Sequence[XFRecord] = field(default_factory=tuple)
    custom_formats: Mapping[int, str] = field(default_factory=dict)
    shared_strings: Sequence[str] = field(default_factory=tuple)
    epoch: EpochMode = EpochMode.EPOCH_1900
    options: RenderOptions = field(default_factory=RenderOptions)

    @property
    def date1904(self) -> bool:
        return self.epoch is EpochMode.EPOCH_1904

    def has_style(self, xf: int) -> bool:
        return 0 <= xf < len(self.styles)

    def format_no(self, xf: int) -> int:
        if xf < 0:
            raise IndexError(f"Style index must be >= 0: {xf}")
        return self.styles[xf].format_no

    def format_pattern(self, format_no: int) -> str | None:
        return self.custom_formats.get(format_no)

    def shared_string(self, index: int) -> str:
        if index < 0:
            raise IndexError(f"Shared string index must be >= 0: {index}")
        return self.shared_strings[index]
