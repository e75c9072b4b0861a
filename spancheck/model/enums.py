"""
model/enums.py

(Краткое RU: Константы стилей, флагов и цветов для модели размеченного текста.)

EN: Domain constants for spanned text: typeface styles carried by style spans,
span flag bitsets, the span kind discriminator and ARGB color helpers.
NO matching/assertion logic here!

- Flags are only stored and compared, never interpreted.
- Colors are 32-bit ARGB ints; negative ints are treated as their unsigned value.

See Also:
    - spancheck/model/spans.py (span variants)
    - spancheck/testing (assertions)
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum, IntFlag
from typing import Final, Literal

_logger: Final[logging.Logger] = logging.getLogger(__name__)

# === COLOR CONSTANTS ===
COLOR_MASK: Final[int] = 0xFFFFFFFF
COLOR_HEX_FORMAT: Final[str] = "0x{:08X}"


class TypefaceStyle(IntEnum):
    """Style constant carried by a StyleSpan."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3

    @property
    def is_bold(self) -> bool:
        return bool(self & TypefaceStyle.BOLD)

    @property
    def is_italic(self) -> bool:
        return bool(self & TypefaceStyle.ITALIC)

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            self.NORMAL: "Обычный",
            self.BOLD: "Жирный",
            self.ITALIC: "Курсив",
            self.BOLD_ITALIC: "Жирный курсив",
        }
        names_en = {
            self.NORMAL: "Normal",
            self.BOLD: "Bold",
            self.ITALIC: "Italic",
            self.BOLD_ITALIC: "Bold italic",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class SpanFlags(IntFlag):
    """
    Span flag bitset constants.

    MARK/POINT describe whether text inserted at a span boundary is absorbed
    by the span. INCLUSIVE/EXCLUSIVE names are aliases of the same values.
    """

    SPAN_MARK_MARK = 0x11
    SPAN_MARK_POINT = 0x12
    SPAN_POINT_MARK = 0x21
    SPAN_POINT_POINT = 0x22
    SPAN_PARAGRAPH = 0x33
    SPAN_POINT_MARK_MASK = 0x33
    SPAN_INCLUSIVE_EXCLUSIVE = 0x11
    SPAN_INCLUSIVE_INCLUSIVE = 0x12
    SPAN_EXCLUSIVE_EXCLUSIVE = 0x21
    SPAN_EXCLUSIVE_INCLUSIVE = 0x22
    SPAN_COMPOSING = 0x100
    SPAN_INTERMEDIATE = 0x200
    SPAN_PRIORITY = 0xFF0000
    SPAN_USER = 0xFF000000


class SpanKind(str, Enum):
    """Explicit discriminator of the span variants."""

    STYLE = "style"
    UNDERLINE = "underline"
    FOREGROUND_COLOR = "foreground_color"
    BACKGROUND_COLOR = "background_color"

    @property
    def is_color(self) -> bool:
        return self in {SpanKind.FOREGROUND_COLOR, SpanKind.BACKGROUND_COLOR}

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            self.STYLE: "Стиль",
            self.UNDERLINE: "Подчёркивание",
            self.FOREGROUND_COLOR: "Цвет текста",
            self.BACKGROUND_COLOR: "Цвет фона",
        }
        return names_ru[self] if lang == "ru" else self.value


class Color(IntEnum):
    """Common opaque ARGB colors."""

    BLACK = 0xFF000000
    DKGRAY = 0xFF444444
    GRAY = 0xFF888888
    LTGRAY = 0xFFCCCCCC
    WHITE = 0xFFFFFFFF
    RED = 0xFFFF0000
    GREEN = 0xFF00FF00
    BLUE = 0xFF0000FF
    YELLOW = 0xFFFFFF00
    CYAN = 0xFF00FFFF
    MAGENTA = 0xFFFF00FF
    TRANSPARENT = 0x00000000


# === DEFAULTS ===
DEFAULT_SPAN_FLAGS: Final[SpanFlags] = SpanFlags.SPAN_EXCLUSIVE_EXCLUSIVE
DEFAULT_STYLE: Final[TypefaceStyle] = TypefaceStyle.NORMAL


# === VALIDATION / FORMATTING ===


def normalize_color(color: int) -> int:
    """Return the unsigned 32-bit value of an ARGB color int."""
    return int(color) & COLOR_MASK


def format_color(color: int) -> str:
    """
    Format a color as zero-padded 8-digit hex, e.g. ``0xFFFF0000``.

    >>> format_color(-65536)
    '0xFFFF0000'
    """
    return COLOR_HEX_FORMAT.format(normalize_color(color))


def validate_flags(flags: int) -> bool:
    if isinstance(flags, bool) or not isinstance(flags, int):
        return False
    return flags >= 0


def validate_style(style: int) -> bool:
    if isinstance(style, bool) or not isinstance(style, int):
        return False
    return int(style) in {s.value for s in TypefaceStyle}


def validate_color(color: int) -> bool:
    if isinstance(color, bool) or not isinstance(color, int):
        return False
    if not (-(2**31) <= color <= COLOR_MASK):
        _logger.debug("Color out of 32-bit range: %r", color)
        return False
    return True


__all__ = [
    "COLOR_MASK",
    "COLOR_HEX_FORMAT",
    "TypefaceStyle",
    "SpanFlags",
    "SpanKind",
    "Color",
    "DEFAULT_SPAN_FLAGS",
    "DEFAULT_STYLE",
    "normalize_color",
    "format_color",
    "validate_flags",
    "validate_style",
    "validate_color",
]
