"""
Модель размеченного текста.

Public API:
    - SpannedText, SpanEntry: текст и прикреплённые spans
    - StyleSpan, UnderlineSpan, ForegroundColorSpan, BackgroundColorSpan
    - TypefaceStyle, SpanFlags, SpanKind, Color
"""

from .enums import (
    DEFAULT_SPAN_FLAGS,
    Color,
    SpanFlags,
    SpanKind,
    TypefaceStyle,
    format_color,
    normalize_color,
)
from .spanned import SpanEntry, SpannedText
from .spans import (
    BackgroundColorSpan,
    ForegroundColorSpan,
    Span,
    StyleSpan,
    UnderlineSpan,
)

__all__ = [
    "DEFAULT_SPAN_FLAGS",
    "Color",
    "SpanFlags",
    "SpanKind",
    "TypefaceStyle",
    "format_color",
    "normalize_color",
    "SpanEntry",
    "SpannedText",
    "Span",
    "StyleSpan",
    "UnderlineSpan",
    "ForegroundColorSpan",
    "BackgroundColorSpan",
]
