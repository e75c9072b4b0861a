"""
Варианты spans (разметки) для размеченного текста.

Span variants attached to a SpannedText. Each variant carries an explicit
SpanKind discriminator so callers filter by kind rather than by runtime type
checks. Spans compare by identity: two StyleSpan(BOLD) objects attached to the
same text are two distinct spans.

Module: spancheck/model/spans.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Final, Type

from .enums import (
    SpanKind,
    TypefaceStyle,
    format_color,
    normalize_color,
    validate_color,
    validate_style,
)

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, slots=True)
class Span:
    """Base class of all span variants."""

    kind: ClassVar[SpanKind]

    @property
    def type_name(self) -> str:
        """Name shown as ``type=`` in diagnostics."""
        return type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Span":
        try:
            kind = SpanKind(data["kind"])
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Unknown span kind in {data!r}") from exc
        span_cls = _SPAN_TYPES[kind]
        return span_cls._from_payload(data)

    @classmethod
    def _from_payload(cls, data: Dict[str, Any]) -> "Span":
        return cls()


@dataclass(frozen=True, eq=False, slots=True)
class StyleSpan(Span):
    """
    Bold/italic styling.

    Attributes:
        style: TypefaceStyle constant; plain ints 0..3 are accepted and coerced.
    """

    kind: ClassVar[SpanKind] = SpanKind.STYLE

    style: TypefaceStyle = TypefaceStyle.NORMAL

    def __post_init__(self) -> None:
        if not validate_style(self.style):
            raise ValueError(f"Invalid typeface style: {self.style!r}")
        object.__setattr__(self, "style", TypefaceStyle(int(self.style)))

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "style": int(self.style)}

    @classmethod
    def _from_payload(cls, data: Dict[str, Any]) -> "StyleSpan":
        return cls(style=data.get("style", 0))

    def __repr__(self) -> str:
        return f"StyleSpan(style={self.style.name})"


@dataclass(frozen=True, eq=False, slots=True)
class UnderlineSpan(Span):
    """Underline decoration. Carries no payload."""

    kind: ClassVar[SpanKind] = SpanKind.UNDERLINE

    def __repr__(self) -> str:
        return "UnderlineSpan()"


@dataclass(frozen=True, eq=False, slots=True)
class _ColorSpan(Span):
    color: int = 0

    def __post_init__(self) -> None:
        if not validate_color(self.color):
            raise ValueError(f"Invalid ARGB color: {self.color!r}")
        object.__setattr__(self, "color", normalize_color(self.color))

    @property
    def hex_color(self) -> str:
        return format_color(self.color)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "color": self.color}

    @classmethod
    def _from_payload(cls, data: Dict[str, Any]) -> "_ColorSpan":
        return cls(color=data.get("color", 0))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color={self.hex_color})"


@dataclass(frozen=True, eq=False, slots=True)
class ForegroundColorSpan(_ColorSpan):
    """Text color."""

    kind: ClassVar[SpanKind] = SpanKind.FOREGROUND_COLOR


@dataclass(frozen=True, eq=False, slots=True)
class BackgroundColorSpan(_ColorSpan):
    """Background (highlight) color."""

    kind: ClassVar[SpanKind] = SpanKind.BACKGROUND_COLOR


_SPAN_TYPES: Final[Dict[SpanKind, Type[Span]]] = {
    SpanKind.STYLE: StyleSpan,
    SpanKind.UNDERLINE: UnderlineSpan,
    SpanKind.FOREGROUND_COLOR: ForegroundColorSpan,
    SpanKind.BACKGROUND_COLOR: BackgroundColorSpan,
}


def span_type_for(kind: SpanKind) -> Type[Span]:
    """Return the span class registered for a kind."""
    return _SPAN_TYPES[kind]


__all__ = [
    "Span",
    "StyleSpan",
    "UnderlineSpan",
    "ForegroundColorSpan",
    "BackgroundColorSpan",
    "span_type_for",
]
