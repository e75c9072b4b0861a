"""
Размеченный текст (SpannedText): неизменяемая строка и упорядоченный набор spans.

Annotated text value: an immutable character sequence plus positioned
(span, start, end, flags) entries. Several spans may overlap or share the
same range; entries keep insertion order.

Module: spancheck/model/spanned.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Final, Iterable, List, Optional, Tuple

from .enums import DEFAULT_SPAN_FLAGS, SpanKind, validate_flags
from .spans import Span

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SpanEntry:
    """A span attached to a text range with its flags."""

    span: Span
    start: int
    end: int
    flags: int = int(DEFAULT_SPAN_FLAGS)

    @property
    def kind(self) -> SpanKind:
        return self.span.kind

    def has_range(self, start: int, end: int) -> bool:
        return self.start == start and self.end == end

    def intersects(self, start: int, end: int) -> bool:
        """
        Platform getSpans() overlap rule: a span touching the query boundary
        is excluded unless the span or the query range is empty.
        """
        if self.start > end or self.end < start:
            return False
        if self.start != self.end and start != end:
            if self.start == end or self.end == start:
                return False
        return True


class SpannedText:
    """
    Текст с разметкой.

    The text itself never changes; spans can be attached and removed while a
    test builds its fixture. Assertions only read it.

    Example:
        >>> text = SpannedText("hello")
        >>> text.set_span(UnderlineSpan(), 0, 5)
        >>> len(text.get_spans(0, len(text)))
        1
    """

    __slots__ = ("_text", "_entries")

    def __init__(self, text: str, spans: Iterable[Tuple[Span, int, int, int]] = ()) -> None:
        if not isinstance(text, str):
            raise TypeError(f"SpannedText text must be str, got {type(text).__name__}")
        self._text: str = text
        self._entries: List[SpanEntry] = []
        for span, start, end, flags in spans:
            self.set_span(span, start, end, flags)

    # ---- text ----

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def substring(self, start: int, end: int) -> str:
        return self._text[start:end]

    # ---- spans ----

    @property
    def entries(self) -> Tuple[SpanEntry, ...]:
        return tuple(self._entries)

    def set_span(self, span: Span, start: int, end: int, flags: int = DEFAULT_SPAN_FLAGS) -> None:
        """
        Attach a span to [start, end).

        Setting a span object that is already attached moves it to the new
        range and flags, keeping its position in insertion order.

        Raises:
            TypeError: If span is not a Span.
            ValueError: If the range lies outside the text or flags are invalid.
        """
        if not isinstance(span, Span):
            raise TypeError(f"span must be Span, got {type(span).__name__}")
        if not (0 <= start <= end <= len(self._text)):
            raise ValueError(
                f"Invalid span range [{start}:{end}] for text length {len(self._text)}"
            )
        if not validate_flags(flags):
            raise ValueError(f"Invalid span flags: {flags!r}")

        entry = SpanEntry(span=span, start=start, end=end, flags=int(flags))
        for i, existing in enumerate(self._entries):
            if existing.span is span:
                self._entries[i] = entry
                logger.debug("Moved %r to [%d:%d] flags=%d", span, start, end, entry.flags)
                return
        self._entries.append(entry)
        logger.debug("Attached %r to [%d:%d] flags=%d", span, start, end, entry.flags)

    def remove_span(self, span: Span) -> bool:
        """
        Detach a span.

        Returns:
            True if the span was attached and has been removed.
        """
        for i, existing in enumerate(self._entries):
            if existing.span is span:
                del self._entries[i]
                return True
        return False

    def get_spans(
        self, start: int, end: int, kind: Optional[SpanKind] = None
    ) -> List[SpanEntry]:
        """Entries intersecting [start, end], optionally filtered by kind."""
        return [
            e
            for e in self._entries
            if (kind is None or e.kind is kind) and e.intersects(start, end)
        ]

    def _find(self, span: Span) -> Optional[SpanEntry]:
        for e in self._entries:
            if e.span is span:
                return e
        return None

    def span_start(self, span: Span) -> int:
        entry = self._find(span)
        return entry.start if entry is not None else -1

    def span_end(self, span: Span) -> int:
        entry = self._find(span)
        return entry.end if entry is not None else -1

    def span_flags(self, span: Span) -> int:
        entry = self._find(span)
        return entry.flags if entry is not None else 0

    # ---- copy / serialization ----

    def copy(self) -> "SpannedText":
        """Copy with the same span objects attached to a new text value."""
        out = SpannedText(self._text)
        out._entries = list(self._entries)
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self._text,
            "spans": [
                {**e.span.to_dict(), "start": e.start, "end": e.end, "flags": e.flags}
                for e in self._entries
            ],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SpannedText":
        out = SpannedText(data.get("text", ""))
        for item in data.get("spans", []):
            out.set_span(
                Span.from_dict(item),
                int(item["start"]),
                int(item["end"]),
                int(item.get("flags", DEFAULT_SPAN_FLAGS)),
            )
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpannedText):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        preview = self._text[:20]
        return f"SpannedText(text='{preview}', spans={len(self._entries)})"


__all__ = ["SpanEntry", "SpannedText"]
