"""
Assertion helpers for spanned text.

Public API:
    - assert_that(spanned): SpannedSubject raising on the first failure
    - Expect: collects failures, use ``expect.that(spanned)``
    - SpanAssertionError: the AssertionError subclass every failure raises
    - WithSpanFlags / AndSpanFlags / Colored: chained follow-up checks

Usage:
    >>> from spancheck.testing import assert_that
    >>> assert_that(text).has_no_spans()
    >>> assert_that(text).has_underline_span_between(0, 5).with_flags(33)
"""

from .chains import (
    ALREADY_FAILED_AND_FLAGS,
    ALREADY_FAILED_COLORED,
    ALREADY_FAILED_WITH_FLAGS,
    AndSpanFlags,
    Colored,
    ColorSpansCheck,
    SpanFlagsCheck,
    WithSpanFlags,
)
from .facts import Fact, fact, format_facts, simple_fact
from .failure import RAISE, Expect, FailureStrategy, RaisingStrategy, SpanAssertionError
from .spanned_subject import SpannedSubject, assert_that, spanned

__all__ = [
    "assert_that",
    "spanned",
    "SpannedSubject",
    "Expect",
    "FailureStrategy",
    "RaisingStrategy",
    "RAISE",
    "SpanAssertionError",
    "Fact",
    "fact",
    "simple_fact",
    "format_facts",
    "AndSpanFlags",
    "WithSpanFlags",
    "Colored",
    "SpanFlagsCheck",
    "ColorSpansCheck",
    "ALREADY_FAILED_AND_FLAGS",
    "ALREADY_FAILED_WITH_FLAGS",
    "ALREADY_FAILED_COLORED",
]
