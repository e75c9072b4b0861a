"""Shared fixtures for the spancheck test suite."""

import pytest

from spancheck.model.spanned import SpannedText
from spancheck.testing.plugin import expect_spans, pytest_runtest_call  # noqa: F401


@pytest.fixture
def hello() -> SpannedText:
    return SpannedText("hello")


@pytest.fixture
def hello_world() -> SpannedText:
    return SpannedText("hello world")
