"""Shared fixtures for interpretation tests."""

from datetime import datetime, timezone

import pytest

from voice_tasks.interpretation.clock import FixedClock
from voice_tasks.interpretation.interfaces import DatePhraseParser

# Wednesday
ANCHOR = datetime(2026, 10, 21, 10, 30, tzinfo=timezone.utc)


class StubPhraseParser(DatePhraseParser):
    """Phrase parser returning a fixed result and recording its calls."""

    def __init__(
        self, result: datetime | None = None, error: Exception | None = None
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, datetime]] = []

    def try_parse(self, text: str, anchor: datetime) -> datetime | None:
        self.calls.append((text, anchor))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def anchor() -> datetime:
    """Fixed reference instant (Wednesday 2026-10-21 10:30 UTC)."""
    return ANCHOR


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to the anchor instant."""
    return FixedClock(ANCHOR)


@pytest.fixture
def null_parser() -> StubPhraseParser:
    """Phrase parser that never finds a date."""
    return StubPhraseParser()


@pytest.fixture
def stub_parser_factory():
    """Build phrase parsers returning a given result or raising a given error."""

    def _make(
        result: datetime | None = None, error: Exception | None = None
    ) -> StubPhraseParser:
        return StubPhraseParser(result=result, error=error)

    return _make
