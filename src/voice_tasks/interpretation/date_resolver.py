"""Date/time resolution for transcripts: phrase parser first, then fallback rules."""

import re
from datetime import datetime, timedelta, timezone

from ..logging_utils import get_logger
from .clock import SystemClock
from .config import (
    AM_PERIOD_WORDS,
    PERIOD_WORD_HOURS,
    PM_PERIOD_WORDS,
    TIMESTAMP_PRECISION,
    WEEKDAY_NAMES,
)
from .interfaces import Clock, DatePhraseParser
from .models import TranscriptView
from .phrase_parser import DateutilPhraseParser

logger = get_logger(__name__)

_TOMORROW_CLOCK_TIME = re.compile(
    r"\b(\d{1,2}):?(\d{2})?\s*(am|pm|evening|morning|afternoon|noon)\b", re.IGNORECASE
)
_TODAY_CLOCK_TIME = re.compile(
    r"\b(\d{1,2}):?(\d{2})?\s*(am|pm|evening|morning|afternoon)\b", re.IGNORECASE
)
# Substring matches ("evenings" counts), except "noon", which sits inside "afternoon"
_PERIOD_WORDS = {
    word: re.compile(rf"\b{word}\b" if word == "noon" else word)
    for word in PERIOD_WORD_HOURS
}
_IN_DAYS = re.compile(r"\bin\s+(\d+)\s+days?\b", re.IGNORECASE)
_NEXT_WEEKDAY = re.compile(
    rf"\bnext\s+({'|'.join(WEEKDAY_NAMES)})\b", re.IGNORECASE
)


def to_timestamp(value: datetime) -> str:
    """Serialize an aware datetime as an absolute UTC ISO-8601 timestamp."""
    return value.astimezone(timezone.utc).isoformat(timespec=TIMESTAMP_PRECISION)


def _at(value: datetime, hour: int, minute: int = 0) -> datetime:
    return value.replace(hour=hour, minute=minute, second=0, microsecond=0)


def _spoken_clock_time(match: re.Match[str] | None) -> tuple[int, int, str] | None:
    """Return (hour, minute, period) for a clock time match, or None if invalid."""
    if match is None:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) else 0
    if hour > 23 or minute > 59:
        return None

    return hour, minute, match.group(3).lower()


class DateTimeResolver:
    """
    Resolves a transcript to an absolute due date.

    A general phrase parser is consulted first. When it finds nothing, an
    ordered chain of fallback rules (tomorrow, today, in N days, next
    weekday) is tried and the first rule that matches wins.
    """

    def __init__(
        self,
        phrase_parser: DatePhraseParser | None = None,
        clock: Clock | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            phrase_parser: Primary date phrase parser
            clock: Source of the anchor time
        """
        self._phrase_parser = phrase_parser or DateutilPhraseParser()
        self._clock = clock or SystemClock()
        self._fallback_rules = (
            ("tomorrow", self._resolve_tomorrow),
            ("today", self._resolve_today),
            ("in_days", self._resolve_in_days),
            ("next_weekday", self._resolve_next_weekday),
        )

    def resolve(self, view: TranscriptView) -> str | None:
        """
        Resolve the due date spoken in a transcript.

        Args:
            view: Transcript in original and lowercased form

        Returns:
            Absolute ISO-8601 timestamp, or None if no date was found
        """
        now = self._clock.now()

        parsed = self._try_phrase_parser(view.original, now)
        if parsed is not None:
            return to_timestamp(parsed)

        resolved = self.resolve_fallback(view, now)
        return to_timestamp(resolved) if resolved is not None else None

    def _try_phrase_parser(self, text: str, now: datetime) -> datetime | None:
        try:
            parsed = self._phrase_parser.try_parse(text, now)
        except Exception as e:
            logger.warning(f"Date phrase parser failed, using fallback rules: {e}")
            return None

        if parsed is None:
            return None

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=now.tzinfo)
        logger.debug(f"Phrase parser resolved due date {parsed.isoformat()}")
        return parsed

    def resolve_fallback(self, view: TranscriptView, now: datetime) -> datetime | None:
        """
        Apply the fallback rules in order.

        Args:
            view: Transcript in original and lowercased form
            now: Anchor time

        Returns:
            Resolved datetime from the first matching rule, or None
        """
        for name, rule in self._fallback_rules:
            resolved = rule(view, now)
            logger.trace(f"Fallback rule '{name}' -> {resolved}")  # type: ignore[attr-defined]
            if resolved is not None:
                return resolved
        return None

    def _resolve_tomorrow(self, view: TranscriptView, now: datetime) -> datetime | None:
        if "tomorrow" not in view.lowered:
            return None

        tomorrow = now + timedelta(days=1)

        clock_time = _spoken_clock_time(_TOMORROW_CLOCK_TIME.search(view.original))
        if clock_time is not None:
            hour, minute, period = clock_time
            if period == "noon":
                return _at(tomorrow, 12)
            if period in PM_PERIOD_WORDS and hour < 12:
                return _at(tomorrow, hour + 12, minute)
            if period in AM_PERIOD_WORDS and hour == 12:
                return _at(tomorrow, 0, minute)
            return _at(tomorrow, hour, minute)

        for word, pattern in _PERIOD_WORDS.items():
            if pattern.search(view.lowered):
                return _at(tomorrow, PERIOD_WORD_HOURS[word])

        return tomorrow

    def _resolve_today(self, view: TranscriptView, now: datetime) -> datetime | None:
        if "today" not in view.lowered:
            return None

        # A spoken time earlier than now is returned as-is, not rolled forward
        clock_time = _spoken_clock_time(_TODAY_CLOCK_TIME.search(view.original))
        if clock_time is not None:
            hour, minute, period = clock_time
            if period in PM_PERIOD_WORDS and hour < 12:
                return _at(now, hour + 12, minute)
            return _at(now, hour, minute)

        return now

    def _resolve_in_days(self, view: TranscriptView, now: datetime) -> datetime | None:
        match = _IN_DAYS.search(view.original)
        if match is None:
            return None

        try:
            return now + timedelta(days=int(match.group(1)))
        except OverflowError:
            logger.warning(f"Day offset out of range: '{match.group(0)}'")
            return None

    def _resolve_next_weekday(
        self, view: TranscriptView, now: datetime
    ) -> datetime | None:
        match = _NEXT_WEEKDAY.search(view.original)
        if match is None:
            return None

        target = WEEKDAY_NAMES.index(match.group(1).lower())
        days_until = target - now.weekday()
        if days_until <= 0:
            days_until += 7
        return now + timedelta(days=days_until)
