"""Calendar phrase parser built on python-dateutil."""

import re
from datetime import datetime

from dateutil import parser as date_parser

from ..logging_utils import get_logger
from .config import DATE_ONLY_HOUR, MAX_YEAR_DISTANCE, MONTH_NAMES, WEEKDAY_NAMES
from .interfaces import DatePhraseParser

logger = get_logger(__name__)

_MONTHS = "|".join(MONTH_NAMES)
_WEEKDAYS = "|".join(WEEKDAY_NAMES)
_ORDINAL = r"(?:st|nd|rd|th)?"
# "march 3 1030am" is a clock time, not a year
_YEAR = r"(?:,?\s+\d{4}(?!\d|\s*[ap]m\b))?"
_CLOCK_TIME = r"(?:\s+(?:at\s+)?(?:\d{1,2}:\d{2}(?:\s*[ap]m)?|\d{1,2}\s*[ap]m))?"

# Alternatives are tried left to right at each position; finditer yields
# matches in transcript order.
_PHRASE_PATTERN = re.compile(
    "|".join(
        [
            r"\b\d{4}-\d{1,2}-\d{1,2}(?:[T ]\d{1,2}:\d{2}(?::\d{2})?)?\b",
            r"\b\d{1,2}/\d{1,2}(?:/\d{2,4})?\b" + _CLOCK_TIME,
            rf"\b\d{{1,2}}{_ORDINAL}\s+(?:of\s+)?(?:{_MONTHS})\b{_YEAR}" + _CLOCK_TIME,
            rf"\b(?:{_MONTHS})\s+\d{{1,2}}{_ORDINAL}\b{_YEAR}" + _CLOCK_TIME,
            rf"\b(?P<weekday>{_WEEKDAYS})\b" + _CLOCK_TIME,
        ]
    ),
    re.IGNORECASE,
)
# "next <weekday>" is resolved by the fallback chain
_ENDS_WITH_NEXT = re.compile(r"\bnext\s+$", re.IGNORECASE)
_HAS_YEAR = re.compile(r"\d{4}")
_HAS_MONTH_DAY = re.compile(rf"\d/\d|\b(?:{_MONTHS})\b", re.IGNORECASE)


class DateutilPhraseParser(DatePhraseParser):
    """
    Finds calendar phrases in a transcript and resolves them with dateutil.

    Recognised phrases are ISO dates, numeric month/day dates, day and month
    name in either order (optionally with a year) and bare weekday names,
    each optionally followed by a clock time. The leftmost phrase dateutil
    accepts wins.
    """

    def __init__(self, date_only_hour: int = DATE_ONLY_HOUR) -> None:
        """
        Initialize the parser.

        Args:
            date_only_hour: Hour assigned to phrases naming a day but no time
        """
        self._date_only_hour = date_only_hour

    def find_phrases(self, text: str) -> list[str]:
        """Return candidate calendar phrases in transcript order."""
        return [
            match.group(0)
            for match in _PHRASE_PATTERN.finditer(text)
            if not (
                match.group("weekday")
                and _ENDS_WITH_NEXT.search(text[: match.start()])
            )
        ]

    def try_parse(self, text: str, anchor: datetime) -> datetime | None:
        default = anchor.replace(
            hour=self._date_only_hour, minute=0, second=0, microsecond=0
        )

        for phrase in self.find_phrases(text):
            try:
                parsed = date_parser.parse(phrase, default=default, fuzzy=True)
            except (ValueError, OverflowError) as e:
                logger.debug(f"Skipping unparseable phrase '{phrase}': {e}")
                continue

            if _HAS_MONTH_DAY.search(phrase) and (
                not _HAS_YEAR.search(phrase)
                or abs(parsed.year - anchor.year) > MAX_YEAR_DISTANCE
            ):
                parsed = _closest_year(parsed, anchor)

            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=anchor.tzinfo)

            logger.debug(f"Resolved phrase '{phrase}' to {parsed.isoformat()}")
            return parsed

        return None


def _closest_year(value: datetime, anchor: datetime) -> datetime:
    """Move a year-less date to the year that puts it closest to the anchor."""
    candidates = []
    for year in (anchor.year - 1, anchor.year, anchor.year + 1):
        try:
            candidates.append(value.replace(year=year))
        except ValueError:
            # February 29th outside a leap year
            continue

    if not candidates:
        return value

    return min(candidates, key=lambda candidate: abs(candidate - anchor))
