"""Title extraction by ordered removal of date, priority and framing phrases."""

import re
from functools import reduce
from typing import NamedTuple

from .config import FRAMING_PREFIXES, FRAMING_SUFFIXES, MONTH_NAMES, WEEKDAY_NAMES
from .models import TranscriptView


class RemovalRule(NamedTuple):
    """A single substitution applied to the title text."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""
    count: int = 0  # 0 replaces every occurrence


def _rule(name: str, pattern: str, replacement: str = "", count: int = 0) -> RemovalRule:
    return RemovalRule(name, re.compile(pattern, re.IGNORECASE), replacement, count)


_MONTHS = "|".join(MONTH_NAMES)
_WEEKDAYS = "|".join(WEEKDAY_NAMES)

DATE_RULES = (
    _rule("relational_date", r"\b(by|before|after|on|due|until)\s+\w+\s*\w*"),
    _rule("relative_day", r"\b(tomorrow|today|yesterday|next week|this week)\b"),
    _rule("offset", r"\b(in|within)\s+\d+\s+(days?|weeks?|months?|hours?)\b"),
    _rule("day_month", rf"\b\d{{1,2}}(st|nd|rd|th)?\s+({_MONTHS})\b"),
    _rule("month_day", rf"\b({_MONTHS})\s+\d{{1,2}}(st|nd|rd|th)?\b"),
    _rule("weekday", rf"\b({_WEEKDAYS})\b"),
    _rule("next_or_this", rf"\b(next|this)\s+({_WEEKDAYS}|week|month)\b"),
)

PRIORITY_RULES = (
    _rule("level_priority", r"\b(high|low|medium|critical)\s+priority\b"),
    _rule("urgency_word", r"\b(urgent|important|critical)\b"),
    _rule("priority_word", r"\bpriority\b"),
)

SEPARATOR_RULES = (
    _rule("leading_separators", r"^[\s,;:.\-]+"),
    _rule("trailing_separators", r"[\s,;:.\-]+$"),
)

FRAMING_RULES = (
    _rule("framing_prefix", rf"^({'|'.join(FRAMING_PREFIXES)})\s+", count=1),
    _rule("framing_suffix", rf"\s+({'|'.join(FRAMING_SUFFIXES)})$", count=1),
)

CLEANUP_RULES = (
    _rule("collapse_whitespace", r"\s+", " "),
    *SEPARATOR_RULES,
)

TITLE_RULES = DATE_RULES + PRIORITY_RULES + SEPARATOR_RULES + FRAMING_RULES + CLEANUP_RULES


def apply_rules(text: str, rules: tuple[RemovalRule, ...]) -> str:
    """Apply removal rules to text in order."""
    return reduce(
        lambda current, rule: rule.pattern.sub(rule.replacement, current, count=rule.count),
        rules,
        text,
    )


class TitleExtractor:
    """Strips date, priority and task-framing phrases to leave a readable title."""

    def __init__(self, rules: tuple[RemovalRule, ...] = TITLE_RULES) -> None:
        self.rules = rules

    def extract(self, view: TranscriptView) -> str:
        """
        Extract a title from the original-case transcript.

        Args:
            view: Transcript in original and lowercased form

        Returns:
            Cleaned title, or the untouched transcript when every word was
            removed
        """
        title = apply_rules(view.original, self.rules)
        return title or view.original
