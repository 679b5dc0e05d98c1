"""Keyword classifiers for task priority and status."""

import re
from typing import Generic, TypeVar

from .config import (
    CRITICAL_PRIORITY_WORDS,
    DEFAULT_PRIORITY_VALUE,
    DEFAULT_STATUS_VALUE,
    DONE_STATUS_WORDS,
    HIGH_PRIORITY_WORDS,
    IN_PROGRESS_STATUS_WORDS,
    LOW_PRIORITY_WORDS,
)
from .models import TaskPriority, TaskStatus, TranscriptView

LabelT = TypeVar("LabelT")


def whole_word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    """Compile a pattern matching any of the words or phrases as whole words."""
    return re.compile(r"\b(" + "|".join(re.escape(word) for word in words) + r")\b")


class KeywordClassifier(Generic[LabelT]):
    """
    Picks the first label whose vocabulary appears in the lowercased transcript.

    Rules are checked in order, so earlier labels take precedence regardless
    of where the words appear in the text.
    """

    def __init__(
        self, rules: tuple[tuple[LabelT, tuple[str, ...]], ...], default: LabelT
    ) -> None:
        self._rules = tuple((label, whole_word_pattern(words)) for label, words in rules)
        self._default = default

    def classify(self, view: TranscriptView) -> LabelT:
        for label, pattern in self._rules:
            if pattern.search(view.lowered):
                return label
        return self._default


class PriorityClassifier(KeywordClassifier[TaskPriority]):
    """Critical, then High, then Low; Medium when nothing matches."""

    def __init__(self) -> None:
        super().__init__(
            (
                (TaskPriority.CRITICAL, CRITICAL_PRIORITY_WORDS),
                (TaskPriority.HIGH, HIGH_PRIORITY_WORDS),
                (TaskPriority.LOW, LOW_PRIORITY_WORDS),
            ),
            default=TaskPriority(DEFAULT_PRIORITY_VALUE),
        )


class StatusClassifier(KeywordClassifier[TaskStatus]):
    """In Progress, then Done; To Do when nothing matches."""

    def __init__(self) -> None:
        super().__init__(
            (
                (TaskStatus.IN_PROGRESS, IN_PROGRESS_STATUS_WORDS),
                (TaskStatus.DONE, DONE_STATUS_WORDS),
            ),
            default=TaskStatus(DEFAULT_STATUS_VALUE),
        )
