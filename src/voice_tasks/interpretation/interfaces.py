"""Abstract interfaces for the interpretation engine's external dependencies."""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Abstract source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Return the current instant.

        Returns:
            Timezone-aware datetime used as the anchor for relative dates
        """
        pass


class DatePhraseParser(ABC):
    """Abstract interface for a general calendar-aware phrase parser."""

    @abstractmethod
    def try_parse(self, text: str, anchor: datetime) -> datetime | None:
        """
        Find and resolve a date phrase in free-form text.

        Relative expressions and weekday names are resolved against the
        anchor instant.

        Args:
            text: Original-case transcript text
            anchor: Timezone-aware reference instant ("now")

        Returns:
            Resolved datetime, or None if the text holds no phrase the
            parser understands

        Raises:
            Exception: Implementations may raise on internal failure; callers
                treat any exception as "no match"
        """
        pass
