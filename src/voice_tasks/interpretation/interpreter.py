"""Interpretation orchestrator: runs every extractor over one transcript."""

import logging

from .classifiers import PriorityClassifier, StatusClassifier
from .config import PLACEHOLDER_TITLE
from .date_resolver import DateTimeResolver
from .interfaces import Clock
from .models import InterpretedTask, TranscriptView
from .title_extractor import TitleExtractor

logger = logging.getLogger(__name__)


class TranscriptInterpreter:
    """
    Turns a transcript into an InterpretedTask.

    Each extractor reads the same transcript independently; their results
    are merged without any cross-checking.
    """

    def __init__(
        self,
        date_resolver: DateTimeResolver | None = None,
        title_extractor: TitleExtractor | None = None,
        priority_classifier: PriorityClassifier | None = None,
        status_classifier: StatusClassifier | None = None,
        clock: Clock | None = None,
    ) -> None:
        """
        Initialize the interpreter.

        Args:
            date_resolver: Due date resolver (built from ``clock`` when omitted)
            title_extractor: Title extractor
            priority_classifier: Priority classifier
            status_classifier: Status classifier
            clock: Anchor time source for the default date resolver
        """
        self._date_resolver = date_resolver or DateTimeResolver(clock=clock)
        self._title_extractor = title_extractor or TitleExtractor()
        self._priority_classifier = priority_classifier or PriorityClassifier()
        self._status_classifier = status_classifier or StatusClassifier()

    def interpret(self, transcript: str) -> InterpretedTask:
        """
        Interpret a transcript.

        Args:
            transcript: Non-empty transcribed text; not validated here

        Returns:
            InterpretedTask with every field populated
        """
        view = TranscriptView.from_transcript(transcript)

        title = self._title_extractor.extract(view).strip() or PLACEHOLDER_TITLE

        task = InterpretedTask(
            title=title,
            status=self._status_classifier.classify(view),
            priority=self._priority_classifier.classify(view),
            due_date=self._date_resolver.resolve(view),
            transcript=transcript,
        )

        logger.debug(
            f"Interpreted '{transcript}': title='{task.title}', "
            f"status={task.status.value}, priority={task.priority.value}, "
            f"due_date={task.due_date}"
        )
        return task


def interpret(transcript: str, clock: Clock | None = None) -> InterpretedTask:
    """Interpret a transcript with the default extractors."""
    return TranscriptInterpreter(clock=clock).interpret(transcript)
