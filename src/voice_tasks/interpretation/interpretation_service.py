"""Inbound boundary: validates transcripts before handing them to the engine."""

import logging
import time
from typing import Any

from .exceptions import InterpretationError, InvalidTranscriptError
from .interfaces import Clock
from .interpreter import TranscriptInterpreter
from .models import InterpretedTask

logger = logging.getLogger(__name__)


class TranscriptInterpretationService:
    """
    Service that accepts transcripts from transport layers.

    Rejects missing or blank transcripts and wraps unexpected engine
    failures in InterpretationError so callers can map them to a failure
    response.

    Whitespace-only transcripts are rejected here, so the engine's
    "Untitled Task" placeholder title is only produced when calling
    ``TranscriptInterpreter.interpret`` (or ``interpret``) directly.
    """

    def __init__(self, interpreter: TranscriptInterpreter | None = None) -> None:
        """
        Initialize the service.

        Args:
            interpreter: Interpreter to delegate to
        """
        self._interpreter = interpreter or TranscriptInterpreter()

    def parse(self, transcript: Any) -> InterpretedTask:
        """
        Parse a transcript into a task draft.

        Args:
            transcript: Transcribed text supplied by the caller

        Returns:
            InterpretedTask for the transcript

        Raises:
            InvalidTranscriptError: If the transcript is not a non-blank string
            InterpretationError: If interpretation fails unexpectedly
        """
        if not isinstance(transcript, str) or not transcript.strip():
            logger.warning("❌ Rejected missing, blank or non-string transcript")
            raise InvalidTranscriptError("Transcript is required")

        start_time = time.time()
        logger.info(f"🎯 Interpreting transcript: '{transcript}'")

        try:
            task = self._interpreter.interpret(transcript)
        except Exception as e:
            logger.error(f"Interpretation failed: {e}")
            raise InterpretationError(f"Failed to parse voice input: {e}") from e

        processing_time = time.time() - start_time
        logger.info(
            f"✅ Interpreted task: title='{task.title}', status={task.status.value}, "
            f"priority={task.priority.value}, due_date={task.due_date}, "
            f"processing_time={processing_time:.3f}s"
        )
        return task


def parse(transcript: Any, clock: Clock | None = None) -> InterpretedTask:
    """Validate and interpret a transcript with the default extractors."""
    service = TranscriptInterpretationService(TranscriptInterpreter(clock=clock))
    return service.parse(transcript)
