"""Transcript interpretation engine: spoken task description to structured task draft."""

from .clock import FixedClock, SystemClock
from .exceptions import InterpretationError, InvalidTranscriptError
from .interpretation_service import TranscriptInterpretationService, parse
from .interpreter import TranscriptInterpreter, interpret
from .models import InterpretedTask, TaskPriority, TaskStatus, TranscriptView

__all__ = [
    "FixedClock",
    "SystemClock",
    "InterpretationError",
    "InvalidTranscriptError",
    "TranscriptInterpretationService",
    "TranscriptInterpreter",
    "InterpretedTask",
    "TaskPriority",
    "TaskStatus",
    "TranscriptView",
    "interpret",
    "parse",
]
