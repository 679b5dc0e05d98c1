"""Data models for transcript interpretation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Task status enumeration."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskPriority(str, Enum):
    """Task priority enumeration."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


@dataclass(frozen=True)
class TranscriptView:
    """A transcript in its original form plus the lowercased copy classifiers read."""

    original: str
    lowered: str

    @classmethod
    def from_transcript(cls, transcript: str) -> "TranscriptView":
        return cls(original=transcript, lowered=transcript.lower())


@dataclass(frozen=True)
class InterpretedTask:
    """Structured task draft produced from a single transcript."""

    title: str
    status: TaskStatus
    priority: TaskPriority
    due_date: str | None
    transcript: str
    description: None = None

    def to_dict(self) -> dict[str, Any]:
        """
        Render the task in its transport shape.

        Returns:
            Dictionary keyed by title, description, status, priority,
            dueDate and transcript
        """
        return {
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority.value,
            "dueDate": self.due_date,
            "transcript": self.transcript,
        }
