"""Custom exceptions for transcript interpretation."""


class InterpretationError(Exception):
    """Base exception for interpretation errors."""

    pass


class InvalidTranscriptError(InterpretationError):
    """Exception raised when a transcript is missing, empty or not a string."""

    pass
