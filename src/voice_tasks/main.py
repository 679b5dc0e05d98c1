"""Command-line interface for transcript interpretation."""

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import TextIO

from .interpretation.clock import FixedClock
from .interpretation.exceptions import InterpretationError
from .interpretation.interfaces import Clock
from .interpretation.interpretation_service import TranscriptInterpretationService
from .interpretation.interpreter import TranscriptInterpreter
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


class InterpretationCLI:
    """Command-line front end that prints interpreted tasks as JSON."""

    def __init__(
        self,
        service: TranscriptInterpretationService | None = None,
        clock: Clock | None = None,
        compact: bool = False,
        output: TextIO | None = None,
    ) -> None:
        """
        Initialize the CLI.

        Args:
            service: Optional service instance. If None, creates a new one.
            clock: Anchor time source used when creating the service
            compact: Print one JSON object per line instead of indented JSON
            output: Stream to write results to (defaults to stdout)
        """
        self._service = service or TranscriptInterpretationService(
            TranscriptInterpreter(clock=clock)
        )
        self._compact = compact
        self._output = output or sys.stdout

    def interpret_one(self, transcript: str) -> bool:
        """
        Interpret a single transcript and print the result.

        Args:
            transcript: Transcribed text

        Returns:
            True if the transcript was interpreted, False if it was rejected
        """
        try:
            task = self._service.parse(transcript)
        except InterpretationError as e:
            print(f"❌ {e}: {transcript!r}", file=sys.stderr)
            return False

        indent = None if self._compact else 2
        print(json.dumps(task.to_dict(), indent=indent), file=self._output)
        return True

    def run(self, transcripts: list[str]) -> int:
        """
        Interpret every transcript.

        Args:
            transcripts: Transcripts to interpret

        Returns:
            Process exit code: 0 if all succeeded, 1 otherwise
        """
        results = [self.interpret_one(transcript) for transcript in transcripts]
        return 0 if all(results) else 1


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Voice Task CLI - Turn spoken task descriptions into structured tasks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m voice_tasks.main "remind me to call the bank tomorrow morning"
  python -m voice_tasks.main "urgent: finish the report by friday" --compact
  python -m voice_tasks.main --now 2026-10-21T10:30:00+00:00 "buy milk in 3 days"
  cat transcripts.txt | python -m voice_tasks.main      # one transcript per line

Each transcript is printed as JSON with title, description, status,
priority, dueDate and transcript.
        """,
    )

    parser.add_argument(
        "transcripts",
        nargs="*",
        metavar="TRANSCRIPT",
        help="Transcript to interpret (reads one per line from stdin if omitted)",
    )

    parser.add_argument(
        "--now",
        type=str,
        default=None,
        metavar="ISO_DATETIME",
        help="Anchor relative dates to this instant instead of the current time",
    )

    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print each task as a single JSON line",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging and debug information",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace logging (most verbose, includes every date rule)",
    )

    return parser


def parse_anchor(value: str | None) -> Clock | None:
    """
    Build a fixed clock from an ISO-8601 string.

    Args:
        value: ISO-8601 datetime, or None to use the system clock

    Returns:
        FixedClock for the instant, or None

    Raises:
        ValueError: If the value is not a valid ISO-8601 datetime
    """
    if value is None:
        return None
    return FixedClock(datetime.fromisoformat(value))


def handle_arguments(args: argparse.Namespace) -> tuple[bool, Clock | None]:
    """
    Handle parsed command-line arguments.

    Args:
        args: Parsed arguments from argparse

    Returns:
        Tuple of (success, clock):
        - success: False if an argument was invalid
        - clock: Fixed anchor clock requested with --now, or None
    """
    configure_logging(verbose=args.verbose, trace=args.trace)

    try:
        clock = parse_anchor(args.now)
    except ValueError as e:
        print(f"❌ Invalid --now value '{args.now}': {e}", file=sys.stderr)
        return False, None

    return True, clock


def read_transcripts(stream: TextIO) -> list[str]:
    """Read one transcript per non-blank line."""
    return [line.strip() for line in stream if line.strip()]


def cli_entry_with_args(argv: list[str] | None = None) -> None:
    """CLI entry point with argument parsing."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    success, clock = handle_arguments(args)
    if not success:
        sys.exit(1)

    transcripts = args.transcripts or read_transcripts(sys.stdin)

    try:
        cli = InterpretationCLI(clock=clock, compact=args.compact)
        exit_code = cli.run(transcripts)
    except KeyboardInterrupt:
        exit_code = 130

    sys.exit(exit_code)


if __name__ == "__main__":
    cli_entry_with_args()
