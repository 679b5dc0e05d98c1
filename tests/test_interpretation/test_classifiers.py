"""Tests for priority and status classifiers."""

import pytest

from voice_tasks.interpretation.classifiers import (
    KeywordClassifier,
    PriorityClassifier,
    StatusClassifier,
    whole_word_pattern,
)
from voice_tasks.interpretation.models import TaskPriority, TaskStatus, TranscriptView


def _view(text: str) -> TranscriptView:
    return TranscriptView.from_transcript(text)


@pytest.mark.unit
class TestPriorityClassifier:
    """Test priority classification."""

    @pytest.mark.parametrize(
        "transcript,expected",
        [
            ("this is critical", TaskPriority.CRITICAL),
            ("URGENT: call the plumber", TaskPriority.CRITICAL),
            ("send the invoice asap", TaskPriority.CRITICAL),
            ("reply immediately", TaskPriority.CRITICAL),
            ("high priority bug fix", TaskPriority.HIGH),
            ("important meeting notes", TaskPriority.HIGH),
            ("set the bar high", TaskPriority.HIGH),
            ("low priority cleanup", TaskPriority.LOW),
            ("tidy the desk, low effort", TaskPriority.LOW),
            ("water the plants", TaskPriority.MEDIUM),
        ],
    )
    def test_classifies_priority(self, transcript: str, expected: TaskPriority) -> None:
        assert PriorityClassifier().classify(_view(transcript)) == expected

    def test_critical_beats_low_regardless_of_position(self) -> None:
        classifier = PriorityClassifier()

        assert classifier.classify(_view("low priority but urgent")) == TaskPriority.CRITICAL
        assert classifier.classify(_view("urgent, though low priority")) == TaskPriority.CRITICAL

    def test_critical_beats_high(self) -> None:
        assert (
            PriorityClassifier().classify(_view("important and critical"))
            == TaskPriority.CRITICAL
        )

    def test_not_urgent_resolves_critical(self) -> None:
        """'urgent' is a whole word inside 'not urgent', and Critical is checked first."""
        assert PriorityClassifier().classify(_view("not urgent")) == TaskPriority.CRITICAL

    @pytest.mark.parametrize("transcript", ["follow up with sam", "take the highway", "flowers"])
    def test_matches_whole_words_only(self, transcript: str) -> None:
        assert PriorityClassifier().classify(_view(transcript)) == TaskPriority.MEDIUM


@pytest.mark.unit
class TestStatusClassifier:
    """Test status classification."""

    @pytest.mark.parametrize(
        "transcript,expected",
        [
            ("report in progress", TaskStatus.IN_PROGRESS),
            ("working on the deploy script", TaskStatus.IN_PROGRESS),
            ("doing the laundry", TaskStatus.IN_PROGRESS),
            ("laundry is done", TaskStatus.DONE),
            ("completed the survey", TaskStatus.DONE),
            ("Finished reading chapter two", TaskStatus.DONE),
            ("water the plants", TaskStatus.TODO),
            ("the vase is undone", TaskStatus.TODO),
        ],
    )
    def test_classifies_status(self, transcript: str, expected: TaskStatus) -> None:
        assert StatusClassifier().classify(_view(transcript)) == expected

    def test_in_progress_beats_done(self) -> None:
        classifier = StatusClassifier()

        assert classifier.classify(_view("done with part one, working on part two")) == (
            TaskStatus.IN_PROGRESS
        )


@pytest.mark.unit
class TestKeywordClassifier:
    """Test the generic keyword classifier."""

    def test_first_matching_rule_wins(self) -> None:
        classifier = KeywordClassifier((("a", ("alpha",)), ("b", ("beta",))), default="z")

        assert classifier.classify(_view("beta then alpha")) == "a"
        assert classifier.classify(_view("beta")) == "b"
        assert classifier.classify(_view("gamma")) == "z"

    def test_whole_word_pattern_escapes_phrases(self) -> None:
        pattern = whole_word_pattern(("a.b", "two words"))

        assert pattern.search("x a.b y")
        assert not pattern.search("axb")
        assert pattern.search("two words here")
