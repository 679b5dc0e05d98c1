"""Tests for title extraction."""

import pytest

from voice_tasks.interpretation.models import TranscriptView
from voice_tasks.interpretation.title_extractor import (
    DATE_RULES,
    FRAMING_RULES,
    PRIORITY_RULES,
    TITLE_RULES,
    TitleExtractor,
    apply_rules,
)


def _extract(text: str) -> str:
    return TitleExtractor().extract(TranscriptView.from_transcript(text))


def _rule(name: str):
    return next(rule for rule in TITLE_RULES if rule.name == name)


@pytest.mark.unit
class TestTitleExtraction:
    """Test end-to-end title extraction."""

    @pytest.mark.parametrize(
        "transcript,expected",
        [
            ("remind me to call the bank tomorrow morning", "call the bank morning"),
            ("urgent: finish the report by friday", "finish the report"),
            ("buy milk in 3 days", "buy milk"),
            ("water the plants", "water the plants"),
            ("I need to pay rent on the 1st", "pay rent"),
            ("Schedule dentist 3rd March", "Schedule dentist"),
            ("Schedule dentist March 3rd", "Schedule dentist"),
            ("Send invoice next month", "Send invoice"),
            ("high priority fix login bug", "fix login bug"),
            ("Call Alice on Monday", "Call Alice"),
            ("add review slides task", "review slides"),
            ("Prepare   the   demo", "Prepare the demo"),
            ("finish taxes within 2 weeks, important", "finish taxes"),
        ],
    )
    def test_extracts_title(self, transcript: str, expected: str) -> None:
        assert _extract(transcript) == expected

    def test_preserves_original_case(self) -> None:
        """Removal is case-insensitive but the kept words keep their case."""
        assert _extract("Email Dr. Smith TOMORROW") == "Email Dr. Smith"

    def test_all_noise_falls_back_to_original(self) -> None:
        """A transcript made only of removable phrases is returned untouched."""
        assert _extract("tomorrow") == "tomorrow"
        assert _extract("urgent priority") == "urgent priority"

    @pytest.mark.parametrize(
        "transcript",
        [
            "remind me to call the bank tomorrow morning",
            "urgent: finish the report by friday",
            "buy milk in 3 days",
            "water the plants",
            "Prepare   the   demo",
        ],
    )
    def test_extraction_is_idempotent(self, transcript: str) -> None:
        """Re-running extraction on an extracted title leaves it unchanged."""
        title = _extract(transcript)

        assert _extract(title) == title


@pytest.mark.unit
class TestRemovalRules:
    """Test individual removal rules and their ordering."""

    def test_rule_groups_are_applied_in_order(self) -> None:
        assert TITLE_RULES[: len(DATE_RULES)] == DATE_RULES
        start = len(DATE_RULES)
        assert TITLE_RULES[start : start + len(PRIORITY_RULES)] == PRIORITY_RULES
        assert TITLE_RULES.index(FRAMING_RULES[0]) > TITLE_RULES.index(PRIORITY_RULES[-1])

    @pytest.mark.parametrize(
        "name,text,expected",
        [
            ("relational_date", "pay rent by friday", "pay rent "),
            ("relational_date", "ship it before end of", "ship it "),
            ("relative_day", "see you Today", "see you "),
            ("relative_day", "plan next week", "plan "),
            ("offset", "finish within 3 hours", "finish "),
            ("day_month", "party 21st october", "party "),
            ("month_day", "party October 21", "party "),
            ("weekday", "gym saturday", "gym "),
            ("level_priority", "fix bug medium priority", "fix bug "),
            ("urgency_word", "Important call", " call"),
            ("priority_word", "priority call", " call"),
            ("framing_prefix", "Remind me to stretch", "stretch"),
            ("framing_suffix", "stretch reminder", "stretch"),
            ("collapse_whitespace", "a  \t b", "a b"),
        ],
    )
    def test_single_rule(self, name: str, text: str, expected: str) -> None:
        assert apply_rules(text, (_rule(name),)) == expected

    def test_framing_prefix_only_at_start(self) -> None:
        assert apply_rules("please add salt", (_rule("framing_prefix"),)) == "please add salt"

    def test_custom_rules(self) -> None:
        """The extractor folds whatever rule sequence it is given."""
        extractor = TitleExtractor(rules=(_rule("weekday"), _rule("collapse_whitespace")))

        title = extractor.extract(TranscriptView.from_transcript("gym  saturday by noon"))

        assert title == "gym by noon"
