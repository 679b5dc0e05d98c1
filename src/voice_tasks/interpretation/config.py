"""Configuration constants for transcript interpretation."""

import os

# Output defaults
PLACEHOLDER_TITLE = "Untitled Task"
DEFAULT_STATUS_VALUE = "To Do"
DEFAULT_PRIORITY_VALUE = "Medium"

# Calendar vocabulary
MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)  # index == datetime.weekday()

# Time of day
DATE_ONLY_HOUR = 12  # hour assigned to phrases that name a day but no time
MAX_YEAR_DISTANCE = 50  # spoken years further from now are treated as year-less
PERIOD_WORD_HOURS = {
    "evening": 18,
    "morning": 9,
    "afternoon": 14,
    "noon": 12,
}  # checked in this order
PM_PERIOD_WORDS = ("pm", "evening", "afternoon")
AM_PERIOD_WORDS = ("am", "morning")
TIMESTAMP_PRECISION = "milliseconds"

# Priority vocabulary, most urgent first
CRITICAL_PRIORITY_WORDS = ("critical", "urgent", "asap", "immediately")
HIGH_PRIORITY_WORDS = ("high priority", "important", "high")
LOW_PRIORITY_WORDS = ("low priority", "low", "not urgent")

# Status vocabulary, checked in this order
IN_PROGRESS_STATUS_WORDS = ("in progress", "working on", "doing")
DONE_STATUS_WORDS = ("done", "completed", "finished")

# Task framing
FRAMING_PREFIXES = (
    "create",
    "add",
    "make",
    "new",
    "remind me to",
    "i need to",
    "i have to",
    "i should",
)
FRAMING_SUFFIXES = ("task", "todo", "reminder")

# MCP Server Configuration
DEFAULT_MCP_SERVER_NAME = "voice-tasks"
DEFAULT_MCP_HOST = os.getenv("VOICE_TASKS_MCP_HOST", "localhost")
DEFAULT_MCP_PORT = int(os.getenv("VOICE_TASKS_MCP_PORT", "3000"))
