"""
Narrative "trader's life" mode: stats, catalog, engine and session.
"""

from .catalog import BANKRUPTCY, ENDING_EVENTS, HOSPITAL, RANDOM_EVENTS, RETIREMENT, START_EVENT
from .engine import NarrativeEngine, apply_delta, ending_for
from .models import (
    INITIAL_STATS,
    ChoiceOption,
    LogEntry,
    PlayerStats,
    StatDelta,
    StepResult,
    StoryChoice,
    StoryEvent,
    StoryEventInstance,
)
from .session import StorySession, format_cash_delta

__all__ = [
    "PlayerStats",
    "INITIAL_STATS",
    "StatDelta",
    "StoryChoice",
    "StoryEvent",
    "StoryEventInstance",
    "ChoiceOption",
    "StepResult",
    "LogEntry",
    "NarrativeEngine",
    "apply_delta",
    "ending_for",
    "StorySession",
    "format_cash_delta",
    "START_EVENT",
    "RANDOM_EVENTS",
    "ENDING_EVENTS",
    "BANKRUPTCY",
    "HOSPITAL",
    "RETIREMENT",
]
