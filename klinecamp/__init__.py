"""
Trading-education game engine.

:mod:`klinecamp.data` generates synthetic daily series,
:mod:`klinecamp.indicators` derives MA/MACD values, :mod:`klinecamp.story`
drives the narrative mode, and :mod:`klinecamp.simulation`,
:mod:`klinecamp.quiz` and :mod:`klinecamp.history` provide the other game
modes. Common entry points re-export here.
"""

from . import core, data, history, indicators, quiz, simulation, story
from .config import GameConfig, load_game_config, loads_jsonc
from .core import Bar, EventBus, HistoryRecord, Trade, TradeSide
from .data import generate_game_data, generate_series
from .errors import (
    ChoiceLockedError,
    ConfigurationError,
    DataError,
    KlineCampError,
    PersistenceError,
    QuizError,
    StoryError,
    StoryFinishedError,
    TradeRejectedError,
)
from .feedback import NullSoundPlayer, RecordingSoundPlayer, SoundFeedback
from .indicators import annotate
from .logging import configure_logging, log_event
from .simulation import SimulationResult, SimulationSession
from .story import INITIAL_STATS, NarrativeEngine, PlayerStats, StorySession
from .tips import FallbackTipProvider, StaticTipProvider

__all__ = [
    "Bar",
    "Trade",
    "TradeSide",
    "HistoryRecord",
    "EventBus",
    "generate_series",
    "generate_game_data",
    "annotate",
    "NarrativeEngine",
    "StorySession",
    "PlayerStats",
    "INITIAL_STATS",
    "SimulationSession",
    "SimulationResult",
    "SoundFeedback",
    "NullSoundPlayer",
    "RecordingSoundPlayer",
    "FallbackTipProvider",
    "StaticTipProvider",
    "GameConfig",
    "load_game_config",
    "loads_jsonc",
    "configure_logging",
    "log_event",
    "KlineCampError",
    "ConfigurationError",
    "DataError",
    "PersistenceError",
    "TradeRejectedError",
    "StoryError",
    "ChoiceLockedError",
    "StoryFinishedError",
    "QuizError",
    "core",
    "data",
    "history",
    "indicators",
    "quiz",
    "simulation",
    "story",
]
