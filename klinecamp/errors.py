"""Unified exception hierarchy for klinecamp."""


class KlineCampError(Exception):
    """Base class for game errors."""


class ConfigurationError(KlineCampError):
    """Configuration or wiring errors."""


class DataError(KlineCampError):
    """Invalid series input or malformed series files."""


class PersistenceError(KlineCampError):
    """History store failures."""


class TradeRejectedError(KlineCampError):
    """A buy/sell action that the current session state does not allow."""


class StoryError(KlineCampError):
    """Narrative session misuse."""


class ChoiceLockedError(StoryError):
    """The chosen option is hidden or its requirements are not met."""


class StoryFinishedError(StoryError):
    """A choice was made after an ending was reached."""


class QuizError(KlineCampError):
    """Quiz session misuse."""


__all__ = [
    "KlineCampError",
    "ConfigurationError",
    "DataError",
    "PersistenceError",
    "TradeRejectedError",
    "StoryError",
    "ChoiceLockedError",
    "StoryFinishedError",
    "QuizError",
]
