import pytest

from klinecamp import ChoiceLockedError, KlineCampError, StoryError, TradeRejectedError
from klinecamp.errors import ConfigurationError, DataError, PersistenceError, QuizError, StoryFinishedError


@pytest.mark.parametrize(
    "exc",
    [ConfigurationError, DataError, PersistenceError, TradeRejectedError, StoryError, QuizError],
)
def test_exception_hierarchy(exc: type) -> None:
    assert issubclass(exc, KlineCampError)


def test_story_errors_share_a_base() -> None:
    assert issubclass(ChoiceLockedError, StoryError)
    assert issubclass(StoryFinishedError, StoryError)
