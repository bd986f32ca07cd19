import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from klinecamp.core.clock import SystemClock
from klinecamp.core.event_bus import EventBus
from klinecamp.core.events import QuizAnsweredEvent
from klinecamp.core.interfaces import Clock
from klinecamp.errors import QuizError

from .bank import QuizQuestion


@dataclass(frozen=True)
class QuizResult:
    total_questions: int
    correct_count: int


class QuizSession:
    """
    Walks through a fixed list of questions; each question is answered once.
    """

    def __init__(
        self,
        questions: Sequence[QuizQuestion],
        *,
        bus: Optional[EventBus] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if not questions:
            raise QuizError("QuizSession needs at least one question")
        self.questions: List[QuizQuestion] = list(questions)
        self.bus = bus or EventBus()
        self.clock = clock or SystemClock()
        self.position = 0
        self.selected: Optional[int] = None
        self.correct_count = 0
        self._logger = logging.getLogger(__name__)

    @property
    def current(self) -> QuizQuestion:
        return self.questions[self.position]

    @property
    def answered(self) -> bool:
        return self.selected is not None

    @property
    def is_last(self) -> bool:
        return self.position >= len(self.questions) - 1

    def answer(self, index: int) -> bool:
        if self.answered:
            raise QuizError(f"Question {self.current.id} already answered")
        if not 0 <= index < len(self.current.options):
            raise QuizError(f"Option {index} out of range for question {self.current.id}")
        self.selected = index
        correct = index == self.current.correct_index
        if correct:
            self.correct_count += 1
        self.bus.emit(
            QuizAnsweredEvent(timestamp=self.clock.now(), question_id=self.current.id, selected=index, correct=correct)
        )
        return correct

    def next(self) -> bool:
        """Move to the next question; False when the quiz is complete."""
        if not self.answered:
            raise QuizError("Answer the current question before moving on")
        if self.is_last:
            self._logger.info("Quiz complete: %d/%d", self.correct_count, len(self.questions))
            return False
        self.position += 1
        self.selected = None
        return True

    def result(self) -> QuizResult:
        return QuizResult(total_questions=len(self.questions), correct_count=self.correct_count)
