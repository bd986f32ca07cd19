import logging
from typing import List, Optional

from klinecamp.core.clock import SystemClock
from klinecamp.core.enums import LogKind
from klinecamp.core.event_bus import EventBus
from klinecamp.core.events import StoryEndedEvent, StoryStepEvent
from klinecamp.core.interfaces import Clock
from klinecamp.errors import ChoiceLockedError, StoryFinishedError
from klinecamp.logging import log_event

from .engine import NarrativeEngine
from .models import ChoiceOption, LogEntry, PlayerStats, StepResult, StoryEventInstance


def format_cash_delta(delta: float) -> str:
    sign = "+" if delta > 0 else ""
    return f"资金 {sign}{delta:.0f}"


class StorySession:
    """
    One narrative run: owns the stats, the current event and the log.

    This is the gating layer: :meth:`choose` refuses hidden or locked
    options before handing the choice to the engine.
    """

    def __init__(
        self,
        engine: Optional[NarrativeEngine] = None,
        *,
        bus: Optional[EventBus] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.engine = engine or NarrativeEngine()
        self.bus = bus or EventBus()
        self.clock = clock or SystemClock()
        self._logger = logging.getLogger(__name__)
        self.restart()

    def restart(self) -> None:
        self.stats: PlayerStats = self.engine.initial_stats
        self.current: StoryEventInstance = self.engine.start()
        self.log: List[LogEntry] = [LogEntry(self.current.text, LogKind.NARRATIVE)]
        self.finished = False

    def options(self) -> List[ChoiceOption]:
        return self.engine.eligible_choices(self.stats, self.current.event)

    @property
    def won(self) -> bool:
        return self.stats.cash > self.engine.initial_stats.cash

    def choose(self, index: int) -> StepResult:
        if self.finished:
            raise StoryFinishedError(f"Story already ended at {self.current.event.id}")
        option = next((opt for opt in self.options() if opt.index == index), None)
        if option is None:
            raise ChoiceLockedError(f"Choice {index} is not offered for {self.current.instance_id}")
        if option.locked:
            raise ChoiceLockedError(f"Choice {index} requirements not met: {option.choice.text}")

        choice = option.choice
        result = self.engine.step(self.stats, choice)
        self.log.append(LogEntry(f"> {choice.text}", LogKind.CHOICE))
        self.log.append(LogEntry(choice.log_text, LogKind.EFFECT))
        if result.cash_delta != 0:
            self.log.append(LogEntry(format_cash_delta(result.cash_delta), LogKind.EFFECT))
        self.log.append(LogEntry(f"[第 {result.stats.turn} 月]", LogKind.NARRATIVE))
        self.log.append(LogEntry(result.next_event.text, LogKind.NARRATIVE))

        self.stats = result.stats
        self.current = result.next_event

        now = self.clock.now()
        step_event = StoryStepEvent(
            timestamp=now,
            turn=result.stats.turn,
            choice_text=choice.text,
            cash_delta=result.cash_delta,
            health_delta=result.health_delta,
            next_event_id=result.next_event.instance_id,
        )
        log_event(self._logger, step_event, level="DEBUG")
        self.bus.publish(step_event)

        if result.next_event.is_ending:
            self.finished = True
            ended = StoryEndedEvent(
                timestamp=now,
                ending_id=result.next_event.event.id,
                final_cash=result.stats.cash,
                won=self.won,
            )
            self._logger.info(
                "Story ended: %s at turn %d cash=%.0f", ended.ending_id, result.stats.turn, result.stats.cash
            )
            self.bus.publish(ended)

        self.bus.dispatch()
        return result
