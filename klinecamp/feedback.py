"""Sound feedback: cue players and the bus subscriber that triggers them."""

import logging
from typing import List

from klinecamp.core.enums import SoundCue, TradeSide
from klinecamp.core.events import (
    ClickEvent,
    QuizAnsweredEvent,
    SessionFinishedEvent,
    StoryEndedEvent,
    StoryStepEvent,
    TradeEvent,
)
from klinecamp.core.interfaces import BusParticipant, SoundPlayer

logger = logging.getLogger(__name__)


class NullSoundPlayer(SoundPlayer):
    """Silent player that only tracks the mute flag."""

    def __init__(self, muted: bool = False) -> None:
        self.muted = muted

    def play(self, cue: SoundCue) -> None:
        return

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted


class RecordingSoundPlayer(NullSoundPlayer):
    """Keeps the cues that would have been audible; used by tests and the CLI."""

    def __init__(self, muted: bool = False) -> None:
        super().__init__(muted)
        self.played: List[SoundCue] = []

    def play(self, cue: SoundCue) -> None:
        if self.muted:
            return
        self.played.append(cue)


class SoundFeedback(BusParticipant):
    """
    Maps game events to cues.

    Story steps play a click, then buy/sell for a cash gain/loss and a buzzer
    when health drops.
    """

    def __init__(self, player: SoundPlayer) -> None:
        super().__init__()
        self.player = player

    def on_start(self) -> None:
        self.bus.subscribe(ClickEvent, self._on_click)
        self.bus.subscribe(TradeEvent, self._on_trade)
        self.bus.subscribe(SessionFinishedEvent, self._on_finished)
        self.bus.subscribe(StoryStepEvent, self._on_story_step)
        self.bus.subscribe(StoryEndedEvent, self._on_story_end)
        self.bus.subscribe(QuizAnsweredEvent, self._on_quiz)

    def on_stop(self) -> None:
        self.bus.unsubscribe(ClickEvent, self._on_click)
        self.bus.unsubscribe(TradeEvent, self._on_trade)
        self.bus.unsubscribe(SessionFinishedEvent, self._on_finished)
        self.bus.unsubscribe(StoryStepEvent, self._on_story_step)
        self.bus.unsubscribe(StoryEndedEvent, self._on_story_end)
        self.bus.unsubscribe(QuizAnsweredEvent, self._on_quiz)

    def _play(self, cue: SoundCue) -> None:
        try:
            self.player.play(cue)
        except Exception:  # noqa: BLE001 - sound must never break a session
            logger.warning("Sound cue %s failed", cue.value, exc_info=True)

    def _on_click(self, event: ClickEvent) -> None:
        self._play(SoundCue.CLICK)

    def _on_trade(self, event: TradeEvent) -> None:
        self._play(SoundCue.BUY if event.side is TradeSide.BUY else SoundCue.SELL)

    def _on_finished(self, event: SessionFinishedEvent) -> None:
        if event.yield_rate > 0:
            self._play(SoundCue.WIN)

    def _on_story_step(self, event: StoryStepEvent) -> None:
        self._play(SoundCue.CLICK)
        if event.cash_delta > 0:
            self._play(SoundCue.BUY)
        if event.cash_delta < 0:
            self._play(SoundCue.SELL)
        if event.health_delta < 0:
            self._play(SoundCue.WRONG)

    def _on_story_end(self, event: StoryEndedEvent) -> None:
        self._play(SoundCue.WIN if event.won else SoundCue.LOSS)

    def _on_quiz(self, event: QuizAnsweredEvent) -> None:
        self._play(SoundCue.CORRECT if event.correct else SoundCue.WRONG)


__all__ = ["NullSoundPlayer", "RecordingSoundPlayer", "SoundFeedback"]
