"""Turn-based state machine behind the trader's-life mode."""

import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from klinecamp.errors import ConfigurationError

from .catalog import BANKRUPTCY, ENDING_EVENTS, HOSPITAL, RANDOM_EVENTS, RETIREMENT, START_EVENT
from .models import (
    STAT_CAP,
    INITIAL_STATS,
    ChoiceOption,
    PlayerStats,
    StatDelta,
    StepResult,
    StoryChoice,
    StoryEvent,
    StoryEventInstance,
)

logger = logging.getLogger(__name__)


def apply_delta(stats: PlayerStats, delta: StatDelta) -> PlayerStats:
    """Combine ``delta`` with already cost-adjusted ``stats`` and clamp.

    Health is clamped to [0, 100]; insight and reputation only to <= 100.
    The turn counter is not touched here.
    """
    return replace(
        stats,
        cash=delta.apply_cash(stats.cash),
        health=min(STAT_CAP, max(0, stats.health + delta.health)),
        insight=min(STAT_CAP, stats.insight + delta.insight),
        reputation=min(STAT_CAP, stats.reputation + delta.reputation),
    )


def ending_for(stats: PlayerStats) -> Optional[StoryEvent]:
    """Terminal event for ``stats``; bankruptcy beats hospital beats retirement."""
    if stats.cash <= 0:
        return ENDING_EVENTS[BANKRUPTCY]
    if stats.health <= 0:
        return ENDING_EVENTS[HOSPITAL]
    if stats.turn > stats.max_turn:
        return ENDING_EVENTS[RETIREMENT]
    return None


class NarrativeEngine:
    """
    Advances :class:`PlayerStats` one choice at a time.

    The engine trusts its caller: gating (``req_*``) is exposed through
    :meth:`eligible_choices` but not re-checked by :meth:`step`. Randomness
    comes only from ``rng`` (random effects and the next-event draw).
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        events: Optional[Sequence[StoryEvent]] = None,
        initial_stats: PlayerStats = INITIAL_STATS,
    ) -> None:
        self._rng = rng or random.Random()
        self._events = tuple(RANDOM_EVENTS if events is None else events)
        if not self._events:
            raise ConfigurationError("NarrativeEngine needs at least one random event")
        self._by_id: Dict[str, StoryEvent] = {event.id: event for event in self._events}
        self.initial_stats = initial_stats
        self._serial = 0

    def start(self) -> StoryEventInstance:
        """Reset the instance counter and return the fixed opening event."""
        self._serial = 0
        return StoryEventInstance(event=START_EVENT, serial=0)

    def _instance(self, event: StoryEvent) -> StoryEventInstance:
        self._serial += 1
        return StoryEventInstance(event=event, serial=self._serial)

    @staticmethod
    def eligible_choices(stats: PlayerStats, event: StoryEvent) -> List[ChoiceOption]:
        """Choices to offer; insight-gated ones are hidden, other gates lock."""
        return [
            ChoiceOption(index=index, choice=choice, locked=choice.is_locked(stats))
            for index, choice in enumerate(event.choices)
            if not choice.is_hidden(stats)
        ]

    def apply_choice(self, stats: PlayerStats, choice: StoryChoice) -> tuple[PlayerStats, StatDelta]:
        """Cost, effect, clamp and turn advance, without picking the next event."""
        running = replace(stats, cash=stats.cash - (choice.cost or 0))
        delta = choice.effect(running, self._rng)
        updated = apply_delta(running, delta)
        return replace(updated, turn=stats.turn + 1), delta

    def select_next_event(self, stats: PlayerStats, choice: Optional[StoryChoice] = None) -> StoryEventInstance:
        ending = ending_for(stats)
        if ending is not None:
            return self._instance(ending)
        if choice is not None and choice.next_event_id:
            target = self._by_id.get(choice.next_event_id)
            if target is None:
                raise ConfigurationError(f"Unknown next_event_id: {choice.next_event_id}")
            return self._instance(target)
        return self._instance(self._rng.choice(self._events))

    def step(self, stats: PlayerStats, choice: StoryChoice) -> StepResult:
        new_stats, delta = self.apply_choice(stats, choice)
        next_event = self.select_next_event(new_stats, choice)
        logger.debug(
            "turn %d -> %d choice=%r next=%s", stats.turn, new_stats.turn, choice.text, next_event.instance_id
        )
        return StepResult(
            stats=new_stats,
            next_event=next_event,
            delta=delta,
            cash_delta=new_stats.cash - stats.cash,
            health_delta=new_stats.health - stats.health,
        )
