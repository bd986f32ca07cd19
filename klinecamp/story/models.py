import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from klinecamp.core.enums import CashMode, LogKind

STAT_CAP = 100


@dataclass(frozen=True)
class PlayerStats:
    """
    Resource vector of one narrative run.

    ``cash`` may dip below zero after a cost; the engine turns that into the
    bankruptcy ending on the same step. ``insight`` and ``reputation`` are
    capped at 100 but have no floor.
    """

    cash: float
    health: int
    insight: int
    reputation: int
    turn: int = 1
    max_turn: int = 36


INITIAL_STATS = PlayerStats(cash=50_000.0, health=100, insight=0, reputation=0, turn=1, max_turn=36)


@dataclass(frozen=True)
class StatDelta:
    """
    Outcome of a choice.

    ``cash_mode`` says how ``cash_value`` combines with the running cash:
    ABSOLUTE replaces it, RELATIVE adds to it, NONE leaves it alone.
    The other fields are always additive.
    """

    cash_mode: CashMode = CashMode.NONE
    cash_value: float = 0.0
    health: int = 0
    insight: int = 0
    reputation: int = 0

    @classmethod
    def set_cash(cls, value: float, **others: int) -> "StatDelta":
        return cls(cash_mode=CashMode.ABSOLUTE, cash_value=value, **others)

    @classmethod
    def add_cash(cls, amount: float, **others: int) -> "StatDelta":
        return cls(cash_mode=CashMode.RELATIVE, cash_value=amount, **others)

    def apply_cash(self, cash: float) -> float:
        if self.cash_mode is CashMode.ABSOLUTE:
            return self.cash_value
        if self.cash_mode is CashMode.RELATIVE:
            return cash + self.cash_value
        return cash


Effect = Callable[[PlayerStats, random.Random], StatDelta]


def no_change(stats: PlayerStats, rng: random.Random) -> StatDelta:
    return StatDelta()


@dataclass(frozen=True)
class StoryChoice:
    text: str
    log_text: str
    effect: Effect = no_change
    req_insight: Optional[int] = None
    req_cash: Optional[float] = None
    req_reputation: Optional[int] = None
    cost: Optional[float] = None
    next_event_id: Optional[str] = None

    def is_hidden(self, stats: PlayerStats) -> bool:
        # Insight gates are secret: the option is not offered at all.
        return bool(self.req_insight) and stats.insight < self.req_insight  # type: ignore[operator]

    def is_locked(self, stats: PlayerStats) -> bool:
        if self.is_hidden(stats):
            return True
        if self.req_cash and stats.cash < self.req_cash:
            return True
        if self.req_reputation and stats.reputation < self.req_reputation:
            return True
        return False


@dataclass(frozen=True)
class StoryEvent:
    id: str
    text: str
    choices: Tuple[StoryChoice, ...]
    is_ending: bool = False


@dataclass(frozen=True)
class StoryEventInstance:
    """
    One appearance of a catalog event within a session.

    ``serial`` is monotonic per engine so repeated draws of the same template
    stay distinguishable without touching the template id.
    """

    event: StoryEvent
    serial: int

    @property
    def instance_id(self) -> str:
        return f"{self.event.id}#{self.serial}"

    @property
    def text(self) -> str:
        return self.event.text

    @property
    def choices(self) -> Tuple[StoryChoice, ...]:
        return self.event.choices

    @property
    def is_ending(self) -> bool:
        return self.event.is_ending


@dataclass(frozen=True)
class ChoiceOption:
    """A choice as offered to the player: visible, possibly locked."""

    index: int
    choice: StoryChoice
    locked: bool


@dataclass(frozen=True)
class StepResult:
    stats: PlayerStats
    next_event: StoryEventInstance
    delta: StatDelta = field(default_factory=StatDelta)
    cash_delta: float = 0.0
    health_delta: int = 0


@dataclass(frozen=True)
class LogEntry:
    text: str
    kind: LogKind
