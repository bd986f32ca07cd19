from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from .enums import SoundCue
from .event_bus import EventBus
from .models import HistoryRecord

__all__ = [
    "BusParticipant",
    "Clock",
    "SoundPlayer",
    "HistoryStore",
    "TipProvider",
]


class BusParticipant(ABC):
    """
    Base class for components that need access to the event bus.
    """

    def __init__(self) -> None:
        self._bus: Optional[EventBus] = None

    def bind(self, bus: EventBus) -> None:
        self._bus = bus

    @property
    def bus(self) -> EventBus:
        if self._bus is None:
            raise RuntimeError("Component not bound to an EventBus.")
        return self._bus

    def on_start(self) -> None:
        """
        Lifecycle hook invoked when the owning session starts.
        """

    def on_stop(self) -> None:
        """
        Lifecycle hook invoked once the owning session ends.
        """


class Clock(ABC):
    """
    Source of wall-clock time for timestamps and history ids.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Return the current time.
        """


class SoundPlayer(ABC):
    """
    Plays short feedback cues; implementations must never raise.
    """

    @abstractmethod
    def play(self, cue: SoundCue) -> None:
        """
        Play the cue unless muted.
        """

    @abstractmethod
    def toggle_mute(self) -> bool:
        """
        Flip the mute flag and return the new state.
        """


class HistoryStore(ABC):
    """
    Append-only store of completed simulations, newest first on read.
    """

    @abstractmethod
    def append(self, record: HistoryRecord) -> None:
        """
        Persist one record.
        """

    @abstractmethod
    def list(self) -> List[HistoryRecord]:
        """
        Return every record, newest first.
        """

    @abstractmethod
    def clear(self) -> None:
        """
        Drop every record in the store's namespace.
        """


class TipProvider(ABC):
    """
    Source of short flavor text shown between sessions.
    """

    @abstractmethod
    def tip(self) -> str:
        """
        Return one tip; must not raise.
        """
