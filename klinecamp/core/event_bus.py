from collections import defaultdict, deque
from typing import Callable, Deque, Dict, List, Type, TypeVar

from .events import Event

EventHandler = Callable[[Event], None]
E = TypeVar("E", bound=Event)


class EventBus:
    """
    Synchronous FIFO bus shared by a game session and its participants.

    Sessions publish while they update state and flush once the action is
    complete, so one player action is fully handled before the next one.
    A handler registered for a base class also sees its subclasses.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[Type[Event], List[EventHandler]] = defaultdict(list)
        self._queue: Deque[Event] = deque()
        self._dispatching = False
        self._resolved: Dict[Type[Event], List[EventHandler]] = {}

    def subscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        self._subscribers[event_type].append(handler)  # type: ignore[arg-type]
        self._resolved.clear()

    def unsubscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        """
        Remove a callback; unknown handlers are ignored so teardown can run twice.
        """

        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)  # type: ignore[arg-type]
            self._resolved.clear()

    def publish(self, event: Event) -> None:
        self._queue.append(event)

    def emit(self, event: Event) -> None:
        """
        Publish and flush in one call, for single-event actions.
        """

        self.publish(event)
        self.dispatch()

    def _handlers_for(self, event_cls: Type[Event]) -> List[EventHandler]:
        handlers = self._resolved.get(event_cls)
        if handlers is None:
            handlers = [
                handler
                for event_type, registered in self._subscribers.items()
                if issubclass(event_cls, event_type)
                for handler in registered
            ]
            self._resolved[event_cls] = handlers
        return handlers

    def dispatch(self) -> None:
        """
        Deliver queued events in order, including ones published by handlers.

        A nested call from inside a handler returns at once; the outer loop
        picks up whatever was queued.
        """

        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                event = self._queue.popleft()
                for handler in list(self._handlers_for(type(event))):
                    handler(event)
        finally:
            self._dispatching = False

    @property
    def pending(self) -> int:
        return len(self._queue)
