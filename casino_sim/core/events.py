"""
Betting events published by the controller.

Every ledger change made by a round or a deposit is announced on an
EventBus. Observers (loggers, audit trails, tests) read the published
events; they never take part in settling a round.
"""

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, DefaultDict, Deque, Dict, List, Optional


class EventType(Enum):
    """Kinds of ledger activity announced on the bus."""

    BET_PLACED = "bet_placed"
    ROUND_RESOLVED = "round_resolved"
    ROUND_ABORTED = "round_aborted"
    DEPOSIT_MADE = "deposit_made"


@dataclass(frozen=True)
class BettingEvent:
    """One published event.

    Attributes:
        event_type: What happened
        data: Amounts and identifiers describing it
        timestamp: Creation time, filled in automatically
    """

    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


EventListener = Callable[[BettingEvent], None]


class EventBus:
    """Synchronous publish/subscribe hub owned by a single controller.

    Listeners run in subscription order on the publishing call. A listener
    that raises is logged and skipped. The most recent events are retained
    for inspection.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_history: int = 1000):
        self._logger = logger or logging.getLogger(__name__)
        self._subscribers: DefaultDict[EventType, List[EventListener]] = defaultdict(list)
        self._history: Deque[BettingEvent] = deque(maxlen=max_history)

    def subscribe(self, event_type: EventType, listener: EventListener) -> None:
        self._subscribers[event_type].append(listener)

    def unsubscribe(self, event_type: EventType, listener: EventListener) -> bool:
        """Remove a listener.

        Returns:
            False when the listener was not subscribed to event_type
        """
        listeners = self._subscribers.get(event_type)
        if not listeners or listener not in listeners:
            return False
        listeners.remove(listener)
        return True

    def emit(self, event: BettingEvent) -> None:
        """Record an event and deliver it to its subscribers."""
        self._history.append(event)

        for listener in list(self._subscribers.get(event.event_type, ())):
            try:
                listener(event)
            except Exception:
                self._logger.exception(f"Listener {listener!r} failed on {event.event_type.value}")

    def emit_simple(self, event_type: EventType, **data) -> None:
        """Build and emit an event from keyword data."""
        self.emit(BettingEvent(event_type=event_type, data=data))

    def get_listeners_count(self, event_type: EventType) -> int:
        return len(self._subscribers.get(event_type, ()))

    def get_event_history(self, event_type: Optional[EventType] = None,
                          limit: Optional[int] = None) -> List[BettingEvent]:
        """Return retained events, oldest first.

        Args:
            event_type: Only events of this type
            limit: Only the newest `limit` matching events
        """
        events = [e for e in self._history if event_type is None or e.event_type == event_type]
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return events

    def clear_history(self) -> None:
        self._history.clear()
