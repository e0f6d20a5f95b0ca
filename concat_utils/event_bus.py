"""
Per-compilation log of build lifecycle events.
"""

import logging
import time
from collections import Counter
from typing import List, Dict, Any, Callable, Optional
from schemas import Event

logger = logging.getLogger(__name__)

EMIT_START = "emit_start"
EMIT_FAILED = "emit_failed"
ASSETS_WRITTEN = "assets_written"

BUILD_EVENTS = (EMIT_START, EMIT_FAILED, ASSETS_WRITTEN)


class EventBus:
    """Records what the compiler did during one compilation."""

    def __init__(self):
        self.events: List[Event] = []
        self.listeners: Dict[str, List[Callable[[Event], None]]] = {}

    def emit(self, event_type: str, actor: str, payload: Dict[str, Any]) -> Event:
        """Record a build event and notify its listeners."""
        if event_type not in BUILD_EVENTS:
            raise ValueError(f"Unknown build event '{event_type}'")

        event = Event(ts=time.time(), type=event_type, actor=actor, payload=payload)
        self.events.append(event)
        logger.debug(f"[{actor}] {event_type}: {payload}")

        for listener in self.listeners.get(event_type, []):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Listener for '{event_type}' failed")

        return event

    def subscribe(self, event_type: str, listener: Callable[[Event], None]):
        if event_type not in BUILD_EVENTS:
            raise ValueError(f"Unknown build event '{event_type}'")
        self.listeners.setdefault(event_type, []).append(listener)

    def get_events(self, event_type: Optional[str] = None) -> List[Event]:
        """Get events, optionally filtered by type."""
        if event_type is None:
            return list(self.events)
        return [e for e in self.events if e.type == event_type]

    def counts(self) -> Dict[str, int]:
        """Number of events recorded per type."""
        return dict(Counter(e.type for e in self.events))

    @property
    def failed(self) -> bool:
        return any(e.type == EMIT_FAILED for e in self.events)
