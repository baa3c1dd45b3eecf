"""
Observable container for the cached list of events.

Only :meth:`EventClient.fetch_events` writes to the cache: it replaces
the whole list after a successful fetch and empties it after a failed
one.  Readers either take a snapshot or subscribe to be called after
every replacement.
"""

import logging
import threading
from typing import Any, Callable, Dict, Iterator, List

logger = logging.getLogger(__name__)

Listener = Callable[[List[Dict[str, Any]]], None]


class EventCache:
    """Ordered list of events with change notification."""

    def __init__(self) -> None:
        self._events: List[Dict[str, Any]] = []
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    @property
    def events(self) -> List[Dict[str, Any]]:
        """A copy of the cached events in server order."""
        return list(self._events)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self._events)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def replace(self, events: List[Dict[str, Any]]) -> None:
        """Swap in a new list of events and notify listeners."""
        with self._lock:
            self._events = list(events)
            snapshot = list(self._events)
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as exc:
                logger.error("Event cache listener %r failed: %s", listener, exc)

    def clear(self) -> None:
        self.replace([])
