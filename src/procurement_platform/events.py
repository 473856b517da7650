"""
Append-only audit event log.
Events live in memory; an optional JSON Lines file mirrors each append.
"""

import logging
import os
from typing import Iterator, List, Optional, Tuple

from .config import settings
from .models import Event

logger = logging.getLogger(__name__)


class EventLog:
    """Ordered, append-only sequence of timestamped messages."""

    def __init__(self, log_file: Optional[str] = None):
        self.log_file = log_file if log_file is not None else settings.EVENT_LOG_FILE
        self._events: List[Event] = []
        if self.log_file:
            self._ensure_log_dir()

    def _ensure_log_dir(self):
        """Ensure the directory for the mirror file exists."""
        directory = os.path.dirname(self.log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(tuple(self._events))

    @property
    def events(self) -> Tuple[Event, ...]:
        """Snapshot of all events in append order."""
        return tuple(self._events)

    def append(self, timestamp: int, message: str) -> Event:
        """Record an event and mirror it to the log file if one is configured."""
        event = Event(timestamp=timestamp, message=message)
        self._events.append(event)
        if self.log_file:
            self._write(event)
        return event

    def _write(self, event: Event):
        """Append one event as a JSON line. Failures are logged, not raised."""
        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(event.model_dump_json() + "\n")
        except OSError as e:
            logger.error(f"Error writing to event log file: {e}")
