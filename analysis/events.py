"""
Event Model for the Object Pool Simulator.

Defines event types for tracking pool actions.
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class PoolEventType(Enum):
    """Types of events recorded by the pool."""
    CREATED = "created"
    REUSED = "reused"
    WAITING = "waiting"
    ACQUIRED_AFTER_WAIT = "acquired_after_wait"
    RELEASED = "released"
    CANCELLED = "cancelled"
    REJECTED_RELEASE = "rejected_release"


@dataclass
class PoolEvent:
    """
    Represents a single pool event.

    Attributes:
        sequence: Position of the event in the log (assigned by EventLog)
        event_type: Type of event
        worker: Name of the thread that triggered the event
        handle_id: Handle involved (None for WAITING/CANCELLED)
        in_use: Handles checked out right after the event
        idle: Handles idle right after the event
        timestamp: time.monotonic() value when the event occurred
        message: Human-readable description
    """
    event_type: PoolEventType
    worker: str
    in_use: int
    idle: int
    timestamp: float
    handle_id: Optional[int] = None
    message: str = ""
    sequence: int = -1

    def __str__(self) -> str:
        """Format event for logging."""
        base = f"#{self.sequence} {self.worker}"
        handle = f"conn-{self.handle_id}" if self.handle_id is not None else "-"

        if self.event_type == PoolEventType.CREATED:
            return f"{base} created {handle} (in use: {self.in_use})"
        elif self.event_type == PoolEventType.REUSED:
            return f"{base} reused {handle} (in use: {self.in_use}, idle: {self.idle})"
        elif self.event_type == PoolEventType.WAITING:
            return f"{base} waiting - pool exhausted (in use: {self.in_use})"
        elif self.event_type == PoolEventType.ACQUIRED_AFTER_WAIT:
            return f"{base} acquired {handle} after waiting"
        elif self.event_type == PoolEventType.RELEASED:
            return f"{base} released {handle} (idle: {self.idle})"
        elif self.event_type == PoolEventType.CANCELLED:
            return f"{base} - wait CANCELLED"
        elif self.event_type == PoolEventType.REJECTED_RELEASE:
            return f"{base} - release of {handle} REJECTED ({self.message})"
        else:
            return f"{base} - {self.event_type.value}: {self.message}"


@dataclass
class EventLog:
    """Thread-safe collection of pool events."""
    events: List[PoolEvent] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add(self, event: PoolEvent) -> None:
        """Add an event to the log, assigning its sequence number."""
        with self._lock:
            event.sequence = len(self.events)
            self.events.append(event)

    def get_events_by_type(self, event_type: PoolEventType) -> List[PoolEvent]:
        """Get all events of a specific type."""
        with self._lock:
            return [e for e in self.events if e.event_type == event_type]

    def get_events_by_worker(self, worker: str) -> List[PoolEvent]:
        """Get all events triggered by one worker thread."""
        with self._lock:
            return [e for e in self.events if e.worker == worker]

    def snapshot(self) -> List[PoolEvent]:
        """Copy of the events recorded so far."""
        with self._lock:
            return list(self.events)

    def __len__(self) -> int:
        with self._lock:
            return len(self.events)

    def display(self) -> str:
        """Format all events for display."""
        return "\n".join(str(event) for event in self.snapshot())
