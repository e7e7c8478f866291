"""
Bounded Resource Pool for the Object Pool Simulator.

Hands out reusable Handles to concurrent worker threads under a fixed
capacity. Idle handles are reused before new ones are created, and a
borrower blocks when every created handle is checked out and the pool
is at capacity.
"""

import threading
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterator, List, Optional, Union

from models.handle import Handle, HandleState
from analysis.events import EventLog, PoolEvent, PoolEventType
from utils.logger import DemoLogger


class PoolError(Exception):
    """Base class for pool errors."""
    pass


class PoolConfigurationError(PoolError):
    """Raised when a pool is constructed with an invalid capacity."""
    pass


class PoolUsageError(PoolError):
    """Raised when a caller misuses the pool (invalid release)."""
    pass


class DoubleReleaseError(PoolUsageError):
    """Raised when a handle is released while it is already idle."""
    pass


class ForeignHandleError(PoolUsageError):
    """Raised when releasing a handle that this pool never handed out."""
    pass


class AcquireCancelled(PoolError):
    """Raised in a blocked acquire() whose CancellationToken was cancelled."""
    pass


class CancellationToken:
    """
    Cooperative cancellation for blocked acquire() calls.

    A token can be shared by several waiters (and several pools).
    cancel() wakes every waiter registered with the token; each of them
    abandons its wait and raises AcquireCancelled.
    """

    def __init__(self):
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._conditions: List[threading.Condition] = []

    @property
    def cancelled(self) -> bool:
        """True once cancel() has been called."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Cancel the token and wake all waiters registered with it."""
        with self._lock:
            self._event.set()
            conditions = list(self._conditions)

        for condition in conditions:
            with condition:
                condition.notify_all()

    def _register(self, condition: threading.Condition) -> None:
        with self._lock:
            self._conditions.append(condition)

    def _unregister(self, condition: threading.Condition) -> None:
        with self._lock:
            self._conditions.remove(condition)


@dataclass
class PoolSnapshot:
    """
    Point-in-time view of the pool.

    Attributes:
        max_size: Configured capacity
        created_count: Handles created so far
        idle_ids: Identifiers of idle handles (in reuse order)
        checked_out_ids: Identifiers of checked-out handles (sorted)
        waiting: Number of callers blocked in acquire()
    """
    max_size: int
    created_count: int
    idle_ids: List[int] = field(default_factory=list)
    checked_out_ids: List[int] = field(default_factory=list)
    waiting: int = 0

    def display(self) -> str:
        """
        Generate readable string representation of the pool.

        Returns:
            Formatted multi-line string
        """
        output = []
        output.append("="*60)
        output.append("POOL STATE")
        output.append("="*60)
        output.append(f"  Capacity:    {self.max_size}")
        output.append(f"  Created:     {self.created_count}")
        output.append(f"  Idle:        {[f'conn-{i}' for i in self.idle_ids]}")
        output.append(f"  Checked out: {[f'conn-{i}' for i in self.checked_out_ids]}")
        output.append(f"  Waiting:     {self.waiting}")
        output.append("="*60)
        return "\n".join(output)


class BoundedResourcePool:
    """
    Capacity-bounded pool of reusable Handles.

    acquire() serves requests in strict priority order:
    1. Reuse an idle handle (no blocking, no allocation)
    2. Create a new handle if created_count < max_size
    3. Block until a release() makes a handle idle

    A single lock guards created_count, the idle collection and the
    per-handle state table, so "capacity available?" and "increment +
    construct" happen as one step. Every release() notifies at most one
    blocked waiter. No ordering is guaranteed among waiters.

    Attributes:
        max_size: Fixed capacity (>= 1)
        created_count: Handles created so far (<= max_size)
    """

    def __init__(
        self,
        max_size: int,
        event_log: Optional[EventLog] = None,
        logger: Optional[DemoLogger] = None
    ):
        """
        Initialize pool.

        Args:
            max_size: Maximum number of handles the pool may create
            event_log: Optional log receiving a PoolEvent per pool action
            logger: Optional logger for worker-by-worker output

        Raises:
            PoolConfigurationError: If max_size is not a positive integer
        """
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise PoolConfigurationError(
                f"max_size must be an integer, got {type(max_size).__name__}"
            )
        if max_size <= 0:
            raise PoolConfigurationError(f"max_size must be >= 1, got {max_size}")

        self._max_size = max_size
        self._created_count = 0
        self._idle: Deque[Handle] = deque()
        self._handles: Dict[int, Handle] = {}
        self._states: Dict[int, HandleState] = {}
        self._waiting = 0

        self._lock = threading.Lock()
        self._available = threading.Condition(self._lock)

        self.event_log = event_log
        self.logger = logger

    @property
    def max_size(self) -> int:
        """Configured capacity."""
        return self._max_size

    @property
    def created_count(self) -> int:
        """Number of handles created so far."""
        with self._lock:
            return self._created_count

    @property
    def idle_count(self) -> int:
        """Number of handles available for reuse."""
        with self._lock:
            return len(self._idle)

    @property
    def in_use_count(self) -> int:
        """Number of handles currently checked out."""
        with self._lock:
            return self._created_count - len(self._idle)

    @property
    def waiting_count(self) -> int:
        """Number of callers currently blocked in acquire()."""
        with self._lock:
            return self._waiting

    def acquire(self, cancel_token: Optional[CancellationToken] = None) -> Handle:
        """
        Borrow a handle, blocking while the pool is exhausted.

        Args:
            cancel_token: Optional token; cancelling it abandons a blocked wait

        Returns:
            A handle exclusively owned by the caller until release()

        Raises:
            AcquireCancelled: If cancel_token is cancelled while waiting
        """
        worker = threading.current_thread().name

        with self._available:
            # Case 1: reuse an idle handle
            if self._idle:
                handle = self._checkout_idle()
                self._record(PoolEventType.REUSED, worker, handle)
                if self.logger:
                    self.logger.log_acquire(worker, handle.handle_id, "reused")
                return handle

            # Case 2: create a new handle, check and increment under one lock
            if self._created_count < self._max_size:
                self._created_count += 1
                handle = Handle(self._created_count)
                self._handles[handle.handle_id] = handle
                self._states[handle.handle_id] = HandleState.CHECKED_OUT
                self._record(PoolEventType.CREATED, worker, handle)
                if self.logger:
                    self.logger.log_acquire(worker, handle.handle_id, "created")
                return handle

            # Case 3: exhausted
            return self._wait_for_idle(worker, cancel_token)

    def release(self, handle: Optional[Handle]) -> None:
        """
        Return a handle to the pool and wake at most one waiter.

        Args:
            handle: Handle previously obtained from acquire(); None is a no-op

        Raises:
            ForeignHandleError: If the handle was not created by this pool
            DoubleReleaseError: If the handle is already idle
        """
        if handle is None:
            return

        worker = threading.current_thread().name

        with self._available:
            if not isinstance(handle, Handle) or self._handles.get(handle.handle_id) is not handle:
                message = f"{handle!r} was not handed out by this pool"
                self._reject_release(worker, handle, message)
                raise ForeignHandleError(message)

            if self._states[handle.handle_id] is HandleState.IDLE:
                message = f"{handle} is already idle"
                self._reject_release(worker, handle, message)
                raise DoubleReleaseError(message)

            self._states[handle.handle_id] = HandleState.IDLE
            self._idle.append(handle)
            self._record(PoolEventType.RELEASED, worker, handle)
            if self.logger:
                self.logger.log_release(worker, handle.handle_id, len(self._idle))

            self._available.notify()

    @contextmanager
    def borrow(self, cancel_token: Optional[CancellationToken] = None) -> Iterator[Handle]:
        """
        Context manager around acquire()/release().

        Example:
            with pool.borrow() as conn:
                conn.query("SELECT 1")
        """
        handle = self.acquire(cancel_token)
        try:
            yield handle
        finally:
            self.release(handle)

    def state_of(self, handle: Union[Handle, int]) -> HandleState:
        """
        Get the pool-side state of a handle.

        Args:
            handle: Handle or handle identifier

        Returns:
            UNCREATED for identifiers the pool has not reached yet
        """
        handle_id = handle.handle_id if isinstance(handle, Handle) else handle
        with self._lock:
            return self._states.get(handle_id, HandleState.UNCREATED)

    def snapshot(self) -> PoolSnapshot:
        """Create a consistent snapshot of the pool."""
        with self._lock:
            return PoolSnapshot(
                max_size=self._max_size,
                created_count=self._created_count,
                idle_ids=[h.handle_id for h in self._idle],
                checked_out_ids=sorted(
                    hid for hid, state in self._states.items()
                    if state is HandleState.CHECKED_OUT
                ),
                waiting=self._waiting
            )

    def assert_handle_conservation(self, context: str = "") -> None:
        """Verify handle conservation: checked out + idle = created <= max_size.

        Args:
            context: Description of when this check is being run (for error messages)

        Raises:
            AssertionError: If conservation is violated
        """
        snap = self.snapshot()
        checked_out = len(snap.checked_out_ids)
        idle = len(snap.idle_ids)

        assert checked_out + idle == snap.created_count, (
            f"Handle conservation violated {context}\n"
            f"  Checked out: {checked_out}, Idle: {idle}, Created: {snap.created_count}\n"
            f"  Checked out + Idle = {checked_out + idle} != {snap.created_count}"
        )

        assert snap.created_count <= snap.max_size, (
            f"Capacity exceeded {context}\n"
            f"  Created: {snap.created_count}, Max size: {snap.max_size}"
        )

        assert len(set(snap.idle_ids)) == idle, (
            f"Handle listed twice in idle collection {context}: {snap.idle_ids}"
        )

    def _wait_for_idle(self, worker: str, cancel_token: Optional[CancellationToken]) -> Handle:
        """Block until a handle is idle. Caller must hold the pool lock."""
        self._record(PoolEventType.WAITING, worker, None)
        if self.logger:
            self.logger.log_wait(worker, self._created_count - len(self._idle), self._max_size)

        if cancel_token is not None:
            cancel_token._register(self._available)
        self._waiting += 1
        try:
            while True:
                if cancel_token is not None and cancel_token.cancelled:
                    # Pass on a wakeup this waiter may have absorbed
                    if self._idle:
                        self._available.notify()
                    self._record(PoolEventType.CANCELLED, worker, None)
                    if self.logger:
                        self.logger.log_worker(worker, "wait cancelled", "warning")
                    raise AcquireCancelled(f"{worker}: acquire cancelled while waiting")
                if self._idle:
                    break
                self._available.wait()
        finally:
            self._waiting -= 1
            if cancel_token is not None:
                cancel_token._unregister(self._available)

        handle = self._checkout_idle()
        self._record(PoolEventType.ACQUIRED_AFTER_WAIT, worker, handle)
        if self.logger:
            self.logger.log_acquire(worker, handle.handle_id, "after wait")
        return handle

    def _checkout_idle(self) -> Handle:
        handle = self._idle.popleft()
        self._states[handle.handle_id] = HandleState.CHECKED_OUT
        return handle

    def _reject_release(self, worker: str, handle, message: str) -> None:
        handle_id = handle.handle_id if isinstance(handle, Handle) else None
        if self.event_log is not None:
            self.event_log.add(PoolEvent(
                event_type=PoolEventType.REJECTED_RELEASE,
                worker=worker,
                in_use=self._created_count - len(self._idle),
                idle=len(self._idle),
                timestamp=time.monotonic(),
                handle_id=handle_id,
                message=message
            ))
        if self.logger:
            self.logger.log_worker(worker, f"release rejected: {message}", "error")

    def _record(self, event_type: PoolEventType, worker: str, handle: Optional[Handle]) -> None:
        """Append an event with the counts as they are right now. Caller holds the lock."""
        if self.event_log is None:
            return
        self.event_log.add(PoolEvent(
            event_type=event_type,
            worker=worker,
            in_use=self._created_count - len(self._idle),
            idle=len(self._idle),
            timestamp=time.monotonic(),
            handle_id=handle.handle_id if handle is not None else None
        ))

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"BoundedResourcePool(max_size={self._max_size}, "
            f"created={self._created_count}, idle={len(self._idle)})"
        )
