"""
Graph state locking and transactions.

This module provides the mutual exclusion used by graph containers. A single
lock guards a whole graph instance: mutations run inside transaction(), read
queries inside read(), so a query never sees a mutation half applied and the
check-then-act sequences of a mutation cannot interleave with another one.
"""

import logging
from collections import deque
from contextlib import contextmanager
from threading import Lock, RLock
from typing import Any, Deque, Dict, Generator, List, Optional, Tuple

from .events import GraphEvent, GraphEventDetails, GraphEventManager

logger = logging.getLogger(__name__)

PendingEvents = List[Tuple[GraphEvent, GraphEventDetails]]


class GraphStateManager:
    """
    Serializes access to a graph's state.

    Events queued during a transaction are delivered once the transaction
    has committed and the lock has been released, in commit order across
    all threads. An aborted transaction delivers nothing.

    Attributes:
        _lock (RLock): Lock guarding the graph instance
        _event_manager (GraphEventManager): Receives committed events
        _commits (int): Number of committed transactions
        _queue (Deque): Rendered events awaiting delivery, in commit order
    """

    def __init__(self, event_manager: Optional[GraphEventManager] = None):
        """
        Initialize the state manager.

        Args:
            event_manager (Optional[GraphEventManager]): Event manager to
                notify after each commit. If None, creates a new one.
        """
        self._lock = RLock()
        self._event_manager = event_manager if event_manager is not None else GraphEventManager()
        self._commits = 0
        self._queue: Deque[Tuple[GraphEvent, Dict[str, Any]]] = deque()
        self._queue_lock = Lock()
        self._delivering = False

    @property
    def event_manager(self) -> GraphEventManager:
        return self._event_manager

    @property
    def commits(self) -> int:
        """Number of transactions committed so far."""
        with self._lock:
            return self._commits

    @contextmanager
    def read(self) -> Generator[None, None, None]:
        """Context manager for read-only access to the graph state."""
        with self._lock:
            yield

    @contextmanager
    def transaction(self) -> Generator[PendingEvents, None, None]:
        """
        Context manager for a graph mutation.

        The body validates its arguments before changing anything, so an
        exception raised inside the transaction leaves the state untouched;
        it is propagated unchanged and the queued events are discarded.

        On commit the queued events are rendered and appended to the
        delivery queue while the lock is still held, so their details show
        the state as of this transaction and the queue is in commit order.

        Yields:
            PendingEvents: List to which the body appends (event, details)
                pairs for delivery after commit
        """
        pending: PendingEvents = []
        with self._lock:
            try:
                yield pending
            except Exception as e:
                logger.debug(f"Transaction aborted: {e}")
                raise
            self._commits += 1
            with self._queue_lock:
                self._queue.extend((event, details.to_dict()) for event, details in pending)

        self._deliver()

    def _deliver(self) -> None:
        """
        Drain the delivery queue, unless another call is already draining it.

        Listeners run without the graph lock held. A mutation made by a
        listener, or by another thread while events are being delivered,
        only queues its events; the active drain delivers them in order.
        """
        with self._queue_lock:
            if self._delivering:
                return
            self._delivering = True

        while True:
            with self._queue_lock:
                if not self._queue:
                    self._delivering = False
                    return
                event, details = self._queue.popleft()
            try:
                self._event_manager.notify(event, details)
            except BaseException:
                with self._queue_lock:
                    self._delivering = False
                raise
