"""Publish/subscribe channels that deliver events on a background thread."""

from __future__ import annotations

import itertools
import logging
import queue
import threading
import weakref
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

E = TypeVar("E")

_log = logging.getLogger(__name__)
_registration_ids = itertools.count()
_STOP = object()


class _Observer(Protocol):
    def notify(self, event: Any) -> None: ...


@dataclass(frozen=True)
class ObserverRegistration:
    """Handle returned by :meth:`Observers.register`; equal only to itself."""

    id: int
    ref: weakref.ref = field(compare=False, repr=False)


class _Dispatcher:
    """State shared with the delivery thread; holds no reference to its owner."""

    def __init__(self, capacity: int) -> None:
        self.queue: queue.Queue = queue.Queue(maxsize=capacity)
        self.registrations: dict[int, ObserverRegistration] = {}
        self.lock = threading.Lock()
        self.idle = threading.Condition()
        self.pending = 0

    def submit(self, event: Any) -> None:
        with self.idle:
            self.pending += 1
        self.queue.put(event)

    def stop(self) -> None:
        self.queue.put(_STOP)

    def run(self) -> None:
        while True:
            event = self.queue.get()
            if event is _STOP:
                return
            try:
                self._dispatch(event)
            finally:
                with self.idle:
                    self.pending -= 1
                    self.idle.notify_all()

    def _dispatch(self, event: Any) -> None:
        with self.lock:
            registrations = list(self.registrations.values())
        for registration in registrations:
            observer = registration.ref()
            if observer is None:
                # the observer has been garbage collected
                with self.lock:
                    self.registrations.pop(registration.id, None)
                continue
            try:
                observer.notify(event)
            except Exception:
                _log.exception("observer failed to handle %r", event)


class Observers(Generic[E]):
    """A set of weakly held observers notified asynchronously of published events.

    Observers are objects with a ``notify(event)`` method. They are held by weak
    reference, so an observer that is garbage collected drops out by itself.
    """

    def __init__(self, capacity: int = 100) -> None:
        self._dispatcher = _Dispatcher(capacity)
        threading.Thread(
            target=self._dispatcher.run, name="observers", daemon=True
        ).start()
        weakref.finalize(self, self._dispatcher.stop)

    def register(self, observer: _Observer) -> ObserverRegistration:
        """Register an observer and return the handle needed to deregister it."""
        registration = ObserverRegistration(
            next(_registration_ids), weakref.ref(observer)
        )
        with self._dispatcher.lock:
            self._dispatcher.registrations[registration.id] = registration
        return registration

    def deregister(self, registration: ObserverRegistration) -> bool:
        """Remove a registration; return whether it was still present."""
        with self._dispatcher.lock:
            return self._dispatcher.registrations.pop(registration.id, None) is not None

    def publish(self, event: E) -> None:
        """Queue an event for delivery, blocking while the queue is full."""
        self._dispatcher.submit(event)

    def flush(self, timeout: float | None = None) -> bool:
        """Wait until every published event has been delivered.

        Returns False if the timeout ran out first.
        """
        dispatcher = self._dispatcher
        with dispatcher.idle:
            return dispatcher.idle.wait_for(lambda: dispatcher.pending == 0, timeout)