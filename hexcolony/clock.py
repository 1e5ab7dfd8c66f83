"""The game clock: each tick publishes a Tick and then a Tock."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from hexcolony.observable import Observers


@dataclass(frozen=True, order=True)
class Tick:
    """First phase of a clock step."""

    epoch: int


@dataclass(frozen=True, order=True)
class Tock:
    """Second phase of a clock step, following the tick of the same epoch."""

    epoch: int


class Clock:
    """Counts epochs and notifies tick and tock observers."""

    def __init__(self) -> None:
        self._epoch = 0
        self._lock = threading.Lock()
        self.tickers: Observers[Tick] = Observers()
        self.tockers: Observers[Tock] = Observers()

    @property
    def epoch(self) -> int:
        with self._lock:
            return self._epoch

    def tick(self) -> None:
        """Advance one epoch and publish its Tick and Tock."""
        with self._lock:
            self._epoch += 1
            epoch = self._epoch
        tick = Tick(epoch)
        self.tickers.publish(tick)
        self.tockers.publish(Tock(tick.epoch))