"""A cache of three layers that promotes entries on use and drops stale ones."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Callable, Generic, Hashable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class StackedLRU(Generic[K, V]):
    """Approximate LRU cache made of a promotion, a basic and a demotion layer.

    New and recently hit entries live in the promotion layer. When the cache
    is full, layers are pushed down one level at a time and whatever falls
    out of the demotion layer is forgotten. A hit in a lower layer moves the
    entry one layer up.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._promotion: dict[K, V] = {}
        self._basic: dict[K, V] = {}
        self._demotion: dict[K, V] = {}
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def promotion_layer(self) -> Mapping[K, V]:
        return MappingProxyType(self._promotion)

    @property
    def basic_layer(self) -> Mapping[K, V]:
        return MappingProxyType(self._basic)

    @property
    def demotion_layer(self) -> Mapping[K, V]:
        return MappingProxyType(self._demotion)

    def __len__(self) -> int:
        with self._lock:
            return len(self._promotion) + len(self._basic) + len(self._demotion)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._promotion or key in self._basic or key in self._demotion

    def reference(self, key: K, gen_value: Callable[[K], V]) -> V:
        """Return the cached value for ``key``, creating it with ``gen_value`` if absent."""
        with self._lock:
            if key in self._promotion:
                return self._promotion[key]
            if key in self._basic:
                value = self._basic.pop(key)
                self._promotion[key] = value
                return value
            if key in self._demotion:
                value = self._demotion.pop(key)
                self._basic[key] = value
                return value

            value = gen_value(key)
            while True:
                if len(self) < self._capacity:
                    self._promotion[key] = value
                    return value
                if len(self._demotion) > 1:
                    # the demotion layer gives up an arbitrary entry
                    del self._demotion[next(iter(self._demotion))]
                    self._promotion[key] = value
                    return value
                # push every layer down; the old demotion layer is dropped
                self._demotion, self._basic, self._promotion = (
                    self._basic,
                    self._promotion,
                    {},
                )