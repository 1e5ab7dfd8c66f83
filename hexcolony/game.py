"""A game session and the process-wide holder of the running game."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from hexcolony.clock import Clock
from hexcolony.map import Map


@dataclass(frozen=True)
class Configuration:
    """Map size and how fragmented the islands are."""

    rows: int
    columns: int
    island_noise: float


class Game:
    """A clock and a map built from a configuration."""

    def __init__(self, configuration: Configuration) -> None:
        self._configuration = configuration
        self._clock = Clock()
        self._map = Map(
            self._clock,
            configuration.rows,
            configuration.columns,
            configuration.island_noise,
        )

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def map(self) -> Map:
        return self._map

    @property
    def clock(self) -> Clock:
        return self._clock


class GameController:
    """Holds the one running game."""

    _instance: Optional[Game] = None
    _lock = threading.Lock()

    @classmethod
    def start(cls, configuration: Configuration) -> None:
        """Replace the running game with a new one."""
        game = Game(configuration)
        with cls._lock:
            cls._instance = game

    @classmethod
    def game(cls) -> Optional[Game]:
        """The running game, or None before one is started."""
        with cls._lock:
            return cls._instance