"""Sequential player sources consumed by the online ranker.

A stream is one-shot and forward-only: callers check ``remaining()`` before
each ``next_player()`` and cannot rewind once a player has been produced.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import numpy as np

from leaderboard.errors import ConfigError, StreamExhaustedError
from leaderboard.players import Player
from leaderboard.population import DEFAULT_MAX_LEVEL, DEFAULT_MIN_LEVEL, player_name


class PlayerStream(Protocol):
    """Forward-only provider of players with a countable remaining size."""

    def remaining(self) -> int:
        """Number of players still to be read (never increases)."""
        ...

    def next_player(self) -> Player:
        """Produce the next player.

        Raises:
            StreamExhaustedError: If ``remaining()`` is zero.
        """
        ...


class VectorPlayerStream:
    """Replays a fixed sequence of players in order.

    The sequence is copied on construction, so later changes to the caller's
    list do not affect the stream.
    """

    def __init__(self, players: Sequence[Player]) -> None:
        self._players = list(players)
        self._index = 0

    def next_player(self) -> Player:
        if self._index >= len(self._players):
            raise StreamExhaustedError(self._index)
        player = self._players[self._index]
        self._index += 1
        return player

    def remaining(self) -> int:
        return len(self._players) - self._index


class RandomPlayerStream:
    """Produces ``count`` synthetic players with uniform random levels.

    Levels are drawn from ``[min_level, max_level]`` (inclusive) by a numpy
    ``Generator`` seeded with ``seed``, so the same arguments always yield the
    same sequence.
    """

    def __init__(
        self,
        count: int,
        *,
        seed: int | None = None,
        min_level: int = DEFAULT_MIN_LEVEL,
        max_level: int = DEFAULT_MAX_LEVEL,
    ) -> None:
        if count < 0:
            raise ConfigError(f"stream size must be non-negative, got {count}")
        if min_level > max_level:
            raise ConfigError(f"min_level {min_level} is above max_level {max_level}")
        self._count = count
        self._produced = 0
        self._min_level = min_level
        self._max_level = max_level
        self._rng = np.random.default_rng(seed)

    def next_player(self) -> Player:
        if self._produced >= self._count:
            raise StreamExhaustedError(self._produced)
        level = int(self._rng.integers(self._min_level, self._max_level, endpoint=True))
        player = Player(name=player_name(self._produced), level=level)
        self._produced += 1
        return player

    def remaining(self) -> int:
        return self._count - self._produced
