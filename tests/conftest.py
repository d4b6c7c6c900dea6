"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from leaderboard.players import Player


def _make_players(levels: list[int], prefix: str = "P") -> list[Player]:
    return [Player(name=f"{prefix}{i}", level=level) for i, level in enumerate(levels)]


@pytest.fixture
def make_players() -> Callable[..., list[Player]]:
    """Factory: players named ``{prefix}{index}`` with the given levels."""
    return _make_players


@pytest.fixture
def scenario_players() -> list[Player]:
    """132 players for an interval of 50.

    - players 1-50: levels 239..288 (cutoff after 50 is 239)
    - players 51-100: levels 992..1041 (cutoff after 100 is 992)
    - players 101-132: 30 weak players plus 1398 and 1399, which push out
      992 and 993 (final cutoff 994)
    """
    levels = list(range(239, 289)) + list(range(992, 1042))
    levels += list(range(100, 115)) + [1398] + list(range(115, 130)) + [1399]
    players = _make_players(levels)
    players[-1] = Player(name="DUCHESS", level=1399)
    return players


@pytest.fixture
def distinct_players() -> list[Player]:
    """1000 players with distinct levels in a fixed shuffled order."""
    levels = [(i * 7919) % 1000 for i in range(1000)]
    return _make_players(levels)


def _is_heap(items: list[Any], before: Callable[[Any, Any], bool]) -> bool:
    return not any(before(items[i], items[(i - 1) // 2]) for i in range(1, len(items)))


@pytest.fixture
def is_heap() -> Callable[[list[Any], Callable[[Any, Any], bool]], bool]:
    """Checker: True if no child in ``items`` belongs above its parent."""
    return _is_heap
