"""Offline rankers over a fully materialized list of players.

Both rankers select the top 10% of players (``len(players) // 10``) and
return them in ascending order. They work in place: the caller's list is
reordered, and ``heap_rank`` also removes the selected players from it.
Pass a copy if the original order matters.

Ties on the selection boundary may be resolved differently by the two
rankers; only the multiset of selected levels is guaranteed to match.
"""

from __future__ import annotations

import logging
import operator
import time
from collections.abc import Callable

import numpy as np

from leaderboard.players import Player
from leaderboard.ranking.heap import make_heap, pop_heap
from leaderboard.ranking.result import RankingResult

logger = logging.getLogger(__name__)

TOP_FRACTION_DIVISOR = 10
_INT64 = np.iinfo(np.int64)


def heap_rank(
    players: list[Player],
    *,
    clock: Callable[[], float] | None = None,
) -> RankingResult:
    """Select and sort the top 10% of players with an early-stopping heapsort.

    Builds a max-heap over the whole list (O(N)), pops the maximum
    ``N // 10`` times (O(log N) each) and sorts the popped players.

    Args:
        players: Players to rank. Reordered in place; the popped top players
            are removed from its tail.
        clock: Clock function for timing (injectable for tests).

    Returns:
        RankingResult with the top players ascending, no cutoffs, and the
        selection time in milliseconds.
    """
    clock = clock or time.perf_counter
    start = clock()

    make_heap(players, operator.gt)
    top_count = len(players) // TOP_FRACTION_DIVISOR

    top: list[Player] = []
    for _ in range(top_count):
        pop_heap(players, len(players), operator.gt)
        top.append(players.pop())
    top.sort()

    elapsed_ms = (clock() - start) * 1000
    logger.debug(
        "heap_rank: players=%d top=%d elapsed_ms=%.3f",
        len(players) + top_count,
        top_count,
        elapsed_ms,
    )
    return RankingResult(top=tuple(top), elapsed_ms=elapsed_ms)


def _select(players: list[Player], kth: int) -> None:
    """In-place three-way quickselect over the Player order itself."""
    lo, hi = 0, len(players) - 1
    while lo < hi:
        pivot = players[(lo + hi) // 2].level
        lt, i, gt = lo, lo, hi
        while i <= gt:
            level = players[i].level
            if level < pivot:
                players[lt], players[i] = players[i], players[lt]
                lt += 1
                i += 1
            elif level > pivot:
                players[i], players[gt] = players[gt], players[i]
                gt -= 1
            else:
                i += 1
        # players[lt:gt + 1] all equal pivot and sit in their final slots
        if kth < lt:
            hi = lt - 1
        elif kth > gt:
            lo = gt + 1
        else:
            return


def _partition(players: list[Player], kth: int) -> None:
    """Reorder ``players`` so that ``players[kth:]`` hold the highest levels.

    Every player before ``kth`` is at or below every player from ``kth`` on.
    Levels outside int64 cannot go through ``np.argpartition`` and are
    selected in pure Python instead.
    """
    levels = [p.level for p in players]
    if min(levels) < _INT64.min or max(levels) > _INT64.max:
        _select(players, kth)
        return
    order = np.argpartition(np.array(levels, dtype=np.int64), kth)
    players[:] = [players[i] for i in order]


def quickselect_rank(
    players: list[Player],
    *,
    clock: Callable[[], float] | None = None,
) -> RankingResult:
    """Select and sort the top 10% of players with a single quickselect partition.

    Partitions around index ``k = N - N // 10`` (expected O(N)), then copies
    and sorts ``players[k:]``.

    Args:
        players: Players to rank. Reordered in place; nothing is removed.
        clock: Clock function for timing (injectable for tests).

    Returns:
        RankingResult with the top players ascending, no cutoffs, and the
        selection time in milliseconds.
    """
    clock = clock or time.perf_counter
    start = clock()

    n = len(players)
    k = n - n // TOP_FRACTION_DIVISOR
    if k < n:
        _partition(players, k)
    top = sorted(players[k:])

    elapsed_ms = (clock() - start) * 1000
    logger.debug(
        "quickselect_rank: players=%d top=%d elapsed_ms=%.3f",
        n,
        len(top),
        elapsed_ms,
    )
    return RankingResult(top=tuple(top), elapsed_ms=elapsed_ms)
