"""Online ranking over a one-shot player stream.

The ranker keeps at most ``reporting_interval`` leaders in memory. Once the
buffer is full it is kept as a min-heap, so the weakest leader sits at the
root and a stronger newcomer replaces it in O(log R).

Cutoffs record, every ``reporting_interval`` players and once more after the
last one, the minimum level needed to be among the leaders at that point.
"""

from __future__ import annotations

import logging
import operator
import time
from collections.abc import Callable, MutableSequence
from typing import TYPE_CHECKING

from leaderboard.errors import ConfigError
from leaderboard.players import Player
from leaderboard.ranking.heap import make_heap
from leaderboard.ranking.result import RankingResult

if TYPE_CHECKING:
    from leaderboard.streams import PlayerStream

logger = logging.getLogger(__name__)


def replace_min(
    heap: MutableSequence[Player],
    target: Player,
    first: int = 0,
    last: int | None = None,
) -> None:
    """Replace the root of the min-heap ``heap[first:last]`` with ``target``.

    ``target`` is written over the root and percolated down, swapping with the
    smaller child while that child is below it. O(log n).

    The old minimum is overwritten, not returned; read ``heap[first]`` first
    if it is needed.

    Precondition: ``heap[first:last]`` is a min-heap.
    Postcondition: ``heap[first:last]`` is a min-heap holding ``target`` in
    place of the old minimum.
    """
    if last is None:
        last = len(heap)
    size = last - first
    if size <= 0:
        return

    heap[first] = target

    current = 0
    while True:
        left = 2 * current + 1
        right = left + 1
        smallest = current
        if left < size and heap[first + left] < heap[first + smallest]:
            smallest = left
        if right < size and heap[first + right] < heap[first + smallest]:
            smallest = right
        if smallest == current:
            break
        i, j = first + current, first + smallest
        heap[i], heap[j] = heap[j], heap[i]
        current = smallest


class _LeaderHeap:
    """Fixed-capacity leader buffer.

    Plain append-only list until it holds ``capacity`` players, then heapified
    once into a min-heap that only changes through ``replace_min``.
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._items: list[Player] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def full(self) -> bool:
        return len(self._items) >= self._capacity

    def offer(self, player: Player) -> None:
        """Admit ``player`` if there is room or it beats the weakest leader."""
        if not self.full:
            self._items.append(player)
            if self.full:
                make_heap(self._items, operator.lt)
            return
        # Equal levels lose: the earlier leader keeps its place
        if player > self._items[0]:
            replace_min(self._items, player)

    def min_level(self) -> int:
        """Minimum level among the current leaders."""
        if self.full:
            return self._items[0].level
        return min(p.level for p in self._items)

    def ranked(self) -> list[Player]:
        """Leaders in ascending level order."""
        return sorted(self._items)


def rank_incoming(
    stream: PlayerStream,
    reporting_interval: int,
    *,
    clock: Callable[[], float] | None = None,
) -> RankingResult:
    """Drain ``stream`` and keep the ``reporting_interval`` highest-level players.

    Args:
        stream: Player source. Read until ``remaining()`` is zero; it cannot be
            reused afterwards.
        reporting_interval: Number of leaders to keep, and the cadence (in
            players read) at which a cutoff is recorded. Must be >= 1.
        clock: Clock function for timing (injectable for tests).

    Returns:
        RankingResult where
        - top: the leaders in ascending level order
        - cutoffs: players read -> minimum leader level, for every multiple of
          ``reporting_interval`` plus the final count
        - elapsed_ms: ranking time, excluding calls into ``stream``

    Raises:
        ConfigError: If ``reporting_interval`` is below 1.

    Example:
        A stream of 132 players with an interval of 50 may produce
        ``cutoffs == {50: 239, 100: 992, 132: 994}`` and 50 leaders whose
        lowest level is 994.
    """
    if reporting_interval < 1:
        raise ConfigError(f"reporting_interval must be >= 1, got {reporting_interval}")
    clock = clock or time.perf_counter

    leaders = _LeaderHeap(reporting_interval)
    cutoffs: dict[int, int] = {}
    count = 0
    elapsed = 0.0

    while stream.remaining() > 0:
        player = stream.next_player()
        start = clock()

        count += 1
        leaders.offer(player)
        if count % reporting_interval == 0:
            cutoffs[count] = leaders.min_level()

        elapsed += clock() - start

    start = clock()
    if count and count not in cutoffs:
        cutoffs[count] = leaders.min_level()
    top = leaders.ranked()
    elapsed += clock() - start

    elapsed_ms = elapsed * 1000
    logger.debug(
        "rank_incoming: players=%d interval=%d top=%d cutoffs=%d elapsed_ms=%.3f",
        count,
        reporting_interval,
        len(top),
        len(cutoffs),
        elapsed_ms,
    )
    return RankingResult(top=tuple(top), cutoffs=cutoffs, elapsed_ms=elapsed_ms)
