"""Ranking algorithms.

Offline (whole list in memory, top 10%):
- heap_rank: early-stopping heapsort
- quickselect_rank: single partition + sort

Online (one-shot stream, bounded memory):
- rank_incoming: min-heap of leaders with periodic cutoffs
"""

from leaderboard.ranking.offline import TOP_FRACTION_DIVISOR, heap_rank, quickselect_rank
from leaderboard.ranking.online import rank_incoming, replace_min
from leaderboard.ranking.result import RankingResult

__all__ = [
    "TOP_FRACTION_DIVISOR",
    "RankingResult",
    "heap_rank",
    "quickselect_rank",
    "rank_incoming",
    "replace_min",
]
