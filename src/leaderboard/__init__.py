"""Leaderboard - top-K player ranking.

Offline rankers select the top 10% of an in-memory list in place; the online
ranker keeps the top R players of a one-shot stream with bounded memory and
reports periodic cutoffs.

Note: version is sourced from package metadata (pyproject.toml).
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from leaderboard.errors import ConfigError, LeaderboardError, StreamExhaustedError
from leaderboard.players import Player
from leaderboard.ranking import RankingResult, heap_rank, quickselect_rank, rank_incoming
from leaderboard.streams import PlayerStream, RandomPlayerStream, VectorPlayerStream


def _pkg_version() -> str:
    try:
        return version("leaderboard")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _pkg_version()
__author__ = "bnzr-hub"

__all__ = [
    "ConfigError",
    "LeaderboardError",
    "Player",
    "PlayerStream",
    "RandomPlayerStream",
    "RankingResult",
    "StreamExhaustedError",
    "VectorPlayerStream",
    "__version__",
    "heap_rank",
    "quickselect_rank",
    "rank_incoming",
]
