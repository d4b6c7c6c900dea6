"""Ranking result shared by the offline and online rankers."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from leaderboard.players import Player


@dataclass(frozen=True)
class RankingResult:
    """Outcome of a single ranking call.

    Attributes:
        top: Top players in ascending level order
        cutoffs: Players consumed -> minimum level needed to be among the leaders
            at that point (only filled by the online ranker)
        elapsed_ms: Time spent ranking, excluding reads from a stream
    """

    top: tuple[Player, ...]
    cutoffs: Mapping[int, int] = field(default_factory=dict)
    elapsed_ms: float = 0.0

    def __post_init__(self) -> None:
        # Freeze caller-provided containers so the result cannot change afterwards
        object.__setattr__(self, "top", tuple(self.top))
        object.__setattr__(self, "cutoffs", MappingProxyType(dict(self.cutoffs)))

    @property
    def levels(self) -> list[int]:
        """Levels of the top players, ascending."""
        return [p.level for p in self.top]

    @property
    def digest(self) -> str:
        """Short SHA-256 over the deterministic part of the result (not elapsed)."""
        payload = json.dumps(
            {"levels": self.levels, "cutoffs": sorted(self.cutoffs.items())},
            sort_keys=True,
        )
        return hashlib.sha256(payload.encode()).hexdigest()[:16]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "top": [p.to_dict() for p in self.top],
            "cutoffs": {str(count): level for count, level in sorted(self.cutoffs.items())},
            "elapsed_ms": self.elapsed_ms,
            "digest": self.digest,
        }
