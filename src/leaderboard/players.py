"""Player record shared by every ranking algorithm."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class Player:
    """A scored player.

    Ordering and equality use ``level`` only; ``name`` is carried along for
    reporting. Two players with the same level compare equal.

    Attributes:
        name: Display name (not part of the order)
        level: Score used for ranking (higher = better)
    """

    name: str = field(compare=False)
    level: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {"name": self.name, "level": self.level}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        """Build from a ``{"name": ..., "level": ...}`` mapping."""
        return cls(name=str(data["name"]), level=int(data["level"]))
