"""Leaderboard exception hierarchy.

Exception hierarchy:
- LeaderboardError (base)
  - StreamExhaustedError (next_player() on a drained stream)
  - ConfigError (invalid configuration: env vars, CLI flags, reporting interval)
  - PlayerFileError (unreadable or malformed player file)
"""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base exception for all leaderboard errors."""

    pass


class StreamExhaustedError(LeaderboardError):
    """A player was requested from a stream with none remaining.

    Attributes:
        consumed: Number of players the stream had produced before the failed call
    """

    def __init__(self, consumed: int, message: str | None = None) -> None:
        self.consumed = consumed
        super().__init__(message or "No more players to fetch")


class ConfigError(LeaderboardError):
    """Raised when a configuration value is invalid (strict mode)."""


class PlayerFileError(LeaderboardError):
    """Player file could not be read or does not hold a list of players.

    Attributes:
        path: Path of the offending file
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"{path}: {reason}")
