"""Leaderboard run configuration.

Defaults can be overridden from the environment:

    LEADERBOARD_METHOD               heap | quickselect | online (default online)
    LEADERBOARD_REPORTING_INTERVAL   leaders kept / cutoff cadence (default 50)
    LEADERBOARD_POPULATION           generated players (default 1000)
    LEADERBOARD_SEED                 generator seed (default 42)
    LEADERBOARD_MIN_LEVEL            lowest generated level (default 0)
    LEADERBOARD_MAX_LEVEL            highest generated level (default 1399)
    LEADERBOARD_STRICT_ENV           invalid values raise instead of warn (default 1)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from leaderboard.env_parse import ConfigError, parse_bool, parse_enum, parse_int
from leaderboard.population import DEFAULT_MAX_LEVEL, DEFAULT_MIN_LEVEL


class RankMethod(Enum):
    """Ranking algorithm selector.

    These values are STABLE and used in env vars and CLI flags.
    """

    HEAP = "heap"
    QUICKSELECT = "quickselect"
    ONLINE = "online"


@dataclass(frozen=True)
class LeaderboardConfig:
    """Configuration for a ranking run.

    Attributes:
        method: Ranking algorithm (default ONLINE)
        reporting_interval: Leaders kept by the online ranker and cutoff cadence (default 50)
        population: Number of players to generate when no file is given (default 1000)
        seed: Seed for the player generator (default 42)
        min_level: Lowest generated level, inclusive (default 0)
        max_level: Highest generated level, inclusive (default 1399)
    """

    method: RankMethod = RankMethod.ONLINE
    reporting_interval: int = 50
    population: int = 1000
    seed: int = 42
    min_level: int = DEFAULT_MIN_LEVEL
    max_level: int = DEFAULT_MAX_LEVEL

    def __post_init__(self) -> None:
        if self.reporting_interval < 1:
            raise ConfigError(f"reporting_interval must be >= 1, got {self.reporting_interval}")
        if self.population < 0:
            raise ConfigError(f"population must be non-negative, got {self.population}")
        if self.min_level > self.max_level:
            raise ConfigError(f"min_level {self.min_level} is above max_level {self.max_level}")

    @classmethod
    def from_env(cls) -> LeaderboardConfig:
        """Build a config from ``LEADERBOARD_*`` environment variables."""
        strict = parse_bool("LEADERBOARD_STRICT_ENV", default=True, strict=False)
        method = parse_enum(
            "LEADERBOARD_METHOD",
            {m.value for m in RankMethod},
            default=RankMethod.ONLINE.value,
            strict=strict,
        )
        return cls(
            method=RankMethod(method),
            reporting_interval=parse_int(
                "LEADERBOARD_REPORTING_INTERVAL", 50, min_value=1, strict=strict
            ),
            population=parse_int("LEADERBOARD_POPULATION", 1000, min_value=0, strict=strict),
            seed=parse_int("LEADERBOARD_SEED", 42, strict=strict),
            min_level=parse_int("LEADERBOARD_MIN_LEVEL", DEFAULT_MIN_LEVEL, strict=strict),
            max_level=parse_int("LEADERBOARD_MAX_LEVEL", DEFAULT_MAX_LEVEL, strict=strict),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "method": self.method.value,
            "reporting_interval": self.reporting_interval,
            "population": self.population,
            "seed": self.seed,
            "min_level": self.min_level,
            "max_level": self.max_level,
        }
