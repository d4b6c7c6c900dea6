"""Producing and persisting player populations.

- generate_players: reproducible synthetic population (numpy Generator)
- load_players: read players from a JSON or YAML file
- dump_result: write a RankingResult as JSON
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np
import yaml

from leaderboard.errors import ConfigError, PlayerFileError
from leaderboard.players import Player

if TYPE_CHECKING:
    from leaderboard.ranking.result import RankingResult

logger = logging.getLogger(__name__)

DEFAULT_MIN_LEVEL = 0
DEFAULT_MAX_LEVEL = 1399

ROSTER: tuple[str, ...] = (
    "WYLDER",
    "GUARDIAN",
    "IRONEYE",
    "DUCHESS",
    "RAIDER",
    "REVENANT",
    "RECLUSE",
    "EXECUTOR",
)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def player_name(index: int) -> str:
    """Deterministic display name for the ``index``-th generated player."""
    return f"{ROSTER[index % len(ROSTER)]}_{index}"


def generate_players(
    count: int,
    *,
    seed: int | None = None,
    min_level: int = DEFAULT_MIN_LEVEL,
    max_level: int = DEFAULT_MAX_LEVEL,
) -> list[Player]:
    """Generate ``count`` players with uniform random levels in ``[min_level, max_level]``."""
    if count < 0:
        raise ConfigError(f"population must be non-negative, got {count}")
    if min_level > max_level:
        raise ConfigError(f"min_level {min_level} is above max_level {max_level}")

    rng = np.random.default_rng(seed)
    levels = rng.integers(min_level, max_level, size=count, endpoint=True)
    return [Player(name=player_name(i), level=int(level)) for i, level in enumerate(levels)]


def _parse_entries(path: Path, data: Any) -> list[Player]:
    if isinstance(data, dict):
        data = data.get("players")
    if not isinstance(data, list):
        raise PlayerFileError(str(path), "expected a list of players or a 'players' list")

    players: list[Player] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise PlayerFileError(str(path), f"entry {i} is not a mapping")
        try:
            players.append(Player.from_dict(entry))
        except (KeyError, TypeError, ValueError) as e:
            raise PlayerFileError(str(path), f"entry {i} is invalid: {e}") from e
    return players


def load_players(path: Path) -> list[Player]:
    """Load players from ``path``.

    Accepts JSON, or YAML for ``.yaml``/``.yml`` files. The document is either
    a list of ``{name, level}`` mappings or a mapping with a ``players`` list.

    Raises:
        PlayerFileError: If the file is missing, unparseable or malformed.
    """
    try:
        text = path.read_text()
    except OSError as e:
        raise PlayerFileError(str(path), f"cannot read file: {e}") from e

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise PlayerFileError(str(path), f"cannot parse file: {e}") from e

    players = _parse_entries(path, data)
    logger.info("Loaded %d players from %s", len(players), path)
    return players


def dump_result(result: RankingResult, path: Path) -> None:
    """Write ``result.to_dict()`` to ``path`` as indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        json.dump(result.to_dict(), f, indent=2)
