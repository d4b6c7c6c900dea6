"""Project CLI entrypoint.

Provides CLI commands for leaderboard:
- leaderboard rank: Rank a population with one algorithm
- leaderboard compare: Run all algorithms on one population and compare
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from leaderboard.config import LeaderboardConfig, RankMethod
from leaderboard.errors import LeaderboardError
from leaderboard.players import Player
from leaderboard.population import dump_result, generate_players, load_players
from leaderboard.ranking import RankingResult, heap_rank, quickselect_rank, rank_incoming
from leaderboard.streams import PlayerStream, RandomPlayerStream, VectorPlayerStream

logger = logging.getLogger(__name__)


def _pkg_version() -> str:
    try:
        return version("leaderboard")
    except PackageNotFoundError:
        return "0.0.0"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _print_result(method: RankMethod, result: RankingResult) -> None:
    print(f"Method: {method.value}")
    print(f"Top players: {len(result.top)}")
    if result.top:
        print(f"Lowest qualifying level: {result.top[0].level}")
        print(f"Highest level: {result.top[-1].level} ({result.top[-1].name})")
    for count, level in sorted(result.cutoffs.items()):
        print(f"  cutoff after {count} players: {level}")
    print(f"Elapsed: {result.elapsed_ms:.3f} ms")
    print(f"Result digest: {result.digest}")


def _load_population(args: argparse.Namespace, config: LeaderboardConfig) -> list[Player]:
    if args.players_file:
        return load_players(Path(args.players_file))
    return generate_players(
        config.population,
        seed=config.seed,
        min_level=config.min_level,
        max_level=config.max_level,
    )


def _cmd_rank(args: argparse.Namespace, config: LeaderboardConfig) -> None:
    """Run a single ranking."""
    result: RankingResult
    if config.method is RankMethod.ONLINE:
        stream: PlayerStream
        if args.players_file:
            stream = VectorPlayerStream(load_players(Path(args.players_file)))
        else:
            stream = RandomPlayerStream(
                config.population,
                seed=config.seed,
                min_level=config.min_level,
                max_level=config.max_level,
            )
        result = rank_incoming(stream, config.reporting_interval)
    else:
        players = _load_population(args, config)
        ranker = heap_rank if config.method is RankMethod.HEAP else quickselect_rank
        result = ranker(players)

    logger.info("Ranked with config: %s", config.to_dict())
    _print_result(config.method, result)

    if args.out:
        out_path = Path(args.out)
        dump_result(result, out_path)
        if args.verbose:
            print(f"Output written to: {out_path}")


def _cmd_compare(args: argparse.Namespace, config: LeaderboardConfig) -> None:
    """Run every ranker on independent copies of one population."""
    players = _load_population(args, config)

    results = {
        RankMethod.HEAP: heap_rank(list(players)),
        RankMethod.QUICKSELECT: quickselect_rank(list(players)),
        RankMethod.ONLINE: rank_incoming(VectorPlayerStream(players), config.reporting_interval),
    }

    print(f"Players: {len(players)}  Reporting interval: {config.reporting_interval}")
    for method, result in results.items():
        print(
            f"  {method.value:<12} top={len(result.top):<6} "
            f"elapsed_ms={result.elapsed_ms:.3f}  digest={result.digest}"
        )

    heap_levels = results[RankMethod.HEAP].levels
    quick_levels = results[RankMethod.QUICKSELECT].levels
    if heap_levels != quick_levels:
        print("MISMATCH: heap and quickselect selected different levels", file=sys.stderr)
        raise SystemExit(1)
    print("Offline rankers agree.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="leaderboard", description="Leaderboard ranking CLI")
    parser.add_argument("--version", action="version", version=f"leaderboard {_pkg_version()}")

    sub = parser.add_subparsers(dest="cmd", required=True)

    def add_population_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--players-file", help="JSON/YAML list of players (default: generate)")
        p.add_argument("--count", type=int, help="Number of players to generate")
        p.add_argument("--seed", type=int, help="Seed for generated players")
        p.add_argument("--interval", type=int, help="Reporting interval for the online ranker")
        p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    p_rank = sub.add_parser("rank", help="Rank a population with one algorithm")
    p_rank.add_argument(
        "--method",
        choices=[m.value for m in RankMethod],
        help="Ranking algorithm (default: LEADERBOARD_METHOD or online)",
    )
    p_rank.add_argument("--out", help="Output path for result JSON (optional)")
    add_population_args(p_rank)

    p_compare = sub.add_parser("compare", help="Run all algorithms on one population")
    add_population_args(p_compare)

    return parser


def _resolve_config(args: argparse.Namespace) -> LeaderboardConfig:
    """Environment config with CLI flags taking precedence."""
    base = LeaderboardConfig.from_env()
    method = getattr(args, "method", None)
    return LeaderboardConfig(
        method=RankMethod(method) if method else base.method,
        reporting_interval=args.interval if args.interval is not None else base.reporting_interval,
        population=args.count if args.count is not None else base.population,
        seed=args.seed if args.seed is not None else base.seed,
        min_level=base.min_level,
        max_level=base.max_level,
    )


def main() -> None:
    parser = build_parser()
    args, unknown = parser.parse_known_args()

    if unknown:
        print(f"Unknown args: {unknown}", file=sys.stderr)
        raise SystemExit(2)

    _configure_logging(args.verbose)

    try:
        config = _resolve_config(args)
        if args.cmd == "rank":
            _cmd_rank(args, config)
            return
        if args.cmd == "compare":
            _cmd_compare(args, config)
            return
    except LeaderboardError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    raise SystemExit(2)
