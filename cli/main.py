#!/usr/bin/env python3
"""
Command-line interface for the hockey game simulator.

Usage:
    hockey-sim game rosters.yaml --seed 42
    hockey-sim game rosters.yaml --json
    hockey-sim slate rosters.yaml --size week --seed 7
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from league.loader import load_matchup
from simulation import (
    GameSimulator,
    SimulationError,
    SlateSimulator,
    SlateSize,
    load_config,
    make_rng,
)
from simulation.records import to_game_record, to_period_records
from simulation.report import format_box_score


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI usage."""
    logger.remove()
    if verbose:
        logger.add(sys.stderr, level="DEBUG")
    else:
        logger.add(sys.stderr, level="WARNING", format="<level>{level}</level>: {message}")


def cmd_game(args: argparse.Namespace) -> int:
    """Simulate and print a single game."""
    config = load_config(args.config)
    home, away = load_matchup(args.rosters)

    seed = args.seed if args.seed is not None else config.random_seed
    simulator = GameSimulator(config)
    result = simulator.simulate(home, away, make_rng(seed))

    if args.json:
        game_id = args.game_id or "simulated"
        output = {
            "game": to_game_record(result, game_id),
            "periods": to_period_records(result, game_id),
            "summary": result.get_summary(),
        }
        print(json.dumps(output, indent=2))
    else:
        print(format_box_score(result, home, away))
    return 0


def cmd_slate(args: argparse.Namespace) -> int:
    """Replay a matchup for a day or week slate and print the totals."""
    config = load_config(args.config)
    home, away = load_matchup(args.rosters)

    size = SlateSize[args.size.upper()]
    runner = SlateSimulator(config=config)

    def report_progress(done: int, total: int) -> None:
        logger.debug(f"Simulated {done}/{total} games")

    slate = runner.simulate_repeated(home, away, size=size, seed=args.seed, progress=report_progress)
    summary = slate.get_summary()

    print()
    print("=" * 60)
    print(f"  {home.name} vs {away.name} - {size.name.title()} slate ({size.value} games)")
    print("=" * 60)
    print(f"  {home.name} wins:   {summary['home_wins']}")
    print(f"  {away.name} wins:   {summary['away_wins']}")
    print(f"  Overtime games:  {summary['overtime_games']}")
    print(f"  Shootout games:  {summary['shootout_games']}")
    print(f"  Goals per game:  {summary['average_goals']:.2f}")
    print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Hockey League Game Simulator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--config",
        default=None,
        help="Simulation config YAML (default: config/simulation.yaml)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    game_parser = subparsers.add_parser("game", help="Simulate a single game")
    game_parser.add_argument("rosters", help="YAML file with home and away teams")
    game_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    game_parser.add_argument("--json", action="store_true", help="Print game records as JSON")
    game_parser.add_argument("--game-id", default=None, help="Game id for the JSON records")

    slate_parser = subparsers.add_parser("slate", help="Replay a matchup as a batch")
    slate_parser.add_argument("rosters", help="YAML file with home and away teams")
    slate_parser.add_argument(
        "--size",
        choices=[s.name.lower() for s in SlateSize],
        default="day",
        help="Batch size: single (1), day (8) or week (30)",
    )
    slate_parser.add_argument("--seed", type=int, default=None, help="Root random seed")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.command == "game":
            return cmd_game(args)
        elif args.command == "slate":
            return cmd_slate(args)
        else:
            parser.print_help()
            return 0
    except SimulationError as e:
        logger.error(str(e))
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
