"""
Simulation Module

This module contains the weighted-random hockey game simulation engine.

Components:
    - models: Configuration and result models (GameResult, PeriodResult, GameEvent, Star)
    - strength: Team strength evaluator (roster + coach + strategy -> scalar)
    - engine: Period, shot, overtime and shootout simulation
    - stars: Stars-of-the-game ranking
    - runner: Batch (slate) simulation with independent random streams
    - records: Mapping of results to the league store's game rows
    - report: Text box score

Usage:
    from simulation import GameSimulator, make_rng

    simulator = GameSimulator()
    result = simulator.simulate(home_team, away_team, rng=make_rng(42))
    print(result.home_score, result.away_score)
"""

from simulation.exceptions import (
    ConfigurationError,
    PreconditionError,
    SimulationError,
)
from simulation.models import (
    EventType,
    GameEvent,
    GameResult,
    PeriodResult,
    PlayerGameStats,
    SimulationConfig,
    Star,
    TiebreakWinner,
)
from simulation.random_source import RandomSource, make_rng, spawn_rngs
from simulation.strength import TeamStrength, TeamStrengthEvaluator
from simulation.stars import rank_stars, star_points
from simulation.engine import GameSimulator, simulate_game
from simulation.runner import Matchup, SlateResult, SlateSimulator, SlateSize
from simulation.config import load_config

__all__ = [
    # Exceptions
    "ConfigurationError",
    "PreconditionError",
    "SimulationError",
    # Models
    "EventType",
    "GameEvent",
    "GameResult",
    "PeriodResult",
    "PlayerGameStats",
    "SimulationConfig",
    "Star",
    "TiebreakWinner",
    # Randomness
    "RandomSource",
    "make_rng",
    "spawn_rngs",
    # Strength
    "TeamStrength",
    "TeamStrengthEvaluator",
    # Stars
    "rank_stars",
    "star_points",
    # Engine
    "GameSimulator",
    "simulate_game",
    # Runner
    "Matchup",
    "SlateResult",
    "SlateSimulator",
    "SlateSize",
    # Config
    "load_config",
]
