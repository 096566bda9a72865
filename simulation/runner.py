"""
Slate Simulation Runner

Runs a batch of independent games (a single game, a full day or a full
week of the schedule) and aggregates the outcomes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from loguru import logger

from league.models.team import Team
from simulation.engine import GameSimulator
from simulation.models import GameResult, SimulationConfig, TiebreakWinner
from simulation.random_source import spawn_rngs

ProgressCallback = Callable[[int, int], None]


class SlateSize(int, Enum):
    """Number of games in a simulation batch."""

    SINGLE = 1
    DAY = 8
    WEEK = 30


@dataclass
class Matchup:
    """A scheduled home/away pairing."""

    home: Team
    away: Team
    game_id: str | None = None


@dataclass
class SlateResult:
    """Ordered game results plus aggregate counts for a batch."""

    results: list[GameResult] = field(default_factory=list)
    matchups: list[Matchup] = field(default_factory=list)

    @property
    def games_played(self) -> int:
        return len(self.results)

    @property
    def home_wins(self) -> int:
        return sum(1 for r in self.results if r.winner == TiebreakWinner.HOME)

    @property
    def away_wins(self) -> int:
        return sum(1 for r in self.results if r.winner == TiebreakWinner.AWAY)

    @property
    def overtime_games(self) -> int:
        """Games decided in 3-on-3 overtime."""
        return sum(1 for r in self.results if r.overtime_winner != TiebreakWinner.NONE)

    @property
    def shootout_games(self) -> int:
        return sum(1 for r in self.results if r.shootout_winner != TiebreakWinner.NONE)

    @property
    def total_goals(self) -> int:
        return sum(r.home_score + r.away_score for r in self.results)

    @property
    def average_goals(self) -> float:
        """Average combined goals per game."""
        return self.total_goals / self.games_played if self.games_played > 0 else 0.0

    def get_summary(self) -> dict[str, Any]:
        """Get summary dictionary for reporting."""
        return {
            "games_played": self.games_played,
            "home_wins": self.home_wins,
            "away_wins": self.away_wins,
            "overtime_games": self.overtime_games,
            "shootout_games": self.shootout_games,
            "total_goals": self.total_goals,
            "average_goals": round(self.average_goals, 2),
        }


class SlateSimulator:
    """
    Batch runner over GameSimulator.

    Each game gets its own generator spawned from one root seed, so a
    slate is reproducible as a whole and every game is independent of
    the others.

    Usage:
        runner = SlateSimulator()
        slate = runner.simulate_slate(matchups, seed=42)
        print(slate.get_summary())
    """

    def __init__(
        self,
        simulator: GameSimulator | None = None,
        config: SimulationConfig | None = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            simulator: Game simulator (built from config when omitted)
            config: Simulation constants, used when no simulator is given
        """
        self.simulator = simulator or GameSimulator(config)

    def simulate_slate(
        self,
        matchups: Sequence[Matchup],
        seed: int | None = None,
        progress: ProgressCallback | None = None,
    ) -> SlateResult:
        """
        Simulate every matchup once.

        Args:
            matchups: Games to play, in order
            seed: Root seed (falls back to the config seed)
            progress: Called with (completed, total) after each game

        Returns:
            SlateResult with one GameResult per matchup, in input order
        """
        if seed is None:
            seed = self.simulator.config.random_seed

        total = len(matchups)
        rngs = spawn_rngs(seed, total)
        slate = SlateResult(matchups=list(matchups))

        logger.info(f"Simulating slate of {total} games")
        for i, (matchup, rng) in enumerate(zip(matchups, rngs)):
            slate.results.append(self.simulator.simulate(matchup.home, matchup.away, rng))
            if progress is not None:
                progress(i + 1, total)

        logger.info(
            f"Slate complete: {slate.home_wins} home wins, {slate.away_wins} away wins, "
            f"{slate.overtime_games} OT, {slate.shootout_games} SO"
        )
        return slate

    def simulate_repeated(
        self,
        home: Team,
        away: Team,
        size: SlateSize | int = SlateSize.SINGLE,
        seed: int | None = None,
        progress: ProgressCallback | None = None,
    ) -> SlateResult:
        """Replay one matchup ``size`` times."""
        count = int(size)
        return self.simulate_slate(
            [Matchup(home=home, away=away) for _ in range(count)],
            seed=seed,
            progress=progress,
        )
