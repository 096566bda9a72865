"""
Simulation Data Models

Pydantic configuration and dataclass result models for the game simulation engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, model_validator

from league.models.player import Player


class EventType(str, Enum):
    """Play-by-play event type."""

    PERIOD_START = "period_start"
    PERIOD_END = "period_end"
    GOAL = "goal"
    PENALTY = "penalty"
    HIT = "hit"
    SHOOTOUT_START = "shootout_start"
    SHOOTOUT_GOAL = "shootout_goal"


class TiebreakWinner(str, Enum):
    """Side that won an overtime or shootout."""

    HOME = "home"
    AWAY = "away"
    NONE = "none"


class SimulationConfig(BaseModel):
    """
    Tunable constants for a game simulation.

    Defaults reproduce the league's standard game model.
    """

    random_seed: int | None = None

    # Degenerate rosters are simulated by default; set to reject them instead
    reject_empty_rosters: bool = False

    # Team strength
    position_weights: dict[str, float] = Field(
        default_factory=lambda: {
            "G": 0.35,
            "D": 0.25,
            "C": 0.15,
            "LW": 0.125,
            "RW": 0.125,
        }
    )
    base_strength: float = 50.0
    min_strength: float = 30.0
    max_strength: float = 95.0
    coach_multiplier_base: float = 0.9
    coach_multiplier_range: float = Field(default=0.2, ge=0.0)
    strategy_multiplier_base: float = 0.95
    strategy_multiplier_range: float = Field(default=0.1, ge=0.0)

    # Shot volume per period
    base_shots_per_period: int = Field(default=10, ge=0)
    shot_strength_divisor: float = Field(default=5.0, gt=0.0)
    shot_variance: int = Field(default=5, ge=0)  # inclusive upper bound of the random bonus
    min_shots_per_period: int = Field(default=3, ge=0)

    # Shot resolution
    base_shooting_pct: float = 0.08
    shooting_skill_divisor: float = Field(default=1000.0, gt=0.0)
    strength_reference: float = Field(default=75.0, gt=0.0)
    assist_probability: float = Field(default=0.8, ge=0.0, le=1.0)
    second_assist_probability: float = Field(default=0.6, ge=0.0, le=1.0)

    # Incidental events per period
    penalty_probability: float = Field(default=0.15, ge=0.0, le=1.0)
    hit_probability: float = Field(default=0.3, ge=0.0, le=1.0)
    hit_checking_threshold: int = 60

    # Tiebreaks
    overtime_strength_multiplier: float = 1.1
    overtime_decision_probability: float = Field(default=0.6, ge=0.0, le=1.0)
    overtime_strength_divisor: float = Field(default=200.0, gt=0.0)
    shootout_strength_divisor: float = Field(default=400.0, gt=0.0)
    shootout_shooters: int = Field(default=3, ge=1)

    # Clock
    period_minutes: int = Field(default=20, ge=1)
    overtime_minutes: int = Field(default=5, ge=1)

    # Stars of the game
    star_weights: dict[str, float] = Field(
        default_factory=lambda: {
            "goals": 5.0,
            "assists": 3.0,
            "shots": 0.5,
            "hits": 1.0,
            "blocks": 1.5,
            "takeaways": 2.0,
            "giveaways": -1.5,
            "penalties": -2.0,
        }
    )
    stars_count: int = Field(default=3, ge=0)

    @model_validator(mode="after")
    def _check_strength_bounds(self) -> SimulationConfig:
        if self.min_strength > self.max_strength:
            raise ValueError(
                f"min_strength ({self.min_strength}) exceeds max_strength ({self.max_strength})"
            )
        return self


@dataclass(frozen=True)
class PlayerGameStats:
    """Per-player box score line for one game."""

    player_id: str
    team_id: str
    goals: int = 0
    assists: int = 0
    shots: int = 0
    hits: int = 0
    penalties: int = 0

    # Not produced by the current event model; kept for the stars formula
    blocks: int = 0
    takeaways: int = 0
    giveaways: int = 0

    @property
    def points(self) -> int:
        """Goals plus assists."""
        return self.goals + self.assists


@dataclass(frozen=True)
class PeriodResult:
    """Goals and shots for one regulation period."""

    period: int
    home_goals: int = 0
    away_goals: int = 0
    home_shots: int = 0
    away_shots: int = 0


@dataclass(frozen=True)
class GameEvent:
    """
    A single play-by-play entry.

    The description is display text only; who did what is carried in
    event_type, player_id, team_id and assist_ids.
    """

    time: str
    period: int
    event_type: EventType
    description: str
    player_id: str | None = None
    team_id: str | None = None
    assist_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class Star:
    """One of the three stars of the game."""

    player: Player
    points: float
    reason: str


@dataclass(frozen=True)
class GameResult:
    """
    Complete outcome of one simulated game.

    ``player_stats`` is a read-only mapping of frozen box score lines.
    """

    home_score: int
    away_score: int
    home_shots: int
    away_shots: int
    periods: tuple[PeriodResult, ...]
    overtime_winner: TiebreakWinner = TiebreakWinner.NONE
    shootout_winner: TiebreakWinner = TiebreakWinner.NONE
    play_by_play: tuple[GameEvent, ...] = ()
    home_team_strength: float = 50.0
    away_team_strength: float = 50.0
    stars: tuple[Star, ...] = ()
    player_stats: Mapping[str, PlayerGameStats] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "player_stats", MappingProxyType(dict(self.player_stats)))

    @property
    def went_to_overtime(self) -> bool:
        """True if regulation ended tied."""
        return (
            self.overtime_winner != TiebreakWinner.NONE
            or self.shootout_winner != TiebreakWinner.NONE
        )

    @property
    def went_to_shootout(self) -> bool:
        """True if the shootout decided the game."""
        return self.shootout_winner != TiebreakWinner.NONE

    @property
    def winner(self) -> TiebreakWinner:
        """Winning side ("home" or "away")."""
        if self.home_score > self.away_score:
            return TiebreakWinner.HOME
        if self.away_score > self.home_score:
            return TiebreakWinner.AWAY
        return TiebreakWinner.NONE

    @property
    def regulation_score(self) -> tuple[int, int]:
        """Home and away goals over the three regulation periods."""
        return (
            sum(p.home_goals for p in self.periods),
            sum(p.away_goals for p in self.periods),
        )

    @property
    def goal_events(self) -> list[GameEvent]:
        """Goal events in generation order (excludes shootout goals)."""
        return [e for e in self.play_by_play if e.event_type == EventType.GOAL]

    def events_of(self, event_type: EventType) -> list[GameEvent]:
        """Play-by-play entries of one type."""
        return [e for e in self.play_by_play if e.event_type == event_type]

    def get_summary(self) -> dict[str, Any]:
        """Get summary dictionary for reporting."""
        return {
            "home_score": self.home_score,
            "away_score": self.away_score,
            "home_shots": self.home_shots,
            "away_shots": self.away_shots,
            "overtime_winner": self.overtime_winner.value,
            "shootout_winner": self.shootout_winner.value,
            "home_team_strength": round(self.home_team_strength, 2),
            "away_team_strength": round(self.away_team_strength, 2),
            "periods": [
                {
                    "period": p.period,
                    "home_goals": p.home_goals,
                    "away_goals": p.away_goals,
                    "home_shots": p.home_shots,
                    "away_shots": p.away_shots,
                }
                for p in self.periods
            ],
            "stars": [
                {
                    "player_id": s.player.player_id,
                    "name": s.player.full_name,
                    "points": s.points,
                    "reason": s.reason,
                }
                for s in self.stars
            ],
        }
