"""
Team Strength Evaluator

Reduces a roster, its coach and its strategy to a single strength scalar
that biases every probabilistic decision in a simulated game.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from league.models.player import PlayerPosition, rating_of
from simulation.models import SimulationConfig

if TYPE_CHECKING:
    from league.models.coach import Coach
    from league.models.team import Team, TeamStrategy


@dataclass
class TeamStrength:
    """Strength breakdown for one team."""

    team_id: str
    base_strength: float
    coach_multiplier: float = 1.0
    strategy_multiplier: float = 1.0
    value: float = 0.0

    # Position code -> mean overall rating of the players listed there
    position_means: dict[str, float] = field(default_factory=dict)

    @property
    def unclamped(self) -> float:
        """Strength before the clamp step."""
        return self.base_strength * self.coach_multiplier * self.strategy_multiplier


class TeamStrengthEvaluator:
    """
    Calculator for team strength in [min_strength, max_strength].

    Pure: the same roster, coach and strategy always give the same value.
    """

    COACH_FIELDS = ("offense_specialty", "defense_specialty", "line_management", "motivation")
    STRATEGY_FIELDS = ("offensive_style", "defensive_pressure", "forecheck_intensity")

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()

    def evaluate(self, team: Team) -> float:
        """Strength scalar for a team."""
        return self.breakdown(team).value

    def breakdown(self, team: Team) -> TeamStrength:
        """
        Full strength calculation for a team.

        Args:
            team: Team with roster, optional coach and optional strategy

        Returns:
            TeamStrength with each factor and the clamped value
        """
        position_means = self._position_means(team)
        strength = TeamStrength(
            team_id=team.team_id,
            base_strength=self._weighted_base(position_means),
            position_means=position_means,
        )

        if team.coach is not None:
            strength.coach_multiplier = self.coach_multiplier(team.coach)
        if team.strategy is not None:
            strength.strategy_multiplier = self.strategy_multiplier(team.strategy)

        strength.value = self._clamp(strength.unclamped)
        return strength

    def coach_multiplier(self, coach: Coach) -> float:
        """Coach effect, 0.9x to 1.1x with the default settings."""
        bonus = sum(rating_of(coach, f) for f in self.COACH_FIELDS) / 400
        return self.config.coach_multiplier_base + bonus * self.config.coach_multiplier_range

    def strategy_multiplier(self, strategy: TeamStrategy) -> float:
        """Strategy effect, 0.95x to 1.05x with the default settings."""
        bonus = sum(getattr(strategy, f) for f in self.STRATEGY_FIELDS) / 300
        return self.config.strategy_multiplier_base + bonus * self.config.strategy_multiplier_range

    def _position_means(self, team: Team) -> dict[str, float]:
        """Mean overall rating per position group present on the roster."""
        means: dict[str, float] = {}
        for position in PlayerPosition:
            players = team.players_at(position)
            if players:
                ratings = [rating_of(p, "overall_rating") for p in players]
                means[position.value] = sum(ratings) / len(ratings)
        return means

    def _weighted_base(self, position_means: dict[str, float]) -> float:
        """Weighted mean over the groups present, renormalised by the weight used."""
        weights = self.config.position_weights
        total_weight = 0.0
        weighted_sum = 0.0
        for position, mean in position_means.items():
            weight = weights.get(position, 0.0)
            weighted_sum += mean * weight
            total_weight += weight

        if total_weight <= 0:
            return self.config.base_strength
        return weighted_sum / total_weight

    def _clamp(self, value: float) -> float:
        return max(self.config.min_strength, min(self.config.max_strength, value))
