"""
Team Data Model

Pydantic models for representing a team's dressed roster, coach
and tactical strategy.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from league.models.coach import Coach
from league.models.player import Player, PlayerPosition


class PowerPlayStyle(str, Enum):
    """Power play approach."""

    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    CONSERVATIVE = "conservative"


class PenaltyKillStyle(str, Enum):
    """Penalty kill approach."""

    PRESSURE = "pressure"
    BOX = "box"
    AGGRESSIVE = "aggressive"


class TeamStrategy(BaseModel):
    """
    Team tactical profile.

    Only the three 0-100 sliders feed the simulator. The special teams
    styles, line matching and the pull-goalie threshold (seconds remaining)
    are stored for the league editor and have no effect on a simulated game.
    """

    model_config = ConfigDict(use_enum_values=True)

    offensive_style: int = 50
    defensive_pressure: int = 50
    forecheck_intensity: int = 50

    pp_style: PowerPlayStyle = PowerPlayStyle.BALANCED
    pk_style: PenaltyKillStyle = PenaltyKillStyle.PRESSURE
    line_matching: bool = False
    pull_goalie_threshold: int = 90


class Team(BaseModel):
    """
    Simulation input team.

    Players are kept in roster order; that order drives uniform picks
    and tie-breaks in the stars ranking, so it must be stable.
    """

    team_id: str
    name: str
    players: list[Player] = Field(default_factory=list)
    coach: Coach | None = None
    strategy: TeamStrategy | None = None

    @property
    def skaters(self) -> list[Player]:
        """All non-goalies, in roster order."""
        return [p for p in self.players if p.is_skater]

    @property
    def goalies(self) -> list[Player]:
        """All goalies, in roster order."""
        return [p for p in self.players if p.is_goalie]

    def players_at(self, position: PlayerPosition) -> list[Player]:
        """Players listed at a given position."""
        return [p for p in self.players if p.position == position]

    def get_player(self, player_id: str) -> Player | None:
        """Look up a rostered player by id."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None
