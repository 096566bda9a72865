"""
Data Models Module

This module contains Pydantic models for representing league entities
consumed by the game simulator.

Models:
    - Player: Individual player with 0-99 skill ratings
    - Coach: Head coach specialties
    - TeamStrategy: Team tactical profile
    - Team: Roster, coach and strategy bundle
"""

from league.models.player import Player, PlayerPosition, PlayerStatus, rating_of
from league.models.coach import Coach
from league.models.team import PenaltyKillStyle, PowerPlayStyle, Team, TeamStrategy

__all__ = [
    "Player",
    "PlayerPosition",
    "PlayerStatus",
    "rating_of",
    "Coach",
    "PenaltyKillStyle",
    "PowerPlayStyle",
    "Team",
    "TeamStrategy",
]
