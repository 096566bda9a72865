"""
Persistence Record Mapping

Shapes a GameResult into the rows the league store keeps for a played
game: one ``games`` row and one ``game_periods`` row per regulation period.
The simulator itself never writes them.
"""

from __future__ import annotations

from typing import Any

from simulation.models import GameResult, TiebreakWinner

GAME_STATUS_COMPLETED = "completed"


def _tiebreak_value(winner: TiebreakWinner) -> str | None:
    return None if winner == TiebreakWinner.NONE else winner.value


def to_game_record(result: GameResult, game_id: str | None = None) -> dict[str, Any]:
    """
    Build the ``games`` row update for a simulated game.

    Args:
        result: Simulated game
        game_id: Scheduled game id (omitted from the row when None)

    Returns:
        Column -> value mapping
    """
    record: dict[str, Any] = {
        "home_score": result.home_score,
        "away_score": result.away_score,
        "home_shots": result.home_shots,
        "away_shots": result.away_shots,
        "overtime_winner": _tiebreak_value(result.overtime_winner),
        "shootout_winner": _tiebreak_value(result.shootout_winner),
        "status": GAME_STATUS_COMPLETED,
    }
    if game_id is not None:
        record["id"] = game_id
    return record


def to_period_records(result: GameResult, game_id: str) -> list[dict[str, Any]]:
    """Build the ``game_periods`` rows, keyed by game id and period number."""
    return [
        {
            "game_id": game_id,
            "period": period.period,
            "home_goals": period.home_goals,
            "away_goals": period.away_goals,
            "home_shots": period.home_shots,
            "away_shots": period.away_shots,
        }
        for period in result.periods
    ]
