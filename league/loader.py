"""
Roster Loader

Builds simulation-ready Team models from league store rows or from a
YAML matchup file.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from league.models.coach import Coach
from league.models.player import Player, PlayerStatus
from league.models.team import Team, TeamStrategy
from simulation.exceptions import PreconditionError

PLAYER_RATING_COLUMNS = (
    "shooting",
    "passing",
    "defense",
    "puck_control",
    "checking",
    "movement",
    "vision",
    "poise",
    "aggressiveness",
    "discipline",
    "fighting",
    "flexibility",
    "injury_resistance",
    "fatigue",
    "rebound_control",
    "overall_rating",
)


def player_from_record(row: Mapping[str, Any]) -> Player:
    """
    Convert a ``players`` row to a Player.

    The store names the position column ``player_position`` and the key
    ``id``; both spellings used by the models are accepted too.

    Raises:
        PreconditionError: If the row carries neither ``player_id`` nor ``id``
    """
    player_id = row.get("player_id")
    if player_id is None:
        player_id = row.get("id")
    if player_id is None:
        name = f"{row.get('first_name') or ''} {row.get('last_name') or ''}".strip()
        raise PreconditionError(f"player row has no id ({name or 'unnamed'})")

    data: dict[str, Any] = {
        "player_id": str(player_id),
        "first_name": row.get("first_name") or "",
        "last_name": row.get("last_name") or "",
        "position": row.get("position", row.get("player_position")),
        "team_id": row.get("team_id"),
        "status": row.get("status") or PlayerStatus.ACTIVE,
    }
    for column in PLAYER_RATING_COLUMNS:
        data[column] = row.get(column)
    return Player(**data)


def coach_from_record(row: Mapping[str, Any]) -> Coach:
    """Convert a ``coaches`` row to a Coach."""
    data = dict(row)
    if "coach_id" not in data and "id" in data:
        data["coach_id"] = str(data.pop("id"))
    return Coach(**data)


def strategy_from_record(row: Mapping[str, Any]) -> TeamStrategy:
    """Convert a ``team_strategy`` row to a TeamStrategy (missing columns keep defaults)."""
    return TeamStrategy(**{k: v for k, v in row.items() if v is not None})


def team_from_records(
    team_row: Mapping[str, Any],
    player_rows: Iterable[Mapping[str, Any]],
    coach_row: Mapping[str, Any] | None = None,
    strategy_row: Mapping[str, Any] | None = None,
) -> Team:
    """
    Assemble a Team from league store rows.

    Only active players are dressed; injured, suspended and retired
    players are left off the game roster.

    Args:
        team_row: ``teams`` row (needs id / team_id and name)
        player_rows: ``players`` rows for the team, in roster order
        coach_row: Optional ``coaches`` row
        strategy_row: Optional ``team_strategy`` row

    Returns:
        Team ready for simulation

    Raises:
        PreconditionError: If a row cannot be converted
    """
    team_id = team_row.get("team_id", team_row.get("id"))
    if team_id is None:
        raise PreconditionError("team row has no id")

    try:
        players = [player_from_record(row) for row in player_rows]
        coach = coach_from_record(coach_row) if coach_row else None
        strategy = strategy_from_record(strategy_row) if strategy_row else None
    except ValidationError as e:
        raise PreconditionError(f"Invalid roster data for team {team_id}: {e}") from e

    dressed = [p for p in players if p.is_available]
    if len(dressed) < len(players):
        logger.debug(
            f"Team {team_id}: {len(players) - len(dressed)} unavailable players left off the roster"
        )

    return Team(
        team_id=str(team_id),
        name=team_row.get("name") or str(team_id),
        players=dressed,
        coach=coach,
        strategy=strategy,
    )


def team_from_document(doc: Mapping[str, Any]) -> Team:
    """Build a Team from one team section of a matchup file."""
    if not isinstance(doc, Mapping):
        raise PreconditionError(f"Team entry must be a mapping, got {type(doc).__name__}")
    team_row = {"team_id": doc.get("team_id", doc.get("id")), "name": doc.get("name")}
    return team_from_records(
        team_row,
        doc.get("players") or [],
        coach_row=doc.get("coach"),
        strategy_row=doc.get("strategy"),
    )


def load_matchup(path: str | Path) -> tuple[Team, Team]:
    """
    Load a home/away matchup from YAML.

    Expected layout::

        home:
          team_id: tor
          name: Toronto
          coach: {offense_specialty: 70, ...}
          strategy: {offensive_style: 60, ...}
          players:
            - {id: t1, first_name: A, last_name: B, player_position: C, shooting: 80}
        away:
          ...

    Args:
        path: YAML file path

    Returns:
        (home, away) teams

    Raises:
        PreconditionError: If the file is missing, unparsable or incomplete
    """
    path = Path(path)
    if not path.exists():
        raise PreconditionError(f"Matchup file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PreconditionError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise PreconditionError(f"Cannot read matchup file {path}: {e}") from e

    if not isinstance(data, dict) or "home" not in data or "away" not in data:
        raise PreconditionError(f"{path} must define 'home' and 'away' teams")

    home = team_from_document(data["home"])
    away = team_from_document(data["away"])
    logger.info(
        f"Loaded matchup {home.name} ({len(home.players)} players) vs "
        f"{away.name} ({len(away.players)} players)"
    )
    return home, away
