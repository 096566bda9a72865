"""
Stars of the Game

Ranks every dressed player by a weighted in-game scoring formula.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from league.models.player import Player
from simulation.models import PlayerGameStats, SimulationConfig, Star


def star_points(stats: PlayerGameStats | None, weights: Mapping[str, float]) -> float:
    """
    Score a player's game.

    Any stat the weights name but the line does not track counts as 0.

    Args:
        stats: Box score line (None for a player who recorded nothing)
        weights: Stat name -> points per unit (negative for penalties etc.)

    Returns:
        Points total
    """
    if stats is None:
        return 0.0
    return float(sum(getattr(stats, name, 0) * weight for name, weight in weights.items()))


def rank_stars(
    players: Iterable[Player],
    stats: Mapping[str, PlayerGameStats],
    config: SimulationConfig | None = None,
) -> list[Star]:
    """
    Pick the stars of the game.

    Sorting is stable, so players on equal points keep the order they were
    passed in (home roster first, then away roster).

    Args:
        players: All players of both teams in roster order
        stats: Player id -> box score line for this game
        config: Star weights and count

    Returns:
        Up to ``stars_count`` stars, highest points first
    """
    config = config or SimulationConfig()

    scored = []
    for player in players:
        line = stats.get(player.player_id)
        points = star_points(line, config.star_weights)
        goals = line.goals if line else 0
        assists = line.assists if line else 0
        scored.append(Star(player=player, points=points, reason=f"{goals}G {assists}A"))

    scored.sort(key=lambda s: s.points, reverse=True)
    return scored[: config.stars_count]
