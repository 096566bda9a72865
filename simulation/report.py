"""
Box Score Report

Formats a simulated game as a fixed-width text box score.
"""

from __future__ import annotations

from league.models.team import Team
from simulation.engine import GameSimulator
from simulation.models import EventType, GameResult, TiebreakWinner


def format_box_score(result: GameResult, home: Team, away: Team) -> str:
    """
    Generate formatted text box score.

    Args:
        result: Simulated game
        home: Home team (for names)
        away: Away team (for names)

    Returns:
        Report string
    """
    teams = {home.team_id: home, away.team_id: away}
    lines = []

    # Header
    lines.append("=" * 60)
    lines.append("FINAL")
    lines.append("=" * 60)

    tag = ""
    if result.overtime_winner != TiebreakWinner.NONE:
        tag = " (OT)"
    elif result.shootout_winner != TiebreakWinner.NONE:
        tag = " (SO)"
    lines.append(f"{home.name} {result.home_score} - {result.away_score} {away.name}{tag}")
    lines.append(f"Shots: {result.home_shots} - {result.away_shots}")
    lines.append(
        f"Team strength: {result.home_team_strength:.1f} - {result.away_team_strength:.1f}"
    )
    lines.append("")

    # Periods
    lines.append("PERIODS:")
    for period in result.periods:
        lines.append(
            f"  Period {period.period}: {period.home_goals} - {period.away_goals} "
            f"(shots {period.home_shots} - {period.away_shots})"
        )
    lines.append("")

    # Scoring and incidents
    lines.append("PLAY-BY-PLAY:")
    shown = (EventType.GOAL, EventType.PENALTY, EventType.HIT, EventType.SHOOTOUT_GOAL)
    for event in result.play_by_play:
        if event.event_type in shown:
            if event.period == GameSimulator.OVERTIME_PERIOD:
                label = "OT"
            elif event.period == GameSimulator.SHOOTOUT_PERIOD:
                label = "SO"
            else:
                label = f"P{event.period}"
            lines.append(f"  [{label} {event.time}] {event.description}")
    lines.append("")

    # Stars
    lines.append("THREE STARS:")
    for rank, star in enumerate(result.stars, start=1):
        line = result.player_stats.get(star.player.player_id)
        team_name = teams[line.team_id].name if line and line.team_id in teams else ""
        lines.append(
            f"  {rank}. {star.player.full_name} {team_name} - {star.reason} ({star.points:.1f} pts)"
        )

    lines.append("")
    lines.append("=" * 60)

    return "\n".join(lines)
