"""
Pytest Configuration and Fixtures

Shared fixtures and configuration for the hockey simulator test suite.
"""

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from league.models.coach import Coach
from league.models.player import Player
from league.models.team import Team, TeamStrategy


class ConstantRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class ScriptedRandom:
    """Random source that replays a script, then repeats a fallback value."""

    def __init__(self, values: Sequence[float], fallback: float = 0.99) -> None:
        self.values = list(values)
        self.fallback = fallback

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.fallback


def build_player(player_id: str, position: str, **ratings: Any) -> Player:
    """Player with the given ratings (everything else absent)."""
    return Player(
        player_id=player_id,
        first_name=player_id.upper(),
        last_name="Test",
        position=position,
        **ratings,
    )


def build_team(
    team_id: str,
    positions: Sequence[str] = ("C", "LW", "RW", "D", "D", "G"),
    coach: Coach | None = None,
    strategy: TeamStrategy | None = None,
    **ratings: Any,
) -> Team:
    """Team whose players all share the given ratings."""
    players = [
        build_player(f"{team_id}-{i}", position, **ratings)
        for i, position in enumerate(positions, start=1)
    ]
    return Team(
        team_id=team_id,
        name=team_id.title(),
        players=players,
        coach=coach,
        strategy=strategy,
    )


@pytest.fixture
def constant_rng() -> Callable[[float], ConstantRandom]:
    """Factory for constant random sources."""
    return ConstantRandom


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """Factory for players."""
    return build_player


@pytest.fixture
def make_team() -> Callable[..., Team]:
    """Factory for teams with uniform ratings."""
    return build_team


@pytest.fixture
def average_home_team() -> Team:
    """Home team of average skaters, overall 52."""
    return build_team(
        "home",
        shooting=50,
        puck_control=50,
        poise=50,
        discipline=50,
        checking=50,
        overall_rating=52,
    )


@pytest.fixture
def average_away_team() -> Team:
    """Away team of average skaters, overall 52."""
    return build_team(
        "away",
        shooting=50,
        puck_control=50,
        poise=50,
        discipline=50,
        checking=50,
        overall_rating=52,
    )


@pytest.fixture
def goalie_only_home() -> Team:
    """Home team dressing a single goalie."""
    return build_team("home", positions=("G",), overall_rating=50)


@pytest.fixture
def goalie_only_away() -> Team:
    """Away team dressing a single goalie."""
    return build_team("away", positions=("G",), overall_rating=50)


@pytest.fixture
def sample_home_team() -> Team:
    """Realistic home team with a coach and a strategy."""
    players = [
        Player(player_id="h-c1", first_name="Milo", last_name="Strand", position="C",
               shooting=82, puck_control=78, passing=80, poise=74, discipline=70,
               checking=45, overall_rating=81),
        Player(player_id="h-lw1", first_name="Tore", last_name="Lind", position="LW",
               shooting=76, puck_control=70, poise=66, discipline=58, checking=68,
               overall_rating=74),
        Player(player_id="h-rw1", first_name="Ezra", last_name="Moss", position="RW",
               shooting=79, puck_control=72, poise=70, discipline=64, checking=52,
               overall_rating=76),
        Player(player_id="h-c2", first_name="Rafe", last_name="Quill", position="C",
               shooting=68, puck_control=66, poise=60, discipline=40, checking=71,
               overall_rating=68),
        Player(player_id="h-d1", first_name="Ivan", last_name="Roe", position="D",
               shooting=55, defense=80, checking=77, discipline=62, overall_rating=75),
        Player(player_id="h-d2", first_name="Cal", last_name="Penn", position="D",
               shooting=50, defense=74, checking=64, discipline=55, overall_rating=70),
        Player(player_id="h-g1", first_name="Otto", last_name="Brand", position="G",
               rebound_control=80, poise=78, overall_rating=82),
    ]
    return Team(
        team_id="home",
        name="Harbor Hawks",
        players=players,
        coach=Coach(
            first_name="Dana",
            last_name="Keller",
            offense_specialty=72,
            defense_specialty=64,
            line_management=70,
            motivation=81,
        ),
        strategy=TeamStrategy(offensive_style=65, defensive_pressure=55, forecheck_intensity=60),
    )


@pytest.fixture
def sample_away_team() -> Team:
    """Realistic away team without a coach."""
    players = [
        Player(player_id="a-c1", first_name="Lars", last_name="Vale", position="C",
               shooting=74, puck_control=76, poise=69, discipline=72, checking=50,
               overall_rating=75),
        Player(player_id="a-lw1", first_name="Nico", last_name="Hart", position="LW",
               shooting=70, puck_control=66, poise=61, discipline=48, checking=72,
               overall_rating=70),
        Player(player_id="a-rw1", first_name="Abel", last_name="Frost", position="RW",
               shooting=72, puck_control=68, poise=65, discipline=66, checking=58,
               overall_rating=71),
        Player(player_id="a-d1", first_name="Jens", last_name="Kirk", position="D",
               shooting=52, defense=82, checking=80, discipline=50, overall_rating=77),
        Player(player_id="a-d2", first_name="Theo", last_name="Marsh", position="D",
               shooting=48, defense=76, checking=61, discipline=68, overall_rating=72),
        Player(player_id="a-g1", first_name="Pavel", last_name="Sund", position="G",
               rebound_control=76, poise=74, overall_rating=78),
    ]
    return Team(
        team_id="away",
        name="Ridge Wolves",
        players=players,
        strategy=TeamStrategy(offensive_style=45, defensive_pressure=70, forecheck_intensity=50),
    )
