"""
Tests for Team, Coach and Strategy Models
"""

from league.models.coach import Coach
from league.models.player import PlayerPosition
from league.models.team import PenaltyKillStyle, PowerPlayStyle, TeamStrategy


class TestTeam:
    """Tests for Team roster helpers."""

    def test_skaters_and_goalies(self, sample_home_team):
        """Test the roster splits into skaters and goalies in order."""
        skaters = [p.player_id for p in sample_home_team.skaters]
        goalies = [p.player_id for p in sample_home_team.goalies]

        assert skaters == ["h-c1", "h-lw1", "h-rw1", "h-c2", "h-d1", "h-d2"]
        assert goalies == ["h-g1"]

    def test_players_at(self, sample_home_team):
        """Test position lookup."""
        centers = sample_home_team.players_at(PlayerPosition.CENTER)

        assert [p.player_id for p in centers] == ["h-c1", "h-c2"]
        assert sample_home_team.players_at(PlayerPosition.GOALIE)[0].last_name == "Brand"

    def test_get_player(self, sample_home_team):
        """Test lookup by id."""
        assert sample_home_team.get_player("h-d2").first_name == "Cal"
        assert sample_home_team.get_player("nobody") is None

    def test_empty_team(self, make_team):
        """Test a team may be built without players, coach or strategy."""
        team = make_team("t", positions=())

        assert team.players == []
        assert team.skaters == []
        assert team.coach is None
        assert team.strategy is None


class TestTeamStrategy:
    """Tests for TeamStrategy defaults."""

    def test_defaults(self):
        """Test default sliders and styles."""
        strategy = TeamStrategy()

        assert strategy.offensive_style == 50
        assert strategy.defensive_pressure == 50
        assert strategy.forecheck_intensity == 50
        assert strategy.pp_style == PowerPlayStyle.BALANCED
        assert strategy.pk_style == PenaltyKillStyle.PRESSURE
        assert strategy.line_matching is False
        assert strategy.pull_goalie_threshold == 90

    def test_styles_from_strings(self):
        """Test styles accept their stored string values."""
        strategy = TeamStrategy(pp_style="aggressive", pk_style="box")

        assert strategy.pp_style == "aggressive"
        assert strategy.pk_style == "box"


class TestCoach:
    """Tests for Coach."""

    def test_full_name(self):
        """Test display name."""
        assert Coach(first_name="Dana", last_name="Keller").full_name == "Dana Keller"

    def test_specialties_optional(self):
        """Test every specialty may be absent."""
        coach = Coach()

        assert coach.offense_specialty is None
        assert coach.motivation is None
