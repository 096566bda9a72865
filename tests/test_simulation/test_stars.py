"""
Tests for the Stars-of-the-Game Ranking
"""

import pytest

from simulation.models import PlayerGameStats, SimulationConfig
from simulation.stars import rank_stars, star_points


class TestStarPoints:
    """Tests for the weighted points formula."""

    def test_weighted_sum(self):
        """Test each stat is multiplied by its weight."""
        line = PlayerGameStats(
            player_id="p", team_id="t", goals=2, assists=1, shots=6, hits=2, penalties=1
        )

        # 10 + 3 + 3 + 2 - 2
        assert star_points(line, SimulationConfig().star_weights) == 16.0

    def test_no_line(self):
        """Test a player with no box score line scores zero."""
        assert star_points(None, SimulationConfig().star_weights) == 0.0

    def test_unknown_stat_counts_zero(self):
        """Test weights for stats the line does not track are ignored."""
        line = PlayerGameStats(player_id="p", team_id="t", goals=1)

        assert star_points(line, {"goals": 5.0, "plus_minus": 4.0}) == 5.0

    def test_negative_total(self):
        """Test penalties alone give a negative score."""
        line = PlayerGameStats(player_id="p", team_id="t", penalties=2)

        assert star_points(line, SimulationConfig().star_weights) == -4.0


class TestRankStars:
    """Tests for rank_stars."""

    @pytest.fixture
    def players(self, make_player):
        return [make_player(f"p{i}", "C") for i in range(1, 6)]

    def test_top_three(self, players):
        """Test the three highest scorers are returned, best first."""
        stats = {
            "p1": PlayerGameStats(player_id="p1", team_id="t", assists=1),
            "p2": PlayerGameStats(player_id="p2", team_id="t", goals=2),
            "p4": PlayerGameStats(player_id="p4", team_id="t", goals=1, shots=4),
        }

        stars = rank_stars(players, stats)

        assert [s.player.player_id for s in stars] == ["p2", "p4", "p1"]
        assert [s.points for s in stars] == [10.0, 7.0, 3.0]
        assert stars[0].reason == "2G 0A"

    def test_ties_keep_roster_order(self, players):
        """Test equal points keep the order players were passed in."""
        stars = rank_stars(players, {})

        assert [s.player.player_id for s in stars] == ["p1", "p2", "p3"]
        assert all(s.points == 0.0 for s in stars)
        assert stars[0].reason == "0G 0A"

    def test_negative_players_still_ranked(self, make_player):
        """Test fewer than three players returns all of them."""
        players = [make_player("a", "D"), make_player("b", "D")]
        stats = {"a": PlayerGameStats(player_id="a", team_id="t", penalties=1)}

        stars = rank_stars(players, stats)

        assert [s.player.player_id for s in stars] == ["b", "a"]
        assert stars[1].points == -2.0

    def test_custom_count(self, players):
        """Test stars_count limits the list."""
        stars = rank_stars(players, {}, SimulationConfig(stars_count=1))

        assert len(stars) == 1

    def test_empty(self):
        """Test no players gives no stars."""
        assert rank_stars([], {}) == []
