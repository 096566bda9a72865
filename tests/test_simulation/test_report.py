"""
Tests for the Box Score Report
"""

from simulation.engine import GameSimulator
from simulation.random_source import make_rng
from simulation.report import format_box_score


class TestBoxScore:
    """Tests for format_box_score."""

    def test_overtime_box_score(self, average_home_team, average_away_team, constant_rng):
        """Test the score line, periods and stars of an overtime game."""
        result = GameSimulator().simulate(average_home_team, average_away_team, constant_rng(0.0))

        report = format_box_score(result, average_home_team, average_away_team)

        assert "FINAL" in report
        assert "Home 31 - 30 Away (OT)" in report
        assert "Shots: 30 - 30" in report
        assert "Period 1: 10 - 10 (shots 10 - 10)" in report
        assert "[OT 00:00] OVERTIME GOAL! HOME-1 Test (Home)" in report
        assert "1. AWAY-1 Test Away - 30G 0A (165.0 pts)" in report

    def test_shootout_box_score(self, average_home_team, average_away_team, constant_rng):
        """Test the shootout tag and winner line."""
        result = GameSimulator().simulate(average_home_team, average_away_team, constant_rng(0.99))

        report = format_box_score(result, average_home_team, average_away_team)

        assert "Home 0 - 1 Away (SO)" in report
        assert "[SO SO] Shootout winner: AWAY-1 Test (Away)" in report
        assert "[P" not in report

    def test_regulation_box_score(self, sample_home_team, sample_away_team):
        """Test every goal event appears in the play-by-play section."""
        result = GameSimulator().simulate(sample_home_team, sample_away_team, make_rng(5))

        report = format_box_score(result, sample_home_team, sample_away_team)

        assert report.count("GOAL!") == len(result.goal_events)
        for event in result.goal_events:
            label = {GameSimulator.OVERTIME_PERIOD: "OT"}.get(event.period, f"P{event.period}")
            assert f"[{label} {event.time}] {event.description}" in report
        assert "THREE STARS:" in report
        assert "Harbor Hawks" in report
