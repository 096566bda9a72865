"""
CLI Module for the Hockey Game Simulator

Provides a command-line interface for simulating single games and
batches from a YAML matchup file.

Usage:
    python -m cli.main game rosters.yaml
"""

from cli.main import main

__all__ = ["main"]
