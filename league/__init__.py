"""
Hockey League Simulator

League domain models and roster loading for the game simulation engine.
"""

__version__ = "0.1.0"
__author__ = "Hockey League Simulator Team"
