"""
Tests for the Simulation Module

Test modules:
    - test_models: Tests for configuration and result models
    - test_engine: Tests for the game simulation engine
    - test_strength: Tests for the team strength evaluator
    - test_stars: Tests for the stars-of-the-game ranking
    - test_runner: Tests for slate (batch) simulation
    - test_records, test_report, test_config, test_random_source
"""
