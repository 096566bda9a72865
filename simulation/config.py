"""
Simulation Configuration Loading

Reads SimulationConfig overrides from a YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from simulation.exceptions import ConfigurationError
from simulation.models import SimulationConfig

DEFAULT_CONFIG_PATH = Path("config/simulation.yaml")


def load_config(config_path: str | Path | None = None) -> SimulationConfig:
    """
    Load simulator configuration from YAML.

    The file may hold the settings at the top level or under a
    ``simulation`` key. Missing files fall back to the defaults.

    Args:
        config_path: Path to the YAML file (defaults to config/simulation.yaml)

    Returns:
        Validated SimulationConfig

    Raises:
        ConfigurationError: If the file cannot be parsed or holds invalid values
    """
    path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

    if not path.exists():
        logger.warning(f"Simulation config not found at {path}, using defaults")
        return SimulationConfig()

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read simulation config {path}: {e}") from e

    return config_from_dict(raw or {}, source=str(path))


def config_from_dict(data: dict[str, Any], source: str = "<dict>") -> SimulationConfig:
    """Build a SimulationConfig from a plain mapping."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping in {source}, got {type(data).__name__}")

    settings = data.get("simulation", data)
    if not isinstance(settings, dict):
        raise ConfigurationError(f"'simulation' section in {source} must be a mapping")

    try:
        config = SimulationConfig(**settings)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid simulation config in {source}: {e}") from e

    logger.debug(f"Loaded simulation config from {source}")
    return config
