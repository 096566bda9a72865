"""
Simulation Exceptions
"""


class SimulationError(Exception):
    """Base class for all simulator errors."""


class PreconditionError(SimulationError):
    """Raised when simulation input is structurally invalid."""


class ConfigurationError(SimulationError):
    """Raised when a simulator configuration cannot be loaded or validated."""
