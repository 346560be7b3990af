"""Exceptions raised by the particle simulation core."""


class SimulationError(Exception):
    """Base class for simulation core failures."""


class ViewportUnavailableError(SimulationError):
    """Raised when the simulation needs viewport bounds and none are present."""
