"""Renderer-independent particle simulation core."""

from .constants import SimulationConstants
from .cursor import CursorCommand, ForceMode, InputSnapshot, ViewportTransform, resolve_cursor_command
from .errors import SimulationError, ViewportUnavailableError
from .forces import force_for
from .simulation import advance, warmup_kernels
from .store import Bounds, Particle, ParticleStore

__all__ = [
    "SimulationConstants",
    "CursorCommand", "ForceMode", "InputSnapshot", "ViewportTransform", "resolve_cursor_command",
    "SimulationError", "ViewportUnavailableError",
    "force_for",
    "advance", "warmup_kernels",
    "Bounds", "Particle", "ParticleStore",
]
