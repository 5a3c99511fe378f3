"""
Core module containing configuration, vector helpers, agents and the flock.
"""

from .config import SimulationParameters, SimulationConfig, Bounds, DEFAULT_PARAMETERS, FRAME_TIME
from .flock import Flock, BoidState, dominant_force, update_forces

__all__ = [
    'SimulationParameters', 'SimulationConfig', 'Bounds', 'DEFAULT_PARAMETERS', 'FRAME_TIME',
    'Flock', 'BoidState', 'dominant_force', 'update_forces',
]
