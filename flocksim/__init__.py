"""
Boids flocking simulation: separation, alignment, cohesion and predator avoidance.
"""

from .core import SimulationParameters, SimulationConfig, Bounds, Flock, BoidState
from .core.agents import Boid, ForceCategory

__all__ = [
    'SimulationParameters', 'SimulationConfig', 'Bounds',
    'Flock', 'BoidState', 'Boid', 'ForceCategory',
]
