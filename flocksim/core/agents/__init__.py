"""
Agent classes for the flocking simulation.
"""

from .base import Agent
from .boid import Boid, ForceCategory

__all__ = ['Agent', 'Boid', 'ForceCategory']
