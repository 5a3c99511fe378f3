"""
Base Agent class for all simulation entities.
"""

import pygame

from ..vector import limit


class Agent:
    """
    Base class for all agents in the simulation.

    Provides common functionality for position, velocity, acceleration,
    fixed-step integration and toroidal wrapping.
    """

    def __init__(self, position, velocity):
        """
        Initialize an agent.

        Args:
            position: Initial position (anything pygame.Vector2 accepts)
            velocity: Initial velocity
        """
        self.position = pygame.Vector2(position)
        self.velocity = pygame.Vector2(velocity)
        self.acceleration = pygame.Vector2(0, 0)

    def apply_force(self, force: pygame.Vector2) -> None:
        """
        Apply a force to the agent's acceleration.

        Args:
            force: Force vector to apply
        """
        self.acceleration += force

    def apply_forces(self, max_speed: float) -> None:
        """
        Integrate one step: acceleration into velocity, velocity into position.

        Args:
            max_speed: Maximum speed after integration
        """
        self.velocity += self.acceleration
        self.velocity = limit(self.velocity, max_speed)
        self.acceleration = pygame.Vector2(0, 0)
        self.position += self.velocity

    def wrap(self, left: float, right: float, top: float, bottom: float) -> None:
        """Teleport to the opposite edge when leaving the domain."""
        if self.position.x > right:
            self.position.x = left
        if self.position.x < left:
            self.position.x = right
        if self.position.y > bottom:
            self.position.y = top
        if self.position.y < top:
            self.position.y = bottom

    def steering(self, desired: pygame.Vector2, max_force: float) -> pygame.Vector2:
        """
        Calculate steering force toward a desired velocity.

        Args:
            desired: The desired velocity vector
            max_force: Maximum steering force

        Returns:
            Steering force vector
        """
        return limit(desired - self.velocity, max_force)
