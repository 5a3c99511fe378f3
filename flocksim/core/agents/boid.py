"""
Boid agent class implementing the flocking rules.
"""

import enum
from typing import Optional, Sequence

import pygame

from .base import Agent
from ..vector import limit, normalized


class ForceCategory(enum.Enum):
    """Which rule currently dominates a boid's steering."""

    NONE = 0
    SEPARATION = 1
    ALIGNMENT = 2
    COHESION = 3
    AVOIDANCE = 4


class Boid(Agent):
    """
    A boid that exhibits flocking behavior.

    Implements Reynolds' boid rules:
    - Separation: Avoid crowding neighbors
    - Alignment: Steer toward average heading of neighbors
    - Cohesion: Steer toward average position of neighbors

    Also includes predator avoidance. Force methods only read other boids,
    so they can all be evaluated before any boid is mutated.
    """

    def __init__(self, position, velocity):
        """
        Initialize a boid.

        Args:
            position: Initial position
            velocity: Initial velocity
        """
        super().__init__(position, velocity)
        self.classification = ForceCategory.NONE

    def _neighbors(self, boids: Sequence["Boid"], neighbor_radius: float):
        for other in boids:
            dist = self.position.distance_to(other.position)
            if 0 < dist < neighbor_radius:
                yield other, dist

    def calculate_separation_force(self, boids: Sequence["Boid"], weight: float,
                                   max_force: float, neighbor_radius: float) -> pygame.Vector2:
        """
        Calculate separation steering to avoid crowding neighbors.

        Args:
            boids: All boids in the flock (self is skipped at distance 0)
            weight: Separation weight
            max_force: Maximum steering force
            neighbor_radius: Exclusive neighbor distance

        Returns:
            Separation steering force
        """
        steering = pygame.Vector2(0, 0)
        total = 0

        for other, dist in self._neighbors(boids, neighbor_radius):
            steering += (self.position - other.position) / dist
            total += 1

        if total > 0:
            steering /= total
        return limit(steering, max_force) * weight

    def calculate_alignment_force(self, boids: Sequence["Boid"], weight: float, max_speed: float,
                                  max_force: float, neighbor_radius: float) -> pygame.Vector2:
        """
        Calculate alignment steering toward average neighbor heading.

        Args:
            boids: All boids in the flock
            weight: Alignment weight
            max_speed: Speed of the desired heading
            max_force: Maximum steering force
            neighbor_radius: Exclusive neighbor distance

        Returns:
            Alignment steering force
        """
        average = pygame.Vector2(0, 0)
        total = 0

        for other, _ in self._neighbors(boids, neighbor_radius):
            average += other.velocity
            total += 1

        if total == 0:
            return pygame.Vector2(0, 0)

        average /= total
        desired = normalized(average) * max_speed
        return self.steering(desired, max_force) * weight

    def calculate_cohesion_force(self, boids: Sequence["Boid"], weight: float, max_speed: float,
                                 max_force: float, neighbor_radius: float) -> pygame.Vector2:
        """
        Calculate cohesion steering toward average neighbor position.

        Args:
            boids: All boids in the flock
            weight: Cohesion weight
            max_speed: Speed used when seeking the centre
            max_force: Maximum steering force
            neighbor_radius: Exclusive neighbor distance

        Returns:
            Cohesion steering force
        """
        center = pygame.Vector2(0, 0)
        total = 0

        for other, _ in self._neighbors(boids, neighbor_radius):
            center += other.position
            total += 1

        if total == 0:
            return pygame.Vector2(0, 0)

        center /= total
        return self.seek(center, max_speed, max_force) * weight

    def seek(self, target: pygame.Vector2, max_speed: float, max_force: float) -> pygame.Vector2:
        """
        Steer toward a target point at full speed.

        Args:
            target: Point to steer toward
            max_speed: Speed of the desired velocity
            max_force: Maximum steering force

        Returns:
            Steering force vector
        """
        desired = normalized(pygame.Vector2(target) - self.position) * max_speed
        return self.steering(desired, max_force)

    def calculate_avoidance_force(self, predator_position: Optional[pygame.Vector2], weight: float,
                                  max_force: float, avoidance_radius: float) -> pygame.Vector2:
        """
        Calculate repulsion away from the predator.

        Unlike the flocking rules this is a plain unit push, not a seek.

        Args:
            predator_position: Predator position, or None when absent
            weight: Avoidance weight
            max_force: Maximum steering force
            avoidance_radius: Exclusive distance at which the predator is felt

        Returns:
            Avoidance force
        """
        if predator_position is None:
            return pygame.Vector2(0, 0)

        away = self.position - pygame.Vector2(predator_position)
        if away.length() >= avoidance_radius:
            return pygame.Vector2(0, 0)

        return limit(normalized(away), max_force) * weight

    def draw(self, surface, origin: pygame.Vector2, color, size: float = 10) -> None:
        """
        Draw the boid as an arrow along its heading.

        Args:
            surface: Pygame surface to draw on
            origin: Screen position of the world origin
            color: RGB colour
            size: Arrow length in pixels
        """
        tail = self.position + origin
        heading = normalized(self.velocity)
        if heading.length_squared() == 0:
            pygame.draw.circle(surface, color, tail, 2)
            return

        tip = tail + heading * size
        pygame.draw.line(surface, color, tail, tip, 2)
        for angle in (150, -150):
            pygame.draw.line(surface, color, tip, tip + heading.rotate(angle) * (size * 0.4), 2)
