"""
Flock aggregate: owns the boids and runs one simulation frame at a time.
"""

import random
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

import pygame

from .agents.boid import Boid, ForceCategory
from .config import Bounds, SimulationConfig, SimulationParameters, DEFAULT_PARAMETERS


class BoidState(NamedTuple):
    """Read-only view of a boid for renderers and statistics."""

    position: Tuple[float, float]
    velocity: Tuple[float, float]
    classification: ForceCategory


def dominant_force(separation: pygame.Vector2, alignment: pygame.Vector2,
                   cohesion: pygame.Vector2, avoidance: pygame.Vector2) -> Optional[ForceCategory]:
    """
    Find the force with strictly the largest squared magnitude.

    Returns:
        The winning category, or None when there is no unique winner
    """
    candidates = [
        (ForceCategory.SEPARATION, separation.length_squared()),
        (ForceCategory.ALIGNMENT, alignment.length_squared()),
        (ForceCategory.COHESION, cohesion.length_squared()),
        (ForceCategory.AVOIDANCE, avoidance.length_squared()),
    ]
    for category, magnitude in candidates:
        if all(magnitude > other for c, other in candidates if c is not category):
            return category
    return None


def update_forces(boids: Sequence[Boid], params: SimulationParameters,
                  predator_position: Optional[pygame.Vector2] = None) -> None:
    """
    Accumulate the four steering forces into every boid's acceleration.

    All forces are computed against the unmodified flock before any boid is
    touched. A boid keeps its previous classification unless one force
    strictly dominates.

    Args:
        boids: Boids to update
        params: Current simulation parameters
        predator_position: Predator position, or None when absent
    """
    forces = []
    for boid in boids:
        separation = boid.calculate_separation_force(
            boids, params.separation_weight, params.max_force, params.neighbor_radius
        )
        alignment = boid.calculate_alignment_force(
            boids, params.alignment_weight, params.max_speed, params.max_force, params.neighbor_radius
        )
        cohesion = boid.calculate_cohesion_force(
            boids, params.cohesion_weight, params.max_speed, params.max_force, params.neighbor_radius
        )
        avoidance = boid.calculate_avoidance_force(
            predator_position, params.avoidance_weight, params.max_force, params.avoidance_radius
        )
        forces.append((separation, alignment, cohesion, avoidance))

    for boid, (separation, alignment, cohesion, avoidance) in zip(boids, forces):
        boid.apply_force(separation)
        boid.apply_force(alignment)
        boid.apply_force(cohesion)
        boid.apply_force(avoidance)

        # TODO: revisit resetting to NONE on ties; the stale tag hides all-zero frames.
        winner = dominant_force(separation, alignment, cohesion, avoidance)
        if winner is not None:
            boid.classification = winner


class Flock:
    """
    Collection of boids living in a wrapped rectangular domain.

    The flock is the only thing that mutates its boids. Callers read them
    through iteration or ``snapshot()`` between frames.
    """

    def __init__(self, bounds: Optional[Bounds] = None):
        """
        Initialize an empty flock.

        Args:
            bounds: Simulation domain (defaults to the standard window area)
        """
        self.bounds = bounds if bounds else SimulationConfig().bounds
        self.boids: List[Boid] = []

    def __len__(self) -> int:
        return len(self.boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self.boids)

    def snapshot(self) -> List[BoidState]:
        """Copy out the current position, velocity and tag of every boid."""
        return [
            BoidState((b.position.x, b.position.y), (b.velocity.x, b.velocity.y), b.classification)
            for b in self.boids
        ]

    def _spawn_boid(self, max_speed: float) -> Boid:
        position = (
            random.uniform(self.bounds.left, self.bounds.right),
            random.uniform(self.bounds.top, self.bounds.bottom),
        )
        velocity = (
            random.uniform(-max_speed, max_speed),
            random.uniform(-max_speed, max_speed),
        )
        return Boid(position, velocity)

    def resize_to(self, target_population: int, max_speed: Optional[float] = None) -> None:
        """
        Grow or shrink the flock to exactly ``target_population`` boids.

        Excess boids are removed from the tail. New boids get a uniform random
        position in the domain and velocity components in
        ``[-max_speed, max_speed]``.

        Args:
            target_population: Desired number of boids
            max_speed: Speed bound for new boids (default parameters if None)
        """
        if max_speed is None:
            max_speed = DEFAULT_PARAMETERS.max_speed
        target_population = max(0, int(target_population))

        while len(self.boids) > target_population:
            self.boids.pop()
        while len(self.boids) < target_population:
            self.boids.append(self._spawn_boid(max_speed))

    def update_forces(self, params: SimulationParameters,
                      predator_position: Optional[pygame.Vector2] = None) -> None:
        """Accumulate steering forces for every boid in the flock."""
        update_forces(self.boids, params, predator_position)

    def update_boids(self, params: SimulationParameters,
                     predator_position: Optional[pygame.Vector2] = None) -> None:
        """
        Advance the simulation by one frame.

        Args:
            params: Current simulation parameters
            predator_position: Predator position, or None when absent
        """
        self.resize_to(params.target_population, params.max_speed)
        self.update_forces(params, predator_position)

        bounds = self.bounds
        for boid in self.boids:
            boid.apply_forces(params.max_speed)
            boid.wrap(bounds.left, bounds.right, bounds.top, bounds.bottom)

    update = update_boids
