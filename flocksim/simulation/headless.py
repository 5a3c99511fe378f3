"""
Headless simulation for data collection without a window.
"""

import math
import time
from typing import Any, Dict, Optional

import pygame

from ..core.agents.boid import ForceCategory
from ..core.config import SimulationConfig, SimulationParameters
from ..core.flock import Flock


# Frames between time-series samples
STATS_INTERVAL = 10

# Angular speed of the scripted predator, radians per frame
PREDATOR_ANGULAR_SPEED = 0.01


def classification_counts(boids) -> Dict[str, int]:
    """Count boids per ForceCategory, keyed by lower-case category name."""
    counts = {category.name.lower(): 0 for category in ForceCategory}
    for boid in boids:
        counts[boid.classification.name.lower()] += 1
    return counts


class HeadlessSimulation:
    """
    Runs the flock without a GUI and collects statistics.

    An optional scripted predator circles the origin so avoidance can be
    exercised without mouse input.
    """

    def __init__(self, params: Optional[SimulationParameters] = None,
                 config: Optional[SimulationConfig] = None,
                 predator_orbit: Optional[float] = None):
        """
        Initialize headless simulation.

        Args:
            params: Engine parameters (defaults if None)
            config: Domain and output configuration (defaults if None)
            predator_orbit: Radius of the predator's circular path, or None for no predator
        """
        self.params = params if params else SimulationParameters()
        self.config = config if config else SimulationConfig()
        self.predator_orbit = predator_orbit

        self.flock = Flock(self.config.bounds)
        self.frame_count = 0
        self.start_time = time.time()

        self.stats = {
            "speed_sum": 0.0,
            "cohesion_sum": 0.0,
            "samples": 0,
            "avg_speed": 0.0,
            "avg_cohesion": 0.0,
            "timeseries": [],
        }

    def predator_position(self) -> Optional[pygame.Vector2]:
        """Position of the scripted predator this frame."""
        if self.predator_orbit is None:
            return None
        angle = self.frame_count * PREDATOR_ANGULAR_SPEED
        return pygame.Vector2(math.cos(angle), math.sin(angle)) * self.predator_orbit

    def update(self) -> None:
        """Advance the simulation by one frame."""
        self.flock.update_boids(self.params, self.predator_position())
        self.frame_count += 1
        self._update_statistics()

    def _update_statistics(self) -> None:
        """Update tracking statistics."""
        boids = self.flock.boids
        if not boids:
            return

        avg_speed = sum(b.velocity.length() for b in boids) / len(boids)

        centroid = pygame.Vector2(0, 0)
        for b in boids:
            centroid += b.position
        centroid /= len(boids)
        cohesion = sum(b.position.distance_to(centroid) for b in boids) / len(boids)

        self.stats["speed_sum"] += avg_speed
        self.stats["cohesion_sum"] += cohesion
        self.stats["samples"] += 1
        self.stats["avg_speed"] = avg_speed
        self.stats["avg_cohesion"] = cohesion

        if self.frame_count % STATS_INTERVAL == 0:
            self.stats["timeseries"].append({
                "frame": self.frame_count,
                "boid_count": len(boids),
                "avg_speed": avg_speed,
                "cohesion": cohesion,
                "classification": classification_counts(boids),
            })

    def run(self, max_frames: int, verbose: bool = True) -> Dict[str, Any]:
        """
        Run for the given number of frames.

        Args:
            max_frames: Frames to simulate
            verbose: Print progress every 1000 frames

        Returns:
            Results dictionary with all statistics
        """
        if verbose:
            print(f"Running headless simulation for {max_frames} frames...")

        while self.frame_count < max_frames:
            self.update()

            if verbose and self.frame_count % 1000 == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                      f"{elapsed:.1f}s elapsed)")

        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get simulation results.

        Returns:
            Dictionary containing summary metrics and the sampled time series
        """
        samples = self.stats["samples"]
        return {
            "frames": self.frame_count,
            "elapsed_time_seconds": time.time() - self.start_time,
            "final_boid_count": len(self.flock),
            "avg_speed": self.stats["speed_sum"] / samples if samples else 0.0,
            "avg_cohesion": self.stats["cohesion_sum"] / samples if samples else 0.0,
            "final_speed": self.stats["avg_speed"],
            "final_cohesion": self.stats["avg_cohesion"],
            "final_classification_counts": classification_counts(self.flock),
            "timeseries": self.stats["timeseries"],
            "params": self.params.to_dict(),
        }
