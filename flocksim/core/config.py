"""
Configuration classes and defaults for the flocking simulation.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, List, Tuple


@dataclass
class SimulationParameters:
    """Tunable engine parameters, read by the flock every frame."""

    # Population
    target_population: int = 100

    # Movement limits
    max_speed: float = 5.0
    max_force: float = 0.5

    # Rule weights
    separation_weight: float = 1.0
    alignment_weight: float = 1.0
    cohesion_weight: float = 1.0
    avoidance_weight: float = 1.0

    # Radii
    neighbor_radius: float = 50.0
    avoidance_radius: float = 75.0

    def reset(self) -> None:
        """Restore every parameter to its default value."""
        defaults = SimulationParameters()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))

    def to_dict(self) -> dict:
        """Convert parameters to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationParameters":
        """Create parameters from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


@dataclass(frozen=True)
class Bounds:
    """Rectangular simulation domain."""

    left: float
    right: float
    top: float
    bottom: float

    @classmethod
    def centered(cls, width: float, height: float) -> "Bounds":
        """Domain of the given size centred on the origin."""
        return cls(-width / 2, width / 2, -height / 2, height / 2)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass
class SimulationConfig:
    """Configuration for the host window and headless runs."""

    # Simulation area
    width: int = 1700
    height: int = 950

    # Frame pacing
    fpsTarget: int = 60

    # Visualization
    showAvoidanceRadius: bool = True
    backgroundColor: List[int] = field(default_factory=lambda: [25, 25, 25])
    perimeterColor: List[int] = field(default_factory=lambda: [255, 255, 0])
    predatorColor: List[int] = field(default_factory=lambda: [255, 0, 0])

    # Output
    reportOutputFile: str = "flock_report.json"

    @property
    def bounds(self) -> Bounds:
        return Bounds.centered(self.width, self.height)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "fpsTarget": self.fpsTarget,
            "showAvoidanceRadius": self.showAvoidanceRadius,
            "backgroundColor": self.backgroundColor,
            "perimeterColor": self.perimeterColor,
            "predatorColor": self.predatorColor,
            "reportOutputFile": self.reportOutputFile,
        }


# Default parameters for a fresh simulation
DEFAULT_PARAMETERS = SimulationParameters()

# The flock advances at most once per frame interval
FRAME_TIME = 1.0 / 60.0

# Debug colours, keyed by ForceCategory name
CLASSIFICATION_COLORS: Dict[str, Tuple[int, int, int]] = {
    "NONE": (255, 255, 255),
    "SEPARATION": (255, 255, 0),
    "ALIGNMENT": (0, 255, 0),
    "COHESION": (0, 0, 255),
    "AVOIDANCE": (255, 0, 0),
}
