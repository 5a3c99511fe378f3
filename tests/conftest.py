import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")

import pygame
import pytest

from flocksim.core.config import Bounds, SimulationParameters
from flocksim.core.flock import Flock


@pytest.fixture(autouse=True)
def seeded_random():
    """Seed the module-level RNG the flock spawns boids with."""
    random.seed(1234)


@pytest.fixture
def params():
    """Returns a fresh default parameter set."""
    return SimulationParameters()


@pytest.fixture
def bounds():
    return Bounds.centered(400, 300)


@pytest.fixture
def flock(bounds):
    """Returns an empty flock on a 400x300 domain centred on the origin."""
    return Flock(bounds)
