"""
Interactive simulation with pygame GUI.
"""

import sys
import time
from typing import Optional

import pygame

from ..core.config import (
    SimulationConfig, SimulationParameters, FRAME_TIME, CLASSIFICATION_COLORS
)
from ..core.flock import Flock


# Weights selectable with the number keys
WEIGHT_KEYS = {
    pygame.K_1: "separation_weight",
    pygame.K_2: "alignment_weight",
    pygame.K_3: "cohesion_weight",
    pygame.K_4: "avoidance_weight",
}

WEIGHT_STEP = 0.1
POPULATION_STEP = 10
MAX_POPULATION = 1000


class Simulation:
    """
    Interactive flocking simulation with pygame visualization.

    The mouse acts as the predator while it is over the window. Keyboard
    controls adjust the simulation parameters in real time.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 params: Optional[SimulationParameters] = None):
        """
        Initialize the simulation.

        Args:
            config: Window configuration (uses defaults if None)
            params: Engine parameters (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else SimulationConfig()
        self.params = params if params else SimulationParameters()

        width = self.config.width
        height = self.config.height

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Boids Simulation")
        self.clock = pygame.time.Clock()
        self.origin = pygame.Vector2(width / 2, height / 2)

        self.flock = Flock(self.config.bounds)
        self.predator_pos: Optional[pygame.Vector2] = None
        self.selected_weight = "separation_weight"

        self.last_update_time = time.perf_counter()
        self.frame_count = 0
        self.paused = False
        self.running = True

    def _poll_predator(self) -> None:
        """Use the mouse position as the predator while it is over the window."""
        if pygame.mouse.get_focused():
            self.predator_pos = pygame.Vector2(pygame.mouse.get_pos()) - self.origin
        else:
            self.predator_pos = None

    def update(self) -> bool:
        """
        Advance the flock if a full frame interval has elapsed.

        Returns:
            True if the flock was updated
        """
        now = time.perf_counter()
        if self.paused or now - self.last_update_time < FRAME_TIME:
            return False

        self.last_update_time = now
        self.flock.update_boids(self.params, self.predator_pos)
        self.frame_count += 1
        return True

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)
        pygame.draw.rect(self.screen, self.config.perimeterColor,
                         self.screen.get_rect(), 2)

        if self.predator_pos is not None:
            center = self.predator_pos + self.origin
            pygame.draw.circle(self.screen, self.config.predatorColor, center, 5)
            if self.config.showAvoidanceRadius and self.params.avoidance_radius > 0:
                pygame.draw.circle(self.screen, self.config.predatorColor, center,
                                   self.params.avoidance_radius, 2)

        for boid in self.flock:
            color = CLASSIFICATION_COLORS[boid.classification.name]
            boid.draw(self.screen, self.origin, color)

        self._draw_stats()

        pygame.display.flip()

    def _draw_stats(self) -> None:
        """Draw parameter and statistics overlay."""
        font = pygame.font.Font(None, 24)
        y_offset = 10

        p = self.params
        stats_text = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Boids: {len(self.flock)} / {p.target_population}",
            f"Max speed: {p.max_speed:.2f}  Max force: {p.max_force:.2f}",
            f"Radii: neighbor {p.neighbor_radius:.0f}  avoidance {p.avoidance_radius:.0f}",
        ]
        for name in WEIGHT_KEYS.values():
            marker = ">" if name == self.selected_weight else " "
            stats_text.append(f"{marker} {name}: {getattr(p, name):.1f}")
        if self.paused:
            stats_text.append("PAUSED")

        for text in stats_text:
            surface = font.render(text, True, (200, 200, 200))
            self.screen.blit(surface, (10, y_offset))
            y_offset += 25

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            self._poll_predator()
            self.update()
            self.draw()
            self.clock.tick(self.config.fpsTarget)

        pygame.quit()
        sys.exit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self.params.reset()
            print("Parameters reset to defaults")
        elif key == pygame.K_UP:
            self.params.target_population = min(MAX_POPULATION, self.params.target_population + POPULATION_STEP)
        elif key == pygame.K_DOWN:
            self.params.target_population = max(0, self.params.target_population - POPULATION_STEP)
        elif key in WEIGHT_KEYS:
            self.selected_weight = WEIGHT_KEYS[key]
        elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
            self._adjust_selected_weight(WEIGHT_STEP)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self._adjust_selected_weight(-WEIGHT_STEP)

    def _adjust_selected_weight(self, delta: float) -> None:
        value = round(getattr(self.params, self.selected_weight) + delta, 2)
        setattr(self.params, self.selected_weight, value)
        print(f"{self.selected_weight}: {value:.1f}")
