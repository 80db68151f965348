"""Pygame viewer for the RPS arena.

Draws every agent as a coloured disc with its kind letter and overlays a
small HUD with the population counts. The simulation itself is the same
``SimulationEngine`` used by the headless runner and the web backend.

Controls:
    P       pause / resume
    R       restart with a fresh population
    H       toggle the HUD
    ESC     quit
"""

import logging
import random
from typing import Optional, Tuple

import pygame

from rps.config.display import BACKGROUND_COLOR, HUD_FONT_SIZE, HUD_TEXT_COLOR
from rps.config.simulation_config import SimulationConfig
from rps.kinds import Kind, profile
from rps.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


class ArenaViewer:
    """A window onto one simulation engine.

    Attributes:
        engine: The simulation being drawn
        screen: Pygame display surface
        clock: Pygame clock for frame pacing
        show_hud: Whether the counts overlay is drawn
        frame_rate: Frame cap taken from the engine's timing config
    """

    def __init__(self, engine: SimulationEngine) -> None:
        self.engine = engine
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.hud_font: Optional[pygame.font.Font] = None
        self.label_font: Optional[pygame.font.Font] = None
        self.show_hud: bool = True
        self.frame_rate: int = engine.config.timing.frame_rate

    def setup(self) -> bool:
        """Open the window and populate the arena; returns False on display errors."""
        arena = self.engine.config.arena
        try:
            self.screen = pygame.display.set_mode((int(arena.width), int(arena.height)))
            pygame.display.set_caption("Rock Paper Scissors Arena")
        except pygame.error as e:
            logger.error("Couldn't set the display mode: %s", e)
            return False

        self.hud_font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.label_font = pygame.font.Font(None, int(self.engine.config.agents.size * 0.6))
        self.engine.setup()
        return True

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        """Convert arena-local coordinates (origin at centre, y up) to pixels."""
        arena = self.engine.config.arena
        return int(x + arena.width / 2), int(arena.height / 2 - y)

    def handle_events(self) -> bool:
        """Process input; returns False when the viewer should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                elif event.key == pygame.K_p:
                    self.engine.paused = not self.engine.paused
                    logger.info("Simulation %s", "paused" if self.engine.paused else "resumed")
                elif event.key == pygame.K_r:
                    self.engine.setup()
                    logger.info("Simulation restarted")
                elif event.key == pygame.K_h:
                    self.show_hud = not self.show_hud
        return True

    def render(self) -> None:
        if self.screen is None:
            return
        self.screen.fill(BACKGROUND_COLOR)

        radius = int(self.engine.config.agents.size / 2)
        for view in self.engine.snapshot():
            kind_profile = profile(view.kind)
            center = self.to_screen(view.x, view.y)
            pygame.draw.circle(self.screen, kind_profile.color, center, radius)
            label = self.label_font.render(kind_profile.label, True, BACKGROUND_COLOR)
            self.screen.blit(label, label.get_rect(center=center))

        if self.show_hud:
            self.draw_hud()
        pygame.display.flip()

    def draw_hud(self) -> None:
        counts = self.engine.registry.counts()
        parts = [f"{kind.name.title()}: {counts[kind]}" for kind in Kind]
        parts.append(f"Conversions: {self.engine.population.total_conversions}")
        if self.engine.paused:
            parts.append("PAUSED")
        text = self.hud_font.render("   ".join(parts), True, HUD_TEXT_COLOR)
        self.screen.blit(text, (10, 10))

    def run(self) -> None:
        """Main loop: one engine update per rendered frame."""
        if not self.setup():
            return
        running = True
        while running:
            dt = self.clock.tick(self.frame_rate) / 1000.0
            running = self.handle_events()
            self.engine.update(dt)
            self.render()


def main(config: Optional[SimulationConfig] = None, seed: Optional[int] = None) -> None:
    pygame.init()
    try:
        engine = SimulationEngine(config, rng=random.Random(seed))
        ArenaViewer(engine).run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    main()
