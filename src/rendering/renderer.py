"""Draws the published flake snapshot."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from core.config import WindowConfig
from physics.flake import ArmSide
from physics.flake_system import SimulationSnapshot

ZONE_COLORS = {
    ArmSide.LEFT: (120, 210, 255),
    ArmSide.RIGHT: (255, 200, 80),
}


@dataclass
class Renderer:
    config: WindowConfig
    screen: pygame.Surface

    def draw(self, snapshot: SimulationSnapshot) -> None:
        self.screen.fill(self.config.background_color)
        self._draw_zones(snapshot)
        self._draw_flakes(snapshot)

    def _draw_zones(self, snapshot: SimulationSnapshot) -> None:
        for zone in snapshot.zones:
            pygame.draw.polygon(self.screen, ZONE_COLORS[zone.side], zone.corners, width=2)

    def _draw_flakes(self, snapshot: SimulationSnapshot) -> None:
        for flake in snapshot.flakes:
            size = int(flake.size)
            rect = pygame.Rect(0, 0, size, size)
            rect.center = (int(flake.position[0]), int(flake.position[1]))
            pygame.draw.rect(self.screen, flake.color, rect, border_radius=4)
            if flake.is_caught:
                pygame.draw.rect(self.screen, (255, 255, 255), rect, width=1, border_radius=4)
