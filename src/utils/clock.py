"""Frame timing utilities."""
from __future__ import annotations

from dataclasses import dataclass

import pygame


@dataclass
class FrameClock:
    target_fps: int

    def __post_init__(self) -> None:
        self._clock = pygame.time.Clock()

    def tick(self) -> float:
        """Wait for the next frame and return the measured delta in seconds."""
        return self._clock.tick(self.target_fps) / 1000.0

    @staticmethod
    def seconds() -> float:
        """Seconds since pygame.init(); used as the flake spawn clock."""
        return pygame.time.get_ticks() / 1000.0
