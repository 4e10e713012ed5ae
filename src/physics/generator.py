"""Flake spawning."""
from __future__ import annotations

import random
from dataclasses import dataclass, field

from core.config import FlakeConfig
from physics.flake import Color, FieldBounds, Flake


@dataclass
class FlakeGenerator:
    config: FlakeConfig = field(default_factory=FlakeConfig)
    rng: random.Random = field(default_factory=random.Random)

    def generate_flake(self, spawn_coordinate: float, bounds: FieldBounds) -> Flake:
        """Create a flake one size-length left of the field at the given height."""
        size = self.config.size
        return Flake(
            position=(-size, spawn_coordinate),
            color=self.random_color(),
            size=size,
            velocity=(self.config.initial_speed, 0.0),
        )

    def random_spawn_coordinate(self, bounds: FieldBounds) -> float:
        return self.rng.uniform(0.0, bounds.cross_extent)

    def random_color(self) -> Color:
        return self.rng.choice(self.config.palette)
