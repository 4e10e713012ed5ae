"""Drift integration for uncaught flakes."""
from __future__ import annotations

from dataclasses import dataclass, field

from core.config import PhysicsConfig
from physics.flake import FieldBounds, Flake
from utils.geometry import clamp


@dataclass
class FlakePhysics:
    config: PhysicsConfig = field(default_factory=PhysicsConfig)

    def integrate(self, flake: Flake, dt: float, bounds: FieldBounds) -> None:
        if flake.is_caught:
            return

        self.apply_gravity(flake, dt)

        vx, vy = flake.velocity
        x = flake.position[0] + vx * dt
        y = flake.position[1] + vy * dt
        # Only the cross axis is clamped so flakes can leave past the far edge
        flake.position = (x, clamp(y, 0.0, bounds.cross_extent))

    def apply_gravity(self, flake: Flake, dt: float) -> None:
        if flake.is_caught:
            return

        vx, vy = flake.velocity
        vx = min(vx + self.config.gravity * dt, self.config.terminal_velocity)
        flake.velocity = (vx, vy)
