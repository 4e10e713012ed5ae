"""Flake simulation: spawning, catching, drifting and culling."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from core.config import AppConfig
from input.pose import PoseBuffer, PoseSnapshot
from physics.collision import CatchZone, CollisionDetector, apply_catch
from physics.flake import FieldBounds, Flake, FlakeView
from physics.generator import FlakeGenerator
from physics.integrator import FlakePhysics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationSnapshot:
    flakes: Tuple[FlakeView, ...] = ()
    zones: Tuple[CatchZone, ...] = ()


class FlakeSystem:
    """
    Owns the live flakes and advances them once per frame.

    Pose producers call update_pose from any thread; tick reads the most
    recent pose once, when it builds the catch zones.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        physics: Optional[FlakePhysics] = None,
        collision: Optional[CollisionDetector] = None,
        generator: Optional[FlakeGenerator] = None,
        clock: Callable[[], float] = time.monotonic,
        pose_buffer: Optional[PoseBuffer] = None,
    ) -> None:
        self.config = config or AppConfig()
        self.physics = physics or FlakePhysics(config=self.config.physics)
        self.collision = collision or CollisionDetector(config=self.config.collision)
        self.generator = generator or FlakeGenerator(config=self.config.flakes)
        self.pose_buffer = pose_buffer or PoseBuffer()
        self.flakes: List[Flake] = []
        self._clock = clock
        self._last_spawn_time = clock()
        self._snapshot = SimulationSnapshot()

    @property
    def snapshot(self) -> SimulationSnapshot:
        return self._snapshot

    def update_pose(self, pose: PoseSnapshot) -> None:
        self.pose_buffer.publish(pose)

    def tick(self, dt: float, bounds: FieldBounds) -> SimulationSnapshot:
        self._spawn_if_due(bounds)
        zones = self.collision.build_zones(self.pose_buffer.latest(), bounds)
        self._update_flakes(dt, bounds, zones)
        self._cull(bounds)

        self._snapshot = SimulationSnapshot(
            flakes=tuple(FlakeView.from_flake(flake) for flake in self.flakes),
            zones=tuple(zones),
        )
        return self._snapshot

    def reset(self) -> None:
        logger.info("Resetting flake field (%d flakes dropped)", len(self.flakes))
        self.flakes.clear()
        self._last_spawn_time = self._clock()
        self._snapshot = SimulationSnapshot()

    def _spawn_if_due(self, bounds: FieldBounds) -> None:
        now = self._clock()
        if now - self._last_spawn_time < self.config.flakes.spawn_interval:
            return
        coordinate = self.generator.random_spawn_coordinate(bounds)
        flake = self.generator.generate_flake(coordinate, bounds)
        self.flakes.append(flake)
        self._last_spawn_time = now
        logger.debug("Spawned flake %s at y=%.1f", flake.id, coordinate)

    def _update_flakes(self, dt: float, bounds: FieldBounds, zones: List[CatchZone]) -> None:
        for flake in self.flakes:
            if flake.is_caught:
                flake.position = flake.catch_position
                continue

            hit = self.collision.test_catch(flake, zones)
            if hit is not None:
                side, point = hit
                apply_catch(flake, side, point)
                logger.debug("Flake %s caught by %s arm at (%.1f, %.1f)", flake.id, side.value, *point)
                continue

            self.physics.integrate(flake, dt, bounds)

    def _cull(self, bounds: FieldBounds) -> None:
        limit = bounds.travel_extent + self.config.flakes.cull_margin
        kept = [flake for flake in self.flakes if flake.is_caught or flake.position[0] <= limit]
        removed = len(self.flakes) - len(kept)
        if removed:
            logger.debug("Culled %d flakes past x=%.1f", removed, limit)
        self.flakes[:] = kept
