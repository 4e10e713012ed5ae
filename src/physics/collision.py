"""Arm catch zones and flake collision tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from core.config import CollisionConfig
from input.pose import PoseSnapshot
from physics.flake import ArmSide, FieldBounds, Flake
from utils.geometry import Point, Polygon, point_in_polygon, rectangle_from_segment, scale_point

# Overlapping zones are resolved by this order alone
ZONE_ORDER: Tuple[ArmSide, ...] = (ArmSide.LEFT, ArmSide.RIGHT)


@dataclass(frozen=True)
class CatchZone:
    side: ArmSide
    corners: Polygon

    def contains(self, point: Point) -> bool:
        return point_in_polygon(point, self.corners)


@dataclass
class CollisionDetector:
    config: CollisionConfig = field(default_factory=CollisionConfig)

    def build_zones(self, pose: PoseSnapshot, bounds: FieldBounds) -> List[CatchZone]:
        zones: List[CatchZone] = []
        for side in ZONE_ORDER:
            shoulder, wrist = pose.arm(side)
            if shoulder is None or wrist is None:
                continue
            corners = rectangle_from_segment(
                scale_point(shoulder, bounds.width, bounds.height),
                scale_point(wrist, bounds.width, bounds.height),
                self.config.zone_half_width,
            )
            if corners is not None:
                zones.append(CatchZone(side=side, corners=corners))
        return zones

    def test_catch(self, flake: Flake, zones: Sequence[CatchZone]) -> Optional[Tuple[ArmSide, Point]]:
        for zone in zones:
            if zone.contains(flake.position):
                return zone.side, flake.position
        return None


def apply_catch(flake: Flake, side: ArmSide, point: Point) -> None:
    """Pin a flake where it was caught. Caught flakes never fall again."""
    if flake.is_caught:
        return
    flake.is_caught = True
    flake.caught_by = side
    flake.catch_position = point
    flake.position = point
    flake.velocity = (0.0, 0.0)
