"""Flake entity and the value types shared by the simulation."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
from uuid import UUID, uuid4

from utils.geometry import Point

Vector = Tuple[float, float]
Color = Tuple[int, int, int]


class ArmSide(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class FieldBounds:
    """Play field size. Flakes travel along x; y is the perpendicular axis."""

    width: float
    height: float

    @property
    def travel_extent(self) -> float:
        return self.width

    @property
    def cross_extent(self) -> float:
        return self.height


@dataclass
class Flake:
    position: Point
    color: Color
    size: float = 20.0
    velocity: Vector = (0.0, 1.0)
    is_caught: bool = False
    caught_by: Optional[ArmSide] = None
    catch_position: Optional[Point] = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class FlakeView:
    """Read-only copy of a flake handed to renderers."""

    id: UUID
    position: Point
    color: Color
    size: float
    is_caught: bool
    caught_by: Optional[ArmSide]

    @classmethod
    def from_flake(cls, flake: Flake) -> "FlakeView":
        return cls(
            id=flake.id,
            position=flake.position,
            color=flake.color,
            size=flake.size,
            is_caught=flake.is_caught,
            caught_by=flake.caught_by,
        )
