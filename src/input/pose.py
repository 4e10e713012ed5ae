"""Latest observed arm pose and the buffer producers publish it through."""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from physics.flake import ArmSide
from utils.geometry import Point

MIN_JOINT_CONFIDENCE = 0.3

Joint = Tuple[float, float, float]


@dataclass(frozen=True)
class PoseSnapshot:
    """Normalized [0, 1] arm joints. A missing joint is None."""

    left_shoulder: Optional[Point] = None
    left_wrist: Optional[Point] = None
    right_shoulder: Optional[Point] = None
    right_wrist: Optional[Point] = None

    def arm(self, side: ArmSide) -> Tuple[Optional[Point], Optional[Point]]:
        if side is ArmSide.LEFT:
            return self.left_shoulder, self.left_wrist
        return self.right_shoulder, self.right_wrist

    @classmethod
    def from_joints(
        cls,
        joints: Mapping[str, Joint],
        min_confidence: float = MIN_JOINT_CONFIDENCE,
        flip_y: bool = False,
    ) -> "PoseSnapshot":
        """
        Build a snapshot from a pose estimator's joint table.

        Args:
            joints: Joint name ("left_shoulder", ...) to (x, y, confidence).
            min_confidence: Joints at or below this confidence are dropped.
            flip_y: Convert from a bottom-left origin to a top-left one.
        """

        def pick(name: str) -> Optional[Point]:
            joint = joints.get(name)
            if joint is None:
                return None
            x, y, confidence = joint
            if confidence <= min_confidence:
                return None
            return (x, 1.0 - y) if flip_y else (x, y)

        return cls(
            left_shoulder=pick("left_shoulder"),
            left_wrist=pick("left_wrist"),
            right_shoulder=pick("right_shoulder"),
            right_wrist=pick("right_wrist"),
        )


EMPTY_POSE = PoseSnapshot()


class PoseBuffer:
    """Single-slot handoff between a pose producer thread and the simulation tick."""

    def __init__(self, initial: PoseSnapshot = EMPTY_POSE) -> None:
        self._lock = threading.Lock()
        self._latest = initial

    def publish(self, snapshot: PoseSnapshot) -> None:
        with self._lock:
            self._latest = snapshot

    def latest(self) -> PoseSnapshot:
        with self._lock:
            return self._latest

    def clear(self) -> None:
        self.publish(EMPTY_POSE)
