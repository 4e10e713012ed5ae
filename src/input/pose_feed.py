"""Serial pose tracker feed.

The tracker writes one line per frame:
``lsx,lsy,lwx,lwy,rsx,rsy,rwx,rwy`` in normalized coordinates. An empty
field, ``nan``, ``inf`` or a value outside [0, 1] marks a coordinate
the tracker lost.
"""
from __future__ import annotations

import logging
import math
import threading
from typing import List, Optional

import serial

from core.config import PoseFeedConfig
from input.pose import PoseBuffer, PoseSnapshot
from utils.geometry import Point

logger = logging.getLogger(__name__)

FIELD_COUNT = 8


def _parse_coordinate(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    value = float(raw)
    # Non-finite or out-of-range coordinates count as lost
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        return None
    return value


def parse_pose_line(line: str) -> Optional[PoseSnapshot]:
    """Parse one tracker line. Returns None for a malformed line."""
    parts = line.strip().split(",")
    if len(parts) != FIELD_COUNT:
        return None

    try:
        values = [_parse_coordinate(part) for part in parts]
    except ValueError:
        return None

    points: List[Optional[Point]] = []
    for x, y in zip(values[0::2], values[1::2]):
        points.append(None if x is None or y is None else (x, y))

    left_shoulder, left_wrist, right_shoulder, right_wrist = points
    return PoseSnapshot(
        left_shoulder=left_shoulder,
        left_wrist=left_wrist,
        right_shoulder=right_shoulder,
        right_wrist=right_wrist,
    )


class SerialPoseFeed:
    """Reads tracker lines on a background thread and publishes them to a PoseBuffer."""

    def __init__(
        self, config: PoseFeedConfig, buffer: PoseBuffer, port: Optional[serial.Serial] = None
    ) -> None:
        self._config = config
        self._buffer = buffer
        self._serial = port
        self._running = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def start(self) -> bool:
        if self.running:
            return True
        if self._serial is None:
            if not self._config.enabled:
                logger.info("Pose feed disabled; arms will only follow the mouse")
                return False
            try:
                self._serial = serial.Serial(
                    self._config.port, self._config.baud_rate, timeout=self._config.timeout
                )
            except serial.SerialException as exc:
                logger.error("Failed to open pose tracker on %s: %s", self._config.port, exc)
                return False
            logger.info("Pose tracker connected on %s", self._config.port)

        self._running.set()
        self._thread = threading.Thread(target=self._read_loop, name="pose-feed", daemon=True)
        self._thread.start()
        return True

    def stop(self) -> None:
        self._running.clear()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            self._thread = None
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def poll_once(self) -> bool:
        """Read a single line and publish it. Returns True if a pose was published."""
        raw = self._serial.readline()
        if not raw:
            return False
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.debug("Dropping undecodable pose line: %s", exc)
            return False

        snapshot = parse_pose_line(line)
        if snapshot is None:
            logger.debug("Dropping malformed pose line: %r", line)
            return False
        self._buffer.publish(snapshot)
        return True

    def _read_loop(self) -> None:
        while self._running.is_set():
            try:
                self.poll_once()
            except serial.SerialException as exc:
                logger.error("Pose tracker read failed, stopping feed: %s", exc)
                self._buffer.clear()
                self._running.clear()
