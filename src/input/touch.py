"""Mouse fallback that drives the right arm when no tracker is attached."""
from __future__ import annotations

from typing import Tuple

import pygame

from input.pose import PoseBuffer, PoseSnapshot

SHOULDER_ANCHOR = (0.5, 0.55)


class MousePoseInput:
    """While the left button is held, the right arm runs from a fixed shoulder to the cursor."""

    def __init__(self, buffer: PoseBuffer, field_size: Tuple[int, int]) -> None:
        self._buffer = buffer
        self._field_size = field_size
        self.active = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.active = True
            self._publish(event.pos)
        elif event.type == pygame.MOUSEMOTION and self.active:
            self._publish(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.active = False
            self._buffer.clear()

    def _publish(self, pos: Tuple[int, int]) -> None:
        width, height = self._field_size
        wrist = (pos[0] / width, pos[1] / height)
        self._buffer.publish(PoseSnapshot(right_shoulder=SHOULDER_ANCHOR, right_wrist=wrist))
