"""Plane geometry helpers for catch zones."""
from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

Point = Tuple[float, float]
Polygon = Tuple[Point, ...]


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Clamp a value between min and max"""
    return max(min_value, min(value, max_value))


def scale_point(point: Point, width: float, height: float) -> Point:
    """Map a normalized [0, 1] point onto a field of the given size."""
    return (point[0] * width, point[1] * height)


def rectangle_from_segment(p1: Point, p2: Point, half_width: float) -> Optional[Polygon]:
    """
    Build the rectangle whose long axis is the segment p1 -> p2.

    Args:
        p1: Start of the segment (e.g. the shoulder).
        p2: End of the segment (e.g. the wrist).
        half_width: Offset applied on each side of the segment.

    Returns:
        Four corners ordered [p1 + perp, p1 - perp, p2 - perp, p2 + perp],
        or None when the segment has zero length.
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    length = math.hypot(dx, dy)
    if length <= 0:
        return None

    perp_x = -dy / length * half_width
    perp_y = dx / length * half_width
    return (
        (p1[0] + perp_x, p1[1] + perp_y),
        (p1[0] - perp_x, p1[1] - perp_y),
        (p2[0] - perp_x, p2[1] - perp_y),
        (p2[0] + perp_x, p2[1] + perp_y),
    )


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Ray-casting parity test. Horizontal edges never toggle parity."""
    if len(polygon) < 3:
        return False

    px, py = point
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        # (yi > py) != (yj > py) is False whenever yi == yj, so the division is safe
        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside
