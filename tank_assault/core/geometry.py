"""Pure collision helpers shared by tanks, projectiles and spawn checks."""

from __future__ import annotations

import math


def rects_overlap(
    ax: float,
    ay: float,
    aw: float,
    ah: float,
    bx: float,
    by: float,
    bw: float,
    bh: float,
) -> bool:
    """Return ``True`` when both axis intervals intersect with positive width."""

    return ax + aw > bx and ax < bx + bw and ay + ah > by and ay < by + bh


def square_overlaps_rect(
    cx: float, cy: float, half: float, x: float, y: float, width: float, height: float
) -> bool:
    return rects_overlap(cx - half, cy - half, half * 2, half * 2, x, y, width, height)


def point_in_rect(px: float, py: float, x: float, y: float, width: float, height: float) -> bool:
    """Strict insideness: points on the rectangle edge are outside."""

    return x < px < x + width and y < py < y + height


def point_near(px: float, py: float, cx: float, cy: float, radius: float) -> bool:
    return math.hypot(px - cx, py - cy) < radius


def within_bounds(x: float, y: float, width: float, height: float, margin: float = 0.0) -> bool:
    return margin <= x <= width - margin and margin <= y <= height - margin


def normalize_angle(angle: float) -> float:
    """Wrap ``angle`` into the half-open interval (-pi, pi]."""

    while angle > math.pi:
        angle -= math.tau
    while angle <= -math.pi:
        angle += math.tau
    return angle


__all__ = [
    "normalize_angle",
    "point_in_rect",
    "point_near",
    "rects_overlap",
    "square_overlaps_rect",
    "within_bounds",
]
