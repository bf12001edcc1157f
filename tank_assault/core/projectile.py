"""Straight-line shells fired by tanks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tank_assault.core.geometry import point_near, within_bounds
from tank_assault.core.world import Side

if TYPE_CHECKING:
    from tank_assault.core.tank import Tank


@dataclass
class Projectile:
    """A shell travelling at constant speed along a fixed heading."""

    x: float
    y: float
    angle: float
    side: Side
    speed: float = 8.0
    size: float = 4.0

    def advance(self) -> None:
        self.x += math.cos(self.angle) * self.speed
        self.y += math.sin(self.angle) * self.speed

    def is_out_of_bounds(self, width: float, height: float) -> bool:
        return not within_bounds(self.x, self.y, width, height)

    def collides_with(self, tank: Tank) -> bool:
        # Circular test, coarser than the square used for tank movement.
        return point_near(self.x, self.y, tank.x, tank.y, tank.half_size + self.size / 2)

    @property
    def from_player(self) -> bool:
        return self.side is Side.PLAYER


__all__ = ["Projectile"]
