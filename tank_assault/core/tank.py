"""Tank entity definitions and actions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from tank_assault.core.projectile import Projectile
from tank_assault.core.world import Side, World

MAX_HP = 100
MUZZLE_OFFSET = 10.0


@dataclass
class Tank:
    """A tank with a body heading and an independently aimed turret."""

    x: float
    y: float
    side: Side = Side.ENEMY
    angle: float = 0.0
    turret_angle: float = 0.0
    hp: int = MAX_HP
    size: float = 30.0
    fire_cooldown: float = 300.0
    last_fired: Optional[float] = None
    projectile_speed: float = 8.0
    projectile_size: float = 4.0

    @property
    def half_size(self) -> float:
        return self.size / 2

    @property
    def alive(self) -> bool:
        return self.hp > 0

    @property
    def is_player(self) -> bool:
        return self.side is Side.PLAYER

    def attempt_move(self, dx: float, dy: float, world: World) -> bool:
        """Move by (dx, dy) unless the new footprint leaves the field or hits cover.

        The move is all-or-nothing: there is no sliding along an obstacle.
        """

        target_x = self.x + dx
        target_y = self.y + dy
        if not world.contains(target_x, target_y, margin=self.half_size):
            return False
        if world.blocked(target_x, target_y, self.half_size):
            return False
        self.x = target_x
        self.y = target_y
        return True

    def can_fire(self, now: float) -> bool:
        return self.last_fired is None or now - self.last_fired >= self.fire_cooldown

    def fire(self, now: float) -> Optional[Projectile]:
        if not self.can_fire(now):
            return None
        reach = self.half_size + MUZZLE_OFFSET
        projectile = Projectile(
            x=self.x + math.cos(self.turret_angle) * reach,
            y=self.y + math.sin(self.turret_angle) * reach,
            angle=self.turret_angle,
            side=self.side,
            speed=self.projectile_speed,
            size=self.projectile_size,
        )
        self.last_fired = now
        return projectile

    def apply_damage(self, amount: int) -> bool:
        """Subtract ``amount`` hp and report whether this call destroyed the tank."""

        was_alive = self.alive
        self.hp = max(0, self.hp - amount)
        return was_alive and not self.alive

    def reset(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.hp = MAX_HP
        self.angle = 0.0
        self.turret_angle = 0.0
        self.last_fired = None

    def angle_to(self, x: float, y: float) -> float:
        return math.atan2(y - self.y, x - self.x)

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(x - self.x, y - self.y)

    def info_line(self) -> str:
        label = "Player" if self.is_player else "Enemy"
        return (
            f"{label} HP:{self.hp:3d} Pos:({self.x:6.1f},{self.y:6.1f})"
            f" Body:{math.degrees(self.angle):6.1f} Turret:{math.degrees(self.turret_angle):6.1f}"
        )


__all__ = ["MAX_HP", "Side", "Tank"]
