"""Battlefield state: obstacles, tuning constants and the mutable world aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from tank_assault.core.geometry import square_overlaps_rect, within_bounds

if TYPE_CHECKING:
    from tank_assault.core.projectile import Projectile
    from tank_assault.core.tank import Tank


@dataclass
class WorldSettings:
    """Gameplay constants for a battlefield."""

    width: int = 1200
    height: int = 800
    tank_size: float = 30.0
    projectile_size: float = 4.0
    projectile_speed: float = 8.0
    player_speed: float = 3.0
    enemy_speed: float = 2.0
    player_turn_rate: float = 0.05
    enemy_turn_rate: float = 0.03
    enemy_turn_deadband: float = 0.1
    enemy_shoot_range: float = 200.0
    enemy_fire_interval: float = 1000.0  # milliseconds, shared by all enemies
    fire_cooldown: float = 300.0  # milliseconds, per tank
    player_damage: int = 25
    enemy_damage: int = 20
    kill_score: int = 100
    player_spawn: Tuple[float, float] = (100.0, 400.0)
    banner_duration: float = 3000.0


@dataclass(frozen=True)
class Obstacle:
    """Immutable axis-aligned block that stops tanks and projectiles."""

    x: float
    y: float
    width: float
    height: float


class Side(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


class Outcome(Enum):
    VICTORY = "victory"
    DEFEAT = "defeat"


class World:
    """Everything that changes while a round is played."""

    def __init__(
        self,
        player: Tank,
        settings: Optional[WorldSettings] = None,
        *,
        total_levels: int = 1,
    ) -> None:
        self.settings = settings or WorldSettings()
        self.width = self.settings.width
        self.height = self.settings.height
        self.player = player
        self.enemies: List[Tank] = []
        self.projectiles: List[Projectile] = []
        self.obstacles: List[Obstacle] = []
        self.score = 0
        self.level = 1
        self.total_levels = total_levels
        self.running = True
        self.outcome: Optional[Outcome] = None
        self.last_enemy_shot: Optional[float] = None

    # ------------------------------------------------------------------
    # Queries
    def living_enemies(self) -> List[Tank]:
        return [enemy for enemy in self.enemies if enemy.alive]

    def contains(self, x: float, y: float, margin: float = 0.0) -> bool:
        return within_bounds(x, y, self.width, self.height, margin)

    def blocked(self, x: float, y: float, half_size: float) -> bool:
        """Return ``True`` if a square centred on (x, y) touches any obstacle."""

        for obstacle in self.obstacles:
            if square_overlaps_rect(
                x, y, half_size, obstacle.x, obstacle.y, obstacle.width, obstacle.height
            ):
                return True
        return False

    @property
    def ended(self) -> bool:
        return self.outcome is not None

    # ------------------------------------------------------------------
    # Lifecycle
    def end(self, outcome: Outcome) -> None:
        self.running = False
        self.outcome = outcome


__all__ = ["Obstacle", "Outcome", "Side", "World", "WorldSettings"]
