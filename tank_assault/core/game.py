"""Fixed-timestep simulation of a tank battle round."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

from tank_assault.core.geometry import normalize_angle, point_in_rect
from tank_assault.core.levels import LevelController
from tank_assault.core.projectile import Projectile
from tank_assault.core.tank import Tank
from tank_assault.core.world import Outcome, World

CONTROL_NAMES = ("rotate_left", "rotate_right", "forward", "backward", "fire")


@dataclass(frozen=True)
class Controls:
    """Snapshot of the player's input for one tick."""

    pressed: FrozenSet[str] = frozenset()
    pointer: Tuple[float, float] = (0.0, 0.0)

    @classmethod
    def of(cls, *names: str, pointer: Tuple[float, float] = (0.0, 0.0)) -> "Controls":
        unknown = set(names) - set(CONTROL_NAMES)
        if unknown:
            raise ValueError(f"unknown controls: {sorted(unknown)}")
        return cls(frozenset(names), pointer)

    def is_pressed(self, name: str) -> bool:
        return name in self.pressed


@dataclass
class TickEvents:
    """Everything observable that happened during one simulation step."""

    cues: List[str] = field(default_factory=list)
    shots: List[Projectile] = field(default_factory=list)
    destroyed: List[Tank] = field(default_factory=list)
    player_hit: bool = False
    level_loaded: Optional[int] = None
    outcome: Optional[Outcome] = None


class Game:
    """Advance a world by one tick: player, enemies, projectiles, then outcome."""

    def __init__(self, levels: Optional[LevelController] = None) -> None:
        self.levels = levels or LevelController()

    def step(self, world: World, controls: Controls, now: float) -> TickEvents:
        events = TickEvents()
        if not world.running:
            return events
        self.update_player(world, controls, now, events)
        self.update_enemies(world, now, events)
        self.update_projectiles(world, events)
        self.check_outcome(world, events)
        return events

    # ------------------------------------------------------------------
    # Phase 1: player
    def update_player(
        self, world: World, controls: Controls, now: float, events: TickEvents
    ) -> None:
        player = world.player
        settings = world.settings
        if controls.is_pressed("rotate_left"):
            player.angle -= settings.player_turn_rate
        if controls.is_pressed("rotate_right"):
            player.angle += settings.player_turn_rate

        speed = 0.0
        if controls.is_pressed("forward"):
            speed = settings.player_speed
        elif controls.is_pressed("backward"):
            speed = -settings.player_speed
        if speed:
            player.attempt_move(
                math.cos(player.angle) * speed, math.sin(player.angle) * speed, world
            )

        player.turret_angle = player.angle_to(*controls.pointer)

        if controls.is_pressed("fire"):
            self._fire(world, player, now, events)

    # ------------------------------------------------------------------
    # Phase 2: enemies
    def update_enemies(self, world: World, now: float, events: TickEvents) -> None:
        settings = world.settings
        player = world.player
        for enemy in world.enemies:
            if not enemy.alive:
                continue
            target_angle = enemy.angle_to(player.x, player.y)
            distance = enemy.distance_to(player.x, player.y)
            enemy.turret_angle = target_angle

            diff = normalize_angle(target_angle - enemy.angle)
            if abs(diff) > settings.enemy_turn_deadband:
                enemy.angle += settings.enemy_turn_rate if diff > 0 else -settings.enemy_turn_rate

            if distance > settings.enemy_shoot_range:
                enemy.attempt_move(
                    math.cos(enemy.angle) * settings.enemy_speed,
                    math.sin(enemy.angle) * settings.enemy_speed,
                    world,
                )

            # One gate for the whole enemy side.
            if (
                world.last_enemy_shot is None
                or now - world.last_enemy_shot >= settings.enemy_fire_interval
            ):
                self._fire(world, enemy, now, events)
                world.last_enemy_shot = now

    # ------------------------------------------------------------------
    # Phase 3: projectiles
    def update_projectiles(self, world: World, events: TickEvents) -> None:
        settings = world.settings
        survivors: List[Projectile] = []
        for projectile in world.projectiles:
            projectile.advance()
            if projectile.is_out_of_bounds(world.width, world.height):
                continue
            if projectile.from_player:
                target = self._first_hit(projectile, world.enemies)
                if target is not None:
                    if target.apply_damage(settings.player_damage):
                        world.enemies.remove(target)
                        world.score += settings.kill_score
                        events.destroyed.append(target)
                        events.cues.append("explosion")
                    continue
            elif world.player.alive and projectile.collides_with(world.player):
                events.player_hit = True
                if world.player.apply_damage(settings.enemy_damage):
                    world.end(Outcome.DEFEAT)
                    events.outcome = Outcome.DEFEAT
                events.cues.append("hit")
                continue
            if self._inside_obstacle(projectile, world):
                continue
            survivors.append(projectile)
        world.projectiles = survivors

    # ------------------------------------------------------------------
    # Phase 4: outcome
    def check_outcome(self, world: World, events: TickEvents) -> None:
        if world.ended or world.living_enemies():
            return
        if world.level < world.total_levels:
            self.levels.next_level(world)
            events.level_loaded = world.level
        else:
            world.end(Outcome.VICTORY)
            events.outcome = Outcome.VICTORY

    # ------------------------------------------------------------------
    # Helpers
    def _fire(self, world: World, tank: Tank, now: float, events: TickEvents) -> None:
        projectile = tank.fire(now)
        if projectile is None:
            return
        world.projectiles.append(projectile)
        events.shots.append(projectile)
        events.cues.append("shoot")

    @staticmethod
    def _first_hit(projectile: Projectile, tanks: Iterable[Tank]) -> Optional[Tank]:
        for tank in tanks:
            if tank.alive and projectile.collides_with(tank):
                return tank
        return None

    @staticmethod
    def _inside_obstacle(projectile: Projectile, world: World) -> bool:
        return any(
            point_in_rect(projectile.x, projectile.y, o.x, o.y, o.width, o.height)
            for o in world.obstacles
        )


__all__ = ["CONTROL_NAMES", "Controls", "Game", "TickEvents"]
