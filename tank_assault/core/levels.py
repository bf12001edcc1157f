"""Level catalogue and the controller that stages each level on the world."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from tank_assault.core.tank import Tank
from tank_assault.core.world import Obstacle, Side, World, WorldSettings

SPAWN_SEARCH_OFFSETS = (50, 100, 150, 200)


@dataclass(frozen=True)
class LevelDefinition:
    """Hand-authored layout for a single level."""

    number: int
    name: str
    obstacles: Tuple[Obstacle, ...]
    spawns: Tuple[Tuple[float, float], ...]


class LevelCatalog:
    """Ordered, read-only collection of levels addressed from 1."""

    def __init__(self, levels: Sequence[LevelDefinition]) -> None:
        if not levels:
            raise ValueError("a level catalog needs at least one level")
        self._levels: Tuple[LevelDefinition, ...] = tuple(levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[LevelDefinition]:
        return iter(self._levels)

    def get(self, number: int) -> LevelDefinition:
        if not 1 <= number <= len(self._levels):
            raise IndexError(f"level {number} out of range 1..{len(self._levels)}")
        return self._levels[number - 1]

    @classmethod
    def from_data(cls, data: object) -> "LevelCatalog":
        """Build a catalog from the JSON-compatible layout used by ``load_catalog``."""

        if not isinstance(data, dict) or not isinstance(data.get("levels"), list):
            raise ValueError("catalog data must be an object with a 'levels' list")
        levels: List[LevelDefinition] = []
        for idx, entry in enumerate(data["levels"], start=1):
            if not isinstance(entry, dict):
                raise ValueError(f"level {idx} must be an object")
            try:
                name = str(entry.get("name", f"Level {idx}"))
                obstacles = tuple(
                    Obstacle(*(float(v) for v in rect)) for rect in entry.get("obstacles", [])
                )
                spawns = tuple(
                    (float(x), float(y)) for x, y in entry.get("spawns", [])
                )
            except (TypeError, ValueError) as exc:
                raise ValueError(f"level {idx} is malformed: {exc}") from exc
            levels.append(LevelDefinition(idx, name, obstacles, spawns))
        return cls(levels)


def _level(number: int, name: str, rects: Sequence[Tuple[float, float, float, float]], spawns) -> LevelDefinition:
    return LevelDefinition(
        number=number,
        name=name,
        obstacles=tuple(Obstacle(*rect) for rect in rects),
        spawns=tuple((float(x), float(y)) for x, y in spawns),
    )


_W = 1200
_H = 800

DEFAULT_LEVELS = LevelCatalog(
    [
        _level(
            1,
            "Training Ground",
            [
                (300, 200, 60, 200),
                (500, 400, 60, 200),
                (700, 100, 60, 200),
                (900, 500, 60, 200),
                (400, 600, 200, 60),
                (800, 300, 200, 60),
            ],
            [(_W - 100, 100), (_W - 100, _H - 100), (_W - 200, _H / 2)],
        ),
        _level(
            2,
            "Urban Warfare",
            [
                (200, 150, 80, 150),
                (400, 300, 80, 150),
                (600, 150, 80, 150),
                (800, 300, 80, 150),
                (1000, 150, 80, 150),
                (300, 500, 150, 80),
                (600, 500, 150, 80),
                (900, 500, 150, 80),
                (150, 650, 200, 60),
                (450, 650, 200, 60),
                (750, 650, 200, 60),
            ],
            [
                (_W - 150, 150),
                (_W - 150, _H - 150),
                (_W - 250, _H / 2),
                (_W - 350, 200),
                (_W - 350, _H - 200),
            ],
        ),
        _level(
            3,
            "Maze Runner",
            [
                (250, 100, 40, 300),
                (450, 100, 40, 300),
                (650, 100, 40, 300),
                (850, 100, 40, 300),
                (250, 500, 40, 300),
                (450, 500, 40, 300),
                (650, 500, 40, 300),
                (850, 500, 40, 300),
                (350, 200, 300, 40),
                (350, 400, 300, 40),
                (350, 600, 300, 40),
                (550, 300, 300, 40),
                (550, 500, 300, 40),
            ],
            [
                (_W - 100, 150),
                (_W - 100, 350),
                (_W - 100, 550),
                (_W - 200, 250),
                (_W - 200, 450),
                (_W - 300, 350),
            ],
        ),
        _level(
            4,
            "Fortress Assault",
            [
                (400, 100, 400, 60),
                (400, 200, 60, 200),
                (740, 200, 60, 200),
                (400, 500, 400, 60),
                (200, 300, 60, 200),
                (940, 300, 60, 200),
                (300, 400, 200, 60),
                (700, 400, 200, 60),
            ],
            [
                (_W - 100, 150),
                (_W - 100, 350),
                (_W - 100, 550),
                (_W - 200, 250),
                (_W - 200, 450),
                (_W - 300, 350),
                (_W - 400, 200),
                (_W - 400, 500),
            ],
        ),
        _level(
            5,
            "Final Battle",
            [
                (200, 100, 60, 600),
                (400, 100, 60, 600),
                (600, 100, 60, 600),
                (800, 100, 60, 600),
                (1000, 100, 60, 600),
                (300, 200, 400, 60),
                (300, 400, 400, 60),
                (300, 600, 400, 60),
                (800, 200, 200, 60),
                (800, 400, 200, 60),
                (800, 600, 200, 60),
            ],
            [
                (_W - 150, 150),
                (_W - 150, 350),
                (_W - 150, 550),
                (_W - 250, 250),
                (_W - 250, 450),
                (_W - 350, 150),
                (_W - 350, 350),
                (_W - 350, 550),
                (_W - 500, 200),
                (_W - 500, 400),
            ],
        ),
    ]
)


def load_catalog(path: Union[str, Path]) -> LevelCatalog:
    """Read a level catalog from a JSON file."""

    with Path(path).open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}: invalid JSON ({exc})") from exc
    return LevelCatalog.from_data(data)


def dump_catalog(catalog: LevelCatalog) -> dict:
    return {
        "levels": [
            {
                "name": level.name,
                "obstacles": [[o.x, o.y, o.width, o.height] for o in level.obstacles],
                "spawns": [[x, y] for x, y in level.spawns],
            }
            for level in catalog
        ]
    }


class LevelController:
    """Stage catalog levels on a world: obstacles, enemy spawns and player reset."""

    def __init__(self, catalog: Optional[LevelCatalog] = None) -> None:
        self.catalog = catalog or DEFAULT_LEVELS

    # ------------------------------------------------------------------
    # Spawn validation
    def is_valid_spawn(self, world: World, x: float, y: float) -> bool:
        half = world.settings.tank_size / 2
        if not world.contains(x, y, margin=half):
            return False
        return not world.blocked(x, y, half)

    def spawn_candidates(self, x: float, y: float) -> Iterator[Tuple[float, float]]:
        for offset in SPAWN_SEARCH_OFFSETS:
            yield x + offset, y
            yield x - offset, y
            yield x, y + offset
            yield x, y - offset
            yield x + offset, y + offset
            yield x - offset, y - offset

    def find_spawn(self, world: World, x: float, y: float) -> Tuple[float, float]:
        """Return (x, y) or the first valid nearby point.

        When every candidate is blocked the original point is returned unchanged,
        even though it overlaps cover.
        """

        if self.is_valid_spawn(world, x, y):
            return x, y
        for candidate in self.spawn_candidates(x, y):
            if self.is_valid_spawn(world, *candidate):
                return candidate
        return x, y

    # ------------------------------------------------------------------
    # Level lifecycle
    def new_world(self, settings: Optional[WorldSettings] = None, start_level: int = 1) -> World:
        settings = settings or WorldSettings()
        spawn_x, spawn_y = settings.player_spawn
        player = self._build_tank(settings, spawn_x, spawn_y, Side.PLAYER)
        world = World(player, settings, total_levels=len(self.catalog))
        self.load_level(world, start_level)
        return world

    def load_level(self, world: World, number: int) -> LevelDefinition:
        level = self.catalog.get(number)
        world.obstacles = list(level.obstacles)
        world.enemies = []
        for spawn_x, spawn_y in level.spawns:
            x, y = self.find_spawn(world, spawn_x, spawn_y)
            world.enemies.append(self._build_tank(world.settings, x, y, Side.ENEMY))
        world.player.reset(*world.settings.player_spawn)
        world.projectiles = []
        world.last_enemy_shot = None
        world.level = number
        world.total_levels = len(self.catalog)
        return level

    def next_level(self, world: World) -> LevelDefinition:
        return self.load_level(world, world.level + 1)

    def restart(self, world: World) -> LevelDefinition:
        world.score = 0
        world.running = True
        world.outcome = None
        return self.load_level(world, 1)

    @staticmethod
    def _build_tank(settings: WorldSettings, x: float, y: float, side: Side) -> Tank:
        return Tank(
            x=x,
            y=y,
            side=side,
            size=settings.tank_size,
            fire_cooldown=settings.fire_cooldown,
            projectile_speed=settings.projectile_speed,
            projectile_size=settings.projectile_size,
        )


__all__ = [
    "DEFAULT_LEVELS",
    "LevelCatalog",
    "LevelController",
    "LevelDefinition",
    "SPAWN_SEARCH_OFFSETS",
    "dump_catalog",
    "load_catalog",
]
