"""Core game logic for Tank Assault, independent of rendering."""

from tank_assault.core.game import CONTROL_NAMES, Controls, Game, TickEvents
from tank_assault.core.levels import (
    DEFAULT_LEVELS,
    LevelCatalog,
    LevelController,
    LevelDefinition,
    load_catalog,
)
from tank_assault.core.projectile import Projectile
from tank_assault.core.session import GameSession, HudStats
from tank_assault.core.tank import Tank
from tank_assault.core.world import Obstacle, Outcome, Side, World, WorldSettings

__all__ = [
    "CONTROL_NAMES",
    "Controls",
    "DEFAULT_LEVELS",
    "Game",
    "GameSession",
    "HudStats",
    "LevelCatalog",
    "LevelController",
    "LevelDefinition",
    "Obstacle",
    "Outcome",
    "Projectile",
    "Side",
    "Tank",
    "TickEvents",
    "World",
    "WorldSettings",
    "load_catalog",
]
