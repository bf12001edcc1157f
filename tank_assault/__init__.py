"""Top-level package for the Tank Assault arcade game."""

__version__ = "1.0.0"

from tank_assault.core import (
    Controls,
    Game,
    GameSession,
    LevelCatalog,
    LevelController,
    Obstacle,
    Outcome,
    Projectile,
    Side,
    Tank,
    TickEvents,
    World,
    WorldSettings,
)

__all__ = [
    "Controls",
    "Game",
    "GameSession",
    "LevelCatalog",
    "LevelController",
    "Obstacle",
    "Outcome",
    "Projectile",
    "Side",
    "Tank",
    "TickEvents",
    "World",
    "WorldSettings",
]

__all__.append("__version__")

try:
    from tank_assault.pygame import PygameTankAssault, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    PygameTankAssault = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

    __all__.extend(["PygameTankAssault", "run_pygame"])
else:
    __all__.extend(["PygameTankAssault", "run_pygame"])
