"""Game session management decoupled from rendering concerns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tank_assault.core.game import Controls, Game, TickEvents
from tank_assault.core.levels import LevelCatalog, LevelController
from tank_assault.core.tank import Tank
from tank_assault.core.world import Outcome, World, WorldSettings

VICTORY_MESSAGE = "Congratulations! You completed all levels!"
DEFEAT_MESSAGE = "Game Over! Your tank was destroyed!"


@dataclass(frozen=True)
class HudStats:
    """Values shown in the status bar after every tick."""

    health: int
    score: int
    enemies: int
    level: int
    total_levels: int


class GameSession:
    """Own the mutable state of an active Tank Assault run."""

    def __init__(
        self,
        settings: Optional[WorldSettings] = None,
        *,
        catalog: Optional[LevelCatalog] = None,
        start_level: int = 1,
        now: float = 0.0,
    ) -> None:
        self.levels = LevelController(catalog)
        self.game = Game(self.levels)
        self.world: World = self.levels.new_world(settings, start_level)
        self.message = ""
        self.banner_started: Optional[float] = None
        self.announce_level(now)

    # ------------------------------------------------------------------
    # Properties
    @property
    def player(self) -> Tank:
        return self.world.player

    @property
    def running(self) -> bool:
        return self.world.running

    @property
    def outcome(self) -> Optional[Outcome]:
        return self.world.outcome

    @property
    def level_name(self) -> str:
        return self.levels.catalog.get(self.world.level).name

    # ------------------------------------------------------------------
    # Lifecycle
    def update(self, controls: Controls, now: float) -> TickEvents:
        if not self.world.running:
            return TickEvents()
        events = self.game.step(self.world, controls, now)
        if events.level_loaded is not None:
            self.announce_level(now)
        if events.outcome is Outcome.VICTORY:
            self.message = VICTORY_MESSAGE
        elif events.outcome is Outcome.DEFEAT:
            self.message = DEFEAT_MESSAGE
        return events

    def restart(self, now: float = 0.0) -> None:
        self.levels.restart(self.world)
        self.announce_level(now)

    # ------------------------------------------------------------------
    # Read-only views
    def banner_text(self, now: float) -> Optional[str]:
        if self.banner_started is None:
            return None
        if now - self.banner_started >= self.world.settings.banner_duration:
            return None
        return f"Level {self.world.level}: {self.level_name}"

    def hud(self) -> HudStats:
        world = self.world
        return HudStats(
            health=world.player.hp,
            score=world.score,
            enemies=len(world.living_enemies()),
            level=world.level,
            total_levels=world.total_levels,
        )

    # ------------------------------------------------------------------
    # Banner
    def announce_level(self, now: float) -> None:
        """Show the "Level N: name" banner from ``now``."""
        self.banner_started = now
        self.message = f"Level {self.world.level}: {self.level_name}"


__all__ = ["DEFEAT_MESSAGE", "GameSession", "HudStats", "VICTORY_MESSAGE"]
