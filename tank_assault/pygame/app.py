"""Pygame-powered presentation layer for Tank Assault."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Tank Assault."
    ) from exc

from tank_assault.core.game import TickEvents
from tank_assault.core.levels import LevelCatalog
from tank_assault.core.session import GameSession
from tank_assault.core.world import WorldSettings
from tank_assault.pygame.config import load_user_settings, save_user_settings, volume_settings
from tank_assault.pygame.input import InputHandler
from tank_assault.pygame.keybindings import KeybindingManager
from tank_assault.pygame.menu_controller import MenuController, MenuOption, MenuScreen
from tank_assault.pygame.menus import (
    draw_level_banner,
    draw_menu_overlay,
    draw_round_over,
    draw_ui,
)
from tank_assault.pygame.renderer import (
    draw_background,
    draw_obstacles,
    draw_projectiles,
    draw_tanks,
)
from tank_assault.pygame.soundscape import Soundscape

FRAME_RATE = 60


class PygameTankAssault:
    """Graphical client that drives one simulation tick per frame."""

    def __init__(
        self,
        settings: Optional[WorldSettings] = None,
        *,
        catalog: Optional[LevelCatalog] = None,
        start_level: int = 1,
        ui_height: int = 60,
        start_in_menu: bool = True,
        debug: bool = False,
        muted: bool = False,
        post_game_delay: float = 1500.0,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.debug = debug
        self.ui_height = ui_height
        self.post_game_delay = post_game_delay
        self._now = float(pygame.time.get_ticks())
        self._ended_at: Optional[float] = None

        self.session = GameSession(
            settings, catalog=catalog, start_level=start_level, now=self._now
        )
        world = self.session.world
        self.playfield_offset = (0, 0)
        self.screen = pygame.display.set_mode((world.width, world.height + ui_height))
        pygame.display.set_caption("Tank Assault")

        self.font_small = pygame.font.SysFont("consolas", 16)
        self.font_regular = pygame.font.SysFont("consolas", 20)
        self.font_large = pygame.font.SysFont(None, 48)

        self.clock = pygame.time.Clock()
        self.running = True

        self.field_color = pygame.Color(74, 124, 89)
        self.obstacle_color = pygame.Color(139, 69, 19)
        self.player_color = pygame.Color(76, 175, 80)
        self.enemy_color = pygame.Color(244, 67, 54)

        self._user_settings = load_user_settings()
        self.keybindings = KeybindingManager()
        stored_bindings = self._user_settings.get("keybindings")
        if isinstance(stored_bindings, dict):
            self.keybindings.load_from_config(stored_bindings)

        self._volume_settings = volume_settings(self._user_settings)
        self._audio_path = Path(__file__).resolve().parent / "assets" / "audio"
        self.soundscape = Soundscape(self._audio_path, enabled=not muted)
        for category, value in self._volume_settings.items():
            self.soundscape.set_volume(category, value)
        self.soundscape.load_bank()

        self.input = InputHandler(self)
        self.menu = MenuController()
        self._register_menus()
        self.state = "playing"
        if start_in_menu:
            self._activate_menu("main_menu")

        self._debug_level_summary()
        self._save_user_settings()

    # ------------------------------------------------------------------
    # Properties
    @property
    def now(self) -> float:
        return self._now

    @property
    def message(self) -> str:
        return self.session.message

    def _save_user_settings(self) -> None:
        data = {
            "keybindings": self.keybindings.to_config(),
            "volume": {k: float(v) for k, v in self._volume_settings.items()},
        }
        save_user_settings(data)
        self._user_settings = data

    def _debug(self, message: str) -> None:
        if self.debug:
            print(f"[DEBUG] {message}", flush=True)

    def _debug_level_summary(self) -> None:
        if not self.debug:
            return
        world = self.session.world
        self._debug(
            f"Level {world.level}/{world.total_levels} '{self.session.level_name}': "
            f"obstacles={len(world.obstacles)}, enemies={len(world.enemies)}"
        )
        self._debug(f"  {world.player.info_line()}")
        for idx, enemy in enumerate(world.enemies):
            self._debug(f"  #{idx} {enemy.info_line()}")

    def _controls_hint(self) -> str:
        return "  ".join(self.keybindings.describe() + ["Mouse: aim"])

    def _play_ui_sound(self, key: str) -> None:
        self.soundscape.play(key)

    # ------------------------------------------------------------------
    # Menus
    def _register_menus(self) -> None:
        screens = {
            "main_menu": MenuScreen(
                "Tank Assault",
                lambda: [
                    MenuOption("Start Game", self._action_start_game),
                    MenuOption("Exit Game", self._action_exit_game),
                ],
                self._controls_hint,
            ),
            "pause_menu": MenuScreen(
                "Pause",
                lambda: [
                    MenuOption("Resume Game", self._action_resume_game),
                    MenuOption("Abandon Game", self._action_abandon_game),
                ],
                lambda: "Game paused.",
            ),
            "post_game_menu": MenuScreen(
                "Game Over",
                lambda: [
                    MenuOption("Start New Game", self._action_start_new_game),
                    MenuOption("Return to Start Menu", self._action_return_to_start_menu),
                ],
                lambda: self.message,
            ),
        }
        for name, screen in screens.items():
            self.menu.register(name, screen)

    def _activate_menu(self, name: str, message: Optional[str] = None) -> None:
        self.state = name
        self.menu.open(name, message=message)
        self.input.release_all()

    def _close_menu(self) -> None:
        self.menu.close()
        self.state = "playing"
        self.input.release_all()

    def _action_start_game(self) -> None:
        if not self.session.running:
            self._restart()
        else:
            self.session.announce_level(self._now)
        self._close_menu()

    def _action_exit_game(self) -> None:
        self.running = False

    def _action_resume_game(self) -> None:
        self._close_menu()

    def _action_abandon_game(self) -> None:
        self._restart()
        self._activate_menu("main_menu")

    def _action_start_new_game(self) -> None:
        self._restart()
        self._close_menu()

    def _action_return_to_start_menu(self) -> None:
        self._restart()
        self._activate_menu("main_menu")

    def _restart(self) -> None:
        self.session.restart(self._now)
        self._ended_at = None
        self._debug("Run restarted")
        self._debug_level_summary()

    # ------------------------------------------------------------------
    # Game loop
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            self.clock.tick(FRAME_RATE)
            self._now = float(pygame.time.get_ticks())
            self._handle_events()
            self._update()
            self._draw()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            else:
                self.input.process_event(event)

    def _update(self) -> Optional[TickEvents]:
        if self.state != "playing":
            return None
        if not self.session.running:
            if self._ended_at is not None and self._now - self._ended_at >= self.post_game_delay:
                self._activate_menu("post_game_menu", message=self.message)
            return None

        events = self.session.update(self.input.controls(), self._now)
        self.soundscape.play_cues(events.cues)
        for enemy in events.destroyed:
            self._debug(
                f"Enemy destroyed at ({enemy.x:.1f},{enemy.y:.1f}); score={self.session.world.score}"
            )
        if events.level_loaded is not None:
            self._debug_level_summary()
        if events.outcome is not None:
            self._ended_at = self._now
            self._debug(f"Round ended: {events.outcome.value} (score={self.session.world.score})")
        return events

    def _draw(self) -> None:
        self.screen.fill((0, 0, 0))
        draw_background(self)
        draw_obstacles(self)
        draw_projectiles(self)
        draw_tanks(self)
        draw_level_banner(self)
        draw_ui(self)
        draw_round_over(self)
        draw_menu_overlay(self)
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = PygameTankAssault(**kwargs)
    app.run()


__all__ = ["FRAME_RATE", "PygameTankAssault", "run_pygame"]
