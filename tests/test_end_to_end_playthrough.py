import logging
import os
from collections import Counter

import pytest

from tank_assault.core.game import Controls
from tank_assault.core.levels import LevelCatalog
from tank_assault.core.session import VICTORY_MESSAGE, GameSession
from tank_assault.core.world import Outcome, Side

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

TICK_MS = 20

DUEL_LEVELS = {
    "levels": [
        {"name": "Skirmish", "obstacles": [], "spawns": [[250, 400]]},
        {"name": "Rematch", "obstacles": [[600, 100, 50, 50]], "spawns": [[250, 400]]},
    ]
}


class AutoGunner:
    """Hold the trigger and keep the turret on the nearest living enemy."""

    def __init__(self) -> None:
        self.shots: Counter = Counter()

    def controls(self, session: GameSession) -> Controls:
        world = session.world
        targets = world.living_enemies()
        if not targets:
            return Controls()
        player = world.player
        target = min(targets, key=lambda enemy: player.distance_to(enemy.x, enemy.y))
        return Controls.of("fire", pointer=(target.x, target.y))

    def record(self, events) -> None:
        for shot in events.shots:
            self.shots[shot.side] += 1


class MenuNavigator:
    """Drive every menu exposed by the pygame client."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def exercise_main_flow(self, app) -> None:
        self._assert_menu(app, "main_menu")
        self._activate_option(app, "Start Game")
        assert app.state == "playing", "Start Game should transition into gameplay."

        app._activate_menu("pause_menu")
        self._assert_menu(app, "pause_menu")
        self.logger.info("Pause menu options: %s", self._option_labels(app))
        self._activate_option(app, "Resume Game")
        assert app.state == "playing", "Resume Game should return to playing state."

        app._activate_menu("pause_menu")
        self._activate_option(app, "Abandon Game")
        self._assert_menu(app, "main_menu")
        self.logger.info("Abandon Game returned to main menu.")

    def exercise_exit_option(self, app) -> None:
        self._assert_menu(app, "main_menu")
        self._activate_option(app, "Exit Game")
        assert app.running is False
        app.running = True

    def exercise_post_game(self, app) -> None:
        self._assert_menu(app, "post_game_menu")
        self.logger.info("Post game menu options: %s", self._option_labels(app))
        self._activate_option(app, "Start New Game")
        assert app.state == "playing", "Start New Game should resume gameplay."
        assert app.session.running

        app._activate_menu("post_game_menu")
        self._activate_option(app, "Return to Start Menu")
        self._assert_menu(app, "main_menu")

    # ------------------------------------------------------------------
    def _activate_option(self, app, prefix: str) -> None:
        for option in app.menu.options:
            if option.label.startswith(prefix):
                self.logger.info("Selecting menu option: %s", option.label)
                option.action()
                return
        raise AssertionError(f"Menu option starting with '{prefix}' not found in {self._option_labels(app)}")

    def _option_labels(self, app) -> list[str]:
        return [option.label for option in app.menu.options]

    def _assert_menu(self, app, expected: str) -> None:
        actual = app.menu.state
        assert actual == expected, f"Expected menu '{expected}' but found '{actual}'."


def _play_until_over(app, gunner: AutoGunner, logger: logging.Logger, *, max_ticks: int = 400) -> int:
    session = app.session
    app.input.controls = lambda: gunner.controls(session)
    for tick in range(max_ticks):
        app._now = float(tick * TICK_MS)
        events = app._update()
        assert events is not None
        gunner.record(events)
        if events.level_loaded is not None:
            logger.info("Tick %03d: level %d loaded (score=%d)", tick, events.level_loaded, session.world.score)
        if events.outcome is not None:
            logger.info("Tick %03d: round ended with %s", tick, events.outcome.value)
            return tick
    raise AssertionError("Automatic playthrough did not finish within the tick budget.")


@pytest.mark.e2e
def test_automatic_playthrough_clears_every_level(monkeypatch, tmp_path) -> None:
    import pygame
    from tank_assault import PygameTankAssault
    from tank_assault.pygame import config

    logger = logging.getLogger("tank_assault.e2e")
    logger.setLevel(logging.INFO)
    monkeypatch.setattr(config, "_SETTINGS_PATH", tmp_path / "user_settings.json", raising=False)

    catalog = LevelCatalog.from_data(DUEL_LEVELS)

    try:
        app = PygameTankAssault(catalog=catalog, start_in_menu=True, muted=True, post_game_delay=500.0)

        navigator = MenuNavigator(logger)
        navigator.exercise_main_flow(app)
        navigator.exercise_exit_option(app)
        navigator._activate_option(app, "Start Game")

        gunner = AutoGunner()
        final_tick = _play_until_over(app, gunner, logger)
        session = app.session

        assert session.outcome is Outcome.VICTORY
        assert session.message == VICTORY_MESSAGE
        assert session.world.level == 2
        assert session.world.score == 200
        assert session.player.hp == 80
        assert gunner.shots[Side.PLAYER] == 8
        assert gunner.shots[Side.ENEMY] > 0
        logger.info("Playthrough finished at tick %d with shots %s", final_tick, dict(gunner.shots))

        app._now = float(final_tick * TICK_MS + 499)
        app._update()
        assert app.state == "playing"
        app._now = float(final_tick * TICK_MS + 500)
        app._update()
        assert app.menu.message == VICTORY_MESSAGE
        app._draw()

        navigator.exercise_post_game(app)
    finally:
        pygame.quit()


@pytest.mark.e2e
def test_player_without_cover_is_eventually_destroyed() -> None:
    logger = logging.getLogger("tank_assault.e2e")
    session = GameSession(catalog=LevelCatalog.from_data(DUEL_LEVELS))

    for tick in range(1000):
        events = session.update(Controls(pointer=(0.0, 0.0)), now=float(tick * TICK_MS))
        if events.outcome is not None:
            logger.info("Passive player destroyed at tick %d", tick)
            break

    assert session.outcome is Outcome.DEFEAT
    assert session.player.hp == 0
    assert session.hud().enemies == 1
    # Five 20-point hits, one enemy volley per second.
    assert tick == 4 * 1000 // TICK_MS + 13
