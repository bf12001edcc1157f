"""Input handling for the pygame client."""

from __future__ import annotations

import pygame

from tank_assault.core.game import Controls
from tank_assault.pygame.keybindings import KeyBindings

MENU_STATES = {"main_menu", "pause_menu", "post_game_menu"}
MENU_STEPS = {pygame.K_UP: -1, pygame.K_w: -1, pygame.K_DOWN: 1, pygame.K_s: 1}
MENU_CONFIRM_KEYS = {pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER}


class InputHandler:
    """Translate pygame events into menu actions and per-tick controls."""

    def __init__(self, app) -> None:
        self.app = app
        self._held_keys: set[int] = set()
        self._mouse_fire = False
        self._pointer: tuple[float, float] = (0.0, 0.0)

    # ------------------------------------------------------------------
    # Event entry point
    def process_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self._held_keys.add(event.key)
            self._handle_key(event.key)
        elif event.type == pygame.KEYUP:
            self._held_keys.discard(event.key)
        elif event.type == pygame.MOUSEMOTION:
            self._pointer = self._to_world(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer = self._to_world(event.pos)
            self._mouse_fire = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._mouse_fire = False

    def release_all(self) -> None:
        self._held_keys.clear()
        self._mouse_fire = False

    # ------------------------------------------------------------------
    # Per-tick snapshot
    def controls(self) -> Controls:
        bindings: KeyBindings = self.app.keybindings.bindings
        pressed = set()
        for key in self._held_keys:
            control = bindings.control_for(key)
            if control is not None:
                pressed.add(control)
        if self._mouse_fire:
            pressed.add("fire")
        return Controls(frozenset(pressed), self._pointer)

    # ------------------------------------------------------------------
    # Internal helpers
    def _to_world(self, pos: tuple[int, int]) -> tuple[float, float]:
        offset_x, offset_y = self.app.playfield_offset
        return float(pos[0] - offset_x), float(pos[1] - offset_y)

    def _handle_key(self, key: int) -> None:
        app = self.app
        if app.state in MENU_STATES:
            self._handle_menu_key(key)
            return

        if key == pygame.K_ESCAPE:
            app._activate_menu("pause_menu")
            return

        if not app.session.running and key in {pygame.K_r, pygame.K_RETURN}:
            app._action_start_new_game()

    def _handle_menu_key(self, key: int) -> None:
        app = self.app
        if key == pygame.K_ESCAPE:
            back = {
                "main_menu": app._action_exit_game,
                "pause_menu": app._action_resume_game,
                "post_game_menu": app._action_return_to_start_menu,
            }
            back[app.state]()
            return

        step = MENU_STEPS.get(key)
        if step is not None:
            if app.menu.move(step):
                app._play_ui_sound("menu_move")
        elif key in MENU_CONFIRM_KEYS and app.menu.options:
            app._play_ui_sound("menu_select")
            app.menu.confirm()


__all__ = ["InputHandler", "MENU_STATES"]
