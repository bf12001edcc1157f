"""Pygame front-end for Tank Assault."""

from tank_assault.pygame.app import PygameTankAssault, run_pygame

__all__ = ["PygameTankAssault", "run_pygame"]
