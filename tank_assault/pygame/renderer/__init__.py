"""Rendering helpers for the pygame front-end."""

from tank_assault.pygame.renderer.scene import (
    draw_background,
    draw_obstacles,
    draw_projectiles,
    draw_tanks,
)

__all__ = [
    "draw_background",
    "draw_obstacles",
    "draw_projectiles",
    "draw_tanks",
]
