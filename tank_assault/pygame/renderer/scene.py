"""Rendering helpers for the Tank Assault pygame client.

Every function reads the world owned by ``app.session`` and never mutates it.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import pygame

from tank_assault.core.tank import MAX_HP, Tank
from tank_assault.core.world import World

GRID_SPACING = 50


def _scale_color(color: pygame.Color, factor: float) -> pygame.Color:
    return pygame.Color(
        max(0, min(255, int(color.r * factor))),
        max(0, min(255, int(color.g * factor))),
        max(0, min(255, int(color.b * factor))),
    )


def _rotated_rect(
    center: Tuple[float, float], width: float, height: float, angle: float, offset: Tuple[float, float] = (0.0, 0.0)
) -> List[Tuple[int, int]]:
    """Corners of a ``width`` x ``height`` box rotated by ``angle`` around ``center``."""

    cx, cy = center
    ox, oy = offset
    corners = [
        (ox - width / 2, oy - height / 2),
        (ox + width / 2, oy - height / 2),
        (ox + width / 2, oy + height / 2),
        (ox - width / 2, oy + height / 2),
    ]
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return [
        (int(round(cx + x * cos_a - y * sin_a)), int(round(cy + x * sin_a + y * cos_a)))
        for x, y in corners
    ]


def _to_screen(app, x: float, y: float) -> Tuple[float, float]:
    offset_x, offset_y = app.playfield_offset
    return x + offset_x, y + offset_y


def draw_background(app) -> None:
    surface = app.screen
    world: World = app.session.world
    offset_x, offset_y = app.playfield_offset
    field = pygame.Rect(offset_x, offset_y, world.width, world.height)
    pygame.draw.rect(surface, app.field_color, field)
    line_color = _scale_color(app.field_color, 0.82)
    for x in range(0, world.width, GRID_SPACING):
        pygame.draw.line(surface, line_color, (offset_x + x, offset_y), (offset_x + x, field.bottom))
    for y in range(0, world.height, GRID_SPACING):
        pygame.draw.line(surface, line_color, (offset_x, offset_y + y), (field.right, offset_y + y))


def draw_obstacles(app) -> None:
    surface = app.screen
    grain = _scale_color(app.obstacle_color, 0.72)
    for obstacle in app.session.world.obstacles:
        left, top = _to_screen(app, obstacle.x, obstacle.y)
        rect = pygame.Rect(int(left), int(top), int(obstacle.width), int(obstacle.height))
        pygame.draw.rect(surface, app.obstacle_color, rect)
        for i in range(0, int(obstacle.width), 10):
            pygame.draw.line(surface, grain, (rect.left + i, rect.top), (rect.left + i, rect.bottom - 1))


def draw_tanks(app) -> None:
    world: World = app.session.world
    for enemy in world.enemies:
        if enemy.alive:
            _draw_tank(app, enemy)
    if world.player.alive:
        _draw_tank(app, world.player)


def _draw_tank(app, tank: Tank) -> None:
    surface = app.screen
    center = _to_screen(app, tank.x, tank.y)
    size = tank.size
    base_color = app.player_color if tank.is_player else app.enemy_color
    track_color = pygame.Color(51, 51, 51)

    # Hull and tracks follow the body heading.
    pygame.draw.polygon(surface, base_color, _rotated_rect(center, size, size, tank.angle))
    pygame.draw.polygon(
        surface, track_color, _rotated_rect(center, size, 5, tank.angle, (0.0, -size / 2 - 2.5))
    )
    pygame.draw.polygon(
        surface, track_color, _rotated_rect(center, size, 5, tank.angle, (0.0, size / 2 + 2.5))
    )
    turret_color = _scale_color(base_color, 1.2)
    pygame.draw.polygon(
        surface, turret_color, _rotated_rect(center, size * 2 / 3, size * 2 / 3, tank.angle)
    )

    # Barrel follows the turret heading.
    barrel_length = tank.half_size + 10
    pygame.draw.polygon(
        surface,
        pygame.Color(102, 102, 102),
        _rotated_rect(center, barrel_length, 6, tank.turret_angle, (barrel_length / 2, 0.0)),
    )
    _draw_health_bar(app, tank, center)


def _draw_health_bar(app, tank: Tank, center: Tuple[float, float]) -> None:
    surface = app.screen
    bar_width = 40
    bar_height = 4
    ratio = max(0.0, min(1.0, tank.hp / MAX_HP))
    left = int(center[0] - bar_width / 2)
    top = int(center[1] - tank.half_size - 15)
    pygame.draw.rect(surface, pygame.Color(51, 51, 51), (left, top, bar_width, bar_height))
    if ratio > 0.5:
        color = pygame.Color(76, 175, 80)
    elif ratio > 0.25:
        color = pygame.Color(255, 152, 0)
    else:
        color = pygame.Color(244, 67, 54)
    pygame.draw.rect(surface, color, (left, top, int(bar_width * ratio), bar_height))


def draw_projectiles(app) -> None:
    surface = app.screen
    for projectile in app.session.world.projectiles:
        center = _to_screen(app, projectile.x, projectile.y)
        if projectile.from_player:
            color, trail = pygame.Color(255, 215, 0), pygame.Color(255, 165, 0)
        else:
            color, trail = pygame.Color(255, 68, 68), pygame.Color(255, 102, 102)
        size = projectile.size
        pygame.draw.polygon(surface, color, _rotated_rect(center, size, size, projectile.angle))
        tail_x = center[0] - math.cos(projectile.angle) * (size / 2 + 5)
        tail_y = center[1] - math.sin(projectile.angle) * (size / 2 + 5)
        pygame.draw.line(surface, trail, (int(tail_x), int(tail_y)), (int(center[0]), int(center[1])), 2)
