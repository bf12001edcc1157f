"""Menu, banner and HUD rendering helpers for the pygame client."""

from __future__ import annotations

import pygame

from tank_assault.pygame.input import MENU_STATES


def draw_ui(app) -> None:
    """Status bar: health, score, living enemies and level."""

    surface = app.screen
    width, height = surface.get_size()
    panel_top = height - app.ui_height

    overlay = pygame.Surface((width, app.ui_height), pygame.SRCALPHA)
    overlay.fill((10, 12, 20, 235))
    surface.blit(overlay, (0, panel_top))

    stats = app.session.hud()
    text_color = pygame.Color(230, 230, 230)
    muted = pygame.Color(180, 188, 200)
    entries = [
        ("Health", str(stats.health)),
        ("Score", str(stats.score)),
        ("Enemies", str(stats.enemies)),
        ("Level", f"{stats.level}/{stats.total_levels}"),
    ]
    section_width = width // len(entries)
    center_y = panel_top + app.ui_height // 2
    for idx, (label, value) in enumerate(entries):
        label_surface = app.font_small.render(label.upper(), True, muted)
        value_surface = app.font_regular.render(value, True, text_color)
        left = idx * section_width + 24
        surface.blit(label_surface, label_surface.get_rect(left=left, bottom=center_y))
        surface.blit(value_surface, value_surface.get_rect(left=left, top=center_y + 2))


def draw_level_banner(app) -> None:
    text = app.session.banner_text(app.now)
    if not text:
        return
    surface = app.screen
    offset_x, offset_y = app.playfield_offset
    world = app.session.world
    center = (offset_x + world.width // 2, offset_y + world.height // 2)
    text_surface = app.font_large.render(text, True, pygame.Color("white"))
    rect = text_surface.get_rect(center=center)
    backdrop = pygame.Surface((rect.width + 48, rect.height + 24), pygame.SRCALPHA)
    backdrop.fill((0, 0, 0, 170))
    surface.blit(backdrop, backdrop.get_rect(center=center))
    surface.blit(text_surface, rect)


def draw_round_over(app) -> None:
    """Outcome line drawn over a finished round until a menu or restart takes over."""

    if app.session.running or app.state in MENU_STATES:
        return
    surface = app.screen
    center_x = surface.get_width() // 2
    message = app.font_large.render(app.session.message, True, pygame.Color("white"))
    hint = app.font_small.render("Press R to play again", True, pygame.Color(200, 200, 200))
    message_rect = message.get_rect(center=(center_x, surface.get_height() // 2 - 20))
    surface.blit(message, message_rect)
    surface.blit(hint, hint.get_rect(center=(center_x, message_rect.bottom + 24)))


def draw_menu_overlay(app) -> None:
    if app.state not in MENU_STATES:
        return
    surface = app.screen
    alpha = 200 if app.state == "main_menu" else 160
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))

    center_x = surface.get_width() // 2
    center_y = surface.get_height() // 2

    title_surface = app.font_large.render(app.menu.title, True, pygame.Color("white"))
    title_rect = title_surface.get_rect(center=(center_x, center_y - 120))
    surface.blit(title_surface, title_rect)

    if app.menu.message:
        message_surface = app.font_regular.render(app.menu.message, True, pygame.Color(220, 220, 220))
        message_rect = message_surface.get_rect(center=(center_x, title_rect.bottom + 36))
        surface.blit(message_surface, message_rect)
        options_start_y = message_rect.bottom + 24
    else:
        options_start_y = title_rect.bottom + 32

    option_spacing = 40
    for idx, option in enumerate(app.menu.options):
        is_selected = idx == app.menu.selection
        color = pygame.Color("white") if is_selected else pygame.Color(200, 200, 200)
        text_surface = app.font_regular.render(option.label, True, color)
        text_rect = text_surface.get_rect(center=(center_x, options_start_y + idx * option_spacing))
        if is_selected:
            highlight = pygame.Surface((text_rect.width + 36, text_rect.height + 12), pygame.SRCALPHA)
            highlight.fill((255, 255, 255, 50))
            surface.blit(highlight, highlight.get_rect(center=text_rect.center))
        surface.blit(text_surface, text_rect)

    footer_text = {
        "main_menu": "Esc exits the game",
        "pause_menu": "Esc resumes",
        "post_game_menu": "Esc returns to the start menu",
    }.get(app.state)
    if footer_text:
        footer_surface = app.font_small.render(footer_text, True, pygame.Color(180, 180, 180))
        surface.blit(footer_surface, footer_surface.get_rect(center=(center_x, surface.get_height() - 36)))


__all__ = ["draw_level_banner", "draw_menu_overlay", "draw_round_over", "draw_ui"]
