"""Keybinding management for the Tank Assault pygame client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import pygame


@dataclass
class KeyBindings:
    rotate_left: int
    rotate_right: int
    forward: int
    backward: int
    fire: int

    def control_for(self, key: int) -> Optional[str]:
        for _, field in BINDING_FIELDS:
            if getattr(self, field) == key:
                return field
        return None


BINDING_FIELDS: List[tuple[str, str]] = [
    ("Rotate Left", "rotate_left"),
    ("Rotate Right", "rotate_right"),
    ("Forward", "forward"),
    ("Backward", "backward"),
    ("Fire", "fire"),
]


def default_bindings() -> KeyBindings:
    return KeyBindings(
        rotate_left=pygame.K_a,
        rotate_right=pygame.K_d,
        forward=pygame.K_w,
        backward=pygame.K_s,
        fire=pygame.K_SPACE,
    )


class KeybindingManager:
    """Track the player's key bindings and their persisted form."""

    def __init__(self) -> None:
        self.default_bindings = default_bindings()
        self.bindings = KeyBindings(**vars(self.default_bindings))

    # ------------------------------------------------------------------
    def to_config(self) -> Dict[str, int]:
        """Return a serialisable snapshot of the current bindings."""
        return {field: int(getattr(self.bindings, field)) for _, field in BINDING_FIELDS}

    def load_from_config(self, data: Dict) -> None:
        """Restore bindings from a persisted configuration."""
        if not isinstance(data, dict):
            return
        values = {}
        for _, field in BINDING_FIELDS:
            raw = data.get(field, getattr(self.default_bindings, field))
            try:
                values[field] = int(raw)
            except (TypeError, ValueError):
                values[field] = getattr(self.default_bindings, field)
        # Two controls sharing one key would make one of them unreachable.
        if len(set(values.values())) != len(values):
            return
        self.bindings = KeyBindings(**values)

    # ------------------------------------------------------------------
    def format_key(self, key: int) -> str:
        return pygame.key.name(key).upper()

    def describe(self) -> List[str]:
        return [
            f"{label}: {self.format_key(getattr(self.bindings, field))}"
            for label, field in BINDING_FIELDS
        ]


__all__ = ["BINDING_FIELDS", "KeyBindings", "KeybindingManager", "default_bindings"]
