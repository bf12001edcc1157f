"""Menu state for the pygame client: which screen is open and what is highlighted."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


@dataclass(frozen=True)
class MenuOption:
    label: str
    action: Callable[[], None]


@dataclass
class MenuScreen:
    """A titled list of options plus the status line shown above them."""

    title: str
    options: Callable[[], List[MenuOption]]
    status: Callable[[], Optional[str]] = lambda: None


@dataclass
class MenuController:
    screens: Dict[str, MenuScreen] = field(default_factory=dict)
    state: Optional[str] = None
    title: str = ""
    message: Optional[str] = None
    options: List[MenuOption] = field(default_factory=list)
    selection: int = 0

    def register(self, name: str, screen: MenuScreen) -> None:
        self.screens[name] = screen

    def open(self, name: str, *, message: Optional[str] = None) -> None:
        """Show screen ``name`` with its options rebuilt and the first one highlighted."""

        screen = self.screens.get(name)
        if screen is None:
            raise KeyError(f"Unknown menu '{name}'")
        self.state = name
        self.title = screen.title
        self.options = screen.options()
        self.selection = 0
        self.message = message if message is not None else screen.status()

    def close(self) -> None:
        self.state = None
        self.options = []
        self.selection = 0

    def move(self, delta: int) -> bool:
        """Step the highlight, wrapping around; report whether it changed."""

        if len(self.options) < 2:
            return False
        self.selection = (self.selection + delta) % len(self.options)
        return True

    def confirm(self) -> None:
        if self.options:
            self.options[self.selection].action()


__all__ = ["MenuController", "MenuOption", "MenuScreen"]
