"""The title screen with the main menu."""

from __future__ import annotations

from collections.abc import Callable

import pygame

from duckjam.screens import Screen, ScreenState
from duckjam.widgets import UiRoot, button


class TitleScreen:
    """Menu with buttons to play, view the credits, or quit."""

    def __init__(
        self, state: ScreenState, on_exit: Callable[[], None] | None = None
    ) -> None:
        self.state = state
        self.on_exit = on_exit
        self.exit_requested = False
        self.root: UiRoot | None = None
        state.on_enter(Screen.TITLE, self.enter)
        state.on_exit(Screen.TITLE, self._leave)

    def enter(self) -> None:
        """Build the menu."""
        root = UiRoot()
        root.add(button("Play", on_press=lambda: self.state.set(Screen.GAMEPLAY)))
        root.add(button("Credits", on_press=lambda: self.state.set(Screen.CREDITS)))
        root.add(button("Exit", on_press=self._exit))
        self.root = self.state.scope(Screen.TITLE, root)

    def _exit(self) -> None:
        self.exit_requested = True
        if self.on_exit is not None:
            self.on_exit()

    def _leave(self) -> None:
        self.root = None

    def draw(self, surface: pygame.Surface) -> None:
        """Render the menu onto ``surface``."""
        if self.root is not None:
            self.root.layout(*surface.get_size())
            self.root.draw(surface)