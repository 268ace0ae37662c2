"""A loading screen shown while game assets are loaded."""

from __future__ import annotations

import pygame

from duckjam.asset_tracking import ResourceHandles
from duckjam.screens import Screen, ScreenState
from duckjam.widgets import UiRoot, Widget, label


class LoadingScreen:
    """Waits for every tracked asset, then moves on to the title screen."""

    def __init__(self, state: ScreenState, handles: ResourceHandles) -> None:
        self.state = state
        self.handles = handles
        self.root: UiRoot | None = None
        self.label: Widget | None = None
        state.on_enter(Screen.LOADING, self.enter)
        state.on_exit(Screen.LOADING, self._leave)

    def enter(self) -> None:
        """Show the loading message."""
        root = UiRoot()
        self.label = root.add(label("Loading..."))
        self.root = self.state.scope(Screen.LOADING, root)

    def _leave(self) -> None:
        self.root = None
        self.label = None

    def update(self) -> None:
        """Request the title screen once all assets have loaded."""
        if self.state.current is Screen.LOADING and self.handles.is_all_done():
            self.state.set(Screen.TITLE)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the loading message onto ``surface``."""
        if self.root is not None:
            self.root.layout(*surface.get_size())
            self.root.draw(surface)