"""A credits screen reached from the title screen."""

from __future__ import annotations

from typing import Any

import pygame

from duckjam.audio import AudioCategory, AudioManager, Playback
from duckjam.screens import Screen, ScreenState
from duckjam.widgets import UiRoot, Widget, button, header, label

CREDITS_MUSIC = "audio/music/Monkeys Spinning Monkeys.ogg"

MADE_BY = (
    "Joe Shmoe - Implemented aligator wrestling AI",
    "Jane Doe - Made the music for the alien invasion",
)
ASSETS = (
    "Splash logo",
    "Ducky sprite",
    "Button sound effects",
    "Music",
)


class CreditsScreen:
    """Lists the credits and plays its own music while shown."""

    def __init__(
        self, state: ScreenState, audio: AudioManager | None = None, music: Any = None
    ) -> None:
        self.state = state
        self.audio = audio
        self.music = music
        self.root: UiRoot | None = None
        self.back_button: Widget | None = None
        self.playback: Playback | None = None
        state.on_enter(Screen.CREDITS, self.enter)
        state.on_exit(Screen.CREDITS, self.exit)

    def enter(self) -> None:
        """Build the credits UI and start the music."""
        root = UiRoot()
        root.add(header("Made by"))
        for line in MADE_BY:
            root.add(label(line))
        root.add(header("Assets"))
        for line in ASSETS:
            root.add(label(line))
        self.back_button = root.add(button("Back", on_press=self._back))
        self.root = self.state.scope(Screen.CREDITS, root)

        if self.audio is not None and self.music is not None:
            self.playback = self.audio.play(self.music, AudioCategory.MUSIC, looping=True)

    def _back(self) -> None:
        self.state.set(Screen.TITLE)

    def exit(self) -> None:
        """Stop the music and drop the UI."""
        if self.playback is not None and self.audio is not None:
            self.audio.stop(self.playback)
        self.playback = None
        self.root = None
        self.back_button = None

    def draw(self, surface: pygame.Surface) -> None:
        """Render the credits onto ``surface``."""
        if self.root is not None:
            self.root.layout(*surface.get_size())
            self.root.draw(surface)