"""The main gameplay screen."""

from __future__ import annotations

import random
from collections.abc import Collection, Sequence
from typing import Any

import pygame

from duckjam.audio import AudioCategory, AudioManager, Playback
from duckjam.player import (
    SPRITE_TILE_SIZE,
    Player,
    PlayerAssets,
    atlas_rect,
    directional_intent,
    spawn_level,
)
from duckjam.screens import Screen, ScreenState

GAMEPLAY_MUSIC = "audio/music/Fluffing A Duck.ogg"
DEFAULT_WINDOW_SIZE = (1280, 720)


class GameplayScreen:
    """Spawns the level, drives the player and plays the gameplay music."""

    def __init__(
        self,
        state: ScreenState,
        assets: PlayerAssets | None = None,
        audio: AudioManager | None = None,
        music: Any = None,
        rng: random.Random | None = None,
    ) -> None:
        self.state = state
        self.assets = assets
        self.audio = audio
        self.music = music
        self.rng = rng or random.Random()
        self.player: Player | None = None
        self.playback: Playback | None = None
        state.on_enter(Screen.GAMEPLAY, self.enter)
        state.on_exit(Screen.GAMEPLAY, self.exit)

    def enter(self) -> None:
        """Spawn the level and start the music."""
        self.player = self.state.scope(Screen.GAMEPLAY, spawn_level())
        if self.audio is not None and self.music is not None:
            self.playback = self.audio.play(self.music, AudioCategory.MUSIC, looping=True)

    def exit(self) -> None:
        """Stop the music and drop the level."""
        if self.playback is not None and self.audio is not None:
            self.audio.stop(self.playback)
        self.playback = None
        self.player = None

    def update(
        self,
        dt: float,
        pressed: Collection[int] = (),
        just_pressed: Collection[int] = (),
        window_size: Sequence[float] = DEFAULT_WINDOW_SIZE,
    ) -> None:
        """Move the player from the held keys; Escape returns to the title screen."""
        if self.state.current is not Screen.GAMEPLAY:
            return
        if pygame.K_ESCAPE in just_pressed:
            self.state.set(Screen.TITLE)
        if self.player is None:
            return
        step = self.player.update(dt, directional_intent(pressed), window_size)
        if step and self.assets is not None and self.audio is not None:
            self.audio.play(self.assets.random_step(self.rng), AudioCategory.SOUND_EFFECT)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the player sprite onto ``surface``."""
        player = self.player
        if player is None or self.assets is None:
            return
        sheet = self.assets.ducky
        if not isinstance(sheet, pygame.Surface):
            return
        frame = sheet.subsurface(atlas_rect(player.atlas_index))
        size = round(SPRITE_TILE_SIZE * player.scale)
        image = pygame.transform.scale(frame, (size, size))
        if player.flip_x:
            image = pygame.transform.flip(image, True, False)
        width, height = surface.get_size()
        x, y = player.position
        centre = (round(width / 2 + x), round(height / 2 - y))
        surface.blit(image, image.get_rect(center=centre))