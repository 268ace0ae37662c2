"""The game application: wires the screens together and runs the main loop."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

from duckjam.asset_tracking import ResourceHandles
from duckjam.audio import DEFAULT_GLOBAL_VOLUME, AudioCategory, AudioManager
from duckjam.credits import CREDITS_MUSIC, CreditsScreen
from duckjam.gameplay import GAMEPLAY_MUSIC, GameplayScreen
from duckjam.loading import LoadingScreen
from duckjam.player import DUCKY_IMAGE, STEP_SOUNDS, PlayerAssets
from duckjam.screens import Screen, ScreenState
from duckjam.splash import (
    SPLASH_BACKGROUND_COLOR,
    SPLASH_IMAGE,
    SPLASH_IMAGE_WIDTH_PERCENT,
    SplashScreen,
)
from duckjam.theme import HOVER_SOUND, PRESS_SOUND, InteractionAssets
from duckjam.title import TitleScreen
from duckjam.widgets import UiRoot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Bevy Jam 6"
DEFAULT_WINDOW_SIZE = (1280, 720)
FRAME_RATE = 60
TOGGLE_DEBUG_KEY = pygame.K_BACKQUOTE
DEBUG_OUTLINE_COLOR = (255, 0, 0)
_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".gif"}

Loader = Callable[[str], Any]


@dataclass(frozen=True)
class _Request:
    name: str
    paths: tuple[str, ...]


class _SilentSound:
    """Stands in for a sound when no audio device is available."""

    def play(self, loops: int = 0) -> None:
        return None


def _rgb8(color: Sequence[float]) -> tuple[int, int, int]:
    r, g, b = (round(channel * 255) for channel in color)
    return (r, g, b)


class App:
    """The whole game: screens, assets, audio and input handling."""

    def __init__(
        self,
        asset_dir: str | Path = "assets",
        loader: Loader | None = None,
        dev: bool = False,
        window_size: Sequence[int] = DEFAULT_WINDOW_SIZE,
    ) -> None:
        self.asset_dir = Path(asset_dir)
        self._loader = loader or self._load_file
        self._loaded: dict[str, Any] = {}
        self._failed: set[str] = set()
        self.dev = dev
        self.debug_ui = False
        width, height = window_size
        self.window_size = (width, height)
        self.running = True

        self.state = ScreenState(Screen.SPLASH)
        self.handles = ResourceHandles()
        self.audio = AudioManager(DEFAULT_GLOBAL_VOLUME)
        self.rng = random.Random()
        self.player_assets: PlayerAssets | None = None
        self.interaction_assets: InteractionAssets | None = None

        self.splash = SplashScreen(self.state)
        self.loading = LoadingScreen(self.state, self.handles)
        self.title = TitleScreen(self.state, on_exit=self._request_exit)
        self.credits = CreditsScreen(self.state, self.audio)
        self.gameplay = GameplayScreen(self.state, audio=self.audio, rng=self.rng)

        self._held: set[int] = set()
        self._pointer: tuple[int, int] | None = None

        self._track("player", (DUCKY_IMAGE, *STEP_SOUNDS), self._on_player_assets)
        self._track("credits music", (CREDITS_MUSIC,), self._on_credits_music)
        self._track("gameplay music", (GAMEPLAY_MUSIC,), self._on_gameplay_music)
        self._track("interaction", (HOVER_SOUND, PRESS_SOUND), self._on_interaction_assets)

    # Asset loading

    def _track(self, name: str, paths: tuple[str, ...], build: Callable[..., None]) -> None:
        def on_loaded(request: _Request) -> None:
            build(*(self._loaded[path] for path in request.paths))

        self.handles.add(_Request(name, paths), on_loaded)

    def _is_loaded(self, request: _Request) -> bool:
        return all(self._try_load(path) for path in request.paths)

    def _try_load(self, path: str) -> bool:
        if path in self._loaded:
            return True
        try:
            self._loaded[path] = self._loader(path)
        except (OSError, LookupError, pygame.error) as error:
            if path not in self._failed:
                self._failed.add(path)
                logger.warning("could not load asset %s: %s", path, error)
            return False
        return True

    def _load_file(self, path: str) -> Any:
        full = self.asset_dir / path
        if full.suffix.lower() in _IMAGE_SUFFIXES:
            image = pygame.image.load(str(full))
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            return image
        if not full.is_file():
            raise FileNotFoundError(str(full))
        if pygame.mixer.get_init():
            return pygame.mixer.Sound(str(full))
        return _SilentSound()

    def _on_player_assets(self, ducky: Any, *steps: Any) -> None:
        self.player_assets = PlayerAssets(ducky=ducky, steps=tuple(steps))
        self.gameplay.assets = self.player_assets

    def _on_credits_music(self, music: Any) -> None:
        self.credits.music = music

    def _on_gameplay_music(self, music: Any) -> None:
        self.gameplay.music = music

    def _on_interaction_assets(self, hover: Any, press: Any) -> None:
        self.interaction_assets = InteractionAssets(hover=hover, press=press)

    # Frame update

    def _request_exit(self) -> None:
        self.running = False

    def _active_root(self) -> UiRoot | None:
        for obj in reversed(self.state.scoped(self.state.current)):
            if isinstance(obj, UiRoot):
                return obj
        return None

    def step(self, dt: float, events: Iterable[Any] = ()) -> bool:
        """Run one frame with the given input events; return False once the game should stop."""
        just_pressed: set[int] = set()
        mouse_down = mouse_up = False
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._held.add(event.key)
                just_pressed.add(event.key)
            elif event.type == pygame.KEYUP:
                self._held.discard(event.key)
            elif event.type == pygame.MOUSEMOTION:
                self._pointer = tuple(event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._pointer = tuple(event.pos)
                mouse_down = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._pointer = tuple(event.pos)
                mouse_up = True
            elif event.type == pygame.VIDEORESIZE:
                self.window_size = (event.w, event.h)

        self.handles.process(self._is_loaded)

        previous = self.state.current
        entered = self.state.apply()
        if entered is not None and self.dev:
            logger.info("Screen transition: %s -> %s", previous.name, entered.name)

        if self.dev and TOGGLE_DEBUG_KEY in just_pressed:
            self.debug_ui = not self.debug_ui

        self.splash.update(dt, pygame.K_ESCAPE in just_pressed)
        self.loading.update()
        self.gameplay.update(dt, self._held, just_pressed, self.window_size)
        self._update_ui(mouse_down, mouse_up)
        return self.running

    def _update_ui(self, pressed: bool, released: bool) -> None:
        root = self._active_root()
        if root is None or self._pointer is None:
            return
        root.layout(*self.window_size)
        changes = root.update_pointer(self._pointer, pressed, released)
        if self.interaction_assets is None:
            return
        for _, interaction in changes:
            sound = self.interaction_assets.sound_for(interaction)
            if sound is not None:
                self.audio.play(sound, AudioCategory.SOUND_EFFECT)

    # Drawing

    def _draw(self, surface: pygame.Surface) -> None:
        surface.fill(_rgb8(SPLASH_BACKGROUND_COLOR))
        current = self.state.current
        if current is Screen.SPLASH:
            self._draw_splash(surface)
        elif current is Screen.GAMEPLAY:
            self.gameplay.draw(surface)
        root = self._active_root()
        if root is not None:
            root.layout(*surface.get_size())
            root.draw(surface)
            if self.debug_ui:
                for widget in root.children:
                    pygame.draw.rect(surface, DEBUG_OUTLINE_COLOR, widget.rect, 1)

    def _draw_splash(self, surface: pygame.Surface) -> None:
        fade, image = self.splash.fade, self.splash.image
        if fade is None or not isinstance(image, pygame.Surface):
            return
        width, height = surface.get_size()
        image_width, image_height = image.get_size()
        if image_width == 0:
            return
        target_width = max(1, round(width * SPLASH_IMAGE_WIDTH_PERCENT / 100))
        target_height = max(1, round(image_height * target_width / image_width))
        scaled = pygame.transform.smoothscale(image, (target_width, target_height))
        scaled.set_alpha(round(fade.alpha() * 255))
        surface.blit(scaled, scaled.get_rect(center=(width // 2, height // 2)))

    def run(self) -> int:
        """Open the window and play until the game is closed."""
        pygame.init()
        try:
            pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
            pygame.display.set_caption(WINDOW_TITLE)
            try:
                self.splash.image = self._loader(SPLASH_IMAGE)
            except (OSError, LookupError, pygame.error) as error:
                logger.warning("could not load splash image: %s", error)
            clock = pygame.time.Clock()
            while self.running:
                dt = clock.tick(FRAME_RATE) / 1000
                surface = pygame.display.get_surface()
                self.window_size = surface.get_size()
                if not self.step(dt, pygame.event.get()):
                    break
                self._draw(surface)
                pygame.display.flip()
        finally:
            pygame.quit()
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="duckjam", description="A small duck arcade game.")
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    parser.add_argument("--dev", action="store_true", help="enable development tools")
    args = parser.parse_args(argv)
    if args.dev:
        logging.basicConfig(level=logging.INFO)
    return App(asset_dir=args.assets, dev=args.dev).run()


if __name__ == "__main__":
    raise SystemExit(main())