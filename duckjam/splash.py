"""A splash screen that fades an image in and out at startup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from duckjam.screens import Screen, ScreenState
from duckjam.timer import Timer, TimerMode

SPLASH_BACKGROUND_COLOR = (0.157, 0.157, 0.157)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"
SPLASH_IMAGE_WIDTH_PERCENT = 70.0


@dataclass
class ImageNodeFadeInOut:
    """Trapezoid fade: in over ``fade_duration``, hold, then out again.

    ``t`` is the progress in seconds, between 0 and ``total_duration``.
    """

    total_duration: float
    fade_duration: float
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity for the current progress, between 0 and 1."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def tick(self, dt: float) -> None:
        """Advance progress by ``dt`` seconds."""
        self.t += dt


class SplashScreen:
    """Shows the splash image, then moves on to the loading screen."""

    def __init__(self, state: ScreenState, image: Any = None) -> None:
        self.state = state
        self.image = image
        self.fade: ImageNodeFadeInOut | None = None
        self.timer: Timer | None = None
        state.on_enter(Screen.SPLASH, self.enter)
        state.on_exit(Screen.SPLASH, self.exit)

    def enter(self) -> None:
        """Start the fade animation and the splash timer."""
        self.fade = self.state.scope(
            Screen.SPLASH,
            ImageNodeFadeInOut(
                total_duration=SPLASH_DURATION_SECS,
                fade_duration=SPLASH_FADE_DURATION_SECS,
            ),
        )
        self.timer = Timer.from_seconds(SPLASH_DURATION_SECS, TimerMode.ONCE)

    def update(self, dt: float, escape_pressed: bool = False) -> None:
        """Advance the splash; request the loading screen when done or skipped."""
        if self.state.current is not Screen.SPLASH:
            return
        if self.fade is not None:
            self.fade.tick(dt)
        if self.timer is not None:
            self.timer.tick(dt)
            if self.timer.just_finished:
                self.state.set(Screen.LOADING)
        if escape_pressed:
            self.state.set(Screen.LOADING)

    def exit(self) -> None:
        """Drop the splash timer and animation."""
        self.timer = None
        self.fade = None