"""Categorised audio playback with per-category and global volume."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

DEFAULT_GLOBAL_VOLUME = 0.3


class AudioCategory(enum.Enum):
    """Broad groups of sounds whose volume can be set together."""

    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


@dataclass(eq=False)
class Playback:
    """A sound being played on a mixer channel."""

    sound: Any
    category: AudioCategory
    looping: bool
    channel: Any = None
    stopped: bool = False

    @property
    def is_finished(self) -> bool:
        if self.stopped or self.channel is None:
            return True
        return not self.channel.get_busy()


def _check_volume(volume: float) -> float:
    if volume < 0:
        raise ValueError(f"volume must not be negative, got {volume!r}")
    return float(volume)


class AudioManager:
    """Starts and stops sounds, tracking them by category.

    Sounds are objects with ``play(loops=...)`` returning a channel that offers
    ``set_volume``, ``stop`` and ``get_busy`` (as ``pygame.mixer.Sound`` does).
    Finished one-shot sounds are dropped automatically.
    """

    def __init__(self, global_volume: float = DEFAULT_GLOBAL_VOLUME) -> None:
        self._global_volume = _check_volume(global_volume)
        self._volumes = {category: 1.0 for category in AudioCategory}
        self._playbacks: list[Playback] = []

    @property
    def global_volume(self) -> float:
        return self._global_volume

    def volume(self, category: AudioCategory) -> float:
        """Effective volume for sounds in ``category``."""
        return self._global_volume * self._volumes[category]

    def playbacks(self, category: AudioCategory | None = None) -> tuple[Playback, ...]:
        """Sounds still playing, optionally limited to one category."""
        self._prune()
        return tuple(
            playback
            for playback in self._playbacks
            if category is None or playback.category is category
        )

    def _prune(self) -> None:
        self._playbacks = [p for p in self._playbacks if not p.is_finished]

    def play(
        self,
        sound: Any,
        category: AudioCategory = AudioCategory.SOUND_EFFECT,
        looping: bool = False,
    ) -> Playback:
        """Start ``sound``; looping sounds repeat until stopped."""
        self._prune()
        channel = sound.play(loops=-1 if looping else 0)
        playback = Playback(sound=sound, category=category, looping=looping, channel=channel)
        if channel is not None:
            channel.set_volume(self.volume(category))
            self._playbacks.append(playback)
        return playback

    def stop(self, playback: Playback) -> None:
        """Stop a sound started by :meth:`play`."""
        if playback.channel is not None and not playback.stopped:
            playback.channel.stop()
        playback.stopped = True
        if playback in self._playbacks:
            self._playbacks.remove(playback)

    def set_volume(self, category: AudioCategory, volume: float) -> None:
        """Set the linear volume of a category, updating sounds already playing."""
        self._volumes[category] = _check_volume(volume)
        effective = self.volume(category)
        for playback in self.playbacks(category):
            playback.channel.set_volume(effective)