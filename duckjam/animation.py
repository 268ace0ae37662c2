"""Player sprite animation state, tied to the player's texture atlas layout."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from duckjam.timer import Timer, TimerMode


class PlayerAnimationState(enum.Enum):
    IDLING = "idling"
    WALKING = "walking"


class PlayerAnimation:
    """Tracks the current animation frame for the player sprite."""

    IDLE_FRAMES = 2
    IDLE_INTERVAL = 0.5
    WALKING_FRAMES = 6
    WALKING_INTERVAL = 0.05
    # Walking frames follow the idle row in the atlas.
    WALKING_ATLAS_OFFSET = 6

    def __init__(self, state: PlayerAnimationState = PlayerAnimationState.IDLING) -> None:
        self._start(state)

    def _start(self, state: PlayerAnimationState) -> None:
        interval = (
            self.IDLE_INTERVAL if state is PlayerAnimationState.IDLING else self.WALKING_INTERVAL
        )
        self.timer = Timer(interval, TimerMode.REPEATING)
        self.frame = 0
        self.state = state

    @property
    def frame_count(self) -> int:
        if self.state is PlayerAnimationState.IDLING:
            return self.IDLE_FRAMES
        return self.WALKING_FRAMES

    def update_timer(self, delta: float) -> None:
        """Advance the animation clock by ``delta`` seconds."""
        self.timer.tick(delta)
        if self.timer.finished:
            self.frame = (self.frame + 1) % self.frame_count

    def update_state(self, state: PlayerAnimationState) -> None:
        """Switch to ``state``, restarting the animation only if it differs."""
        if state is not self.state:
            self._start(state)

    def changed(self) -> bool:
        """Whether the frame advanced during the latest tick."""
        return self.timer.finished

    def atlas_index(self) -> int:
        """Index of the current frame in the sprite atlas."""
        if self.state is PlayerAnimationState.IDLING:
            return self.frame
        return self.WALKING_ATLAS_OFFSET + self.frame


def animation_state_for(intent: Sequence[float]) -> PlayerAnimationState:
    """Idle when there is no movement intent, walking otherwise."""
    if all(component == 0 for component in intent):
        return PlayerAnimationState.IDLING
    return PlayerAnimationState.WALKING


def should_play_step(animation: PlayerAnimation) -> bool:
    """True on the walking frames where a foot touches the ground."""
    return (
        animation.state is PlayerAnimationState.WALKING
        and animation.changed()
        and animation.frame in (2, 5)
    )