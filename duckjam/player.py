"""The player character: directional input, assets, spawning and per-frame update."""

from __future__ import annotations

import math
import random
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from typing import Any

import pygame

from duckjam.animation import PlayerAnimation, animation_state_for, should_play_step
from duckjam.movement import MovementController, apply_movement, wrap_position

DUCKY_IMAGE = "images/ducky.png"
STEP_SOUNDS = (
    "audio/sound_effects/step1.ogg",
    "audio/sound_effects/step2.ogg",
    "audio/sound_effects/step3.ogg",
    "audio/sound_effects/step4.ogg",
)

SPRITE_TILE_SIZE = 32
ATLAS_COLUMNS = 6
ATLAS_ROWS = 2
ATLAS_PADDING = 1
PLAYER_SCALE = 8.0
LEVEL_MAX_SPEED = 400.0

UP_KEYS = (pygame.K_w, pygame.K_UP)
DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)
LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


def directional_intent(pressed: Collection[int]) -> tuple[float, float]:
    """Unit movement direction for the held keys, or zero; y points up."""

    def held(keys: Sequence[int]) -> bool:
        return any(key in pressed for key in keys)

    x = y = 0.0
    if held(UP_KEYS):
        y += 1.0
    if held(DOWN_KEYS):
        y -= 1.0
    if held(LEFT_KEYS):
        x -= 1.0
    if held(RIGHT_KEYS):
        x += 1.0
    length = math.hypot(x, y)
    if length == 0.0 or not math.isfinite(length):
        return (0.0, 0.0)
    return (x / length, y / length)


def atlas_rect(index: int) -> pygame.Rect:
    """Area of the sprite sheet holding frame ``index``."""
    if not 0 <= index < ATLAS_COLUMNS * ATLAS_ROWS:
        raise IndexError(f"atlas index out of range: {index}")
    row, column = divmod(index, ATLAS_COLUMNS)
    step = SPRITE_TILE_SIZE + ATLAS_PADDING
    return pygame.Rect(column * step, row * step, SPRITE_TILE_SIZE, SPRITE_TILE_SIZE)


@dataclass
class PlayerAssets:
    """The player's sprite sheet and footstep sounds."""

    ducky: Any = DUCKY_IMAGE
    steps: Sequence[Any] = STEP_SOUNDS

    def random_step(self, rng: random.Random | None = None) -> Any:
        """Pick one of the footstep sounds at random."""
        if not self.steps:
            raise ValueError("no step sounds available")
        return (rng or random).choice(list(self.steps))


@dataclass(eq=False)
class Player:
    """The player character; its position is centred on the window, y up."""

    controller: MovementController = field(default_factory=MovementController)
    animation: PlayerAnimation = field(default_factory=PlayerAnimation)
    position: tuple[float, float] = (0.0, 0.0)
    scale: float = PLAYER_SCALE
    flip_x: bool = False
    atlas_index: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.atlas_index = self.animation.atlas_index()

    def update(
        self, dt: float, intent: Sequence[float], window_size: Sequence[float]
    ) -> bool:
        """Advance one frame; return True when a footstep sound should play."""
        self.animation.update_timer(dt)

        ix, iy = intent
        self.controller.intent = (float(ix), float(iy))

        moved = apply_movement(self.controller, self.position, dt)
        self.position = wrap_position(moved, window_size)

        if ix != 0:
            self.flip_x = ix < 0
        self.animation.update_state(animation_state_for(self.controller.intent))

        if self.animation.changed():
            self.atlas_index = self.animation.atlas_index()
        return should_play_step(self.animation)


def spawn_player(max_speed: float) -> Player:
    """Create the player at the centre of the level."""
    return Player(controller=MovementController(max_speed=max_speed))


def spawn_level() -> Player:
    """Create the level; for now it holds only the player."""
    return spawn_player(LEVEL_MAX_SPEED)