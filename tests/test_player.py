import math
import random

import pygame
import pytest

from duckjam.animation import PlayerAnimationState
from duckjam.movement import SCREEN_WRAP_MARGIN
from duckjam.player import (
    ATLAS_PADDING,
    SPRITE_TILE_SIZE,
    STEP_SOUNDS,
    PlayerAssets,
    atlas_rect,
    directional_intent,
    spawn_level,
    spawn_player,
)


def test_no_keys_means_no_intent():
    assert directional_intent(set()) == (0.0, 0.0)


def test_wasd_and_arrows_agree():
    assert directional_intent({pygame.K_w}) == directional_intent({pygame.K_UP})
    assert directional_intent({pygame.K_a}) == directional_intent({pygame.K_LEFT})


def test_up_points_along_positive_y():
    x, y = directional_intent({pygame.K_w})
    assert x == 0.0
    assert y > 0


def test_down_is_opposite_of_up():
    ux, uy = directional_intent({pygame.K_w})
    assert directional_intent({pygame.K_s}) == (-ux, -uy)


def test_opposite_keys_cancel():
    assert directional_intent({pygame.K_a, pygame.K_d}) == directional_intent(set())


def test_diagonal_is_normalised():
    x, y = directional_intent({pygame.K_d, pygame.K_UP})
    assert math.isclose(math.hypot(x, y), 1.0)
    assert x > 0 and y > 0


def test_atlas_cells_have_tile_size_and_padding():
    first, second = atlas_rect(0), atlas_rect(1)
    assert first.size == (SPRITE_TILE_SIZE, SPRITE_TILE_SIZE)
    assert second.left - first.right == ATLAS_PADDING
    assert atlas_rect(6).top - first.bottom == ATLAS_PADDING


def test_atlas_index_out_of_range():
    with pytest.raises(IndexError):
        atlas_rect(12)


def test_default_assets_use_step_sounds():
    assets = PlayerAssets()
    assert list(assets.steps) == [
        "audio/sound_effects/step1.ogg",
        "audio/sound_effects/step2.ogg",
        "audio/sound_effects/step3.ogg",
        "audio/sound_effects/step4.ogg",
    ]
    assert assets.ducky == "images/ducky.png"


def test_random_step_picks_from_steps():
    assets = PlayerAssets()
    rng = random.Random(7)
    picks = {assets.random_step(rng) for _ in range(50)}
    assert picks <= set(STEP_SOUNDS)


def test_random_step_without_sounds():
    with pytest.raises(ValueError):
        PlayerAssets(steps=()).random_step()


def test_spawn_level_uses_level_speed():
    player = spawn_level()
    assert player.controller.max_speed == 400.0
    assert player.position == (0.0, 0.0)
    assert player.atlas_index == 0


def test_spawn_player_keeps_speed():
    assert spawn_player(123.0).controller.max_speed == 123.0


def test_walking_moves_and_flips():
    player = spawn_level()
    player.update(0.1, directional_intent({pygame.K_d}), (800, 600))
    assert player.position[0] > 0
    assert player.flip_x is False
    assert player.animation.state is PlayerAnimationState.WALKING
    player.update(0.1, directional_intent({pygame.K_a}), (800, 600))
    assert player.flip_x is True


def test_vertical_movement_keeps_facing():
    player = spawn_level()
    player.update(0.1, directional_intent({pygame.K_a}), (800, 600))
    player.update(0.1, directional_intent({pygame.K_w}), (800, 600))
    assert player.flip_x is True


def test_stopping_returns_to_idle():
    player = spawn_level()
    player.update(0.1, directional_intent({pygame.K_d}), (800, 600))
    player.update(0.1, (0.0, 0.0), (800, 600))
    assert player.animation.state is PlayerAnimationState.IDLING


def test_steps_happen_on_footfall_frames():
    player = spawn_level()
    steps = 0
    for _ in range(30):
        if player.update(0.05, directional_intent({pygame.K_d}), (800, 600)):
            steps += 1
            assert player.animation.frame in (2, 5)
    assert steps > 0


def test_position_stays_inside_wrap_area():
    player = spawn_level()
    half = (800 + SCREEN_WRAP_MARGIN) / 2
    for _ in range(50):
        player.update(0.37, directional_intent({pygame.K_d, pygame.K_w}), (800, 800))
        x, y = player.position
        assert -half <= x < half
        assert -half <= y < half