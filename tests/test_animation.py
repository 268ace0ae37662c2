from duckjam.animation import (
    PlayerAnimation,
    PlayerAnimationState,
    animation_state_for,
    should_play_step,
)


def test_new_animation_is_idle_at_first_frame():
    animation = PlayerAnimation()
    assert animation.state is PlayerAnimationState.IDLING
    assert animation.frame == 0
    assert animation.atlas_index() == 0
    assert not animation.changed()


def test_idle_frames_cycle():
    animation = PlayerAnimation()
    seen = []
    for _ in range(PlayerAnimation.IDLE_FRAMES + 1):
        animation.update_timer(PlayerAnimation.IDLE_INTERVAL)
        assert animation.changed()
        seen.append(animation.frame)
    assert seen == [1, 0, 1]


def test_partial_tick_does_not_advance_frame():
    animation = PlayerAnimation()
    animation.update_timer(PlayerAnimation.IDLE_INTERVAL / 2)
    assert animation.frame == 0
    assert not animation.changed()


def test_walking_uses_offset_atlas_row():
    animation = PlayerAnimation()
    animation.update_state(PlayerAnimationState.WALKING)
    assert animation.frame == 0
    assert animation.atlas_index() == PlayerAnimation.WALKING_ATLAS_OFFSET


def test_walking_wraps_after_all_frames():
    animation = PlayerAnimation(PlayerAnimationState.WALKING)
    for _ in range(PlayerAnimation.WALKING_FRAMES):
        animation.update_timer(PlayerAnimation.WALKING_INTERVAL)
    assert animation.frame == 0
    assert animation.changed()


def test_update_state_same_state_keeps_progress():
    animation = PlayerAnimation()
    animation.update_timer(PlayerAnimation.IDLE_INTERVAL)
    animation.update_state(PlayerAnimationState.IDLING)
    assert animation.frame == 1


def test_update_state_change_restarts():
    animation = PlayerAnimation()
    animation.update_timer(PlayerAnimation.IDLE_INTERVAL)
    animation.update_state(PlayerAnimationState.WALKING)
    animation.update_state(PlayerAnimationState.IDLING)
    assert animation.frame == 0
    assert animation.timer.elapsed == 0


def test_animation_state_for_intent():
    assert animation_state_for((0.0, 0.0)) is PlayerAnimationState.IDLING
    assert animation_state_for((1.0, 0.0)) is PlayerAnimationState.WALKING
    assert animation_state_for((0.0, -1.0)) is PlayerAnimationState.WALKING


def test_step_sound_on_frames_two_and_five():
    animation = PlayerAnimation(PlayerAnimationState.WALKING)
    steps = []
    for _ in range(PlayerAnimation.WALKING_FRAMES):
        animation.update_timer(PlayerAnimation.WALKING_INTERVAL)
        steps.append((animation.frame, should_play_step(animation)))
    assert [frame for frame, step in steps if step] == [2, 5]


def test_no_step_sound_while_idle():
    animation = PlayerAnimation()
    results = []
    for _ in range(4):
        animation.update_timer(PlayerAnimation.IDLE_INTERVAL)
        results.append(should_play_step(animation))
    assert results == [False] * 4


def test_no_step_sound_without_frame_change():
    animation = PlayerAnimation(PlayerAnimationState.WALKING)
    animation.update_timer(PlayerAnimation.WALKING_INTERVAL)
    animation.update_timer(PlayerAnimation.WALKING_INTERVAL)
    assert should_play_step(animation)
    animation.update_timer(PlayerAnimation.WALKING_INTERVAL / 4)
    assert animation.frame == 2
    assert not should_play_step(animation)