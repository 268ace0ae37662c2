import pygame

from duckjam.audio import AudioCategory, AudioManager
from duckjam.gameplay import GameplayScreen
from duckjam.player import PlayerAssets
from duckjam.screens import Screen, ScreenState


class FakeChannel:
    def __init__(self):
        self.busy = True

    def set_volume(self, volume):
        self.volume = volume

    def stop(self):
        self.busy = False

    def get_busy(self):
        return self.busy


class FakeSound:
    def __init__(self):
        self.loops = []

    def play(self, loops=0):
        self.loops.append(loops)
        return FakeChannel()


def entered(**kwargs):
    state = ScreenState(Screen.GAMEPLAY)
    gameplay = GameplayScreen(state, **kwargs)
    state.apply()
    return state, gameplay


def test_enter_spawns_player():
    state, gameplay = entered()
    assert gameplay.player.controller.max_speed == 400.0
    assert gameplay.player in state.scoped(Screen.GAMEPLAY)


def test_held_key_moves_player():
    _, gameplay = entered()
    gameplay.update(0.1, {pygame.K_d}, set(), (800, 600))
    assert gameplay.player.position[0] > 0
    assert gameplay.player.position[1] == 0.0


def test_escape_returns_to_title():
    state, gameplay = entered()
    gameplay.update(0.0, set(), {pygame.K_ESCAPE})
    assert state.pending is Screen.TITLE
    state.apply()
    assert gameplay.player is None


def test_update_outside_gameplay_does_nothing():
    state = ScreenState(Screen.TITLE)
    gameplay = GameplayScreen(state)
    state.apply()
    gameplay.update(0.0, set(), {pygame.K_ESCAPE})
    assert state.pending is None
    assert gameplay.player is None


def test_music_plays_and_stops():
    audio = AudioManager()
    music = FakeSound()
    state, gameplay = entered(audio=audio, music=music)
    assert music.loops == [-1]
    assert len(audio.playbacks(AudioCategory.MUSIC)) == 1
    state.set(Screen.TITLE)
    state.apply()
    assert audio.playbacks(AudioCategory.MUSIC) == ()


def test_walking_plays_step_sounds():
    audio = AudioManager()
    steps = (FakeSound(), FakeSound())
    _, gameplay = entered(assets=PlayerAssets(ducky=None, steps=steps), audio=audio)
    for _ in range(30):
        gameplay.update(0.05, {pygame.K_d}, set(), (800, 600))
    played = sum(len(sound.loops) for sound in steps)
    assert played > 0
    assert len(audio.playbacks(AudioCategory.SOUND_EFFECT)) == played


def test_standing_still_plays_no_steps():
    audio = AudioManager()
    steps = (FakeSound(),)
    _, gameplay = entered(assets=PlayerAssets(ducky=None, steps=steps), audio=audio)
    for _ in range(30):
        gameplay.update(0.05, set(), set(), (800, 600))
    assert steps[0].loops == []