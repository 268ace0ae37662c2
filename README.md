# duckjam

A small 2D arcade game built on pygame. A pixel-art ducky walks around a
screen that wraps at its edges. Footstep sounds play in time with its walking
animation.

## Screens

The game shows these screens:

- **Splash**: an image fades in and out over 1.8 seconds. Press Escape to skip it.
- **Loading**: shows "Loading..." until every tracked image and sound has
  loaded, then moves on to the title screen.
- **Title**: has the buttons *Play*, *Credits* and *Exit*.
- **Credits**: lists who made the game and the assets it uses, and has a
  *Back* button.
- **Gameplay**: move the ducky with W/A/S/D or the arrow keys. Diagonal
  movement is as fast as straight movement. Press Escape to go back to the
  title screen.

The credits and gameplay screens each play their own looping music. Buttons
change colour when the pointer hovers over them or presses them, and they play
a sound at the same time.

## Installing

```
pip install .
```

Images and sounds are loaded from an assets directory, `assets/` by default.
It must hold:

- `images/ducky.png` and `images/splash.png`
- `audio/sound_effects/step1.ogg` to `step4.ogg`
- `audio/sound_effects/button_hover.ogg` and `button_press.ogg`
- `audio/music/Fluffing A Duck.ogg` and `audio/music/Monkeys Spinning Monkeys.ogg`

If no audio device is available, sounds are silent.

## Playing

```
duckjam
duckjam --assets path/to/assets
duckjam --dev
```

The game opens a resizable window running at 60 frames per second. The
overall volume starts at 30%.

With `--dev`, screen transitions are logged. Pressing the backquote key
(`` ` ``) then shows or hides red outlines around the UI widgets.

## Using it as a library

Most of the game logic runs without a window:

- `duckjam.timer`: `Timer` and `TimerMode`. Timers run once or repeat, and
  are advanced with `tick(seconds)`.
- `duckjam.animation`: `PlayerAnimation` cycles through the idle and walking
  frames. The module also has `animation_state_for` and `should_play_step`.
- `duckjam.movement`: `MovementController`, `apply_movement` and `wrap_position`.
- `duckjam.player`: `directional_intent`, `PlayerAssets`, `Player`,
  `spawn_player` and `spawn_level`.
- `duckjam.asset_tracking`: `ResourceHandles`, a queue of handles that waits
  for each one to load and then runs its callback.
- `duckjam.audio`: `AudioManager` plays sounds in the `AudioCategory.MUSIC`
  and `AudioCategory.SOUND_EFFECT` categories. Each category has its own
  volume.
- `duckjam.screens`: `Screen` and `ScreenState`. `ScreenState` runs enter and
  exit handlers and drops the objects scoped to a screen when the game leaves
  that screen.
- `duckjam.theme` and `duckjam.widgets`: the colour palette, and the buttons,
  headers and labels laid out in a centred `UiRoot` column.
- `duckjam.app`: `App` ties everything together. `App.step(dt, events)` runs
  one frame, and `App.run()` opens the window.

```python
from duckjam.movement import MovementController, apply_movement, wrap_position

controller = MovementController(intent=(1.0, 0.0), max_speed=400.0)
position = apply_movement(controller, (0.0, 0.0), 0.5)   # (200.0, 0.0)
position = wrap_position(position, (800.0, 600.0))       # (200.0, 0.0)
```

## What it does not do

- The level holds only the player. There are no obstacles, enemies, scores or
  saved progress.
- Input comes only from the keyboard and mouse. Gamepads are not supported.
- No assets ship with the package. If any tracked asset is missing, the
  loading screen does not move on to the title screen.

## Tests

```
pip install .[test]
pytest
```