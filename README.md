# solz

A small 2D arcade game built on pygame. The player walks around a window
that wraps at its edges. There is a splash screen, a title menu, a pause
menu, a settings menu with a master volume control, and a credits page.

## Installing

```
pip install .
```

## Playing

```
solz
```

Options:

| Option            | Default  | Meaning                                         |
|-------------------|----------|-------------------------------------------------|
| `--width N`       | 1280     | window width in pixels                          |
| `--height N`      | 720      | window height in pixels                         |
| `--fps N`         | 60       | frame rate cap                                  |
| `--frames N`      | none     | stop after this many frames                     |
| `--assets DIR`    | `assets` | directory to load images and sounds from        |
| `--dev`           | off      | development tools: the backquote key toggles outlines around buttons |

Width, height and fps must be positive.

The game opens on a splash screen lasting 1.8 seconds, fading its image in
and out (Escape skips it). The title screen then shows **Play**,
**Settings**, **Credits** and **Exit** (Exit is left out when running under
Emscripten).

Controls during play:

| Key                  | Action                                  |
|----------------------|-----------------------------------------|
| W / Up arrow         | move up                                 |
| S / Down arrow       | move down                               |
| A / Left arrow       | move left                               |
| D / Right arrow      | move right                              |
| P or Escape          | pause and open the pause menu           |
| P (menu open)        | close the menu and resume               |
| Escape (in a menu)   | go back one menu                        |

Diagonal movement runs at the same speed as straight movement (400 pixels
per second). The player wraps to the opposite side once it is 128 pixels
past a window edge.

Going back: credits return to the main menu; settings return to the main
menu on the title screen and to the pause menu during play; the pause menu
closes and play resumes.

In **Settings**, the `-` and `+` buttons change the master volume in steps
of 10%, between 0% and 300%. The change applies to music already playing.

If resources are still waiting when **Play** is chosen, a loading screen is
shown until they are ready.

## What it does not do

- No images or sounds come with the package. Sounds and the splash image are
  read from the `--assets` directory (for example
  `audio/sound_effects/step1.ogg`, `audio/music/Fluffing A Duck.ogg`,
  `images/splash.png`); a missing or unreadable file is skipped silently, and
  if no audio device can be opened the game runs without sound.
- The player is drawn as a plain coloured square; the sprite sheet's frame
  index is tracked by the game logic but not drawn.
- Text uses pygame's default font.

## Using it as a library

The game logic is kept apart from drawing, so the pieces can be driven
directly:

- `solz.states`: `Screen`, `Menu`, `AppSystems` and `StateMachine`, which
  queues a state and applies it on `apply()`.
- `solz.asset_tracking`: `ResourceHandles`, which holds resources until
  their handles report loaded, then inserts them.
- `solz.audio`: `AudioInstance`, `music`, `sound_effect` and
  `apply_global_volume`.
- `solz.animation`: `Timer`, `TimerMode`, `PlayerAnimation` and the
  idle/walking cycle helpers `state_for_intent` and `sprite_flip`.
- `solz.movement`: `MovementController`, `apply_movement` and `screen_wrap`.
- `solz.player`: `directional_intent`, `player`, `Player`, `PlayerAssets`
  and `LevelAssets`.
- `solz.theme`: `Color`, `Interaction`, `InteractionPalette`,
  `InteractionAssets`, `Widget` and the builders `ui_root`, `header`,
  `label`, `button` and `button_small`.
- `solz.splash`: `FadeInOut` and `SplashScreen`.
- `solz.menus`: the menu builders and the volume helpers `lower_volume`,
  `raise_volume` and `volume_label`.
- `solz.screens`: `Game`, which ties screens, menus, pausing and volume
  together and advances one frame per `update()` call.
- `solz.app`: the pygame window; `main` is what the `solz` command runs.

```python
from solz.movement import screen_wrap

screen_wrap((900.0, 0.0), (1280.0, 720.0))  # (-636.0, 0.0)
```

```python
from solz.screens import Game
from solz.states import Screen

game = Game()
game.update(0.1, {"escape"})          # skip the splash
assert game.screen.current() is Screen.TITLE
```

## Running the tests

```
pip install .[test]
pytest
```