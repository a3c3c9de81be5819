# yellowsnow

*Don't Eat the Yellow Snow!* is a small arcade game. Snowflakes fall from the
sky. Catch the white ones to score points and stay clear of the yellow ones.
One yellow flake ends the round.

## Installing

```
pip install .
```

This pulls in `pygame`, which the game uses for its window, images, sound and
text.

## Playing

```
yellow-snow
```

or, to read the assets from somewhere other than `./assets`:

```
yellow-snow --assets path/to/assets
```

The game opens a borderless 800×600 window and grabs the input. It reads its
files from the assets directory (default `assets`, relative to the current
directory):

- `images/background.png`, `images/player.png`, `images/yellow.png`,
  `images/white.png` (the yellow flake image is also the window icon)
- `sounds/hit.ogg`, `sounds/collect.ogg`
- `music/winter_loop.ogg`, played in a loop
- `fonts/freesansbold.ttf`, used at size 24 for the score

If a file is missing or cannot be loaded, or pygame fails to start, the
command prints `Error: ...` to standard error and exits with status 1.

### Controls

| Key     | Action                                   |
|---------|------------------------------------------|
| `A`     | move left                                |
| `D`     | move right                               |
| `Space` | start a new round after a yellow flake   |
| `F`     | toggle printing frames per second        |
| `Esc`   | quit                                     |

Closing the window also quits. Each white flake caught adds one to the score
shown in the top-left corner and sends that flake back above the screen. A
yellow flake plays the hit sound, pauses the music and stops the round until
`Space` is pressed. While `F` is on, the number of frames drawn in each second
is printed to standard output.

## Using the parts

The game logic lives in plain classes:

- `yellowsnow.flakes.Flake(image, is_white, rng=None)`: a falling flake.
  `reset(full)` places it at a random spot above the screen, `update(dt)`
  moves it down and respawns it once it has fallen past the floor;
  `left()`, `right()` and `bottom()` give its edges.
- `yellowsnow.player.Player(image)`: the player. `reset()` centres it,
  `update(dt, moving_left, moving_right)` walks it and stops it at the window
  edges; `top()`, `left()` and `right()` give its hit box, which is narrower
  than the image.
- `yellowsnow.score.Score(font)`: the running count, with `reset()`,
  `increment()`, `text()` (`"Score: N"`) and `draw(screen)`.
- `yellowsnow.fps.FrameClock(target_fps=60, ticks=None, sleep=None, out=None)`:
  frame pacing. `update()` waits out the rest of the frame and returns its
  length in seconds; `toggle_display()` switches the FPS printout. The tick
  source, sleep function and output stream can be passed in.
- `yellowsnow.game.load_media(assets_dir)` loads the assets into a `Media`
  record, and `yellowsnow.game.Game(media, screen, rng=None)` ties everything
  together: `reset()`, `check_collision()`, `handle_event(event)`,
  `step(dt)`, `draw()` and `run()`. `yellowsnow.game.main(argv=None)` is the
  command above.

## What it does not do

There is no menu, no pause key, no settings file and no saved high scores;
the score is reset at the start of every round.

## Running the tests

```
pip install .[test]
pytest
```