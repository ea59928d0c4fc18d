# Ad Astra

A retro, pixel-art vertical space shooter. Fly your ship along the bottom of
the screen, shoot down falling asteroids, steer clear of drifting mines and
collect power-ups. As your score climbs, new rounds begin: the sky shifts to
a new colour and everything falls faster.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the keyboard.
For the tests, install the `test` extra (`pip install .[test]`) and run
`pytest`.

## Playing

```
adastra
```

The game opens on the menu screen. Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--name NAME` | `PLAYER` | Pilot name shown on the menu and saved with high scores. It is upper-cased; a name of only spaces becomes `UNKNOWN`, an empty one `PILOT`. |
| `--scores PATH` | `scores.json` | High-score file. |
| `--seed N` | none | Seed for the random generator, for repeatable games. |
| `--frames N` | none | Quit after N frames (a positive number). |

### Keys

| Key | Where | Action |
| --- | --- | --- |
| Space / Enter / keypad Enter | Menu | Launch |
| L | Menu | Show the leaderboard |
| I | Menu | Show the instructions |
| Left / A, Right / D | In flight | Move the ship |
| Space | In flight | Shoot |
| P | In flight or paused | Pause or resume |
| G | Anywhere | Show or hide the raster grid |
| Space / keypad Enter | Game over | Play again |
| Esc | Game over | Back to the menu |
| Any key | Leaderboard, instructions | Back to the menu |

### Rules

- You have 100 HP and 3 lives. When your HP reaches zero you lose a life and
  start again with full HP, briefly invulnerable. With no lives left the
  game is over.
- Large asteroids fall from the top. Shooting one scores 10 points and
  splits it into two medium asteroids, which score 20 each. A destroyed
  large asteroid drops a power-up one time in ten.
- An asteroid that gets past you costs 10 HP. Flying into one costs 30 HP.
- Mines appear from round 2 onwards and sway from side to side as they
  sink. Touching a mine ends the game unless a shield is up. Shooting a
  mine deals 100 damage to you, which costs a life unless a shield is up.
- Power-ups, also dropped from the top every 12 seconds:
  - **S**: shield, 8 seconds in which you take no damage.
  - **T**: tri-shot, three bullets per shot for 8 seconds.
  - **H**: health pack, +30 HP (up to 100).
- Rounds begin at 2000, 4500, 7500, 11000, 15000, 20000 and 30000 points.
  Each new round gives back 20 HP, changes the sky colour and makes
  asteroids and mines fall faster. More asteroids and mines may be on
  screen at once in later rounds, and they spawn a little more often every
  15 seconds of play.

### High scores

The ten best positive scores are kept as JSON in `scores.json` in the
directory the game is started from, or in the file given with `--scores`.
They are shown on the leaderboard screen.

## Using it as a library

The game logic runs without a window. `adastra.game.Game` takes a
high-score path, a `random.Random` and a clock (a callable returning
milliseconds), so you can drive it frame by frame:

```python
import random

from adastra.game import Game, GameState

now = 0
game = Game(score_path="scores.json", rng=random.Random(1), clock=lambda: now)
game.set_player_name("ace")
game.start()
for _ in range(600):
    now += 16
    game.tick()
print(game.state, game.score, game.hp, game.lives)
print(game.get_high_scores())
```

Keys are passed to `Game.handle_input` as pygame key codes; ship movement
and shooting go to `Player.key_press` and `Player.key_release` on
`game.player`.

`adastra.scene.Scene` holds the items (`Asteroid`, `Mine`, `Bullet`,
`PowerUp`, `Player`, `Explosion`, `Debris`, `Star`, `Planet`,
`Background`, `RasterGrid`, `HUD`), advances them one frame at a time with
`Scene.advance` and paints them by layer with `Scene.render`.
`adastra.scores.HighScoreTable` reads and writes the high-score file.

## What it does not do

There is no sound. The pilot name is given with `--name` rather than asked
for in a dialog, and text is drawn with pygame's built-in font.