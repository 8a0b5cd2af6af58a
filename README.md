# bombergrid

A small arcade game played on a 768 × 768 pixel board of 64-pixel tiles,
shown in a 640 × 640 window. You walk the lanes between unbreakable
pillars, drop a bomb to blast breakable bricks and wandering enemies, and
try not to get caught.

## Installing

```
pip install .
```

This also installs pygame, which the game uses for its window, drawing
and sound.

## Playing

```
bombergrid
```

Options:

- `--root DIR`: directory holding the game assets and `highscore.txt`
  (default: the current directory).
- `--seed N`: seed for the random placement of bricks and enemies.

The screen backgrounds, the buttons, the player's starting image, the
background music, the death sound and `highscore.txt` are looked up under
`--root`. The other textures (bomb, explosion, blocks, bricks, enemies,
the player's walking images), the sound effects and the font
`Fonts/arial.ttf` are looked up relative to the current directory, so it
is simplest to run the game from the directory that holds `Textures/`,
`Sound/`, `Music/` and `Fonts/`.

Missing assets do not stop the game: a missing image is drawn as a plain
coloured tile, a missing font falls back to pygame's default font, and a
missing sound or music file is simply not played.

The start screen has three buttons: start, high scores and exit. A button
grows while the pointer is over it and reacts to a mouse click.

In the game:

| Key              | Action                          |
|------------------|---------------------------------|
| `W` `A` `S` `D`  | move up, left, down, right      |
| `Space`          | drop a bomb where you stand     |
| `Backspace`      | go back to the start screen     |
| `Escape`         | quit                            |

You move one tile at a time, only along open lanes, and bricks block your
way. Only one bomb can be on the board at a time: it burns for three
seconds, shows its explosion for one more, then disappears. When you drop
it, every brick up to two tiles away on its row or column is destroyed.
While it lies on the board, an enemy one tile beside it (left, right,
above or below) is killed.

Scoring:

- 5 points for each brick destroyed
- 50 points for each enemy killed

The board has 30 bricks and 5 enemies; three enemies walk back and forth
across the board and two walk up and down. When an enemy catches you,
your score is appended to `highscore.txt` (one score per line) and the
game-over screen is shown. The high-score screen lists the best three
scores and has a back button to the start screen.

## Using it from Python

The game can be driven from code without opening a window:

```python
from bombergrid.game import Game
from bombergrid.player import Action

game = Game(root=".", seed=1)
game.handle_key(Action.RIGHT)   # ignored unless the game view is active
game.tick()                     # advances one frame, drawing onto game.surface
```

`Game.run()` opens the window and runs the main loop, and
`bombergrid.game.main()` is what the `bombergrid` command calls.

The pieces are usable on their own too: `bombergrid.bomb.Bomb`,
`bombergrid.blocks.Blocks`, `bombergrid.brick.Bricks`,
`bombergrid.enemy.Enemies`, `bombergrid.player.Player`,
`bombergrid.score.Score`, `bombergrid.highscore.HighScores`,
`bombergrid.buttons.Button` and `bombergrid.screens.Screen`.

## What it does not do

There is one round per run: after the game-over screen there is no way
to start again other than closing the window and running the command
once more. There are no levels, no lives and no multiplayer.

## Running the tests

```
pip install .[test]
pytest
```