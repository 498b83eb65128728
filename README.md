# crateshift

A box-pushing puzzle game built on pygame. You walk the player around a
walled board and push the crates onto the coin tiles. A level is done when
six crates sit on coins. Finishing a level unlocks the next one.

## Installing

```
pip install .
```

## Playing

```
crateshift
```

The command takes these options. Paths are relative to the working
directory.

| Option        | Default                 | Meaning                          |
|---------------|-------------------------|----------------------------------|
| `--map-dir`   | `Map`                   | directory holding `map<N>.txt`   |
| `--image-dir` | `Image`                 | directory holding the images     |
| `--font`      | `Font/Roboto-Bold.ttf`  | font for level numbers and title |
| `--music`     | `background_music.mp3`  | background music, played in loop |

The game opens on a start screen. Click the start button to reach the level
menu. The menu has thirty levels in three rows of ten, and at first only
level 1 is unlocked. Click an unlocked level to play it. Closing the window
ends the game.

Controls while playing:

- The arrow keys move the player. When the player walks into a crate, the
  crate moves with it. The move is refused if a wall, another crate or the
  edge of the board is behind that crate.
- The undo button in the top right corner restores the board as it was
  before the last move. You get three undos per attempt, and the board
  remembers only the four most recent moves.
- The speaker button pauses or resumes the background music.
- The menu button opens the pause board, which offers Resume, Restart
  (reloads the level as it was when it started) and the level menu.

When a level is solved, a board appears. You can go on to the next level or
return to the level menu. After the last level there is no next level, so
only the menu button works.

If an image, the font or the music file cannot be loaded, the game prints a
message and carries on without it.

## Map files

Each level is read from `<map-dir>/map<N>.txt`. A map is 24 columns by 16
rows, read row by row. Whitespace is ignored, and cells after the first
384 are ignored too. Each cell is one symbol:

| Symbol | Meaning               |
|--------|-----------------------|
| `#`    | wall                  |
| `_`    | floor                 |
| `x`    | player                |
| `o`    | crate                 |
| `v`    | coin (target)         |
| `s`    | crate resting on coin |
| `-`    | backdrop outside map  |

A map with fewer cells, an unknown symbol or no player raises `ValueError`.

## Using the game logic

The rules work without a window:

```python
from crateshift.level import load_map_file
from crateshift.movement import Direction

board = load_map_file(1, "Map")
board.move(Direction.LEFT)   # True if the player moved
board.undo()                 # True if a saved board was restored
print(board.is_solved())
print("\n".join(board.rows()))
```

`crateshift.movement.Board` also accepts a list of row strings directly.
`crateshift.level.parse_map` turns map text into that list.
`crateshift.level.LevelProgress` tracks which levels are unlocked.

## What it does not do

- Unlocked levels exist only while the game runs. Nothing is saved between
  sessions.
- The package comes with no maps, images, font or music. Put them at the
  paths listed above.

## Running the tests

```
pip install ".[test]"
pytest
```