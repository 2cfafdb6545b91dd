# gridsnake

A classic snake game played on a square grid. The snake starts at the left edge
of the map, one row below an apple near the middle. It moves one cell per tick
in its current direction and grows by one segment each time it eats an apple.
After an apple is eaten, a new one appears on a random free cell. You lose if
the head leaves the map or runs into the body. You win when the snake fills
every cell and there is nowhere left for an apple.

## Installing

```
pip install .
```

This also installs pygame, which draws the window.

## Playing

```
gridsnake
```

This opens a 640 by 480 window with a 20 by 20 grid. You can choose another
window size in pixels. Both values must be greater than 0:

```
gridsnake --width 800 --height 600
```

The snake moves two cells per second, or ten while Space is held.

Controls:

| Key                 | Effect                                              |
|---------------------|-----------------------------------------------------|
| W / Up arrow        | turn up                                             |
| A / Left arrow      | turn left                                           |
| S / Down arrow      | turn down                                           |
| D / Right arrow     | turn right                                          |
| Space (hold)        | speed up while held                                 |
| Esc                 | pause or resume; quits once the game is over        |
| R                   | restart after winning or losing                     |

The snake cannot turn back onto its own neck, so a turn in that direction is
ignored. Your score is the length of the body and is shown below the map,
along with messages when the game is paused, won or lost.

## Using the engine

`gridsnake.game.SnakeGame` holds the rules and has no display code. Its
constructor takes a width and a height, each from 3 to 128, and raises
`ValueError` for other sizes. You can also pass an optional random source
with a `randrange` method, which is used to place new apples:

```python
import random
from gridsnake.game import SnakeGame, Direction

game = SnakeGame(5, 3, random.Random(1))
game.update()
game.set_direction(Direction.UP)
game.update()
print(game.render())
print(game.score(), game.is_game_lost(), game.is_game_won())
```

`render()` returns the board as text. Rows run from top to bottom and cells are
separated by spaces: `.` is an empty cell, `@` is the apple, `$` is the head
and `#` is the body. A cell that holds more than one thing shows each mark,
for example `$#` where the head has run into the body.

Other methods:

- `set_direction(direction)` takes a `Direction` or one of the letters
  `"w"`, `"a"`, `"s"` and `"d"`. Any other value raises `ValueError`.
- `dimensions()` returns `(width, height)`.
- `scene()` returns the grid as rows of `CellState` flags, indexed `[y][x]`.
- `head_position()` and `apple_position()` return `(x, y)` coordinates. The
  apple position is `(-1, -1)` once the game is won.
- `place_apple(x, y)` and `place_head(x, y)` move the apple or the head
  without any collision checks. They are useful for setting up positions in
  tests. `place_apple` raises `ValueError` for a cell outside the grid.

`gridsnake.session.GameSession` adds the timing and input handling that the
window uses: pausing, speeding up, restarting, and turning elapsed
milliseconds into game ticks. You can drive it without a display:

- `advance(dt_ms)` returns `True` if the snake moved. A negative value raises
  `ValueError`.
- `press(action)` and `release(action)` take an `Action`. `press` returns
  `False` when the player asks to quit, which happens when `Action.PAUSE` is
  pressed after the game is over.
- `restart()` starts a fresh game.

The module also provides `status_message(game, paused)`, which returns the
status text and its colour, and `centered_boundary(...)`, which computes where
the square map sits in the window.

## Running the tests

```
pip install ".[test]"
pytest
```