# snakeplay

A small snake game that runs in your terminal, plus a handful of solutions
to classic list and string puzzles.

## Installing

```
pip install .
```

The game draws with the standard `curses` module, so it needs a terminal
that `curses` supports.

## Playing

```
snakeplay
```

Steer the snake with the keys:

| key | direction |
|-----|-----------|
| `w` | up        |
| `s` | down      |
| `a` | left      |
| `d` | right     |

Press `Esc` or `Ctrl-C` to quit. The snake wraps around the edges of the
playing field and grows by one segment each time its head or tail reaches
the food (`0`). A status line at the bottom of the screen shows the food
position and the heading of every segment.

Log lines are appended to the file `testlogfile` in the current directory;
choose another file with `--log-file PATH`:

```
snakeplay --log-file snake.log
```

## What the game does not do

There is no score, no game over and no collision with walls or with the
snake itself: the game runs until you quit it.

## Using the game logic

The game state in `snakeplay.game` can be driven without a terminal:

```python
import random
from snakeplay.game import new_game

state = new_game(80, 24, random.Random(1))
state.update_direction("d")
state.update_position()
print(state.head, state.food_x, state.food_y)
```

`GameState` holds the snake as a list of `Segment` values (row, column and
`Direction`), the board bounds and the food position. Its methods are
`update_position`, `update_direction`, `check_eating` and `generate_food`.

`snakeplay.tui` holds the terminal front end: `put_string`, `draw`,
`status_line`, `run` and `main`. `run` accepts any object with `size`,
`set_content`, `clear`, `show` and `poll_key` methods (the `Screen`
protocol), plays until a quit key arrives and returns the final state.

## Puzzles

`snakeplay.exercises` holds standalone functions:
`sum_below`, `two_sum`, `remove_duplicates`, `longest_common_prefix`,
`is_valid`, `max_difference`, `plus_one`, `length_of_last_word`,
`maximum_difference`, `search_insert` and `merge`.

```python
from snakeplay.exercises import is_valid, two_sum

is_valid("([]{})")      # True
two_sum([3, 2, 4], 6)   # [1, 2]
```

## Running the tests

```
pip install ".[test]"
pytest
```