# connect_four

Connect Four for two players at one keyboard. The board is shown in the
terminal, and a separate window titled "Timer" shows each player's
remaining time, chess-clock style, with a clock face and two needles.
The prompts printed in the terminal are in French.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
connect-four
```

(`python -m connect_four.app` does the same.)

1. Both players are asked for their names in the terminal. An empty name
   is refused and asked for again.
2. The timer window opens (500 × 500, resizable). The 6 × 7 grid is
   printed in the terminal. Player 1 plays `X`, player 2 plays `O`.
3. On your turn, type a column number from 1 to 7. Your token drops to the
   lowest free cell in that column. Any other answer is refused and you
   are asked again.
4. After each move the screen is cleared and the turn passes. When the
   game is over, the final grid and the winner's name are printed.

Each player starts with 3 minutes. The clock of the player whose turn it
is loses one second per second; the clock switches to the other player
after every move. In the timer window the running player's time is framed
in green, and the needles show that player's seconds and minutes. When a
player's time runs out, the other player is announced as the winner. The
console game is then still waiting for a column: enter a valid column
number (1 to 7) to let it finish.

Closing the timer window stops the program.

## Using it from Python

The game logic works without the terminal or the window:

- `connect_four.game_data.GameData(player1_name, player2_name)` holds the
  grid, the players, the index of the current player and the `game_over`
  flag. `make_move(column)` takes a zero-based column and raises
  `InvalidInputError` for a column outside the grid or `ColumnFullError`
  for a full one; `is_game_over()` and `is_game_draw()` inspect the grid.
  `GameData.from_input(read)` asks for the names first.
- `connect_four.grid` creates the grid and renders it as text
  (`create_grid`, `format_grid`, `display_grid`).
- `connect_four.players` holds `Player`, `IdPlayer` and the prompts
  `input_player_name`, `set_player_names` and `get_column_choice`.
- `connect_four.players_times.PlayersTimes` is the per-player countdown.
  `tick_time()` takes a second off the running clock and returns `True`
  once that player's time is up; `change_player()` switches clocks.
- `connect_four.timer_tick.run` emits a `Tick.TICK` on a queue once per
  `delay` seconds between a `START` and an `END` event
  (`connect_four.events.EventTimerTick`).
- `connect_four.timer_manager.TimerManager` and
  `connect_four.game_manager.GameManager` are the two halves of the
  program; they talk through `queue.Queue` objects carrying
  `connect_four.events.Event` values.
- `connect_four.errors` defines `Connect4Error` and its subclasses
  `InvalidInputError`, `ColumnFullError`, `ChannelRecvError` and
  `ChannelSendError`.

Functions that ask for input take a `read` callable (default `input`), so
a game can be scripted:

```python
from connect_four.game_data import GameData

game = GameData("Alice", "Bob")
for column in (0, 1, 0, 1, 0, 1, 0):
    game.make_move(column)
print(game.is_game_over())  # True
```

## Limitations

- The end-of-game check is loose. A row counts only if four in a row are
  of the first token seen in that row; a column counts as soon as four
  stacked cells hold tokens, whichever player they belong to; and the
  diagonal check does not look for four of one player's tokens. A game
  can therefore end before anyone has truly lined up four.
- The player who made the last move is named the winner, also when the
  game ends on a full grid.
- Choosing a column that is already full ends the console game without a
  result; the timer window keeps running until it is closed.
- There is no way to play against the computer, over a network, or to
  save a game.