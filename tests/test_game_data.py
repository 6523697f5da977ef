import pytest

from connect_four.errors import ColumnFullError, InvalidInputError
from connect_four.game_data import GameData


def reader(*lines):
    return iter(lines).__next__


@pytest.fixture
def game():
    return GameData("Alice", "Bob")


def test_initial_state(game):
    assert len(game.grid) == 6 and all(len(row) == 7 for row in game.grid)
    assert [p.symbol for p in game.players] == ["X", "O"]
    assert game.current_player == 0
    assert game.game_over is False
    assert game.current_player_name() == "Alice"


def test_player_name(game):
    assert game.player_name(1) == "Alice"
    assert game.player_name(2) == "Bob"


def test_from_input():
    data = GameData.from_input(reader("", "Alice", "Bob"))
    assert (data.player_name(1), data.player_name(2)) == ("Alice", "Bob")


def test_make_move_drops_to_bottom_and_alternates(game):
    game.make_move(3)
    assert game.grid[5][3] == "X"
    assert game.current_player == 1
    assert game.current_player_name() == "Bob"
    game.make_move(3)
    assert game.grid[4][3] == "O"
    assert game.current_player == 0


def test_make_move_full_column(game):
    for _ in range(6):
        game.make_move(0)
    with pytest.raises(ColumnFullError):
        game.make_move(0)
    assert all(row[0] != " " for row in game.grid)


@pytest.mark.parametrize("column", [7, 10, -1])
def test_make_move_invalid_column(game, column, capsys):
    with pytest.raises(InvalidInputError):
        game.make_move(column)
    assert capsys.readouterr().out.startswith("+---+")
    assert game.current_player == 0


def test_play_game_places_token(game, capsys):
    game.play_game(reader("9", "4"))
    assert game.grid[5][3] == "X"
    assert game.current_player == 1
    assert "C'est à Alice de jouer (X)." in capsys.readouterr().out


def test_play_game_full_column(game):
    for _ in range(6):
        game.make_move(2)
    with pytest.raises(ColumnFullError):
        game.play_game(reader("3"))


def test_empty_grid_not_over_nor_draw(game):
    assert game.is_game_over() is False
    assert game.is_game_draw() is False


def test_horizontal_alignment_wins(game):
    game.grid[5][1:5] = ["X", "X", "X", "X"]
    assert game.is_game_over() is True


def test_row_checks_only_first_token_symbol(game):
    game.grid[5][0:5] = ["X", "O", "O", "O", "O"]
    assert game.is_game_over() is False


def test_vertical_stack_of_four_tokens_ends_game(game):
    for row in range(2, 6):
        game.grid[row][0] = "X" if row % 2 else "O"
    assert game.is_game_over() is True


def test_three_stacked_tokens_do_not_end_game(game):
    for _ in range(3):
        game.make_move(6)
    assert game.is_game_over() is False


def test_draw_when_grid_full(game):
    for row in game.grid:
        row[:] = ["X"] * 7
    assert game.is_game_draw() is True


def test_timeout_ends_game(game):
    game.timeout()
    assert game.game_over is True