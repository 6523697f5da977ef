import pytest

from connect_four.players import (
    IdPlayer,
    Player,
    get_column_choice,
    input_player_name,
    set_player_names,
)


def reader(*lines):
    return iter(lines).__next__


def test_player_holds_fields():
    player = Player("Alice", IdPlayer.PLAYER1, "X")
    assert (player.name, player.id, player.symbol) == ("Alice", IdPlayer.PLAYER1, "X")


def test_input_player_name_strips():
    assert input_player_name(1, reader("  Alice \n")) == "Alice"


def test_input_player_name_skips_empty(capsys):
    assert input_player_name(2, reader("", "   ", "Bob")) == "Bob"
    out = capsys.readouterr().out
    assert out.count("Le nom ne peut pas être vide.") == 2
    assert "Entrez le nom du joueur 2 :" in out


def test_set_player_names_order():
    assert set_player_names(reader("Alice", "", "Bob")) == ("Alice", "Bob")


@pytest.mark.parametrize("text, expected", [("1", 0), ("7", 6), (" 4 ", 3), ("+2", 1)])
def test_get_column_choice_valid(text, expected):
    assert get_column_choice(reader(text)) == expected


def test_get_column_choice_rejects_until_valid(capsys):
    answer = get_column_choice(reader("0", "8", "abc", "", "-1", "3_0", "5"))
    assert answer == 4
    out = capsys.readouterr().out
    assert out.count("La réponse n'est pas valide.") == 6