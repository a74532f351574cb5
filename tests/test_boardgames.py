import pytest

from designdemos.boardgames import BoardGame, Checkers, Chess, main


def test_board_game_is_abstract():
    with pytest.raises(TypeError):
        BoardGame()


def test_chess_game_ends_at_limit(capsys):
    game = Chess()
    game.play_game()
    out = capsys.readouterr().out
    assert game.move_count == Chess.MOVE_LIMIT
    assert "Black wins by checkmate!" in out
    assert "=== Game Session Ended ===" in out


def test_chess_odd_moves_white_wins(capsys):
    game = Chess()
    game.make_move()
    capsys.readouterr()
    game.announce_winner()
    assert "White wins by checkmate!" in capsys.readouterr().out


def test_chess_switch_player_alternates():
    game = Chess()
    game.switch_player()
    assert game.current_player == "Black"
    game.switch_player()
    assert game.current_player == "White"


def test_chess_not_over_at_start():
    assert Chess().is_game_over() is False


def test_checkers_full_game_is_tie(capsys):
    game = Checkers()
    game.play_game()
    out = capsys.readouterr().out
    assert game.move_count == Checkers.MOVE_LIMIT
    assert game.red_pieces == game.black_pieces
    assert "It's a tie!" in out


def test_checkers_capture_on_third_move(capsys):
    game = Checkers()
    game.make_move()
    game.make_move()
    assert game.black_pieces == Checkers.STARTING_PIECES
    game.make_move()
    assert game.black_pieces == game.red_pieces - 1
    assert "Red player jumps and captures a black piece!" in capsys.readouterr().out


def test_checkers_black_captures(capsys):
    game = Checkers()
    game.switch_player()
    game.move_count = 2
    game.make_move()
    assert game.red_pieces == game.black_pieces - 1
    assert "Black player jumps and captures a red piece!" in capsys.readouterr().out


def test_checkers_over_when_pieces_gone(capsys):
    game = Checkers()
    game.red_pieces = 0
    assert game.is_game_over() is True
    game.announce_winner()
    assert "Black wins! All red pieces captured." in capsys.readouterr().out


def test_checkers_initialize_resets():
    game = Checkers()
    game.make_move()
    game.switch_player()
    game.initialize_game()
    assert game.move_count == 0
    assert game.current_player == "Red"
    assert game.red_pieces == Checkers.STARTING_PIECES


def test_main_plays_all(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert ">>> POLYMORPHIC GAME NIGHT <<<" in out
    assert out.count("=== Starting Game Session ===") == 4