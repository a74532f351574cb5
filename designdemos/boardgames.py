"""Board games sharing one fixed sequence of play."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class BoardGame(ABC):
    """A game played by the fixed sequence in play_game().

    Subclasses keep the name of the player to move in ``current_player``.
    """

    current_player: str

    def play_game(self) -> None:
        """Set up, alternate turns until the game ends, then name the winner."""
        print("=== Starting Game Session ===")
        self.initialize_game()
        self.display_board()
        while not self.is_game_over():
            print(f"\n{self.current_player}'s turn:")
            self.show_available_moves()
            self.make_move()
            self.display_board()
            self.switch_player()
        self.announce_winner()
        print("\n=== Game Session Ended ===")

    @abstractmethod
    def initialize_game(self) -> None:
        """Reset the game to its starting position."""

    @abstractmethod
    def display_board(self) -> None:
        """Print the board."""

    @abstractmethod
    def show_available_moves(self) -> None:
        """Print the moves open to the current player."""

    @abstractmethod
    def make_move(self) -> None:
        """Play one move for the current player."""

    @abstractmethod
    def is_game_over(self) -> bool:
        """Whether play has ended."""

    @abstractmethod
    def announce_winner(self) -> None:
        """Print the result."""

    @abstractmethod
    def switch_player(self) -> None:
        """Hand the turn to the other player."""


_CHESS_FILES = "abcdefgh"
_CHESS_RANKS = (
    ("8", "rnbqkbnr"),
    ("7", "pppppppp"),
    ("6", "........"),
    ("5", "........"),
    ("4", "........"),
    ("3", "........"),
    ("2", "PPPPPPPP"),
    ("1", "RNBQKBNR"),
)

_CHECKERS_COLUMNS = "12345678"
_CHECKERS_ROWS = (
    ("A", ".b.b.b.b"),
    ("B", "b.b.b.b."),
    ("C", ".b.b.b.b"),
    ("D", "........"),
    ("E", "........"),
    ("F", "r.r.r.r."),
    ("G", ".r.r.r.r"),
    ("H", "r.r.r.r."),
)


def _render_board(columns: str, rows: tuple[tuple[str, str], ...], legend: str) -> str:
    """Lay out a labelled board, preceded by a blank line."""
    lines = ["", f"  {' '.join(columns)}"]
    lines.extend(f"{label} {' '.join(squares)}" for label, squares in rows)
    lines.append(legend)
    return "\n".join(lines)


class Chess(BoardGame):
    """A short simulated chess game that ends after two moves."""

    MOVE_LIMIT = 2

    def __init__(self) -> None:
        self.current_player = "White"
        self.move_count = 0

    def initialize_game(self) -> None:
        print("Setting up Chess board...")
        print("Placing pieces: King, Queen, Rooks, Bishops, Knights, Pawns")
        self.current_player = "White"
        self.move_count = 0
        print("Chess game initialized! White moves first.")

    def display_board(self) -> None:
        board = _render_board(_CHESS_FILES, _CHESS_RANKS, "(Simplified chess board display)")
        print(board)

    def show_available_moves(self) -> None:
        print("Available Chess moves:")
        if self.current_player == "White":
            print("- Pawn moves: e2-e4, d2-d4, Nf3, etc.")
            print("- Opening moves available")
        else:
            print("- Pawn moves: e7-e5, d7-d5, Nf6, etc.")
            print("- Defensive/attacking moves available")

    def make_move(self) -> None:
        self.move_count += 1
        if self.current_player == "White":
            print("White player makes move: e2-e4 (simulated)")
        else:
            print("Black player makes move: e7-e5 (simulated)")
        print(f"Move {self.move_count} completed.")

    def is_game_over(self) -> bool:
        if self.move_count >= self.MOVE_LIMIT:
            print("Game ending condition reached (checkmate/stalemate)")
            return True
        return False

    def announce_winner(self) -> None:
        print("\n*** CHESS GAME OVER ***")
        if self.move_count % 2 == 0:
            print("Black wins by checkmate!")
        else:
            print("White wins by checkmate!")
        print(f"Total moves played: {self.move_count}")

    def switch_player(self) -> None:
        self.current_player = "Black" if self.current_player == "White" else "White"


class Checkers(BoardGame):
    """A simulated checkers game with a capture every third move."""

    STARTING_PIECES = 12
    MOVE_LIMIT = 8

    def __init__(self) -> None:
        self.current_player = "Red"
        self.move_count = 0
        self.red_pieces = self.STARTING_PIECES
        self.black_pieces = self.STARTING_PIECES

    def initialize_game(self) -> None:
        print("Setting up Checkers board...")
        print("Placing 12 red pieces and 12 black pieces on alternating squares")
        self.current_player = "Red"
        self.move_count = 0
        self.red_pieces = self.STARTING_PIECES
        self.black_pieces = self.STARTING_PIECES
        print("Checkers game initialized! Red moves first.")

    def display_board(self) -> None:
        board = _render_board(
            _CHECKERS_COLUMNS, _CHECKERS_ROWS, "(r=Red pieces, b=Black pieces)"
        )
        print(board)
        print(f"Red pieces: {self.red_pieces}, Black pieces: {self.black_pieces}")

    def show_available_moves(self) -> None:
        print("Available Checkers moves:")
        print("- Forward diagonal moves available")
        print("- Jump moves if enemy pieces are adjacent")

    def make_move(self) -> None:
        self.move_count += 1
        red_to_move = self.current_player == "Red"
        if self.move_count % 3 == 0:
            if red_to_move:
                self.black_pieces -= 1
                print("Red player jumps and captures a black piece!")
            else:
                self.red_pieces -= 1
                print("Black player jumps and captures a red piece!")
        else:
            print(f"{'Red' if red_to_move else 'Black'} player moves diagonally forward")
        print(f"Move {self.move_count} completed.")

    def is_game_over(self) -> bool:
        if self.red_pieces == 0 or self.black_pieces == 0 or self.move_count >= self.MOVE_LIMIT:
            print("Game ending condition reached!")
            return True
        return False

    def announce_winner(self) -> None:
        print("\n*** CHECKERS GAME OVER ***")
        if self.red_pieces == 0:
            print("Black wins! All red pieces captured.")
        elif self.black_pieces == 0:
            print("Red wins! All black pieces captured.")
        elif self.red_pieces > self.black_pieces:
            print("Red wins with more pieces remaining!")
        elif self.black_pieces > self.red_pieces:
            print("Black wins with more pieces remaining!")
        else:
            print("It's a tie!")
        print(f"Final count - Red: {self.red_pieces}, Black: {self.black_pieces}")
        print(f"Total moves played: {self.move_count}")

    def switch_player(self) -> None:
        self.current_player = "Black" if self.current_player == "Red" else "Red"


def main(argv: list[str] | None = None) -> int:
    """Play chess, then checkers, then both again through the common base."""
    print("TEMPLATE METHOD PATTERN - BOARD GAMES DEMO")
    print("==========================================\n")
    print(">>> PLAYING CHESS <<<")
    Chess().play_game()
    print("\n\n>>> PLAYING CHECKERS <<<")
    Checkers().play_game()
    print("\n\n>>> POLYMORPHIC GAME NIGHT <<<")
    games: list[BoardGame] = [Chess(), Checkers()]
    print("Playing multiple games in sequence...")
    for number, game in enumerate(games, start=1):
        print(f"\n--- Game {number} ---")
        game.play_game()
    return 0


if __name__ == "__main__":
    sys.exit(main())