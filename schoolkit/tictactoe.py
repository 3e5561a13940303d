"""Two-player tic-tac-toe on a three by three board."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

WINNING_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Player(Enum):
    """A player, valued by the marker placed on the board."""

    ONE = "O"
    TWO = "X"


class Outcome(Enum):
    """How a finished game ended, with its title and message."""

    PLAYER1 = ("Player 1 has won!", "Congratulations to player 1 for winning.")
    PLAYER2 = ("Player 2 has won!", "Congratulations to player 2 for winning.")
    TIE = ("It is a tie!", "Nobody has won. Please try better next time.")

    def __init__(self, title: str, message: str) -> None:
        self.title = title
        self.message = message


def has_won(cells: Sequence[bool]) -> bool:
    """Return whether the owned tiles (nine booleans) complete a line."""
    if len(cells) != 9:
        raise ValueError("a board has exactly nine tiles")
    return any(all(cells[tile] for tile in line) for line in WINNING_LINES)


def _empty_board() -> list[Player | None]:
    return [None] * 9


@dataclass
class Game:
    """State of one game; tiles are numbered 0 to 8 row by row."""

    board: list[Player | None] = field(default_factory=_empty_board)
    moves: int = 0
    outcome: Outcome | None = None

    @property
    def in_game(self) -> bool:
        return self.outcome is None

    @property
    def current_player(self) -> Player:
        return Player.ONE if self.moves % 2 == 0 else Player.TWO

    def cells(self, player: Player) -> tuple[bool, ...]:
        """Return which tiles ``player`` owns."""
        return tuple(owner is player for owner in self.board)

    def play(self, tile: int) -> Outcome | None:
        """Place the current player's marker; return the outcome once decided."""
        if not self.in_game:
            raise RuntimeError("the game is over; reset it to play again")
        if not 0 <= tile < 9:
            raise ValueError(f"tile must be between 0 and 8, got {tile}")
        if self.board[tile] is not None:
            raise ValueError(f"tile {tile} is already taken")
        self.board[tile] = self.current_player
        self.moves += 1
        if has_won(self.cells(Player.ONE)):
            self.outcome = Outcome.PLAYER1
        elif has_won(self.cells(Player.TWO)):
            self.outcome = Outcome.PLAYER2
        elif self.moves == 9:
            self.outcome = Outcome.TIE
        return self.outcome

    def reset(self) -> None:
        """Clear the board and start a new game."""
        self.board = _empty_board()
        self.moves = 0
        self.outcome = None

    def render(self) -> str:
        """Return the board with markers, free tiles shown by number 1-9."""
        labels = [
            owner.value if owner else str(number)
            for number, owner in enumerate(self.board, start=1)
        ]
        rows = (" | ".join(labels[start:start + 3]) for start in (0, 3, 6))
        return "\n---------\n".join(rows)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tictactoe", description=__doc__)
    parser.parse_args(argv)

    game = Game()
    while game.outcome is None:
        print(game.render())
        player = game.current_player
        number = 1 if player is Player.ONE else 2
        try:
            text = input(f"Player {number} ({player.value}), choose a tile 1-9: ")
        except EOFError:
            print()
            return 1
        try:
            game.play(int(text) - 1)
        except ValueError:
            print("Choose a free tile from 1 to 9.")
    print(game.render())
    print(game.outcome.title)
    print(game.outcome.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())