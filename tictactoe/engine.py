"""
Game rules.

Pure functions over Game records: no I/O and no shared state. Every
transition returns a new record and leaves its input untouched.
"""

from dataclasses import replace
from typing import Optional, Sequence

from tictactoe.errors import CellOccupied, GameFinished, InvalidIndex
from tictactoe.models.game import BOARD_SIZE, EMPTY_CELL, Game, Mark, Winner

# Rows, columns, then diagonals. Order decides which line is reported first.
WIN_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def new_game(game_id: str) -> Game:
    """Fresh game: empty board, X to move."""
    return Game(id=game_id)


def next_turn(mark: Mark) -> Mark:
    return mark.other


def check_winner(board: Sequence[str]) -> Optional[Mark]:
    """Return the mark owning the first complete line, or None."""
    for a, b, c in WIN_LINES:
        if board[a] != EMPTY_CELL and board[a] == board[b] == board[c]:
            return Mark(board[a])
    return None


def is_board_full(board: Sequence[str]) -> bool:
    return EMPTY_CELL not in board


def apply_move(game: Game, index: int) -> Game:
    """
    Place the current player's mark on ``index`` and settle the outcome.

    Raises:
        InvalidIndex: index is not an int in 0-8
        GameFinished: the game already has a winner or is drawn
        CellOccupied: the target cell is taken
    """
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_SIZE:
        raise InvalidIndex()
    if game.is_finished:
        raise GameFinished()
    if game.board[index] != EMPTY_CELL:
        raise CellOccupied()

    board = list(game.board)
    board[index] = game.turn.value
    board = tuple(board)

    # Winner first: a winning move on the last free cell is a win, not a draw
    mark = check_winner(board)
    if mark is not None:
        return replace(game, board=board, winner=Winner.for_mark(mark))
    if is_board_full(board):
        return replace(game, board=board, winner=Winner.DRAW)
    return replace(game, board=board, turn=next_turn(game.turn))
