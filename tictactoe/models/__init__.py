"""Tic-Tac-Toe domain models."""

from tictactoe.models.game import Game, Mark, Winner, EMPTY_CELL, BOARD_SIZE, generate_game_id

__all__ = [
    "Game",
    "Mark",
    "Winner",
    "EMPTY_CELL",
    "BOARD_SIZE",
    "generate_game_id",
]
