"""
RPC handlers.

Each handler takes the game store and the raw payload text and returns the
JSON response text, raising a ``TicTacToeError`` on failure.
"""

import logging

from tictactoe.engine import apply_move
from tictactoe.rpc.schemas import (
    CreateGameRequest,
    CreateGameResponse,
    GameRecord,
    GetGameRequest,
    GetGameResponse,
    MakeMoveRequest,
    MakeMoveResponse,
    decode_request,
)
from tictactoe.store import GameStore
from tictactoe.utils.logging import debug_log

logger = logging.getLogger("TicTacToe.rpc")


def create_game_rpc(store: GameStore, payload: str) -> str:
    """Create a new game and return its id and empty board."""
    decode_request(CreateGameRequest, payload)
    game = store.create()
    logger.info(f"Game created: {game.id}")
    return CreateGameResponse.from_game(game).model_dump_json()


def make_move_rpc(store: GameStore, payload: str) -> str:
    """Place the current player's mark on the requested cell."""
    data = decode_request(MakeMoveRequest, payload)
    game = store.update(data.game_id, lambda current: apply_move(current, data.cell))

    debug_log("Move on %s cell=%d -> %s", game.id, data.cell, game.board_string)
    if game.is_finished:
        logger.info(f"Game {game.id} finished: winner={game.winner.value}")
    return MakeMoveResponse.from_game(game).model_dump_json()


def get_game_rpc(store: GameStore, payload: str) -> str:
    """Return the full record of a game."""
    data = decode_request(GetGameRequest, payload)
    game = store.get(data.game_id)
    return GetGameResponse(game=GameRecord.from_game(game)).model_dump_json()
