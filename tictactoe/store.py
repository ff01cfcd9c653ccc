"""In-memory game store."""

import logging
import threading
from typing import Callable, Dict

from tictactoe.engine import new_game
from tictactoe.errors import NotFound
from tictactoe.models.game import Game, generate_game_id

logger = logging.getLogger("TicTacToe.store")


class GameStore:
    """
    Process-wide mapping of game id -> Game.

    A single lock guards the mapping. Records are immutable, so ``get`` hands
    out the stored object itself and ``update`` swaps in the mutator's result
    as one step.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_game_id):
        self._games: Dict[str, Game] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory

    def create(self) -> Game:
        """Create and register a new game."""
        with self._lock:
            game_id = self._id_factory()
            while game_id in self._games:
                logger.warning(f"Game id collision on {game_id}, drawing another")
                game_id = self._id_factory()
            game = new_game(game_id)
            self._games[game_id] = game
        logger.debug(f"Game created: {game_id}")
        return game

    def get(self, game_id: str) -> Game:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise NotFound(f"game not found: {game_id}")
        return game

    def update(self, game_id: str, mutator: Callable[[Game], Game]) -> Game:
        """
        Apply ``mutator`` to the stored game and store its result.

        Lookup, mutation and write-back happen under the lock. If the mutator
        raises, the stored game is left as it was and the error propagates.
        """
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                raise NotFound(f"game not found: {game_id}")
            updated = mutator(game)
            self._games[game_id] = updated
        return updated

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._games

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
