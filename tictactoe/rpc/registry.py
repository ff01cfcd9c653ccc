"""RPC registration and dispatch."""

import logging
from typing import Callable, Dict, List

from tictactoe.errors import TicTacToeError, UnknownRpc
from tictactoe.rpc.handlers import create_game_rpc, get_game_rpc, make_move_rpc
from tictactoe.store import GameStore
from tictactoe.utils.logging import error_log, format_rpc_context

logger = logging.getLogger("TicTacToe.rpc")

RpcFunction = Callable[[GameStore, str], str]


class RpcRegistry:
    """
    Table of RPC id -> handler.

    Ids are case-insensitive and stored lowercased, matching how the game
    server host normalises RPC names.
    """

    def __init__(self):
        self._rpcs: Dict[str, RpcFunction] = {}

    def register_rpc(self, rpc_id: str, fn: RpcFunction) -> None:
        key = rpc_id.lower()
        if key in self._rpcs:
            raise ValueError(f"RPC already registered: {rpc_id}")
        self._rpcs[key] = fn

    def dispatch(self, rpc_id: str, store: GameStore, payload: str) -> str:
        """Run the handler registered under ``rpc_id``."""
        fn = self._rpcs.get(rpc_id.lower())
        if fn is None:
            raise UnknownRpc(rpc_id)
        try:
            return fn(store, payload)
        except TicTacToeError as e:
            logger.info(f"RPC rejected [{format_rpc_context(rpc_id, error=e.code)}]: {e.message}")
            raise
        except Exception as e:
            error_log(
                "RPC handler failed",
                exc=e,
                rpc_id=rpc_id,
                payload_bytes=len(payload),
            )
            raise

    @property
    def rpc_ids(self) -> List[str]:
        return sorted(self._rpcs)

    def __contains__(self, rpc_id: object) -> bool:
        return isinstance(rpc_id, str) and rpc_id.lower() in self._rpcs


def register_rpcs(registry: RpcRegistry) -> RpcRegistry:
    """Install the game RPCs into ``registry``."""
    logger.info("Loading TicTacToe module...")
    rpcs = {
        "create_game": create_game_rpc,
        "make_move": make_move_rpc,
        "get_game": get_game_rpc,
    }
    for rpc_id, fn in rpcs.items():
        try:
            registry.register_rpc(rpc_id, fn)
        except ValueError as e:
            error_log("Unable to register RPC", exc=e, rpc_id=rpc_id)
            raise
    logger.info(f"TicTacToe RPCs registered: {', '.join(rpcs)}")
    return registry
