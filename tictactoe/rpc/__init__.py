"""Game RPC layer."""

from tictactoe.rpc.handlers import create_game_rpc, get_game_rpc, make_move_rpc
from tictactoe.rpc.registry import RpcRegistry, register_rpcs

__all__ = ["RpcRegistry", "register_rpcs", "create_game_rpc", "make_move_rpc", "get_game_rpc"]
