"""Host HTTP routes."""

from tictactoe.api.rpc import RpcController, healthcheck

__all__ = ["RpcController", "healthcheck"]
