"""Named failures surfaced to RPC callers."""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for every error an RPC can return to its caller."""

    code = "error"
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"ok": False, "error": self.code, "message": self.message}


class InvalidPayload(TicTacToeError):
    """Payload could not be decoded into the expected request."""
    code = "invalid_payload"
    default_message = "invalid payload JSON"


class MissingField(TicTacToeError):
    """A required request field is absent."""
    code = "missing_field"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing {field}")


class InvalidIndex(TicTacToeError):
    """Move index is non-numeric or outside 0-8."""
    code = "invalid_index"
    default_message = "cell index out of range"


class NotFound(TicTacToeError):
    code = "not_found"
    status_code = 404
    default_message = "game not found"


class GameFinished(TicTacToeError):
    code = "game_finished"
    status_code = 409
    default_message = "game already finished"


class CellOccupied(TicTacToeError):
    code = "cell_occupied"
    status_code = 409
    default_message = "cell already occupied"


class UnknownRpc(TicTacToeError):
    """No handler is registered under the requested RPC id."""
    code = "unknown_rpc"
    status_code = 404

    def __init__(self, rpc_id: str) -> None:
        self.rpc_id = rpc_id
        super().__init__(f"RPC function not found: {rpc_id}")
