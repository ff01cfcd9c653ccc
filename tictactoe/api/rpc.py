"""HTTP surface for calling game RPCs, shaped like the game server host's API."""

import json
import logging

from litestar import Controller, get, post
from litestar.di import NamedDependency
from litestar.params import FromPath
from litestar.status_codes import HTTP_200_OK
from pydantic import BaseModel

from tictactoe.errors import InvalidPayload
from tictactoe.rpc.registry import RpcRegistry
from tictactoe.store import GameStore

logger = logging.getLogger("TicTacToe.api")


class RpcEnvelope(BaseModel):
    """Host response wrapper: the handler's JSON travels as a string."""
    id: str
    payload: str


def unwrap_payload(body: bytes) -> str:
    """
    Extract the RPC payload text from a request body.

    Clients may send the payload object directly or double-encoded as a JSON
    string (the host's canonical form). Anything that isn't a JSON string is
    passed through for the handler to decode.
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidPayload("payload is not valid UTF-8") from e
    if not text.strip():
        return ""
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError:
        return text
    if isinstance(decoded, str):
        return decoded
    return text


class RpcController(Controller):
    """Dispatches ``POST /v2/rpc/{id}`` to registered RPC handlers."""

    path = "/v2/rpc"
    tags = ["rpc"]

    @post("/{rpc_id:str}", status_code=HTTP_200_OK, sync_to_thread=True)
    def call_rpc(
        self,
        rpc_id: FromPath[str],
        body: bytes,
        store: NamedDependency[GameStore],
        registry: NamedDependency[RpcRegistry],
    ) -> RpcEnvelope:
        """Run an RPC on a worker thread and wrap its result."""
        payload = unwrap_payload(body)
        logger.debug(f"RPC {rpc_id} called ({len(payload)} bytes)")
        result = registry.dispatch(rpc_id, store, payload)
        return RpcEnvelope(id=rpc_id, payload=result)


@get("/healthcheck", sync_to_thread=False)
def healthcheck(store: NamedDependency[GameStore]) -> dict:
    return {"status": "ok", "games": len(store)}
