"""Typed request/response schemas for the game RPCs."""

from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from tictactoe.errors import InvalidIndex, InvalidPayload, MissingField
from tictactoe.models.game import BOARD_SIZE, Game, Mark, Winner


# --- Request Schemas ---

class RpcRequest(BaseModel):
    """Base for RPC requests. Unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")


class CreateGameRequest(RpcRequest):
    """create_game takes no arguments."""


class GetGameRequest(RpcRequest):
    """Request to fetch a game's state."""
    game_id: StrictStr


class MakeMoveRequest(RpcRequest):
    """Request to place the current player's mark."""
    game_id: StrictStr
    cell: int = Field(ge=0, le=BOARD_SIZE - 1)

    @field_validator("cell", mode="before")
    @classmethod
    def reject_bool(cls, value):
        # bool is an int subclass; true/false are not cell numbers
        if isinstance(value, bool):
            raise ValueError("cell must be an integer")
        return value


# --- Response Schemas ---

class GameRecord(BaseModel):
    """Full game record as seen by clients."""
    game_id: str
    board: str
    turn: Mark
    winner: Winner

    @classmethod
    def from_game(cls, game: Game) -> "GameRecord":
        return cls.model_validate(game.to_dict())


class CreateGameResponse(BaseModel):
    ok: bool = True
    game_id: str
    board: str
    turn: Mark

    @classmethod
    def from_game(cls, game: Game) -> "CreateGameResponse":
        return cls(game_id=game.id, board=game.board_string, turn=game.turn)


class MakeMoveResponse(BaseModel):
    ok: bool = True
    board: str
    turn: Mark
    winner: Winner
    game: GameRecord

    @classmethod
    def from_game(cls, game: Game) -> "MakeMoveResponse":
        return cls(
            board=game.board_string,
            turn=game.turn,
            winner=game.winner,
            game=GameRecord.from_game(game),
        )


class GetGameResponse(BaseModel):
    ok: bool = True
    game: GameRecord


# --- Decoding ---

RequestT = TypeVar("RequestT", bound=RpcRequest)


def decode_request(model: Type[RequestT], payload: str) -> RequestT:
    """
    Parse an RPC payload into ``model``.

    An empty payload is treated as an empty object. Validation failures are
    translated into the RPC error taxonomy using the first reported error.
    """
    if not payload or not payload.strip():
        payload = "{}"
    try:
        return model.model_validate_json(payload)
    except ValidationError as exc:
        raise _translate_validation_error(exc) from exc


def _translate_validation_error(exc: ValidationError) -> Exception:
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None

    if error["type"] == "missing" and field:
        return MissingField(field)
    if error["type"] == "extra_forbidden" and field:
        return InvalidPayload(f"unknown field {field}")
    if field == "cell":
        if error["type"] in ("greater_than_equal", "less_than_equal"):
            return InvalidIndex()
        return InvalidIndex("invalid cell index")
    if field:
        return InvalidPayload(f"invalid {field}")
    return InvalidPayload()
