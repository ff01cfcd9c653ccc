import asyncio
import json
import warnings

import pytest
from litestar.exceptions import LitestarDeprecationWarning

from tictactoe.main import create_app
from tictactoe.models.game import Winner
from tictactoe.store import GameStore


async def rpc(client, rpc_id: str, payload=None, double_encode: bool = True):
    raw = json.dumps(payload if payload is not None else {})
    body = json.dumps(raw) if double_encode else raw
    return await client.post(
        f"/v2/rpc/{rpc_id}",
        content=body,
        headers={"Content-Type": "application/json"},
    )


def payload_of(resp) -> dict:
    assert resp.status_code == 200, resp.text
    return json.loads(resp.json()["payload"])


@pytest.mark.asyncio
async def test_create_game(client):
    resp = await rpc(client, "create_game")
    assert resp.json()["id"] == "create_game"
    data = payload_of(resp)
    assert data["ok"] is True
    assert data["board"] == "---------"
    assert data["turn"] == "X"


@pytest.mark.asyncio
async def test_create_game_with_empty_body(client):
    resp = await client.post("/v2/rpc/create_game")
    assert payload_of(resp)["ok"] is True


@pytest.mark.asyncio
async def test_full_game_over_http(client):
    game_id = payload_of(await rpc(client, "create_game"))["game_id"]

    data = payload_of(await rpc(client, "make_move", {"game_id": game_id, "cell": 4}))
    assert data["board"] == "----X----"
    assert data["turn"] == "O"

    # Plain (not double-encoded) JSON body is accepted too
    data = payload_of(await rpc(client, "make_move", {"game_id": game_id, "cell": 0}, double_encode=False))
    assert data["board"] == "O---X----"
    assert data["turn"] == "X"

    for cell in (1, 2):
        data = payload_of(await rpc(client, "make_move", {"game_id": game_id, "cell": cell}))
    assert data["winner"] == ""

    data = payload_of(await rpc(client, "make_move", {"game_id": game_id, "cell": 7}))
    assert data["winner"] == Winner.X.value
    assert data["game"] == {"game_id": game_id, "board": "OXO-X--X-", "turn": "X", "winner": "X"}

    resp = await rpc(client, "make_move", {"game_id": game_id, "cell": 3})
    assert resp.status_code == 409
    assert resp.json() == {"ok": False, "error": "game_finished", "message": "game already finished"}

    state = payload_of(await rpc(client, "get_game", {"game_id": game_id}))
    assert state["game"]["board"] == "OXO-X--X-"


@pytest.mark.asyncio
async def test_occupied_cell(client):
    game_id = payload_of(await rpc(client, "create_game"))["game_id"]
    await rpc(client, "make_move", {"game_id": game_id, "cell": 4})
    resp = await rpc(client, "make_move", {"game_id": game_id, "cell": 4})
    assert resp.status_code == 409
    assert resp.json()["error"] == "cell_occupied"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, status, error",
    [
        ({"cell": 1}, 400, "missing_field"),
        ({"game_id": "g-x", "cell": 42}, 400, "invalid_index"),
        ({"game_id": "g-x", "cell": "four"}, 400, "invalid_index"),
        ({"game_id": "g-x", "cell": 1}, 404, "not_found"),
    ],
)
async def test_make_move_errors(client, payload, status, error):
    resp = await rpc(client, "make_move", payload)
    assert resp.status_code == status
    assert resp.json()["ok"] is False
    assert resp.json()["error"] == error


@pytest.mark.asyncio
async def test_invalid_json_body(client):
    resp = await client.post("/v2/rpc/make_move", content="{oops")
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_payload"


@pytest.mark.asyncio
async def test_get_unknown_game(client):
    resp = await rpc(client, "get_game", {"game_id": "g-nope"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


@pytest.mark.asyncio
async def test_unknown_rpc(client):
    resp = await rpc(client, "delete_game")
    assert resp.status_code == 404
    assert resp.json()["error"] == "unknown_rpc"


@pytest.mark.asyncio
async def test_concurrent_requests_for_last_cell(client, store):
    game_id = payload_of(await rpc(client, "create_game"))["game_id"]
    for cell in (0, 1, 2, 4, 3, 5, 7, 6):
        await rpc(client, "make_move", {"game_id": game_id, "cell": cell})

    responses = await asyncio.gather(
        *(rpc(client, "make_move", {"game_id": game_id, "cell": 8}) for _ in range(10))
    )
    statuses = sorted(r.status_code for r in responses)
    assert statuses == [200] + [409] * 9
    assert store.get(game_id).winner is Winner.DRAW


@pytest.mark.asyncio
async def test_healthcheck(client):
    await rpc(client, "create_game")
    resp = await client.get("/healthcheck")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "games": 1}


@pytest.mark.asyncio
async def test_board_page(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "/static/js/board.js" in resp.text

    resp = await client.get("/game/g-abc")
    assert resp.status_code == 200
    assert "g-abc" in resp.text


@pytest.mark.asyncio
async def test_board_script_served(client):
    resp = await client.get("/static/js/board.js")
    assert resp.status_code == 200
    assert "/v2/rpc/" in resp.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, literal",
    [
        ("/game/g-a%5C", '"g-a\\\\"'),
        ("/game/g-%22x", '"g-\\"x"'),
        ("/game/%3Cb%3E", '"\\u003cb\\u003e"'),
    ],
)
async def test_board_page_embeds_game_id_as_js_literal(client, path, literal):
    resp = await client.get(path)
    assert resp.status_code == 200
    assert f"window.INITIAL_GAME_ID = {literal};" in resp.text


@pytest.mark.asyncio
async def test_board_page_without_game_id(client):
    resp = await client.get("/")
    assert 'window.INITIAL_GAME_ID = "";' in resp.text


def test_app_builds_without_deprecated_declarations():
    with warnings.catch_warnings():
        warnings.simplefilter("error", LitestarDeprecationWarning)
        create_app(store=GameStore())
