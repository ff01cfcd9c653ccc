import logging
from os import getenv
from pathlib import Path
from typing import Optional

from litestar import Litestar, Request
from litestar.plugins.jinja import JinjaTemplateEngine
from litestar.datastructures import State
from litestar.di import Provide
from litestar.exceptions import HTTPException
from litestar.response import Response
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR
from litestar.template.config import TemplateConfig

from tictactoe.errors import TicTacToeError
from tictactoe.routes import ROUTES
from tictactoe.rpc.registry import RpcRegistry, register_rpcs
from tictactoe.store import GameStore
from tictactoe.utils.logging import log_request_error

DEBUG = getenv("APP_DEBUG", "false").lower() == "true"

logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger("TicTacToe")

# --- Template config (auto-discovery)
template_dirs = [
    str(p) for p in Path(__file__).parent.glob("**/templates") if p.is_dir()
]

template_config = TemplateConfig(
    directory=template_dirs,
    engine=JinjaTemplateEngine,
)


# --- Dependencies
def provide_store(state: State) -> GameStore:
    return state.store


def provide_registry(state: State) -> RpcRegistry:
    return state.registry


# --- Exception handlers
def handle_rpc_error(request: Request, exc: TicTacToeError) -> Response:
    """Return a named RPC failure to the caller."""
    return Response(
        content=exc.to_dict(),
        status_code=exc.status_code,
        media_type="application/json"
    )


def log_exceptions(request: Request, exc: Exception) -> Response:
    if isinstance(exc, HTTPException):
        # Routing and framework validation errors keep their status
        return Response(
            content={"ok": False, "error": "http_error", "message": exc.detail},
            status_code=exc.status_code,
            media_type="application/json"
        )
    log_request_error(request, exc, message="Unhandled exception occurred")
    return Response(
        content={"ok": False, "error": "internal", "message": "Internal Server Error"},
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        media_type="application/json"
    )


# --- App init
def create_app(store: Optional[GameStore] = None, debug: bool = DEBUG) -> Litestar:
    """
    Build the application around a single game store.

    The store and RPC registry are created once here and handed to request
    handlers through dependency injection.
    """
    store = store if store is not None else GameStore()
    registry = register_rpcs(RpcRegistry())
    logger.info(f"Starting app in {'DEBUG' if debug else 'PRODUCTION'} mode")

    return Litestar(
        route_handlers=ROUTES,
        debug=debug,
        state=State({"store": store, "registry": registry}),
        dependencies={
            "store": Provide(provide_store, sync_to_thread=False),
            "registry": Provide(provide_registry, sync_to_thread=False),
        },
        template_config=template_config,
        exception_handlers={
            Exception: log_exceptions,
            TicTacToeError: handle_rpc_error,
        }
    )


app = create_app()
