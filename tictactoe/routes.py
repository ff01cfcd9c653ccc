from pathlib import Path

from litestar.static_files import create_static_files_router

from tictactoe.api import RpcController, healthcheck
from tictactoe.home.routes import routes as routes_home

ROUTES = [
    *routes_home,
    RpcController,
    healthcheck,
    create_static_files_router(
        path="/static",
        directories=[Path(__file__).parent / "static"],
        name="static-files"
    )
]
