from litestar import get
from litestar.params import FromPath
from litestar.response import Template


# Serve the board at root
@get("/", sync_to_thread=False)
def home() -> Template:
    """Board page - create a game and play both sides."""
    return Template(template_name="game/board.html")


@get("/game/{game_id:str}", sync_to_thread=False)
def game_board(game_id: FromPath[str]) -> Template:
    """Board page opened on an existing game."""
    return Template(
        template_name="game/board.html",
        context={"game_id": game_id},
    )


routes = [home, game_board]
