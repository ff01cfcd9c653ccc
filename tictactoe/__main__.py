"""Run the server with uvicorn: ``python -m tictactoe``."""

from os import getenv

import uvicorn


def main() -> None:
    uvicorn.run(
        "tictactoe.main:app",
        host=getenv("HOST", "0.0.0.0"),
        port=int(getenv("PORT", "7350")),
    )


if __name__ == "__main__":
    main()
