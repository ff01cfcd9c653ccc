"""Logging helpers for RPC dispatch."""

import logging
import traceback
from os import getenv
from typing import Any, Optional

DEBUG = getenv("APP_DEBUG", "false").lower() == "true"

logger = logging.getLogger("TicTacToe")


def debug_log(message: str, *args) -> None:
    """Log ``message % args`` at DEBUG, only when APP_DEBUG is enabled."""
    if DEBUG:
        logger.debug(message, *args)


def format_rpc_context(rpc_id: Optional[str] = None, **extra: Any) -> str:
    """Render ``rpc=make_move key=value ...``, skipping unset values."""
    fields = {"rpc": rpc_id, **extra}
    return " ".join(f"{k}={v}" for k, v in fields.items() if v is not None)


def error_log(
    message: str,
    exc: Optional[BaseException] = None,
    rpc_id: Optional[str] = None,
    **extra: Any,
) -> None:
    """
    Log a failed RPC or request.

    The line reads ``<message> [rpc=... key=value] | <ExcType>: <exc>``. The
    traceback goes through ``exc_info``, and is also inlined when APP_DEBUG is set.
    """
    line = message
    context = format_rpc_context(rpc_id, **extra)
    if context:
        line += f" [{context}]"
    if exc is not None:
        line += f" | {type(exc).__name__}: {exc}"
        if DEBUG:
            line += "\n" + "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(line, exc_info=exc)


def log_request_error(request: Any, exc: BaseException, message: str = "Unhandled exception") -> None:
    """Log an exception escaping a request, tagged with its method and path."""
    path_params = getattr(request, "path_params", None) or {}
    url = getattr(request, "url", None)
    error_log(
        message,
        exc=exc,
        rpc_id=path_params.get("rpc_id"),
        method=getattr(request, "method", None),
        path=getattr(url, "path", None),
    )
