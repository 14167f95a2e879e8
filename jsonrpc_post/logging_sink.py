"""Request lifecycle logging.

Clients log through ``log()``. A per-client logger wins when it has a method
for the level; otherwise the process-wide default is used. The default starts
as the loguru logger, which stays silent until the application calls
``logger.enable("jsonrpc_post")``. Logging never changes the outcome of a call.
"""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger as _loguru_logger

_LEVEL_ALIASES = {"warn": "warning", "warning": "warn"}

_default_logger: Any = _loguru_logger


def default_logger() -> Any:
    return _default_logger


def set_default_logger(logger: Any) -> None:
    """Replace the process-wide default logger. Pass None to disable it.

    Meant to be called once at startup.
    """
    global _default_logger
    _default_logger = logger


def _level_method(logger: Any, level: str) -> Callable[[str], Any] | None:
    if logger is None:
        return None
    method = getattr(logger, level, None)
    if callable(method):
        return method
    alias = _LEVEL_ALIASES.get(level)
    if alias:
        method = getattr(logger, alias, None)
        if callable(method):
            return method
    return None


def log(level: str, message: str, logger: Any = None) -> None:
    """Send ``message`` at ``level`` (debug, info, warn, error) to the first capable logger."""
    level = str(level).lower()
    method = _level_method(logger, level) or _level_method(_default_logger, level)
    if method is None:
        return
    try:
        method(message)
    except Exception:
        pass
