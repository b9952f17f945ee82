"""Logging wrapper used by every client component."""

from __future__ import annotations

import logging
from typing import Any, Literal, Protocol

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

DEFAULT_LOGGER_NAME = "docker_engine_client"

_LEVEL_NUMBERS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_DUCK_METHODS: dict[int, str] = {
    TRACE_LEVEL: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
}


class LoggerProtocol(Protocol):
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class BoundLogger:
    """Filters messages by a client-side level before handing them to a logger.

    The wrapped object is normally a ``logging.Logger``; any object exposing
    ``debug``/``info``/``warn``/``error`` methods works too.
    """

    def __init__(
        self,
        logger: Any | None = None,
        *,
        level: LogLevel = "info",
    ) -> None:
        self._logger = logger or _default_logger()
        self._level = level

    @property
    def level(self) -> LogLevel:
        return self._level

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log("trace", msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log("debug", msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log("info", msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log("warn", msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log("error", msg, *args, **kwargs)

    def log(self, level: LogLevel, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.is_enabled(level):
            self._emit(_LEVEL_NUMBERS[level], msg, *args, **kwargs)

    def is_enabled(self, level: LogLevel) -> bool:
        return _LEVEL_NUMBERS[level] >= _LEVEL_NUMBERS[self._level]

    def child(self, name: str) -> "BoundLogger":
        """Create a child logger anchored to the same Python logger."""
        if isinstance(self._logger, logging.Logger):
            base = self._logger.getChild(name)
        else:
            base = self._logger
        return BoundLogger(base, level=self._level)

    def _emit(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        try:
            if isinstance(self._logger, logging.Logger):
                self._logger.log(level, msg, *args, **kwargs)
                return
            handler = getattr(self._logger, _DUCK_METHODS[level], None)
            if handler is None and level == logging.WARNING:
                handler = getattr(self._logger, "warning", None)
            if handler:
                handler(msg, *args, **kwargs)
        except Exception:
            # Logging must never break a request
            pass


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(TRACE_LEVEL)
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "DEFAULT_LOGGER_NAME", "LogLevel", "LoggerProtocol", "create_logger"]
