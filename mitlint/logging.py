"""Logger hierarchy for mit-lint.

Library code only asks for loggers through :func:`get_logger`. Handlers are
installed by whatever hosts the engine (a hook runner, or :func:`run_service`)
through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional

_LOGGER_NAME = "mitlint"
CONSOLE_FORMAT = "[mit-lint] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Silent unless a host configures output.
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``mitlint`` or a child logger such as ``mitlint.engine``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Optional[Path] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Send mit-lint records to ``stream`` (stderr by default) and ``log_file``.

    Only warnings are shown unless ``verbose`` is set, in which case the
    per-lint debug records from the engine and config resolution appear too.
    Calling it again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False
    _close_handlers(logger)

    handlers: list[logging.Handler] = [_with_format(logging.StreamHandler(stream), CONSOLE_FORMAT)]
    if log_file is not None:
        handlers.append(_with_format(logging.FileHandler(log_file, encoding="utf-8"), FILE_FORMAT))
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
    return logger


def _with_format(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["configure_logging", "get_logger"]
