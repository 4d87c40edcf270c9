import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "POOKALAM_LOG_DIR"
DEFAULT_LOG_SUBDIR = Path(".pookalam") / "logs"
ROOT_LOGGER_NAME = "pookalam"
LOG_FILENAME = f"{ROOT_LOGGER_NAME}.log"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5


def _resolve_log_directory() -> Path:
    """Return the directory where log files should be written."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def qualified_name(name: str) -> str:
    """Place ``name`` under the ``pookalam`` logger tree."""

    if name in ("", "__main__", ROOT_LOGGER_NAME):
        return ROOT_LOGGER_NAME
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return name
    return f"{ROOT_LOGGER_NAME}.{name}"


def _configure_root(log_level: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, log_level, logging.INFO))

    if root.handlers:
        # Handlers live on the package root only; module loggers propagate to it.
        return root

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)
    root.propagate = False

    try:
        log_directory = _resolve_log_directory()
    except OSError:
        # Read-only home directories still get console logging.
        return root

    file_handler = RotatingFileHandler(
        log_directory / LOG_FILENAME,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_COUNT,
    )
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the ``pookalam`` tree.

    The first call attaches a stream handler and a rolling ``pookalam.log``
    file handler to the package root; every call refreshes the root level
    from ``$LOG_LEVEL``.
    """

    _configure_root(os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper())
    return logging.getLogger(qualified_name(name))
