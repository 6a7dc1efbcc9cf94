from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Mapping, Optional

LOGGER_NAME = "OverlayPosition"
PROPAGATE_ENV_VAR = "OVERLAY_POSITION_PROPAGATE_LOGS"
_TRUTHY = {"1", "true", "yes", "on"}
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children."""
    if not suffix:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{suffix}")


def build_rotating_file_handler(
    log_dir: Path,
    filename: str,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a rotating file handler with sane defaults."""
    retention = max(1, retention)
    backup_count = max(0, retention - 1)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / filename
    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_logging(
    debug: bool,
    *,
    log_dir: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> logging.Logger:
    """Set up the package logger for command line use.

    Handlers installed by a previous call are replaced, so calling this twice
    does not duplicate output.
    """
    environ = os.environ if env is None else env
    logger = get_logger()
    logger.setLevel(resolve_log_level(debug))
    logger.propagate = environ.get(PROPAGATE_ENV_VAR, "").strip().lower() in _TRUTHY
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if log_dir is not None:
        logger.addHandler(build_rotating_file_handler(log_dir, "overlay-position.log", formatter=formatter))
    return logger
